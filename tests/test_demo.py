import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.balancedtree.demo import run_demo, VALUES, DATA
from src.balancedtree.diagnostics.invariants import validate
from src.balancedtree.diagnostics.plotting import plot_height_profile

def test_demo_builds_valid_tree():
    tree = run_demo(verbose=False)

    assert tree.get_all_keys() == sorted(VALUES)
    assert validate(tree.root, dict(zip(VALUES, DATA))) == []

def test_demo_prints_sorted_pairs(capsys):
    run_demo(verbose=True)

    out = capsys.readouterr().out
    assert "Valores ordenados: | a: alpha | b: bravo" in out
    assert "l: lima |" in out
    assert "+---" in out

def test_plot_height_profile_saves_png(tmp_path):
    target = tmp_path / "graficos" / "altura.png"

    saved = plot_height_profile([1, 10, 100], [1, 4, 8], filepath=str(target))

    assert saved == str(target)
    assert target.exists()
    assert target.stat().st_size > 0
