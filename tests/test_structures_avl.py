import sys
import os

# Setup de importação
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.balancedtree.structures.avl_tree import AVLTree
from src.balancedtree.diagnostics.invariants import validate, recursive_height

def build_tree(keys, payloads=None):
    tree = AVLTree()
    payloads = payloads if payloads is not None else keys
    for key, payload in zip(keys, payloads):
        tree.insert(key, payload)
    return tree

def test_empty_tree():
    print("--- Cenário: Árvore vazia ---")
    tree = build_tree([])

    value, found = tree.find("x")
    assert not found, "Árvore vazia não deveria encontrar nada"
    assert value is None
    assert tree.search("x") is None
    assert tree.is_empty()
    assert tree.height == 0
    assert len(tree) == 0

    visited = []
    tree.traverse(lambda key, value: visited.append(key))
    assert visited == [], "Travessia de árvore vazia deve ser no-op"
    print(">> SUCESSO: Árvore vazia se comporta corretamente.")

def test_single_node():
    print("--- Cenário: Um único nó ---")
    tree = build_tree(["a"], ["alpha"])

    assert not tree.is_empty()
    assert tree.root.height == 1
    assert tree.root.balance == 0
    assert tree.find("a") == ("alpha", True)
    assert len(tree) == 1

def test_ascending_insertion_rotates_left():
    print("--- Cenário: Inserção crescente a..e ---")
    keys = ["a", "b", "c", "d", "e"]
    tree = build_tree(keys)

    print(tree.dump())
    # Numa BST simples a raiz seria 'a' e a altura 5
    assert tree.height <= 3, f"Altura {tree.height} deveria ser no máximo 3"
    assert tree.root.key == "b"
    assert tree.get_all_keys() == keys
    assert validate(tree.root) == []

def test_mixed_insertion_is_balanced():
    print("--- Cenário: Inserção embaralhada d..k ---")
    keys = ["d", "b", "g", "c", "e", "a", "h", "f", "i", "j", "l", "k"]
    tree = build_tree(keys)

    problems = validate(tree.root, expected={k: k for k in keys})
    assert problems == [], "\n".join(problems)
    assert tree.get_all_keys() == sorted(keys) == list("abcdefghijkl")

def test_double_rotation_regression():
    print("--- Cenário: Regressão que exige rotação dupla ---")
    keys = ["3", "5", "1", "0", "2", "4", "6", "7", "8"]
    tree = build_tree(keys)

    print(tree.dump())
    problems = validate(tree.root, expected={k: k for k in keys})
    assert problems == [], "\n".join(problems)

def test_duplicate_key_upserts_payload():
    print("--- Cenário: Chave duplicada (upsert) ---")
    tree = build_tree(["d", "d"], ["delta", "dingo"])

    assert tree.find("d") == ("dingo", True), "O segundo valor deve prevalecer"
    assert len(tree) == 1, "Chave repetida não pode criar outro nó"
    assert tree.root.height == 1

def test_upsert_keeps_topology():
    tree = build_tree(["b", "a", "c"])
    root_before = tree.root
    dump_before = tree.dump()

    tree.insert("a", "alpha")

    assert tree.root is root_before
    assert tree.dump() == dump_before
    assert tree.search("a") == "alpha"

def test_search_and_contains():
    tree = build_tree(["m", "c", "x", "a"], ["mike", "charlie", "xray", "alpha"])

    assert tree.search("x") == "xray"
    assert tree.search("z") is None
    assert "c" in tree
    assert "z" not in tree
    assert tree.get_all_values() == ["alpha", "charlie", "mike", "xray"]
    assert tree.items()[0] == ("a", "alpha")

def test_traverse_visits_each_node_once_in_order():
    keys = ["m", "l", "k", "j", "i", "h", "g", "f", "e", "d", "c", "b", "a"]
    tree = build_tree(keys)

    visited = []
    tree.traverse(lambda key, value: visited.append((key, value)))

    assert visited == [(k, k) for k in sorted(keys)]
    assert tree.height == recursive_height(tree.root)

if __name__ == "__main__":
    test_empty_tree()
    test_single_node()
    test_ascending_insertion_rotates_left()
    test_mixed_insertion_is_balanced()
    test_double_rotation_regression()
    test_duplicate_key_upserts_payload()
