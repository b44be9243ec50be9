"""
Verificação independente dos invariantes da Árvore AVL.
Nada aqui confia na altura em cache dos nós: tudo é recalculado recursivamente.

Invariantes verificados:
- Ordem de BST (percurso in-order estritamente crescente)
- Balanceamento AVL (|altura(dir) - altura(esq)| <= 1 em todo nó)
- Altura em cache igual à altura real da subárvore
- Completude (todas as chaves esperadas presentes com o valor mais recente)
"""
import math
from typing import Any, Dict, List, Optional

from src.balancedtree.structures import avl_node
from src.balancedtree.structures.avl_node import AVLNode

def recursive_height(node: Optional[AVLNode]) -> int:
    """Calcula a altura sem usar node.height."""
    if not node:
        return 0
    return 1 + max(recursive_height(node.left), recursive_height(node.right))

def find_height_mismatch(node: Optional[AVLNode]) -> Optional[AVLNode]:
    """Retorna o primeiro nó (pré-ordem) cuja altura em cache está errada, ou None."""
    if not node:
        return None
    if node.height != recursive_height(node):
        return node
    return find_height_mismatch(node.left) or find_height_mismatch(node.right)

def check_balances(node: Optional[AVLNode]) -> List[str]:
    problems: List[str] = []
    _check_balances_recursive(node, problems)
    return problems

def _check_balances_recursive(node: Optional[AVLNode], problems: List[str]):
    if not node:
        return
    rh, lh = recursive_height(node.right), recursive_height(node.left)
    if node.balance != rh - lh:
        problems.append(f"Nó {node.key} tem balance {node.balance}, mas altura direita {rh} e esquerda {lh}")
    if abs(rh - lh) > 1:
        problems.append(f"Nó {node.key} desbalanceado: altura direita {rh}, esquerda {lh}")
    _check_balances_recursive(node.left, problems)
    _check_balances_recursive(node.right, problems)

def is_sorted(node: Optional[AVLNode]) -> bool:
    keys = []
    avl_node.traverse(node, lambda key, _: keys.append(key))
    return all(a < b for a, b in zip(keys, keys[1:]))

def max_height_bound(n: int) -> float:
    """Limite superior de altura de uma AVL com n chaves distintas."""
    return 2.0 * math.log2(n + 1.44) - 0.328

def validate(node: Optional[AVLNode], expected: Optional[Dict[str, Any]] = None) -> List[str]:
    """
    Roda todas as verificações e devolve a lista de problemas (vazia = árvore válida).

    Args:
        node: Raiz da árvore
        expected: {chave: valor} que a árvore deve conter. Se None,
                  a completude não é verificada.
    """
    problems: List[str] = []

    size = avl_node.count_nodes(node)
    height = recursive_height(node)
    bound = max_height_bound(size)
    if height > bound:
        problems.append(f"Altura {height} excede o limite esperado {bound:.3f} para {size} nós")

    problems.extend(check_balances(node))

    if not is_sorted(node):
        problems.append("Percurso in-order não está em ordem crescente")

    mismatch = find_height_mismatch(node)
    if mismatch is not None:
        problems.append(
            f"Altura real {recursive_height(mismatch)} difere da registrada {mismatch.height} no nó {mismatch.key}"
        )

    if expected is not None:
        for key, value in expected.items():
            found_value, found = avl_node.find(node, key)
            if not found:
                problems.append(f"Chave ausente: {key}")
            elif found_value != value:
                problems.append(f"Chave {key} com valor {found_value!r}, esperado {value!r}")
        if size != len(expected):
            problems.append(f"Árvore tem {size} nós, esperado {len(expected)}")

    return problems

def assert_valid(node: Optional[AVLNode], expected: Optional[Dict[str, Any]] = None):
    problems = validate(node, expected)
    if problems:
        raise ValueError("Árvore AVL inválida:\n" + "\n".join(problems))
