from typing import List, Optional

from src.balancedtree.structures.avl_node import AVLNode, get_balance

INDENT_WIDTH = 4
BRANCH_MARKER = "+---"

def dump_lines(node: Optional[AVLNode], level: int = 0) -> List[str]:
    """
    Gera a estrutura da subárvore em pré-ordem, uma linha por nó,
    no formato 'chave[fator de balanceamento]'.
    """
    lines: List[str] = []
    _dump_recursive(node, level, lines)
    return lines

def _dump_recursive(node: Optional[AVLNode], level: int, lines: List[str]):
    if not node:
        return
    indent = ""
    if level > 0:
        indent = " " * ((level - 1) * INDENT_WIDTH) + BRANCH_MARKER
    lines.append(f"{indent}{node.key}[{get_balance(node)}]")
    _dump_recursive(node.left, level + 1, lines)
    _dump_recursive(node.right, level + 1, lines)

def dump_tree(node: Optional[AVLNode]) -> str:
    return "\n".join(dump_lines(node))
