import math
from typing import Any, Dict, Optional

import numpy as np

from src.balancedtree.structures.avl_node import AVLNode
from src.balancedtree.diagnostics.invariants import max_height_bound

def node_depths(root: Optional[AVLNode]) -> np.ndarray:
    """
    Profundidade de cada nó (a raiz tem profundidade 1).
    Percurso iterativo com pilha explícita.
    """
    depths = []
    stack = [(root, 1)] if root else []
    while stack:
        node, depth = stack.pop()
        depths.append(depth)
        if node.left:
            stack.append((node.left, depth + 1))
        if node.right:
            stack.append((node.right, depth + 1))
    return np.array(depths, dtype=int)

def depth_histogram(root: Optional[AVLNode]) -> np.ndarray:
    """Quantidade de nós por profundidade (índice 0 sempre vazio)."""
    depths = node_depths(root)
    if depths.size == 0:
        return np.zeros(1, dtype=int)
    return np.bincount(depths)

def height_profile(root: Optional[AVLNode]) -> Dict[str, Any]:
    """
    Resume a forma da árvore para validação empírica do O(log n).

    Returns:
        Dicionário com tamanho, altura, limite AVL, altura ótima
        (árvore perfeitamente cheia) e profundidade média dos nós
    """
    depths = node_depths(root)
    n = int(depths.size)
    if n == 0:
        return {
            'size': 0,
            'height': 0,
            'bound': max_height_bound(0),
            'optimal_height': 0,
            'mean_depth': 0.0,
        }
    return {
        'size': n,
        'height': int(depths.max()),
        'bound': max_height_bound(n),
        'optimal_height': int(math.ceil(math.log2(n + 1))),
        'mean_depth': float(np.mean(depths)),
    }
