import os
from typing import List

import numpy as np
import matplotlib.pyplot as plt

from src.balancedtree.diagnostics.invariants import max_height_bound

DEFAULT_PLOT_PATH = "data/height_profile.png"

def plot_height_profile(sizes: List[int], heights: List[int], filepath: str = DEFAULT_PLOT_PATH) -> str:
    """
    Gera o gráfico de altura observada x limite teórico da AVL.
    Retorna o caminho do arquivo salvo.
    """
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    n = np.array(sizes, dtype=float)
    bound = [max_height_bound(int(s)) for s in sizes]
    optimal = np.ceil(np.log2(n + 1))

    fig = plt.figure(figsize=(10, 6))
    plt.plot(sizes, heights, 'b-o', label='Altura Observada')
    plt.plot(sizes, bound, 'r--', label='Limite AVL 2·log2(n+1.44) - 0.328')
    plt.plot(sizes, optimal, 'g:', label='Altura Ótima ceil(log2(n+1))')
    plt.xscale('log')
    plt.xlabel('Número de Chaves (n)')
    plt.ylabel('Altura')
    plt.title('Validação de Altura: O(log n)')
    plt.legend()
    plt.grid(True)
    plt.savefig(filepath)
    plt.close(fig)
    return filepath
