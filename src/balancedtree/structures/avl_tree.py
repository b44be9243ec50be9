from typing import Any, Callable, List, Optional, Tuple

from src.balancedtree.structures import avl_node
from src.balancedtree.structures.avl_node import AVLNode, Observer, get_height
from src.balancedtree.diagnostics.dump import dump_tree

class AVLTree:
    """
    Árvore AVL de chaves ordenadas (strings) para valores opacos.
    Garante operações de busca e inserção em O(log n).

    Estados: vazia (root is None) ou não vazia. Como não há remoção,
    depois da primeira inserção a árvore nunca volta a ficar vazia.
    """
    def __init__(self, observer: Observer = None):
        self.root: Optional[AVLNode] = None
        # Gancho opcional de instrumentação (ver TreeEventLog)
        self.observer = observer

    def insert(self, key: str, value: Any):
        """Insere um novo nó (ou atualiza o valor) e rebalanceia a árvore automaticamente."""
        self.root = avl_node.insert(self.root, key, value, self.observer)

    def find(self, key: str) -> Tuple[Optional[Any], bool]:
        """Retorna (valor, encontrado)."""
        if self.root is None:
            return None, False
        return avl_node.find(self.root, key)

    def search(self, key: str) -> Optional[Any]:
        """Busca uma chave em O(log n). Retorna o valor ou None."""
        value, _ = self.find(key)
        return value

    def traverse(self, visit: Callable[[str, Any], None]):
        """Chama visit(chave, valor) para cada nó, em ordem crescente de chave."""
        if self.root is None:
            return
        avl_node.traverse(self.root, visit)

    def items(self) -> List[Tuple[str, Any]]:
        pairs: List[Tuple[str, Any]] = []
        self.traverse(lambda key, value: pairs.append((key, value)))
        return pairs

    def get_all_keys(self) -> List[str]:
        return [key for key, _ in self.items()]

    def get_all_values(self) -> List[Any]:
        """Retorna todos os valores (in-order traversal) para debug."""
        return [value for _, value in self.items()]

    def is_empty(self) -> bool:
        return self.root is None

    @property
    def height(self) -> int:
        return get_height(self.root)

    def dump(self) -> str:
        """Estrutura da árvore com o fator de balanceamento de cada nó."""
        return dump_tree(self.root)

    def __len__(self):
        # O(n): percorre a árvore inteira
        return avl_node.count_nodes(self.root)

    def __contains__(self, key):
        _, found = self.find(key)
        return found

    def __repr__(self):
        return f"AVLTree(size={len(self)}, height={self.height})"
