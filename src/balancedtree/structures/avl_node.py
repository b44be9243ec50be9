from typing import Any, Callable, Optional, Tuple

from src.balancedtree.events.tree_events import TreeEvent, EventType

Observer = Optional[Callable[[TreeEvent], None]]

class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a chave, o valor associado e a altura em cache da subárvore.
    O fator de balanceamento não é armazenado: é derivado das alturas.
    """
    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Altura inicial do nó é 1

    @property
    def balance(self) -> int:
        return get_balance(self)

    def update_height(self):
        self.height = 1 + max(get_height(self.left), get_height(self.right))

    def __repr__(self):
        return f"AVLNode({self.key!r}, h={self.height}, bal={self.balance})"

# --- Métodos Auxiliares ---

def get_height(node: Optional[AVLNode]) -> int:
    if not node:
        return 0
    return node.height

def get_balance(node: Optional[AVLNode]) -> int:
    """Fator de balanceamento: altura(direita) - altura(esquerda)."""
    if not node:
        return 0
    return get_height(node.right) - get_height(node.left)

def count_nodes(node: Optional[AVLNode]) -> int:
    if not node:
        return 0
    return 1 + count_nodes(node.left) + count_nodes(node.right)

def _notify(observer: Observer, event_type: str, node: AVLNode):
    if observer is not None:
        observer(TreeEvent(event_type, node.key, get_balance(node)))

# --- Inserção, Busca e Travessia ---

def insert(node: Optional[AVLNode], key: str, value: Any, observer: Observer = None) -> AVLNode:
    """
    Insere (ou atualiza) a chave na subárvore e devolve a nova raiz dela.
    O chamador deve religar o retorno no lugar da subárvore antiga.
    """
    # 1. Inserção normal de BST
    if not node:
        leaf = AVLNode(key, value)
        _notify(observer, EventType.INSERT, leaf)
        return leaf

    if key == node.key:
        # Chave duplicada: sobrescreve o valor, topologia não muda
        node.value = value
        _notify(observer, EventType.UPDATE, node)
        return node

    if key < node.key:
        node.left = insert(node.left, key, value, observer)
    else:
        node.right = insert(node.right, key, value, observer)

    # 2. Atualizar altura do nó ancestral (a recursão já corrigiu os filhos)
    node.update_height()

    # 3. Rebalancear se necessário
    return rebalance(node, observer)

def find(node: Optional[AVLNode], key: str) -> Tuple[Optional[Any], bool]:
    """Busca em O(log n). Retorna (valor, encontrado)."""
    current = node
    while current:
        if key == current.key:
            return current.value, True
        elif key < current.key:
            current = current.left
        else:
            current = current.right
    return None, False

def traverse(node: Optional[AVLNode], visit: Callable[[str, Any], None]):
    """Percurso in-order: visita as chaves em ordem crescente."""
    if node:
        traverse(node.left, visit)
        visit(node.key, node.value)
        traverse(node.right, visit)

# --- Rebalanceamento e Rotações ---

def rebalance(node: AVLNode, observer: Observer = None) -> AVLNode:
    """
    Restaura o invariante AVL no nó após uma inserção.
    Uma inserção nunca produz |balance| > 2 em um único nó.
    """
    balance = get_balance(node)

    # Esquerda mais alta
    if balance < -1:
        if get_balance(node.left) <= 0:
            # Caso Left-Left
            return rotate_right(node, observer)
        # Caso Left-Right
        return rotate_left_right(node, observer)

    # Direita mais alta
    if balance > 1:
        if get_balance(node.right) >= 0:
            # Caso Right-Right
            return rotate_left(node, observer)
        # Caso Right-Left
        return rotate_right_left(node, observer)

    return node

def rotate_left(node: AVLNode, observer: Observer = None) -> AVLNode:
    """
    Realiza rotação simples à esquerda.
    O filho direito sobe e vira a raiz da subárvore.
    """
    _notify(observer, EventType.ROTATE_LEFT, node)
    new_root = node.right

    # Rotação
    node.right = new_root.left
    new_root.left = node

    # Atualiza alturas (primeiro o nó que desceu)
    node.update_height()
    new_root.update_height()

    return new_root

def rotate_right(node: AVLNode, observer: Observer = None) -> AVLNode:
    """
    Realiza rotação simples à direita.
    O filho esquerdo sobe e vira a raiz da subárvore.
    """
    _notify(observer, EventType.ROTATE_RIGHT, node)
    new_root = node.left

    node.left = new_root.right
    new_root.right = node

    node.update_height()
    new_root.update_height()

    return new_root

def rotate_left_right(node: AVLNode, observer: Observer = None) -> AVLNode:
    """
    Rotação dupla: esquerda no filho esquerdo, depois direita no nó.
    Usada quando o excesso de altura está à direita do filho esquerdo.
    """
    _notify(observer, EventType.ROTATE_LEFT_RIGHT, node)
    node.left = rotate_left(node.left, observer)
    return rotate_right(node, observer)

def rotate_right_left(node: AVLNode, observer: Observer = None) -> AVLNode:
    """Espelho de rotate_left_right."""
    _notify(observer, EventType.ROTATE_RIGHT_LEFT, node)
    node.right = rotate_right(node.right, observer)
    return rotate_left(node, observer)
