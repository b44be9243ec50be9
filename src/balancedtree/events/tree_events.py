from collections import deque, Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

class EventType:
    INSERT = "INSERCAO"
    UPDATE = "ATUALIZACAO"              # Chave repetida (upsert)
    ROTATE_LEFT = "ROTACAO_ESQUERDA"
    ROTATE_RIGHT = "ROTACAO_DIREITA"
    ROTATE_LEFT_RIGHT = "ROTACAO_ESQUERDA_DIREITA"
    ROTATE_RIGHT_LEFT = "ROTACAO_DIREITA_ESQUERDA"

ROTATION_TYPES = (
    EventType.ROTATE_LEFT,
    EventType.ROTATE_RIGHT,
    EventType.ROTATE_LEFT_RIGHT,
    EventType.ROTATE_RIGHT_LEFT,
)

@dataclass
class TreeEvent:
    """
    Representa algo que aconteceu dentro da árvore durante uma inserção.
    Em rotações, 'key' e 'balance' descrevem o nó pivô ANTES da rotação.
    """
    event_type: str
    key: Any
    balance: int = 0

    def __repr__(self):
        return f"[AVL] {self.event_type} -> chave {self.key!r} (bal={self.balance})"

class TreeEventLog:
    """
    Observador que coleta os eventos emitidos pela árvore.
    Mantém apenas os últimos eventos em memória (igual ao log do simulador),
    mas a contagem por tipo é acumulada desde a criação.
    """
    DEFAULT_MAX_SIZE = 50

    def __init__(self, max_size: Optional[int] = DEFAULT_MAX_SIZE, verbose: bool = False):
        self._events = deque(maxlen=max_size)
        self._counter = Counter()
        self.verbose = verbose

    def __call__(self, event: TreeEvent):
        self._events.append(event)
        self._counter[event.event_type] += 1
        if self.verbose:
            print(event)

    def get_all_events(self) -> List[TreeEvent]:
        """Retorna os eventos retidos, do mais antigo para o mais novo."""
        return list(self._events)

    def get_events_by_type(self, event_type: str) -> List[TreeEvent]:
        return [e for e in self._events if e.event_type == event_type]

    def count(self, event_type: str) -> int:
        return self._counter[event_type]

    def rotation_count(self) -> int:
        """Total de rotações simples e duplas já observadas."""
        return sum(self._counter[t] for t in ROTATION_TYPES)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Retorna estatísticas do log.

        Returns:
            Dicionário com o total de eventos por tipo, quantos estão retidos
            e o total de rotações
        """
        return {
            'retained': len(self._events),
            'total': sum(self._counter.values()),
            'by_type': dict(self._counter),
            'rotations': self.rotation_count(),
        }

    def size(self) -> int:
        return len(self._events)

    def clear(self):
        self._events.clear()
        self._counter.clear()
