"""Calculator facade — named arithmetic entry points over one owned history chain."""
import logging
from typing import Optional

from chaincalc.history import HistoryChain, Operation

logger = logging.getLogger(__name__)


class Calculator:
    """Integer calculator with undo/redo.

    Use ``Calculator.build()`` to get a fresh instance; every instance owns
    its own HistoryChain, so calculators never share state.
    """

    def __init__(self, history: Optional[HistoryChain] = None):
        self._history = history if history is not None else HistoryChain()

    @classmethod
    def build(cls) -> "Calculator":
        return cls()

    @property
    def history(self) -> HistoryChain:
        return self._history

    @property
    def result(self) -> int:
        return self._history.current_result()

    def apply(self, operation: Operation, num: int) -> int:
        return self._history.apply(operation, num)

    def add(self, num: int) -> int:
        return self.apply(Operation.ADD, num)

    def sub(self, num: int) -> int:
        return self.apply(Operation.SUBTRACT, num)

    def multi(self, num: int) -> int:
        return self.apply(Operation.MULTIPLY, num)

    def devi(self, num: int) -> int:
        """Divide, truncating toward zero. Raises DivideByZero for ``num == 0``."""
        return self.apply(Operation.DIVIDE, num)

    def undo(self) -> int:
        result = self._history.undo()
        logger.debug("Undo -> %d", result)
        return result

    def redo(self) -> int:
        result = self._history.redo()
        logger.debug("Redo -> %d", result)
        return result
