"""History chain — running result plus undo/redo over a backward-linked list of steps."""
import enum
import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class DivideByZero(ZeroDivisionError):
    """Raised when a divide is requested with a zero operand. State is untouched."""


class Operation(enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value


def wrap_int32(value: int) -> int:
    """Fold an int into the signed 32-bit range (two's complement wraparound)."""
    return (value - INT32_MIN) % 2 ** 32 + INT32_MIN


def compute(operation: Operation, left: int, right: int) -> int:
    """Apply one operation with native 32-bit signed semantics.

    Add/subtract/multiply wrap on overflow, divide truncates toward zero.
    """
    if operation is Operation.ADD:
        value = left + right
    elif operation is Operation.SUBTRACT:
        value = left - right
    elif operation is Operation.MULTIPLY:
        value = left * right
    elif operation is Operation.DIVIDE:
        if right == 0:
            raise DivideByZero("division by zero")
        value = abs(left) // abs(right)
        if (left < 0) != (right < 0):
            value = -value
    else:
        raise ValueError(f"unknown operation: {operation!r}")
    return wrap_int32(value)


@dataclass(frozen=True)
class Step:
    operand: int              # value supplied to the operation
    operation: Operation
    result: int               # accumulator value right after this step
    previous: Optional["Step"] = field(default=None, repr=False, compare=False)


class HistoryChain:
    """Accumulator whose entire state is a single "current step" pointer.

    Each apply pushes a new Step on top of the current one. Undo drops the
    current step. Redo does not replay an undone step: it re-applies the
    current step's own operation and operand, so repeated redo compounds.

    All public operations run under one per-instance lock.
    """

    def __init__(self):
        self._current: Optional[Step] = None
        self._depth = 0
        self._lock = threading.Lock()

    def apply(self, operation: Operation, num: int) -> int:
        """Apply ``operation`` with ``num`` to the current result and return the new result."""
        if not isinstance(operation, Operation):
            raise TypeError(f"operation must be an Operation, got {operation!r}")
        _check_operand(num)
        with self._lock:
            return self._push(operation, num)

    def undo(self) -> int:
        """Drop the current step. Returns the restored result (0 once empty)."""
        with self._lock:
            step = self._current
            if step is None:
                logger.debug("Nothing to undo")
                return 0
            self._current = step.previous
            self._depth -= 1
            restored = self._current.result if self._current is not None else 0
            logger.debug("Undo %s %d: %d -> %d", step.operation.symbol, step.operand,
                         step.result, restored)
            return restored

    def redo(self) -> int:
        """Re-apply the current step's operation/operand on top of it (0 when empty)."""
        with self._lock:
            step = self._current
            if step is None:
                logger.debug("Nothing to redo")
                return 0
            return self._push(step.operation, step.operand)

    def current_result(self) -> int:
        with self._lock:
            return self._current.result if self._current is not None else 0

    @property
    def current_step(self) -> Optional[Step]:
        with self._lock:
            return self._current

    @property
    def depth(self) -> int:
        with self._lock:
            return self._depth

    def steps(self) -> List[Step]:
        """Snapshot of the reachable steps, oldest first."""
        with self._lock:
            out = []
            step = self._current
            while step is not None:
                out.append(step)
                step = step.previous
        out.reverse()
        return out

    def __len__(self) -> int:
        return self.depth

    def _push(self, operation: Operation, num: int) -> int:
        # caller holds self._lock
        base = self._current.result if self._current is not None else 0
        try:
            result = compute(operation, base, num)
        except DivideByZero:
            logger.debug("Refused %d %s %d", base, operation.symbol, num)
            raise
        self._current = Step(operand=num, operation=operation, result=result,
                             previous=self._current)
        self._depth += 1
        logger.debug("Apply %d %s %d = %d (depth %d)", base, operation.symbol, num,
                     result, self._depth)
        return result


def _check_operand(num):
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"operand must be an int, got {type(num).__name__}")
    if not INT32_MIN <= num <= INT32_MAX:
        raise ValueError(f"operand {num} outside 32-bit signed range")
