"""chaincalc — integer accumulator with linear undo/redo history."""
from chaincalc.history import DivideByZero, HistoryChain, Operation, Step
from chaincalc.calculator import Calculator

__all__ = ["Calculator", "DivideByZero", "HistoryChain", "Operation", "Step"]
