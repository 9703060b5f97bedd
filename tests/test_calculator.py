"""Tests for the Calculator facade."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from chaincalc import Calculator, DivideByZero, HistoryChain, Operation


def test_build_returns_fresh_calculator():
    calc = Calculator.build()
    assert calc.result == 0
    assert calc.history.depth == 0
    assert Calculator.build().history is not calc.history


def test_named_operations():
    calc = Calculator.build()
    assert calc.add(1) == 1
    assert calc.add(2) == 3
    assert calc.sub(1) == 2
    assert calc.multi(8) == 16
    assert calc.devi(4) == 4
    assert calc.multi(4) == 16
    assert calc.result == 16
    assert [s.operation for s in calc.history.steps()] == [
        Operation.ADD, Operation.ADD, Operation.SUBTRACT,
        Operation.MULTIPLY, Operation.DIVIDE, Operation.MULTIPLY,
    ]


def test_demo_sequence():
    calc = Calculator.build()
    results = [
        calc.add(1), calc.add(2), calc.sub(1), calc.multi(8), calc.devi(4),
        calc.multi(4), calc.redo(),
        calc.undo(), calc.undo(), calc.undo(), calc.undo(),
        calc.undo(), calc.undo(), calc.undo(), calc.undo(),
        calc.redo(),
    ]
    assert results == [1, 3, 2, 16, 4, 16, 64, 16, 4, 16, 2, 3, 1, 0, 0, 0]


def test_devi_by_zero():
    calc = Calculator.build()
    calc.add(10)
    with pytest.raises(DivideByZero):
        calc.devi(0)
    assert calc.result == 10
    assert calc.history.depth == 1
    assert calc.undo() == 0


def test_calculators_are_isolated():
    a = Calculator.build()
    b = Calculator.build()
    a.add(3)
    b.multi(9)
    assert a.result == 3
    assert b.result == 0
    a.undo()
    assert b.history.depth == 1


def test_wraps_given_chain():
    chain = HistoryChain()
    chain.apply(Operation.ADD, 7)
    calc = Calculator(chain)
    assert calc.result == 7
    assert calc.redo() == 14
    assert chain.depth == 2


def test_default_history_is_created():
    calc = Calculator(None)
    assert isinstance(calc.history, HistoryChain)
    assert calc.add(2) == 2
