"""Tests for prompt command parsing."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from chaincalc.commands import parse_command, Command, CommandError
from chaincalc.history import Operation


def test_symbol_forms():
    assert parse_command("+ 5") == Command("apply", Operation.ADD, 5)
    assert parse_command("+5") == Command("apply", Operation.ADD, 5)
    assert parse_command("- 3") == Command("apply", Operation.SUBTRACT, 3)
    assert parse_command("*3") == Command("apply", Operation.MULTIPLY, 3)
    assert parse_command("/ -2") == Command("apply", Operation.DIVIDE, -2)
    assert parse_command("- -4") == Command("apply", Operation.SUBTRACT, -4)


def test_word_forms():
    assert parse_command("add 1").operation is Operation.ADD
    assert parse_command("sub 1").operation is Operation.SUBTRACT
    assert parse_command("multi 8").operation is Operation.MULTIPLY
    assert parse_command("mul 8").operation is Operation.MULTIPLY
    assert parse_command("devi 4").operation is Operation.DIVIDE
    assert parse_command("DIVIDE   4").operand == 4


def test_keywords():
    assert parse_command("undo").name == "undo"
    assert parse_command("  Redo \n").name == "redo"
    assert parse_command("result").name == "result"
    assert parse_command("history").name == "history"
    assert parse_command("?").name == "help"
    assert parse_command("exit").name == "quit"


def test_rejects_garbage():
    for line in ["", "   ", "pow 2", "+", "add", "add x", "5", "% 3", "+ 1.5"]:
        with pytest.raises(CommandError):
            parse_command(line)


def test_command_error_is_value_error():
    with pytest.raises(ValueError):
        parse_command("nonsense")


def test_oversized_operand_is_command_error():
    with pytest.raises(CommandError):
        parse_command("+ " + "9" * 5000)
    with pytest.raises(CommandError):
        parse_command("add " + "1" * 13)
    assert parse_command("+ 99999999999").operand == 99999999999
