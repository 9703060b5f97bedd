"""Command parser — turns one line of prompt input into a Command."""
import re
from dataclasses import dataclass
from typing import Optional

from chaincalc.history import Operation


class CommandError(ValueError):
    """Input line could not be understood."""


@dataclass(frozen=True)
class Command:
    name: str                             # "apply", "undo", "redo", "result", "history", "help", "quit"
    operation: Optional[Operation] = None
    operand: Optional[int] = None


OPERATION_WORDS = {
    "+": Operation.ADD,
    "add": Operation.ADD,
    "-": Operation.SUBTRACT,
    "sub": Operation.SUBTRACT,
    "subtract": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "mul": Operation.MULTIPLY,
    "multi": Operation.MULTIPLY,
    "multiply": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
    "div": Operation.DIVIDE,
    "devi": Operation.DIVIDE,
    "divide": Operation.DIVIDE,
}

KEYWORDS = {
    "undo": "undo",
    "redo": "redo",
    "result": "result",
    "history": "history",
    "help": "help",
    "?": "help",
    "quit": "quit",
    "exit": "quit",
}

_SYMBOL_RE = re.compile(r"^([-+*/])\s*([-+]?\d{1,12})$")
_WORD_RE = re.compile(r"^([a-z]+)\s+([-+]?\d{1,12})$")

HELP_TEXT = """\
Commands:
  + N | add N        add N to the result
  - N | sub N        subtract N
  * N | mul N        multiply by N
  / N | div N        divide by N (truncates toward zero)
  undo               drop the last step
  redo               re-apply the current step's operation
  result             show the current result
  history            list the recorded steps
  quit               leave"""


def parse_command(line: str) -> Command:
    """Parse a prompt line. Raises CommandError for anything unrecognized."""
    text = " ".join(line.strip().lower().split())
    if not text:
        raise CommandError("empty command")

    if text in KEYWORDS:
        return Command(KEYWORDS[text])

    match = _SYMBOL_RE.match(text) or _WORD_RE.match(text)
    if match is None:
        raise CommandError(f"cannot parse {line.strip()!r}")

    word, number = match.groups()
    operation = OPERATION_WORDS.get(word)
    if operation is None:
        raise CommandError(f"unknown operation {word!r}")
    return Command("apply", operation=operation, operand=int(number))
