"""Entry point for chaincalc.

Usage:
    chaincalc                 # interactive prompt (reads commands from stdin)
    chaincalc --demo          # replay the built-in demonstration sequence
    chaincalc --debug         # log every chain mutation
"""
import sys
import logging
import argparse

logger = logging.getLogger(__name__)

# (method name, operand) pairs replayed by --demo
DEMO_SEQUENCE = [
    ("add", 1),
    ("add", 2),
    ("sub", 1),
    ("multi", 8),
    ("devi", 4),
    ("multi", 4),
    ("redo", None),
    ("undo", None),
    ("undo", None),
    ("undo", None),
    ("undo", None),
    ("undo", None),
    ("undo", None),
    ("undo", None),
    ("undo", None),
    ("redo", None),
]


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def format_steps(steps) -> str:
    if not steps:
        return "(no steps)"
    lines = []
    for i, step in enumerate(steps, 1):
        lines.append(f"{i:>3}. {step.operation.symbol} {step.operand} = {step.result}")
    return "\n".join(lines)


def run_demo(out=None):
    """Replay DEMO_SEQUENCE on a fresh calculator, printing each result."""
    from chaincalc.calculator import Calculator

    out = out if out is not None else sys.stdout
    calc = Calculator.build()
    for name, operand in DEMO_SEQUENCE:
        method = getattr(calc, name)
        result = method() if operand is None else method(operand)
        print(result, file=out)
    return calc


def run_interactive(config, stdin=None, out=None):
    """Read commands line by line until quit/EOF. Returns the calculator used."""
    from chaincalc.calculator import Calculator
    from chaincalc.commands import parse_command, CommandError, HELP_TEXT
    from chaincalc.history import DivideByZero

    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    interactive = stdin.isatty()
    calc = Calculator.build()

    while True:
        if interactive:
            out.write(config.prompt)
            out.flush()
        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue

        try:
            command = parse_command(line)
        except CommandError as e:
            logger.debug("Rejected input %r: %s", line, e)
            print(f"error: {e}", file=out)
            continue

        if command.name == "quit":
            break
        elif command.name == "help":
            print(HELP_TEXT, file=out)
            continue
        elif command.name == "history":
            print(format_steps(calc.history.steps()), file=out)
            continue
        elif command.name == "undo":
            result = calc.undo()
        elif command.name == "redo":
            result = calc.redo()
        elif command.name == "result":
            result = calc.result
        else:
            try:
                result = calc.apply(command.operation, command.operand)
            except DivideByZero as e:
                logger.debug("Divide by zero at result %d", calc.result)
                print(f"error: {e}", file=out)
                continue
            except ValueError as e:
                print(f"error: {e}", file=out)
                continue

        print(result, file=out)
        if config.show_history:
            print(format_steps(calc.history.steps()), file=out)

    return calc


def main(argv=None):
    from chaincalc.config import Config

    parser = argparse.ArgumentParser(description="Integer calculator with undo/redo")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--demo", action="store_true",
                       help="Replay the demonstration sequence and exit")
    parser.add_argument("--config", metavar="PATH",
                        help="Read settings from PATH instead of ~/.config/chaincalc/config.json")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    config = Config(args.config)
    setup_logging(args.debug or config.debug_logging)

    if args.demo:
        run_demo()
    else:
        logger.debug("Starting interactive prompt (config: %s)", config.path)
        run_interactive(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
