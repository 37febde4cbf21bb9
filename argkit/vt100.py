import os
import sys


def _enabled(stream) -> bool:
    return "NO_COLOR" not in os.environ and stream.isatty()


RED = "\033[31m"
CYAN = "\033[36m"
WHITE = "\033[37m"
YELLOW = "\033[33m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
RESET = "\033[0m"


def paint(color: str, text: str, stream=None) -> str:
    if not _enabled(stream or sys.stdout):
        return text
    return f"{color}{text}{RESET}"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def title(text: str):
    print(paint(BOLD + WHITE + UNDERLINE, text))


def subtitle(text: str):
    print(f"{paint(BOLD + WHITE, text)}:")


def error(msg: str) -> None:
    print(f"{paint(RED, 'Error:', sys.stderr)} {msg}\n", file=sys.stderr)


def warning(msg: str) -> None:
    print(f"{paint(YELLOW, 'Warning:', sys.stderr)} {msg}\n", file=sys.stderr)
