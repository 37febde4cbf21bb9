import sys
import logging
import dataclasses as dt

from typing import Callable, Optional
from . import const, vt100
from .cli import ArgumentKind, ParsedArgument

_logger = logging.getLogger(__name__)

Handler = Callable[[ParsedArgument], None]


@dt.dataclass
class Flag:
    """
    An entry of the application flag table.

    Attributes:
        kind: Which flag convention the entry answers to.
        key: The flag name without prefix.
        description: Shown in the help message.
        handler: Called once for every parsed occurrence of the flag.
    """

    kind: ArgumentKind
    key: str
    description: str
    handler: Handler

    @property
    def name(self) -> str:
        return f"{self.kind.prefix}{self.key}"


flags: list[Flag] = []


def flag(kind: ArgumentKind, key: str, description: str = "") -> Callable:
    """
    Decorator registering a handler in the flag table.

    Args:
        kind: The flag convention (short, long or windows switch).
        key: The flag name without prefix (e.g., "e" for "-e").
        description: A description of the flag.
    """

    def wrap(fn: Handler):
        _logger.info(f"Registering flag '{kind.prefix}{key}'")
        if lookup(kind, key) is not None:
            raise ValueError(f"Flag '{kind.prefix}{key}' is already defined")
        flags.append(Flag(kind, key, description, fn))
        return fn

    return wrap


def lookup(kind: ArgumentKind, key: str) -> Optional[Flag]:
    for f in flags:
        if f.kind == kind and f.key == key:
            return f
    return None


def dispatch(args: list[ParsedArgument]):
    """Runs the handler of every parsed argument, in order."""
    for arg in args:
        f = lookup(arg.kind, arg.key)
        if f is None:
            _logger.info(f"No handler for '{arg.kind.prefix}{arg.key}'")
            vt100.warning(f"Unknown argument '{arg.kind.prefix}{arg.key}'")
            continue
        f.handler(arg)


# --- Usage ------------------------------------------------------------------ #


def usage():
    print(f"usage: {const.ARGV0} (arguments)", file=sys.stderr)


def printHelp(windows: bool):
    vt100.title(const.ARGV0)
    print()

    vt100.subtitle("Usage")
    print(vt100.indent(f"{const.ARGV0} (arguments)"))
    print()

    vt100.subtitle("Description")
    print(vt100.indent(const.DESCRIPTION))
    print()

    vt100.subtitle("Options")
    for f in flags:
        if f.kind == ArgumentKind.WINDOWS_SWITCH and not windows:
            continue
        line = f.name
        if f.description:
            line += f" {f.description}"
        print(vt100.indent(line))
    print()


# --- Flags ------------------------------------------------------------------ #


class HelpRequested(Exception):
    pass


def _example(arg: ParsedArgument):
    name = f"{arg.kind.prefix}{arg.key}"
    if arg.hadExplicitValue:
        print(f"{name} {arg.value}")
    elif arg.kind == ArgumentKind.SHORT:
        print(f"{name} argument with no value, setting to default")
    else:
        print(f"{name} with no value, setting to default")


flag(ArgumentKind.SHORT, "e", "Example flag taking an optional value")(_example)
flag(ArgumentKind.LONG, "example", "Example flag taking an optional value")(_example)


@flag(ArgumentKind.WINDOWS_SWITCH, "?", "Show the defaults")
def _(arg: ParsedArgument):
    if not arg.hadExplicitValue:
        print(f"/{arg.key} argument with no value, setting to default")


@flag(ArgumentKind.WINDOWS_SWITCH, "example", "Example switch requiring a value")
def _(arg: ParsedArgument):
    if arg.hadExplicitValue:
        print(f"/{arg.key} {arg.value}")


def _help(arg: ParsedArgument):
    raise HelpRequested()


flag(ArgumentKind.SHORT, "h", "Show this help message")(_help)
flag(ArgumentKind.LONG, "help", "Show this help message")(_help)


def _version(arg: ParsedArgument):
    print(f"{const.ARGV0} v{const.VERSION_STR}")


flag(ArgumentKind.SHORT, "V", "Show current version")(_version)
flag(ArgumentKind.LONG, "version", "Show current version")(_version)


@flag(ArgumentKind.LONG, "verbose", "Enable verbose logging")
def _(arg: ParsedArgument):
    pass


def isVerbose(argv: list[str]) -> bool:
    """Checks the raw tokens for --verbose, so logging is set up before parsing."""
    return any(t == "--verbose" or t.startswith("--verbose=") for t in argv)

