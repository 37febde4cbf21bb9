from enum import Enum
import logging
import dataclasses as dt

from typing import Iterable, Iterator, Optional

_logger = logging.getLogger(__name__)

# --- Errors ----------------------------------------------------------------- #


class InvalidToken(ValueError):
    """
    Raised when a token carries a flag prefix but no key after it.

    Attributes:
        token: The offending raw token.
    """

    token: str

    def __init__(self, token: str):
        super().__init__(f"Invalid argument '{token}'")
        self.token = token


# --- Records ---------------------------------------------------------------- #


class ArgumentKind(Enum):
    """
    Enum representing the kind of a flag token, derived from its prefix.
    """

    SHORT = 0
    LONG = 1
    WINDOWS_SWITCH = 2

    @property
    def prefix(self) -> str:
        """Returns the prefix characters of this kind of flag."""
        if self is ArgumentKind.LONG:
            return "--"
        elif self is ArgumentKind.SHORT:
            return "-"
        return "/"


@dt.dataclass(frozen=True)
class ParsedArgument:
    """
    Represents one parsed command-line flag.

    Attributes:
        kind: The kind of flag (short, long or windows switch).
        key: The flag name without its prefix (e.g., "file" for "--file").
        value: The value given with "=" or as the following token, if any.
        hadExplicitValue: True if a value was supplied, even an empty one.
    """

    kind: ArgumentKind
    key: str
    value: Optional[str] = None
    hadExplicitValue: bool = False

    def __post_init__(self):
        if len(self.key) == 0:
            raise ValueError("Argument key must not be empty")
        if self.hadExplicitValue != (self.value is not None):
            raise ValueError(
                f"Argument '{self.key}' must have a value if and only if hadExplicitValue is set"
            )

    def token(self) -> str:
        """Returns the canonical single-token form of the argument."""
        if self.hadExplicitValue:
            return f"{self.kind.prefix}{self.key}={self.value}"
        return f"{self.kind.prefix}{self.key}"


# --- Classify --------------------------------------------------------------- #


def isFlag(token: str, windows: bool = False) -> bool:
    """Checks if the token starts with a recognized flag prefix."""
    if token.startswith("-"):
        return True
    return windows and token.startswith("/")


def classify(token: str, windows: bool = False) -> Optional[ArgumentKind]:
    """
    Classifies a raw token by its prefix.

    Args:
        token: The raw command-line token.
        windows: Whether "/switch" tokens are recognized.

    Returns:
        The kind of flag, or None if the token is a plain operand.

    Raises:
        InvalidToken: If the token is nothing but a prefix ("-", "--", "/").
    """
    if token.startswith("--"):
        if len(token) <= 2:
            raise InvalidToken(token)
        return ArgumentKind.LONG
    elif token.startswith("-"):
        if len(token) <= 1:
            raise InvalidToken(token)
        return ArgumentKind.SHORT
    elif windows and token.startswith("/"):
        if len(token) <= 1:
            raise InvalidToken(token)
        return ArgumentKind.WINDOWS_SWITCH
    return None


def splitKeyValue(token: str) -> tuple[str, Optional[str]]:
    """
    Splits a "key=value" token on its first "=".

    The value may itself contain "=" and may be empty. A token without "="
    has no value.
    """
    key, sep, value = token.partition("=")
    if not sep:
        return token, None
    return key, value


def _stripKey(key: str, kind: ArgumentKind, token: str) -> str:
    key = key[len(kind.prefix) :]
    if len(key) == 0:
        raise InvalidToken(token)
    return key


# --- Parse ------------------------------------------------------------------ #


def parse(tokens: Iterable[str], windows: bool = False) -> Iterator[ParsedArgument]:
    """
    Lazily parses raw command-line tokens into flag records.

    A flag takes its value either inline ("-k=v") or from the following
    token when that token is not itself a flag ("-k v"); otherwise it has
    no value. Tokens that are neither flags nor values are skipped.

    Args:
        tokens: The arguments, without the program name.
        windows: Whether "/switch" tokens are recognized.

    Raises:
        InvalidToken: When the scan reaches a token with an empty key.
    """
    stack = list(tokens)
    i = 0
    while i < len(stack):
        tok = stack[i]
        kind = classify(tok, windows)

        if kind is None:
            _logger.debug(f"Skipping operand '{tok}'")
            i += 1
            continue

        if "=" in tok:
            key, value = splitKeyValue(tok)
            yield ParsedArgument(kind, _stripKey(key, kind, tok), value, True)
            i += 1
        elif i + 1 < len(stack) and not isFlag(stack[i + 1], windows):
            yield ParsedArgument(kind, _stripKey(tok, kind, tok), stack[i + 1], True)
            i += 2
        else:
            yield ParsedArgument(kind, _stripKey(tok, kind, tok))
            i += 1


def parseAll(tokens: Iterable[str], windows: bool = False) -> list[ParsedArgument]:
    """Parses every token up front, failing as a whole on the first invalid one."""
    res = list(parse(tokens, windows))
    _logger.debug(f"Parsed {len(res)} argument(s)")
    return res


def unparse(args: Iterable[ParsedArgument]) -> list[str]:
    """Rebuilds one raw token per parsed argument."""
    return [arg.token() for arg in args]
