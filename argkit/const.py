import os

from . import utils

VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "argkit"
DESCRIPTION = "A command-line argument parser for POSIX flags and Windows switches"

EXIT_SUCCESS = 0
EXIT_FAILURE = -1

ENV_WINDOWS = "ARGKIT_WINDOWS"
ENV_EXTRA_ARGS = "ARGKIT_EXTRA_ARGS"
ENV_LOG_FILE = "ARGKIT_LOG_FILE"


def windowsMode() -> bool:
    """Returns whether "/switch" tokens should be parsed, honoring ARGKIT_WINDOWS."""
    env = os.environ.get(ENV_WINDOWS, None)
    if env is None or env == "":
        return os.name == "nt"

    res = utils.parseBool(env)
    if res is None:
        raise RuntimeError(f"Invalid value for {ENV_WINDOWS}: '{env}'")
    return res


def extraArgs() -> list[str]:
    extra = os.environ.get(ENV_EXTRA_ARGS, None)
    return extra.split() if extra else []


def logFile() -> str | None:
    return os.environ.get(ENV_LOG_FILE, None) or None
