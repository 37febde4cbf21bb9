import sys
import logging

from . import app, cli, const, vt100

from .cli import (
    ArgumentKind,
    InvalidToken,
    ParsedArgument,
    classify,
    isFlag,
    parse,
    parseAll,
    splitKeyValue,
    unparse,
)

__all__ = [
    "ArgumentKind",
    "InvalidToken",
    "ParsedArgument",
    "classify",
    "isFlag",
    "parse",
    "parseAll",
    "splitKeyValue",
    "unparse",
]


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        elif logFile := const.logFile():
            logging.basicConfig(
                level=logging.INFO,
                filename=logFile,
                filemode="w",
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = const.extraArgs() + argv

    if len(argv) == 0:
        app.usage()
        return const.EXIT_FAILURE

    windows = False
    try:
        logger.setup(app.isVerbose(argv))
        windows = const.windowsMode()
        args = cli.parseAll(argv, windows)
        app.dispatch(args)
        return const.EXIT_SUCCESS

    except cli.InvalidToken as e:
        vt100.error(f"invalid argument '{e.token}'")
        app.usage()
        return const.EXIT_FAILURE

    except app.HelpRequested:
        app.printHelp(windows)
        return const.EXIT_SUCCESS

    except RuntimeError as e:
        logging.exception(e)
        vt100.error(str(e))
        app.usage()
        return const.EXIT_FAILURE

    except KeyboardInterrupt:
        print()
        return 1
