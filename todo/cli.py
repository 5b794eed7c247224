import logging
import sys
from pathlib import Path

import fncli

from . import config
from .core.errors import TodoError
from .lib import ansi
from .lib.errors import echo
from .logging_setup import setup_logging

COMMANDS = ("add", "remove", "done", "priority", "list")

logger = logging.getLogger(__name__)

_discovered = False


def _discover() -> None:
    global _discovered
    if not _discovered:
        fncli.autodiscover(Path(__file__).parent, "todo")
        _discovered = True


def run(argv: list[str]) -> int:
    """Run one command and return the process exit code."""
    verbose = config.is_verbose()
    setup_logging(
        log_dir=config.LOG_DIR,
        console_level=logging.INFO if verbose else logging.WARNING,
    )
    ansi.use(ansi.DEFAULT if config.use_color() else ansi.PLAIN)
    _discover()

    if not argv:
        echo("not enough arguments")
        echo(f"usage: todo {{{','.join(COMMANDS)}}} [args]")
        return 1
    try:
        code = fncli.dispatch(["todo", *argv])
    except TodoError as e:
        logger.debug("todo %s failed: %s: %s", argv[0], type(e).__name__, e)
        echo(str(e))
        return e.exit_code
    return code or 0


def main():
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
