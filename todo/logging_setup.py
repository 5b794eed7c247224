import logging
import sys
from pathlib import Path

_HANDLER_TAG = "_todo_handler"


def setup_logging(
    *,
    log_dir: str | Path,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure the `todo` logger with:
    - stderr handler: warnings and up, so normal output stays clean
    - file handler: full history in <log_dir>/todo.log

    Safe to call more than once; handlers from an earlier call are replaced.
    Falls back to stderr only when the log file cannot be opened.
    """
    log = logging.getLogger("todo")
    log.setLevel(logging.DEBUG)

    for h in list(log.handlers):
        if getattr(h, _HANDLER_TAG, False):
            log.removeHandler(h)
            h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    setattr(ch, _HANDLER_TAG, True)
    log.addHandler(ch)

    log_dir = Path(log_dir)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "todo.log"), encoding="utf-8")
    except OSError as e:
        log.warning("file logging disabled: %s", e)
        return
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    setattr(fh, _HANDLER_TAG, True)
    log.addHandler(fh)
