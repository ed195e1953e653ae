from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

HANDLER_PREFIX = "efi-env"

_FORMAT = logging.Formatter(
    fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)


def _drop_own_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if (h.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(h)
            h.close()


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> Optional[str]:
    """Attach efi-env handlers to the root logger.

    Logs always go to the console (stderr unless *stream* is given). A file
    handler is added only when *log_path* is set; if the file cannot be
    opened the failure is logged and the command keeps going on the console.
    Calling this again replaces the handlers it installed earlier.

    Returns the log file in use, or None.
    """

    root = logging.getLogger()
    root.setLevel(level)
    _drop_own_handlers(root)

    console = logging.StreamHandler(stream)
    console.set_name(f"{HANDLER_PREFIX}.console")
    console.setFormatter(_FORMAT)
    root.addHandler(console)

    if not log_path:
        return None

    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
    except OSError as e:
        logger.warning("Cannot open log file %s (%s); logging to console only", log_path, e)
        return None

    file_handler.set_name(f"{HANDLER_PREFIX}.file")
    file_handler.setFormatter(_FORMAT)
    root.addHandler(file_handler)
    return log_path
