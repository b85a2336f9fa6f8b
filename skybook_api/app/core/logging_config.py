"""
Process-wide logging for the API.

``setup_logging`` is driven by three settings: ``LOG_LEVEL``,
``LOG_FILE`` and ``DEBUG``.  ``DEBUG`` overrides the level and also lets
the HTTP client libraries log each request; otherwise they are held at
WARNING so the mail provider calls do not flood the log.

``create_app`` calls this on every construction.  Levels are applied
each time, handlers only once: the console and file handlers are named
and an already attached handler of the same name is left in place.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "skybook-console"
FILE_HANDLER = "skybook-file"

# Libraries that log every outbound request at INFO.
CHATTY_LOGGERS = ("httpx", "httpcore", "urllib3")


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Level name such as ``"INFO"``; unknown names fall back to INFO.
    logfile : Optional[str]
        Also write records to this file.  Missing parent directories
        are created.
    debug : bool
        Force DEBUG on the root logger and on the HTTP client loggers.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO))
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER):
        console = logging.StreamHandler()
        console.set_name(CONSOLE_HANDLER)
        console.setFormatter(formatter)
        root.addHandler(console)

    if logfile and not _has_handler(root, FILE_HANDLER):
        path = Path(logfile).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
