from __future__ import annotations

import logging
import sys
import warnings
from logging import Formatter, Handler, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, Self, TextIO, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LoggerUtils"]

LevelType: TypeAlias = Literal["NOTSET", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_NAMESPACE: Final[str] = "BallScout"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO

CONSOLE_FORMAT: Final[str] = "%(levelname)s: %(message)s"
FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)-45s %(funcName)-24s %(message)s"
FILE_MAX_BYTES: Final[int] = 2 * 1024 * 1024
FILE_BACKUPS: Final[int] = 2


class LoggerUtils:
    """Process-wide logging setup for the translation engine.

    The first instantiation attaches a console handler (WARNING and above) and, when a file name
    is given, a rotating UTF-8 file handler (DEBUG and above) to the ``BallScout`` logger.
    Later instantiations return the same object and leave the handlers untouched.

    Module loggers are obtained with ``LoggerUtils.get_logger(__name__)`` and live below the
    namespace, so they inherit whatever handlers the entry point configured.
    """

    _instance: ClassVar[Self | None] = None
    _configured: ClassVar[bool] = False

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, filename: str | Path = "", *, use_null_console: bool = False) -> None:
        """Configure the namespace logger once.

        Args:
            filename (str | Path): Path of the log file. Empty disables file logging.
            use_null_console (bool): Attach a NullHandler instead of a console handler.
        """
        if LoggerUtils._configured:
            return

        self.root_logger: logging.Logger = logging.getLogger(LOG_NAMESPACE)
        self.root_logger.setLevel(DEFAULT_LOG_LEVEL)

        # sys.stderr is None under pythonw and some service hosts.
        if use_null_console or sys.stderr is None:
            self._attach(NullHandler())
        else:
            self._attach(self._build_handler(StreamHandler(sys.stderr), logging.WARNING, CONSOLE_FORMAT))

        if str(filename).strip():
            file_handler: Handler | None = self._open_log_file(str(filename))
            if file_handler is not None:
                self._attach(self._build_handler(file_handler, logging.DEBUG, FILE_FORMAT))

        warnings.showwarning = self._log_warning
        LoggerUtils._configured = True

    @staticmethod
    def _build_handler(handler: Handler, level: int, fmt: str) -> Handler:
        handler.setLevel(level)
        handler.setFormatter(Formatter(fmt))
        return handler

    def _attach(self, handler: Handler) -> None:
        if any(type(h) is type(handler) for h in self.root_logger.handlers):
            self.root_logger.warning("%s is already attached.", type(handler).__name__)
            return
        self.root_logger.addHandler(handler)

    def _open_log_file(self, filename: str) -> Handler | None:
        try:
            return RotatingFileHandler(filename, maxBytes=FILE_MAX_BYTES, backupCount=FILE_BACKUPS, encoding="utf-8")
        except OSError as err:
            self.root_logger.error("Cannot open log file '%s', file logging disabled: %s", filename, err)
            return None

    def _log_warning(
        self,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        _ = file, line
        self.root_logger.warning("%s:%d: %s: %s", filename, lineno, category.__name__, message)

    def set_level(self, level: LevelType) -> None:
        """Set the namespace level, falling back to INFO for unknown names."""
        numeric: int | None = logging.getLevelNamesMapping().get(level.upper())
        if numeric is None:
            self.root_logger.setLevel(DEFAULT_LOG_LEVEL)
            self.root_logger.warning("Unknown logging level '%s', using INFO.", level)
            return
        self.root_logger.setLevel(numeric)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Return a logger below the ``BallScout`` namespace.

        Args:
            name (str | None): Logger name, usually ``__name__``. None returns the namespace logger.

        Returns:
            logging.Logger: The logger instance.
        """
        return logging.getLogger(f"{LOG_NAMESPACE}.{name}" if name else LOG_NAMESPACE)
