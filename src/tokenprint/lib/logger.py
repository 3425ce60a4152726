"""
Formatted and colored logging for tokenprint.

This module defines the `Logger` singleton class. All diagnostics go to
stderr so that stdout carries nothing but the token report.
"""

import logging
import sys
from typing import ClassVar

from colorama import Fore, Style


class Logger:
    """A singleton class for handling formatted and colored logging."""

    _logger: ClassVar[logging.Logger | None] = None

    SUCCESS = 25
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    DEBUG = logging.DEBUG

    _SYMBOLS: ClassVar[dict[int, str]] = {
        SUCCESS: f"{Fore.GREEN}{Style.BRIGHT}[+]{Style.RESET_ALL}",
        INFO: f"{Fore.BLUE}{Style.BRIGHT}[*]{Style.RESET_ALL}",
        WARNING: f"{Fore.YELLOW}{Style.BRIGHT}[!]{Style.RESET_ALL}",
        ERROR: f"{Fore.RED}{Style.BRIGHT}[-]{Style.RESET_ALL}",
        DEBUG: f"{Fore.LIGHTBLACK_EX}{Style.BRIGHT}[>]{Style.RESET_ALL}",
    }

    @classmethod
    def _log(cls, level: int, message: str) -> None:
        """Write a log message based on log level."""

        if cls._logger is None:
            cls.setup(cls.INFO)

        cls._logger.log(level, f"{cls._SYMBOLS[level]} {message}")

    @classmethod
    def setup(cls, log_level: int) -> None:
        """
        Set up the Logger singleton.

        Args:
            log_level (int): The log level to set.
        """

        cls._logger = logging.getLogger("tokenprint")
        cls._logger.setLevel(log_level)
        cls._logger.propagate = False

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        cls._logger.handlers.clear()
        cls._logger.addHandler(handler)

        # Custom SUCCESS level
        logging.addLevelName(cls.SUCCESS, "SUCCESS")

    @classmethod
    def set_level(cls, level: int | str) -> None:
        """
        Set a log level for the singleton.

        Args:
            level (int | str): The log level to set.
        """

        if cls._logger is None:
            cls.setup(level)
            return

        cls._logger.setLevel(level)

    @classmethod
    def success(cls, message: str) -> None:
        """Log a success message."""

        cls._log(cls.SUCCESS, message)

    @classmethod
    def info(cls, message: str) -> None:
        """Log an info message."""

        cls._log(cls.INFO, message)

    @classmethod
    def warning(cls, message: str) -> None:
        """Log a warning message."""

        cls._log(cls.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        """Log an error message."""

        cls._log(cls.ERROR, message)

    @classmethod
    def debug(cls, message: str) -> None:
        """Log a debug message."""

        cls._log(cls.DEBUG, message)
