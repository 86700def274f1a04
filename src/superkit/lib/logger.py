"""
Console logging for SuperKit.

Every lesson reports what the hardware is doing through the `Logger`
singleton, which prefixes each line with a coloured level symbol.
"""

import logging

from colorama import Fore, Style


class Logger:
    """A singleton class for handling formatted and colored logging."""

    _logger: logging.Logger | None = None

    SUCCESS = 25
    INFO = logging.INFO
    WARNING = logging.WARN
    ERROR = logging.ERROR
    DEBUG = logging.DEBUG

    _SYMBOLS = {
        SUCCESS: f"{Fore.GREEN}{Style.BRIGHT}[+]{Style.RESET_ALL}",
        INFO: f"{Fore.BLUE}{Style.BRIGHT}[*]{Style.RESET_ALL}",
        WARNING: f"{Fore.YELLOW}{Style.BRIGHT}[!]{Style.RESET_ALL}",
        ERROR: f"{Fore.RED}{Style.BRIGHT}[-]{Style.RESET_ALL}",
        DEBUG: f"{Fore.LIGHTBLACK_EX}{Style.BRIGHT}[>]{Style.RESET_ALL}",
    }

    @classmethod
    def _log(cls, level: int, message: str) -> None:
        """Write a log message based on log level."""

        # Lessons may be driven from tests without calling setup() first.
        if cls._logger is None:
            cls.setup(cls.INFO)

        cls._logger.log(level, f"{cls._SYMBOLS[level]} {message}")

    @classmethod
    def set_level(cls, level: int | str) -> None:
        """
        Sets a log level for the singleton.

        Args:
            level (int | str): The log level to set.
        """

        cls._logger.setLevel(level)

    @classmethod
    def setup(cls, log_level: int) -> None:
        """
        Sets up the Logger singleton.

        Args:
            log_level (int): The log level to set.
        """

        cls._logger = logging.getLogger("superkit")
        cls._logger.setLevel(log_level)

        # Add stream handler
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        cls._logger.handlers.clear()
        cls._logger.addHandler(handler)

        # Add custom SUCCESS log level
        logging.addLevelName(cls.SUCCESS, "SUCCESS")

    @classmethod
    def success(cls, message: str) -> None:
        """
        Logs a success message.

        Args:
            message (str): The success message to log.
        """

        cls._log(cls.SUCCESS, message)

    @classmethod
    def info(cls, message: str) -> None:
        """
        Logs an info message.

        Args:
            message (str): The info message to log.
        """

        cls._log(cls.INFO, message)

    @classmethod
    def warning(cls, message: str) -> None:
        """
        Logs a warning message.

        Args:
            message (str): The warning message to log.
        """

        cls._log(cls.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        """
        Logs an error message.

        Args:
            message (str): The error message to log.
        """

        cls._log(cls.ERROR, message)

    @classmethod
    def debug(cls, message: str) -> None:
        """
        Logs a debug message.

        Args:
            message (str): The debug message to log.
        """

        cls._log(cls.DEBUG, message)
