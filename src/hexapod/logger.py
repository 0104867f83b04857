"""
This module provides logging functionality for the Hexapod application.
"""

import logging
from pathlib import Path

from hexapod.constants import LOGS_FOLDER
from hexapod.singleton import Singleton

HEXAPOD = 'Hexapod'


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self):
        """Initialize the logger with file and stream handlers."""
        Path(LOGS_FOLDER).mkdir(parents=True, exist_ok=True)

        # create file handler which logs even debug messages
        self.logging_file_handler = logging.FileHandler(Path(LOGS_FOLDER) / (HEXAPOD + '.log'))

        # console output garbles the curses screen, so it is opt-in
        self.logging_stream_handler = logging.StreamHandler()

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler.setFormatter(formatter)

        self._loggers = []
        self._level = logging.INFO

    def setup_logger(self, logger_name=None, enable_stream_handler=False):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Whether to add the stream handler for console output. Defaults to False.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = HEXAPOD
        else:
            logger_name = HEXAPOD + ' ' + logger_name

        logger = logging.getLogger(f"{logger_name:<24}")

        logger.setLevel(self._level)

        # add the handlers to logger
        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        if logger not in self._loggers:
            self._loggers.append(logger)

        return logger

    def set_level(self, level):
        """Change the level of every logger handed out so far, and of later ones.

        Args:
            level (int | str): A logging level such as ``logging.DEBUG`` or ``'DEBUG'``.
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown logging level: {level}")

        self._level = level
        for logger in self._loggers:
            logger.setLevel(level)
