"""
Provide logged base Class.
"""

import contextlib
import logging


class Logged(object):
    """
    Provide logging setup.

    The logger is named after the class.  Without an application
    logging configuration output goes to a NullHandler.
    """

    @contextlib.contextmanager
    def logenv(self, **kwargs):
        """
        Context manager for logging.
        """
        kw = dict(kwargs)
        message = kw.pop("message", None)
        self.setup_logger(**kw)
        try:
            yield self.logger
        finally:
            self.close_logger(message=message)

    # there is no __init__ to call from subclasses, so this is a
    # property
    @property
    def logger_count(self):
        """
        Logger count level.
        """
        try:
            count = self._logger_count
        except AttributeError:
            count = 0
            self._logger_count = count
        return count

    @logger_count.setter
    def logger_count(self, count):
        self._logger_count = count

    def setup_logger(
        self,
        silent=None,
        level=None,
        format=None,
    ):
        """
        Set up logger for output.

        Parameters:
        silent = True - no output.
        level - logging level, or pass level as `silent`

        Use:
        self.logger.debug('My string')
        to log output data
        """
        self.logger_count += 1
        if self.logger_count > 1:
            return
        if silent not in [None, True, False]:
            level = silent
            silent = False
        if silent is None:
            if level is None:
                silent = getattr(self, "logger_silent", True)
            else:
                silent = False
        self.logger_silent = silent
        if level is None:
            level = getattr(self, "logger_level", logging.INFO)
        self.logger_level = level

        self.logger = logging.getLogger(self.__class__.__name__)
        root_logger = logging.getLogger("")
        if len(root_logger.handlers) == 0 and len(self.logger.handlers) == 0:
            if format is None:
                formatter = logging.Formatter(" [%(name)s] %(message)s")
            else:
                formatter = logging.Formatter(format)
            if silent is True:
                self.logger_handler = logging.NullHandler()
            else:
                self.logger_handler = logging.StreamHandler()
            self.logger_handler.setFormatter(formatter)
            self.logger.addHandler(self.logger_handler)
            self._set_logger_level(level)
        else:
            self.logger_handler = None
            if silent is False:
                self._set_logger_level(level)

    def _set_logger_level(self, level):
        self._logger_level_saved = self.logger.level
        self.logger.setLevel(level)

    def close_logger(self, message=None):
        """
        Reset logger if it was changed.
        """
        if message is not None:
            self.logger.info(message)
        self.logger_count -= 1
        assert self.logger_count >= 0, f"logger count is {self.logger_count}"
        if self.logger_count == 0:
            if self.logger_handler is not None:
                self.logger.removeHandler(self.logger_handler)
                self.logger_handler = None
            saved = getattr(self, "_logger_level_saved", None)
            if saved is not None:
                self.logger.setLevel(saved)
                self._logger_level_saved = None
