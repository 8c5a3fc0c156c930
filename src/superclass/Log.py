#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

#
# Log - named logs for the object model, forwarded to the logging module
#
import logging


class LogLevel:
    """Severity of a log record, ordered debug < info < warn < err < silent."""

    _levels = {}

    def __init__(self, name, ordinal, pyLevel):
        self._name = name
        self._ordinal = ordinal
        self._pyLevel = pyLevel
        LogLevel._levels[name] = self

    @staticmethod
    def fromStr(name, checked=True):
        """Parse LogLevel from string, case-insensitive"""
        level = LogLevel._levels.get(name.lower())
        if level is None and checked:
            from .Err import ParseErr
            raise ParseErr(f"Unknown log level: {name}")
        return level

    def name(self):
        return self._name


LogLevel.debug = LogLevel("debug", 0, logging.DEBUG)
LogLevel.info = LogLevel("info", 1, logging.INFO)
LogLevel.warn = LogLevel("warn", 2, logging.WARNING)
LogLevel.err = LogLevel("err", 3, logging.ERROR)
LogLevel.silent = LogLevel("silent", 4, logging.CRITICAL + 1)


class LogRec:
    """One record: level, log name and message."""

    def __init__(self, level, logName, msg):
        self._level = level
        self._logName = logName
        self._msg = msg

    def level(self):
        return self._level

    def logName(self):
        return self._logName

    def msg(self):
        return self._msg

    def __str__(self):
        return f"[{self._level.name()}] [{self._logName}] {self._msg}"


class Log:
    """
    Named log.  Records at or above the log's level go to every global
    handler and then to logging.getLogger(name).
    """

    _logs = {}
    _handlers = []

    def __init__(self, name, register=True):
        """Create a new log. If register=True, adds to global registry."""
        if not Log._isValidName(name):
            from .Err import NameErr
            raise NameErr(f"Invalid log name: {name}")

        if register and name in Log._logs:
            from .Err import ArgErr
            raise ArgErr(f"Log already registered: {name}")

        self._name = name
        self._level = LogLevel.info
        self._pyLogger = logging.getLogger(name)

        if register:
            Log._logs[name] = self

    @staticmethod
    def _isValidName(name):
        """Dotted identifier characters only"""
        if not isinstance(name, str) or not name:
            return False
        return all(c.isalnum() or c in '._' for c in name)

    @staticmethod
    def get(name):
        """Get or create a registered log by name"""
        if name in Log._logs:
            return Log._logs[name]
        return Log(name, True)

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(newLevel)"""
        if value is None:
            return self._level
        self._level = value
        return None

    def isEnabled(self, level):
        return level._ordinal >= self._level._ordinal

    def debug(self, msg):
        if self.isEnabled(LogLevel.debug):
            self.log(LogRec(LogLevel.debug, self._name, msg))

    def warn(self, msg):
        if self.isEnabled(LogLevel.warn):
            self.log(LogRec(LogLevel.warn, self._name, msg))

    def log(self, rec):
        """Log a record - can be overridden by subclasses"""
        for handler in Log._handlers:
            try:
                handler(rec)
            except Exception:
                self._pyLogger.exception("Log handler failed: %r", handler)

        self._pyLogger.log(rec._level._pyLevel, rec._msg)

    @staticmethod
    def addHandler(handler):
        if not callable(handler):
            from .Err import ArgErr
            raise ArgErr("Handler must be callable")
        Log._handlers.append(handler)

    @staticmethod
    def removeHandler(handler):
        if handler in Log._handlers:
            Log._handlers.remove(handler)
