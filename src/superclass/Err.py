#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Err(Exception):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        self._msg = msg
        self._cause = cause

    def msg(self):
        # Empty string when no message provided, not None
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def toStr(self):
        name = type(self).__name__
        if self._msg:
            return f"{name}: {self._msg}"
        return name

    def traceToStr(self):
        """Return stack trace as string"""
        import traceback

        s = self.toStr()

        tb = getattr(self, '__traceback__', None)
        if tb:
            lines = traceback.format_tb(tb)
            s += "\n" + "".join(lines)

        if self._cause:
            if hasattr(self._cause, 'traceToStr'):
                s += "\n  Caused by: " + self._cause.traceToStr()
            else:
                s += f"\n  Caused by: {self._cause}"

        return s

    def __str__(self):
        return self.toStr()


class ArgErr(Err):
    """Invalid argument error - wrong receiver, name or mixin shape"""
    pass


class UnknownSlotErr(Err, TypeError):
    """Unknown slot error - thrown when a forwarded metamethod has no binding.

    Also a TypeError, so Python protocols that probe an optional hook
    (list() asking for a length hint) treat it as "not supported".
    """
    pass


class ParseErr(Err):
    """Parse error"""
    pass


class NameErr(Err):
    """Invalid name error"""
    pass
