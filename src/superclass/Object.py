#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from collections.abc import Mapping

from .Class import Class, Instance
from .Env import Env
from .Err import ArgErr
from .Log import Log, LogLevel
from .Metamethod import METAMETHODS, setClassMetamethods
from .Mixin import includeMixin

_log = Log.get("superclass")


def _configLevel(env):
    """Log level named by the logLevel config; info when unset or unknown."""
    name = env.config("logLevel", "info")
    level = LogLevel.fromStr(name, False)
    if level is None:
        _log.warn(f"Unknown logLevel '{name}', using info")
        return LogLevel.info
    return level


_log.level(_configLevel(Env.cur()))

# The single root class, set by createRootClass
_root = None


def _checkReceiver(cls, op):
    if not isinstance(cls, Class):
        raise ArgErr(f"Make sure that you are using 'Class.{op}' on a class, not {cls!r}")


#########################################################################
# Root static members
#########################################################################

def allocate(cls):
    """Create a bare instance of cls without running initialize."""
    _checkReceiver(cls, "allocate")
    return Instance(cls)


def new(cls, *args, **kwargs):
    """Allocate an instance of cls and run its initialize with args."""
    _checkReceiver(cls, "new")
    instance = cls.allocate()
    instance.initialize(*args, **kwargs)
    return instance


def _setDefaultInitializeMethod(aClass, superclass):
    def initialize(instance, *args, **kwargs):
        return superclass.static["initialize"](instance, *args, **kwargs)

    initialize.__qualname__ = f"{aClass.name}.initialize"
    aClass.instanceDict["initialize"] = initialize


def subclass(cls, name):
    """Create a direct subclass of cls named name.

    The subclass forwards metamethods and initialize to cls until it
    defines its own, is registered weakly in cls.subclasses and is
    announced to cls through the subclassed hook.
    """
    _checkReceiver(cls, "subclass")

    aClass = Class(name, cls)
    setClassMetamethods(aClass)
    _setDefaultInitializeMethod(aClass, cls)
    cls.subclasses.add(aClass)
    if _log.isEnabled(LogLevel.debug):
        _log.debug(f"Created {aClass} < {cls.name}")
    cls.subclassed(aClass)

    return aClass


def subclassed(cls, other):
    pass


def isSubclassOf(cls, other):
    """True if other is an ancestor of cls; never raises."""
    if not isinstance(cls, Class) or not isinstance(other, Class):
        return False
    sup = cls.superclass
    if sup is None:
        return False
    if sup is other:
        return True
    check = sup.static.get("isSubclassOf")
    return callable(check) and bool(check(sup, other))


def include(cls, *mixins):
    """Copy each mixin into cls; returns cls."""
    _checkReceiver(cls, "include")
    for mixin in mixins:
        includeMixin(cls, mixin)
        if _log.isEnabled(LogLevel.debug):
            _log.debug(f"Included mixin into {cls}")
    return cls


def includes(cls, mixin):
    """True if mixin was included on cls or any ancestor; never raises."""
    if not isinstance(cls, Class) or not isinstance(mixin, Mapping):
        return False
    if id(mixin) in cls.mixins:
        return True
    sup = cls.superclass
    if sup is None:
        return False
    check = sup.static.get("includes")
    return callable(check) and bool(check(sup, mixin))


#########################################################################
# Root instance members
#########################################################################

def initialize(self, *args, **kwargs):
    pass


def toStr(self):
    return f"instance of {self.class_}"


def isInstanceOf(self, aClass):
    """True if self was created by aClass or a subclass of it; never raises."""
    if not isinstance(self, Instance) or not isinstance(aClass, Class):
        return False
    klass = self.__dict__.get("class_")
    if not isinstance(klass, Class):
        return False
    return aClass is klass or isSubclassOf(klass, aClass)


#########################################################################
# Entry points
#########################################################################

def createRootClass(name):
    """Create the root class every other class descends from.

    Done once, at import, to build Object.
    """
    global _root
    if _root is not None:
        raise ArgErr(f"Root class already created: {_root}")

    root = Class(name)
    static = root.static
    static["__metamethods__"] = METAMETHODS
    static["allocate"] = allocate
    static["new"] = new
    static["subclass"] = subclass
    static["subclassed"] = subclassed
    static["isSubclassOf"] = isSubclassOf
    static["include"] = include
    static["includes"] = includes

    root["initialize"] = initialize
    root["__str__"] = toStr
    root["isInstanceOf"] = isInstanceOf

    _root = root
    if _log.isEnabled(LogLevel.debug):
        _log.debug(f"Created root {root}")
    return root


Object = createRootClass("Object")


def defineClass(name, superclass=None, *mixins):
    """Create a class named name; superclass defaults to Object.

    Any trailing mixins are included on the new class.
    """
    if superclass is None:
        superclass = Object
    _checkReceiver(superclass, "subclass")
    aClass = superclass.subclass(name)
    if mixins:
        aClass.include(*mixins)
    return aClass
