#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Err import UnknownSlotErr

# Operator hooks every subclass forwards to its nearest defining ancestor
METAMETHODS = (
    '__add__', '__call__', '__truediv__', '__floordiv__', '__iter__', '__le__',
    '__len__', '__lt__', '__mod__', '__mul__', '__pow__', '__sub__',
    '__str__', '__neg__',
)


def createLookupMetamethod(aClass, name):
    """Create the trampoline for metamethod name on aClass.

    The superclass binding is resolved on every call, so an override
    added to an ancestor after aClass was created is still picked up.
    Only the superclass and the class name are captured; aClass itself
    is not, so dropping a class never depends on the cycle collector.
    """
    superclass = aClass.superclass
    label = str(aClass)

    def metamethod(*args, **kwargs):
        method = superclass.static.get(name)
        if not callable(method):
            raise UnknownSlotErr(f"{label} doesn't implement metamethod '{name}'")
        return method(*args, **kwargs)

    metamethod.__name__ = name
    metamethod.__qualname__ = f"{aClass.name}.{name}"
    return metamethod


def setClassMetamethods(aClass):
    """Install a trampoline for every registered metamethod name."""
    for name in aClass.static.get('__metamethods__', ()):
        aClass.instanceDict[name] = createLookupMetamethod(aClass, name)
