#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import weakref

from .Err import ArgErr
from .Namespace import MISSING, InstanceDict, StaticDict


def _bind(val, obj):
    """Bind val to obj the way Python binds a function found on a type."""
    get = getattr(type(val), '__get__', None)
    if get is None:
        return val
    return get(val, obj, type(obj))


class Class:
    """Class record - one class of the object model.

    Attribute access resolves through the static lookup chain and binds
    functions to the class, so Dog.new("Rex") calls the root's new with
    Dog as receiver.  Item access returns raw members: Dog["speak"] is
    the plain function.  Item assignment defines an instance member.
    """

    def __init__(self, name, superclass=None):
        if not isinstance(name, str) or not name:
            raise ArgErr(f"You must provide a name (non-empty str) for your class, not {name!r}")
        if superclass is not None and not isinstance(superclass, Class):
            raise ArgErr(f"Superclass must be a class, not {superclass!r}")

        self.name = name
        self.superclass = superclass

        if superclass is None:
            self.instanceDict = InstanceDict()
            self.static = StaticDict(self.instanceDict)
        else:
            self.instanceDict = InstanceDict(superclass.instanceDict)
            self.static = StaticDict(self.instanceDict, superclass.static)

        # mixin identity -> mixin, own inclusions only
        self.mixins = {}
        self.subclasses = weakref.WeakSet()

    @property
    def super_(self):
        return self.superclass

    def __getattr__(self, name):
        # Only reached for names that are not real attributes
        static = self.__dict__.get('static')
        if static is None:
            raise AttributeError(name)
        val = static.lookup(name)
        if val is MISSING:
            raise AttributeError(f"{self} has no member '{name}'")
        return _bind(val, self)

    def __getitem__(self, name):
        val = self.static.lookup(name)
        if val is MISSING:
            raise KeyError(name)
        return val

    def __setitem__(self, name, value):
        self.defineMethod(name, value)

    def __contains__(self, name):
        return name in self.static

    def defineMethod(self, name, fn=None):
        """Define an instance member on this class.

        Usable directly, Dog.defineMethod("bark", fn), or as a decorator
        with the name only.
        """
        if not isinstance(name, str) or not name:
            raise ArgErr(f"Member name must be a non-empty str, not {name!r}")
        if fn is None:
            def decorator(f):
                self.instanceDict[name] = f
                return f
            return decorator
        self.instanceDict[name] = fn
        return fn

    def subclassList(self):
        """Live direct subclasses, in no particular order"""
        return list(self.subclasses)

    def __call__(self, *args, **kwargs):
        return self.new(*args, **kwargs)

    def __str__(self):
        return f"class {self.name}"

    def __repr__(self):
        return self.__str__()


class Instance:
    """Object allocated from a Class.

    Own fields live in the instance __dict__; any other member resolves
    through the class's instance lookup chain.  Python operators dispatch
    to the class's own metamethod binding of the same dunder name; a > b
    and a >= b reuse the __lt__ and __le__ bindings with swapped operands.

    __call__ is always present, so callable() is true for every instance
    even when no class in its chain binds __call__.  Calling such an
    instance raises TypeError (UnknownSlotErr below the root), which is
    how an instance stored as a mixin's included hook or as an operator
    binding fails.
    """

    def __init__(self, klass):
        self.class_ = klass

    def __getattr__(self, name):
        klass = self.__dict__.get('class_')
        if klass is None:
            raise AttributeError(name)
        val = klass.instanceDict.lookup(name)
        if val is MISSING:
            raise AttributeError(f"instance of {klass} has no member '{name}'")
        return _bind(val, self)

    def _metamethod(self, name):
        # Own binding only; non-root classes carry forwarding trampolines
        return self.class_.instanceDict.rawget(name)

    def _binary(self, name, a, b):
        fn = self._metamethod(name)
        if fn is None:
            return NotImplemented
        return fn(a, b)

    def _unary(self, name, *args, **kwargs):
        fn = self._metamethod(name)
        if fn is None:
            raise TypeError(f"instance of {self.class_} doesn't support '{name}'")
        return fn(self, *args, **kwargs)

    def __add__(self, other):
        return self._binary('__add__', self, other)

    def __radd__(self, other):
        return self._binary('__add__', other, self)

    def __sub__(self, other):
        return self._binary('__sub__', self, other)

    def __rsub__(self, other):
        return self._binary('__sub__', other, self)

    def __mul__(self, other):
        return self._binary('__mul__', self, other)

    def __rmul__(self, other):
        return self._binary('__mul__', other, self)

    def __truediv__(self, other):
        return self._binary('__truediv__', self, other)

    def __rtruediv__(self, other):
        return self._binary('__truediv__', other, self)

    def __floordiv__(self, other):
        return self._binary('__floordiv__', self, other)

    def __rfloordiv__(self, other):
        return self._binary('__floordiv__', other, self)

    def __mod__(self, other):
        return self._binary('__mod__', self, other)

    def __rmod__(self, other):
        return self._binary('__mod__', other, self)

    def __pow__(self, other):
        return self._binary('__pow__', self, other)

    def __rpow__(self, other):
        return self._binary('__pow__', other, self)

    def __lt__(self, other):
        return self._binary('__lt__', self, other)

    def __le__(self, other):
        return self._binary('__le__', self, other)

    def __gt__(self, other):
        return self._binary('__lt__', other, self)

    def __ge__(self, other):
        return self._binary('__le__', other, self)

    def __neg__(self):
        return self._unary('__neg__')

    def __len__(self):
        return self._unary('__len__')

    def __iter__(self):
        return iter(self._unary('__iter__'))

    def __call__(self, *args, **kwargs):
        return self._unary('__call__', *args, **kwargs)

    def __str__(self):
        if self._metamethod('__str__') is None:
            return object.__repr__(self)
        return self._unary('__str__')

    def __repr__(self):
        return self.__str__()

    def __bool__(self):
        return True
