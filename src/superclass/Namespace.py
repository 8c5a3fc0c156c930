#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# Sentinel for "no such member" so None can be stored as a value
MISSING = object()


class Namespace:
    """Member table with an explicit fallback lookup.

    Each namespace owns a plain dict of members and a fallback function
    which is consulted only when a name is not an own key.  The fallback
    is a reference to another namespace's lookup, so a chain of
    namespaces is walked one link at a time.
    """

    def __init__(self, fallback=None):
        self._own = {}
        self._fallback = fallback

    def lookup(self, name):
        """Resolve name through this namespace and its fallback chain.

        Returns MISSING when nothing in the chain defines name.
        """
        val = self._own.get(name, MISSING)
        if val is not MISSING:
            return val
        return self._lookupFallback(name)

    def _lookupFallback(self, name):
        if self._fallback is None:
            return MISSING
        return self._fallback(name)

    def rawget(self, name, default=None):
        """Get an own member without consulting the fallback."""
        return self._own.get(name, default)

    def hasOwn(self, name):
        return name in self._own

    def ownKeys(self):
        return list(self._own.keys())

    def get(self, name, default=None):
        val = self.lookup(name)
        return default if val is MISSING else val

    def __getitem__(self, name):
        val = self.lookup(name)
        if val is MISSING:
            raise KeyError(name)
        return val

    def __setitem__(self, name, value):
        self._own[name] = value

    def __delitem__(self, name):
        del self._own[name]

    def __contains__(self, name):
        return self.lookup(name) is not MISSING

    def __iter__(self):
        return iter(self._own)

    def __len__(self):
        return len(self._own)


class InstanceDict(Namespace):
    """Instance members of a class.

    Falls back to the superclass's instance members, so the nearest
    definition in the inheritance chain wins.
    """

    def __init__(self, superDict=None):
        super().__init__(superDict.lookup if superDict is not None else None)


class StaticDict(Namespace):
    """Class-level members of a class.

    Lookup order is own static members, then the class's *own* instance
    members (not the inherited ones), then the superclass's static lookup.
    """

    def __init__(self, instanceDict, superStatic=None):
        self._instanceDict = instanceDict
        self._superStatic = superStatic
        # No stored fallback; _lookupFallback walks the chain
        super().__init__()

    def _lookupFallback(self, name):
        val = self._instanceDict.rawget(name, MISSING)
        if val is not MISSING:
            return val
        if self._superStatic is None:
            return MISSING
        return self._superStatic.lookup(name)
