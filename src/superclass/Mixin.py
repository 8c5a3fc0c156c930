#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from collections.abc import Mapping

from .Err import ArgErr

# Mixin keys that are never copied as instance members
RESERVED = ('included', 'static')


def includeMixin(aClass, mixin):
    """Copy the members of mixin into aClass.

    Plain members go to the class's own instance members, the nested
    'static' mapping to its own static members.  The 'included' hook is
    called with the class once the members are in place.
    """
    if not isinstance(mixin, Mapping):
        raise ArgErr(f"Mixin must be a mapping, not {type(mixin).__name__}")

    static = mixin.get('static')
    if static is not None and not isinstance(static, Mapping):
        raise ArgErr(f"Mixin 'static' must be a mapping, not {type(static).__name__}")

    for name, member in mixin.items():
        if name not in RESERVED:
            aClass.instanceDict[name] = member

    if static is not None:
        for name, member in static.items():
            aClass.static[name] = member

    included = mixin.get('included')
    if callable(included):
        included(aClass)

    aClass.mixins[id(mixin)] = mixin
