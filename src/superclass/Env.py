#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os


class Env:
    """Runtime environment - configuration read from SUPERCLASS_* variables"""

    _instance = None

    PREFIX = "SUPERCLASS_"

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    def vars(self):
        """Return the configuration variables with the prefix stripped.

        Keys are lower case, so SUPERCLASS_LOGLEVEL is returned as 'loglevel'.
        """
        result = {}
        for key, value in os.environ.items():
            if key.startswith(Env.PREFIX):
                result[key[len(Env.PREFIX):].lower()] = value
        return result

    def config(self, key, defVal=None):
        """Get configuration value.

        Args:
            key: Config key, case-insensitive ('logLevel' reads SUPERCLASS_LOGLEVEL)
            defVal: Default value if not found

        Returns:
            Config value or default
        """
        val = os.environ.get(Env.PREFIX + key.upper())
        if val is not None:
            return val
        return defVal
