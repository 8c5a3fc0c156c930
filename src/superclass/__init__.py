#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# superclass - single inheritance classes, mixins and metamethods as data

VERSION = "superclass v0.0.1"
DESCRIPTION = "Object Oriented Classes as explicit lookup chains"

# Errors
from .Err import Err, ArgErr, UnknownSlotErr, ParseErr, NameErr

# Logging and configuration
from .Log import Log, LogLevel, LogRec
from .Env import Env

# Object model
from .Namespace import MISSING, Namespace, InstanceDict, StaticDict
from .Class import Class, Instance
from .Metamethod import METAMETHODS
from .Object import Object, createRootClass, defineClass
