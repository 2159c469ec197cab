"""This module provides a forgiving parser for simple INI configs."""

from .exceptions import IniStoreError, LoadError
from .ini import Config
from .store import IniStore, get
