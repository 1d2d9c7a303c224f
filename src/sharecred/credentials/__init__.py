"""Credential validation and password suggestion."""

from . import alphabet
from . import validator
from . import generator

__all__ = ["alphabet", "validator", "generator"]
