"""Hashing, storage and the interactive provisioning flow."""

from . import hashing
from . import storage
from . import provisioner

__all__ = ["hashing", "storage", "provisioner"]
