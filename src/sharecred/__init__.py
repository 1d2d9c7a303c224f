"""Sharecred: credential provisioning for the file-sharing download area."""

__version__ = "0.1.0"
