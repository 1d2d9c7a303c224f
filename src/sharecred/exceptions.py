"""Errors raised while provisioning a credential."""


class SharecredError(Exception):
    """Base class for all sharecred errors."""


class RandomnessError(SharecredError):
    """The secure random source failed. Never retried or replaced by a weaker source."""


class StorageError(SharecredError):
    """The user directory or hash file could not be written."""


class HashingError(SharecredError):
    """The password hash could not be produced."""


class InputClosedError(SharecredError):
    """The console input stream reached end of file."""
