"""Per-user hash files under ``<base_dir>/download/<username>/hash.txt``."""

import logging
import os
from pathlib import Path

from sharecred.exceptions import StorageError

logger = logging.getLogger(__name__)

DOWNLOAD_DIR_NAME = "download"
HASH_FILE_NAME = "hash.txt"


class HashStore:
    """Writes and reads the hash file of each user."""

    def __init__(self, base_dir=None):
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def user_dir(self, username: str) -> Path:
        return (self.base_dir / DOWNLOAD_DIR_NAME / username).absolute()

    def hash_path(self, username: str) -> Path:
        return self.user_dir(username) / HASH_FILE_NAME

    def ensure_user_dir(self, username: str) -> Path:
        """Create the user's directory and its parents. Safe to call repeatedly."""
        directory = self.user_dir(username)
        try:
            os.makedirs(directory, mode=0o755, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create directory {directory}: {e}")
            raise StorageError(f"failed to create directory {directory}: {e}") from e
        logger.info(f"User directory ready at {directory}")
        return directory

    def write_hash(self, username: str, password_hash: bytes) -> Path:
        """Write the exact hash bytes, replacing any previous hash.txt."""
        file_path = self.hash_path(username)
        try:
            with open(file_path, "wb") as f:
                f.write(password_hash)
        except OSError as e:
            logger.error(f"Failed to write {file_path}: {e}")
            raise StorageError(f"failed to write {file_path}: {e}") from e
        logger.info(f"Hash for {username} written to {file_path}")
        return file_path

    def read_hash(self, username: str) -> bytes:
        file_path = self.hash_path(username)
        try:
            with open(file_path, "rb") as f:
                return f.read()
        except OSError as e:
            raise StorageError(f"failed to read {file_path}: {e}") from e
