"""Interactive credential provisioning.

The flow moves through three states::

    AWAITING_USERNAME -> AWAITING_PASSWORD -> ACCEPTED

Invalid input re-prompts with a hint. Once a password is accepted it is
hashed and written to ``download/<username>/hash.txt``.
"""

import logging
import sys
from enum import Enum
from typing import Callable, Optional

import typer

from sharecred.credentials.generator import generate_suggestion
from sharecred.credentials.validator import DEFAULT_VALIDATOR, Validator
from sharecred.exceptions import InputClosedError
from sharecred.models.credential import ProvisionResult
from sharecred.models.settings import ProvisionSettings
from sharecred.services.hashing import hash_password
from sharecred.services.storage import HashStore

logger = logging.getLogger(__name__)


class ProvisionState(str, Enum):
    AWAITING_USERNAME = "awaiting_username"
    AWAITING_PASSWORD = "awaiting_password"
    ACCEPTED = "accepted"


class Console:
    """Line-oriented terminal I/O."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self, prompt: str) -> str:
        """Show the prompt and return one line with surrounding whitespace removed.

        Raises InputClosedError at end of file or on a closed stream. Other read
        errors propagate.
        """
        typer.echo(prompt, nl=False)
        try:
            line = self.stream.readline()
        except ValueError as e:
            if getattr(self.stream, "closed", False):
                raise InputClosedError("input stream closed") from e
            raise
        if line == "":
            raise InputClosedError("input stream closed")
        return line.strip()

    def write(self, message: str = ""):
        typer.echo(message)


class Provisioner:
    """Runs one username/password dialogue and stores the resulting hash."""

    def __init__(
        self,
        settings: ProvisionSettings,
        console: Optional[Console] = None,
        validator: Validator = DEFAULT_VALIDATOR,
        store: Optional[HashStore] = None,
        suggest: Optional[Callable[[], str]] = None,
    ):
        self.settings = settings
        self.console = console or Console()
        self.validator = validator
        self.store = store or HashStore(settings.base_dir)
        self.suggest = suggest or generate_suggestion
        self.state = ProvisionState.AWAITING_USERNAME
        self.suggestion: Optional[str] = None

    def _read(self, prompt: str) -> Optional[str]:
        """Read one line, or report the error and return None so the caller re-prompts."""
        try:
            return self.console.read_line(prompt)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read input: {e}")
            self.console.write(f"Error while reading input: {e}")
            return None

    def prompt_username(self) -> str:
        while True:
            username = self._read(
                f"Please enter a username ({self.validator.username_rule.min_length}-"
                f"{self.validator.username_rule.max_length} characters): "
            )
            if username is None:
                continue
            reason = self.validator.check_username(username)
            if reason is None:
                return username
            logger.info(f"Rejected username: {reason.value}")
            self.console.write(self.validator.username_message(reason))

    def _password_prompt(self) -> str:
        rule = self.validator.password_rule
        prompt = f"Please enter a password ({rule.min_length}-{rule.max_length} characters)"
        if self.suggestion is not None:
            return f"{prompt} or press Enter to accept the suggestion [{self.suggestion}]: "
        return f"{prompt}: "

    def prompt_password(self) -> str:
        while True:
            password = self._read(self._password_prompt())
            if password is None:
                continue
            if password == "" and self.suggestion is not None:
                password = self.suggestion
            reason = self.validator.check_password(password)
            if reason is None:
                return password
            logger.info(f"Rejected password: {reason.value}")
            self.console.write(self.validator.password_message(reason))

    def run(self) -> ProvisionResult:
        """Prompt for the credential, then create the directory, hash and write."""
        self.state = ProvisionState.AWAITING_USERNAME
        username = self.prompt_username()

        self.state = ProvisionState.AWAITING_PASSWORD
        self.suggestion = self.suggest() if self.settings.offer_suggestion else None
        password = self.prompt_password()

        self.state = ProvisionState.ACCEPTED
        logger.info(f"Credential accepted for {username}")

        self.store.ensure_user_dir(username)
        password_hash = hash_password(password, self.settings.bcrypt_cost)
        hash_path = self.store.write_hash(username, password_hash)

        return ProvisionResult(
            username=username,
            password=password,
            hash_path=hash_path,
            host=self.settings.host,
            used_suggestion=self.suggestion is not None and password == self.suggestion,
        )


def report(result: ProvisionResult, console: Optional[Console] = None):
    """Tell the operator where the hash went, the download link and the password."""
    console = console or Console()
    console.write()
    console.write(f"The hash was created successfully and saved in {result.hash_path}.")
    console.write(f"File download at {result.download_url}")
    console.write(f"The password is: '{result.password}'")
