from typing import Iterable, List

import pytest

from sharecred.exceptions import InputClosedError
from sharecred.models.settings import ProvisionSettings


class ScriptedConsole:
    """Console double that replays lines and records everything shown."""

    def __init__(self, lines: Iterable):
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.messages: List[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise InputClosedError("script exhausted")
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line.strip()

    def write(self, message: str = ""):
        self.messages.append(message)


@pytest.fixture
def settings(tmp_path) -> ProvisionSettings:
    # Lowest bcrypt cost keeps hashing fast
    return ProvisionSettings(host="share.test", base_dir=tmp_path, bcrypt_cost=4)


@pytest.fixture
def scripted_console():
    return ScriptedConsole
