import pytest
from pathlib import Path

from mc_launcher.settings import Settings


class ScriptedInput:
    """Stand-in for input(): hands out canned answers and records the questions."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked = []

    def __call__(self, prompt):
        self.asked.append(prompt)
        if not self.answers:
            raise EOFError("no more scripted answers")
        return self.answers.pop(0)


@pytest.fixture
def data_dir(tmp_path) -> Path:
    return tmp_path / "ServerData"


@pytest.fixture
def settings(data_dir) -> Settings:
    return Settings(MC_DATA_DIR=data_dir)


@pytest.fixture
def scripted():
    return ScriptedInput
