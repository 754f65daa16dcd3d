from __future__ import annotations
from typing import Callable, Optional

MINECRAFT_VERSION_QUESTION = "Enter the Minecraft version for your modpack"
MOD_LOADER_QUESTION = "Enter the Modloader for your modpack (FORGE or FABRIC)"
EULA_QUESTION = "Have you accepted the Minecraft EULA? (Enter 'Y' or 'N')"
FORGE_VERSION_QUESTION = "Enter the Forge version for your modpack"

class Prompter:
    """Asks the operator one question at a time on the terminal."""

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None):
        self._input = input_fn or input

    def ask(self, message: str) -> str:
        return self._input(f"{message}: ")

    def minecraft_version(self) -> str:
        return self.ask(MINECRAFT_VERSION_QUESTION)

    def mod_loader(self) -> str:
        return self.ask(MOD_LOADER_QUESTION)

    def eula(self) -> str:
        return self.ask(EULA_QUESTION)

    def forge_version(self) -> str:
        return self.ask(FORGE_VERSION_QUESTION)
