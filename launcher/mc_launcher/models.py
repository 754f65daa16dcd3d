from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator

class ModLoader(str, Enum):
    FORGE = "FORGE"
    FABRIC = "FABRIC"

    @classmethod
    def parse(cls, text: str) -> Optional["ModLoader"]:
        """Case-insensitive lookup; None for anything unsupported."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            return None

@dataclass(frozen=True)
class LaunchArgs:
    """
    Raw answers as typed by the operator or read back from the args file.
    Nothing here is validated yet, see LaunchConfig for the checked form.
    """
    minecraft_version: str
    mod_loader: str
    eula_accepted: str
    forge_version: Optional[str] = None

class LaunchConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    game_version: str
    mod_loader: ModLoader
    eula_accepted: bool
    loader_version: Optional[str] = None

    @model_validator(mode="after")
    def _check_loader_version(self) -> "LaunchConfig":
        if self.mod_loader is ModLoader.FORGE and self.loader_version is None:
            raise ValueError("FORGE needs a loader version")
        if self.mod_loader is ModLoader.FABRIC and self.loader_version is not None:
            raise ValueError("FABRIC does not take a loader version")
        return self
