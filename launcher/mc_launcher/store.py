"""
Flat-file persistence of the last used launch parameters.

The args file lives in the server data directory (the same directory that is
mounted into the container) and holds one key=value pair per line:

    minecraftVersion=1.20.1
    modLoader=FORGE
    eulaAccepted=Y
    forgeVersion=47.2.0

Reading is a textual scan, not a parse: a key is found on the first line that
contains its name anywhere (case-insensitive), so extra or reordered lines are
tolerated.
"""

from __future__ import annotations
import re
from pathlib import Path
from typing import List, Optional, Sequence
from .models import LaunchArgs, LaunchConfig, ModLoader
from .logging_setup import get_logger

log = get_logger("mc.launcher.store")

KEY_MINECRAFT_VERSION = "minecraftVersion"
KEY_MOD_LOADER = "modLoader"
KEY_EULA_ACCEPTED = "eulaAccepted"
KEY_FORGE_VERSION = "forgeVersion"

REQUIRED_KEYS = (KEY_MINECRAFT_VERSION, KEY_MOD_LOADER, KEY_EULA_ACCEPTED)

class StoreError(RuntimeError):
    """The args file or its directory could not be written."""

def lookup(lines: Sequence[str], key: str) -> str:
    """
    Value of the first line mentioning `key` (case-insensitive), with the
    `key=` prefix removed. Empty string when no line matches.
    """
    needle = key.lower()
    for line in lines:
        if needle in line.lower():
            return re.sub(re.escape(key) + "=", "", line, flags=re.IGNORECASE)
    return ""

class ConfigStore:
    def __init__(self, data_dir: Path, file_name: str = "args.txt"):
        self.data_dir = Path(data_dir)
        self.path = self.data_dir / file_name

    def read_lines(self) -> List[str]:
        if not self.path.is_file():
            return []
        try:
            return self.path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            log.debug("Could not read %s: %s", self.path, e)
            return []

    def load(self) -> Optional[LaunchArgs]:
        lines = self.read_lines()
        if not lines:
            return None
        content = "\n".join(lines).lower()
        missing = [k for k in REQUIRED_KEYS if k.lower() not in content]
        if missing:
            log.debug("Saved arguments in %s incomplete, missing %s", self.path, missing)
            return None

        forge_version = lookup(lines, KEY_FORGE_VERSION) if KEY_FORGE_VERSION.lower() in content else None
        return LaunchArgs(
            minecraft_version=lookup(lines, KEY_MINECRAFT_VERSION),
            mod_loader=lookup(lines, KEY_MOD_LOADER),
            eula_accepted=lookup(lines, KEY_EULA_ACCEPTED),
            forge_version=forge_version,
        )

    def save(self, config: LaunchConfig) -> None:
        lines = [
            f"{KEY_MINECRAFT_VERSION}={config.game_version}",
            f"{KEY_MOD_LOADER}={config.mod_loader.value}",
            f"{KEY_EULA_ACCEPTED}={'Y' if config.eula_accepted else 'N'}",
        ]
        if config.mod_loader is ModLoader.FORGE:
            lines.append(f"{KEY_FORGE_VERSION}={config.loader_version}")

        if not self.data_dir.exists():
            log.info("Attempting to create data directory at %s", self.data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Unable to create data directory {self.data_dir}: {e}") from e

        # temp file + rename, a half written args file is never left behind
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            temp_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise StoreError(f"Could not save arguments to {self.path}: {e}") from e
        log.info("Saved arguments to %s", self.path)
