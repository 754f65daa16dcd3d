from __future__ import annotations
import subprocess
from pathlib import Path
from typing import List
from .settings import Settings
from .models import LaunchConfig, ModLoader
from .logging_setup import get_logger

log = get_logger("mc.launcher.docker")

class DockerError(RuntimeError):
    """docker could not be started."""

class DockerCLI:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.bin = settings.docker_bin

    def is_available(self) -> bool:
        try:
            proc = subprocess.run([self.bin, "--version"], capture_output=True, text=True)
        except OSError as e:
            log.debug("docker probe failed: %s", e)
            return False
        if proc.stdout:
            log.debug("docker: %s", proc.stdout.strip())
        return proc.returncode == 0

    def build_run_command(self, config: LaunchConfig, data_dir: Path) -> List[str]:
        s = self.settings
        mount = f"{Path(data_dir).absolute().as_posix()}:{s.container_data_dir}"
        cmd: List[str] = [self.bin, "run", "--rm"]
        if s.tty:
            cmd.append("-it")
        cmd += [
            "-v", mount.replace("\\", "/"),
            "-e", f"TYPE={config.mod_loader.value}",
            "-e", f"MEMORY={s.memory}",
            "-e", f"VERSION={config.game_version}",
        ]
        if config.mod_loader is ModLoader.FORGE:
            cmd += ["-e", f"FORGE_VERSION={config.loader_version}"]
        cmd += [
            "-p", f"{s.port}:25565",
            "-e", f"EULA={'true' if config.eula_accepted else 'false'}",
            "--name", s.container_name,
            s.image,
        ]
        return cmd

    def run(self, cmd: List[str]) -> int:
        """Runs docker attached to this terminal and waits for it to exit."""
        log.info("Attempting to start docker process with command %s", " ".join(cmd))
        try:
            proc = subprocess.run(cmd)
        except OSError as e:
            raise DockerError(f"An error occurred while running the Minecraft server: {e}") from e
        return proc.returncode
