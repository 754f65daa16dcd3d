from __future__ import annotations
from typing import Optional, Sequence
from .settings import Settings
from .logging_setup import get_logger
from .models import LaunchArgs, LaunchConfig, ModLoader
from .store import ConfigStore
from .prompts import Prompter
from .docker import DockerCLI
from .planner import LaunchPlan

log = get_logger("mc.launcher.orch")

EULA_ANSWERS = ("Y", "N")

class LaunchAborted(Exception):
    """The operator chose a path that ends the run normally (exit code 0)."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

class Orchestrator:
    def __init__(self, settings: Settings, prompter: Optional[Prompter] = None,
                 docker: Optional[DockerCLI] = None):
        self.settings = settings
        self.store = ConfigStore(settings.data_dir, settings.args_file_name)
        self.prompter = prompter or Prompter()
        self.docker = docker or DockerCLI(settings)

    def resolve_config(self, argv: Sequence[str] = ()) -> LaunchConfig:
        """
        Command line arguments always win over the args file. Without any,
        saved arguments are reused when the file is usable, otherwise every
        value is asked for.
        """
        argv = list(argv)
        if argv:
            return self._collect(argv)

        saved = self.store.load()
        if saved is None:
            return self._collect([])

        log.info("Saved arguments found, using those")
        return self._from_saved(saved)

    def _collect(self, argv: Sequence[str]) -> LaunchConfig:
        version = argv[0] if len(argv) > 0 else self.prompter.minecraft_version()
        loader = self._require_loader(argv[1] if len(argv) > 1 else self.prompter.mod_loader())

        eula = argv[2] if len(argv) > 2 else self.prompter.eula()
        while eula.strip().upper() not in EULA_ANSWERS:
            log.info("Invalid input! Please enter 'Y' or 'N'")
            eula = self.prompter.eula()
        self._require_eula(eula)

        return self._build(version, loader)

    def _from_saved(self, saved: LaunchArgs) -> LaunchConfig:
        self._require_eula(saved.eula_accepted)
        loader = self._require_loader(saved.mod_loader)
        return self._build(saved.minecraft_version, loader)

    def _build(self, version: str, loader: ModLoader) -> LaunchConfig:
        # never taken from the args file, asked on every FORGE run
        loader_version = self.prompter.forge_version() if loader is ModLoader.FORGE else None
        return LaunchConfig(
            game_version=version,
            mod_loader=loader,
            eula_accepted=True,
            loader_version=loader_version,
        )

    @staticmethod
    def _require_loader(text: str) -> ModLoader:
        loader = ModLoader.parse(text)
        if loader is None:
            raise LaunchAborted("Invalid Modloader! Only 'FORGE' and 'FABRIC' are supported.")
        return loader

    @staticmethod
    def _require_eula(text: str) -> None:
        if text.strip().upper() != "Y":
            raise LaunchAborted("You must accept the Minecraft EULA to launch the server.")

    def plan(self, config: LaunchConfig) -> LaunchPlan:
        return LaunchPlan(
            ok=True,
            config=config,
            args_file=str(self.store.path),
            command=self.docker.build_run_command(config, self.settings.data_dir),
            notes=["dry run: args file not written, docker not started"],
        )

    def launch(self, config: LaunchConfig) -> int:
        """Saves the config, then runs the server container until it exits."""
        self.store.save(config)
        cmd = self.docker.build_run_command(config, self.settings.data_dir)
        rc = self.docker.run(cmd)
        log.info("docker exited with code %s", rc)
        return rc
