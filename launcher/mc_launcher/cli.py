from __future__ import annotations
import argparse
import json
from pathlib import Path
from .settings import Settings
from .logging_setup import setup_logging, get_logger
from .orchestrator import Orchestrator, LaunchAborted
from .store import StoreError
from .docker import DockerError

log = get_logger("mc.launcher.cli")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mc-launcher",
        description="Ask for (or reuse) Minecraft server settings and start the server container.",
    )
    parser.add_argument("minecraft_version", nargs="?", help="Minecraft version of the modpack")
    parser.add_argument("mod_loader", nargs="?", help="FORGE or FABRIC")
    parser.add_argument("eula", nargs="?", help="Y if the Minecraft EULA is accepted")
    parser.add_argument("--data-dir", type=Path, help="Server data directory (default: MC_DATA_DIR)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Resolve settings and print the docker command; don't save or start anything")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    if args.data_dir is not None:
        settings = settings.model_copy(update={"data_dir": args.data_dir.absolute()})
    setup_logging(settings)

    orch = Orchestrator(settings)
    if not args.dry_run and not orch.docker.is_available():
        log.warning("docker does not seem to be installed or is not on PATH (%s)", settings.docker_bin)

    positional = [v for v in (args.minecraft_version, args.mod_loader, args.eula) if v is not None]
    try:
        config = orch.resolve_config(positional)
    except LaunchAborted as e:
        log.info(e.reason)
        return 0
    except (EOFError, KeyboardInterrupt):
        log.error("Input aborted, exiting.")
        return 1

    if args.dry_run:
        print(json.dumps(orch.plan(config).to_dict(), indent=2, ensure_ascii=False))
        return 0

    try:
        rc = orch.launch(config)
    except StoreError as e:
        log.error("An error occurred while saving the arguments: %s", e)
        return 1
    except DockerError as e:
        log.error("%s", e)
        return 1
    except KeyboardInterrupt:
        log.error("Interrupted while the server was running, exiting.")
        return 1

    if rc != 0:
        log.warning("Minecraft server container ended with exit code %s", rc)
    return 0
