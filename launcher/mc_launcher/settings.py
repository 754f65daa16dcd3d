from __future__ import annotations
from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

def _default_data_dir() -> Path:
    return (Path.home() / "Desktop" / "ServerData").absolute()

class Settings(BaseSettings):
    data_dir: Path = Field(default_factory=_default_data_dir, alias="MC_DATA_DIR")
    args_file_name: str = Field(default="args.txt", alias="MC_ARGS_FILE")

    docker_bin: str = Field(default="docker", alias="DOCKER_BIN")
    image: str = Field(default="itzg/minecraft-server", alias="MC_IMAGE")
    container_name: str = Field(default="mc", alias="MC_CONTAINER_NAME")
    container_data_dir: str = Field(default="/data", alias="MC_CONTAINER_DATA_DIR")
    memory: str = Field(default="4G", alias="MC_MEMORY")
    port: int = Field(default=25565, alias="MC_PORT")
    tty: bool = Field(default=True, alias="MC_TTY")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")
    log_file: Optional[Path] = Field(default=None, alias="LOG_FILE")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    @property
    def args_file(self) -> Path:
        return self.data_dir / self.args_file_name
