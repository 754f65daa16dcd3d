from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List
from .models import LaunchConfig

@dataclass
class LaunchPlan:
    ok: bool
    config: LaunchConfig
    args_file: str
    command: List[str]
    notes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "config": self.config.model_dump(mode="json"),
            "args_file": self.args_file,
            "command": list(self.command),
            "notes": list(self.notes),
        }
