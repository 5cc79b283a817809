"""Manifest data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from uuid import uuid4

from disks.manifests.serializers import dump_manifest, load_manifest


@dataclass(slots=True)
class Manifest:
    """Record of one CLI or comparison run: what was asked and what came out."""

    run_id: str
    timestamp: datetime
    command: str
    config: dict[str, Any]
    results: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, command: str, config: dict[str, Any], results: dict[str, Any]) -> Manifest:
        return cls(
            run_id=str(uuid4()),
            timestamp=datetime.now(timezone.utc),
            command=command,
            config=config,
            results=results,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "timestamp": self.timestamp.isoformat(),
            "command": self.command,
            "config": self.config,
            "results": self.results,
        }

    def save(self, path: str | Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        dump_manifest(self.to_dict(), target)
        return target

    @staticmethod
    def load(path: str | Path) -> Manifest:
        data = load_manifest(Path(path))
        return Manifest(
            run_id=data["run_id"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
            command=data["command"],
            config=data["config"],
            results=data.get("results", {}),
        )
