"""Read the worker's JSON artifact."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import orjson

from ..errors import ArtifactError

Sample = Dict[str, Any]


@dataclass(frozen=True)
class TelemetryArtifact:
    cpu: List[Sample] = field(default_factory=list)
    memory: List[Sample] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.cpu and not self.memory


def _samples(payload: Dict[str, Any], key: str, path: Path) -> List[Sample]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ArtifactError(path, f"'{key}' must be an array")
    return [sample for sample in value if isinstance(sample, dict)]


def parse_artifact(raw: bytes, path: Path) -> TelemetryArtifact:
    """Decode artifact bytes; missing ``cpu``/``memory`` arrays read as empty.

    Raises:
        ArtifactError: If the document is not a JSON object with array fields.
    """
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ArtifactError(path, f"invalid JSON ({exc})") from exc
    if not isinstance(payload, dict):
        raise ArtifactError(path, "top level must be an object")
    return TelemetryArtifact(cpu=_samples(payload, "cpu", path), memory=_samples(payload, "memory", path))


def load_artifact(path: Path) -> TelemetryArtifact:
    """Read and decode the artifact at *path*.

    Raises:
        FileNotFoundError: If the artifact does not exist.
        ArtifactError: If it cannot be read or decoded.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise ArtifactError(path, str(exc)) from exc
    return parse_artifact(raw, path)
