"""Payloads of background jobs and their JSON encoding."""

import json
from dataclasses import asdict, dataclass, fields
from typing import Any, TypeVar


@dataclass
class ModVersionTask:
    """Refresh stored data of one mod version."""

    mod_id: str = ""
    version_id: str = ""


@dataclass
class CopyObjectTask:
    """Copy one stored object between buckets."""

    key: str = ""


@dataclass
class ScanModTask:
    """Scan a mod version for malware, optionally approving it afterwards."""

    mod_id: str = ""
    version_id: str = ""
    approve_after: bool = False


Task = TypeVar("Task", ModVersionTask, CopyObjectTask, ScanModTask)


def encode_task(task: Any) -> bytes:
    """Serialise a task payload to compact JSON bytes."""
    return json.dumps(asdict(task), separators=(",", ":")).encode("utf-8")


def decode_task(cls: type[Task], payload: bytes | str) -> Task:
    """Build a task of type ``cls`` from a JSON payload."""
    try:
        raw = json.loads(payload)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ValueError("failed to unmarshal task") from exc
    if not isinstance(raw, dict):
        raise ValueError("failed to unmarshal task: payload is not an object")
    values = {}
    for field in fields(cls):
        value = raw.get(field.name)
        if value is None:
            continue
        if type(value) is not field.type:
            raise ValueError(f"failed to unmarshal task: {field.name} has the wrong type")
        values[field.name] = value
    return cls(**values)