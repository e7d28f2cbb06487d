"""Reduction of parser metadata dumps to per-class property lists."""

import json
import re
from typing import Any

from modrepo.classes import is_ignored_class

_BLUEPRINT_CLASS = "BlueprintGeneratedClass"
_OBJ_NAME_RE = re.compile(r"^(.+?)'(.+?)'$", re.DOTALL)


class MetadataError(ValueError):
    """The metadata document does not have the expected shape."""


def split_name(name: str) -> tuple[str, str]:
    """Split ``Type'Name'`` into its type and name."""
    if not isinstance(name, str):
        raise MetadataError(f"object name is not a string: {name!r}")
    match = _OBJ_NAME_RE.match(name)
    if match is None:
        raise MetadataError(f"malformed object name: {name!r}")
    return match.group(1), match.group(2)


def rewrite_recursive(obj: Any) -> Any:
    """Collapse text, object references and soft paths into plain values."""
    if isinstance(obj, dict):
        if "CultureInvariantString" in obj:
            return obj["CultureInvariantString"]
        if "ObjectName" in obj and "ObjectPath" in obj:
            return split_name(obj["ObjectName"])[1]
        if "AssetPathName" in obj and "SubPathString" in obj:
            return obj["AssetPathName"]
        return {key: rewrite_recursive(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [rewrite_recursive(value) for value in obj]
    return obj


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise MetadataError(f"{what} is not a string")
    return value


def _extract_file(objects: list[dict[str, Any]]) -> dict[str, list[Any]]:
    blueprint_types: dict[str, str] = {}
    result: dict[str, list[Any]] = {}
    for index, obj in enumerate(objects):
        obj_type = obj.get("Type")
        if index == 0 and obj_type != _BLUEPRINT_CLASS:
            break

        if obj_type == _BLUEPRINT_CLASS:
            super_struct = obj.get("SuperStruct")
            if not isinstance(super_struct, dict):
                raise MetadataError("blueprint class without SuperStruct")
            super_name = _require_str(super_struct.get("ObjectName"), "SuperStruct.ObjectName")
            name = _require_str(obj.get("Name"), "Name")
            blueprint_types[name] = split_name(super_name)[1]
            continue

        properties = obj.get("Properties")
        if properties is None:
            continue
        class_type = _require_str(obj_type, "Type")
        if is_ignored_class(class_type):
            continue
        key = blueprint_types.get(class_type) or class_type
        result.setdefault(key, []).append(rewrite_recursive(properties))
    return result


def extract_metadata(raw: bytes | str) -> dict[str, dict[str, list[Any]]]:
    """Group the properties in a metadata dump by file and by class.

    The dump maps file names to lists of objects. Files whose first object is
    not a blueprint class yield nothing; objects of blueprint classes are filed
    under the class their blueprint derives from.
    """
    try:
        meta = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as exc:
        raise MetadataError(f"failed extracting meta: {exc}") from exc
    if meta is None:
        return {}
    if not isinstance(meta, dict):
        raise MetadataError("failed extracting meta: document is not an object")

    out: dict[str, dict[str, list[Any]]] = {}
    for file_name, objects in meta.items():
        if objects is None:
            continue
        if not isinstance(objects, list):
            raise MetadataError(f"failed extracting meta: {file_name} is not a list")
        normalized = []
        for obj in objects:
            if obj is None:
                obj = {}
            if not isinstance(obj, dict):
                raise MetadataError(f"failed extracting meta: {file_name} holds a non-object")
            normalized.append(obj)
        extracted = _extract_file(normalized)
        if extracted:
            out[file_name] = extracted
    return out