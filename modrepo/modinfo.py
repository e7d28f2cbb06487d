"""Reading and validating the description of an uploaded mod archive."""

from __future__ import annotations

import hashlib
import io
import json
import posixpath
import zipfile
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping

import jsonschema
from semver import Version as SemVersion

MAX_ARCHIVE_SIZE = 1_000_000_000
ALLOWED_TARGETS = ("Windows", "WindowsServer", "LinuxServer")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ModType(IntEnum):
    """How a mod archive describes itself."""

    DATA_JSON = 0
    UE_PLUGIN = 1
    MULTI_TARGET_UE_PLUGIN = 2


@dataclass
class ModObject:
    """A file of the archive that the mod loader uses."""

    path: str = ""
    type: str = ""


@dataclass
class ModInfo:
    """Everything learned about a mod from its archive."""

    mod_reference: str = ""
    version: str = ""
    sml_version: str = ""
    dependencies: dict[str, str] = field(default_factory=dict)
    optional_dependencies: dict[str, str] = field(default_factory=dict)
    objects: list[ModObject] = field(default_factory=list)
    targets: list[str] = field(default_factory=list)
    semver: SemVersion | None = None
    hash: str = ""
    size: int = 0
    type: ModType = ModType.DATA_JSON


class ModValidationError(ValueError):
    """The archive is not an acceptable mod."""


class _DecodeError(Exception):
    pass


def _lookup(doc: Mapping[str, Any], name: str) -> Any:
    if name in doc:
        return doc[name]
    lowered = name.lower()
    for key, value in doc.items():
        if key.lower() == lowered:
            return value
    return None


def _string(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _DecodeError
    return value


def _optional_string(value: Any) -> str | None:
    if value is None:
        return None
    return _string(value)


def _optional_bool(value: Any) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise _DecodeError
    return value


def _int64(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise _DecodeError
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise _DecodeError
    return value


def _object(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _DecodeError
    return value


def _list(value: Any) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise _DecodeError
    return value


def _string_map(value: Any) -> dict[str, str]:
    return {key: _string(item) for key, item in _object(value).items()}


def _read(archive: zipfile.ZipFile, entry: zipfile.ZipInfo) -> bytes:
    try:
        return archive.read(entry)
    except (zipfile.BadZipFile, OSError, RuntimeError, ValueError) as exc:
        raise ModValidationError("invalid zip archive") from exc


def _schema_errors(schema: Mapping[str, Any] | None, raw: bytes, name: str) -> list[str]:
    """Return the schema violations of ``raw``; raise if it cannot be checked at all."""
    if schema is None:
        return []
    prefix = f"{name} doesn't follow schema. please view the help page. ("
    try:
        document = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ModValidationError(prefix + str(exc) + ")") from exc
    try:
        validator_cls = jsonschema.validators.validator_for(schema)
        validator_cls.check_schema(schema)
        return [error.message for error in validator_cls(schema).iter_errors(document)]
    except jsonschema.exceptions.SchemaError as exc:
        raise ModValidationError(prefix + exc.message + ")") from exc


def _check_schema(
    schema: Mapping[str, Any] | None, raw: bytes, name: str, with_validation: bool
) -> None:
    errors = _schema_errors(schema, raw, name)
    if with_validation and errors:
        raise ModValidationError(
            f"{name} doesn't follow schema. please view the help page. ([{' '.join(errors)}])"
        )


def _sml_version(info: ModInfo, name: str, with_validation: bool) -> None:
    if with_validation and not info.dependencies:
        raise ModValidationError(f"{name} doesn't contain SML as a dependency.")
    if "SML" in info.dependencies:
        info.sml_version = info.dependencies["SML"]
    if not info.sml_version:
        raise ModValidationError(f"{name} doesn't contain SML as a dependency.")


def _validate_data_json(
    archive: zipfile.ZipFile,
    entry: zipfile.ZipInfo,
    with_validation: bool,
    schema: Mapping[str, Any] | None,
) -> ModInfo:
    raw = _read(archive, entry)
    _check_schema(schema, raw, "data.json", with_validation)

    try:
        doc = _object(json.loads(raw))
        info = ModInfo(
            mod_reference=_string(_lookup(doc, "mod_reference")),
            version=_string(_lookup(doc, "version")),
            sml_version=_string(_lookup(doc, "sml_version")),
            dependencies=_string_map(_lookup(doc, "dependencies")),
            optional_dependencies=_string_map(_lookup(doc, "optional_dependencies")),
        )
        for item in _list(_lookup(doc, "objects")):
            obj = _object(item)
            info.objects.append(
                ModObject(path=_string(_lookup(obj, "path")), type=_string(_lookup(obj, "type")))
            )
    except (_DecodeError, ValueError, UnicodeDecodeError) as exc:
        raise ModValidationError("invalid data.json") from exc

    _sml_version(info, "data.json", with_validation)

    referenced = {obj.path for obj in info.objects}
    names = [item.filename for item in archive.infolist()]
    for name in names:
        if name.endswith((".dll", ".pak", ".so")) and name not in referenced:
            raise ModValidationError("zip archive contains unreferenced objects: " + name)

    existing = set(names)
    for obj in info.objects:
        if obj.path not in existing:
            raise ModValidationError("data.json objects refer to non-existent path: " + obj.path)

    info.type = ModType.DATA_JSON
    return info


def _validate_uplugin(
    archive: zipfile.ZipFile,
    entry: zipfile.ZipInfo,
    with_validation: bool,
    mod_reference: str,
    schema: Mapping[str, Any] | None,
) -> ModInfo:
    name = entry.filename
    raw = _read(archive, entry)
    _check_schema(schema, raw, name, with_validation)

    try:
        doc = _object(json.loads(raw))
        sem_version = _optional_string(_lookup(doc, "SemVersion"))
        plugin_version = _int64(_lookup(doc, "Version"))
        plugins = []
        for item in _list(_lookup(doc, "Plugins")):
            plugin = _object(item)
            plugins.append(
                (
                    _optional_bool(_lookup(plugin, "bIsBasePlugin")),
                    _optional_bool(_lookup(plugin, "bIsOptional")),
                    _string(_lookup(plugin, "Name")),
                    _string(_lookup(plugin, "SemVersion")),
                )
            )
    except (_DecodeError, ValueError, UnicodeDecodeError) as exc:
        raise ModValidationError("invalid " + name) from exc

    info = ModInfo(mod_reference=mod_reference)

    if sem_version is not None:
        info.version = sem_version
        if sem_version.split(".")[0] != str(plugin_version):
            raise ModValidationError("SemVer major version should match Version")
    else:
        info.version = f"{plugin_version}.0.0"

    for is_base, is_optional, plugin_name, plugin_semver in plugins:
        if is_base:
            continue
        if is_optional:
            info.optional_dependencies[plugin_name] = plugin_semver
        else:
            info.dependencies[plugin_name] = plugin_semver

    for item in archive.infolist():
        extension = item.filename.split(".")[-1]
        if extension == "pak":
            info.objects.append(ModObject(path=item.filename, type="pak"))
        elif extension in ("dll", "so"):
            info.objects.append(ModObject(path=item.filename, type="sml_mod"))

    _sml_version(info, name, with_validation)

    info.type = ModType.UE_PLUGIN
    return info


def _base(name: str) -> str:
    stripped = name.rstrip("/")
    if not stripped:
        return "/" if name else "."
    return posixpath.basename(stripped)


def _dir(name: str) -> str:
    return posixpath.normpath(posixpath.dirname(name))


def _validate_multi_target(
    archive: zipfile.ZipFile,
    with_validation: bool,
    mod_reference: str,
    schema: Mapping[str, Any] | None,
) -> ModInfo:
    plugin_name = mod_reference + ".uplugin"
    targets: list[str] = []
    plugin_files: list[zipfile.ZipInfo] = []
    for item in archive.infolist():
        if _base(item.filename) == plugin_name and _dir(item.filename) != ".":
            targets.append(_dir(item.filename))
            plugin_files.append(item)

    if with_validation:
        for target in targets:
            if target not in ALLOWED_TARGETS:
                raise ModValidationError("multi-target plugin contains invalid target: " + target)
        prefixes = tuple(target + "/" for target in targets)
        for item in archive.infolist():
            if not prefixes or not item.filename.startswith(prefixes):
                raise ModValidationError(
                    "multi-target plugin contains file outside of target directories: "
                    + item.filename
                )

    if not plugin_files:
        raise ModValidationError("multi-target plugin doesn't contain any .uplugin files")

    if with_validation:
        contents = {_read(archive, item) for item in plugin_files}
        if len(contents) > 1:
            raise ModValidationError("multi-target plugin contains different .uplugin files")

    try:
        info = _validate_uplugin(archive, plugin_files[0], with_validation, mod_reference, schema)
    except ModValidationError as exc:
        raise ModValidationError(f"failed to validate multi-target plugin: {exc}") from exc

    info.targets = targets
    info.type = ModType.MULTI_TARGET_UE_PLUGIN
    return info


def extract_mod_info(
    body: bytes,
    mod_reference: str,
    with_validation: bool = True,
    data_schema: Mapping[str, Any] | None = None,
    uplugin_schema: Mapping[str, Any] | None = None,
) -> ModInfo:
    """Read the mod description from an archive and check it.

    The archive is described by ``data.json``, by ``<mod_reference>.uplugin`` at
    its root, or by one such plugin file per target directory. Schemas, when
    given, are JSON schemas for the two description formats. Raises
    ModValidationError when the archive is not acceptable.
    """
    if len(body) > MAX_ARCHIVE_SIZE:
        raise ModValidationError("mod archive must be < 1GB")

    try:
        archive = zipfile.ZipFile(io.BytesIO(body))
    except (zipfile.BadZipFile, ValueError, OSError) as exc:
        raise ModValidationError("invalid zip archive") from exc

    with archive:
        data_file = None
        plugin_file = None
        for item in archive.infolist():
            if item.filename == "data.json":
                data_file = item
                break
            if item.filename == mod_reference + ".uplugin":
                plugin_file = item
                break

        info: ModInfo | None = None
        if data_file is not None:
            info = _validate_data_json(archive, data_file, with_validation, data_schema)
        if plugin_file is not None:
            info = _validate_uplugin(
                archive, plugin_file, with_validation, mod_reference, uplugin_schema
            )
        if info is None:
            info = _validate_multi_target(archive, with_validation, mod_reference, uplugin_schema)

    if info is None:
        raise ModValidationError(f"missing {mod_reference}.uplugin or data.json")

    info.size = len(body)
    info.hash = hashlib.sha256(body).hexdigest()

    try:
        info.semver = SemVersion.parse(info.version)
    except (ValueError, TypeError) as exc:
        raise ModValidationError(f"error parsing semver: {exc}") from exc

    return info