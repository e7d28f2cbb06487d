"""Object storage for mod archives, images and extracted assets."""

from __future__ import annotations

import hashlib
import io
import logging
import zipfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO

log = logging.getLogger(__name__)

_AVATAR_ATTEMPTS = 3

_CLEAN_TABLE = str.maketrans({char: "_" for char in ' \\:*?"<>|;/'})

_ENCODE_TABLE = str.maketrans(
    {
        "%": "%25",
        '"': "%22",
        "#": "%23",
        "&": "%26",
        "+": "%2B",
        ",": "%2C",
        "<": "%3C",
        ">": "%3E",
        "?": "%3F",
        "[": "%5B",
        "\\": "%5C",
        "]": "%5D",
        "^": "%5E",
        "`": "%60",
        "{": "%7B",
        "|": "%7C",
        "}": "%7D",
    }
)


class StorageError(Exception):
    """A storage operation could not be carried out."""


@dataclass
class ObjectMeta:
    """Size and type of a stored object, where the backend knows them."""

    content_length: int | None = None
    content_type: str | None = None


@dataclass
class StoredObject:
    """One entry of a listing."""

    key: str | None = None
    last_modified: datetime | None = None


class Backend(ABC):
    """A blob store. Methods raise on failure."""

    @abstractmethod
    def get(self, key: str) -> BinaryIO:
        """Open the object at ``key`` for reading."""

    @abstractmethod
    def put(self, key: str, body: BinaryIO) -> str:
        """Store ``body`` under ``key`` and return the key it was stored under."""

    @abstractmethod
    def sign_get(self, key: str) -> str:
        """Return a URL from which ``key`` can be downloaded."""

    @abstractmethod
    def sign_put(self, key: str) -> str:
        """Return a URL to which ``key`` can be uploaded."""

    @abstractmethod
    def start_multipart_upload(self, key: str) -> None:
        """Begin a multipart upload of ``key``."""

    @abstractmethod
    def upload_part(self, key: str, part: int, data: BinaryIO) -> None:
        """Upload part number ``part`` (counting from 1) of ``key``."""

    @abstractmethod
    def complete_multipart_upload(self, key: str) -> None:
        """Assemble the uploaded parts of ``key``."""

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """Copy ``source`` to ``destination``."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key`` and all its versions."""

    @abstractmethod
    def meta(self, key: str) -> ObjectMeta:
        """Return metadata of ``key``."""

    @abstractmethod
    def list(self, prefix: str) -> list[StoredObject]:
        """List the objects whose keys start with ``prefix``."""


def clean_mod_name(name: str) -> str:
    """Replace characters unsafe in file names with underscores."""
    return name.translate(_CLEAN_TABLE)


def encode_name(name: str) -> str:
    """Percent-encode characters that are unsafe in a URL path segment."""
    return name.translate(_ENCODE_TABLE)


def mod_key(mod_id: str, filename: str) -> str:
    """Return the storage key of a mod archive."""
    return f"/mods/{mod_id}/{filename}.smod"


def extract_target_archive(body: bytes, target: str) -> bytes:
    """Build a zip holding only the entries under ``target/``, with that prefix removed."""
    try:
        source = zipfile.ZipFile(io.BytesIO(body))
    except (zipfile.BadZipFile, ValueError) as exc:
        raise StorageError("invalid zip archive") from exc

    prefix = target + "/"
    output = io.BytesIO()
    with source, zipfile.ZipFile(output, "w") as destination:
        for entry in source.infolist():
            if not entry.filename.startswith(prefix):
                continue
            new_name = entry.filename[len(prefix) :]
            if not new_name:
                continue
            try:
                data = source.read(entry)
            except (zipfile.BadZipFile, OSError, RuntimeError) as exc:
                raise StorageError(f"failed to read file {entry.filename}") from exc
            info = zipfile.ZipInfo(new_name, entry.date_time)
            info.compress_type = entry.compress_type
            info.external_attr = entry.external_attr
            info.comment = entry.comment
            destination.writestr(info, data)
    return output.getvalue()


class ModStorage:
    """Mod-level storage operations over an optional backend.

    With no backend every operation reports failure, as an unconfigured store would.
    """

    def __init__(self, backend: Backend | None) -> None:
        self.backend = backend

    def _require(self) -> Backend:
        if self.backend is None:
            raise StorageError("storage not initialized")
        return self.backend

    def _multipart(self, action: str, mod_id: str, name: str, version_id: str, call) -> str | None:
        if self.backend is None:
            return None
        filename = clean_mod_name(name) + "-" + version_id
        try:
            call(mod_key(mod_id, filename))
        except Exception:
            log.exception("failed to upload mod (%s)", action)
            return None
        return mod_key(mod_id, encode_name(filename))

    def start_upload_multipart_mod(self, mod_id: str, name: str, version_id: str) -> str | None:
        """Start a multipart upload; return the encoded key, or ``None`` on failure."""
        return self._multipart(
            "start", mod_id, name, version_id,
            lambda key: self._require().start_multipart_upload(key),
        )

    def upload_multipart_mod(
        self, mod_id: str, name: str, version_id: str, part: int, data: BinaryIO
    ) -> str | None:
        """Upload one part; return the encoded key, or ``None`` on failure."""
        return self._multipart(
            "part", mod_id, name, version_id,
            lambda key: self._require().upload_part(key, part, data),
        )

    def complete_upload_multipart_mod(self, mod_id: str, name: str, version_id: str) -> str | None:
        """Finish a multipart upload; return the encoded key, or ``None`` on failure."""
        return self._multipart(
            "complete", mod_id, name, version_id,
            lambda key: self._require().complete_multipart_upload(key),
        )

    def upload_mod_logo(self, mod_id: str, data: BinaryIO) -> str | None:
        """Store a mod logo; return its key, or ``None`` on failure."""
        if self.backend is None:
            return None
        try:
            return self.backend.put(f"/images/mods/{mod_id}/logo.webp", data)
        except Exception:
            log.exception("failed to upload mod logo")
            return None

    def upload_user_avatar(self, user_id: str, data: BinaryIO) -> str | None:
        """Store a user avatar, trying up to three times; return its key or ``None``."""
        if self.backend is None:
            return None
        key = f"/images/users/{user_id}/avatar.webp"
        start = data.tell() if data.seekable() else None
        last_error: Exception | None = None
        for attempt in range(1, _AVATAR_ATTEMPTS + 1):
            if start is not None:
                data.seek(start)
            try:
                return self.backend.put(key, data)
            except Exception as exc:
                last_error = exc
                if attempt < _AVATAR_ATTEMPTS:
                    log.warning("failed to upload user avatar, retrying [%d]: %s", attempt, exc)
        log.error("failed to upload user avatar: %s", last_error)
        return None

    def generate_download_link(self, key: str) -> str:
        """Return a download URL for ``key``, or an empty string on failure."""
        if self.backend is None:
            return ""
        try:
            return self.backend.sign_get(key)
        except Exception:
            return ""

    def get(self, key: str) -> BinaryIO:
        """Open a stored object; raises StorageError on failure."""
        backend = self._require()
        try:
            return backend.get(key)
        except Exception as exc:
            raise StorageError("failed to get object") from exc

    def get_mod(self, mod_id: str, name: str, version_id: str) -> BinaryIO:
        """Open the archive of a mod version."""
        return self.get(mod_key(mod_id, clean_mod_name(name) + "-" + version_id))

    def rename_version(self, mod_id: str, name: str, version_id: str, version: str) -> str | None:
        """Move an archive from its upload id to its version; return the new encoded key."""
        if self.backend is None:
            return None
        clean = clean_mod_name(name)
        source = mod_key(mod_id, encode_name(clean) + "-" + version_id)
        destination = mod_key(mod_id, clean + "-" + version)
        log.info("Renaming file from %s to %s", source, destination)
        try:
            self.backend.rename(source, destination)
        except Exception:
            log.exception("failed to rename version")
            return None
        try:
            self.backend.delete(mod_key(mod_id, clean + "-" + version_id))
        except Exception:
            log.exception("failed to delete version")
            return None
        return mod_key(mod_id, encode_name(clean + "-" + version))

    def _delete(self, key: str, what: str) -> bool:
        if self.backend is None:
            return False
        log.info("deleting %s %s", what, key)
        try:
            self.backend.delete(key)
        except Exception:
            log.exception("failed to delete %s", what)
            return False
        return True

    def delete_mod(self, mod_id: str, name: str, version_id: str) -> bool:
        """Delete the archive of a mod version."""
        return self._delete(mod_key(mod_id, clean_mod_name(name) + "-" + version_id), "version")

    def delete_mod_target(self, mod_id: str, name: str, version_id: str, target: str) -> bool:
        """Delete the archive of one target of a mod version."""
        key = mod_key(mod_id, clean_mod_name(name) + "-" + target + "-" + version_id)
        return self._delete(key, "version target")

    def mod_version_meta(self, mod_id: str, name: str, version_id: str) -> ObjectMeta | None:
        """Return metadata of a mod version archive, or ``None`` on failure."""
        if self.backend is None:
            return None
        try:
            return self.backend.meta(mod_key(mod_id, clean_mod_name(name) + "-" + version_id))
        except Exception:
            log.exception("failed to get version meta")
            return None

    def separate_mod_target(
        self, body: bytes, mod_id: str, name: str, mod_version: str, target: str
    ) -> tuple[str, str, int] | None:
        """Store the ``target`` part of an archive on its own.

        Returns the encoded key, the SHA-256 hex digest and the size of the new
        archive, or ``None`` on failure.
        """
        if self.backend is None:
            return None
        try:
            archive = extract_target_archive(body, target)
        except StorageError:
            log.exception("failed to build %s archive", target)
            return None
        filename = clean_mod_name(name) + "-" + target + "-" + mod_version
        try:
            self.backend.put(mod_key(mod_id, filename), io.BytesIO(archive))
        except Exception:
            log.exception("failed to save %s archive", target)
            return None
        digest = hashlib.sha256(archive).hexdigest()
        return mod_key(mod_id, encode_name(filename)), digest, len(archive)

    def delete_old_mod_assets(self, mod_reference: str, before: datetime) -> None:
        """Delete assets of a mod last modified before ``before`` or of unknown age."""
        if self.backend is None:
            return
        try:
            objects = self.backend.list(f"assets/mods/{mod_reference}")
        except Exception:
            log.exception("failed to list assets")
            return
        for obj in objects:
            if obj.key is None:
                continue
            if obj.last_modified is None or obj.last_modified < before:
                try:
                    self.backend.delete(obj.key)
                except Exception:
                    log.exception("failed deleting old asset %s", obj.key)
                    return

    def upload_mod_asset(self, mod_reference: str, path: str, data: bytes) -> None:
        """Store one extracted asset of a mod; failures are logged."""
        if self.backend is None:
            return
        key = f"/assets/mods/{mod_reference}/{path.removeprefix('/')}"
        try:
            self.backend.put(key, io.BytesIO(data))
        except Exception:
            log.exception("failed to upload mod asset %s", path)

    def list_mod_assets(self, mod_reference: str) -> list[str]:
        """Return the sorted keys of a mod's assets; entries without a key are empty strings."""
        if self.backend is None:
            raise StorageError("no storage defined")
        try:
            objects = self.backend.list(f"assets/mods/{mod_reference}")
        except Exception as exc:
            raise StorageError("failed to list assets") from exc
        return sorted(obj.key or "" for obj in objects)