"""Key-value cache operations on top of a Redis client."""

import base64
import gzip
import json
import struct
from datetime import timedelta
from typing import Any

from modrepo.hashing import xxhash64

_NONCE_TTL = timedelta(minutes=10)
_MULTIPART_TTL = timedelta(minutes=60)
_UPLOAD_STATE_TTL = timedelta(minutes=10)
_ASSET_LIST_TTL = timedelta(hours=24)


class NonceExpiredError(LookupError):
    """The login nonce is unknown or has expired."""


class VersionUploadFailed(Exception):
    """A stored version upload state carries an error."""

    def __init__(self, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.data = data


def _text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _raw_b64(key: str) -> str:
    return base64.b64encode(key.encode("utf-8")).decode("ascii").rstrip("=")


def _parts_key(key: str) -> str:
    return "s3:uploads:part:" + _raw_b64(key)


class CacheStore:
    """Rate counters, nonces, upload bookkeeping and cached lists kept in Redis."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def can_increment(self, ip: str, action: str, obj: str, expiration: timedelta | int) -> bool:
        """Claim the one-per-period slot for ``ip`` on ``action`` of ``obj``."""
        digest = struct.pack("<Q", xxhash64(ip))
        key = f"{obj}:{action}:{base64.urlsafe_b64encode(digest).decode('ascii')}"
        return bool(self.client.set(key, 1, ex=expiration, nx=True))

    def store_nonce(self, nonce: str, redirect_uri: str) -> None:
        self.client.set("nonce:" + nonce, redirect_uri, ex=_NONCE_TTL)

    def get_nonce(self, nonce: str) -> str:
        """Return the redirect URI stored with ``nonce``."""
        value = self.client.get("nonce:" + nonce)
        if value is None:
            raise NonceExpiredError("failed to get nonce")
        return _text(value)

    def get_all_keys(self) -> list[str]:
        return [_text(key) for key in self.client.keys("*")]

    def store_multipart_completed_part(self, key: str, etag: str, part: int) -> None:
        redis_key = _parts_key(key)
        self.client.hset(redis_key, mapping={str(part): etag})
        self.client.expire(redis_key, _MULTIPART_TTL)

    def get_and_clear_multipart_completed_parts(self, key: str) -> dict[str, str]:
        """Return the completed parts of an upload, mapping part number to ETag, and forget them."""
        redis_key = _parts_key(key)
        parts = self.client.hgetall(redis_key) or {}
        self.client.delete(redis_key)
        return {_text(number): _text(etag) for number, etag in parts.items()}

    def store_multipart_upload_id(self, key: str, upload_id: str) -> None:
        self.client.set(_parts_key(key) + ":id", upload_id, ex=_MULTIPART_TTL)

    def get_multipart_upload_id(self, key: str) -> str:
        """Return the multipart upload id for ``key``, or an empty string."""
        value = self.client.get(_parts_key(key) + ":id")
        return "" if value is None else _text(value)

    def store_version_upload_state(
        self, version_id: str, data: Any, error: BaseException | str | None
    ) -> None:
        state = {"data": data, "err": str(error) if error else ""}
        self.client.set(
            "version:upload:state:" + version_id,
            json.dumps(state, separators=(",", ":")),
            ex=_UPLOAD_STATE_TTL,
        )

    def get_version_upload_state(self, version_id: str) -> Any:
        """Return the stored upload result, ``None`` if absent.

        Raises VersionUploadFailed when the stored state records an error.
        """
        value = self.client.get("version:upload:state:" + version_id)
        if value is None:
            return None
        try:
            state = json.loads(_text(value))
        except ValueError:
            state = {}
        if not isinstance(state, dict):
            state = {}
        data = state.get("data")
        error = state.get("err") or ""
        if error:
            raise VersionUploadFailed(str(error), data)
        return data

    def flush(self) -> None:
        self.client.flushdb()

    def store_mod_asset_list(self, mod_reference: str, assets: list[str]) -> None:
        payload = gzip.compress(json.dumps(list(assets), separators=(",", ":")).encode("utf-8"))
        self.client.set(f"assets:{mod_reference}", payload, ex=_ASSET_LIST_TTL)

    def get_mod_asset_list(self, mod_reference: str) -> list[str] | None:
        """Return the cached asset list, or ``None`` if it is absent or unreadable."""
        value = self.client.get(f"assets:{mod_reference}")
        if value is None:
            return None
        raw = value if isinstance(value, bytes) else str(value).encode("latin-1", "replace")
        try:
            unpacked = gzip.decompress(raw)
        except (OSError, EOFError):
            return None
        try:
            assets = json.loads(unpacked)
        except ValueError:
            return []
        if not isinstance(assets, list):
            return []
        return [item for item in assets if isinstance(item, str)]