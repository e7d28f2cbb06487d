"""Query parameter parsing, client address detection and feature flags."""

import re
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1
_TRUE_STRINGS = {"1", "t", "T", "TRUE", "true", "True"}


class FeatureFlag(str, Enum):
    """Switchable features read from the ``feature_flags`` configuration section."""

    ALLOW_MULTI_TARGET_UPLOAD = "allow_multi_target_upload"


def _first(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return str(value[0]) if value else ""
    return str(value)


def _param(params: Mapping[str, Any], name: str) -> str:
    return _first(params.get(name))


def get_int_default(params: Mapping[str, Any], name: str, default: int) -> int:
    """Parse query parameter ``name`` as a decimal integer, else return ``default``."""
    raw = _param(params, name)
    if not _INT_RE.fullmatch(raw):
        return default
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        return default
    return value


def get_int_range(
    params: Mapping[str, Any], name: str, minimum: int, maximum: int, default: int
) -> int:
    """Parse an integer parameter and clamp it to ``[minimum, maximum]``."""
    value = get_int_default(params, name, default)
    if value > maximum:
        return maximum
    if value < minimum:
        return minimum
    return value


def one_of(params: Mapping[str, Any], name: str, options: Iterable[str], default: str) -> str:
    """Return the parameter if it is one of ``options``, otherwise ``default``."""
    actual = _param(params, name)
    return actual if actual in options else default


def _header(headers: Mapping[str, Any], name: str) -> str:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return _first(value)
    return ""


def _split_host(address: str) -> str:
    if address.startswith("["):
        end = address.find("]")
        if end < 0 or address[end + 1 : end + 2] != ":":
            return ""
        return address[1:end]
    host, sep, _ = address.rpartition(":")
    if not sep or ":" in host:
        return ""
    return host


def real_ip(headers: Mapping[str, Any], remote_addr: str) -> str:
    """Return the client address from forwarding headers or the peer address."""
    forwarded = _header(headers, "X-Forwarded-For")
    if forwarded:
        return forwarded.split(", ")[0]
    real = _header(headers, "X-Real-IP")
    if real:
        return real
    return _split_host(remote_addr)


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip() in _TRUE_STRINGS
    return False


def flag_enabled(flag: FeatureFlag | str, config: Mapping[str, Any]) -> bool:
    """Tell whether ``feature_flags.<flag>`` is switched on in ``config``."""
    name = flag.value if isinstance(flag, FeatureFlag) else str(flag)
    section = config.get("feature_flags")
    if isinstance(section, Mapping) and name in section:
        return _as_bool(section[name])
    return _as_bool(config.get(f"feature_flags.{name}"))