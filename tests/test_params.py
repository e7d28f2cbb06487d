import pytest

from modrepo.params import (
    FeatureFlag,
    flag_enabled,
    get_int_default,
    get_int_range,
    one_of,
    real_ip,
)


@pytest.mark.parametrize(
    "raw, expected",
    [("12", 12), ("+7", 7), ("-3", -3), ("abc", 99), ("", 99), (" 5", 99), ("1_0", 99), ("4.5", 99)],
)
def test_get_int_default(raw, expected):
    assert get_int_default({"limit": raw}, "limit", 99) == expected


def test_get_int_default_missing_param():
    assert get_int_default({}, "limit", 25) == 25


def test_get_int_default_overflow_falls_back():
    assert get_int_default({"n": "9" * 30}, "n", 4) == 4


def test_get_int_default_list_value_uses_first():
    assert get_int_default({"n": ["8", "9"]}, "n", 0) == 8


@pytest.mark.parametrize("raw, expected", [("500", 100), ("0", 1), ("50", 50), ("x", 25)])
def test_get_int_range(raw, expected):
    assert get_int_range({"limit": raw}, "limit", 1, 100, 25) == expected


def test_one_of_accepts_option():
    assert one_of({"order": "asc"}, "order", ["asc", "desc"], "desc") == "asc"


def test_one_of_rejects_unknown():
    assert one_of({"order": "sideways"}, "order", ["asc", "desc"], "desc") == "desc"
    assert one_of({}, "order", ["asc", "desc"], "desc") == "desc"


def test_real_ip_forwarded_for_first_entry():
    headers = {"X-Forwarded-For": "1.2.3.4, 5.6.7.8", "X-Real-IP": "9.9.9.9"}
    assert real_ip(headers, "10.0.0.1:80") == "1.2.3.4"


def test_real_ip_header_case_insensitive():
    assert real_ip({"x-real-ip": "9.9.9.9"}, "10.0.0.1:80") == "9.9.9.9"


@pytest.mark.parametrize(
    "remote, expected",
    [("10.0.0.1:8080", "10.0.0.1"), ("[::1]:80", "::1"), ("noport", ""), ("a:b:c", "")],
)
def test_real_ip_remote_addr(remote, expected):
    assert real_ip({}, remote) == expected


def test_flag_enabled_nested():
    config = {"feature_flags": {"allow_multi_target_upload": True}}
    assert flag_enabled(FeatureFlag.ALLOW_MULTI_TARGET_UPLOAD, config) is True


def test_flag_enabled_string_and_flat_key():
    assert flag_enabled(FeatureFlag.ALLOW_MULTI_TARGET_UPLOAD, {"feature_flags": {"allow_multi_target_upload": "true"}})
    assert flag_enabled("allow_multi_target_upload", {"feature_flags.allow_multi_target_upload": 1})


def test_flag_disabled_when_missing_or_false():
    assert flag_enabled(FeatureFlag.ALLOW_MULTI_TARGET_UPLOAD, {}) is False
    assert flag_enabled(FeatureFlag.ALLOW_MULTI_TARGET_UPLOAD, {"feature_flags": {"allow_multi_target_upload": "no"}}) is False