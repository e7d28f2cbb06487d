import hashlib
import io
import zipfile
from datetime import datetime, timedelta

import pytest

from modrepo.storage import (
    Backend,
    ModStorage,
    ObjectMeta,
    StorageError,
    StoredObject,
    clean_mod_name,
    encode_name,
    extract_target_archive,
    mod_key,
)

NOW = datetime(2024, 1, 1, 12, 0, 0)


class MemoryBackend(Backend):
    def __init__(self, put_failures=0):
        self.objects = {}
        self.uploads = {}
        self.put_failures = put_failures
        self.put_calls = 0
        self.listing_extra = []

    @staticmethod
    def _norm(key):
        return key.removeprefix("/")

    def get(self, key):
        return io.BytesIO(self.objects[self._norm(key)][0])

    def put(self, key, body):
        self.put_calls += 1
        if self.put_failures > 0:
            self.put_failures -= 1
            raise OSError("transient")
        self.objects[self._norm(key)] = (body.read(), NOW)
        return key

    def sign_get(self, key):
        return "https://cdn.example.com/" + self._norm(key)

    def sign_put(self, key):
        raise StorageError("Unsupported")

    def start_multipart_upload(self, key):
        self.uploads[self._norm(key)] = {}

    def upload_part(self, key, part, data):
        self.uploads[self._norm(key)][part] = data.read()

    def complete_multipart_upload(self, key):
        parts = self.uploads.pop(self._norm(key))
        self.objects[self._norm(key)] = (b"".join(parts[n] for n in sorted(parts)), NOW)

    def rename(self, source, destination):
        self.objects[self._norm(destination)] = self.objects[self._norm(source)]

    def delete(self, key):
        self.objects.pop(self._norm(key), None)

    def meta(self, key):
        data, _ = self.objects[self._norm(key)]
        return ObjectMeta(content_length=len(data), content_type="application/zip")

    def list(self, prefix):
        found = [
            StoredObject(key=key, last_modified=modified)
            for key, (_, modified) in self.objects.items()
            if key.startswith(prefix)
        ]
        return found + self.listing_extra


def make_zip(entries):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return buffer.getvalue()


def test_clean_mod_name_replaces_unsafe_characters():
    name = 'a b\\c:d*e?f"g<h>i|j;k/l'
    cleaned = clean_mod_name(name)
    assert len(cleaned) == len(name)
    assert not any(char in cleaned for char in ' \\:*?"<>|;/')
    assert cleaned.replace("_", "") == "abcdefghijkl"


def test_encode_name_pins_source_mapping():
    assert encode_name("%") == "%25"
    assert encode_name('"') == "%22"
    assert encode_name("#") == "%23"
    assert encode_name("+") == "%2B"
    assert encode_name("}") == "%7D"


def test_encode_name_percent_is_encoded_once():
    assert encode_name("?") == "%3F"
    assert encode_name("%3F") == "%253F"


def test_encode_name_leaves_plain_names():
    assert encode_name("Plain_Name-1.0.0") == "Plain_Name-1.0.0"


def test_mod_key_shape():
    key = mod_key("abc", "file")
    assert key.startswith("/mods/abc/")
    assert key.endswith("file.smod")


def test_extract_target_archive_selects_and_trims():
    body = make_zip(
        {
            "Windows/": b"",
            "Windows/Mod.pak": b"pak data",
            "Windows/Binaries/Mod.dll": b"dll data",
            "LinuxServer/Mod.so": b"so data",
            "readme.txt": b"text",
        }
    )
    result = zipfile.ZipFile(io.BytesIO(extract_target_archive(body, "Windows")))
    assert sorted(result.namelist()) == ["Binaries/Mod.dll", "Mod.pak"]
    assert result.read("Mod.pak") == b"pak data"
    assert result.read("Binaries/Mod.dll") == b"dll data"


def test_extract_target_archive_unknown_target_is_empty():
    body = make_zip({"Windows/Mod.pak": b"x"})
    result = zipfile.ZipFile(io.BytesIO(extract_target_archive(body, "LinuxServer")))
    assert result.namelist() == []


def test_extract_target_archive_rejects_invalid_zip():
    with pytest.raises(StorageError):
        extract_target_archive(b"not a zip", "Windows")


def test_without_backend_everything_fails():
    storage = ModStorage(None)
    assert storage.start_upload_multipart_mod("m", "n", "v") is None
    assert storage.upload_mod_logo("m", io.BytesIO(b"x")) is None
    assert storage.upload_user_avatar("u", io.BytesIO(b"x")) is None
    assert storage.generate_download_link("/k") == ""
    assert storage.delete_mod("m", "n", "v") is False
    assert storage.mod_version_meta("m", "n", "v") is None
    assert storage.separate_mod_target(b"", "m", "n", "v", "Windows") is None
    with pytest.raises(StorageError):
        storage.get("/k")
    with pytest.raises(StorageError):
        storage.list_mod_assets("ref")


def test_multipart_upload_roundtrip():
    backend = MemoryBackend()
    storage = ModStorage(backend)
    name = "My Mod+"
    started = storage.start_upload_multipart_mod("mod1", name, "ver1")
    assert started == mod_key("mod1", encode_name(clean_mod_name(name) + "-ver1"))
    assert storage.upload_multipart_mod("mod1", name, "ver1", 2, io.BytesIO(b"world")) == started
    assert storage.upload_multipart_mod("mod1", name, "ver1", 1, io.BytesIO(b"hello ")) == started
    assert storage.complete_upload_multipart_mod("mod1", name, "ver1") == started
    assert storage.get_mod("mod1", name, "ver1").read() == b"hello world"


def test_multipart_failure_returns_none():
    storage = ModStorage(MemoryBackend())
    assert storage.complete_upload_multipart_mod("mod1", "name", "ver1") is None


def test_upload_mod_logo_key():
    backend = MemoryBackend()
    storage = ModStorage(backend)
    key = storage.upload_mod_logo("mod1", io.BytesIO(b"img"))
    assert key == "/images/mods/mod1/logo.webp"
    assert storage.get(key).read() == b"img"


def test_upload_user_avatar_retries_then_succeeds():
    backend = MemoryBackend(put_failures=2)
    storage = ModStorage(backend)
    key = storage.upload_user_avatar("user1", io.BytesIO(b"avatar"))
    assert key == "/images/users/user1/avatar.webp"
    assert backend.put_calls == 3
    assert storage.get(key).read() == b"avatar"


def test_upload_user_avatar_gives_up_after_three_attempts():
    backend = MemoryBackend(put_failures=5)
    storage = ModStorage(backend)
    assert storage.upload_user_avatar("user1", io.BytesIO(b"avatar")) is None
    assert backend.put_calls == 3


def test_generate_download_link_and_failure():
    class FailingSign(MemoryBackend):
        def sign_get(self, key):
            raise StorageError("nope")

    assert ModStorage(MemoryBackend()).generate_download_link("/a/b").endswith("a/b")
    assert ModStorage(FailingSign()).generate_download_link("/a/b") == ""


def test_get_wraps_backend_errors():
    with pytest.raises(StorageError):
        ModStorage(MemoryBackend()).get("/missing")


def test_rename_version_moves_archive():
    backend = MemoryBackend()
    storage = ModStorage(backend)
    backend.put(mod_key("mod1", "Name-upload1"), io.BytesIO(b"zipdata"))
    new_key = storage.rename_version("mod1", "Name", "upload1", "1.0.0")
    assert new_key == mod_key("mod1", "Name-1.0.0")
    assert storage.get(new_key).read() == b"zipdata"
    with pytest.raises(StorageError):
        storage.get(mod_key("mod1", "Name-upload1"))


def test_delete_mod_and_target():
    backend = MemoryBackend()
    storage = ModStorage(backend)
    backend.put(mod_key("mod1", "Name-v1"), io.BytesIO(b"a"))
    backend.put(mod_key("mod1", "Name-Windows-v1"), io.BytesIO(b"b"))
    assert storage.delete_mod_target("mod1", "Name", "v1", "Windows") is True
    assert storage.delete_mod("mod1", "Name", "v1") is True
    assert backend.objects == {}


def test_mod_version_meta():
    backend = MemoryBackend()
    storage = ModStorage(backend)
    backend.put(mod_key("mod1", "Name-v1"), io.BytesIO(b"12345"))
    meta = storage.mod_version_meta("mod1", "Name", "v1")
    assert meta.content_length == 5
    assert storage.mod_version_meta("mod1", "Name", "v2") is None


def test_separate_mod_target_stores_hashed_archive():
    backend = MemoryBackend()
    storage = ModStorage(backend)
    body = make_zip({"Windows/Mod.pak": b"pak", "LinuxServer/Mod.so": b"so"})
    result = storage.separate_mod_target(body, "mod1", "My Mod", "1.0.0", "Windows")
    key, digest, size = result
    assert key == mod_key("mod1", encode_name(clean_mod_name("My Mod") + "-Windows-1.0.0"))
    stored = storage.get(key).read()
    assert hashlib.sha256(stored).hexdigest() == digest
    assert len(stored) == size
    assert zipfile.ZipFile(io.BytesIO(stored)).namelist() == ["Mod.pak"]


def test_separate_mod_target_invalid_zip():
    storage = ModStorage(MemoryBackend())
    assert storage.separate_mod_target(b"junk", "m", "n", "v", "Windows") is None


def test_upload_and_list_mod_assets_sorted():
    backend = MemoryBackend()
    storage = ModStorage(backend)
    storage.upload_mod_asset("Ref", "/z/last.png", b"1")
    storage.upload_mod_asset("Ref", "a/first.png", b"2")
    storage.upload_mod_asset("Other", "x.png", b"3")
    assets = storage.list_mod_assets("Ref")
    assert assets == sorted(assets)
    assert len(assets) == 2
    assert all(asset.startswith("assets/mods/Ref/") for asset in assets)
    assert assets[0].endswith("a/first.png")


def test_list_mod_assets_keeps_empty_entry_for_missing_key():
    backend = MemoryBackend()
    backend.listing_extra = [StoredObject(key=None)]
    storage = ModStorage(backend)
    storage.upload_mod_asset("Ref", "a.png", b"1")
    assets = storage.list_mod_assets("Ref")
    assert assets[0] == ""
    assert len(assets) == 2


def test_delete_old_mod_assets_respects_cutoff():
    backend = MemoryBackend()
    storage = ModStorage(backend)
    backend.objects["assets/mods/Ref/old.png"] = (b"o", NOW - timedelta(hours=1))
    backend.objects["assets/mods/Ref/new.png"] = (b"n", NOW + timedelta(hours=1))
    backend.objects["assets/mods/Ref/unknown.png"] = (b"u", None)
    backend.objects["assets/mods/Other/old.png"] = (b"x", NOW - timedelta(hours=1))
    storage.delete_old_mod_assets("Ref", NOW)
    assert sorted(backend.objects) == ["assets/mods/Other/old.png", "assets/mods/Ref/new.png"]