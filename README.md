# modrepo

Building blocks for the backend of a game mod repository: parsing request
parameters, keeping short-lived state in a Redis-style key-value store,
laying out mod files in object storage, carrying background-job payloads,
and validating uploaded mod archives.

## Installation

```
pip install modrepo
```

For the test suite:

```
pip install "modrepo[test]"
pytest
```

## What is inside

- `modrepo.randomness`: `random_string`, `random_string_with_charset` and
  `generate_unique_id`, a base58 identifier built from the current time in
  milliseconds and four random bytes (see also `put_uint48` and
  `base58_encode`).
- `modrepo.params`: query parameter helpers `get_int_default`,
  `get_int_range` and `one_of`, client address lookup with `real_ip`
  (`X-Forwarded-For`, then `X-Real-IP`, then the peer address), and feature
  flags through `FeatureFlag` and `flag_enabled`.
- `modrepo.hashing`: `xxhash64`, the 64-bit xxHash, used to anonymise
  client addresses.
- `modrepo.tasks`: `ModVersionTask`, `CopyObjectTask` and `ScanModTask`
  job payloads, serialised to JSON with `encode_task` and read back with
  `decode_task`.
- `modrepo.cache`: `CacheStore`, wrapping a Redis client you pass in, for
  view and download de-duplication (`can_increment`), OAuth nonces
  (`NonceExpiredError` when one is unknown or expired), multipart upload
  bookkeeping, version upload state (`VersionUploadFailed` when the stored
  state records an error) and gzip-compressed asset lists.
- `modrepo.storage`: `ModStorage` on top of any `Backend` implementation,
  with key helpers `clean_mod_name`, `encode_name` and `mod_key`, and
  `extract_target_archive` to cut one platform target out of a
  multi-target archive. Failures raise `StorageError`; metadata and
  listings come back as `ObjectMeta` and `StoredObject`.
- `modrepo.classes`, `modrepo.inheritance`: game class knowledge
  (`is_ignored_class`, `get_tree_size`, `is_a`, `trim`).
- `modrepo.extractor`: `extract_metadata` turns a parser's JSON metadata
  dump into per-file, per-class property lists (`split_name`,
  `rewrite_recursive`, `MetadataError`).
- `modrepo.modinfo`: `extract_mod_info` reads a mod archive (a
  `data.json` mod, a single `.uplugin` mod or a multi-target plugin) and
  returns a `ModInfo` with its `ModType`, `ModObject` list, dependencies,
  parsed semantic version, size and SHA-256 hash, or raises
  `ModValidationError`.

## Example

```python
from modrepo.modinfo import extract_mod_info

with open("MyMod.zip", "rb") as handle:
    info = extract_mod_info(handle.read(), "MyMod", True, data_schema, uplugin_schema)

print(info.version, info.sml_version, info.type)
```

`CacheStore` needs a client with the redis-py interface (`set`, `get`,
`hset`, `hgetall`, `expire`, `delete`, `keys`, `flushdb`). The client library
is not a dependency of this package; install one yourself:

```python
import redis
from modrepo.cache import CacheStore

cache = CacheStore(redis.Redis())
if cache.can_increment("203.0.113.7", "download", "version:abc", 4 * 3600):
    ...
```

## What this package does not do

It is a library, not a service. It has no HTTP server or routes, no
database layer, no OAuth login flow, no job queue runner, no malware
scanning and no image conversion. `ModStorage` ships without a concrete
cloud storage backend: supply your own `Backend` subclass. Game asset
packages are not parsed here; `extract_metadata` works on a JSON dump
produced elsewhere.