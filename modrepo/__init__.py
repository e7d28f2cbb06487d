"""Mod repository building blocks: request parameters, caching, storage layout, job payloads and archive validation."""

__version__ = "0.1.0"