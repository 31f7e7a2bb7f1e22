"""Data access layer. Upper layers never talk HTTP themselves."""

from .remote_store import RemoteStore, Response

__all__: list[str] = ["RemoteStore", "Response"]
