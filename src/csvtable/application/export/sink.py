"""Application export – ExportSink protocol and implementations."""
from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from csvtable.kernel.errors import ExportWriteError

__all__ = ["ExportSink", "FileSystemSink", "InMemorySink"]


@runtime_checkable
class ExportSink(Protocol):
    """Port: persists an exported document and returns where it went."""

    async def write(self, name: str, data: bytes) -> str:
        """Store *data* under *name*; return the canonical location."""
        ...


class FileSystemSink:
    """Writes documents into a directory, replacing any previous file atomically."""

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    async def write(self, name: str, data: bytes) -> str:
        if not name or Path(name).name != name:
            raise ValueError(f"Export name must be a bare file name, got {name!r}")
        target = self._directory / name
        await asyncio.to_thread(self._write_atomic, target, data)
        return str(target)

    def _write_atomic(self, target: Path, data: bytes) -> None:
        tmp_path: str | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=target.parent, prefix=f".{target.name}.", delete=False
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, target)
        except OSError as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise ExportWriteError(str(target), cause=exc) from exc


class InMemorySink:
    """Fake ExportSink for unit tests."""

    def __init__(self, base_url: str = "memory://exports") -> None:
        self._base_url = base_url.rstrip("/")
        self._store: dict[str, bytes] = {}

    async def write(self, name: str, data: bytes) -> str:
        self._store[name] = data
        return f"{self._base_url}/{name}"

    def get(self, name: str) -> bytes | None:
        return self._store.get(name)

    def names(self) -> list[str]:
        return sorted(self._store)
