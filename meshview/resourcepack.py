"""A simple archive bundling several files into one pack file.

Layout, all integers little-endian:

* entry count (u64)
* for each entry, in name order: name length (u64), name bytes (UTF-8),
  id (u32), data size (u32), data offset from the start of the file (u32)
* the data of every entry, in the same order
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from pathlib import Path

_SIZE = struct.Struct("<Q")
_ENTRY = struct.Struct("<III")


@dataclass
class _Entry:
    data: bytes
    ident: int = 0


class _Reader:
    """Sequential reader over a byte string that fails on short reads."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise ValueError("resource pack is truncated")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, layout: struct.Struct) -> tuple[int, ...]:
        return layout.unpack(self.take(layout.size))


class ResourcePack:
    """An in-memory collection of named files that can be saved and loaded."""

    def __init__(self) -> None:
        self._files: dict[str, _Entry] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._files

    def __len__(self) -> int:
        return len(self._files)

    def add(self, path: str | os.PathLike[str]) -> None:
        """Read the file at ``path`` into the pack, keyed by the path as given."""
        self._files[os.fspath(path)] = _Entry(Path(path).read_bytes())

    def get(self, name: str | os.PathLike[str]) -> bytes:
        """Return the contents stored under ``name``."""
        key = os.fspath(name)
        try:
            return self._files[key].data
        except KeyError:
            raise KeyError(f"{key!r} is not in the resource pack") from None

    def clear(self) -> None:
        """Remove every entry."""
        self._files.clear()

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the pack to ``path``."""
        names = sorted(self._files)
        encoded = {name: name.encode("utf-8") for name in names}
        offset = _SIZE.size + sum(
            _SIZE.size + len(encoded[name]) + _ENTRY.size for name in names
        )

        header = [_SIZE.pack(len(names))]
        for name in names:
            entry = self._files[name]
            header.append(_SIZE.pack(len(encoded[name])))
            header.append(encoded[name])
            header.append(_ENTRY.pack(entry.ident, len(entry.data), offset))
            offset += len(entry.data)

        with open(path, "wb") as stream:
            stream.writelines(header)
            for name in names:
                stream.write(self._files[name].data)

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read the pack at ``path``, adding its entries to this one."""
        raw = Path(path).read_bytes()
        reader = _Reader(raw)

        (count,) = reader.unpack(_SIZE)
        index: list[tuple[str, int, int, int]] = []
        for _ in range(count):
            (name_size,) = reader.unpack(_SIZE)
            try:
                name = reader.take(name_size).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ValueError("resource pack holds an undecodable name") from exc
            ident, size, offset = reader.unpack(_ENTRY)
            index.append((name, ident, size, offset))

        loaded: dict[str, _Entry] = {}
        for name, ident, size, offset in index:
            if offset + size > len(raw):
                raise ValueError(f"data for {name!r} runs past the end of the pack")
            loaded[name] = _Entry(raw[offset:offset + size], ident)
        self._files.update(loaded)