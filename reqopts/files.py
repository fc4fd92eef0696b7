"""File references for uploads and request bodies."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

__all__ = ["File", "Files", "Body"]


@dataclass(frozen=True)
class File:
    """A path to a file on disk."""

    filepath: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "filepath", os.fspath(self.filepath))


class Files:
    """An ordered list of files."""

    def __init__(self, filepaths: Iterable[str | os.PathLike[str] | File] = ()) -> None:
        self._files: list[File] = [p if isinstance(p, File) else File(p) for p in filepaths]

    def __iter__(self) -> Iterator[File]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __getitem__(self, pos: int) -> File:
        return self._files[pos]

    def append(self, file: File) -> None:
        """Add a file at the end."""
        self._files.append(file)

    def pop(self) -> File:
        """Remove and return the last file."""
        return self._files.pop()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Files):
            return NotImplemented
        return self._files == other._files

    def __repr__(self) -> str:
        return f"Files({self._files!r})"


BodyData = Union[str, bytes, bytearray, memoryview, File]


class Body:
    """Raw request body, built from text, bytes or the contents of a file."""

    def __init__(self, data: BodyData = b"") -> None:
        if isinstance(data, File):
            self._data = _read_file(data)
        elif isinstance(data, str):
            self._data = data.encode("utf-8", errors="surrogateescape")
        else:
            self._data = bytes(data)

    @classmethod
    def from_file(cls, file: File | str | os.PathLike[str]) -> "Body":
        """Read the whole file into a body; ValueError if it cannot be opened."""
        return cls(file if isinstance(file, File) else File(file))

    def __str__(self) -> str:
        return self._data.decode("utf-8", errors="surrogateescape")

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Body):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Body({self._data!r})"


def _read_file(file: File) -> bytes:
    try:
        with open(file.filepath, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise ValueError("Can't open the file for HTTP request body!") from exc