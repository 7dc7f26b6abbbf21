from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Note:
    """A markdown note waiting to be rendered.

    Attributes:
        title: Display title, used for the preview page <title>.
        body: The raw markdown source.
        file_path: Where the note was read from, if anywhere.
    """

    title: str
    body: str
    file_path: Optional[Path] = None

    @staticmethod
    def derive_title_from_path(path: Path) -> str:
        stem = path.stem.strip()
        return stem or "Untitled"

    @classmethod
    def from_file(cls, path: Path, content: str) -> "Note":
        return cls(title=cls.derive_title_from_path(path), body=content, file_path=path)

    @classmethod
    def from_stdin(cls, content: str) -> "Note":
        return cls(title="Untitled", body=content)
