from __future__ import annotations
import logging
from pathlib import Path

from mdview.models.note import Note

logger = logging.getLogger(__name__)


class FileService:
    """Reads markdown notes and writes rendered markup to the filesystem.

    Errors from the filesystem are not handled here; callers decide how to
    report them.
    """

    def __init__(self, output_extension: str = ".html", encoding: str = "utf-8") -> None:
        self.output_extension = output_extension
        self.encoding = encoding

    def ensure_extension(self, path: Path) -> Path:
        if path.suffix.lower() != self.output_extension:
            return path.with_suffix(self.output_extension)
        return path

    def read(self, path: Path) -> Note:
        text = path.read_text(encoding=self.encoding)
        logger.debug("Read %d chars from %s", len(text), path)
        return Note.from_file(path, text)

    def write_rendered(self, markup: str, path: Path) -> Path:
        target = self.ensure_extension(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(markup, encoding=self.encoding)
        logger.debug("Wrote %d chars to %s", len(markup), target)
        return target
