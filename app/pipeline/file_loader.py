from pathlib import Path

from app.extraction.models import InputFile
from app.pipeline.exceptions import FileReadError


class FileLoader:
    """Reads files from disk into InputFiles ready for a batch."""

    def load(self, path: Path) -> InputFile:
        """Read a file and infer its format from the name.

        Raises:
            FileNotFoundError: if nothing exists at ``path``.
            FileReadError: if ``path`` is not a regular file or cannot be read.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise FileReadError(f"Not a regular file: {path}")
        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return InputFile.from_bytes(path.name, raw_bytes)

    def load_all(self, paths: list[Path]) -> list[InputFile]:
        return [self.load(path) for path in paths]
