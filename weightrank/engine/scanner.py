"""Discovery and reading of the documents to rank."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List

from .errors import ScanError
from .types import SourceFile

logger = logging.getLogger(__name__)


def list_files(root: str | Path) -> List[Path]:
    """Return every regular file below ``root`` in sorted path order.

    Raises :class:`ScanError` when the root does not exist, is not a
    directory or cannot be listed.
    """

    root_path = Path(root)
    if not root_path.exists():
        raise ScanError(f"Document directory {root_path} does not exist.")
    if not root_path.is_dir():
        raise ScanError(f"Document path {root_path} is not a directory.")

    def _on_error(error: OSError) -> None:
        # Only the root is fatal; unreadable subdirectories are skipped.
        if error.filename is None or Path(error.filename) == root_path:
            raise error
        logger.warning("Error opening directory %s, skipping it: %s", error.filename, error)

    files: List[Path] = []
    try:
        for dirpath, dirnames, filenames in os.walk(root_path, onerror=_on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if path.is_file():
                    files.append(path)
    except OSError as exc:
        raise ScanError(f"Error opening document directory {root_path}: {exc}") from exc
    return files


def read_file(path: Path, encoding: str = "utf-8") -> str:
    """Read and decode a single file, replacing undecodable bytes."""

    return path.read_bytes().decode(encoding, errors="replace")


def scan_documents(root: str | Path, encoding: str = "utf-8") -> Iterator[SourceFile]:
    """Yield the content of every readable file below ``root``.

    Files that cannot be read are logged and skipped.
    """

    for path in list_files(root):
        try:
            text = read_file(path, encoding)
        except OSError as exc:
            logger.warning("Error opening html file %s, skipping this file: %s", path, exc)
            continue
        yield SourceFile(path=path, name=path.name, text=text)
