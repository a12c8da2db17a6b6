"""Shared fixtures for engine tests."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Tuple

import pytest

from weightrank.engine.config import load_config
from weightrank.engine.types import Document, OutLink


@pytest.fixture()
def engine_config():
    """Provide a mutable copy of the default engine configuration."""

    return load_config(None)


def make_document(
    name: str,
    links: Iterable[Tuple[str, float]] | None = None,
    *,
    quality: float = 1.0,
) -> Document:
    return Document(
        name=name,
        quality=quality,
        out_links=[OutLink(target=target, score=score) for target, score in links or []],
    )


def page(*targets: str, filler: str = "lorem ipsum dolor") -> str:
    """Return a small HTML page linking once to each target."""

    anchors = " ".join(f'<a href="{target}">link</a>' for target in targets)
    return f"<html><body><p>{filler}</p><p>{anchors}</p></body></html>"


def write_pages(root: Path, pages: Dict[str, str]) -> Path:
    for relative, html in pages.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
    return root
