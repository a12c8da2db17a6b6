"""Ordering and formatting of final scores."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .config import EngineConfig
from .types import Document, RankedDocument


def rank_documents(documents: Sequence[Document]) -> List[RankedDocument]:
    """Return documents by descending score; ties keep corpus order."""

    ordered = sorted(documents, key=lambda document: document.score, reverse=True)
    return [RankedDocument(name=document.name, score=document.score) for document in ordered]


def display_name(name: str, suffixes: Iterable[str]) -> str:
    """Strip the first matching ``.html``-style suffix from ``name``."""

    lowered = name.lower()
    for suffix in suffixes:
        if suffix and lowered.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def format_line(document: RankedDocument, config: EngineConfig) -> str:
    width = int(config.get("score_width", 10))
    precision = int(config.get("score_precision", 4))
    name = display_name(document.name, config.display_suffixes)
    return f"{name} {document.score:>{width}.{precision}f}"


def format_ranking(documents: Iterable[RankedDocument], config: EngineConfig) -> List[str]:
    """Return one formatted output line per ranked document."""

    return [format_line(document, config) for document in documents]
