"""Typed data structures used by the ranking pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class SourceFile:
    """Raw content of a single file discovered under the document root."""

    path: Path
    name: str
    text: str


@dataclass(frozen=True)
class OutLink:
    """Accumulated emphasis score for one distinct href within a document."""

    target: str
    score: float


@dataclass
class Document:
    """A node of the link graph.

    ``quality`` and ``out_links`` are fixed once extraction is done, ``base``
    is set during corpus preparation and ``score`` is rewritten by the solver
    after every iteration.
    """

    name: str
    quality: float
    out_links: List[OutLink] = field(default_factory=list)
    base: float = 0.0
    score: float = 0.0

    @property
    def is_sink(self) -> bool:
        return not self.out_links


@dataclass(frozen=True)
class RankedDocument:
    """Final score for a document, in output order."""

    name: str
    score: float


@dataclass(frozen=True)
class RankingResult:
    """Outcome of a complete ranking pass."""

    documents: List[RankedDocument]
    iterations: int
    follow: float
    epsilon: float
