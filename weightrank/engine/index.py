"""Coordinator for a complete ranking pass."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .config import EngineConfig, load_config
from .corpus import build_corpus
from .links import extract_links
from .report import rank_documents
from .scanner import scan_documents
from .solver import WeightedPageRankSolver
from .text import page_quality
from .types import Document, RankingResult, SourceFile

logger = logging.getLogger(__name__)


def build_document(source: SourceFile, config: EngineConfig) -> Document:
    """Extract quality and scored out-links from one source file."""

    document = Document(
        name=source.name,
        quality=page_quality(source.text, source.name),
        out_links=extract_links(source.text, config),
    )
    logger.debug(
        "Document %s: quality=%.4f, %d distinct out-links",
        document.name,
        document.quality,
        len(document.out_links),
    )
    return document


def load_documents(sources: Iterable[SourceFile], config: EngineConfig) -> List[Document]:
    return [build_document(source, config) for source in sources]


def rank(
    documents: Iterable[Document],
    follow: float,
    config: EngineConfig | None = None,
    *,
    max_iterations: int | None = None,
) -> RankingResult:
    """Prepare the corpus for ``documents`` and solve it."""

    engine_config = config or load_config(None)
    corpus = build_corpus(list(documents), engine_config)
    solver = WeightedPageRankSolver(
        corpus,
        follow,
        max_iterations=max_iterations or engine_config.max_iterations,
    )
    solver.start()
    return RankingResult(
        documents=rank_documents(corpus.documents),
        iterations=solver.iterations,
        follow=solver.follow,
        epsilon=corpus.epsilon,
    )


def rank_directory(
    root: str | Path,
    follow: float,
    config: EngineConfig | None = None,
    *,
    max_iterations: int | None = None,
) -> RankingResult:
    """Scan ``root`` recursively and rank every readable file found."""

    engine_config = config or load_config(None)
    sources = scan_documents(root, str(engine_config.get("encoding", "utf-8")))
    documents = load_documents(sources, engine_config)
    logger.info("Loaded %d documents from %s", len(documents), root)
    return rank(documents, follow, engine_config, max_iterations=max_iterations)
