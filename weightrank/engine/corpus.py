"""Corpus preparation: base distribution and transition weights."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np

from .config import EngineConfig
from .errors import EmptyCorpusError
from .types import Document

logger = logging.getLogger(__name__)


@dataclass
class Corpus:
    """Documents in index order plus the state the solver iterates over.

    ``weights[j, i]`` is the probability that a walker on document ``i``
    moves to document ``j``. Only ``scores`` changes after construction.
    """

    documents: List[Document]
    base: np.ndarray
    scores: np.ndarray
    weights: np.ndarray
    epsilon: float
    index: Dict[str, int]

    def __len__(self) -> int:
        return len(self.documents)

    def commit_scores(self, scores: np.ndarray) -> None:
        """Replace the score vector and mirror it onto the documents."""

        self.scores = scores
        for document, score in zip(self.documents, scores):
            document.score = float(score)


def build_index(documents: Sequence[Document]) -> Dict[str, int]:
    """Map document names to their position; the first of duplicate names wins."""

    index: Dict[str, int] = {}
    for position, document in enumerate(documents):
        if document.name in index:
            logger.warning(
                "Duplicate document name %s; links resolve to the first occurrence",
                document.name,
            )
            continue
        index[document.name] = position
    return index


def base_distribution(documents: Sequence[Document]) -> np.ndarray:
    """Return the qualities normalised to sum to one.

    When every document has zero quality the distribution is uniform.
    """

    qualities = np.array([document.quality for document in documents], dtype=float)
    total = qualities.sum()
    if total <= 0.0:
        logger.warning("Total document quality is zero; using a uniform base distribution")
        return np.full(len(documents), 1.0 / len(documents))
    return qualities / total


def transition_weights(
    documents: Sequence[Document],
    scores: np.ndarray,
    index: Dict[str, int],
) -> np.ndarray:
    """Build the column-stochastic weight matrix for the documents.

    Sink columns receive a copy of ``scores`` as it stands before any
    iteration. Link columns divide each resolved link score by the total of
    all the source's link scores, so links to unknown targets keep their
    share out of the column.
    """

    size = len(documents)
    weights = np.zeros((size, size), dtype=float)
    snapshot = scores.copy()

    for source, document in enumerate(documents):
        if document.is_sink:
            weights[:, source] = snapshot
            continue

        total = sum(link.score for link in document.out_links)
        if total <= 0.0:
            continue
        for link in document.out_links:
            target = index.get(link.target)
            if target is None:
                logger.debug("Dropping link %s -> %s: no such document", document.name, link.target)
                continue
            weights[target, source] = link.score / total

    return weights


def build_corpus(documents: Sequence[Document], config: EngineConfig) -> Corpus:
    """Prepare base values, initial scores and transition weights."""

    documents = list(documents)
    if not documents:
        raise EmptyCorpusError("No readable documents found; nothing to rank.")

    index = build_index(documents)
    base = base_distribution(documents)
    scores = base.copy()
    for document, value in zip(documents, base):
        document.base = float(value)
        document.score = float(value)

    weights = transition_weights(documents, scores, index)
    epsilon = float(config.get("epsilon_scale", 0.01)) / len(documents)

    logger.debug("Prepared corpus of %d documents (epsilon=%g)", len(documents), epsilon)
    return Corpus(
        documents=documents,
        base=base,
        scores=scores,
        weights=weights,
        epsilon=epsilon,
        index=index,
    )
