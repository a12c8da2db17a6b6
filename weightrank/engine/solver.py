"""Iterative weighted PageRank solver."""

from __future__ import annotations

import enum
import logging

import numpy as np

from .corpus import Corpus
from .errors import ConvergenceError, EmptyCorpusError

logger = logging.getLogger(__name__)


class SolverState(enum.Enum):
    INITIALIZED = "initialized"
    ITERATING = "iterating"
    CONVERGED = "converged"
    FAILED = "failed"


def validate_follow(follow: float) -> float:
    """Return ``follow`` as a float, rejecting values outside (0, 1)."""

    value = float(follow)
    if not 0.0 < value < 1.0:
        raise ValueError(f"Follow probability must lie strictly between 0 and 1, got {follow!r}.")
    return value


class WeightedPageRankSolver:
    """Runs the damped random-walk iteration over a prepared corpus.

    Each pass computes ``(1 - f) * base + f * W @ score`` from the previous
    score vector and commits every new value at once. The loop stops after
    a pass in which no score moved by more than the corpus epsilon.
    """

    def __init__(self, corpus: Corpus, follow: float, *, max_iterations: int = 1000) -> None:
        if len(corpus) == 0:
            raise EmptyCorpusError("Cannot rank an empty corpus.")
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}.")
        self.corpus = corpus
        self.follow = validate_follow(follow)
        self.max_iterations = max_iterations
        self.iterations = 0
        self.state = SolverState.INITIALIZED

    def step(self) -> bool:
        """Run one iteration and return True when any score changed by more than epsilon."""

        corpus = self.corpus
        previous = corpus.scores
        updated = (1.0 - self.follow) * corpus.base + self.follow * (corpus.weights @ previous)
        delta = np.abs(updated - previous)
        changed = bool(np.any(delta > corpus.epsilon))

        corpus.commit_scores(updated)
        self.iterations += 1
        self.state = SolverState.ITERATING
        logger.debug(
            "Iteration %d: max change %.6g (%d documents above epsilon)",
            self.iterations,
            float(delta.max()),
            int(np.count_nonzero(delta > corpus.epsilon)),
        )
        return changed

    def start(self) -> np.ndarray:
        """Iterate until convergence and return the final score vector.

        Raises :class:`ConvergenceError` once ``max_iterations`` passes have
        run while scores are still changing.
        """

        while True:
            if self.iterations >= self.max_iterations:
                self.state = SolverState.FAILED
                raise ConvergenceError(self.iterations, self.corpus.epsilon)
            if not self.step():
                break

        self.state = SolverState.CONVERGED
        logger.info("Converged after %d iterations", self.iterations)
        return self.corpus.scores
