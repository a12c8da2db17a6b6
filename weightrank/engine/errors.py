"""Exceptions raised by the ranking pipeline."""

from __future__ import annotations


class RankingError(Exception):
    """Base class for failures that abort a ranking pass."""


class ScanError(RankingError):
    """The document root is missing, not a directory or cannot be listed."""


class EmptyCorpusError(RankingError):
    """No readable documents were found, so there is nothing to rank."""


class ConvergenceError(RankingError):
    """The solver hit its iteration cap while scores were still moving."""

    def __init__(self, iterations: int, epsilon: float) -> None:
        super().__init__(
            f"Scores did not converge within {iterations} iterations (epsilon={epsilon:.6g})."
        )
        self.iterations = iterations
        self.epsilon = epsilon


class ConfigError(RankingError):
    """The engine configuration file is malformed or holds an invalid value."""
