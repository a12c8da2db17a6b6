"""Hyperlink extraction with structural emphasis scoring.

Every ``<a href>`` occurrence starts at the configured base score and gains a
flat bonus for each enclosing emphasis element (headings ``h1``-``h4``,
``em`` and ``b`` by default). Occurrences pointing at the same href are
summed into a single :class:`~weightrank.engine.types.OutLink`, in the order
their targets were first seen. Hrefs are kept verbatim; no URL resolution or
normalisation is applied.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from bs4 import BeautifulSoup, FeatureNotFound, Tag  # type: ignore

from .config import EngineConfig
from .types import OutLink

logger = logging.getLogger(__name__)


def parse_html(html: str, parser: str = "lxml") -> BeautifulSoup:
    """Parse ``html`` with the requested parser, falling back to html.parser."""

    try:
        return BeautifulSoup(html, parser)
    except FeatureNotFound:
        logger.debug("HTML parser %r unavailable, using html.parser", parser)
        return BeautifulSoup(html, "html.parser")


def emphasis_depth(anchor: Tag, emphasis_tags: frozenset[str]) -> int:
    """Count the ancestors of ``anchor`` whose tag is an emphasis tag.

    Walks up the tree from the anchor's parent to the document root. The
    anchor itself is not counted, and nested emphasis elements each count.

    Parameters
    ----------
    anchor:
        The ``<a>`` element whose ancestors will be inspected.
    emphasis_tags:
        Lower-case tag names that earn a bonus.

    Returns
    -------
    int
        Number of matching ancestors.
    """
    depth = 0
    parent = anchor.parent
    while parent is not None and getattr(parent, "name", None):
        if parent.name.lower() in emphasis_tags:
            depth += 1
        parent = parent.parent
    return depth


def score_links(soup: BeautifulSoup, config: EngineConfig) -> List[OutLink]:
    """Return accumulated link scores for every distinct href in ``soup``."""

    base_score = float(config.get("link_base_score", 1.0))
    bonus_score = float(config.get("link_bonus_score", 1.0))
    emphasis_tags = config.emphasis_tags

    totals: Dict[str, float] = {}
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"]
        score = base_score + bonus_score * emphasis_depth(anchor, emphasis_tags)
        totals[href] = totals.get(href, 0.0) + score

    return [OutLink(target=target, score=score) for target, score in totals.items()]


def extract_links(html: str, config: EngineConfig) -> List[OutLink]:
    """Parse ``html`` and return its scored out-links in first-seen order."""

    if not html:
        return []
    soup = parse_html(html, str(config.get("html_parser", "lxml")))
    return score_links(soup, config)
