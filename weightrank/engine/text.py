"""Token counting and document quality."""

from __future__ import annotations

import logging
import math
import re
from typing import List

logger = logging.getLogger(__name__)

# Same delimiter set as a default string tokenizer: space, tab, newline, CR, form feed.
_TOKEN_RE = re.compile(r"[^ \t\n\r\f]+")


def tokenize(text: str) -> List[str]:
    """Return the whitespace-delimited tokens of the raw text."""

    return _TOKEN_RE.findall(text)


def count_tokens(text: str) -> int:
    return len(tokenize(text))


def page_quality(text: str, name: str = "document") -> float:
    """Return log2 of the token count of ``text``.

    An empty document has no defined logarithm; it is given quality 0.0,
    the same as a single-token document.
    """

    tokens = count_tokens(text)
    if tokens == 0:
        logger.warning("%s has no tokens; using quality 0.0", name)
        return 0.0
    return math.log2(tokens)
