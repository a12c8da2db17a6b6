"""Console entry point for weightrank_tool.

``weighted-pagerank ARGS`` is shorthand for ``manage.py rank_pages ARGS``.
"""

from __future__ import annotations

import os
import sys
from typing import List

from django.core.management import execute_from_command_line  # type: ignore


def main(argv: List[str] | None = None) -> None:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'weightrank_tool.settings')
    args = sys.argv[1:] if argv is None else list(argv)
    execute_from_command_line([sys.argv[0], 'rank_pages', *args])


if __name__ == '__main__':
    main()
