"""Pytest configuration shared across test modules."""

import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weightrank_tool.settings")
os.environ.setdefault("DJANGO_DEBUG", "true")
