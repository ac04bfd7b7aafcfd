from __future__ import annotations

"""Re-export factory functions for generating fake test data."""

# flake8: noqa: F401 – re-export

from .downloader import create_fake_downloader, create_fake_user_limit

__all__ = [
    "create_fake_downloader",
    "create_fake_user_limit",
]
