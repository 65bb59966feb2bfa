"""Praise Board - a small cookie-authenticated bulletin board of praises."""

__version__ = "0.1.0"
