"""Verify, run and watch small exercises listed in info.toml, plus worked drills."""

__version__ = "0.1.0"