"""Shared models for results and spans."""

from .responses import *  # noqa: F403 - intentional re-export

__all__ = [name for name in dir() if not name.startswith("_")]
