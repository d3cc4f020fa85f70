"""Configuration management for GobiPHP."""

from .parser import GobiConfig, load_config

__all__ = [
    "GobiConfig",
    "load_config",
]
