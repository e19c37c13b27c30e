"""Shared helpers for the TinyScript package."""

from .logger import get_logger

__all__ = ["get_logger"]
