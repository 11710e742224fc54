"""Shared utilities for Stylify."""

from stylify.utils.logger import get_logger

__all__ = ["get_logger"]
