#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/utils/__init__.py
"""Utility helpers for the linemark package."""

from linemark.utils.decorators import debug_timer

__all__ = ["debug_timer"]
