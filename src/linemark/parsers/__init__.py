#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/parsers/__init__.py
"""Parsers that turn token streams into document trees."""

from linemark.parsers.block import BlockParser, ParserState, parse

__all__ = ["BlockParser", "ParserState", "parse"]
