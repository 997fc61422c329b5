"""Parsers for user-supplied team text."""

from .set_parser import SetParser, parse_sets

__all__ = [
    "SetParser",
    "parse_sets",
]
