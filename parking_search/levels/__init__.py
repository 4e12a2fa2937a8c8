"""Authoring-time helpers: loading puzzles from text maps and drawing them."""

from .parse import parse_map, parse_named_map
from .render import format_moves, render

__all__ = [
    "format_moves",
    "parse_map",
    "parse_named_map",
    "render",
]
