"""Transformer module for turning course rows into calendar events and files."""

from .assembler import assemble, flip_name
from .base import BaseTransformer
from .ical_transformer import ICalTransformer
from .naming import file_name
from .scheduling import RecurrenceRule, build_recurrence, first_occurrence

__all__ = [
    "BaseTransformer",
    "ICalTransformer",
    "RecurrenceRule",
    "assemble",
    "build_recurrence",
    "file_name",
    "first_occurrence",
    "flip_name",
]
