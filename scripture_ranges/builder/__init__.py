"""Builder — fluent построение наборов диапазонов из слабо типизированного ввода."""

from .chapter_range import ChapterRange
from .range_builder import ScriptureRangeBuilder
from .resolvers import MappingBookResolver, resolve_book, resolve_verse

__all__ = [
    "ChapterRange",
    "ScriptureRangeBuilder",
    "MappingBookResolver",
    "resolve_book",
    "resolve_verse",
]
