"""
scripture_ranges — алгебра диапазонов ссылок на Писание

Диапазоны (глава, стих) внутри книги с исключениями, проверка вхождения,
форматирование ссылок, компактная сериализация, объединение диапазонов
и поиск серий полных глав.
"""

from scripture_ranges.core.errors import RangeValidationError
from scripture_ranges.core.domain import (
    Book,
    BookResolver,
    RangeCollection,
    ReferenceStyle,
    ScriptureRange,
    Span,
    StaticBook,
    StaticVerse,
    Verse,
)
from scripture_ranges.core.algebra import (
    ChapterFullnessChecker,
    RangeCombiner,
    combine_ranges,
)
from scripture_ranges.builder import (
    ChapterRange,
    MappingBookResolver,
    ScriptureRangeBuilder,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "RangeValidationError",
    # Capabilities
    "Book",
    "Verse",
    "BookResolver",
    "StaticBook",
    "StaticVerse",
    # Models
    "Span",
    "ScriptureRange",
    "RangeCollection",
    "ReferenceStyle",
    # Algebra
    "RangeCombiner",
    "ChapterFullnessChecker",
    "combine_ranges",
    # Builder
    "ChapterRange",
    "MappingBookResolver",
    "ScriptureRangeBuilder",
]
