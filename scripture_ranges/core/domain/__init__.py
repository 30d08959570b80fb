"""
Domain models and value objects.

Contains ScriptureRange, RangeCollection, Span, record models and the
external Book/Verse capabilities.
"""

from scripture_ranges.core.domain.interfaces import (
    Book,
    BookResolver,
    StaticBook,
    StaticVerse,
    Verse,
)
from scripture_ranges.core.domain.span import Span, validate_span
from scripture_ranges.core.domain.reference import (
    DEFAULT_REFERENCE_STYLE,
    ReferenceStyle,
    format_collection_reference,
    format_range_reference,
)
from scripture_ranges.core.domain.records import (
    BookBoundRecord,
    ExclusionRecord,
    RangeCollectionRecord,
    RangeRecord,
    VerseBoundRecord,
)
from scripture_ranges.core.domain.scripture_range import ScriptureRange
from scripture_ranges.core.domain.range_collection import RangeCollection

__all__ = [
    # Interfaces
    "Book",
    "BookResolver",
    "Verse",
    "StaticBook",
    "StaticVerse",
    # Span
    "Span",
    "validate_span",
    # Reference formatting
    "DEFAULT_REFERENCE_STYLE",
    "ReferenceStyle",
    "format_range_reference",
    "format_collection_reference",
    # Records
    "VerseBoundRecord",
    "BookBoundRecord",
    "ExclusionRecord",
    "RangeRecord",
    "RangeCollectionRecord",
    # Models
    "ScriptureRange",
    "RangeCollection",
]
