"""
ScriptureRangeBuilder — fluent API накопления диапазонов

    collection = (
        ScriptureRangeBuilder([resolver])
        .with_range("john", 3, verse=1, to_verse=36)
        .without("john", 3, verse=16, to_verse=17)
        .with_range("luke", ChapterRange.span(1, 2))
        .build()
    )

Каждый with_range() создаёт новый ScriptureRange и добавляет его в набор.
without() добавляет исключение к последнему созданному диапазону.

Значения по умолчанию:
- with_range: verse → 1 (первая глава), to_verse → последний стих последней главы
- without: без verse → главы целиком; verse без to_verse на одной главе → один стих;
  verse без to_verse на нескольких главах → до конца последней главы
"""

import logging
from typing import Any, Iterable

from scripture_ranges.builder.chapter_range import ChapterRange
from scripture_ranges.builder.resolvers import resolve_book, resolve_verse
from scripture_ranges.core.domain.interfaces import Book, BookResolver
from scripture_ranges.core.domain.range_collection import RangeCollection
from scripture_ranges.core.domain.scripture_range import ScriptureRange
from scripture_ranges.core.errors import RangeValidationError

logger = logging.getLogger(__name__)


def _chapter_bounds(chapter: int | ChapterRange, chapter_end: int | None) -> ChapterRange:
    if isinstance(chapter, ChapterRange):
        if chapter_end is not None:
            raise RangeValidationError("chapter_end cannot be combined with a ChapterRange")
        return chapter
    return ChapterRange(chapter, chapter if chapter_end is None else chapter_end)


class ScriptureRangeBuilder:
    """Fluent builder набора диапазонов."""

    def __init__(
        self,
        resolvers: Iterable[BookResolver] | None = None,
        collection: RangeCollection | None = None,
    ):
        """
        Args:
            resolvers: Цепочка resolvers книги (перебираются по порядку)
            collection: Набор, в который добавляются диапазоны (по умолчанию новый)
        """
        self._resolvers: list[BookResolver] = list(resolvers or [])
        self._collection = collection if collection is not None else RangeCollection()
        self._current_range: ScriptureRange | None = None

    # -------------------------------------------------------------------------
    # Resolvers
    # -------------------------------------------------------------------------

    def with_resolvers(self, resolvers: Iterable[BookResolver]) -> "ScriptureRangeBuilder":
        """Замена цепочки resolvers."""
        self._resolvers = list(resolvers)
        return self

    def add_resolver(self, resolver: BookResolver) -> "ScriptureRangeBuilder":
        self._resolvers.append(resolver)
        return self

    @property
    def resolvers(self) -> tuple[BookResolver, ...]:
        return tuple(self._resolvers)

    def _resolve_book(self, book: Any) -> Book:
        resolved = resolve_book(book, self._resolvers)
        logger.debug("Resolved book %r -> %s", book, resolved.name)
        return resolved

    # -------------------------------------------------------------------------
    # Fluent API
    # -------------------------------------------------------------------------

    def with_range(
        self,
        book: Any,
        chapter: int | ChapterRange,
        verse: Any = None,
        to_verse: Any = None,
        chapter_end: int | None = None,
    ) -> "ScriptureRangeBuilder":
        """
        Новый диапазон в наборе.

        Args:
            book: Книга (Book или значение для resolvers)
            chapter: Глава или ChapterRange
            verse: Первый стих первой главы (int или Verse), по умолчанию 1
            to_verse: Последний стих последней главы (int или Verse),
                по умолчанию последний стих главы
            chapter_end: Последняя глава (альтернатива ChapterRange)

        Raises:
            RangeValidationError: Если книгу/стих нельзя разрешить или границы некорректны
        """
        resolved_book = self._resolve_book(book)
        chapters = _chapter_bounds(chapter, chapter_end)

        from_verse = resolve_verse(verse)
        last_verse = resolve_verse(to_verse)

        scripture_range = ScriptureRange(
            resolved_book,
            chapters.start,
            chapters.end,
            1 if from_verse is None else from_verse,
            resolved_book.chapter_verse_count(chapters.end) if last_verse is None else last_verse,
        )

        self._collection.add_range(scripture_range)
        self._current_range = scripture_range
        logger.debug("Added range %s", scripture_range.reference())
        return self

    def without(
        self,
        book: Any,
        chapter: int | ChapterRange,
        verse: Any = None,
        to_verse: Any = None,
        chapter_end: int | None = None,
    ) -> "ScriptureRangeBuilder":
        """
        Исключение для последнего созданного диапазона.

        Raises:
            RangeValidationError: Если диапазон ещё не создан, книга отличается
                от книги диапазона или исключение вне его глав
        """
        if self._current_range is None:
            raise RangeValidationError(
                "Cannot add exclusion without an active range. Call with_range() first."
            )

        resolved_book = self._resolve_book(book)
        if resolved_book.name != self._current_range.book.name:
            raise RangeValidationError(
                "Exclusion must be in the same book as the current range"
            )

        chapters = _chapter_bounds(chapter, chapter_end)
        from_verse = resolve_verse(verse)
        last_verse = resolve_verse(to_verse)

        if last_verse is None:
            if from_verse is not None and chapters.is_single_chapter:
                last_verse = from_verse
            else:
                last_verse = resolved_book.chapter_verse_count(chapters.end)

        self._current_range.add_exclusion(
            chapters.start,
            chapters.end,
            1 if from_verse is None else from_verse,
            last_verse,
        )
        return self

    def build(self) -> RangeCollection:
        return self._collection
