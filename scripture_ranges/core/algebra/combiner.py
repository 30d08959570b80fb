"""
RangeCombiner — объединение нескольких диапазонов одной книги

Результат — один ScriptureRange:
- граница = bounding box всех исходных диапазонов
- исключения = ровно те стихи внутри границы, которые не входят
  ни в один исходный диапазон

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Стих входит в результат ⇔ он входит хотя бы в один исходный диапазон
2. Книги сравниваются по имени
3. Результат не зависит от порядка исходных диапазонов

АЛГОРИТМ:
1. Граница: минимальная (глава, стих) начала. Стих сравнивается только
   среди диапазонов, начинающихся в минимальной главе. Симметрично для конца.
2. Для каждой главы c границы:
   a. окно главы [window_start, window_end]
   b. для каждого исходного диапазона, покрывающего c: его локальное окно
      минус его исключения в главе c
   c. объединение всех включённых интервалов (соседние склеиваются)
   d. непокрытые участки окна → исключения [c, c, gap_start, gap_end]

Сложность O(главы × исключения), без перебора отдельных стихов.
"""

import logging
from typing import Sequence

from scripture_ranges.core.algebra.intervals import (
    VerseInterval,
    find_gaps,
    merge_intervals,
    subtract_interval,
)
from scripture_ranges.core.domain.interfaces import Book
from scripture_ranges.core.domain.scripture_range import ScriptureRange
from scripture_ranges.core.domain.span import Span
from scripture_ranges.core.errors import RangeValidationError

logger = logging.getLogger(__name__)


class RangeCombiner:
    """Объединение диапазонов одной книги в один нормализованный диапазон."""

    def combine(self, ranges: Sequence[ScriptureRange]) -> ScriptureRange:
        """
        Объединение диапазонов.

        Args:
            ranges: Непустой список диапазонов одной книги

        Returns:
            Новый диапазон (исходные не изменяются)

        Raises:
            RangeValidationError: Если список пуст или книги различаются
        """
        if not ranges:
            raise RangeValidationError("Cannot combine empty list of ranges")

        book = ranges[0].book
        for scripture_range in ranges:
            if scripture_range.book.name != book.name:
                raise RangeValidationError(
                    f"All ranges must be in the same book: "
                    f"{scripture_range.book.name!r} != {book.name!r}"
                )

        bounds = self._bounding_span(ranges)
        combined = ScriptureRange(
            book, bounds.start_chapter, bounds.end_chapter, bounds.start_verse, bounds.end_verse
        )

        gap_count = 0
        for chapter in range(bounds.start_chapter, bounds.end_chapter + 1):
            window = VerseInterval(*bounds.verse_window(chapter, book))

            included: list[VerseInterval] = []
            for scripture_range in ranges:
                if scripture_range.span.covers_chapter(chapter):
                    included.extend(self._included_intervals(scripture_range, chapter, book))

            for gap in find_gaps(window, merge_intervals(included)):
                combined.add_exclusion_unsafe(chapter, chapter, gap.start, gap.end)
                gap_count += 1

        logger.debug(
            "Combined %d ranges of %s into %s with %d gap exclusions",
            len(ranges),
            book.name,
            bounds.as_tuple(),
            gap_count,
        )
        return combined

    @staticmethod
    def _bounding_span(ranges: Sequence[ScriptureRange]) -> Span:
        """
        Граница объединения.

        Стих начала — минимум среди диапазонов с минимальной главой начала;
        стих конца — максимум среди диапазонов с максимальной главой конца.
        """
        start_chapter = min(r.start_chapter for r in ranges)
        start_verse = min(r.start_verse for r in ranges if r.start_chapter == start_chapter)
        end_chapter = max(r.end_chapter for r in ranges)
        end_verse = max(r.end_verse for r in ranges if r.end_chapter == end_chapter)
        return Span(start_chapter, end_chapter, start_verse, end_verse)

    @staticmethod
    def _included_intervals(
        scripture_range: ScriptureRange, chapter: int, book: Book
    ) -> list[VerseInterval]:
        """Локальное окно диапазона в главе минус его исключения в этой главе."""
        included = [VerseInterval(*scripture_range.span.verse_window(chapter, book))]

        for exclusion in scripture_range.exclusions:
            if exclusion.covers_chapter(chapter):
                excluded = VerseInterval(*exclusion.verse_window(chapter, book))
                included = subtract_interval(included, excluded)

        return included


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def combine_ranges(ranges: Sequence[ScriptureRange]) -> ScriptureRange:
    """
    Объединение диапазонов одной книги.

    Raises:
        RangeValidationError: Если список пуст или книги различаются
    """
    return RangeCombiner().combine(ranges)
