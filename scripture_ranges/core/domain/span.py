"""
Span — интервал координат (глава, стих)

Span = (start_chapter, end_chapter, start_verse, end_verse).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. start_chapter ≤ end_chapter
2. Если start_chapter == end_chapter, то start_verse ≤ end_verse
3. start_verse относится только к start_chapter, end_verse — только к end_chapter.
   Промежуточные главы входят целиком ("все стихи").

Сам Span не валидирует себя при создании: проверка выполняется явно через
validate_span(). ScriptureRange.add_exclusion_unsafe() её пропускает.
"""

from dataclasses import dataclass

from scripture_ranges.core.errors import RangeValidationError
from scripture_ranges.core.domain.interfaces import Book


# =============================================================================
# SPAN
# =============================================================================


@dataclass(frozen=True)
class Span:
    """Интервал (глава, стих) — (глава, стих). Равенство структурное."""

    start_chapter: int
    end_chapter: int
    start_verse: int
    end_verse: int

    def covers_chapter(self, chapter: int) -> bool:
        """True если глава лежит в [start_chapter, end_chapter]."""
        return self.start_chapter <= chapter <= self.end_chapter

    def contains_point(self, chapter: int, verse: int) -> bool:
        """
        Проверка попадания точки (глава, стих) в span.

        Граница стихов проверяется только на граничных главах.
        """
        if chapter < self.start_chapter or chapter > self.end_chapter:
            return False

        if chapter == self.start_chapter and verse < self.start_verse:
            return False

        if chapter == self.end_chapter and verse > self.end_verse:
            return False

        return True

    def verse_window(self, chapter: int, book: Book) -> tuple[int, int]:
        """
        Локальное окно стихов главы внутри span.

        Args:
            chapter: Номер главы (должна лежать внутри span)
            book: Книга для определения последнего стиха промежуточных глав

        Returns:
            (first_verse, last_verse) включительно
        """
        first = self.start_verse if chapter == self.start_chapter else 1
        last = (
            self.end_verse
            if chapter == self.end_chapter
            else book.chapter_verse_count(chapter)
        )
        return first, last

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.start_chapter, self.end_chapter, self.start_verse, self.end_verse)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_span(span: Span, label: str = "Range") -> None:
    """
    Проверка корректности границ span.

    Args:
        span: Проверяемый интервал
        label: Префикс сообщения об ошибке ("Range", "Exclusion")

    Raises:
        RangeValidationError: Если границы не положительные целые
            или начало позже конца
    """
    for field_name, value in zip(
        ("start_chapter", "end_chapter", "start_verse", "end_verse"), span.as_tuple()
    ):
        if not _is_positive_int(value):
            raise RangeValidationError(
                f"{label} {field_name} must be a positive integer, got {value!r}"
            )

    if span.start_chapter > span.end_chapter:
        raise RangeValidationError(
            f"{label} start chapter cannot be greater than end chapter "
            f"({span.start_chapter} > {span.end_chapter})"
        )

    if span.start_chapter == span.end_chapter and span.start_verse > span.end_verse:
        raise RangeValidationError(
            f"{label} start verse cannot be greater than end verse in same chapter "
            f"({span.start_verse} > {span.end_verse})"
        )
