"""
ScriptureRange — диапазон (глава, стих) внутри одной книги с исключениями

Основной value type библиотеки:
- Книга и основной Span фиксируются при создании
- Список исключений изменяется только через add/remove exclusion
- Исключения могут пересекаться и дублироваться; при проверке contains
  они объединяются (любое совпадение исключает стих)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Основной Span валиден (validate_span)
2. Каждое исключение, добавленное через add_exclusion, лежит внутри глав
   основного Span. Стихи на граничных главах не проверяются.
3. Ошибка валидации не изменяет диапазон
"""

import json
from typing import Any, Mapping

from pydantic import ValidationError

from scripture_ranges.core.domain.interfaces import Book, Verse
from scripture_ranges.core.domain.records import RangeRecord
from scripture_ranges.core.domain.reference import (
    ReferenceStyle,
    format_range_reference,
)
from scripture_ranges.core.domain.span import Span, validate_span
from scripture_ranges.core.errors import RangeValidationError


class ScriptureRange:
    """
    Диапазон стихов одной книги с исключениями.

    Пример:
        >>> r = ScriptureRange(genesis, 1, 3, 1, 15)
        >>> r.reference()
        'Genesis 1-3:15'
    """

    def __init__(
        self,
        book: Book,
        start_chapter: int,
        end_chapter: int,
        start_verse: int,
        end_verse: int,
    ):
        """
        Args:
            book: Книга (capability Book)
            start_chapter: Первая глава
            end_chapter: Последняя глава
            start_verse: Первый стих (относится к start_chapter)
            end_verse: Последний стих (относится к end_chapter)

        Raises:
            RangeValidationError: Если границы некорректны
        """
        span = Span(start_chapter, end_chapter, start_verse, end_verse)
        validate_span(span, "Range")

        self._book = book
        self._span = span
        self._exclusions: list[Span] = []

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def book(self) -> Book:
        return self._book

    @property
    def span(self) -> Span:
        return self._span

    @property
    def start_chapter(self) -> int:
        return self._span.start_chapter

    @property
    def end_chapter(self) -> int:
        return self._span.end_chapter

    @property
    def start_verse(self) -> int:
        return self._span.start_verse

    @property
    def end_verse(self) -> int:
        return self._span.end_verse

    @property
    def exclusions(self) -> tuple[Span, ...]:
        """Исключения в порядке добавления (read-only)."""
        return tuple(self._exclusions)

    def __repr__(self) -> str:
        return (
            f"ScriptureRange({self._book.name!r}, {self.start_chapter}, {self.end_chapter}, "
            f"{self.start_verse}, {self.end_verse}, exclusions={len(self._exclusions)})"
        )

    # -------------------------------------------------------------------------
    # Containment
    # -------------------------------------------------------------------------

    def contains(self, verse: Verse) -> bool:
        """
        Входит ли стих в диапазон.

        Книга сравнивается по имени. Стих внутри любого исключения не входит.
        """
        if verse.book.name != self._book.name:
            return False

        return self.includes(verse.chapter_number, verse.number)

    def includes(self, chapter: int, verse: int) -> bool:
        """Проверка координаты (глава, стих) без сравнения книги."""
        if not self._span.contains_point(chapter, verse):
            return False

        for exclusion in self._exclusions:
            if exclusion.contains_point(chapter, verse):
                return False

        return True

    # -------------------------------------------------------------------------
    # Exclusions
    # -------------------------------------------------------------------------

    def add_exclusion(
        self, start_chapter: int, end_chapter: int, start_verse: int, end_verse: int
    ) -> None:
        """
        Добавление исключения с валидацией.

        Проверяются только границы глав относительно основного Span.

        Raises:
            RangeValidationError: Если исключение некорректно или выходит
                за главы диапазона
        """
        exclusion = Span(start_chapter, end_chapter, start_verse, end_verse)
        validate_span(exclusion, "Exclusion")

        if (
            exclusion.start_chapter < self.start_chapter
            or exclusion.end_chapter > self.end_chapter
        ):
            raise RangeValidationError(
                f"Exclusion must be within this range: chapters "
                f"{exclusion.start_chapter}-{exclusion.end_chapter} outside "
                f"{self.start_chapter}-{self.end_chapter}"
            )

        self._exclusions.append(exclusion)

    def add_exclusion_unsafe(
        self, start_chapter: int, end_chapter: int, start_verse: int, end_verse: int
    ) -> None:
        """
        Добавление исключения без валидации.

        Только для доверенных вызовов (RangeCombiner), которые уже гарантируют
        корректность интервала.
        """
        self._exclusions.append(Span(start_chapter, end_chapter, start_verse, end_verse))

    def remove_exclusion(
        self, start_chapter: int, end_chapter: int, start_verse: int, end_verse: int
    ) -> None:
        """Удаление всех исключений, структурно равных заданному."""
        target = Span(start_chapter, end_chapter, start_verse, end_verse)
        self._exclusions = [e for e in self._exclusions if e != target]

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def reference(self, style: ReferenceStyle | None = None) -> str:
        """Человекочитаемая ссылка, например 'Genesis 1-3:15'."""
        return format_range_reference(self, style or ReferenceStyle())

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def _bound_verse_or_none(self, chapter: int, verse: int) -> int | None:
        """None если стих — последний в главе (конец опускается)."""
        return None if verse == self._book.chapter_verse_count(chapter) else verse

    def to_record(self) -> dict[str, Any]:
        """
        Компактная запись диапазона.

        start.verse опускается если равен 1, end.verse — если это последний
        стих главы. exclude опускается если исключений нет.
        """
        position = self._book.position
        data: dict[str, Any] = {
            "start": {
                "book": position,
                "chapter": self.start_chapter,
                "verse": self.start_verse if self.start_verse != 1 else None,
            },
            "end": {
                "book": position,
                "chapter": self.end_chapter,
                "verse": self._bound_verse_or_none(self.end_chapter, self.end_verse),
            },
        }

        if self._exclusions:
            data["exclude"] = [
                {
                    "start": {
                        "chapter": e.start_chapter,
                        "verse": e.start_verse if e.start_verse != 1 else None,
                    },
                    "end": {
                        "chapter": e.end_chapter,
                        "verse": self._bound_verse_or_none(e.end_chapter, e.end_verse),
                    },
                }
                for e in self._exclusions
            ]

        return RangeRecord.model_validate(data).to_dict()

    def to_json(self, indent: int | None = 4) -> str:
        return json.dumps(self.to_record(), indent=indent)

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | RangeRecord, book: Book) -> "ScriptureRange":
        """
        Восстановление диапазона из записи.

        Отсутствующий start.verse → 1, отсутствующий end.verse →
        последний стих end.chapter. Те же правила для каждого исключения;
        исключения добавляются через add_exclusion (с валидацией).

        Raises:
            RangeValidationError: Если запись не соответствует формату
                или границы некорректны
        """
        try:
            parsed = (
                record if isinstance(record, RangeRecord) else RangeRecord.model_validate(record)
            )
        except ValidationError as e:
            raise RangeValidationError(f"Invalid range record: {e}") from e

        end_chapter = parsed.end.chapter
        scripture_range = cls(
            book,
            parsed.start.chapter,
            end_chapter,
            parsed.start.verse if parsed.start.verse is not None else 1,
            parsed.end.verse
            if parsed.end.verse is not None
            else book.chapter_verse_count(end_chapter),
        )

        for exclusion in parsed.exclude or []:
            scripture_range.add_exclusion(
                exclusion.start.chapter,
                exclusion.end.chapter,
                exclusion.start.verse if exclusion.start.verse is not None else 1,
                exclusion.end.verse
                if exclusion.end.verse is not None
                else book.chapter_verse_count(exclusion.end.chapter),
            )

        return scripture_range

    # -------------------------------------------------------------------------
    # Range algebra
    # -------------------------------------------------------------------------

    @staticmethod
    def combine(ranges: "list[ScriptureRange]") -> "ScriptureRange":
        """
        Объединение диапазонов одной книги в один.

        Стих входит в результат, если он входит хотя бы в один исходный диапазон.

        Raises:
            RangeValidationError: Если список пуст или книги различаются
        """
        from scripture_ranges.core.algebra.combiner import RangeCombiner

        return RangeCombiner().combine(ranges)

    def has_consecutive_chapters(self, minimum_count: int) -> bool:
        """Есть ли не менее minimum_count подряд идущих полных глав."""
        from scripture_ranges.core.algebra.chapter_fullness import ChapterFullnessChecker

        return ChapterFullnessChecker(self).has_consecutive_chapters(minimum_count)

    def full_chapter_runs(self) -> list[tuple[int, int]]:
        """Максимальные серии полных глав: [(first, last), ...]."""
        from scripture_ranges.core.algebra.chapter_fullness import ChapterFullnessChecker

        return ChapterFullnessChecker(self).full_chapter_runs()

    def is_equivalent_to(self, other: "ScriptureRange") -> bool:
        """
        Эквивалентность диапазонов: та же книга (по имени), те же границы
        и одинаковое вхождение каждого стиха основного Span.

        Внутреннее представление исключений может различаться.
        """
        if self._book.name != other.book.name or self._span != other.span:
            return False

        for chapter in range(self.start_chapter, self.end_chapter + 1):
            first, last = self._span.verse_window(chapter, self._book)
            for verse in range(first, last + 1):
                if self.includes(chapter, verse) != other.includes(chapter, verse):
                    return False

        return True
