"""
RangeCollection — упорядоченный набор диапазонов с опциональной идентификацией

- Диапазоны хранятся в порядке добавления
- Удаление только явное, по identity объекта
- id/name опциональны: None не сериализуется, пустая строка сериализуется

Агрегированные запросы:
- contains / ranges_containing: любое совпадение
- has_consecutive_chapters: по книгам; несколько диапазонов одной книги
  сначала объединяются через RangeCombiner, чтобы учесть главы, покрытые
  только совместно, и разрывы между диапазонами
- reference: групповая ссылка по книгам
"""

import json
from typing import Any, Callable, Iterator, Mapping

from pydantic import ValidationError

from scripture_ranges.core.domain.interfaces import Book, Verse
from scripture_ranges.core.domain.records import RangeCollectionRecord
from scripture_ranges.core.domain.reference import (
    ReferenceStyle,
    format_collection_reference,
    group_by_book,
)
from scripture_ranges.core.domain.scripture_range import ScriptureRange
from scripture_ranges.core.errors import RangeValidationError


class RangeCollection:
    """Набор диапазонов (возможно, из разных книг)."""

    def __init__(
        self,
        ranges: list[ScriptureRange] | None = None,
        name: str | None = None,
        id: str | None = None,
    ):
        """
        Args:
            ranges: Начальные диапазоны (копируются)
            name: Имя набора (None = отсутствует)
            id: Идентификатор набора (None = отсутствует)
        """
        self._ranges: list[ScriptureRange] = list(ranges or [])
        self.name = name
        self.id = id

    # -------------------------------------------------------------------------
    # Ranges
    # -------------------------------------------------------------------------

    def add_range(self, scripture_range: ScriptureRange) -> None:
        self._ranges.append(scripture_range)

    def remove_range(self, scripture_range: ScriptureRange) -> None:
        """Удаление диапазона по identity (не по равенству границ)."""
        self._ranges = [r for r in self._ranges if r is not scripture_range]

    @property
    def ranges(self) -> tuple[ScriptureRange, ...]:
        return tuple(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator[ScriptureRange]:
        return iter(tuple(self._ranges))

    def __repr__(self) -> str:
        return f"RangeCollection(name={self.name!r}, id={self.id!r}, ranges={len(self._ranges)})"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def contains(self, verse: Verse) -> bool:
        return any(r.contains(verse) for r in self._ranges)

    def ranges_containing(self, verse: Verse) -> list[ScriptureRange]:
        return [r for r in self._ranges if r.contains(verse)]

    def has_consecutive_chapters(self, minimum_count: int) -> bool:
        """
        Есть ли в какой-либо книге не менее minimum_count подряд идущих полных глав.

        Один диапазон книги проверяется напрямую; несколько — после объединения.
        """
        if minimum_count <= 0:
            return False

        for book_ranges in group_by_book(self._ranges).values():
            if len(book_ranges) == 1:
                candidate = book_ranges[0]
            else:
                candidate = ScriptureRange.combine(book_ranges)

            if candidate.has_consecutive_chapters(minimum_count):
                return True

        return False

    def reference(self, style: ReferenceStyle | None = None) -> str:
        """Групповая ссылка, например 'Genesis (1-3:15, 5-7:25), Luke 1:10'."""
        return format_collection_reference(self._ranges, style or ReferenceStyle())

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_record(self) -> dict[str, Any]:
        """{"ranges": [...], "name"?: str, "id"?: str}"""
        record = RangeCollectionRecord.model_validate(
            {
                "ranges": [r.to_record() for r in self._ranges],
                "name": self.name,
                "id": self.id,
            }
        )
        return record.to_dict()

    def to_json(self, indent: int | None = 4) -> str:
        return json.dumps(self.to_record(), indent=indent)

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any] | RangeCollectionRecord,
        book_lookup: Callable[[int], Book],
    ) -> "RangeCollection":
        """
        Восстановление набора из записи.

        Args:
            record: Запись набора
            book_lookup: Книга по позиции (start.book каждой записи диапазона)

        Raises:
            RangeValidationError: Если запись не соответствует формату
        """
        try:
            parsed = (
                record
                if isinstance(record, RangeCollectionRecord)
                else RangeCollectionRecord.model_validate(record)
            )
        except ValidationError as e:
            raise RangeValidationError(f"Invalid range collection record: {e}") from e

        ranges = [
            ScriptureRange.from_record(range_record, book_lookup(range_record.start.book))
            for range_record in parsed.ranges
        ]
        return cls(ranges, name=parsed.name, id=parsed.id)
