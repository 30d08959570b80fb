"""
Interfaces — внешние capability, которые потребляет ядро

Ядро не знает реальных книг и количества стихов. Всё это приходит извне
через три протокола:
- Book: имя, позиция (стабильный ключ сериализации), число стихов в главе
- Verse: точка (книга, глава, стих) для проверки contains
- BookResolver: преобразование произвольного значения в Book (используется builder)

StaticBook — простая реализация Book поверх статической таблицы.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class Book(Protocol):
    """Книга: имя, позиция и число стихов в главе."""

    @property
    def name(self) -> str: ...

    @property
    def position(self) -> int: ...

    def chapter_verse_count(self, chapter: int) -> int: ...


@runtime_checkable
class Verse(Protocol):
    """Стих как точка для проверки вхождения."""

    @property
    def number(self) -> int: ...

    @property
    def chapter_number(self) -> int: ...

    @property
    def book(self) -> Book: ...


@runtime_checkable
class BookResolver(Protocol):
    """
    Стратегия разрешения книги из произвольного значения.

    resolve() должен сигнализировать об ошибке через RangeValidationError.
    """

    def can_resolve(self, value: Any) -> bool: ...

    def resolve(self, value: Any) -> Book: ...


# =============================================================================
# STATIC BOOK
# =============================================================================


@dataclass(frozen=True)
class StaticBook:
    """
    Книга на основе статической таблицы числа стихов.

    Главы, отсутствующие в verse_counts, получают default_verse_count.
    """

    name: str
    position: int
    verse_counts: Mapping[int, int] = field(default_factory=dict, hash=False)
    default_verse_count: int = 30

    def chapter_verse_count(self, chapter: int) -> int:
        return self.verse_counts.get(chapter, self.default_verse_count)


@dataclass(frozen=True)
class StaticVerse:
    """Простая реализация Verse."""

    book: Book
    chapter_number: int
    number: int
