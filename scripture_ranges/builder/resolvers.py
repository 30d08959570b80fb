"""
Resolvers — разрешение книги и стиха из значений произвольного типа

Книга:
- значение, уже реализующее Book, возвращается как есть
- иначе resolvers перебираются по порядку; первый, у которого
  can_resolve() == True, выполняет resolve()
- ни один resolver не подошёл → RangeValidationError

Стих:
- None → None (используется значение по умолчанию)
- int → int
- Verse → verse.number
- иначе → RangeValidationError
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from scripture_ranges.core.domain.interfaces import Book, BookResolver, Verse
from scripture_ranges.core.errors import RangeValidationError


def _type_name(value: Any) -> str:
    return type(value).__name__


# =============================================================================
# RESOLVER CHAIN
# =============================================================================


def resolve_book(value: Any, resolvers: Iterable[BookResolver]) -> Book:
    """
    Разрешение книги через цепочку resolvers.

    Raises:
        RangeValidationError: Если ни один resolver не может обработать значение
            (ошибки самих resolvers пробрасываются без изменений)
    """
    if isinstance(value, Book):
        return value

    for resolver in resolvers:
        if resolver.can_resolve(value):
            return resolver.resolve(value)

    raise RangeValidationError(
        f"Unable to resolve book: {_type_name(value)}. "
        f"No registered resolver can handle this type."
    )


def resolve_verse(value: Any) -> int | None:
    """
    Разрешение номера стиха.

    Raises:
        RangeValidationError: Если значение не None, не int и не Verse
    """
    if value is None:
        return None

    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if isinstance(value, Verse):
        return value.number

    raise RangeValidationError(
        f"Unable to resolve verse: {_type_name(value)}. Expected int or Verse."
    )


# =============================================================================
# MAPPING RESOLVER
# =============================================================================


@dataclass(frozen=True)
class MappingBookResolver:
    """
    Resolver по фиксированному списку книг.

    Строки сопоставляются с именем книги без учёта регистра,
    целые числа — с позицией книги.
    """

    books: Sequence[Book] = field(default_factory=tuple)

    def _by_name(self, value: str) -> Book | None:
        key = value.strip().lower()
        for book in self.books:
            if book.name.lower() == key:
                return book
        return None

    def _by_position(self, value: int) -> Book | None:
        for book in self.books:
            if book.position == value:
                return book
        return None

    def _lookup(self, value: Any) -> Book | None:
        if isinstance(value, str):
            return self._by_name(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return self._by_position(value)
        return None

    def can_resolve(self, value: Any) -> bool:
        return self._lookup(value) is not None

    def resolve(self, value: Any) -> Book:
        book = self._lookup(value)
        if book is None:
            raise RangeValidationError(f"Unknown book: {value!r}")
        return book
