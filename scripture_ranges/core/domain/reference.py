"""
Reference — форматирование человекочитаемых ссылок

Два уровня форматирования:
1. format_range_reference: одиночный диапазон с именем книги ("Genesis 1-3:15")
2. format_collection_reference: набор диапазонов, сгруппированных по книгам
   ("Genesis (1-3:15, 5-7:25), Luke 1:10")

Правила (одиночный диапазон):
- is_full_end = end_verse == chapter_verse_count(end_chapter)
- одна глава:
    start 1 и full end     → "Book 3"
    start 1                → "Book 3:10"
    full end (start ≠ 1)   → "Book 3:5"  (end_verse не выводится)
    start == end           → "Book 3:5"
    иначе                  → "Book 3:5-10"
- несколько глав: "Book 1[:sv]-3[:ev]"

Внутри набора диапазон форматируется без имени книги, и ветка
"full end, start ≠ 1" выводит полный интервал ("2:5-25").
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from scripture_ranges.core.domain.scripture_range import ScriptureRange


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ReferenceStyle:
    """Конфигурация разделителей в ссылках."""

    chapter_verse_separator: str = ":"
    range_separator: str = "-"
    part_separator: str = ", "  # между частями внутри книги
    book_separator: str = ", "  # между книгами
    group_open: str = " ("
    group_close: str = ")"


DEFAULT_REFERENCE_STYLE = ReferenceStyle()


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def starts_at_chapter_start(scripture_range: "ScriptureRange") -> bool:
    return scripture_range.start_verse == 1


def ends_at_chapter_end(scripture_range: "ScriptureRange") -> bool:
    book = scripture_range.book
    return scripture_range.end_verse == book.chapter_verse_count(scripture_range.end_chapter)


def is_single_full_chapter(scripture_range: "ScriptureRange") -> bool:
    """Диапазон ровно на одну целую главу."""
    return (
        scripture_range.start_chapter == scripture_range.end_chapter
        and starts_at_chapter_start(scripture_range)
        and ends_at_chapter_end(scripture_range)
    )


def is_consecutive(first: "ScriptureRange", second: "ScriptureRange") -> bool:
    """
    Следует ли second непосредственно за first.

    Условия: одна книга (по имени), first заканчивается на последнем стихе
    своей главы, second начинается со стиха 1, и second начинается в той же
    или следующей главе.
    """
    if first.book.name != second.book.name:
        return False

    if second.start_chapter not in (first.end_chapter, first.end_chapter + 1):
        return False

    return ends_at_chapter_end(first) and starts_at_chapter_start(second)


# =============================================================================
# ОДИНОЧНЫЙ ДИАПАЗОН
# =============================================================================


def format_range_reference(
    scripture_range: "ScriptureRange", style: ReferenceStyle = DEFAULT_REFERENCE_STYLE
) -> str:
    """
    Ссылка на одиночный диапазон с именем книги.

    Args:
        scripture_range: Диапазон
        style: Разделители

    Returns:
        Например "Genesis 1-3:15"
    """
    name = scripture_range.book.name
    sep = style.chapter_verse_separator
    start_chapter = scripture_range.start_chapter
    end_chapter = scripture_range.end_chapter
    start_verse = scripture_range.start_verse
    end_verse = scripture_range.end_verse
    is_full_end = ends_at_chapter_end(scripture_range)

    if start_chapter == end_chapter:
        if start_verse == 1 and is_full_end:
            return f"{name} {start_chapter}"
        if start_verse == 1:
            return f"{name} {start_chapter}{sep}{end_verse}"
        if is_full_end:
            # end_verse не выводится
            return f"{name} {start_chapter}{sep}{start_verse}"
        if start_verse == end_verse:
            return f"{name} {start_chapter}{sep}{start_verse}"
        return f"{name} {start_chapter}{sep}{start_verse}{style.range_separator}{end_verse}"

    start_part = (
        f"{name} {start_chapter}"
        if start_verse == 1
        else f"{name} {start_chapter}{sep}{start_verse}"
    )
    end_part = f"{end_chapter}" if is_full_end else f"{end_chapter}{sep}{end_verse}"
    return f"{start_part}{style.range_separator}{end_part}"


def format_range_part(
    scripture_range: "ScriptureRange", style: ReferenceStyle = DEFAULT_REFERENCE_STYLE
) -> str:
    """Диапазон без имени книги (часть групповой ссылки)."""
    sep = style.chapter_verse_separator
    dash = style.range_separator
    start_chapter = scripture_range.start_chapter
    end_chapter = scripture_range.end_chapter
    start_verse = scripture_range.start_verse
    end_verse = scripture_range.end_verse
    is_full_start = starts_at_chapter_start(scripture_range)
    is_full_end = ends_at_chapter_end(scripture_range)

    if start_chapter == end_chapter:
        if is_full_start and is_full_end:
            return f"{start_chapter}"
        if is_full_start:
            return f"{start_chapter}{sep}{end_verse}"
        if start_verse == end_verse:
            return f"{start_chapter}{sep}{start_verse}"
        return f"{start_chapter}{sep}{start_verse}{dash}{end_verse}"

    start_part = f"{start_chapter}" if is_full_start else f"{start_chapter}{sep}{start_verse}"
    end_part = f"{end_chapter}" if is_full_end else f"{end_chapter}{sep}{end_verse}"
    return f"{start_part}{dash}{end_part}"


# =============================================================================
# НАБОР ДИАПАЗОНОВ
# =============================================================================


def group_consecutive(ranges: Sequence["ScriptureRange"]) -> list[list["ScriptureRange"]]:
    """
    Разбиение отсортированных диапазонов на максимальные серии подряд идущих.

    Args:
        ranges: Диапазоны одной книги, отсортированные по (start_chapter, start_verse)
    """
    groups: list[list["ScriptureRange"]] = []
    for scripture_range in ranges:
        if groups and is_consecutive(groups[-1][-1], scripture_range):
            groups[-1].append(scripture_range)
        else:
            groups.append([scripture_range])
    return groups


def format_group(
    group: Sequence["ScriptureRange"], style: ReferenceStyle = DEFAULT_REFERENCE_STYLE
) -> str:
    """
    Серия подряд идущих диапазонов.

    Если каждый диапазон серии — ровно одна целая глава, серия сворачивается
    в "first-last". Иначе части перечисляются через part_separator.
    """
    if len(group) == 1:
        return format_range_part(group[0], style)

    if all(is_single_full_chapter(r) for r in group):
        return f"{group[0].start_chapter}{style.range_separator}{group[-1].end_chapter}"

    return style.part_separator.join(format_range_part(r, style) for r in group)


def format_book_reference(
    ranges: Sequence["ScriptureRange"], style: ReferenceStyle = DEFAULT_REFERENCE_STYLE
) -> str:
    """Ссылка на все диапазоны одной книги."""
    if len(ranges) == 1:
        return format_range_reference(ranges[0], style)

    ordered = sorted(ranges, key=lambda r: (r.start_chapter, r.start_verse))
    parts = [format_group(group, style) for group in group_consecutive(ordered)]
    book_name = ordered[0].book.name
    return f"{book_name}{style.group_open}{style.part_separator.join(parts)}{style.group_close}"


def group_by_book(ranges: Sequence["ScriptureRange"]) -> dict[str, list["ScriptureRange"]]:
    """Группировка по имени книги в порядке первого появления."""
    grouped: dict[str, list["ScriptureRange"]] = {}
    for scripture_range in ranges:
        grouped.setdefault(scripture_range.book.name, []).append(scripture_range)
    return grouped


def format_collection_reference(
    ranges: Sequence["ScriptureRange"], style: ReferenceStyle = DEFAULT_REFERENCE_STYLE
) -> str:
    """
    Ссылка на набор диапазонов.

    Returns:
        "" для пустого набора, иначе ссылки по книгам через book_separator
    """
    if not ranges:
        return ""

    return style.book_separator.join(
        format_book_reference(book_ranges, style)
        for book_ranges in group_by_book(ranges).values()
    )
