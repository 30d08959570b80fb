"""
Verse Intervals — арифметика интервалов стихов внутри одной главы

Примитивы для RangeCombiner:
- subtract_interval: вычитание исключения из набора включённых интервалов
- merge_intervals: объединение пересекающихся и соседних интервалов
- find_gaps: поиск непокрытых участков окна

Все интервалы замкнутые: [start, end], start ≤ end.
Соседние интервалы (end + 1 == start) при объединении склеиваются.
"""

from typing import Iterable, NamedTuple


class VerseInterval(NamedTuple):
    """Замкнутый интервал стихов [start, end]."""

    start: int
    end: int


def subtract_interval(
    included: Iterable[VerseInterval], excluded: VerseInterval
) -> list[VerseInterval]:
    """
    Вычитание интервала из набора интервалов.

    Исключение, попавшее внутрь интервала, разбивает его максимум на две части.

    Args:
        included: Включённые интервалы
        excluded: Вычитаемый интервал

    Returns:
        Новый список интервалов (порядок сохраняется)

    Examples:
        >>> subtract_interval([VerseInterval(1, 10)], VerseInterval(4, 6))
        [VerseInterval(start=1, end=3), VerseInterval(start=7, end=10)]
    """
    result: list[VerseInterval] = []
    for interval in included:
        if excluded.end < interval.start or excluded.start > interval.end:
            result.append(interval)
            continue

        if interval.start < excluded.start:
            result.append(VerseInterval(interval.start, excluded.start - 1))
        if interval.end > excluded.end:
            result.append(VerseInterval(excluded.end + 1, interval.end))

    return result


def merge_intervals(intervals: Iterable[VerseInterval]) -> list[VerseInterval]:
    """
    Объединение пересекающихся и соседних интервалов.

    Returns:
        Отсортированный по start список непересекающихся интервалов

    Examples:
        >>> merge_intervals([VerseInterval(5, 8), VerseInterval(1, 4), VerseInterval(10, 12)])
        [VerseInterval(start=1, end=8), VerseInterval(start=10, end=12)]
    """
    ordered = sorted(intervals)
    if not ordered:
        return []

    merged = [ordered[0]]
    for interval in ordered[1:]:
        last = merged[-1]
        if interval.start <= last.end + 1:
            merged[-1] = VerseInterval(last.start, max(last.end, interval.end))
        else:
            merged.append(interval)

    return merged


def find_gaps(
    window: VerseInterval, covered: Iterable[VerseInterval]
) -> list[VerseInterval]:
    """
    Участки окна, не покрытые ни одним интервалом.

    Args:
        window: Окно стихов главы
        covered: Покрывающие интервалы, отсортированные и объединённые
            (результат merge_intervals)

    Returns:
        Список непокрытых интервалов в порядке возрастания
    """
    gaps: list[VerseInterval] = []
    current = window.start

    for interval in covered:
        if interval.start > window.end:
            break
        if current < interval.start:
            gaps.append(VerseInterval(current, interval.start - 1))
        current = max(current, interval.end + 1)

    if current <= window.end:
        gaps.append(VerseInterval(current, window.end))

    return gaps
