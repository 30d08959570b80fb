"""
Chapter Fullness — проверка полных глав и серий подряд идущих полных глав

Глава c "полная", если:
1. c ≠ start_chapter или start_verse == 1
2. c ≠ end_chapter или end_verse == chapter_verse_count(c)
3. Ни один стих 1..chapter_verse_count(c) не исключён

Оптимизация: если ни одно исключение не пересекает главу c, условие 3
считается выполненным без перебора стихов. Перебор стихов выполняется
только для глав, которые пересекаются хотя бы с одним исключением.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scripture_ranges.core.domain.scripture_range import ScriptureRange


class ChapterFullnessChecker:
    """
    Проверка полных глав диапазона.

    Работает с границами и исключениями ScriptureRange, не изменяя его.
    """

    def __init__(self, scripture_range: "ScriptureRange"):
        self._range = scripture_range

    def is_full_chapter(self, chapter: int) -> bool:
        """
        Полностью ли включена глава (все стихи 1..count с учётом исключений).

        Args:
            chapter: Номер главы

        Returns:
            False для глав вне диапазона
        """
        scripture_range = self._range
        if chapter < scripture_range.start_chapter or chapter > scripture_range.end_chapter:
            return False

        verse_count = scripture_range.book.chapter_verse_count(chapter)

        if chapter == scripture_range.start_chapter and scripture_range.start_verse != 1:
            return False

        if chapter == scripture_range.end_chapter and scripture_range.end_verse != verse_count:
            return False

        if not any(e.covers_chapter(chapter) for e in scripture_range.exclusions):
            return True

        return all(
            scripture_range.includes(chapter, verse) for verse in range(1, verse_count + 1)
        )

    def has_consecutive_chapters(self, minimum_count: int) -> bool:
        """
        Есть ли не менее minimum_count подряд идущих полных глав.

        Args:
            minimum_count: Минимальная длина серии

        Returns:
            False если minimum_count ≤ 0
        """
        if minimum_count <= 0:
            return False

        consecutive = 0
        for chapter in range(self._range.start_chapter, self._range.end_chapter + 1):
            if self.is_full_chapter(chapter):
                consecutive += 1
                if consecutive >= minimum_count:
                    return True
            else:
                consecutive = 0

        return False

    def full_chapter_runs(self) -> list[tuple[int, int]]:
        """
        Максимальные серии подряд идущих полных глав.

        Returns:
            [(first_chapter, last_chapter), ...] в порядке возрастания
        """
        runs: list[tuple[int, int]] = []
        run_start: int | None = None

        for chapter in range(self._range.start_chapter, self._range.end_chapter + 1):
            if self.is_full_chapter(chapter):
                if run_start is None:
                    run_start = chapter
            elif run_start is not None:
                runs.append((run_start, chapter - 1))
                run_start = None

        if run_start is not None:
            runs.append((run_start, self._range.end_chapter))

        return runs

    def longest_run(self) -> int:
        """Длина самой длинной серии полных глав (0 если их нет)."""
        return max((last - first + 1 for first, last in self.full_chapter_runs()), default=0)
