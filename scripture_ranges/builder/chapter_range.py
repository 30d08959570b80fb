"""
ChapterRange — интервал глав для builder

with_range("john", ChapterRange.span(3, 5)) эквивалентно
with_range("john", 3, chapter_end=5).
"""

from dataclasses import dataclass

from scripture_ranges.core.errors import RangeValidationError


@dataclass(frozen=True)
class ChapterRange:
    """Интервал глав [start, end]."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise RangeValidationError(
                f"Start chapter cannot be greater than end chapter ({self.start} > {self.end})"
            )

    @classmethod
    def span(cls, start: int, end: int) -> "ChapterRange":
        return cls(start, end)

    @classmethod
    def single(cls, chapter: int) -> "ChapterRange":
        return cls(chapter, chapter)

    @property
    def is_single_chapter(self) -> bool:
        return self.start == self.end
