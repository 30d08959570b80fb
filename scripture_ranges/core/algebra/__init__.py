"""
Range algebra для scripture_ranges

Объединение диапазонов, проверка полных глав и арифметика интервалов стихов.
"""

# Verse intervals
from scripture_ranges.core.algebra.intervals import (
    VerseInterval,
    find_gaps,
    merge_intervals,
    subtract_interval,
)

# Chapter fullness
from scripture_ranges.core.algebra.chapter_fullness import ChapterFullnessChecker

# Combiner
from scripture_ranges.core.algebra.combiner import RangeCombiner, combine_ranges

__all__ = [
    # Verse intervals
    "VerseInterval",
    "find_gaps",
    "merge_intervals",
    "subtract_interval",
    # Chapter fullness
    "ChapterFullnessChecker",
    # Combiner
    "RangeCombiner",
    "combine_ranges",
]
