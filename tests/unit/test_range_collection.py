"""
Тесты для RangeCollection

Проверяет:
1. add/remove (remove по identity)
2. contains / ranges_containing
3. has_consecutive_chapters с объединением диапазонов одной книги
4. reference() — группировка по книгам и серии подряд идущих диапазонов
5. to_record / from_record (name/id: None опускается, "" сохраняется)
"""

import json

import pytest

from scripture_ranges import (
    RangeCollection,
    RangeValidationError,
    ReferenceStyle,
    ScriptureRange,
    Span,
    StaticBook,
)
from tests import mocks
from tests.mocks import verse


@pytest.fixture
def genesis():
    return mocks.genesis()


@pytest.fixture
def luke():
    return mocks.luke()


@pytest.fixture
def john():
    return mocks.john()


@pytest.fixture
def samuel():
    return mocks.samuel()


# =============================================================================
# MEMBERSHIP
# =============================================================================


class TestMembership:
    """Тесты add_range / remove_range / contains."""

    def test_empty(self) -> None:
        collection = RangeCollection()

        assert len(collection) == 0
        assert collection.ranges == ()
        assert collection.name is None
        assert collection.id is None

    def test_add_preserves_order(self, genesis, luke) -> None:
        a = ScriptureRange(luke, 1, 1, 1, 10)
        b = ScriptureRange(genesis, 1, 1, 1, 10)

        collection = RangeCollection()
        collection.add_range(a)
        collection.add_range(b)

        assert collection.ranges == (a, b)
        assert list(collection) == [a, b]

    def test_remove_by_identity(self, genesis) -> None:
        """Диапазоны с одинаковыми границами — разные объекты"""
        a = ScriptureRange(genesis, 1, 1, 1, 10)
        b = ScriptureRange(genesis, 1, 1, 1, 10)
        collection = RangeCollection([a, b])

        collection.remove_range(a)

        assert len(collection) == 1
        assert collection.ranges[0] is b

    def test_remove_missing_is_noop(self, genesis) -> None:
        a = ScriptureRange(genesis, 1, 1, 1, 10)
        collection = RangeCollection([a])

        collection.remove_range(ScriptureRange(genesis, 1, 1, 1, 10))

        assert collection.ranges == (a,)

    def test_initial_ranges_copied(self, genesis) -> None:
        initial = [ScriptureRange(genesis, 1, 1, 1, 10)]
        collection = RangeCollection(initial)

        initial.append(ScriptureRange(genesis, 2, 2, 1, 10))

        assert len(collection) == 1

    def test_contains(self, genesis, luke) -> None:
        collection = RangeCollection(
            [ScriptureRange(genesis, 1, 1, 1, 10), ScriptureRange(luke, 2, 2, 1, 5)]
        )

        assert collection.contains(verse(genesis, 1, 5))
        assert collection.contains(verse(luke, 2, 5))
        assert not collection.contains(verse(genesis, 2, 1))
        assert not collection.contains(verse(luke, 1, 5))

    def test_contains_respects_exclusions(self, genesis) -> None:
        r = ScriptureRange(genesis, 1, 1, 1, 10)
        r.add_exclusion(1, 1, 5, 5)
        collection = RangeCollection([r])

        assert not collection.contains(verse(genesis, 1, 5))

    def test_empty_contains_nothing(self, genesis) -> None:
        assert not RangeCollection().contains(verse(genesis, 1, 1))

    def test_ranges_containing(self, genesis) -> None:
        a = ScriptureRange(genesis, 1, 1, 1, 10)
        b = ScriptureRange(genesis, 1, 2, 5, 5)
        c = ScriptureRange(genesis, 3, 3, 1, 5)
        collection = RangeCollection([a, b, c])

        assert collection.ranges_containing(verse(genesis, 1, 7)) == [a, b]
        assert collection.ranges_containing(verse(genesis, 4, 1)) == []


# =============================================================================
# CONSECUTIVE CHAPTERS
# =============================================================================


class TestConsecutiveChapters:
    """Тесты has_consecutive_chapters."""

    def test_chapters_covered_only_jointly(self, genesis) -> None:
        collection = RangeCollection(
            [ScriptureRange(genesis, 1, 2, 1, 25), ScriptureRange(genesis, 3, 4, 1, 30)]
        )

        assert collection.has_consecutive_chapters(4)
        assert not collection.has_consecutive_chapters(5)

    def test_chapters_split_within_verse_boundaries(self, genesis) -> None:
        """Глава 2 покрыта двумя половинами из разных диапазонов"""
        collection = RangeCollection(
            [ScriptureRange(genesis, 1, 2, 1, 10), ScriptureRange(genesis, 2, 3, 11, 24)]
        )

        assert collection.has_consecutive_chapters(3)

    def test_gap_between_ranges(self, genesis) -> None:
        collection = RangeCollection(
            [ScriptureRange(genesis, 1, 1, 1, 31), ScriptureRange(genesis, 3, 3, 1, 24)]
        )

        assert collection.has_consecutive_chapters(1)
        assert not collection.has_consecutive_chapters(2)

    def test_books_not_combined(self, genesis, luke) -> None:
        collection = RangeCollection(
            [ScriptureRange(genesis, 1, 2, 1, 25), ScriptureRange(luke, 3, 4, 1, 44)]
        )

        assert collection.has_consecutive_chapters(2)
        assert not collection.has_consecutive_chapters(3)

    def test_single_range_checked_directly(self, genesis) -> None:
        collection = RangeCollection([ScriptureRange(genesis, 1, 3, 1, 24)])
        assert collection.has_consecutive_chapters(3)

    @pytest.mark.parametrize("minimum_count", [0, -1])
    def test_non_positive_count_is_false(self, genesis, minimum_count) -> None:
        collection = RangeCollection([ScriptureRange(genesis, 1, 3, 1, 24)])
        assert not collection.has_consecutive_chapters(minimum_count)

    def test_empty(self) -> None:
        assert not RangeCollection().has_consecutive_chapters(1)

    def test_ranges_not_modified(self, genesis) -> None:
        a = ScriptureRange(genesis, 1, 1, 1, 31)
        b = ScriptureRange(genesis, 3, 3, 1, 24)

        RangeCollection([a, b]).has_consecutive_chapters(2)

        assert a.exclusions == ()
        assert b.exclusions == ()


# =============================================================================
# REFERENCE
# =============================================================================


class TestReference:
    """Тесты reference()."""

    def test_empty(self) -> None:
        assert RangeCollection().reference() == ""

    def test_single_range_uses_range_reference(self, genesis) -> None:
        collection = RangeCollection([ScriptureRange(genesis, 1, 3, 1, 15)])
        assert collection.reference() == "Genesis 1-3:15"

    def test_grouped_by_book(self, genesis, luke) -> None:
        collection = RangeCollection(
            [
                ScriptureRange(genesis, 1, 3, 1, 15),
                ScriptureRange(genesis, 5, 7, 1, 25),
                ScriptureRange(luke, 1, 1, 1, 10),
            ]
        )

        assert collection.reference() == "Genesis (1-3:15, 5-7:25), Luke 1:10"

    def test_books_in_first_appearance_order(self, genesis, luke, john) -> None:
        collection = RangeCollection(
            [
                ScriptureRange(genesis, 1, 3, 1, 15),
                ScriptureRange(luke, 1, 1, 1, 10),
                ScriptureRange(john, 1, 2, 1, 25),
            ]
        )

        assert collection.reference() == "Genesis 1-3:15, Luke 1:10, John 1-2"

    def test_consecutive_multi_chapter_ranges_listed(self) -> None:
        """Подряд идущие многоглавные диапазоны не сворачиваются"""
        book = StaticBook("Genesis", 1, {3: 31, 6: 25})
        collection = RangeCollection(
            [ScriptureRange(book, 1, 3, 1, 31), ScriptureRange(book, 4, 6, 1, 25)]
        )

        assert collection.reference() == "Genesis (1-3, 4-6)"

    def test_partial_end_kept_in_parts(self, genesis) -> None:
        collection = RangeCollection(
            [
                ScriptureRange(genesis, 1, 3, 1, 31),
                ScriptureRange(genesis, 5, 7, 1, 25),
                ScriptureRange(genesis, 10, 12, 1, 20),
            ]
        )

        assert collection.reference() == "Genesis (1-3:31, 5-7:25, 10-12)"

    def test_consecutive_single_chapters_collapsed(self, genesis) -> None:
        collection = RangeCollection(
            [
                ScriptureRange(genesis, 1, 1, 1, 31),
                ScriptureRange(genesis, 2, 2, 1, 25),
                ScriptureRange(genesis, 3, 3, 1, 24),
            ]
        )

        assert collection.reference() == "Genesis (1-3)"

    def test_partial_chapter_between_full_chapters(self, genesis) -> None:
        collection = RangeCollection(
            [
                ScriptureRange(genesis, 1, 1, 1, 31),
                ScriptureRange(genesis, 2, 2, 5, 25),
                ScriptureRange(genesis, 3, 3, 1, 24),
            ]
        )

        assert collection.reference() == "Genesis (1, 2:5-25, 3)"

    def test_overlapping_chapter(self, genesis) -> None:
        collection = RangeCollection(
            [
                ScriptureRange(genesis, 1, 1, 1, 31),
                ScriptureRange(genesis, 1, 1, 5, 25),
                ScriptureRange(genesis, 2, 2, 1, 25),
            ]
        )

        assert collection.reference() == "Genesis (1, 1:5-25, 2)"

    def test_sorted_within_book(self, samuel) -> None:
        collection = RangeCollection(
            [ScriptureRange(samuel, 26, 31, 1, 13), ScriptureRange(samuel, 16, 24, 1, 22)]
        )

        assert collection.reference() == "1 Samuel (16-24, 26-31)"

    def test_custom_style(self, genesis, luke) -> None:
        style = ReferenceStyle(chapter_verse_separator=".", part_separator="; ")
        collection = RangeCollection(
            [
                ScriptureRange(genesis, 1, 3, 1, 15),
                ScriptureRange(genesis, 5, 7, 1, 25),
                ScriptureRange(luke, 1, 1, 1, 10),
            ]
        )

        assert collection.reference(style) == "Genesis (1-3.15; 5-7.25), Luke 1.10"


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestSerialization:
    """Тесты to_record / from_record."""

    def test_to_record_without_identity(self, luke) -> None:
        collection = RangeCollection([ScriptureRange(luke, 1, 1, 1, 10)])

        assert collection.to_record() == {
            "ranges": [
                {"start": {"book": 42, "chapter": 1}, "end": {"book": 42, "chapter": 1, "verse": 10}},
            ],
        }

    def test_to_record_with_identity(self, luke) -> None:
        collection = RangeCollection(
            [ScriptureRange(luke, 1, 1, 1, 10)], name="Advent reading", id="advent-1"
        )

        record = collection.to_record()

        assert record["name"] == "Advent reading"
        assert record["id"] == "advent-1"

    def test_empty_string_is_present(self) -> None:
        record = RangeCollection(name="", id=None).to_record()

        assert record == {"ranges": [], "name": ""}

    def test_to_json(self, luke) -> None:
        collection = RangeCollection([ScriptureRange(luke, 1, 1, 1, 10)], id="x")

        decoded = json.loads(collection.to_json())

        assert decoded["id"] == "x"
        assert decoded["ranges"][0]["end"]["verse"] == 10

    def test_from_record(self) -> None:
        data = {
            "ranges": [
                {
                    "start": {"book": 1, "chapter": 1},
                    "end": {"book": 1, "chapter": 3, "verse": 15},
                    "exclude": [{"start": {"chapter": 2}, "end": {"chapter": 2}}],
                },
                {"start": {"book": 42, "chapter": 1}, "end": {"book": 42, "chapter": 1, "verse": 10}},
            ],
            "name": "",
        }

        collection = RangeCollection.from_record(data, mocks.book_by_position)

        assert collection.name == ""
        assert collection.id is None
        assert [r.book.name for r in collection] == ["Genesis", "Luke"]
        assert collection.ranges[0].exclusions == (Span(2, 2, 1, 25),)
        assert collection.reference() == "Genesis 1-3:15, Luke 1:10"

    def test_round_trip(self, genesis, luke) -> None:
        a = ScriptureRange(genesis, 1, 3, 4, 20)
        a.add_exclusion(2, 2, 3, 8)
        original = RangeCollection([a, ScriptureRange(luke, 1, 1, 1, 80)], name="n", id="i")

        restored = RangeCollection.from_record(original.to_record(), mocks.book_by_position)

        assert restored.name == "n"
        assert restored.id == "i"
        assert len(restored) == 2
        for before, after in zip(original, restored):
            assert after.is_equivalent_to(before)

    def test_from_record_malformed(self) -> None:
        with pytest.raises(RangeValidationError, match="Invalid range collection record"):
            RangeCollection.from_record({"ranges": "nope"}, mocks.book_by_position)
