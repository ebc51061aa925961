"""Tests for RecordViewCache."""

import pytest

from tests.conftest import FIXED_NOW, make_record
from wordvault.application.vocabulary.record_set import RecordSet
from wordvault.application.vocabulary.services.view_cache import RecordViewCache, SortMode


def _record_set(records: list) -> RecordSet:
    record_set = RecordSet()
    record_set.replace_all(records)
    return record_set


def _numbered(count: int) -> list:
    return [
        make_record(id=i, word=f"w{i}", meaning=f"m{i}", created_at=FIXED_NOW + i)
        for i in range(1, count + 1)
    ]


class TestSorting:
    def test_newest_first_by_default(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(3)))
        assert [r.id.value for r in cache.renderable_rows()] == [3, 2, 1]

    def test_oldest_first(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(3)))
        cache.set_sort_mode(SortMode.OLDEST)
        assert [r.id.value for r in cache.renderable_rows()] == [1, 2, 3]

    def test_review_count_orders_break_ties_newest_first(self) -> None:
        records = [
            make_record(id=1, created_at=FIXED_NOW + 1, review_count=2),
            make_record(id=2, created_at=FIXED_NOW + 2, review_count=5),
            make_record(id=3, created_at=FIXED_NOW + 3, review_count=2),
        ]
        cache = RecordViewCache(_record_set(records))

        cache.set_sort_mode("mostReviewed")
        assert [r.id.value for r in cache.renderable_rows()] == [2, 3, 1]

        cache.set_sort_mode(SortMode.LEAST_REVIEWED)
        assert [r.id.value for r in cache.renderable_rows()] == [3, 1, 2]

    def test_alphabetical_ignores_case_and_accents(self) -> None:
        records = [
            make_record(id=1, word="zebra", created_at=FIXED_NOW + 1),
            make_record(id=2, word="Apple", created_at=FIXED_NOW + 2),
            make_record(id=3, word="école", created_at=FIXED_NOW + 3),
            make_record(id=4, word="banana", created_at=FIXED_NOW + 4),
        ]
        cache = RecordViewCache(_record_set(records))
        cache.set_sort_mode(SortMode.ALPHABETICAL)

        assert [r.word for r in cache.renderable_rows()] == ["Apple", "banana", "école", "zebra"]

    def test_unknown_sort_mode_rejected(self) -> None:
        cache = RecordViewCache(_record_set([]))
        with pytest.raises(ValueError):
            cache.set_sort_mode("random")


class TestSearch:
    def test_matches_word_or_meaning_case_insensitively(self) -> None:
        records = [
            make_record(id=1, word="Serendipity", meaning="happy accident"),
            make_record(id=2, word="ephemeral", meaning="short-lived"),
            make_record(id=3, word="laconic", meaning="using few words, SERENE"),
        ]
        cache = RecordViewCache(_record_set(records))

        cache.set_search_term("  SEREN ")

        assert sorted(r.id.value for r in cache.renderable_rows()) == [1, 3]

    def test_inner_whitespace_is_matched_as_typed(self) -> None:
        records = [
            make_record(id=1, word="ice cream", meaning="frozen dessert"),
            make_record(id=2, word="sorbet", meaning="fruit  ice"),
        ]
        cache = RecordViewCache(_record_set(records))

        cache.set_search_term("ice    cream")
        assert cache.renderable_rows() == []

        cache.set_search_term(" ICE cream ")
        assert [r.id.value for r in cache.renderable_rows()] == [1]

        cache.set_search_term("fruit ice")
        assert cache.renderable_rows() == []

    def test_empty_term_matches_everything(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(4)))
        cache.set_search_term("   ")
        assert cache.total() == 4

    def test_no_match_still_has_one_page(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(4)))
        cache.set_search_term("zzz")

        assert cache.renderable_rows() == []
        assert cache.page_count() == 1
        assert cache.current_page() == 1


class TestPagination:
    def test_pages_slice_sorted_list(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(250)), page_size=100)
        cache.set_sort_mode(SortMode.OLDEST)

        assert cache.page_count() == 3
        cache.set_page(3)
        rows = cache.renderable_rows()
        assert len(rows) == 50
        assert rows[0].id.value == 201

    def test_current_page_clamped_after_records_shrink(self) -> None:
        record_set = _record_set(_numbered(201))
        cache = RecordViewCache(record_set, page_size=100)
        cache.set_page(3)
        assert cache.current_page() == 3

        record_set.replace_all(_numbered(200))

        assert cache.page_count() == 2
        assert cache.current_page() == 2

    def test_set_page_clamps_into_range(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(10)), page_size=3)

        assert cache.set_page(99) == 4
        assert cache.set_page(0) == 1
        assert cache.next_page() == 2
        assert cache.previous_page() == 1
        assert cache.previous_page() == 1

    def test_view_changes_reset_to_first_page(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(30)), page_size=10)

        cache.set_page(3)
        cache.set_search_term("w")
        assert cache.current_page() == 1

        cache.set_page(3)
        cache.set_sort_mode(SortMode.OLDEST)
        assert cache.current_page() == 1

        cache.set_page(3)
        cache.set_page_size(5)
        assert cache.current_page() == 1

    def test_page_size_is_clamped(self) -> None:
        cache = RecordViewCache(_record_set([]), max_page_size=200)

        cache.set_page_size(1000)
        assert cache.page_size == 200
        cache.set_page_size(0)
        assert cache.page_size == 1


class TestCaching:
    def test_hit_returns_identical_list(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(5)))

        first = cache.sorted_records()
        second = cache.sorted_records()

        assert first is second

    def test_paging_does_not_rebuild(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(5)), page_size=2)
        first = cache.sorted_records()

        cache.next_page()

        assert cache.sorted_records() is first

    def test_version_change_rebuilds(self) -> None:
        record_set = _record_set(_numbered(5))
        cache = RecordViewCache(record_set)
        first = cache.sorted_records()

        record_set.patch(make_record(id=2, word="patched", created_at=FIXED_NOW + 2))
        second = cache.sorted_records()

        assert second is not first
        assert any(r.word == "patched" for r in second)

    def test_equivalent_search_terms_share_cache_entry(self) -> None:
        cache = RecordViewCache(_record_set(_numbered(5)))
        cache.set_search_term("W1")
        first = cache.sorted_records()

        cache.set_search_term("  w1 ")

        assert cache.sorted_records() is first
