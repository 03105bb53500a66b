from __future__ import annotations

import math

import pytest

from post_browser.core.list_view_state import ListViewState, PageSummary
from post_browser.core.record import FilterField, Record


def _record(id_: int, title: str | None = None) -> Record:
    return Record(id=id_, title=title or f"post {id_}", body=f"body {id_}", owner_id=1)


def _state(records, page_size: int = 5) -> ListViewState:
    st = ListViewState(page_size=page_size)
    st.load(records)
    return st


def test_defaults_before_load():
    st = ListViewState()

    assert st.page_size == 5
    assert st.search_term == ""
    assert st.filter_field is FilterField.TITLE
    assert st.current_page == 1
    assert st.total_pages == 1
    assert st.visible_page() == []


def test_rejects_non_positive_page_size():
    with pytest.raises(ValueError):
        ListViewState(page_size=0)


def test_paging_clamps_past_last_page():
    st = _state([_record(i) for i in range(1, 13)])

    assert st.total_pages == 3

    st.set_page(5)
    assert st.current_page == 3
    assert [r.id for r in st.visible_page()] == [11, 12]

    st.set_page(-2)
    assert st.current_page == 1


def test_next_and_previous_stop_at_boundaries():
    st = _state([_record(i) for i in range(1, 13)])

    st.previous_page()
    assert st.current_page == 1

    st.next_page()
    st.next_page()
    st.next_page()
    assert st.current_page == 3


def test_title_search_is_case_insensitive_and_resets_page():
    titles = ["Apple pie", "Banana", "apple tart"] + [f"filler {i}" for i in range(10)]
    st = _state([_record(i + 1, t) for i, t in enumerate(titles)])
    st.set_page(2)

    st.set_search_term("apple")

    assert [r.id for r in st.filtered_records] == [1, 3]
    assert st.current_page == 1


def test_id_search_matches_partial_digits():
    st = _state([_record(i) for i in (1, 10, 21, 100, 42)])

    st.set_filter_field(FilterField.ID)
    st.set_search_term("1")

    assert [r.id for r in st.filtered_records] == [1, 10, 21, 100]


def test_id_search_does_not_match_titles():
    st = _state([_record(7, "number 1"), _record(12, "other")])

    st.set_filter_field("id")
    st.set_search_term("1")

    assert [r.id for r in st.filtered_records] == [12]


@pytest.mark.parametrize("term", ["", "   ", "\t\n"])
def test_blank_search_keeps_all_records_in_order(term):
    records = [_record(i) for i in (5, 3, 9)]
    st = _state(records)

    st.set_search_term(term)

    assert st.filtered_records == records
    assert st.search_term == term


def test_search_term_stored_verbatim_and_matched_untrimmed():
    st = _state([_record(1, "Apple pie"), _record(2, "pineapple")])

    st.set_search_term(" pie")

    assert st.search_term == " pie"
    assert [r.id for r in st.filtered_records] == [1]


def test_title_filter_partitions_records():
    records = [_record(i, t) for i, t in enumerate(["Foo", "fOo bar", "baz", "BAR", "food"], 1)]
    st = _state(records)

    st.set_search_term("FO")

    included = st.filtered_records
    excluded = [r for r in records if r not in included]
    assert all("fo" in r.title.lower() for r in included)
    assert not any("fo" in r.title.lower() for r in excluded)


def test_repeated_search_is_idempotent():
    st = _state([_record(i) for i in range(1, 20)])

    st.set_search_term("1")
    first = st.filtered_records
    st.set_page(2)
    st.set_search_term("1")

    assert st.filtered_records == first
    assert st.current_page == 1


def test_filter_field_change_resets_page():
    st = _state([_record(i) for i in range(1, 20)])
    st.set_page(3)

    st.set_filter_field(FilterField.ID)

    assert st.current_page == 1


def test_unknown_filter_field_raises():
    st = ListViewState()
    with pytest.raises(ValueError):
        st.set_filter_field("body")


def test_reload_replaces_records_and_reapplies_search():
    st = _state([_record(i, "alpha") for i in range(1, 12)])
    st.set_search_term("beta")
    st.set_page(2)

    st.load([_record(1, "beta"), _record(2, "alpha"), _record(3, "Beta max")])

    assert [r.id for r in st.all_records] == [1, 2, 3]
    assert [r.id for r in st.filtered_records] == [1, 3]
    assert st.current_page == 1


@pytest.mark.parametrize("count,page_size", [(1, 5), (5, 5), (6, 5), (23, 4), (100, 7)])
def test_total_pages_is_ceiling(count, page_size):
    st = _state([_record(i) for i in range(1, count + 1)], page_size=page_size)

    assert st.total_pages == math.ceil(count / page_size)

    st.set_page(10_000)
    assert st.current_page == st.total_pages


def test_empty_result_has_one_page_and_no_rows():
    st = _state([_record(1, "Apple")])

    st.set_search_term("zzz")

    assert st.total_pages == 1
    assert st.visible_page() == []
    assert st.summary() == PageSummary(first_index=1, last_index=0, total_filtered=0)


def test_summary_for_last_partial_page():
    st = _state([_record(i) for i in range(1, 13)])
    st.set_page(3)

    assert st.summary() == PageSummary(first_index=11, last_index=12, total_filtered=12)


def test_filtering_does_not_mutate_source_records():
    records = [_record(i) for i in range(1, 6)]
    st = _state(records)

    st.set_search_term("post 2")
    st.all_records.clear()

    assert len(st.all_records) == 5
    assert records == [_record(i) for i in range(1, 6)]


def test_to_from_dict_keeps_query_and_page():
    st = _state([_record(i) for i in range(1, 30)], page_size=3)
    st.set_filter_field(FilterField.ID)
    st.set_search_term("2")
    st.set_page(2)

    rebuilt = ListViewState.from_dict(st.to_dict())

    assert rebuilt.to_dict() == st.to_dict()
    assert rebuilt.filtered_records == st.filtered_records
    assert rebuilt.current_page == 2


def test_from_dict_clamps_stale_page():
    data = _state([_record(i) for i in range(1, 4)]).to_dict()
    data["current_page"] = 9

    assert ListViewState.from_dict(data).current_page == 1
