"""Unit tests for the in-memory filter/search/pagination engine."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from folio_commons.application.search import (
    FilterConfig,
    FilteredData,
    FilterPredicates,
    QueryState,
    default_predicates,
    equals,
    published_status_predicate,
    unique_values,
)


def _blogs() -> list[dict]:
    return [
        {"id": 1, "title": "Hello World", "tags": ["intro"], "category": "notes", "published": True},
        {"id": 2, "title": "Async Python", "tags": ["python", "asyncio"], "category": "tech", "published": True},
        {"id": 3, "title": "Draft ideas", "tags": ["misc"], "category": "notes", "published": False},
        {"id": 4, "title": "Photo walk", "tags": ["Hello"], "category": "life", "published": True},
        {"id": 5, "title": "Rust vs Python", "tags": [], "category": "tech", "published": False},
    ]


def _engine(per_page: int = 2, **kwargs) -> FilteredData[dict]:
    return FilteredData(_blogs(), FilterConfig(search_fields=["title", "tags"], items_per_page=per_page, **kwargs))


def _ids(items: list[dict]) -> list[int]:
    return [item["id"] for item in items]


# ---------------------------------------------------------------------------
# FilterConfig
# ---------------------------------------------------------------------------


class TestFilterConfig:
    def test_defaults(self) -> None:
        cfg = FilterConfig()
        assert cfg.search_fields == ()
        assert cfg.items_per_page == 10
        assert dict(cfg.initial_filters) == {}

    def test_non_positive_page_size_normalised_to_one(self) -> None:
        assert FilterConfig(items_per_page=0).items_per_page == 1
        assert FilterConfig(items_per_page=-5).items_per_page == 1

    def test_search_fields_deduplicated_in_order(self) -> None:
        cfg = FilterConfig(search_fields=["title", "tags", "title"])
        assert cfg.search_fields == ("title", "tags")

    def test_frozen(self) -> None:
        cfg = FilterConfig()
        with pytest.raises((AttributeError, TypeError)):
            cfg.items_per_page = 5  # type: ignore[misc]

    def test_initial_filters_copied(self) -> None:
        source = {"category": "tech"}
        cfg = FilterConfig(initial_filters=source)
        source["category"] = "life"
        assert cfg.initial_filters["category"] == "tech"


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


class TestSearch:
    def test_empty_query_matches_everything(self) -> None:
        engine = _engine()
        assert len(engine.filtered_data) == 5

    def test_case_insensitive_title_match(self) -> None:
        engine = _engine()
        engine.handle_search("PYTHON")
        assert _ids(engine.filtered_data) == [2, 5]

    def test_array_field_match(self) -> None:
        engine = _engine()
        engine.handle_search("asyncio")
        assert _ids(engine.filtered_data) == [2]

    def test_title_or_tag_match(self) -> None:
        data = [{"title": "Hello World", "tags": ["x"]}, {"title": "Other", "tags": ["hello"]}]
        engine = FilteredData(data, FilterConfig(search_fields=["title", "tags"], items_per_page=1))
        engine.handle_search("hello")
        assert engine.filtered_data == data
        assert engine.total_pages == 2
        assert engine.current_page_data == [data[0]]

    def test_non_string_values_never_match(self) -> None:
        data = [{"title": 123, "tags": [1, 2, None]}, {"title": None}]
        engine = FilteredData(data, FilterConfig(search_fields=["title", "tags"]))
        engine.handle_search("1")
        assert engine.filtered_data == []

    def test_only_configured_fields_searched(self) -> None:
        engine = _engine()
        engine.handle_search("notes")
        assert engine.filtered_data == []

    def test_missing_field_ignored(self) -> None:
        engine = FilteredData([{"title": "x"}], FilterConfig(search_fields=["title", "summary"]))
        engine.handle_search("x")
        assert len(engine.filtered_data) == 1

    def test_no_match(self) -> None:
        engine = _engine()
        engine.handle_search("zzz")
        assert engine.filtered_data == []
        assert engine.total_pages == 0
        assert engine.current_page_data == []


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


class TestFilters:
    def test_strict_equality(self) -> None:
        engine = _engine()
        engine.set_filter("category", "tech")
        assert _ids(engine.filtered_data) == [2, 5]

    def test_no_type_coercion(self) -> None:
        engine = _engine()
        engine.set_filter("id", "2")
        assert engine.filtered_data == []

    def test_empty_value_is_no_constraint(self) -> None:
        data = [{"title": "a"}, {"title": "b", "category": "tech"}]
        engine = FilteredData(data, FilterConfig(search_fields=["title"]))
        engine.set_filter("category", "")
        assert engine.filtered_data == data
        assert engine.filters == {"category": ""}

    def test_filters_merge(self) -> None:
        engine = _engine()
        engine.set_filter("category", "tech")
        engine.set_filter("published", "x")
        assert dict(engine.filters) == {"category": "tech", "published": "x"}
        assert engine.filtered_data == []

    def test_search_and_filter_combined(self) -> None:
        engine = _engine()
        engine.handle_search("python")
        engine.set_filter("category", "tech")
        assert _ids(engine.filtered_data) == [2, 5]
        engine.set_filter("category", "notes")
        assert engine.filtered_data == []

    def test_initial_filters_applied(self) -> None:
        engine = _engine(initial_filters={"category": "notes"})
        assert _ids(engine.filtered_data) == [1, 3]

    def test_filters_view_is_read_only(self) -> None:
        engine = _engine()
        with pytest.raises(TypeError):
            engine.filters["category"] = "tech"  # type: ignore[index]


class TestStatusLabels:
    def test_published_label_excludes_draft(self) -> None:
        engine = FilteredData([{"status": "draft", "published": False}], FilterConfig())
        engine.set_filter("status", "已发布")
        assert engine.filtered_data == []

    def test_published_label_ignores_literal_status(self) -> None:
        item = {"published": True}
        engine = FilteredData([item], FilterConfig())
        engine.set_filter("status", "已发布")
        assert engine.filtered_data == [item]

    def test_draft_label(self) -> None:
        engine = _engine()
        engine.set_filter("status", "草稿")
        assert _ids(engine.filtered_data) == [3, 5]

    def test_draft_label_requires_boolean_false(self) -> None:
        engine = FilteredData([{"published": None}, {"published": 0}], FilterConfig())
        engine.set_filter("status", "草稿")
        assert engine.filtered_data == []

    def test_other_status_values_use_equality(self) -> None:
        data = [{"status": "archived"}, {"status": "active"}]
        engine = FilteredData(data, FilterConfig())
        engine.set_filter("status", "archived")
        assert engine.filtered_data == [data[0]]

    def test_label_only_special_for_status_key(self) -> None:
        engine = FilteredData([{"published": True}], FilterConfig())
        engine.set_filter("state", "已发布")
        assert engine.filtered_data == []


# ---------------------------------------------------------------------------
# Predicate registry
# ---------------------------------------------------------------------------


class TestFilterPredicates:
    def test_default_is_equality(self) -> None:
        registry = FilterPredicates()
        assert registry.resolve("anything") is equals

    def test_default_predicates_bind_status(self) -> None:
        registry = default_predicates()
        assert "status" in registry
        assert "category" not in registry

    def test_register_custom_predicate(self) -> None:
        registry = FilterPredicates().register(
            "tag", lambda item, key, value: value in item.get("tags", [])
        )
        engine = FilteredData(_blogs(), FilterConfig(), predicates=registry)
        engine.set_filter("tag", "python")
        assert _ids(engine.filtered_data) == [2]

    def test_empty_registry_disables_status_mapping(self) -> None:
        engine = FilteredData([{"published": True}], FilterConfig(), predicates=FilterPredicates())
        engine.set_filter("status", "已发布")
        assert engine.filtered_data == []

    def test_english_labels(self) -> None:
        registry = FilterPredicates().register(
            "status", published_status_predicate(["Published"], ["Draft"])
        )
        engine = FilteredData(_blogs(), FilterConfig(), predicates=registry)
        engine.set_filter("status", "Draft")
        assert _ids(engine.filtered_data) == [3, 5]

    def test_unregister(self) -> None:
        registry = default_predicates()
        registry.unregister("status")
        assert "status" not in registry
        registry.unregister("status")


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class TestPagination:
    def test_first_page(self) -> None:
        engine = _engine(per_page=2)
        assert engine.current_page == 1
        assert _ids(engine.current_page_data) == [1, 2]
        assert engine.total_pages == 3

    def test_last_page_partial(self) -> None:
        engine = _engine(per_page=2)
        engine.set_current_page(3)
        assert _ids(engine.current_page_data) == [5]

    def test_page_slice_is_contiguous(self) -> None:
        engine = _engine(per_page=2)
        filtered = engine.filtered_data
        for page in range(1, engine.total_pages + 1):
            engine.set_current_page(page)
            assert len(engine.current_page_data) <= 2
            assert engine.current_page_data == filtered[(page - 1) * 2 : page * 2]

    def test_exact_division(self) -> None:
        engine = FilteredData(list(range(6)), FilterConfig(items_per_page=3), key_fn=lambda x: {})
        assert engine.total_pages == 2

    def test_page_clamped_high(self) -> None:
        engine = _engine(per_page=2)
        engine.set_current_page(99)
        assert engine.current_page == 3

    def test_page_clamped_low(self) -> None:
        engine = _engine(per_page=2)
        engine.set_current_page(0)
        assert engine.current_page == 1
        engine.set_current_page(-4)
        assert engine.current_page == 1

    def test_page_clamped_to_one_when_empty(self) -> None:
        engine = _engine()
        engine.handle_search("zzz")
        engine.set_current_page(5)
        assert engine.current_page == 1

    def test_set_page_does_not_change_filtered_data(self) -> None:
        engine = _engine(per_page=1)
        engine.handle_search("python")
        before = engine.filtered_data
        engine.set_current_page(2)
        assert engine.filtered_data == before

    def test_page_object(self) -> None:
        engine = _engine(per_page=2)
        engine.set_current_page(2)
        page = engine.page()
        assert _ids(page.items) == [3, 4]
        assert page.total == 5
        assert page.total_pages == 3
        assert page.has_next
        assert page.has_previous


# ---------------------------------------------------------------------------
# State transitions
# ---------------------------------------------------------------------------


class TestStateTransitions:
    def test_handle_search_resets_page(self) -> None:
        engine = _engine(per_page=1)
        engine.set_current_page(3)
        engine.handle_search("o")
        assert engine.current_page == 1

    def test_set_search_query_keeps_page(self) -> None:
        engine = _engine(per_page=1)
        engine.set_current_page(3)
        engine.set_search_query("o")
        assert engine.current_page == 3
        assert engine.search_query == "o"

    def test_set_filter_resets_page(self) -> None:
        engine = _engine(per_page=1)
        engine.set_current_page(2)
        engine.set_filter("category", "tech")
        assert engine.current_page == 1

    def test_clear_filters_restores_initial_view(self) -> None:
        engine = _engine(per_page=2)
        initial = engine.current_page_data
        engine.handle_search("python")
        engine.set_filter("category", "tech")
        engine.set_current_page(2)
        engine.clear_filters()
        assert engine.state == QueryState()
        assert engine.current_page_data == initial
        assert engine.filtered_data == _blogs()

    def test_clear_filters_keeps_config(self) -> None:
        engine = _engine(per_page=2)
        engine.clear_filters()
        assert engine.config.items_per_page == 2
        assert engine.config.search_fields == ("title", "tags")

    def test_set_data_recomputes(self) -> None:
        engine = _engine()
        engine.handle_search("python")
        engine.set_data([{"id": 9, "title": "More python", "tags": []}])
        assert _ids(engine.filtered_data) == [9]
        assert engine.search_query == "python"

    def test_set_data_shorter_reclamps_page(self) -> None:
        engine = FilteredData([{"id": i, "title": f"t{i}"} for i in range(50)], FilterConfig(items_per_page=10))
        engine.set_current_page(5)
        assert engine.current_page == 5
        engine.set_data([{"id": 1, "title": "only"}])
        assert engine.current_page == 1
        assert engine.total_pages == 1
        assert _ids(engine.current_page_data) == [1]

    def test_set_data_keeps_page_in_range(self) -> None:
        rows = [{"id": i, "title": f"t{i}"} for i in range(50)]
        engine = FilteredData(rows, FilterConfig(items_per_page=10))
        engine.set_current_page(3)
        engine.set_data(rows[:40])
        assert engine.current_page == 3

    def test_filtered_data_memoised(self) -> None:
        calls: list[int] = []

        def key_fn(item: dict) -> dict:
            calls.append(item["id"])
            return item

        engine = FilteredData(_blogs(), FilterConfig(search_fields=["title"], items_per_page=1), key_fn=key_fn)
        engine.filtered_data
        engine.set_current_page(3)
        engine.current_page_data
        engine.total_pages
        assert len(calls) == 5
        engine.handle_search("python")
        engine.filtered_data
        assert len(calls) == 10

    def test_returned_lists_are_copies(self) -> None:
        engine = _engine()
        engine.filtered_data.clear()
        assert len(engine.filtered_data) == 5


# ---------------------------------------------------------------------------
# Objects via key_fn / __dict__
# ---------------------------------------------------------------------------


@dataclass
class Work:
    title: str
    tags: list[str] = field(default_factory=list)
    category: str = ""


class TestObjectItems:
    def test_plain_objects_use_vars(self) -> None:
        works = [Work("Portfolio site", ["react"], "web"), Work("CLI tool", ["python"], "tools")]
        engine = FilteredData(works, FilterConfig(search_fields=["title", "tags"]))
        engine.handle_search("PYTHON")
        assert engine.filtered_data == [works[1]]
        engine.clear_filters()
        engine.set_filter("category", "web")
        assert engine.filtered_data == [works[0]]


# ---------------------------------------------------------------------------
# unique_values
# ---------------------------------------------------------------------------


class TestUniqueValues:
    def test_first_seen_order(self) -> None:
        assert unique_values(_blogs(), "category") == ["notes", "tech", "life"]

    def test_skips_non_strings(self) -> None:
        data = [{"k": "a"}, {"k": 1}, {"k": None}, {}, {"k": "a"}, {"k": "b"}]
        assert unique_values(data, "k") == ["a", "b"]

    def test_objects(self) -> None:
        assert unique_values([Work("x", category="web"), Work("y", category="web")], "category") == ["web"]

    def test_empty(self) -> None:
        assert unique_values([], "k") == []
