import dataclasses

import pytest

from tca_mcp import catalog
from tca_mcp.errors import NotFoundError


def test_list_docs_preserves_declaration_order() -> None:
    keys = [doc["key"] for doc in catalog.list_docs()]
    assert keys == [
        "reducer-pattern",
        "store-setup",
        "effects-async",
        "navigation-stack",
        "presentation-state",
        "testing",
        "tree-navigation",
    ]
    assert catalog.list_docs()[0] == {
        "key": "reducer-pattern",
        "title": "Reducer Pattern",
        "description": "Core business logic pattern for TCA features",
    }


def test_read_doc_returns_entry() -> None:
    entry = catalog.read_doc("effects-async")
    assert entry.title == "Effects & Async"
    assert entry.content.startswith("# Effects & Async Operations")
    assert "@Dependency(\\.userClient) var userClient" in entry.content


def test_read_doc_unknown_key_raises() -> None:
    with pytest.raises(NotFoundError) as exc:
        catalog.read_doc("Reducer-Pattern")
    assert "Reducer-Pattern" in str(exc.value)


def test_search_docs_empty_query_matches_everything() -> None:
    assert catalog.search_docs("") == catalog.list_docs()


def test_search_docs_no_match_is_empty() -> None:
    assert catalog.search_docs("zzz-nonexistent") == []


def test_search_docs_is_case_insensitive_across_fields() -> None:
    assert [doc["key"] for doc in catalog.search_docs("NAVIGATION")] == [
        "navigation-stack",
        "tree-navigation",
    ]
    # "TestStore" only appears in the testing description.
    assert [doc["key"] for doc in catalog.search_docs("store")] == ["store-setup", "testing"]


def test_templates_catalog() -> None:
    assert catalog.TEMPLATE_NAMES == ("counter", "api-call", "list", "timer")
    assert catalog.list_templates()[1] == {
        "key": "api-call",
        "description": "API call with loading state",
    }
    assert catalog.get_template("timer").code.startswith("@Reducer\nstruct TimerFeature {")
    with pytest.raises(NotFoundError):
        catalog.get_template("nonexistent")


def test_catalogs_are_read_only() -> None:
    with pytest.raises(TypeError):
        catalog.DOCS["new"] = catalog.DOCS["testing"]  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.TEMPLATES["counter"].code = ""  # type: ignore[misc]
