from __future__ import annotations

import pytest

from lexstack.core.config import load_settings
from lexstack.core.exceptions import CatalogDefinitionError
from lexstack.core.languages import LanguageCatalog, LanguageCatalogEntry

from helpers.io_utils import write_text
from helpers.layers import write_catalog


def test_later_layer_claims_shared_extension(layer_stack, settings) -> None:
    system, _, system_np, _ = layer_stack.layers
    write_catalog(system, settings, {"a": {"name": "A", "extensions": ["xyz"]}})
    write_catalog(system_np, settings, {"b": {"name": "B", "extensions": ["xyz"]}})

    catalog = LanguageCatalog.from_layers(layer_stack, settings)

    assert catalog.language_for_extension("xyz") == ("b", True)


def test_unknown_extension_falls_back_to_text(layer_stack, settings) -> None:
    catalog = LanguageCatalog.from_layers(layer_stack, settings)

    assert catalog.language_for_extension("doesnotexist") == ("text", False)


def test_fallback_language_is_configurable(layer_stack) -> None:
    settings = load_settings({"languages": {"fallback_language": "plain"}})
    catalog = LanguageCatalog.from_layers(layer_stack, settings)

    assert catalog.language_for_extension("zzz") == ("plain", False)


def test_language_ids_keep_first_appearance_order(layer_stack, settings) -> None:
    system, user = layer_stack.layers[0], layer_stack.layers[1]
    write_catalog(
        system,
        settings,
        {
            "python": {"name": "Python", "extensions": ["py"]},
            "cpp": {"name": "C++", "extensions": ["cpp"]},
        },
    )
    write_catalog(
        user,
        settings,
        {
            "awk": {"name": "AWK", "extensions": ["awk"]},
            "python": {"name": "Python 3", "extensions": ["py", "pyw"]},
        },
    )

    catalog = LanguageCatalog.from_layers(layer_stack, settings)

    assert catalog.languages == ["python", "cpp", "awk"]
    assert catalog.display_name("python") == "Python 3"
    assert catalog.extensions("python") == frozenset({"py", "pyw"})
    assert len(catalog) == 3


def test_sort_alphabetically_is_on_demand(layer_stack, settings) -> None:
    write_catalog(
        layer_stack.layers[0],
        settings,
        {
            "python": {"name": "Python", "extensions": ["py"]},
            "cpp": {"name": "C++", "extensions": ["cpp"]},
            "awk": {"name": "AWK", "extensions": ["awk"]},
        },
    )
    catalog = LanguageCatalog.from_layers(layer_stack, settings)
    assert catalog.languages == ["python", "cpp", "awk"]

    catalog.sort_alphabetically()

    assert catalog.languages == ["awk", "cpp", "python"]


def test_redefined_language_keeps_stale_extension_mapping(layer_stack, settings) -> None:
    system, user = layer_stack.layers[0], layer_stack.layers[1]
    write_catalog(system, settings, {"c": {"name": "C", "extensions": ["c", "h"]}})
    write_catalog(user, settings, {"c": {"name": "C", "extensions": ["c"]}})

    catalog = LanguageCatalog.from_layers(layer_stack, settings)

    # The index is only ever overwritten, never pruned.
    assert catalog.language_for_extension("h") == ("c", True)
    assert catalog.entry("c") == LanguageCatalogEntry(id="c", display_name="C", extensions=frozenset({"c"}))


def test_unparseable_catalog_layer_is_skipped(layer_stack, settings) -> None:
    write_catalog(layer_stack.layers[0], settings, {"c": {"name": "C", "extensions": ["c"]}})
    write_text(layer_stack.layers[1].path / settings.catalog_relpath(), "c: {name: [\n")

    catalog = LanguageCatalog.from_layers(layer_stack, settings)

    assert catalog.languages == ["c"]


def test_empty_catalog_document_is_ignored(layer_stack, settings) -> None:
    write_text(layer_stack.layers[0].path / settings.catalog_relpath(), "")

    catalog = LanguageCatalog.from_layers(layer_stack, settings)

    assert len(catalog) == 0


def test_missing_required_field_raises(layer_stack, settings) -> None:
    write_catalog(layer_stack.layers[0], settings, {"c": {"name": "C"}})

    with pytest.raises(CatalogDefinitionError) as excinfo:
        LanguageCatalog.from_layers(layer_stack, settings)
    assert "extensions" in str(excinfo.value)
    assert excinfo.value.context["layer"] == "system"


def test_entries_and_membership(layer_stack, settings) -> None:
    write_catalog(
        layer_stack.layers[0],
        settings,
        {"make": {"name": "Makefile", "extensions": ["mk", "mak"]}},
    )

    catalog = LanguageCatalog.from_layers(layer_stack, settings)

    assert "make" in catalog
    assert "rust" not in catalog
    assert catalog.display_name("rust") is None
    assert catalog.entries() == [
        LanguageCatalogEntry(id="make", display_name="Makefile", extensions=frozenset({"mk", "mak"}))
    ]
