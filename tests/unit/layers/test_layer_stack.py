from __future__ import annotations

from pathlib import Path

import pytest

from lexstack.core.config import load_settings
from lexstack.core.layers import LayerSpec, LayerStack, resolve_layer_stack

from helpers.io_utils import write_text


def test_default_stack_order() -> None:
    stack = resolve_layer_stack(load_settings())

    assert [l.id for l in stack.layers] == [
        "system",
        "user",
        "system-nonpackaged",
        "user-nonpackaged",
    ]
    assert stack.layers[0].path == Path("/usr/share")
    assert stack.layers[1].path == Path.home() / ".local" / "share"


def test_configured_paths_expand_vars_and_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LEXSTACK_TEST_ROOT", str(tmp_path))
    settings = load_settings(
        {"layers": {"roots": [{"id": "a", "path": "$LEXSTACK_TEST_ROOT/a"}, {"id": "b", "path": "~/b"}]}}
    )

    stack = resolve_layer_stack(settings)

    assert stack.paths() == [tmp_path / "a", Path.home() / "b"]


def test_duplicate_layer_ids_are_rejected() -> None:
    settings = load_settings({"layers": {"roots": [{"id": "a", "path": "/x"}, {"id": "a", "path": "/y"}]}})

    with pytest.raises(ValueError) as excinfo:
        resolve_layer_stack(settings)
    assert "duplicate layer id" in str(excinfo.value).lower()


def test_for_each_visits_every_layer_in_order(layer_stack: LayerStack) -> None:
    seen: list[Path] = []

    layer_stack.for_each(seen.append)

    assert seen == layer_stack.paths()
    assert len(seen) == 4


def test_from_paths_keeps_host_order(tmp_path: Path) -> None:
    stack = LayerStack.from_paths([tmp_path / "lo", tmp_path / "hi"])

    assert stack.paths() == [tmp_path / "lo", tmp_path / "hi"]
    assert stack.layer_by_id("layer1") == LayerSpec(id="layer1", path=tmp_path / "hi")
    assert stack.layer_by_id("nope") is None


def test_iter_documents_skips_missing_and_broken(layer_stack: LayerStack, caplog) -> None:
    rel = Path("app") / "doc.yaml"
    write_text(layer_stack.layers[0].path / rel, "a: 1\n")
    write_text(layer_stack.layers[2].path / rel, "a: [\n")
    write_text(layer_stack.layers[3].path / rel, "a: 4\n")

    with caplog.at_level("WARNING", logger="lexstack"):
        found = [(layer.id, data) for layer, data in layer_stack.iter_documents(rel)]

    assert found == [("system", {"a": 1}), ("user-nonpackaged", {"a": 4})]
    assert "system-nonpackaged" in caplog.text
