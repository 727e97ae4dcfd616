from __future__ import annotations

from lexstack.core.languages import load_external_lexers

from helpers.io_utils import write_text


def test_loads_regular_files_in_layer_order(layer_stack, settings, editor) -> None:
    system, user = layer_stack.layers[0], layer_stack.layers[1]
    sys_dir = system.path / "scintilla" / "lexers"
    user_dir = user.path / "scintilla" / "lexers"
    write_text(sys_dir / "b.so", "")
    write_text(sys_dir / "a.so", "")
    (sys_dir / "nested").mkdir()
    write_text(user_dir / "a.so", "")

    loaded = load_external_lexers(editor, layer_stack, settings)

    assert loaded == [sys_dir / "a.so", sys_dir / "b.so", user_dir / "a.so"]
    assert editor.lexer_libraries == [str(p) for p in loaded]


def test_missing_lexer_directories_are_skipped(layer_stack, settings, editor) -> None:
    assert load_external_lexers(editor, layer_stack, settings) == []
    assert editor.commands == []
