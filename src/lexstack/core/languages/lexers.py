from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from lexstack.core.config import LexstackSettings, load_settings
from lexstack.core.editor import EditorCommands
from lexstack.core.layers import LayerStack

logger = logging.getLogger(__name__)


def load_external_lexers(
    editor: EditorCommands,
    stack: LayerStack,
    settings: Optional[LexstackSettings] = None,
) -> List[Path]:
    """Load every file under ``<layer>/<lexers.subdir>`` as a lexer module.

    Layers are visited low → high and files in name order within a layer, so
    a module loaded twice is last loaded from the highest layer. Directories
    are skipped; symlinks are followed.

    Returns:
        Paths handed to the editor, in load order.
    """
    settings = settings or load_settings()
    loaded: List[Path] = []

    def _load_from(root: Path) -> None:
        lexers_dir = root / settings.lexers_relpath()
        if not lexers_dir.is_dir():
            return
        for entry in sorted(lexers_dir.iterdir()):
            if entry.is_dir():
                continue
            logger.debug("Loading external lexer %s", entry)
            editor.load_lexer_library(str(entry))
            loaded.append(entry)

    stack.for_each(_load_from)
    return loaded


__all__ = ["load_external_lexers"]
