"""lexstack settings.

Sources (lowest to highest priority):
1. Bundled defaults: lexstack.data/config/defaults.yaml
2. Optional host settings file (``config_path``)
3. Optional ``overrides`` mapping

Sources are deep-merged, validated against ``schemas/settings.schema.yaml``
and frozen into a :class:`LexstackSettings`.
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from lexstack.core.exceptions import SettingsError
from lexstack.core.schemas import validate_payload
from lexstack.core.utils.io import read_yaml
from lexstack.core.utils.merge import deep_merge
from lexstack.data import read_yaml as read_data_yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerRoot:
    """A configured layer root, before path expansion."""

    id: str
    path: str


@dataclass(frozen=True)
class LexstackSettings:
    app_name: str
    document_suffix: str
    fallback_language: str
    lexers_subdir: str
    layer_roots: Tuple[LayerRoot, ...]

    def catalog_relpath(self) -> Path:
        """Catalog document path relative to a layer root."""
        return Path(self.app_name) / f"languages{self.document_suffix}"

    def language_relpath(self, language_id: str) -> Path:
        """Per-language document path relative to a layer root."""
        return Path(self.app_name) / "languages" / f"{language_id}{self.document_suffix}"

    def lexers_relpath(self) -> Path:
        return Path(self.lexers_subdir)


def _bundled_defaults() -> Dict[str, Any]:
    # Cached data is shared; never hand it out for merging in place.
    return copy.deepcopy(read_data_yaml("config", "defaults.yaml") or {})


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    config_path: Optional[Path] = None,
) -> LexstackSettings:
    """Load settings from bundled defaults, a settings file and overrides.

    Args:
        overrides: Nested mapping merged last (e.g. ``{"languages": {"app_name": "Koder"}}``).
        config_path: Host settings YAML file. A missing file is ignored,
            invalid YAML raises.

    Raises:
        SettingsError: The merged settings do not satisfy the settings schema.
    """
    cfg = _bundled_defaults()

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            logger.debug("Settings file %s not found; using defaults", path)
        else:
            # Fail closed: settings must never silently ignore invalid YAML.
            file_cfg = read_yaml(path, default={}, raise_on_error=True)
            if not isinstance(file_cfg, dict):
                raise SettingsError(
                    f"Settings file must contain a mapping: {path}",
                    context={"path": path},
                )
            cfg = deep_merge(cfg, file_cfg)

    if overrides:
        cfg = deep_merge(cfg, dict(overrides))

    validate_payload(cfg, "settings", error_cls=SettingsError)

    languages = cfg["languages"]
    return LexstackSettings(
        app_name=str(languages["app_name"]),
        document_suffix=str(languages["document_suffix"]),
        fallback_language=str(languages["fallback_language"]),
        lexers_subdir=str(cfg["lexers"]["subdir"]),
        layer_roots=tuple(
            LayerRoot(id=str(item["id"]), path=str(item["path"]))
            for item in cfg["layers"]["roots"]
        ),
    )


__all__ = ["LayerRoot", "LexstackSettings", "load_settings"]
