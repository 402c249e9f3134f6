import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from strata.common.interfaces import DocumentAdapter
from strata.common.adapters.yaml_adapter import YamlAdapter

log = logging.getLogger(__name__)


class MessageCatalog:
    """
    Resolves message ids to format templates.

    Templates come from YAML documents; nested mappings are flattened into
    dotted keys. Sources are merged in order, so later files override earlier
    ones. Unknown ids resolve to themselves (identity fallback).
    """

    def __init__(
        self, sources: List[Path], adapter: Optional[DocumentAdapter] = None
    ):
        self.sources = list(sources)
        self._adapter = adapter or YamlAdapter()
        self._templates: Optional[Dict[str, str]] = None

    def _flatten(self, data: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
        items: Dict[str, str] = {}
        for k, v in data.items():
            new_key = f"{prefix}.{k}" if prefix else str(k)
            if isinstance(v, dict):
                items.update(self._flatten(v, new_key))
            else:
                items[new_key] = str(v)
        return items

    def _ensure_loaded(self) -> Dict[str, str]:
        if self._templates is None:
            merged: Dict[str, str] = {}
            for source in self.sources:
                content = self._adapter.load(source)
                if content:
                    log.debug(f"Loaded {len(content)} message groups from {source}")
                merged.update(self._flatten(content))
            self._templates = merged
        return self._templates

    def add_source(self, path: Path) -> None:
        """Appends an override source and forces a reload on next access."""
        if path not in self.sources:
            self.sources.append(path)
        self._templates = None

    def get(self, msg_id: Any) -> str:
        key = str(msg_id)
        return self._ensure_loaded().get(key, key)
