import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from strata.common.interfaces import DocumentAdapter

log = logging.getLogger(__name__)


class YamlAdapter(DocumentAdapter):
    def load(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}

        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            log.warning(f"Ignoring malformed message file {path}: {e}")
            return {}

        if not isinstance(content, dict):
            return {}

        # Allow values to be nested dicts or strings
        return {str(k): v for k, v in content.items() if v is not None}
