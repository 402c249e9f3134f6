from typing import Any, Dict, Protocol
from pathlib import Path


class DocumentAdapter(Protocol):
    def load(self, path: Path) -> Dict[str, Any]: ...
