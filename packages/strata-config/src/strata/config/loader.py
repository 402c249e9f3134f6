import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from strata.names import NameKind
from strata.spec import DEFAULT_DELIMITER, ESCAPE_CHARACTER, IllegalArgumentError

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

log = logging.getLogger(__name__)


@dataclass
class StrataConfig:
    delimiter: str = DEFAULT_DELIMITER
    kind: NameKind = NameKind.ARRAY

    def __post_init__(self):
        IllegalArgumentError.check(
            isinstance(self.delimiter, str) and len(self.delimiter) == 1,
            f"configured delimiter must be a single character, got {self.delimiter!r}",
        )
        IllegalArgumentError.check(
            self.delimiter != ESCAPE_CHARACTER,
            "configured delimiter must differ from the escape character",
        )
        try:
            self.kind = NameKind(self.kind)
        except ValueError:
            raise IllegalArgumentError(
                f"configured name kind {self.kind!r} is not one of "
                f"{[k.value for k in NameKind]}"
            ) from None


def _ancestors(start_dir: Path) -> Iterator[Path]:
    # Yields start_dir and each parent, stopping below the filesystem root
    current_dir = start_dir.resolve()
    while current_dir.parent != current_dir:
        yield current_dir
        current_dir = current_dir.parent


def find_project_root(start_dir: Optional[Path] = None) -> Path:
    """
    Finds the project root by searching upwards for a pyproject.toml file or a
    .git directory. Falls back to the start directory.
    """
    start_dir = start_dir or Path.cwd()
    for directory in _ancestors(start_dir):
        if (directory / "pyproject.toml").is_file() or (directory / ".git").is_dir():
            return directory
    return start_dir


def _read_tool_table(search_path: Path) -> Optional[Dict[str, Any]]:
    for directory in _ancestors(search_path):
        pyproject_path = directory / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                with open(pyproject_path, "rb") as f:
                    data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise IllegalArgumentError(
                    f"malformed config file {pyproject_path}: {e}"
                ) from e
            log.debug(f"Reading [tool.strata] from {pyproject_path}")
            return data.get("tool", {}).get("strata", {})
    return None


def load_config_from_path(search_path: Path) -> StrataConfig:
    strata_data = _read_tool_table(search_path)
    if strata_data is None:
        log.debug(f"No pyproject.toml above {search_path}, using defaults")
        return StrataConfig()

    # Create config with data from file, falling back to defaults.
    return StrataConfig(
        delimiter=strata_data.get("delimiter", DEFAULT_DELIMITER),
        kind=strata_data.get("kind", NameKind.ARRAY),
    )
