from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer

from strata.common import bus
from strata.config import StrataConfig, load_config_from_path
from strata.names import NameKind
from strata.spec import ContractError


def make_config(
    delimiter: Optional[str] = None, kind: Optional[NameKind] = None
) -> StrataConfig:
    """Command-line options win over the project's [tool.strata] settings."""
    project_config = load_config_from_path(Path.cwd())
    config = StrataConfig(
        delimiter=delimiter if delimiter is not None else project_config.delimiter,
        kind=kind if kind is not None else project_config.kind,
    )
    bus.debug("config.resolved", delimiter=config.delimiter, kind=config.kind.value)
    return config


@contextmanager
def reporting_contract_errors() -> Iterator[None]:
    try:
        yield
    except ContractError as e:
        bus.error("error.contract", kind=e.kind.value.lower(), message=str(e))
        raise typer.Exit(code=1)
