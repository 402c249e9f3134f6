from typing import List, Optional

import typer

from strata.common import bus, strata_catalog as catalog
from strata.cli.factories import make_config, reporting_contract_errors
from strata.names import NameKind, StringArrayName, join_components, name_from_string

DELIMITER_OPTION = typer.Option(
    None, "--delimiter", "-d", help=catalog.get("cli.option.delimiter.help")
)
KIND_OPTION = typer.Option(
    None, "--kind", "-k", case_sensitive=False, help=catalog.get("cli.option.kind.help")
)


def split_command(
    source: str = typer.Argument(..., help="Escaped name, e.g. 'a\\.b.c'."),
    delimiter: Optional[str] = DELIMITER_OPTION,
    kind: Optional[NameKind] = KIND_OPTION,
):
    with reporting_contract_errors():
        config = make_config(delimiter, kind)
        name = name_from_string(source, config.delimiter, config.kind)
        bus.debug(
            "name.parsed", count=name.get_no_components(), delimiter=config.delimiter
        )
        if name.is_empty():
            bus.warning("name.empty")
        for component in name:
            bus.info("name.component", component=component)


def join_command(
    components: List[str] = typer.Argument(..., help="Unescaped components."),
    delimiter: Optional[str] = DELIMITER_OPTION,
):
    with reporting_contract_errors():
        config = make_config(delimiter)
        name = StringArrayName(components, config.delimiter)
        bus.info(
            "name.joined",
            value=join_components(name, name.get_delimiter_character()),
        )


def data_command(
    source: str = typer.Argument(..., help="Escaped name."),
    delimiter: Optional[str] = DELIMITER_OPTION,
    kind: Optional[NameKind] = KIND_OPTION,
):
    with reporting_contract_errors():
        config = make_config(delimiter, kind)
        name = name_from_string(source, config.delimiter, config.kind)
        bus.info("name.data", value=name.as_data_string())


def hash_command(
    source: str = typer.Argument(..., help="Escaped name."),
    delimiter: Optional[str] = DELIMITER_OPTION,
    kind: Optional[NameKind] = KIND_OPTION,
):
    with reporting_contract_errors():
        config = make_config(delimiter, kind)
        name = name_from_string(source, config.delimiter, config.kind)
        bus.info("name.hash", value=name.get_hash_code())


def compare_command(
    left: str = typer.Argument(..., help="First escaped name."),
    right: str = typer.Argument(..., help="Second escaped name."),
    delimiter: Optional[str] = DELIMITER_OPTION,
):
    with reporting_contract_errors():
        config = make_config(delimiter)
        # One side per representation; equality is structural.
        left_name = name_from_string(left, config.delimiter, NameKind.ARRAY)
        right_name = name_from_string(right, config.delimiter, NameKind.STRING)
        if left_name.is_equal(right_name):
            bus.success("name.compare.equal")
            return

    bus.warning("name.compare.different")
    raise typer.Exit(code=1)
