from typing import Callable, List, Optional, Sequence

from strata.names import AbstractName, NameKind, name_from_components

NameFactory = Callable[..., AbstractName]


def make_name_factory(kind: NameKind) -> NameFactory:
    """
    Returns a callable building names of one representation from components,
    so a single test body can exercise every representation.
    """

    def factory(
        components: Sequence[str], delimiter: Optional[str] = None
    ) -> AbstractName:
        return name_from_components(components, delimiter, kind)

    factory.kind = kind  # type: ignore[attr-defined]
    return factory


def all_name_kinds() -> List[NameKind]:
    return list(NameKind)
