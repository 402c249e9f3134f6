from typing import List, Optional, Sequence

from strata.spec import ESCAPE_CHARACTER, IllegalArgumentError, InvalidStateError
from .base import AbstractName
from .codec import join_components, split_components


class StringName(AbstractName):
    """
    A name that stores a single escaped string plus a cached component count.

    Components are re-derived from the string whenever they are asked for, and
    the class invariant re-parses the string to confirm the cached count.
    """

    __slots__ = ("_name", "_no_components")

    def __init__(self, source: str = "", delimiter: Optional[str] = None):
        super().__init__(delimiter)
        IllegalArgumentError.check(
            isinstance(source, str), "source string must be provided"
        )
        self._name = source
        # A dangling escape surfaces here as an InvalidStateError.
        self._no_components = len(self._parse())
        self.assert_class_invariant()

    @property
    def data(self) -> str:
        """The stored escaped string, in this name's own delimiter."""
        return self._name

    def get_no_components(self) -> int:
        return self._no_components

    def get_component(self, i: int) -> str:
        self.assert_class_invariant()
        components = self._parse()
        self.ensure_index(i, len(components), allow_equal_end=False)
        return components[i]

    def create_from_components(
        self, components: Sequence[str], delimiter: str
    ) -> "StringName":
        # [""] and [] both render as "", which parses back to no components.
        IllegalArgumentError.check(
            list(components) != [""],
            "the result would be a single empty component, which cannot be "
            "represented as a string name",
        )
        return StringName(
            join_components(components, delimiter, ESCAPE_CHARACTER), delimiter
        )

    def assert_class_invariant(self) -> None:
        super().assert_class_invariant()
        actual = len(self._parse())
        InvalidStateError.check(
            actual == self._no_components,
            f"component count mismatch: cached {self._no_components}, parsed {actual}",
        )

    def _parse(self) -> List[str]:
        return split_components(self._name, self._delimiter, ESCAPE_CHARACTER)

    def _collect_components(self) -> List[str]:
        self.assert_class_invariant()
        return self._parse()
