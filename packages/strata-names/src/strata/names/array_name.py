from typing import Iterable, Optional, Sequence

from strata.spec import IllegalArgumentError, InvalidStateError
from .base import AbstractName


class StringArrayName(AbstractName):
    """A name that stores its unescaped components directly."""

    __slots__ = ("_components",)

    def __init__(self, source: Iterable[str], delimiter: Optional[str] = None):
        super().__init__(delimiter)
        # A plain string would silently become one component per character.
        IllegalArgumentError.check(
            source is not None and not isinstance(source, str),
            "components must be given as a sequence of strings",
        )
        try:
            components = tuple(source)
        except TypeError:
            raise IllegalArgumentError(
                f"components must be iterable, got {type(source).__name__}"
            ) from None
        for component in components:
            self.assert_valid_component_as_precondition(component)
        self._components = components
        self.assert_class_invariant()

    def get_no_components(self) -> int:
        return len(self._components)

    def get_component(self, i: int) -> str:
        self.assert_class_invariant()
        self.ensure_index(i, len(self._components), allow_equal_end=False)
        return self._components[i]

    def create_from_components(
        self, components: Sequence[str], delimiter: str
    ) -> "StringArrayName":
        return StringArrayName(components, delimiter)

    def assert_class_invariant(self) -> None:
        super().assert_class_invariant()
        InvalidStateError.check(
            isinstance(self._components, tuple),
            "component storage must be an immutable sequence",
        )
