from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Sequence

from strata.spec import (
    DEFAULT_DELIMITER,
    ESCAPE_CHARACTER,
    HASH_PRIME,
    IllegalArgumentError,
    InvalidStateError,
    MethodFailedError,
    NameProtocol,
)
from .codec import escape_component


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _is_name_candidate(other: Any) -> bool:
    if isinstance(other, type):
        return False
    return all(
        callable(getattr(other, attr, None))
        for attr in ("get_no_components", "get_component", "get_delimiter_character")
    )


def _components_of(name: NameProtocol) -> List[str]:
    return [name.get_component(i) for i in range(name.get_no_components())]


class AbstractName(NameProtocol, ABC):
    """
    Implements the whole Name contract on top of three primitives supplied by a
    concrete representation: `get_component`, `get_no_components` and
    `create_from_components`.

    Every public operation validates its preconditions before touching any
    state and re-checks the class invariant on entry and exit. Editing
    operations never mutate the receiver; they build a new instance through
    `create_from_components`.
    """

    __slots__ = ("_delimiter",)

    def __init__(self, delimiter: Optional[str] = None):
        if delimiter is None:
            delimiter = DEFAULT_DELIMITER
        self.assert_valid_delimiter_as_precondition(delimiter)
        IllegalArgumentError.check(
            delimiter != ESCAPE_CHARACTER,
            "delimiter must differ from the escape character",
        )
        self._delimiter = delimiter

    # --- Primitives ---

    @abstractmethod
    def get_no_components(self) -> int: ...

    @abstractmethod
    def get_component(self, i: int) -> str: ...

    @abstractmethod
    def create_from_components(
        self, components: Sequence[str], delimiter: str
    ) -> "AbstractName": ...

    # --- Queries ---

    def get_delimiter_character(self) -> str:
        return self._delimiter

    def is_empty(self) -> bool:
        return self.get_no_components() == 0

    def as_string(self, delimiter: Optional[str] = None) -> str:
        self.assert_class_invariant()
        if delimiter is None:
            delimiter = self._delimiter
        self.assert_valid_delimiter_as_precondition(delimiter)
        return delimiter.join(self._collect_components())

    def as_data_string(self) -> str:
        self.assert_class_invariant()
        return DEFAULT_DELIMITER.join(
            escape_component(component, DEFAULT_DELIMITER, ESCAPE_CHARACTER)
            for component in self._collect_components()
        )

    def is_equal(self, other: object) -> bool:
        if self is other:
            return True
        if not _is_name_candidate(other):
            return False
        if self.get_delimiter_character() != other.get_delimiter_character():  # type: ignore[attr-defined]
            return False
        if self.get_no_components() != other.get_no_components():  # type: ignore[attr-defined]
            return False
        return self._collect_components() == _components_of(other)  # type: ignore[arg-type]

    def get_hash_code(self) -> int:
        hash_code = HASH_PRIME + ord(self._delimiter)
        for component in self._collect_components():
            for ch in component:
                hash_code = _to_int32(hash_code * HASH_PRIME + ord(ch))
        return hash_code

    def clone(self) -> "AbstractName":
        self.assert_class_invariant()
        return self.create_from_components(self._collect_components(), self._delimiter)

    # --- Edits (each returns a new name) ---

    def set_component(self, i: int, c: str) -> "AbstractName":
        self.assert_class_invariant()
        self.assert_valid_component_as_precondition(c)
        components = self._collect_components()
        self.ensure_index(i, len(components), allow_equal_end=False)
        components[i] = c
        result = self.create_from_components(components, self._delimiter)
        MethodFailedError.check(
            result.get_no_components() == len(components),
            "set_component changed the component count",
        )
        self.assert_class_invariant()
        return result

    def insert(self, i: int, c: str) -> "AbstractName":
        self.assert_class_invariant()
        self.assert_valid_component_as_precondition(c)
        components = self._collect_components()
        self.ensure_index(i, len(components), allow_equal_end=True)
        components.insert(i, c)
        result = self.create_from_components(components, self._delimiter)
        self.assert_class_invariant()
        return result

    def append(self, c: str) -> "AbstractName":
        self.assert_class_invariant()
        previous = self.get_no_components()
        result = self.insert(previous, c)
        MethodFailedError.check(
            result.get_no_components() == previous + 1, "append failed"
        )
        return result

    def remove(self, i: int) -> "AbstractName":
        self.assert_class_invariant()
        components = self._collect_components()
        self.ensure_index(i, len(components), allow_equal_end=False)
        del components[i]
        result = self.create_from_components(components, self._delimiter)
        self.assert_class_invariant()
        return result

    def concat(self, other: NameProtocol) -> "AbstractName":
        self.assert_class_invariant()
        IllegalArgumentError.check(
            _is_name_candidate(other), "other must be a name"
        )
        left = self._collect_components()
        right = _components_of(other)
        result = self.create_from_components(left + right, self._delimiter)
        MethodFailedError.check(
            result.get_no_components()
            == self.get_no_components() + other.get_no_components(),
            "concat failed to append components",
        )
        self.assert_class_invariant()
        return result

    # --- Contract checks ---

    def ensure_index(self, index: int, length: int, allow_equal_end: bool) -> None:
        IllegalArgumentError.check(
            isinstance(index, int) and not isinstance(index, bool),
            f"component index must be an integer, got {index!r}",
        )
        IllegalArgumentError.check(
            index >= 0, f"component index {index} must be non-negative"
        )
        if allow_equal_end:
            IllegalArgumentError.check(
                index <= length, f"component index {index} out of bounds [0, {length}]"
            )
            return
        IllegalArgumentError.check(
            index < length, f"component index {index} out of bounds [0, {length})"
        )

    def assert_valid_delimiter_as_precondition(self, delimiter: str) -> None:
        IllegalArgumentError.check(
            isinstance(delimiter, str) and len(delimiter) == 1,
            f"delimiter must be a single character, got {delimiter!r}",
        )

    def assert_valid_component_as_precondition(self, component: str) -> None:
        IllegalArgumentError.check(
            isinstance(component, str),
            f"component must be a string, got {type(component).__name__}",
        )

    def assert_class_invariant(self) -> None:
        InvalidStateError.check(
            isinstance(self._delimiter, str) and len(self._delimiter) == 1,
            "delimiter must be a single character",
        )
        InvalidStateError.check(
            self._delimiter != ESCAPE_CHARACTER,
            "delimiter must differ from the escape character",
        )
        count = self.get_no_components()
        InvalidStateError.check(
            isinstance(count, int) and not isinstance(count, bool) and count >= 0,
            "component count must be a non-negative integer",
        )

    def _collect_components(self) -> List[str]:
        self.assert_class_invariant()
        return [self.get_component(i) for i in range(self.get_no_components())]

    # --- Python protocol ---

    def __len__(self) -> int:
        return self.get_no_components()

    def __iter__(self) -> Iterator[str]:
        return iter(self._collect_components())

    def __eq__(self, other: Any) -> bool:
        if not _is_name_candidate(other):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return self.get_hash_code()

    def __str__(self) -> str:
        return self.as_data_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: '{self.as_data_string()}' ({self._delimiter})>"
