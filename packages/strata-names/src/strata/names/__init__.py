__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .codec import (
    escape_component,
    unescape_component,
    split_components,
    join_components,
)
from .base import AbstractName
from .array_name import StringArrayName
from .string_name import StringName
from .factory import NameKind, name_from_components, name_from_string

__all__ = [
    "AbstractName",
    "StringArrayName",
    "StringName",
    "NameKind",
    "name_from_components",
    "name_from_string",
    # Escape grammar
    "escape_component",
    "unescape_component",
    "split_components",
    "join_components",
]
