# This must be the very first line to allow this package to coexist with other
# namespace packages in editable installs.
__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .constants import DEFAULT_DELIMITER, ESCAPE_CHARACTER, HASH_PRIME
from .exceptions import (
    ViolationKind,
    ContractError,
    IllegalArgumentError,
    InvalidStateError,
    MethodFailedError,
    ServiceFailureError,
)
from .protocols import NameProtocol

__all__ = [
    "DEFAULT_DELIMITER",
    "ESCAPE_CHARACTER",
    "HASH_PRIME",
    "NameProtocol",
    # Contract violations
    "ViolationKind",
    "ContractError",
    "IllegalArgumentError",
    "InvalidStateError",
    "MethodFailedError",
    "ServiceFailureError",
]
