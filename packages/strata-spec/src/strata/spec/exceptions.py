from enum import Enum
from typing import Optional


class ViolationKind(str, Enum):
    PRECONDITION = "PRECONDITION"  # The caller supplied invalid input
    INVARIANT = "INVARIANT"  # The instance's own state is inconsistent
    POSTCONDITION = "POSTCONDITION"  # An operation broke its own guarantee
    SERVICE_FAILURE = "SERVICE_FAILURE"  # A failure translated at a public boundary


class ContractError(Exception):
    """
    Base class of all contract violations.

    Callers must be able to tell "your input was wrong" apart from "this object
    is corrupted", so every concrete subclass pins down a `ViolationKind`.
    """

    kind: ViolationKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @classmethod
    def check(cls, condition: bool, message: str) -> None:
        """Raises this exception type with `message` unless `condition` holds."""
        if not condition:
            raise cls(message)


class IllegalArgumentError(ContractError):
    kind = ViolationKind.PRECONDITION


class InvalidStateError(ContractError):
    kind = ViolationKind.INVARIANT


class MethodFailedError(ContractError):
    kind = ViolationKind.POSTCONDITION


class ServiceFailureError(ContractError):
    """
    Reported by a public entry point when an internal failure crosses it.

    The original failure is kept as `trigger` (and as `__cause__` when raised
    with `raise ... from`) so diagnostics can still reach it.
    """

    kind = ViolationKind.SERVICE_FAILURE

    def __init__(self, message: str, trigger: Optional[Exception] = None):
        self.trigger = trigger
        super().__init__(message)

    def __str__(self) -> str:
        if self.trigger is None:
            return self.message
        return f"{self.message}: {self.trigger}"
