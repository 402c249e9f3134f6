import logging
from typing import TYPE_CHECKING, Iterable, Set

from strata.names import AbstractName
from strata.spec import (
    ContractError,
    IllegalArgumentError,
    InvalidStateError,
    ServiceFailureError,
)

if TYPE_CHECKING:
    from .directory import Directory

log = logging.getLogger(__name__)


class Node:
    """
    A named entry in a file tree. Every node has exactly one parent directory;
    only the root is its own parent.

    Trees are mutable and follow an exclusive-owner discipline: a single owner
    edits a tree at a time.
    """

    def __init__(self, bn: str, pn: "Directory"):
        self._base_name = ""
        self.assert_valid_base_name_as_precondition(bn)
        self.do_set_base_name(bn)
        self._parent_node = pn
        self.initialize(pn)

    def initialize(self, pn: "Directory") -> None:
        from .directory import Directory

        IllegalArgumentError.check(
            isinstance(pn, Directory), "parent node must be a directory"
        )
        self._parent_node = pn
        pn.add_child_node(self)

    def move(self, to: "Directory") -> None:
        from .directory import Directory

        IllegalArgumentError.check(
            isinstance(to, Directory), "target node must be a directory"
        )
        IllegalArgumentError.check(
            not self._is_ancestor_of(to),
            "cannot move a node into itself or one of its descendants",
        )
        self._parent_node.remove_child_node(self)
        to.add_child_node(self)
        self._parent_node = to

    def get_full_name(self) -> AbstractName:
        """Returns the name from the root down to this node, delimited by '/'."""
        return self._parent_node.get_full_name().append(self.get_base_name())

    def get_base_name(self) -> str:
        return self.do_get_base_name()

    def do_get_base_name(self) -> str:
        return self._base_name

    def rename(self, bn: str) -> None:
        self.assert_valid_base_name_as_precondition(bn)
        self.do_set_base_name(bn)

    def do_set_base_name(self, bn: str) -> None:
        self._base_name = bn

    def get_parent_node(self) -> "Directory":
        return self._parent_node

    def get_child_nodes(self) -> Iterable["Node"]:
        return ()

    def assert_valid_base_name_as_precondition(self, bn: str) -> None:
        IllegalArgumentError.check(
            isinstance(bn, str) and len(bn) > 0, "base name must be a non-empty string"
        )

    def find_nodes(self, bn: str) -> Set["Node"]:
        """
        Returns all nodes at or below this one whose base name equals `bn`.

        This is a public service boundary. Caller errors (IllegalArgumentError)
        pass through untouched; any other failure during the search is reported
        as a ServiceFailureError that keeps the original failure as its trigger.
        """
        IllegalArgumentError.check(
            isinstance(bn, str) and len(bn) > 0, "base name must not be empty"
        )

        matches: Set[Node] = set()
        try:
            Node._collect_matching_nodes(self, bn, matches)
        except (IllegalArgumentError, ServiceFailureError):
            raise
        except ContractError as e:
            log.warning(f"find_nodes({bn!r}) failed: {e}")
            raise ServiceFailureError("find_nodes failed", e) from e
        except Exception as e:
            log.warning(f"find_nodes({bn!r}) failed unexpectedly: {e!r}")
            trigger = InvalidStateError(str(e) or "unexpected runtime error")
            trigger.__cause__ = e
            raise ServiceFailureError("find_nodes failed", trigger) from e

        return matches

    @staticmethod
    def _collect_matching_nodes(node: "Node", target: str, matches: Set["Node"]) -> None:
        actual = node.get_base_name()
        Node._ensure_valid_base_name(node, actual)

        if actual == target:
            matches.add(node)

        for child in node.get_child_nodes():
            Node._collect_matching_nodes(child, target, matches)

    @staticmethod
    def _ensure_valid_base_name(node: "Node", base_name: str) -> None:
        if node.is_root():
            return
        InvalidStateError.check(
            isinstance(base_name, str) and len(base_name) > 0,
            "node base name must not be empty",
        )

    def is_root(self) -> bool:
        return self._parent_node is self

    def _is_ancestor_of(self, node: "Node") -> bool:
        current = node
        while True:
            if current is self:
                return True
            if current.is_root():
                return False
            current = current.get_parent_node()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: '{self.get_full_name().as_string()}'>"
