from typing import Iterable, Set

from strata.names import AbstractName, StringArrayName
from strata.spec import IllegalArgumentError, MethodFailedError
from .node import Node

PATH_DELIMITER = "/"


class Directory(Node):
    def __init__(self, bn: str, pn: "Directory"):
        self._child_nodes: Set[Node] = set()
        super().__init__(bn, pn)

    def has_child_node(self, cn: Node) -> bool:
        return cn in self._child_nodes

    def add_child_node(self, cn: Node) -> None:
        IllegalArgumentError.check(isinstance(cn, Node), "child must be a node")
        self._child_nodes.add(cn)
        MethodFailedError.check(self.has_child_node(cn), "failed to add child node")

    def remove_child_node(self, cn: Node) -> None:
        IllegalArgumentError.check(
            self.has_child_node(cn), "node is not a child of this directory"
        )
        self._child_nodes.remove(cn)

    def get_child_nodes(self) -> Iterable[Node]:
        # A snapshot, so callers may move children while iterating
        return list(self._child_nodes)


class RootNode(Directory):
    """The top of a tree: its own parent, with an empty base name and full name."""

    def __init__(self):
        super().__init__("", self)

    def initialize(self, pn: Directory) -> None:
        self._parent_node = self

    def get_full_name(self) -> AbstractName:
        return StringArrayName([], PATH_DELIMITER)

    def assert_valid_base_name_as_precondition(self, bn: str) -> None:
        IllegalArgumentError.check(bn == "", "root node cannot be renamed")

    def move(self, to: Directory) -> None:
        raise IllegalArgumentError("root node cannot be moved")
