import logging
from typing import Iterable, Iterator, Tuple
from exporter.core.common.enums import TraversalOrder
from exporter.core.common.exceptions import InvalidNodeTypeError
from exporter.features.filesystem.domain.interfaces import IFolder, INode
from ..domain.interfaces import ISkipCondition
from .walker import NodeWalker

logger = logging.getLogger(__name__)

class RecursiveNodeIterator:
    """
    Depth-first traversal primitive over a folder tree.

    Holds the root and an immutable set of skip conditions. It only knows how to
    produce the (filtered) children of a folder; NodeWalker decides the visiting
    order and does the actual walking.
    """

    def __init__(self, root: IFolder, skip_conditions: Iterable[ISkipCondition] = ()):
        if not isinstance(root, IFolder):
            raise InvalidNodeTypeError("Only folders can be passed to iterator")

        self.root = root
        self.skip_conditions: Tuple[ISkipCondition, ...] = tuple(skip_conditions)

    def add_skip_condition(self, condition: ISkipCondition) -> "RecursiveNodeIterator":
        """
        Returns a new iterator with the condition added to the existing ones.
        A node is skipped if any condition matches it.
        """
        return RecursiveNodeIterator(self.root, self.skip_conditions + (condition,))

    def should_skip(self, node: INode) -> bool:
        return any(condition.matches(node) for condition in self.skip_conditions)

    def get_children(self, folder: IFolder) -> Iterator[INode]:
        """
        Lazily yields the children of a folder sorted by name, leaving out the
        ones matching a skip condition. Nothing is read until the first item is
        requested.
        """
        for child in sorted(folder.get_children(), key=lambda node: node.name):
            if self.should_skip(child):
                logger.debug(f"Skipping {child.path} (storage {child.storage_id})")
                continue
            yield child

    def walk(self, order: TraversalOrder = TraversalOrder.SELF_FIRST) -> NodeWalker:
        return NodeWalker(self, order)

    def __repr__(self) -> str:
        return f"RecursiveNodeIterator(root={self.root.path!r}, skip_conditions={list(self.skip_conditions)!r})"
