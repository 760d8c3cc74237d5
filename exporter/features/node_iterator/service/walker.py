import logging
from typing import Iterator, List, Tuple
from exporter.core.common.enums import TraversalOrder
from exporter.features.filesystem.domain.interfaces import IFolder, INode

logger = logging.getLogger(__name__)

class NodeWalker:
    """
    Single-use, lazy walk over a RecursiveNodeIterator.

    The walker only needs `root` and `get_children(folder)` from the iterator
    it drives.

    Iterating yields nodes; items() yields (path, node) pairs keyed by the
    node's full path. The root is always part of the walk (unless the order is
    LEAVES_ONLY) and is never checked against the skip conditions.

    A walker can be consumed once. Stopping early is fine: nothing is read
    beyond the last node handed out.
    """

    def __init__(self,
                 node_iterator,
                 order: TraversalOrder = TraversalOrder.SELF_FIRST):
        self.node_iterator = node_iterator
        self.order = TraversalOrder(order)
        self._started = False

    def __iter__(self) -> Iterator[INode]:
        return (node for _, node in self.items())

    def items(self) -> Iterator[Tuple[str, INode]]:
        if self._started:
            raise RuntimeError("NodeWalker can only be iterated once; request a new one from the iterator")
        self._started = True
        return self._walk()

    def _walk(self) -> Iterator[Tuple[str, INode]]:
        root = self.node_iterator.root
        logger.debug(f"Walking {root.path} ({self.order.value})")

        if self.order == TraversalOrder.SELF_FIRST:
            yield root.path, root

        # Each entry is a folder and the still unconsumed part of its children
        stack: List[Tuple[IFolder, Iterator[INode]]] = [
            (root, self.node_iterator.get_children(root))
        ]
        while stack:
            folder, children = stack[-1]
            child = next(children, None)

            if child is None:
                stack.pop()
                if self.order == TraversalOrder.CHILD_FIRST:
                    yield folder.path, folder
                continue

            if isinstance(child, IFolder):
                if self.order == TraversalOrder.SELF_FIRST:
                    yield child.path, child
                stack.append((child, self.node_iterator.get_children(child)))
            else:
                yield child.path, child
