from abc import ABC, abstractmethod
from exporter.features.filesystem.domain.interfaces import INode

class ISkipCondition(ABC):
    """
    Contract for pruning nodes out of a recursive traversal.
    A matching folder is dropped together with everything below it.
    """

    @abstractmethod
    def matches(self, node: INode) -> bool:
        """
        Returns True if the node must be skipped.
        Must not depend on anything but the node and the condition's own configuration.
        """
        pass
