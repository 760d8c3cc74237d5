# File: exporter/core/common/exceptions.py


class ExporterError(Exception):
    """Base class for every error raised by the exporter."""


class UserNotFoundError(ExporterError, LookupError):
    def __init__(self, user_id: str):
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class NodeNotFoundError(ExporterError, FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(f"Node not found: {path}")
        self.path = path


class InvalidNodeTypeError(ExporterError, ValueError):
    """A folder was required but a different kind of node was given."""


class InvalidPathError(ExporterError, ValueError):
    """A path escapes, or does not belong to, the folder it was resolved against."""
