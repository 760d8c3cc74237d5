from exporter.core.common.exceptions import InvalidPathError

SEPARATOR = "/"


def relative_path(base_path: str, absolute_path: str) -> str:
    """
    Returns absolute_path expressed relative to base_path.

    The result is the suffix left after stripping base_path and one separator,
    or "" when both paths are the same. Nothing is normalized: case is
    significant and a trailing separator on absolute_path is kept.

    Raises:
        InvalidPathError: If absolute_path is not base_path or below it.
    """
    if absolute_path == base_path:
        return ""

    prefix = base_path if base_path.endswith(SEPARATOR) else base_path + SEPARATOR
    if not absolute_path.startswith(prefix):
        raise InvalidPathError(f"{absolute_path} is not inside {base_path}")

    return absolute_path[len(prefix):]


def join_path(base_path: str, relative: str) -> str:
    """
    Appends a relative path to base_path, rejecting '..' and '.' segments.
    """
    segments = [s for s in relative.split(SEPARATOR) if s]
    if any(s in (".", "..") for s in segments):
        raise InvalidPathError(f"Relative path may not contain '.' or '..': {relative}")
    if not segments:
        return base_path

    prefix = base_path if base_path.endswith(SEPARATOR) else base_path + SEPARATOR
    return prefix + SEPARATOR.join(segments)


def parent_path(path: str) -> str:
    if path == SEPARATOR:
        raise InvalidPathError("The root has no parent")
    head = path.rstrip(SEPARATOR).rsplit(SEPARATOR, 1)[0]
    return head or SEPARATOR
