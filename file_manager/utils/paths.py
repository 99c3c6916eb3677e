"""Path algebra against the session's current directory.

Nothing here touches the filesystem.
"""

import os

from file_manager.exceptions import ErrorKind, FileRepositoryError


def resolve_path(cwd: str, raw: str) -> str:
    """Return the absolute, normalized path that ``raw`` denotes from ``cwd``.

    Absolute inputs are only normalized; relative ones are joined onto ``cwd``
    first, so ``.`` and ``..`` segments are folded lexically.
    """
    if os.path.isabs(raw):
        return os.path.normpath(raw)
    return os.path.normpath(os.path.join(cwd, raw))


def join_name(cwd: str, name: str) -> str:
    """Join a bare entry name onto ``cwd``.

    Used where the argument must name an entry of the cwd itself (rename
    targets); anything that looks like a path is rejected.
    """
    seps = {os.sep} | ({os.altsep} if os.altsep else set())
    if not name or name in (".", "..") or any(s in name for s in seps):
        raise FileRepositoryError(
            f"Expected a file name, not a path: {name!r}", ErrorKind.OPERATION_FAILED
        )
    return os.path.join(cwd, name)
