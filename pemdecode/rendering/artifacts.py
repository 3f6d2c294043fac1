from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from typing import Iterator, Optional

from ..exceptions import ArtifactError

LOGGER = logging.getLogger(__name__)


@contextlib.contextmanager
def transient_artifact(
    data: bytes, prefix: str, directory: Optional[str] = None
) -> Iterator[str]:
    """Write `data` to a private temp file and yield its path.

    The file is removed when the block exits, however it exits. Failing to
    create or write it raises ArtifactError.
    """
    try:
        fd, path = tempfile.mkstemp(prefix=prefix, dir=directory)
    except OSError as exc:
        raise ArtifactError(f"cannot create temp file: {exc}") from exc

    try:
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
        except OSError as exc:
            raise ArtifactError(f"cannot write temp file {path}: {exc}") from exc
        LOGGER.debug("artifact.created path=%s bytes=%d", path, len(data))
        yield path
    finally:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        LOGGER.debug("artifact.removed path=%s", path)
