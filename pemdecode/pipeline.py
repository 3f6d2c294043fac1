"""
Scan-and-dispatch loop.

`decode_all` feeds every block of a buffer to a dispatcher in source order.
A buffer without any decodable block is an error; a malformed block after at
least one good one only ends the run early.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .exceptions import InputFileError, NoPemBlockError, PemFormatError
from .rendering.renderer import Dispatcher
from .scanner import scan

LOGGER = logging.getLogger(__name__)


@dataclass
class ProcessSummary:
    blocks: int = 0
    rendered: int = 0
    unsupported: int = 0
    failed: int = 0
    # Set when scanning stopped at a malformed block after the first one.
    error: Optional[PemFormatError] = None

    @property
    def complete(self) -> bool:
        return self.error is None


def decode_all(buffer: bytes, dispatcher: Dispatcher) -> ProcessSummary:
    summary = ProcessSummary()
    scanner = scan(buffer)
    for block in scanner:
        summary.blocks += 1
        result = dispatcher.dispatch(block)
        if result.success:
            summary.rendered += 1
        elif block.kind is None:
            summary.unsupported += 1
        else:
            summary.failed += 1

    if scanner.error is not None:
        if summary.blocks == 0:
            raise scanner.error
        LOGGER.warning(
            "input not fully consumed, stopped after %d block(s): %s",
            summary.blocks,
            scanner.error,
        )
        summary.error = scanner.error
    elif summary.blocks == 0:
        raise NoPemBlockError()

    LOGGER.debug(
        "pem.decode_all blocks=%d rendered=%d unsupported=%d failed=%d",
        summary.blocks,
        summary.rendered,
        summary.unsupported,
        summary.failed,
    )
    return summary


def read_input(path: str) -> bytes:
    """Read the whole input file; any OS error becomes InputFileError."""
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as exc:
        raise InputFileError(path, exc.strerror or str(exc)) from exc
