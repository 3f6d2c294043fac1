"""
PEM block scanner.

Walks a byte buffer and yields one `PemBlock` per
`-----BEGIN <label>-----` / `-----END <label>-----` section, skipping any text
before each BEGIN marker. Scanning stops at the first section that cannot be
decoded; the reason is kept on the scanner so callers can decide whether the
stop is fatal.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import Dict, Iterator, Optional, Tuple, Union

from .domain import PemBlock
from .exceptions import PemFormatError

LOGGER = logging.getLogger(__name__)

PEM_LINE_LENGTH = 64

_BEGIN_RE = re.compile(rb"^-----BEGIN ([^\r\n]*?)-----[ \t\r]*$", re.MULTILINE)


def _end_marker(label: bytes) -> "re.Pattern[bytes]":
    return re.compile(
        rb"^-----END " + re.escape(label) + rb"-----[ \t\r]*$", re.MULTILINE
    )


def _split_headers(section: bytes) -> Tuple[Dict[str, str], bytes]:
    """Separate RFC 1421 `Key: Value` lines from the base64 body."""
    headers: Dict[str, str] = {}
    used = 0
    for line in section.splitlines(keepends=True):
        stripped = line.strip()
        if not stripped:
            used += len(line)
            if headers:
                break
            continue
        key, sep, value = stripped.partition(b":")
        if not sep:
            break
        headers[key.strip().decode("utf-8", "replace")] = value.strip().decode(
            "utf-8", "replace"
        )
        used += len(line)
    return headers, section[used:]


class PemScanner:
    """Single-use iterator over the PEM blocks of a buffer.

    After iteration ends, `error` is None when the buffer simply ran out of
    BEGIN markers, or the `PemFormatError` of the block that stopped the scan.
    """

    def __init__(self, buffer: bytes):
        self._buffer = bytes(buffer)
        self._pos = 0
        self.count = 0
        self.error: Optional[PemFormatError] = None

    @property
    def consumed(self) -> int:
        """Byte offset up to which the buffer has been consumed."""
        return self._pos

    @property
    def complete(self) -> bool:
        return self.error is None and self._pos >= len(self._buffer)

    def __iter__(self) -> Iterator[PemBlock]:
        while self.error is None:
            block = self._next_block()
            if block is None:
                return
            self.count += 1
            yield block

    def _fail(self, message: str, offset: int, label: str) -> None:
        self._pos = offset
        self.error = PemFormatError(message, offset=offset, label=label)
        LOGGER.debug("pem.scan.stop offset=%d reason=%s", offset, message)

    def _next_block(self) -> Optional[PemBlock]:
        buf = self._buffer
        begin = _BEGIN_RE.search(buf, self._pos)
        if begin is None:
            self._pos = len(buf)
            return None

        raw_label = begin.group(1)
        label = raw_label.decode("utf-8", "replace")
        end = _end_marker(raw_label).search(buf, begin.end())
        if end is None:
            self._fail(
                f"missing END marker for PEM block <{label}> at offset {begin.start()}",
                begin.start(),
                label,
            )
            return None

        headers, body = _split_headers(buf[begin.end() : end.start()])
        try:
            payload = base64.b64decode(b"".join(body.split()), validate=True)
        except (binascii.Error, ValueError) as exc:
            self._fail(
                f"invalid base64 in PEM block <{label}> at offset {begin.start()}: {exc}",
                begin.start(),
                label,
            )
            return None

        self._pos = end.end()
        LOGGER.debug(
            "pem.scan.block label=%s offset=%d bytes=%d",
            label,
            begin.start(),
            len(payload),
        )
        return PemBlock(
            label=label, payload=payload, headers=headers, offset=begin.start()
        )


def scan(buffer: Union[bytes, bytearray, str]) -> PemScanner:
    """Return a lazy scanner over the PEM blocks in `buffer`."""
    if isinstance(buffer, str):
        buffer = buffer.encode("utf-8")
    return PemScanner(buffer)


def encode_block(block: PemBlock) -> str:
    """Serialize a block to canonical PEM text (64-column base64)."""
    lines = [f"-----BEGIN {block.label}-----"]
    if block.headers:
        keys = sorted(block.headers)
        if "Proc-Type" in keys:
            keys.remove("Proc-Type")
            keys.insert(0, "Proc-Type")
        for key in keys:
            lines.append(f"{key}: {block.headers[key]}")
        lines.append("")
    body = base64.b64encode(block.payload).decode("ascii")
    lines.extend(
        body[i : i + PEM_LINE_LENGTH] for i in range(0, len(body), PEM_LINE_LENGTH)
    )
    lines.append(f"-----END {block.label}-----")
    return "\n".join(lines) + "\n"
