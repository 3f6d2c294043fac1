"""Library exceptions."""

from __future__ import annotations

from typing import Optional


class PemDecodeError(Exception):
    """Base pemdecode error."""


class InputFileError(PemDecodeError):
    """The input file could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read {path!r}: {reason}")
        self.path = path
        self.reason = reason


class PemFormatError(PemDecodeError):
    """A likely PEM block was found but could not be decoded."""

    def __init__(self, message: str, offset: int, label: Optional[str] = None):
        super().__init__(message)
        self.offset = offset
        self.label = label


class NoPemBlockError(PemFormatError):
    """The buffer does not contain a single BEGIN marker."""

    def __init__(self):
        super().__init__("no PEM block found", offset=0)


class ArtifactError(PemDecodeError):
    """The transient file handed to a decoder could not be written."""


class DecoderError(PemDecodeError):
    """The external decoder could not be run."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"{reason}: {command}")
        self.command = command
        self.reason = reason
