"""Split PEM files and render each block with openssl."""

from .domain import DecodeOutput, PemBlock, PemKind, RenderResult
from .exceptions import (
    ArtifactError,
    DecoderError,
    InputFileError,
    NoPemBlockError,
    PemDecodeError,
    PemFormatError,
)
from .pipeline import ProcessSummary, decode_all, read_input
from .rendering.options import DecodeConfig
from .rendering.renderer import Dispatcher
from .scanner import PemScanner, encode_block, scan

__version__ = "0.2.0"

__all__ = [
    "ArtifactError",
    "DecodeConfig",
    "DecodeOutput",
    "DecoderError",
    "Dispatcher",
    "InputFileError",
    "NoPemBlockError",
    "PemBlock",
    "PemDecodeError",
    "PemFormatError",
    "PemKind",
    "PemScanner",
    "ProcessSummary",
    "RenderResult",
    "decode_all",
    "encode_block",
    "read_input",
    "scan",
]
