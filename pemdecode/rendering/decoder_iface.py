"""
Decoder seam for the renderer.

A decoder turns one transient artifact (a file path) into human-readable
text. The renderer only calls this interface, so the external openssl
process can be replaced by an in-process parser without touching the
scanner or the dispatcher.
"""

from __future__ import annotations

from typing import Protocol

from ..domain import DecodeOutput


class Decoder(Protocol):
    """Decode the artifact at `artifact_path` to text."""

    def __call__(self, artifact_path: str) -> DecodeOutput: ...
