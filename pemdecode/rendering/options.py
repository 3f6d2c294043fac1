"""
Decoder configuration.

A single immutable value built once at startup and handed to the
Dispatcher. Fields left at their defaults may be filled from the
environment through `DecodeConfig.from_env`:

  PEMDECODE_OPENSSL   path or name of the openssl binary
  PEMDECODE_TIMEOUT   seconds to wait for one decoder run (empty: no limit)
  PEMDECODE_TMPDIR    directory for transient artifacts
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from ..domain import PemKind

PATH_PLACEHOLDER = "{path}"


@dataclass(frozen=True)
class DecodeConfig:
    openssl: str = "openssl"

    # Argument templates appended to `openssl`; PATH_PLACEHOLDER is replaced
    # with the artifact path.
    certificate_args: Tuple[str, ...] = (
        "x509",
        "-certopt",
        "ext_dump",
        "-text",
        "-noout",
        "-inform",
        "PEM",
        "-in",
        PATH_PLACEHOLDER,
    )
    ocsp_response_args: Tuple[str, ...] = (
        "ocsp",
        "-text",
        "-noverify",
        "-respin",
        PATH_PLACEHOLDER,
    )
    crl_args: Tuple[str, ...] = (
        "crl",
        "-text",
        "-noout",
        "-inform",
        "PEM",
        "-in",
        PATH_PLACEHOLDER,
    )

    # None waits forever.
    timeout: Optional[float] = None

    # Log successful decoder runs too, not only failures.
    verbose: bool = False

    # None uses the platform default temp directory.
    temp_dir: Optional[str] = None

    @classmethod
    def from_env(cls, **overrides) -> "DecodeConfig":
        """Build a config from PEMDECODE_* variables; non-None overrides win."""
        values = {}
        openssl = os.getenv("PEMDECODE_OPENSSL", "").strip()
        if openssl:
            values["openssl"] = openssl
        timeout = os.getenv("PEMDECODE_TIMEOUT", "").strip()
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError:
                raise ValueError(
                    f"PEMDECODE_TIMEOUT must be a number, got {timeout!r}"
                ) from None
        temp_dir = os.getenv("PEMDECODE_TMPDIR", "").strip()
        if temp_dir:
            values["temp_dir"] = temp_dir
        values.update({k: v for k, v in overrides.items() if v is not None})
        return replace(cls(), **values)

    def args_for(self, kind: PemKind) -> Tuple[str, ...]:
        if kind is PemKind.CERTIFICATE:
            return self.certificate_args
        if kind is PemKind.OCSP_RESPONSE:
            return self.ocsp_response_args
        return self.crl_args

    def command_for(self, kind: PemKind, path: str = PATH_PLACEHOLDER) -> List[str]:
        """Full argv for decoding `kind`, with the artifact path filled in."""
        return [self.openssl] + [
            arg.replace(PATH_PLACEHOLDER, path) for arg in self.args_for(kind)
        ]

    def display_command(self, kind: PemKind) -> str:
        return " ".join(self.command_for(kind, "tempfile"))
