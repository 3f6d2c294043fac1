from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class PemKind(Enum):
    """PEM labels that have a decoder."""

    CERTIFICATE = "CERTIFICATE"
    OCSP_RESPONSE = "OCSP RESPONSE"
    CRL = "X509 CRL"

    @classmethod
    def from_label(cls, label: str) -> Optional["PemKind"]:
        try:
            return cls(label)
        except ValueError:
            return None


@dataclass(frozen=True)
class PemBlock:
    label: str
    payload: bytes
    headers: Mapping[str, str] = field(default_factory=dict)
    offset: int = field(default=0, compare=False)

    @property
    def kind(self) -> Optional[PemKind]:
        return PemKind.from_label(self.label)


@dataclass(frozen=True)
class DecodeOutput:
    text: str
    exit_status: int

    @property
    def ok(self) -> bool:
        return self.exit_status == 0


@dataclass(frozen=True)
class RenderResult:
    label: str
    canonical_pem: str
    decoded_text: str
    success: bool
    exit_status: Optional[int] = None
