"""
Block renderer and dispatcher.

For each PEM block the dispatcher prints the canonical PEM text, hands the
block to the decoder registered for its label through a transient artifact,
and prints whatever the decoder produced. Unsupported labels are reported and
skipped. Decoder failures are reported inline and never stop the run; only
artifact failures (ArtifactError) propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from rich.console import Console

from ..domain import PemBlock, PemKind, RenderResult
from ..exceptions import DecoderError
from ..scanner import encode_block
from .artifacts import transient_artifact
from .decoder_iface import Decoder
from .openssl import default_decoders
from .options import DecodeConfig

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ArtifactLayout:
    prefix: str
    # False hands the decoder the raw DER payload instead of PEM text.
    pem: bool


_ARTIFACTS: Dict[PemKind, _ArtifactLayout] = {
    PemKind.CERTIFICATE: _ArtifactLayout("Certificate_PEM_Tempfile_", pem=True),
    PemKind.OCSP_RESPONSE: _ArtifactLayout("OCSPResponse_DER_Tempfile_", pem=False),
    PemKind.CRL: _ArtifactLayout("CRL_PEM_Tempfile_", pem=True),
}


class Dispatcher:
    """Routes PEM blocks to their decoders and writes the results."""

    def __init__(
        self,
        config: Optional[DecodeConfig] = None,
        decoders: Optional[Mapping[PemKind, Decoder]] = None,
        console: Optional[Console] = None,
    ):
        self.config = config or DecodeConfig()
        self.decoders: Mapping[PemKind, Decoder] = (
            decoders if decoders is not None else default_decoders(self.config)
        )
        self.console = console or Console()

    def dispatch(self, block: PemBlock) -> RenderResult:
        kind = block.kind
        if kind is None or kind not in self.decoders:
            LOGGER.info("skipping unsupported PEM type <%s>", block.label)
            self.console.out(
                f"\nPEM type <{block.label}> not supported.", highlight=False
            )
            return RenderResult(
                label=block.label, canonical_pem="", decoded_text="", success=False
            )
        return self._render(block, kind)

    def _render(self, block: PemBlock, kind: PemKind) -> RenderResult:
        pem_text = encode_block(block)
        self._write_raw(pem_text + "\n")

        layout = _ARTIFACTS[kind]
        data = pem_text.encode("utf-8") if layout.pem else block.payload
        with transient_artifact(data, layout.prefix, self.config.temp_dir) as path:
            try:
                output = self.decoders[kind](path)
            except DecoderError as exc:
                LOGGER.error("error <%s> decoding PEM type <%s>", exc, block.label)
                self.console.out(f"Error: {exc}\n", highlight=False)
                return RenderResult(
                    label=block.label,
                    canonical_pem=pem_text,
                    decoded_text="",
                    success=False,
                )

        if not output.ok:
            LOGGER.warning(
                "decoder for PEM type <%s> exited with status %d",
                block.label,
                output.exit_status,
            )
        self._write_raw(output.text + "\n")
        return RenderResult(
            label=block.label,
            canonical_pem=pem_text,
            decoded_text=output.text,
            success=output.ok,
            exit_status=output.exit_status,
        )

    def _write_raw(self, text: str) -> None:
        # Written as-is; Rich rendering expands tabs and drops "\r".
        self.console.file.write(text)
        self.console.file.flush()
