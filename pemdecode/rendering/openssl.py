"""
External process decoders.

`CommandDecoder` runs one command per artifact and returns its combined
stdout/stderr text with the exit status. `default_decoders` wires the openssl
commands from a `DecodeConfig` to each supported PEM kind.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Dict, List, Optional, Sequence

from ..domain import DecodeOutput, PemKind
from ..exceptions import DecoderError
from .decoder_iface import Decoder
from .options import PATH_PLACEHOLDER, DecodeConfig

LOGGER = logging.getLogger(__name__)


class CommandDecoder:
    """Decoder backed by an external command.

    `argv` is a template; every occurrence of `{path}` in an argument is
    replaced by the artifact path. The command runs without a shell.
    """

    def __init__(
        self,
        argv: Sequence[str],
        timeout: Optional[float] = None,
        verbose: bool = False,
    ):
        if not argv:
            raise ValueError("argv must not be empty")
        self.argv = tuple(argv)
        self.timeout = timeout
        # Also log successful runs, not only failures.
        self.verbose = verbose

    def command(self, artifact_path: str) -> List[str]:
        return [arg.replace(PATH_PLACEHOLDER, artifact_path) for arg in self.argv]

    def __call__(self, artifact_path: str) -> DecodeOutput:
        cmd = self.command(artifact_path)
        shown = " ".join(cmd)
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            LOGGER.warning("command timed out after %ss: %s", self.timeout, shown)
            raise DecoderError(shown, f"timed out after {self.timeout}s") from exc
        except OSError as exc:
            LOGGER.warning("command could not be started: %s (%s)", shown, exc)
            raise DecoderError(shown, str(exc)) from exc

        text = proc.stdout.decode("utf-8", errors="replace")
        if proc.returncode != 0:
            LOGGER.warning("command exit code = <%d>", proc.returncode)
            LOGGER.warning("command (not successful) = <%s>", shown)
            if text:
                LOGGER.warning("command output (stdout, stderr) =\n%s", text)
        elif self.verbose:
            LOGGER.info("command (successful) = <%s>", shown)
            LOGGER.info("command exit code = <%d>", proc.returncode)
            if text:
                LOGGER.info("command output (stdout, stderr) =\n%s", text)
        return DecodeOutput(text=text, exit_status=proc.returncode)


def default_decoders(config: DecodeConfig) -> Dict[PemKind, Decoder]:
    """One CommandDecoder per supported kind, built from `config`."""
    return {
        kind: CommandDecoder(
            config.command_for(kind), timeout=config.timeout, verbose=config.verbose
        )
        for kind in PemKind
    }
