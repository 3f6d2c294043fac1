"""Fixed text sections of the pemdecode report."""

from rich.console import Console

from pemdecode import __version__
from pemdecode.domain import PemKind
from pemdecode.rendering.options import DecodeConfig

PROG_NAME = "pemdecode"
PROG_PURPOSE = "PEM decode"
PROG_INFO = "Decodes PEM-formatted certificates, OCSP responses and CRLs."

SEPARATOR = "\n" + "-" * 108 + "\n"


def print_banner(console: Console) -> None:
    console.out(
        "\nProgram:\n"
        f"  Name    : {PROG_NAME}\n"
        f"  Release : {__version__}\n"
        f"  Purpose : {PROG_PURPOSE}\n"
        f"  Info    : {PROG_INFO}",
        highlight=False,
    )


def print_processing(console: Console, input_file: str, config: DecodeConfig) -> None:
    console.out(
        "\nProcessing:\n"
        f"  Input File         : {input_file}\n"
        f"  Output Certificate : {config.display_command(PemKind.CERTIFICATE)}\n"
        f"  Output OCSPResponse: {config.display_command(PemKind.OCSP_RESPONSE)}\n"
        f"  Output CRL         : {config.display_command(PemKind.CRL)}",
        highlight=False,
    )


def print_section(console: Console, title: str) -> None:
    console.out(f"{SEPARATOR}{title}{SEPARATOR}", highlight=False, end="")


def print_usage(console: Console, config: DecodeConfig) -> None:
    console.out(
        "\nUsage:\n"
        f"  {PROG_NAME} [OPTIONS] file\n"
        "\nExamples:\n"
        f"  {PROG_NAME} chain.pem\n"
        f"  {PROG_NAME} --verbose --timeout 10 ocsp-response.pem\n"
        "\nArgument:\n"
        "  file\n"
        "        file with PEM-formatted certificates, OCSP responses or CRLs\n"
        "\nOpenSSL output commands:\n"
        f"  Certificate   : {config.display_command(PemKind.CERTIFICATE)}\n"
        f"  OCSP response : {config.display_command(PemKind.OCSP_RESPONSE)}\n"
        f"  CRL           : {config.display_command(PemKind.CRL)}\n",
        highlight=False,
    )
