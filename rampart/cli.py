"""
Rampart CLI
============

Click-based command-line interface for Rampart. Assesses symmetric
ciphers, hash functions, elliptic curves, RSA and finite field key
sizes, and X.509 certificates against a chosen standard.

Usage::

    python -m rampart standards
    python -m rampart primitives hash
    python -m rampart symmetric des-ede3 --standard nist --year 2023
    python -m rampart hash sha1 --use pre-image
    python -m rampart ecc brainpoolP256r1 --standard bsi
    python -m rampart ifc 2048 --security 112
    python -m rampart ffc 3072 256
    python -m rampart -o html -f report.html x509 server.pem

Every assessment command exits with status 0 when the primitive is
compliant and 1 when it is not.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

import click

from shared.config import HASH_USES, RampartConfig
from shared.console import RampartConsole
from shared.models import ScanResult

from rampart import __version__
from rampart.core.engine import RampartEngine, is_compliant
from rampart.output.console import RampartConsoleOutput
from rampart.output.report import RampartReportGenerator
from rampart.primitives import ECC_NAMES, HASH_NAMES, SYMMETRIC_NAMES
from rampart.standards import STANDARDS

_CATALOGS = {
    "ecc": ("Elliptic Curve", ECC_NAMES),
    "hash": ("Hash Function", HASH_NAMES),
    "symmetric": ("Symmetric Cipher", SYMMETRIC_NAMES),
}


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="rampart")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to Rampart configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and console output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Rampart -- Cryptographic Compliance Engine.

    Check whether a cryptographic primitive meets a standard's security
    bar for a given security floor and year, and which primitive to
    migrate to when it does not.
    """
    ctx.ensure_object(dict)

    try:
        rampart_config = RampartConfig.load(config) if config else RampartConfig()
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    ctx.obj["config"] = rampart_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = RampartConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = RampartEngine(rampart_config)
    ctx.obj["display"] = RampartConsoleOutput(console)
    ctx.obj["reporter"] = RampartReportGenerator()

    if not quiet and output == "console":
        console.banner(version=__version__)


_ASSESSMENT_OPTIONS = (
    click.option(
        "--standard", "-s",
        type=click.Choice(sorted(STANDARDS), case_sensitive=False),
        default=None,
        help="Standard to assess against (default from configuration).",
    ),
    click.option(
        "--security",
        type=click.IntRange(min=1),
        default=None,
        help="Minimum security strength in bits (default 128).",
    ),
    click.option(
        "--year",
        type=click.IntRange(min=1),
        default=None,
        help="Year of evaluation (default: the current year).",
    ),
)


def assessment_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach ``--standard``, ``--security`` and ``--year`` to a command."""
    for option in reversed(_ASSESSMENT_OPTIONS):
        fn = option(fn)
    return fn


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Render *result* in the selected format and exit with its verdict.

    Args:
        ctx: Click context containing configuration.
        result: ScanResult to output.
    """
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: RampartReportGenerator = ctx.obj["reporter"]
    console: RampartConsole = ctx.obj["console"]
    config: RampartConfig = ctx.obj["config"]

    if output_format == "console":
        display: RampartConsoleOutput = ctx.obj["display"]
        display.display_result(result)
    elif output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.info(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.render_json(result))
    elif output_format == "html":
        if output_file:
            path = reporter.generate_html(result, Path(output_file))
        else:
            stem = "".join(c if c.isalnum() else "_" for c in Path(result.target).name)
            default_name = f"rampart_report_{stem or 'result'}.html"
            path = reporter.generate_html(
                result, Path(config.global_settings.output_dir) / default_name
            )
        console.info(f"HTML report saved to: {path}")

    ctx.exit(0 if is_compliant(result) else 1)


def _run(ctx: click.Context, assess: Callable[[], ScanResult]) -> None:
    """Run an engine call, turning argument errors into usage errors."""
    try:
        result = assess()
    except ValueError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc
    _handle_output(ctx, result)


# ===================================================================== #
#  Registry Commands
# ===================================================================== #

@cli.command()
@click.pass_context
def standards(ctx: click.Context) -> None:
    """List the registered standards."""
    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            [{"name": s.name, "title": s.title} for s in STANDARDS.values()],
            indent=2,
        ))
        return
    display: RampartConsoleOutput = ctx.obj["display"]
    display.display_standards(list(STANDARDS.values()))


@cli.command()
@click.argument("family", type=click.Choice(sorted(_CATALOGS), case_sensitive=False))
@click.pass_context
def primitives(ctx: click.Context, family: str) -> None:
    """List the primitive names recognised for FAMILY."""
    label, names = _CATALOGS[family.lower()]
    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(names.names(), indent=2))
        return
    display: RampartConsoleOutput = ctx.obj["display"]
    display.display_catalog(label, names)


# ===================================================================== #
#  Assessment Commands
# ===================================================================== #

@cli.command()
@click.argument("name")
@assessment_options
@click.pass_context
def symmetric(
    ctx: click.Context,
    name: str,
    standard: Optional[str],
    security: Optional[int],
    year: Optional[int],
) -> None:
    """Assess a symmetric cipher (e.g. aes128, des-ede3, chacha20)."""
    engine: RampartEngine = ctx.obj["engine"]
    _run(ctx, lambda: engine.assess_symmetric(
        name, standard=standard, security=security, year=year,
    ))


@cli.command("hash")
@click.argument("name")
@click.option(
    "--use", "-u",
    type=click.Choice(HASH_USES),
    default=None,
    help="collision: digital signatures; pre-image: HMAC, KDF, RBG.",
)
@assessment_options
@click.pass_context
def hash_(
    ctx: click.Context,
    name: str,
    use: Optional[str],
    standard: Optional[str],
    security: Optional[int],
    year: Optional[int],
) -> None:
    """Assess a hash function (e.g. sha256, sha3-384, blake2b512)."""
    engine: RampartEngine = ctx.obj["engine"]
    _run(ctx, lambda: engine.assess_hash(
        name, use=use, standard=standard, security=security, year=year,
    ))


@cli.command()
@click.argument("name")
@assessment_options
@click.pass_context
def ecc(
    ctx: click.Context,
    name: str,
    standard: Optional[str],
    security: Optional[int],
    year: Optional[int],
) -> None:
    """Assess an elliptic curve (e.g. prime256v1, secp384r1, ed25519)."""
    engine: RampartEngine = ctx.obj["engine"]
    _run(ctx, lambda: engine.assess_ecc(
        name, standard=standard, security=security, year=year,
    ))


@cli.command()
@click.argument("bits", type=click.IntRange(min=1))
@assessment_options
@click.pass_context
def ifc(
    ctx: click.Context,
    bits: int,
    standard: Optional[str],
    security: Optional[int],
    year: Optional[int],
) -> None:
    """Assess an RSA key with a BITS-bit modulus."""
    engine: RampartEngine = ctx.obj["engine"]
    _run(ctx, lambda: engine.assess_ifc(
        bits, standard=standard, security=security, year=year,
    ))


@cli.command()
@click.argument("l", type=click.IntRange(min=1))
@click.argument("n", type=click.IntRange(min=1))
@assessment_options
@click.pass_context
def ffc(
    ctx: click.Context,
    l: int,  # noqa: E741
    n: int,
    standard: Optional[str],
    security: Optional[int],
    year: Optional[int],
) -> None:
    """Assess a finite field key: L-bit prime p, N-bit subgroup order q."""
    engine: RampartEngine = ctx.obj["engine"]
    _run(ctx, lambda: engine.assess_ffc(
        l, n, standard=standard, security=security, year=year,
    ))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@assessment_options
@click.pass_context
def x509(
    ctx: click.Context,
    path: str,
    standard: Optional[str],
    security: Optional[int],
    year: Optional[int],
) -> None:
    """Assess the key and signature hash of a PEM or DER certificate."""
    engine: RampartEngine = ctx.obj["engine"]
    _run(ctx, lambda: engine.assess_certificate(
        Path(path), standard=standard, security=security, year=year,
    ))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Rampart CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
