"""Typer-based command line interface for ed25519-parser."""
from __future__ import annotations

import json
import os
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import structlog
import typer

from ..backend import CurveBackend, SodiumCurveBackend
from ..config import AppConfig, load_config
from ..convert import raw_private_bytes, raw_public_bytes
from ..exceptions import Ed25519ParserError
from ..keygen import generate_keypair
from ..logging import configure_logging
from ..parser import parse_private, parse_public, parse_public_many_pem

app = typer.Typer(help="Inspect and generate OpenSSL Ed25519 keys as X25519 material")

logger = structlog.get_logger(__name__)


class KeyFormat(str, Enum):
    PEM = "pem"
    DER = "der"


class KeyKindOption(str, Enum):
    PRIVATE = "private"
    PUBLIC = "public"


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    configure_logging(ctx.obj.logging.normalized_level())


def _backend(config: AppConfig) -> Optional[CurveBackend]:
    return SodiumCurveBackend() if config.parser.subgroup_check else None


def _fail(exc: Ed25519ParserError, path: Path) -> NoReturn:
    logger.error("cli.parse_failed", path=str(path), error=type(exc).__name__)
    typer.echo(f"{path}: {type(exc).__name__}: {exc}", err=True)
    raise typer.Exit(code=1)


def _write_private(path: Path, data: bytes) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)
    os.chmod(path, 0o600)


@app.command()
def generate(
    ctx: typer.Context,
    out_dir: Path = typer.Argument(..., file_okay=False, help="Directory receiving the key files"),
    name: str = typer.Option("ed25519", "--name", help="Base name for the key files"),
    key_format: Optional[KeyFormat] = typer.Option(None, "--format", help="pem or der (defaults to config)"),
) -> None:
    config: AppConfig = ctx.obj
    fmt = key_format.value if key_format else config.export.format
    keypair = generate_keypair()
    if keypair is None:
        typer.echo("Key generation failed", err=True)
        raise typer.Exit(code=1)

    out_dir.mkdir(parents=True, exist_ok=True)
    if fmt == KeyFormat.DER.value:
        private_path, public_path = out_dir / f"{name}.der", out_dir / f"{name}_pub.der"
        private_data, public_data = keypair.private_der, keypair.public_der
    else:
        private_path, public_path = out_dir / f"{name}.key", out_dir / f"{name}.pub"
        private_data = keypair.private_as_pem().encode("ascii")
        public_data = keypair.public_as_pem().encode("ascii")

    _write_private(private_path, private_data)
    public_path.write_bytes(public_data)
    logger.info("cli.keys_written", private=str(private_path), public=str(public_path), format=fmt)
    typer.echo(f"Private key written to {private_path}")
    typer.echo(f"Public key written to {public_path}")


@app.command()
def inspect(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    kind: KeyKindOption = typer.Option(KeyKindOption.PUBLIC, "--kind", help="Key kind stored in PATH"),
) -> None:
    config: AppConfig = ctx.obj
    data = path.read_bytes()
    try:
        if kind is KeyKindOption.PRIVATE:
            secret = parse_private(data, strict_version=config.parser.strict_version)
            report = {
                "kind": kind.value,
                "x25519_private": raw_private_bytes(secret).hex(),
                "x25519_public": raw_public_bytes(secret).hex(),
            }
        else:
            public = parse_public(data, backend=_backend(config))
            report = {"kind": kind.value, "x25519_public": raw_public_bytes(public).hex()}
    except Ed25519ParserError as exc:
        _fail(exc, path)
    typer.echo(json.dumps(report, indent=2))


@app.command("inspect-many")
def inspect_many(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
) -> None:
    try:
        keys = parse_public_many_pem(path.read_bytes(), backend=_backend(ctx.obj))
    except Ed25519ParserError as exc:
        _fail(exc, path)
    typer.echo(json.dumps([raw_public_bytes(key).hex() for key in keys], indent=2))


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
