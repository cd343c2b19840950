# SPDX-FileCopyrightText: 2025 gfshare contributors
# SPDX-License-Identifier: MIT

"""Command line interface: split a file into parts and join them back."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import click

from .audit import AuditLog
from .errors import GFShareError
from .policy import load_policy
from .scheme import Scheme, wipe

_logger = logging.getLogger(__name__)

_PART_SUFFIX = re.compile(r"\.(\d+)$")


def _part_id(path: Path) -> int:
    match = _PART_SUFFIX.search(path.name)
    if match is None:
        raise click.BadParameter(f"{path.name}: expected a numeric part suffix such as '.001'")
    return int(match.group(1))


def _audit(ctx: click.Context, event: str, **details: object) -> None:
    audit_log = ctx.obj.get("audit")
    if audit_log is None:
        return
    path = audit_log.record(event, details=details)
    _logger.debug("audit record %s", path)


@click.group()
@click.option(
    "--audit-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for signed audit records (defaults to GFSHARE_AUDIT_DIR).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, audit_dir: Path | None, verbose: bool) -> None:
    """Split secrets into parts with Shamir's Secret Sharing over GF(256)."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    policy = load_policy()
    directory = audit_dir or policy.audit_dir
    ctx.ensure_object(dict)
    ctx.obj["policy"] = policy
    ctx.obj["audit"] = AuditLog(directory) if directory else None


@main.command()
@click.argument("secret_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-n", "--parts", "parts_count", type=int, default=None, help="Number of parts.")
@click.option("-k", "--threshold", type=int, default=None, help="Parts needed to join.")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Where to write the parts (defaults to the secret's directory).",
)
@click.pass_context
def split(
    ctx: click.Context,
    secret_file: Path,
    parts_count: int | None,
    threshold: int | None,
    output_dir: Path | None,
) -> None:
    """Split SECRET_FILE into parts named SECRET_FILE.001, SECRET_FILE.002, ..."""

    policy = ctx.obj["policy"]
    try:
        scheme = Scheme(
            parts_count if parts_count is not None else policy.parts_count,
            threshold if threshold is not None else policy.threshold,
        )
    except GFShareError as exc:
        raise click.ClickException(str(exc)) from exc

    secret = bytearray(secret_file.read_bytes())
    parts = scheme.split(secret)
    target = output_dir or secret_file.parent
    target.mkdir(parents=True, exist_ok=True)
    for ident, value in parts.items():
        path = target / f"{secret_file.name}.{ident:03d}"
        path.write_bytes(value)
        click.echo(str(path))
    _audit(ctx, "split", parts=scheme.n, threshold=scheme.k, length=len(secret))
    wipe(secret)


@main.command()
@click.argument(
    "part_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("-k", "--threshold", type=int, default=None, help="Parts needed to join.")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="File to write the recovered secret to.",
)
@click.pass_context
def join(ctx: click.Context, part_files: tuple[Path, ...], threshold: int | None, output: Path) -> None:
    """Recover a secret from PART_FILES."""

    policy = ctx.obj["policy"]
    parts: dict[int, bytes] = {}
    for path in part_files:
        ident = _part_id(path)
        if ident in parts:
            raise click.BadParameter(f"part {ident} given more than once")
        parts[ident] = path.read_bytes()

    k = threshold if threshold is not None else policy.threshold
    try:
        # the threshold only gates the join, so any n >= k is valid here
        scheme = Scheme(max(len(parts), k), k)
        secret = scheme.join(parts)
    except GFShareError as exc:
        raise click.ClickException(str(exc)) from exc

    output.write_bytes(secret)
    _audit(ctx, "join", parts=len(parts), threshold=k, length=len(secret))
    wipe(secret)
    click.echo(str(output))


if __name__ == "__main__":
    main()
