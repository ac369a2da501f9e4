# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CLI entry point — Click-based commands against an OpenFaaS gateway."""

from __future__ import annotations

import sys
from dataclasses import replace
from typing import NoReturn

import click

from . import __version__
from .client import GatewayClient
from .config import GatewayConfig
from .errors import GatewayError
from .models import Invocation
from .version import ReleaseInfo


@click.group()
@click.option("--gateway", "gateway_url", default=None, help="Gateway URL (overrides OPEN_FAAS_GW_URL)")
@click.pass_context
def cli(ctx: click.Context, gateway_url: str | None) -> None:
    """OpenFaaS gateway client — invoke and discover functions."""
    ctx.ensure_object(dict)
    config = GatewayConfig.from_env()
    if gateway_url:
        config = replace(config, gateway_url=gateway_url)
    ctx.obj["config"] = config


def _open(ctx: click.Context) -> GatewayClient:
    try:
        return GatewayClient(ctx.obj["config"])
    except GatewayError as e:
        _fail(e)


def _fail(e: Exception) -> NoReturn:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(1)


@cli.command()
@click.argument("name")
@click.option("--data", "-d", default=None, help="Request body, or '-' to read stdin")
@click.option("--content-type", default="text/plain", show_default=True)
@click.option("--content-encoding", default="", help="Content-Encoding header value")
@click.option("--async", "is_async", is_flag=True, help="Queue the invocation instead of waiting")
@click.pass_context
def invoke(
    ctx: click.Context,
    name: str,
    data: str | None,
    content_type: str,
    content_encoding: str,
    is_async: bool,
) -> None:
    """Invoke a deployed function."""
    if data == "-":
        message: bytes | None = click.get_binary_stream("stdin").read()
    else:
        message = data.encode() if data is not None else None
    invocation = Invocation(
        message=message,
        content_type=content_type,
        content_encoding=content_encoding,
    )

    with _open(ctx) as client:
        try:
            if is_async:
                client.invoke_async(name, invocation)
                click.echo("accepted")
            else:
                click.get_binary_stream("stdout").write(client.invoke_sync(name, invocation))
        except GatewayError as e:
            _fail(e)


@cli.command()
@click.pass_context
def namespaces(ctx: click.Context) -> None:
    """List namespaces known to the gateway."""
    with _open(ctx) as client:
        try:
            names = client.get_namespaces()
        except GatewayError as e:
            _fail(e)
        if not names:
            click.echo("No namespaces (gateway may not support namespaces).")
            return
        for n in names:
            click.echo(n)


@cli.command()
@click.option("--namespace", "-n", default="", help="Namespace to list (default: gateway default)")
@click.pass_context
def functions(ctx: click.Context, namespace: str) -> None:
    """List deployed functions."""
    with _open(ctx) as client:
        try:
            items = client.get_functions(namespace)
        except GatewayError as e:
            _fail(e)
        if not items:
            click.echo("No functions deployed.")
            return
        for f in items:
            click.echo(f"  {f.name:30s}  {f.replicas:3d}  {int(f.invocation_count):8d}  {f.image}")


@cli.command()
def version() -> None:
    """Show release version and commit."""
    info = ReleaseInfo.from_env(__version__)
    click.echo(f"faas-client {info.version} (commit {info.commit})")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
