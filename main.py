#!/usr/bin/env python3.9
from __future__ import annotations

import json
import logging

import click
import uvloop

import services
import settings
from api.errors import ApiError
from models.channel import Channel

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(message)s",
)


async def list_channels(page_size: int, page: int) -> list[Channel]:
    await services.connect_services()
    try:
        collection = await services.channels.list(page_size, page)
    finally:
        await services.disconnect_services()

    return [Channel(**channel) for channel in collection]


async def get_channel(channel_id: int, detail_level: str | None) -> dict:
    await services.connect_services()
    try:
        return await services.channels.get(channel_id, {"detail_level": detail_level})
    finally:
        await services.disconnect_services()


@click.group()
def cli():
    pass


@cli.command(name="list")
@click.option("--page-size", default=100, help="results per page")
@click.option("--page", default=1, help="page to retrieve")
def list_command(page_size: int, page: int) -> None:
    for channel in uvloop.run(list_channels(page_size, page)):
        click.echo(f"{channel.id}\t{channel.title or ''}")


@cli.command(name="get")
@click.argument("channel_id", type=int)
@click.option(
    "--detail-level",
    type=click.Choice(["minimal"]),
    default=None,
    help="limit the result to id, title, picture, owner and locks",
)
def get_command(channel_id: int, detail_level: str | None) -> None:
    channel = uvloop.run(get_channel(channel_id, detail_level))
    click.echo(json.dumps(channel, indent=2))


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except ApiError as exc:
        logging.error(f"Request failed: {exc}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
