#!/usr/bin/env python3
"""Webhook Payload Tool - Entry point."""
import json
import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import click
from colorama import Fore, Style, init

from config import app_config
from webhook_payload.api.webhook_client import WebhookClient
from webhook_payload.builder import ExecuteWebhook

# Initialize colorama
init(autoreset=True)


def payload_options(func):
    """Shared options for commands that build a payload."""
    options = [
        click.option("--content", help="Message content"),
        click.option("--username", help="Override the webhook username"),
        click.option("--avatar-url", help="Override the webhook avatar"),
        click.option("--tts/--no-tts", default=False, help="Text-to-speech message"),
        click.option(
            "--embed",
            "embeds",
            multiple=True,
            callback=parse_embeds,
            help="Embed object as JSON (repeatable)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def parse_embeds(ctx, param, values):
    """Decode each --embed value into a JSON object."""
    embeds = []

    for value in values:
        try:
            embed = json.loads(value)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"invalid JSON ({e})")

        if not isinstance(embed, dict):
            raise click.BadParameter("embed must be a JSON object")
        embeds.append(embed)

    return embeds


def build_payload(content, username, avatar_url, tts, embeds) -> ExecuteWebhook:
    """Build an ExecuteWebhook from CLI options and config defaults."""
    builder = ExecuteWebhook.default()
    builder.tts(tts)

    if username is None:
        username = app_config.default_username
    if avatar_url is None:
        avatar_url = app_config.default_avatar_url

    if content is not None:
        builder.content(content)
    if username:
        builder.username(username)
    if avatar_url:
        builder.avatar_url(avatar_url)
    if embeds:
        builder.embeds(embeds)

    return builder


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Webhook Payload Tool - Build and execute webhook messages."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@payload_options
def preview(content, username, avatar_url, tts, embeds):
    """Print the payload without sending it."""
    builder = build_payload(content, username, avatar_url, tts, embeds)
    click.echo(json.dumps(builder.to_dict(), indent=2))


@cli.command()
@payload_options
@click.option("--webhook-id", default=lambda: app_config.webhook_api.webhook_id, help="Webhook ID")
@click.option("--token", default=lambda: app_config.webhook_api.token, help="Webhook token")
@click.option("--wait", is_flag=True, help="Wait for the created message")
def execute(content, username, avatar_url, tts, embeds, webhook_id, token, wait):
    """Send the payload to the webhook."""
    if not webhook_id or not token:
        raise click.UsageError("--webhook-id and --token are required (or set DISCORD_WEBHOOK_URL)")

    builder = build_payload(content, username, avatar_url, tts, embeds)
    client = WebhookClient(app_config.webhook_api)
    result = client.execute(webhook_id, token, builder, wait=wait)

    if result is None:
        click.echo(f"{Fore.RED}❌ Webhook execution failed")
        sys.exit(1)

    click.echo(f"{Fore.GREEN}✅ Webhook executed!{Style.RESET_ALL}")
    if result:
        click.echo(json.dumps(result, indent=2))


if __name__ == "__main__":
    cli()
