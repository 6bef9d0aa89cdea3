"""Destination family resolution.

Matchers are tried in order; the first one that accepts the URL picks the
family. Anything unmatched gets the passthrough formatter.
"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import urlsplit

from atomic_analyzer.events.formatters.base import Clock, PassthroughFormatter, PayloadFormatter
from atomic_analyzer.events.formatters.discord import DiscordFormatter
from atomic_analyzer.events.formatters.slack import SlackFormatter
from atomic_analyzer.models.enums import DestinationFamily

_DISCORD_HOSTS = ("discord.com", "discordapp.com")


def _host_is(host: str, domain: str) -> bool:
    return host == domain or host.endswith("." + domain)


def _is_slack(host: str, path: str) -> bool:
    return host == "hooks.slack.com"


def _is_discord(host: str, path: str) -> bool:
    return any(_host_is(host, d) for d in _DISCORD_HOSTS) and path.startswith("/api/webhooks")


MATCHERS: list[tuple[DestinationFamily, Callable[[str, str], bool]]] = [
    (DestinationFamily.SLACK, _is_slack),
    (DestinationFamily.DISCORD, _is_discord),
]


def resolve_family(url: str) -> DestinationFamily:
    parts = urlsplit(url)
    host = (parts.hostname or "").lower()
    for family, matches in MATCHERS:
        if matches(host, parts.path):
            return family
    return DestinationFamily.GENERIC


def build_formatters(clock: Clock | None = None) -> dict[DestinationFamily, PayloadFormatter]:
    return {
        DestinationFamily.SLACK: SlackFormatter(clock),
        DestinationFamily.DISCORD: DiscordFormatter(clock),
        DestinationFamily.GENERIC: PassthroughFormatter(),
    }


__all__ = [
    "MATCHERS",
    "PassthroughFormatter",
    "PayloadFormatter",
    "build_formatters",
    "resolve_family",
]
