"""Command line entry point for Meshify."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any

from pydantic import ValidationError
from rich.console import Console

from meshify import __version__
from meshify.constants.enums import ViewName
from meshify.controllers.mesh import MeshifyController
from meshify.controllers.polling import AggregatorError
from meshify.models.state import AppSettings, ConfigError, ConfigManager
from meshify.utils import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="meshify",
        description="Terminal dashboard for Istio, Linkerd and Cilium service meshes",
    )
    p.add_argument("--backend-url", help="Meshify backend base URL")
    p.add_argument("--interval", type=int, help="refresh interval in seconds")
    p.add_argument("--timeout", type=float, help="per-request timeout in seconds")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    p.add_argument("--log-file", help="write logs to this rotating file")
    p.add_argument(
        "--once",
        metavar="VIEW",
        choices=[view.value for view in ViewName],
        help="run one poll cycle for VIEW, print it as JSON and exit",
    )
    p.add_argument(
        "--write-config",
        action="store_true",
        help="save the effective settings to the config file and exit",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def resolve_settings(args: argparse.Namespace) -> AppSettings:
    """Config file, then MESHIFY_BACKEND_URL, then command line flags.

    Raises:
        ConfigError: the file or the overrides are invalid.
    """
    settings = ConfigManager.load()
    overrides: dict[str, Any] = {
        "backend_url": args.backend_url,
        "refresh_interval": args.interval,
        "request_timeout": args.timeout,
        "log_level": args.log_level,
        "log_file": args.log_file,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if not overrides:
        return settings
    try:
        return AppSettings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as exc:
        raise ConfigError(f"Invalid command line option: {exc}") from exc


async def dump_view(settings: AppSettings, view: ViewName) -> dict[str, Any]:
    """Run one poll cycle for ``view`` and return the snapshot as a dict."""
    controller = MeshifyController(settings)
    try:
        snapshot = await controller.snapshot(view)
    finally:
        await controller.aclose()
    return snapshot.to_dict()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    error_console = Console(stderr=True)

    try:
        settings = resolve_settings(args)
        configure_logging(settings.log_level, settings.log_file or None)
    except (ConfigError, ValueError) as exc:
        error_console.print(f"[red]Configuration error:[/red] {exc}")
        return 2

    if args.write_config:
        try:
            path = ConfigManager.save(settings)
        except ConfigError as exc:
            error_console.print(f"[red]{exc}[/red]")
            return 1
        console.print(f"Settings written to {path}")
        return 0

    if args.once:
        try:
            data = asyncio.run(dump_view(settings, ViewName(args.once)))
        except AggregatorError as exc:
            error_console.print(f"[red]Snapshot failed:[/red] {exc}")
            return 1
        console.print_json(data=data)
        return 0

    from meshify.app import MeshifyApp

    logger.info("Starting Meshify against %s", settings.backend_url)
    MeshifyApp(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
