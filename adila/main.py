from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

import uvicorn
from dotenv import load_dotenv

from .api.client import TelemetryHttpClient
from .api.server import create_app
from .config import AdilaConfig, load_config
from .db import load_database
from .identifiers import read_identifiers
from .keys import candidate_keys
from .resolver import resolve
from .summary import to_json
from .types import DeviceInfo

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Identify the current device from its hardware identifiers",
        epilog="Settings are read from ADILA_* environment variables (or a .env file). "
               "CLI arguments override them.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: ADILA_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command")

    show = sub.add_parser("show", help="Print the device summary as JSON")
    _add_identity_args(show)
    show.add_argument(
        "--full",
        action="store_true",
        help="Print every field, including found and full_name",
    )

    key = sub.add_parser("key", help="Print the lookup keys for a device/model pair")
    key.add_argument("device", help="Raw device identifier")
    key.add_argument("model", nargs="?", default="", help="Raw model identifier")

    serve = sub.add_parser("serve", help="Run the device info HTTP API")
    _add_identity_args(serve)
    serve.add_argument("--host", type=str, default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    report = sub.add_parser("report", help="Send device telemetry once")
    _add_identity_args(report)
    report.add_argument(
        "--url",
        type=str,
        default=None,
        help="Telemetry base URL (default: ADILA_TELEMETRY_URL)",
    )
    return parser


def _add_identity_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--device", type=str, default=None, help="Override the device identifier")
    parser.add_argument("--model", type=str, default=None, help="Override the model identifier")
    parser.add_argument(
        "--database",
        type=Path,
        default=None,
        help="JSON overlay merged into the bundled device database",
    )


def apply_overrides(cfg: AdilaConfig, args: argparse.Namespace) -> AdilaConfig:
    overrides = {}
    if getattr(args, "device", None) is not None:
        overrides["device"] = args.device
    if getattr(args, "model", None) is not None:
        overrides["model"] = args.model
    if getattr(args, "database", None) is not None:
        overrides["database_path"] = args.database
    if getattr(args, "url", None):
        overrides["telemetry_url"] = args.url
    return replace(cfg, **overrides) if overrides else cfg


def identify(cfg: AdilaConfig) -> DeviceInfo:
    identifiers = read_identifiers(cfg)
    database = load_database(cfg.database_path)
    return resolve(identifiers.device, identifiers.model, database)


def _run_serve(cfg: AdilaConfig, host: str, port: int) -> int:
    info = identify(cfg)
    app = create_app(info_provider=lambda: info)
    logger.info("Serving device info on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=cfg.log_level.lower())
    return 0


def _run_report(cfg: AdilaConfig) -> int:
    if not cfg.telemetry_url:
        logger.error("No telemetry URL configured; pass --url or set ADILA_TELEMETRY_URL")
        return 2
    client = TelemetryHttpClient(base_url=cfg.telemetry_url, timeout=cfg.telemetry_timeout)
    try:
        client.report(identify(cfg))
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 1
    logger.info("Reported device telemetry to %s", cfg.telemetry_url)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = apply_overrides(load_config(), args)

    level = (args.log_level or cfg.log_level).upper()
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=getattr(logging, level, logging.INFO),
            format="%(levelname)s [%(name)s] %(message)s",
        )

    command = args.command or "show"
    if command == "key":
        for candidate in candidate_keys(args.device, args.model):
            print(candidate)
        return 0
    if command == "serve":
        return _run_serve(cfg, args.host, args.port)
    if command == "report":
        return _run_report(cfg)

    info = identify(cfg)
    if getattr(args, "full", False):
        print(json.dumps(info.to_dict(), ensure_ascii=False))
    else:
        print(to_json(info))
    return 0


if __name__ == "__main__":
    sys.exit(main())
