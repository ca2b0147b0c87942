#!/usr/bin/env python3
"""
Ollama probe CLI.

Usage:
    python scripts/ollama_probe_cli.py info
    python scripts/ollama_probe_cli.py api
    python scripts/ollama_probe_cli.py diagnostics [--json]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging

from pydantic import ValidationError

from ollama_probe_backend.config import get_settings, reset_settings_cache
from ollama_probe_backend.models.system import SystemReport
from ollama_probe_backend.services.liveness import check_api_alive
from ollama_probe_backend.services.report import build_report


def yes_no(value: bool) -> str:
    return "yes" if value else "no"


def print_report(report: SystemReport) -> None:
    print("System")
    print("-" * 40)
    print(f"{'OS':<18} {report.os}")
    print(f"{'Architecture':<18} {report.arch}")
    print(f"{'Ollama installed':<18} {yes_no(report.ollama_installed)}")
    print(f"{'Ollama running':<18} {yes_no(report.ollama_running)}")


def cmd_info(args: argparse.Namespace) -> None:
    reset_settings_cache()
    report = build_report(settings=get_settings())
    if args.json:
        print(report.model_dump_json(indent=2))
        return
    print_report(report)


def cmd_api(args: argparse.Namespace) -> None:
    reset_settings_cache()
    settings = get_settings()
    alive = asyncio.run(check_api_alive(settings=settings))
    if args.json:
        print(json.dumps({"alive": alive, "url": settings.api_version_url}))
        return
    print(f"Ollama API ({settings.api_version_url}): {'reachable' if alive else 'unreachable'}")


def cmd_diagnostics(args: argparse.Namespace) -> None:
    reset_settings_cache()
    settings = get_settings()
    report = build_report(settings=settings)
    alive = asyncio.run(check_api_alive(settings=settings))
    if args.json:
        print(
            json.dumps(
                {
                    "config": settings.model_dump(mode="json"),
                    "system": report.model_dump(),
                    "api": {"alive": alive, "url": settings.api_version_url},
                },
                indent=2,
            )
        )
        return
    print("Configuration")
    print("-" * 40)
    print(f"Agent binary: {settings.agent_binary}")
    print(f"Agent process: {settings.agent_process}")
    print(f"API endpoint: {settings.api_version_url}")
    print(f"Command timeout: {settings.command_timeout or 'none'}")
    print()
    print_report(report)
    print()
    print(f"Ollama API reachable: {yes_no(alive)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ollama local diagnostics")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log probe commands and failures")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("info", "Show OS, architecture and whether Ollama is installed/running"),
        ("api", "Check whether the Ollama API answers"),
        ("diagnostics", "Show configuration, system report and API status"),
    ):
        command = sub.add_parser(name, help=help_text)
        command.add_argument("--json", action="store_true", help="Print JSON instead of text")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "info":
            cmd_info(args)
        elif args.command == "api":
            cmd_api(args)
        elif args.command == "diagnostics":
            cmd_diagnostics(args)
        else:
            parser.print_help()
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors())
        raise SystemExit(f"Invalid configuration: {problems}")


if __name__ == "__main__":
    main()
