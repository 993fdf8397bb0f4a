"""CLI entry point for the update bot configuration tool."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import aiohttp
from pydantic import ValidationError

from renovate_config.defaults import DEFAULT_DEFINITION
from renovate_config.loader import load_config_definition
from renovate_config.models.config import RenovateConfig
from renovate_config.models.definition import ConfigDefinition
from renovate_config.models.result import VerificationResult
from renovate_config.platforms.base import AuthenticationError
from renovate_config.platforms.loading import (
    PlatformNotFoundError,
    load_platform_manifest,
)
from renovate_config.render import render_js_module, render_json
from renovate_config.secrets import MissingSecretError, resolve_config

STATUS_SYMBOLS = {
    True: "✅",
    False: "❌",
}


def load_definition(config_path: Path | None) -> ConfigDefinition:
    """Load a definition file, or return the default definition."""
    if config_path is None:
        return DEFAULT_DEFINITION
    return load_config_definition(config_path)


def log_config_summary(log: logging.Logger, config: RenovateConfig) -> None:
    """Log a summary of a resolved record without secret values."""
    log.info("=" * 80)
    log.info("Configuration Summary:")
    log.info("=" * 80)
    log.info("Platform: %s", config.platform)
    log.info("Endpoint: %s", config.endpoint)
    for rule in config.host_rules:
        log.info(
            "Host rule: %s %s (username=%s)",
            rule.host_type,
            rule.match_host,
            rule.username,
        )
    for repository in config.repositories:
        log.info("Repository: %s", repository)


def log_verification_summary(
    log: logging.Logger, result: VerificationResult
) -> None:
    """Log per-repository verification outcome."""
    log.info("=" * 80)
    log.info("Verification Summary (account=%s):", result.account)
    log.info("=" * 80)
    for repository in result.accessible:
        log.info("%s %s", STATUS_SYMBOLS[True], repository)
    for repository in result.inaccessible:
        log.info("%s %s", STATUS_SYMBOLS[False], repository)


def format_report(config: RenovateConfig) -> dict[str, Any]:
    """Format a resolved record for the JSON report."""
    return {
        "platform": config.platform,
        "endpoint": config.endpoint,
        "host_rules": [
            {
                "host_type": rule.host_type,
                "match_host": rule.match_host,
                "username": rule.username,
            }
            for rule in config.host_rules
        ],
        "repositories": list(config.repositories),
    }


def format_verification(result: VerificationResult) -> dict[str, Any]:
    """Format a verification result for JSON output."""
    return {
        "ok": result.ok,
        "account": result.account,
        "accessible": list(result.accessible),
        "inaccessible": list(result.inaccessible),
    }


def run_render(
    definition: ConfigDefinition,
    output_format: str,
    environ: Mapping[str, str],
    *,
    reveal_secrets: bool = False,
) -> int:
    """Render a definition and return exit code."""
    log = logging.getLogger("renovate_config")

    if output_format == "js":
        sys.stdout.write(render_js_module(definition))
        return 0

    try:
        config = resolve_config(definition, environ)
    except MissingSecretError as e:
        log.error("%s", e)
        return 1

    sys.stdout.write(render_json(config, reveal_secrets=reveal_secrets))
    return 0


def run_check(definition: ConfigDefinition, environ: Mapping[str, str]) -> int:
    """Resolve and validate a definition and return exit code."""
    log = logging.getLogger("renovate_config")

    log.info("Resolving secrets: %s", ", ".join(definition.secret_names()))
    try:
        config = resolve_config(definition, environ)
    except (MissingSecretError, ValidationError) as e:
        log.error("Invalid configuration: %s", e)
        return 1

    log_config_summary(log, config)
    print(json.dumps(format_report(config), indent=2))
    return 0


async def run_verify(definition: ConfigDefinition, environ: Mapping[str, str]) -> int:
    """Verify a record's token against its forge and return exit code."""
    log = logging.getLogger("renovate_config")

    try:
        config = resolve_config(definition, environ)
    except (MissingSecretError, ValidationError) as e:
        log.error("Invalid configuration: %s", e)
        return 1

    log.info("Loading platform: %s", config.platform)
    try:
        manifest = load_platform_manifest(config.platform)
    except PlatformNotFoundError as e:
        log.error("%s", e)
        return 1

    log.info("Verifying token against %s", config.endpoint)
    try:
        async with manifest.client_factory(config) as client:
            result = await client.check(config)
    except (AuthenticationError, RuntimeError, aiohttp.ClientError) as e:
        log.error("%s", e)
        return 1

    log_verification_summary(log, result)
    print(json.dumps(format_verification(result), indent=2))

    return 0 if result.ok else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Build, check and verify update bot configuration"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render", help="Render the configuration for the update bot"
    )
    render_parser.add_argument(
        "--format",
        choices=("js", "json"),
        default="js",
        help="js keeps secrets as environment lookups, json resolves them",
    )
    render_parser.add_argument(
        "--reveal-secrets",
        action="store_true",
        help="Write resolved secret values instead of a mask (json only)",
    )

    subparsers.add_parser("check", help="Resolve and validate the configuration")
    subparsers.add_parser("verify", help="Verify the token against the forge API")

    for subparser in subparsers.choices.values():
        subparser.add_argument(
            "--config",
            type=Path,
            default=None,
            help="Path to a YAML definition (default: built-in definition)",
        )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    log = logging.getLogger("renovate_config")
    try:
        definition = load_definition(args.config)
    except (FileNotFoundError, ValueError) as e:
        log.error("%s", e)
        sys.exit(1)

    if args.command == "render":
        exit_code = run_render(
            definition, args.format, os.environ, reveal_secrets=args.reveal_secrets
        )
    elif args.command == "check":
        exit_code = run_check(definition, os.environ)
    else:
        exit_code = asyncio.run(run_verify(definition, os.environ))

    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
