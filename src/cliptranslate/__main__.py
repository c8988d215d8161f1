"""Main entry point for the ClipTranslate command-line interface."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import yaml
from rich.console import Console
from rich.table import Table

from . import __version__, paths
from .config import AppConfig, load_config, save_settings
from .errors import ClipTranslateError
from .languages import all_languages, get_language
from .logging_utils import setup_logging
from .models import ProviderId
from .templates import DEFAULT_CONFIG_YAML
from .workflow import Application, build_application, run_clipboard_loop, translate_once

logger = logging.getLogger(__name__)

_PROVIDER_CHOICES = [p.value for p in ProviderId]


def _add_pipeline_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--target",
        help="Language name or code to translate into. Saved to the configuration.",
    )
    parser.add_argument(
        "--provider",
        action="append",
        choices=_PROVIDER_CHOICES,
        help="Enable only this provider (repeatable). Saved to the configuration.",
    )
    parser.add_argument(
        "--source",
        help="Fixed source language code; skips language detection.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ClipTranslate CLI."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--debug", action="store_true", help="Enable debug level logging.")
    common.add_argument("--config", type=Path, help="Path to the configuration file.")

    parser = argparse.ArgumentParser(description="ClipTranslate: translate clipboard text with several providers.")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"ClipTranslate {__version__}",
        help="Show the version number and exit.",
    )

    # Options shared by every command are declared on the subcommands only,
    # so a subcommand default never overwrites a value given before it.
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    init_parser = subparsers.add_parser("init", help="Write a default configuration file.", parents=[common])
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing configuration.")

    run_parser = subparsers.add_parser("run", help="Translate clipboard changes until interrupted.", parents=[common])
    _add_pipeline_options(run_parser)

    translate_parser = subparsers.add_parser("translate", help="Translate a single text and exit.", parents=[common])
    translate_parser.add_argument("text", help="The text to translate.")
    _add_pipeline_options(translate_parser)

    subparsers.add_parser("languages", help="List the languages that can be translated into.", parents=[common])

    return parser


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments, printing help when none are given."""
    parser = _build_parser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        parser.print_help(sys.stderr)
        sys.exit(1)
    return parser.parse_args(argv)


def _init_config(config_path: Path, *, force: bool) -> None:
    """Write the default configuration file."""
    if config_path.exists() and not force:
        logger.warning("Configuration file already exists at: %s", config_path)
        return
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    except OSError:
        logger.exception("Failed to write the configuration file")
        sys.exit(1)
    logger.info("Created default configuration at: %s", config_path)


def _load_config(config_path: Path) -> AppConfig:
    """Load the configuration, or the defaults when the file does not exist yet."""
    if not config_path.is_file():
        logger.info("No configuration at %s; using defaults. Run 'cliptranslate init' to create one.", config_path)
        return AppConfig()
    logger.info("Loading configuration from: %s", config_path)
    return load_config(config_path)


def _apply_pipeline_options(args: argparse.Namespace, config: AppConfig, config_path: Path) -> AppConfig:
    """
    Apply --target and --provider, and persist them to an existing configuration file.

    Returns:
        The configuration to run with.

    """
    updates: dict[str, object] = {}
    target = None
    enabled: dict[ProviderId, bool] | None = None

    if args.target:
        target = get_language(args.target)
        updates["target_language"] = target.name

    if args.provider:
        chosen = {ProviderId(p) for p in args.provider}
        enabled = {pid: pid in chosen for pid in {*config.providers, *chosen}}
        providers = {pid: config.provider_settings(pid).model_copy(update={"enabled": flag}) for pid, flag in enabled.items()}
        updates["providers"] = providers

    if not updates:
        return config

    if config_path.is_file():
        save_settings(config_path, target_language=target, enabled=enabled)
    return config.model_copy(update=updates)


def _print_languages() -> None:
    table = Table(title="Languages")
    table.add_column("Name")
    table.add_column("Code")
    for language in all_languages():
        table.add_row(language.name, language.extension)
    Console().print(table)


def _run_pipeline(args: argparse.Namespace, config: AppConfig) -> None:
    app: Application = build_application(config, source_language=args.source)
    if args.command == "translate":
        result = asyncio.run(translate_once(app, args.text))
        if result is None or not result.translations:
            sys.exit(1)
        return

    try:
        asyncio.run(run_clipboard_loop(app))
    except KeyboardInterrupt:
        logger.info("Interrupted. Bye.")


def main(argv: list[str] | None = None) -> None:
    """
    Run the ClipTranslate command-line interface.

    1. Parses command-line arguments and sets up logging.
    2. Loads the configuration (defaults if there is no file).
    3. Runs the selected command.
    """
    args = _parse_args(argv)
    setup_logging(version=__version__, debug=args.debug)
    config_path = paths.get_config_file_path(args.config)

    try:
        if args.command == "init":
            _init_config(config_path, force=args.force)
            return

        if args.command == "languages":
            _print_languages()
            return

        config = _load_config(config_path)
        config = _apply_pipeline_options(args, config, config_path)
        _run_pipeline(args, config)
    except (ClipTranslateError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.critical("%s", e)
        sys.exit(1)
    except Exception:
        logger.exception("An unexpected error occurred")
        logger.critical("An unrecoverable error occurred. Please check the logs for details.")
        sys.exit(1)


if __name__ == "__main__":
    main()
