import logging
import os
from argparse import ArgumentParser, Namespace as ArgNamespace
from typing import List, Optional

from dotenv import load_dotenv

from rss_notes.models import AppConfig, AppEnvSettings


def create_argument_parser() -> ArgumentParser:
    """
    Create the command line parser.
    """
    parser = ArgumentParser(
        prog="rss-notes",
        description="Keep a vault of markdown notes in sync with RSS/Atom feeds.",
    )
    parser.add_argument(
        "-v", "--vault-dir",
        type=str,
        help="The directory of the vault.",
    )
    parser.add_argument(
        "-r", "--root-folder",
        type=str,
        help="The vault folder holding the index notes and the feed folders.",
    )
    parser.add_argument(
        "-i", "--refresh-minutes",
        type=int,
        help="The number of minutes between updates in watch mode.",
    )
    parser.add_argument(
        "-t", "--request-timeout",
        type=float,
        help="The HTTP timeout in seconds when fetching feeds.",
    )
    parser.add_argument(
        "-l", "--log-level",
        type=str,
        help="The logging level, e.g. DEBUG or INFO.",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("update", help="Update all feeds once.")
    commands.add_parser("watch", help="Update all feeds now and then on every refresh interval.")
    add_command = commands.add_parser("add", help="Register a feed and update it.")
    add_command.add_argument("url", type=str, help="The URL of the feed.")
    return parser


def parse_cli_arguments(argv: Optional[List[str]] = None) -> ArgNamespace:
    """
    Parse the command line arguments.
    """
    return create_argument_parser().parse_args(argv)


def load_config(cli_args: ArgNamespace) -> AppConfig:
    """
    Load the configuration. Command line arguments take precedence over the
    environment and the `.env` file.
    """
    load_dotenv()
    env_settings = AppEnvSettings()

    vault_dir = cli_args.vault_dir or env_settings.vault_dir
    if vault_dir is None:
        raise ValueError("No vault directory provided.")
    if not os.path.isdir(vault_dir):
        raise ValueError(f"Vault directory \"{vault_dir}\" does not exist.")

    refresh_minutes = cli_args.refresh_minutes
    if refresh_minutes is None:
        refresh_minutes = env_settings.refresh_minutes
    if refresh_minutes <= 0:
        raise ValueError("The refresh interval must be a positive number of minutes.")

    request_timeout = cli_args.request_timeout
    if request_timeout is None:
        request_timeout = env_settings.request_timeout
    if request_timeout is not None and request_timeout <= 0:
        raise ValueError("The request timeout must be a positive number of seconds.")

    log_level = (cli_args.log_level or env_settings.log_level).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level \"{log_level}\".")

    return AppConfig(
        vault_dir=vault_dir,
        root_folder=(cli_args.root_folder or env_settings.root_folder).strip("/"),
        refresh_minutes=refresh_minutes,
        request_timeout=request_timeout,
        log_level=log_level,
    )
