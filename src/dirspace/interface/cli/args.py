from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (global flags plus the 'serve', 'shell'
and 'run' subcommands) and translates parsed namespaces into configuration
overrides.
"""

import argparse
from typing import Any, Dict

from dirspace.utils.i18n import i18n

# Sentinel for '--remote' given without a URL: use the configured api_url
USE_CONFIGURED_URL = ""

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirspace CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirspace",
        description=i18n.t("app.description"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save"))

    sub = p.add_subparsers(dest="command")

    # --- HTTP Service ---
    serve = sub.add_parser("serve", help=i18n.t("cli.args.serve"))
    serve.add_argument("--host", default=None, help=i18n.t("cli.args.host"))
    serve.add_argument("--port", type=int, default=None, help=i18n.t("cli.args.port"))

    # --- Command Frontends ---
    shell = sub.add_parser("shell", help=i18n.t("cli.args.shell"))
    _add_remote_arguments(shell)

    run = sub.add_parser("run", help=i18n.t("cli.args.run"))
    run.add_argument("script", help=i18n.t("cli.args.script"))
    run.add_argument("--strict", action="store_true", help=i18n.t("cli.args.strict"))
    _add_remote_arguments(run)

    return p


def _add_remote_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--remote",
        nargs="?",
        const=USE_CONFIGURED_URL,
        default=None,
        metavar="URL",
        help=i18n.t("cli.args.remote"),
    )
    parser.add_argument("--timeout", type=float, default=None, help=i18n.t("cli.args.timeout"))

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only values the user actually supplied appear in the result.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.log_file:
        overrides["log_to_file"] = True

    if getattr(args, "host", None):
        overrides["host"] = args.host
    if getattr(args, "port", None) is not None:
        overrides["port"] = args.port

    remote = getattr(args, "remote", None)
    if remote:
        overrides["api_url"] = remote
    if getattr(args, "timeout", None) is not None:
        overrides["request_timeout"] = args.timeout

    return overrides


def wants_remote(args: argparse.Namespace) -> bool:
    """Check whether the frontend should talk to the HTTP API."""
    return getattr(args, "remote", None) is not None
