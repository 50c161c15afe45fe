from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration resolution
(defaults, saved file, environment, CLI overrides), logging bootstrap, and
routing to the HTTP server, the interactive shell or the script runner.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, TextIO

from dirspace.core.commands.dispatcher import CommandDispatcher, render_transcript
from dirspace.core.namespace.base import NamespaceBackend
from dirspace.core.namespace.engine import NamespaceEngine
from dirspace.domain.config import (
    apply_env_overrides,
    get_config_path,
    get_default_config,
    load_config,
    save_config,
    validate_config,
)
from dirspace.infra.fs import read_script_lines
from dirspace.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from dirspace.infra.network import DirectoryApiClient, NamespaceClientError
from dirspace.interface.cli import args as cli_args
from dirspace.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_COMMANDS = ("EXIT", "QUIT")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad input, 130 interrupt).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(apply_env_overrides(base_conf), cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_file = args.log_file or (get_default_log_path() if conf["log_to_file"] else None)
    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=log_file))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        if not save_config(conf):
            print(i18n.t("cli.errors.config_not_saved", path=get_config_path()), file=sys.stderr)
            return 1
        print(i18n.t("cli.status.config_saved", path=get_config_path()))
        return 0

    if not args.command:
        print(i18n.t("cli.errors.no_command"), file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2

    # 3. Route to the requested frontend
    try:
        if args.command == "serve":
            return _serve(conf)
        if args.command == "shell":
            backend = _build_backend(args, conf)
            try:
                return run_shell(backend, sys.stdin, sys.stdout)
            finally:
                backend.close()
        return _run_script(args, conf)
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted"), file=sys.stderr)
        return 130

# -----------------------------------------------------------------------------
# SUBCOMMANDS
# -----------------------------------------------------------------------------

def _serve(conf: Dict[str, Any]) -> int:
    # uvicorn is only needed for this subcommand
    from dirspace.interface.http.server import run_server

    run_server(conf["host"], conf["port"], log_level=conf["log_level"])
    return 0


def run_shell(backend: NamespaceBackend, stdin: TextIO, stdout: TextIO) -> int:
    """
    Run an interactive command session until EXIT, QUIT or end of input.

    Args:
        backend: Namespace the commands are applied to.
        stdin: Source of command lines.
        stdout: Destination for listings and failure messages.

    Returns:
        int: Always 0; individual command failures do not end the session.
    """
    dispatcher = CommandDispatcher(backend)
    interactive = stdin.isatty()

    if interactive:
        print(i18n.t("cli.status.shell_banner", backend=_describe_backend(backend)), file=stdout)

    while True:
        if interactive:
            stdout.write("> ")
            stdout.flush()

        line = stdin.readline()
        if not line:
            break
        if line.strip().upper() in EXIT_COMMANDS:
            break

        try:
            outcome = dispatcher.run_line(line)
        except NamespaceClientError as e:
            print(i18n.t("cli.errors.remote_failure", error=str(e)), file=sys.stderr)
            continue

        if outcome is None:
            continue
        if outcome.output:
            print(outcome.output, file=stdout)
        elif outcome.error:
            print(outcome.error, file=stdout)

    if interactive:
        print(i18n.t("cli.status.bye"), file=stdout)
    return 0


def _run_script(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    try:
        lines = read_script_lines(args.script)
    except OSError as e:
        msg = i18n.t("cli.errors.script_unreadable", path=args.script, error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    backend = _build_backend(args, conf)
    try:
        outcomes = CommandDispatcher(backend).run_script(lines)
    except NamespaceClientError as e:
        print(f"ERROR: {i18n.t('cli.errors.remote_failure', error=str(e))}", file=sys.stderr)
        return 1
    finally:
        backend.close()

    transcript = render_transcript(outcomes)
    if transcript:
        print(transcript)

    failed = sum(1 for o in outcomes if not o.ok)
    logger.debug(f"Script finished: {len(outcomes)} commands, {failed} failed")
    return 1 if args.strict and failed else 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _build_backend(args: argparse.Namespace, conf: Dict[str, Any]) -> NamespaceBackend:
    if cli_args.wants_remote(args):
        return DirectoryApiClient(conf["api_url"], timeout=conf["request_timeout"])
    return NamespaceEngine()


def _describe_backend(backend: NamespaceBackend) -> str:
    if isinstance(backend, DirectoryApiClient):
        return i18n.t("cli.status.backend_remote", url=backend.url)
    return i18n.t("cli.status.backend_local")


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only keys known to the base are merged; None values are skipped.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
