#!/usr/bin/env python3
"""
Write the public SSH keys of GitHub organization team members to an
authorized_keys file.

Configuration is accepted via the following environment variables:

    GITHUB_ACCESS_TOKEN - access token with read access to the organization
    GITHUB_ORGANIZATION - organization to take the users from

    Optional:
    GITHUB_TEAMS - comma-separated team names, all teams when empty
    AUTHORIZED_KEYS_FILE - output path (default=$HOME/.ssh/authorized_keys)
    AUTHORIZED_KEYS_FILE_MODE - octal mode of a newly created file (default=600)
    GITHUB_API_URL - API base URL (default=https://api.github.com)
    TEAMKEYS_STRICT - stop on the first API or write error (default=false)
    TEAMKEYS_LOG_LEVELS - logger:level pairs (default=".:info")

"""
import argparse
import sys
import typing

from . import __version__, cfg, github, sync
from .log import enable_debug, log

EXIT_CONFIG_ERROR = 1
EXIT_ABORTED = 86


class CustomHelpFormatter(
    argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter
):
    ...


def main(sysargs: typing.List[str] = sys.argv[:]) -> int:
    parser = argparse.ArgumentParser(
        prog="teamkeys",
        description=__doc__,
        formatter_class=CustomHelpFormatter,
    )
    parser.add_argument(
        "--version", action="store_true", help="print the version and exit"
    )
    parser.add_argument(
        "-D",
        "--debug",
        action="store_true",
        default=False,
        help="enable debug logging",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="stop on the first API or write error instead of writing partial "
        + "results (overrides TEAMKEYS_STRICT)",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        default=False,
        help="print the authorized keys instead of writing the file",
    )

    known_args = parser.parse_args(sysargs[1:])

    if known_args.version:
        print(f"teamkeys {__version__}")
        return 0

    if known_args.debug:
        enable_debug()

    try:
        config = cfg.load(strict=known_args.strict)
    except cfg.ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    log.debug("loaded config", extra=dict(config=config))

    try:
        sync.sync_authorized_keys(config, dry_run=known_args.dry_run)
    except (github.DirectoryError, OSError) as exc:
        log.error("sync aborted", extra=dict(err=str(exc)))
        return EXIT_ABORTED

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
