"""Command line interface.

Usage:
    sourcecheck [options] FILE...

Exit status is 1 when a file could not be read (or, with --strict, when any
incident was reported), 2 on usage errors, 0 otherwise.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

from sourcecheck import __version__
from sourcecheck.checker import CheckResult, check_file
from sourcecheck.config import CheckConfig, check_config_context, load_config
from sourcecheck.errors import ConfigError
from sourcecheck.report import Reporter
from sourcecheck.utils.logger import configure_cli_logging, get_logger

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sourcecheck",
        description=(
            "Check source files for tabs, CR/CRLF line endings, control "
            "characters, malformed UTF-8 and a missing final newline."
        ),
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="files to check")
    parser.add_argument(
        "-q",
        "--quiet",
        dest="announce",
        action="store_false",
        default=None,
        help="do not print 'Checking <file>' lines",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        default=None,
        help="print per-file incident counters",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        metavar="N",
        help="check N files concurrently",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        default=None,
        help="continue with remaining files after a read failure",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="exit with failure status when any incident is reported",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=None,
        metavar="BYTES",
        help="read block size",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="read settings from [tool.sourcecheck] in a TOML file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="debug logging to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def resolve_config(args: argparse.Namespace) -> CheckConfig:
    """Defaults, then the TOML file, then command-line flags."""
    base = load_config(args.config) if args.config else CheckConfig()
    return base.merged(
        announce=args.announce,
        summary=args.summary,
        jobs=args.jobs,
        keep_going=args.keep_going,
        strict=args.strict,
        chunk_size=args.chunk_size,
    )


def run_sequential(
    paths: Sequence[str], config: CheckConfig, reporter: Reporter
) -> list[CheckResult]:
    results = []
    for path in paths:
        reporter.announce(path)
        result = check_file(path, config=config, on_incident=reporter.incident)
        reporter.finish(result)
        results.append(result)
        if not result.ok and not config.keep_going:
            break
    return results


def run_parallel(
    paths: Sequence[str], config: CheckConfig, reporter: Reporter
) -> list[CheckResult]:
    """Check files on a thread pool; output stays in argument order."""
    logger.debug("Checking %d file(s) with %d worker(s)", len(paths), config.jobs)
    results = []
    with ThreadPoolExecutor(max_workers=config.jobs) as pool:
        futures = [pool.submit(check_file, path, config=config) for path in paths]
        for future in futures:
            result = future.result()
            reporter.emit_result(result)
            results.append(result)
            if not result.ok and not config.keep_going:
                for pending in futures:
                    pending.cancel()
                break
    return results


def run(paths: Sequence[str], config: CheckConfig, reporter: Reporter) -> int:
    """Check every path and compute the exit status."""
    if config.jobs > 1 and len(paths) > 1:
        results = run_parallel(paths, config, reporter)
    else:
        results = run_sequential(paths, config, reporter)

    if any(not result.ok for result in results):
        return EXIT_FAILURE
    if config.strict and any(result.incidents for result in results):
        return EXIT_FAILURE
    return EXIT_SUCCESS


def tolerate_undecodable_names(*streams: TextIO) -> None:
    """Let undecodable file names from argv pass through to the output.

    POSIX names that are not valid in the locale encoding arrive as
    surrogate-escaped str; surrogateescape writes their original bytes back.
    """
    for stream in streams:
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = resolve_config(args)
    except ConfigError as e:
        parser.error(str(e))

    tolerate_undecodable_names(sys.stdout, sys.stderr)
    handler = configure_cli_logging(args.verbose)
    try:
        with check_config_context(config):
            return run(args.files, config, Reporter(config=config))
    finally:
        logging.getLogger("sourcecheck").removeHandler(handler)


if __name__ == "__main__":
    raise SystemExit(main())
