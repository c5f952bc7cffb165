#!/usr/bin/env python3
"""
Entry points for the IRC server health probe

``handler`` serves scheduled function invocations; ``run`` is the
standalone process entry point.
"""

import asyncio
import logging
import sys

from .check.result import RunResult
from .config import CheckConfig, load_config
from .constants import EXIT_CHECK_FAILED, EXIT_CONFIG_ERROR, EXIT_SUCCESS, EXIT_TIMEOUT
from .errors.handling import log_error
from .errors.internal import ConfigError
from .logging_config import LoggerConfigurator
from .logs.logger import logger
from .runner import raise_for_result, run_check

_configured = False


def _configure_logging() -> None:
    global _configured  # pylint: disable=global-statement
    if not _configured:
        LoggerConfigurator().configure()
        _configured = True


def _execute(config: CheckConfig) -> RunResult:
    logger.log_event("app", "start", level=logging.DEBUG, server=config.server)
    result = asyncio.run(run_check(config))
    if result.ok:
        logger.log_event("app", "check_passed", level=logging.DEBUG, server=config.server)
    else:
        logger.log_event(
            "app", "check_failed", level=logging.ERROR, server=config.server, reason=result.reason
        )
    return result


def handler(event, context):  # noqa: ARG001 - invocation payload is unused
    """Scheduled function entry point.

    Returns None when the server passed. Raises CheckFailedError (or
    ConfigError) so the invoking runtime records a failed invocation.
    """
    _configure_logging()
    try:
        config = load_config()
    except ConfigError as e:
        log_error("Configuration error", e)
        raise
    raise_for_result(_execute(config))
    return None


def main() -> int:
    """Standalone entry point; returns the process exit code."""
    _configure_logging()
    try:
        config = load_config()
    except ConfigError as e:
        logger.log_event("app", "config_error", level=logging.ERROR, error=str(e))
        print(e)
        return EXIT_CONFIG_ERROR
    result = _execute(config)
    if result.ok:
        return EXIT_SUCCESS
    print(result.reason)
    return EXIT_TIMEOUT if result.timed_out else EXIT_CHECK_FAILED


def run() -> None:
    """Synchronous console entry point.

    Raises:
        SystemExit: always, carrying the check's exit code.
    """
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(EXIT_CHECK_FAILED)


if __name__ == "__main__":
    run()
