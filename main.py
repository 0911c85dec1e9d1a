import argparse
import logging
import shutil
import sys
from datetime import date
from typing import List, Optional

"""
bankpull - Main Entry Point

This script is the command-line interface for bankpull. It reads the fetch
configuration, works out the fetch window from the run cache, retrieves every
configured account through the external downloader tool and records the run.

Usage:
    python main.py <config.yaml>               # Fetch full history
    python main.py <config.yaml> <cache.yaml>  # Fetch since the last recorded run
    python main.py <config.yaml> --debug       # Verbose logging

Exit status is 1 on a usage error, when the downloader tool is not installed,
or when the configuration is rejected. Accounts that simply have no new
transactions are logged and do not change the exit status.
"""
from bankpull.cache import RunCache
from bankpull.config import FetchConfig, Settings, settings
from bankpull.engine import RunEngine
from bankpull.errors import ConfigurationError
from bankpull.logger import setup_logging


class ArgumentParser(argparse.ArgumentParser):
    """argparse with exit status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="bankpull - incremental bank export fetcher")
    parser.add_argument("config", help="Path to the YAML fetch configuration")
    parser.add_argument("cache", nargs="?", default=None, help="Path to the run cache file")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def run(config_path: str, cache_path: Optional[str], config: Settings, logger: logging.Logger) -> int:
    try:
        fetch_config = FetchConfig.load(config_path)
        config = config.with_fetch_config(fetch_config)
        cache = RunCache(cache_path)
        from_date = cache.load()
        engine = RunEngine.build(fetch_config, config=config, logger=logger)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    logger.info("Output directory: %s", config.transactions_path.resolve())
    if from_date:
        logger.info("Fetching transactions since %s", from_date.isoformat())
    else:
        logger.info("No previous run recorded; fetching full history")

    try:
        results = engine.fetch(from_date, None)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    cache.save(date.today())

    failed = [r for r in results if not r.ok]
    logger.info("Fetched %d of %d accounts", len(results) - len(failed), len(results))
    return 0


def main(argv: Optional[List[str]] = None, config: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)

    if config is None:
        config = settings
    if args.debug:
        config = config.model_copy(update={"debug": True})

    logger = setup_logging(config)

    if shutil.which(config.downloader_tool) is None:
        logger.error("Downloader tool '%s' not found on PATH", config.downloader_tool)
        return 1

    return run(args.config, args.cache, config, logger)


if __name__ == "__main__":
    sys.exit(main())
