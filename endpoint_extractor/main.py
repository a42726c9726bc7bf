#!/usr/bin/env python3
"""Endpoint Extractor — mine HTTP request events out of game client logs."""

import argparse
import logging
import sys

import yaml

from endpoint_extractor.config import Config, load_config, load_yaml_config
from endpoint_extractor.errors import ExtractorError, SourceNotFound
from endpoint_extractor.reader import list_log_files, locate_log_dir
from endpoint_extractor.scanner import scan_directory
from endpoint_extractor.writer import write_output

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [EXTRACTOR] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="endpoint-extractor",
        description="Extract HTTP endpoints and the client version from log files.",
    )
    parser.add_argument(
        "--log-dir", default=None,
        help="Directory of log files (default: %%LOCALAPPDATA%%/VALORANT/Saved/Logs)",
    )
    parser.add_argument(
        "--output-dir", default=None,
        help="Directory for output_<version>.json (default: current directory)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--lenient", action="store_true",
        help="Skip malformed records with a warning instead of aborting",
    )
    parser.add_argument(
        "--workers", type=int, default=None,
        help="Scan files on N threads (default: 1)",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="Logging level (default: INFO)",
    )
    return parser


def run(config: Config) -> str:
    """Scan the configured log directory and write the output document."""
    log_dir = locate_log_dir(config.log_dir)
    paths = list_log_files(log_dir)
    result = scan_directory(
        paths,
        strict=config.strict,
        workers=config.workers,
        encoding=config.encoding,
    )
    return write_output(result, config.output_dir)


def main(argv=None) -> int:
    parser = build_cli_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args, load_yaml_config(args.config))
        logging.getLogger().setLevel(config.log_level)
    except (ValueError, OSError, yaml.YAMLError) as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    try:
        run(config)
    except SourceNotFound as e:
        logger.error("Logs directory not found, exiting (%s)", e)
        return 1
    except ExtractorError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
