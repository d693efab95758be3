"""
Entry point for the Kafka Connect exporter.

Usage:
    python -m kafka_connect_exporter --scrape-uri http://kafka-connect:8083
    python -m kafka_connect_exporter --help
"""

import argparse
import sys

from .config import ConfigError, ExporterConfig
from .const import APP_NAME, APP_URL, APP_VERSION
from .logging import get_logger, setup_logging
from .server import serve

logger = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kafka-connect-exporter",
        description="Prometheus exporter for Kafka Connect connector and task state",
    )

    parser.add_argument(
        "--scrape-uri",
        metavar="URI",
        help="URI on which to scrape kafka connect (env: KAFKA_CONNECT_URL, default: http://127.0.0.1:8080)",
    )
    parser.add_argument(
        "--listen-address",
        metavar="ADDR",
        help="Address on which to expose metrics (env: LISTEN_ADDRESS, default: :8080)",
    )
    parser.add_argument(
        "--telemetry-path",
        metavar="PATH",
        help="Path under which to expose metrics (env: TELEMETRY_PATH, default: /metrics)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Timeout of each request to kafka connect (env: SCRAPE_TIMEOUT, default: 3)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Log level (env: LOG_LEVEL, default: info)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write logs to file (env: LOG_FILE)",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="show version and exit",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"{APP_NAME}\n url: {APP_URL}\n version: {APP_VERSION}")
        return 2

    try:
        config = ExporterConfig.from_env(
            scrape_uri=args.scrape_uri,
            listen_address=args.listen_address,
            telemetry_path=args.telemetry_path,
            timeout=args.timeout,
            log_level=args.log_level,
            log_file=args.log_file,
        )
        setup_logging(config.log_level, config.log_file)
        config.validate()
    except ConfigError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        return 1

    logger.info(f"Starting {APP_NAME}")

    try:
        serve(config)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except OSError as e:
        logger.error(f"Can't listen on {config.listen_address}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
