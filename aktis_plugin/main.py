"""Example plugin entry point demonstrating the collector output contract."""

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

from .collectors.base import run_collection
from .collectors.example_collector import PLUGIN_NAME, PLUGIN_VERSION, ExampleCollector
from .config.loader import ConfigLoader
from .config.models import PluginConfig
from .config.settings import Settings
from .contract.codec import write_machine_readable
from .contract.render import render_banner, render_error, render_human_readable
from .errors import ConfigurationError
from .utils.environment import classify_environment
from .utils.logger import setup_logger

EXIT_OK = 0
EXIT_COLLECTION_FAILED = 1
EXIT_CONFIG_ERROR = 2


class ExamplePluginApp:
    """
    One invocation of the example plugin.

    Gathers once, builds a single envelope and emits it either as a JSON
    document (quiet mode) or as human-readable text.
    """

    def __init__(
        self,
        environment: str,
        config: PluginConfig,
        quiet: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the plugin application.

        Args:
            environment: Normalized runtime environment
            config: Validated plugin configuration
            quiet: If True, emit the machine-readable document only
            logger: Optional logger instance
        """
        self.environment = environment
        self.config = config
        self.quiet = quiet
        self.logger = logger or logging.getLogger(__name__)
        self.collector = ExampleCollector(config, self.logger)

    def run(self) -> int:
        """
        Execute one collection pass and write its output to stdout.

        Returns:
            int: Process exit status
        """
        source = self.collector.source_info(self.environment)
        started_at = datetime.now(timezone.utc)

        if not self.quiet:
            print(render_banner(source, started_at.astimezone()))

        envelope = run_collection(source, self.collector.collect, started_at, self.logger)

        if self.quiet:
            # A failure envelope still exits 0 in quiet mode; the host reads success from the document
            write_machine_readable(envelope, sys.stdout)
            return EXIT_OK

        if not envelope.success:
            print(render_error(envelope.error))
            return EXIT_COLLECTION_FAILED

        sys.stdout.write(render_human_readable(envelope))
        return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aktis-example-plugin",
        description="Example Aktis plugin demonstrating SDK usage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  dev/development   Development environment (default)
  prod/production   Production environment

Examples:
  # Development mode with CLI output
  aktis-example-plugin

  # Production mode
  aktis-example-plugin --mode prod

  # JSON output for aktis-collector
  aktis-example-plugin --quiet

  # With custom config
  aktis-example-plugin --config /path/to/config.yaml
        """
    )

    parser.add_argument(
        '--mode',
        default='dev',
        help="Environment mode: 'dev', 'development', 'prod', or 'production' (default: dev)"
    )

    parser.add_argument(
        '--config',
        default='',
        help='Path to YAML configuration file (default: built-in defaults)'
    )

    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress banner and emit a single JSON document for the collector host'
    )

    parser.add_argument(
        '--version',
        action='store_true',
        help='Show version information'
    )

    parser.add_argument(
        '--log-level',
        default=Settings().LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        type=str.upper,
        help='Logging level, written to stderr (default: WARNING or LOG_LEVEL env var)'
    )

    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and run the plugin once.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        int: Process exit status
    """
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"{PLUGIN_NAME} v{PLUGIN_VERSION}")
        return EXIT_OK

    logger = setup_logger("aktis_plugin", args.log_level)
    environment = classify_environment(args.mode)

    try:
        config = ConfigLoader.load(args.config)
    except ConfigurationError as e:
        logger.error(f"Failed to load configuration: {e}")
        print(render_error(str(e)), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    app = ExamplePluginApp(environment, config, quiet=args.quiet, logger=logger)
    return app.run()


def main():
    """CLI entry point."""
    sys.exit(run())


if __name__ == '__main__':
    main()
