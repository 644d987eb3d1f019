"""
Entry helper shared by the example modules.

Each example owns its ``main()``; this module only parses the common
command line options, configures logging and prints the example's output.
"""
import argparse
import os
import sys
from typing import Callable, List, Optional

from vehicle_patterns.cli.formatters import format_output
from vehicle_patterns.config.manager import ConfigurationManager
from vehicle_patterns.config.schemas import VALID_LOG_LEVELS, VALID_OUTPUT_FORMATS
from vehicle_patterns.domain.exceptions import PatternError
from vehicle_patterns.helpers.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(description: str, argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line options every example accepts."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]),
        description=description,
    )
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument("--log-level", choices=VALID_LOG_LEVELS, help="Set logging level")
    parser.add_argument("--format", choices=VALID_OUTPUT_FORMATS, help="Output format")
    parser.add_argument("--quiet", action="store_true", help="Run the example without printing its output")
    return parser.parse_args(argv)


def run_example(
    demo: Callable[[], List[str]],
    description: str,
    argv: Optional[List[str]] = None,
) -> int:
    """
    Run one example program.

    Args:
        demo: Callable returning the lines the example prints
        description: Title shown in --help and in formatted output
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        Process exit status
    """
    args = parse_args(description, argv)

    try:
        app_config = ConfigurationManager(args.config).get_app_config()
        logging_config = app_config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        setup_logging(logging_config)

        lines = demo()
    except PatternError as e:
        logger.error("Example failed", example=description, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        output_format = args.format or app_config.output_format
        print(format_output(lines, app_config.title or description, output_format))
    return 0
