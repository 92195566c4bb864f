"""
Resource Code Generator - Main Entry Point

Usage:
    python -m resx_codegen --resx Strings.resx --output SR.cs --assembly-name System.Net
    python -m resx_codegen --config resgen.yaml --debug-only
"""

import argparse
import logging
import sys
from typing import List, Optional

from resx_codegen.exceptions import ConfigurationException
from resx_codegen.generator import GeneratorConfig, ResourceCodeGenerator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_GENERATION_FAILED = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resx-codegen",
        description="Generate the SR resource accessor class from a .resx file",
    )

    parser.add_argument("--resx", dest="resx_file_path", help="Input .resx file")
    parser.add_argument(
        "--output",
        dest="output_source_file_path",
        help="Generated source file (.vb selects Visual Basic, anything else C#)",
    )
    parser.add_argument(
        "--assembly-name", dest="assembly_name", help="Assembly the resources belong to"
    )
    parser.add_argument(
        "--debug-only",
        dest="debug_only",
        action="store_true",
        default=None,
        help="Only emit properties with embedded values, without #if blocks",
    )
    parser.add_argument("--config", type=str, help="YAML or JSON configuration file")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level",
    )
    return parser


def load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the config file (if any) with explicit command line values."""
    data = {}
    if args.config:
        for key, value in GeneratorConfig.load_mapping(args.config).items():
            data[GeneratorConfig.KEY_ALIASES.get(key, key)] = value

    for key in ("resx_file_path", "output_source_file_path", "assembly_name", "debug_only"):
        value = getattr(args, key)
        if value is not None:
            data[key] = value

    return GeneratorConfig.from_dict(data)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the resource code generator."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        config = load_config(args)
    except ConfigurationException as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    result = ResourceCodeGenerator(config).run()
    return EXIT_OK if result.success else EXIT_GENERATION_FAILED


if __name__ == "__main__":
    sys.exit(main())
