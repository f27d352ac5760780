#!/usr/bin/env python3
"""
Design Pattern Catalogue.

This script lets you browse the catalogue of design patterns:
1. List the patterns, optionally by category
2. Show the prose describing a pattern
3. Run the worked example of one pattern or of all of them

Usage:
    python main.py                      # interactive menu
    python main.py list --category structural
    python main.py show "abstract factory"
    python main.py run flyweight -v
    python main.py run-all --category behavioural
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from catalogue import Catalogue, CatalogueConfig, Category, configure_logging

PROJECT_ROOT = Path(__file__).parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "catalogue.yaml"


def load_config(path: Optional[str] = None) -> CatalogueConfig:
    """Load the catalogue configuration.

    The file given on the command line wins over CATALOGUE_CONFIG, which
    wins over config/catalogue.yaml. Environment overrides apply last.

    Args:
        path: Explicit path to a YAML configuration file

    Returns:
        The effective configuration

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist
    """
    explicit = path or os.getenv("CATALOGUE_CONFIG")
    if explicit:
        config = CatalogueConfig.from_yaml(explicit)
    elif DEFAULT_CONFIG_PATH.exists():
        config = CatalogueConfig.from_yaml(DEFAULT_CONFIG_PATH)
    else:
        config = CatalogueConfig()
    return config.with_env_overrides()


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="catalogue",
        description="Browse and run a catalogue of design patterns.",
    )
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--log-level", help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List the patterns")
    list_parser.add_argument("--category", help="Only list this category")

    show_parser = subparsers.add_parser("show", help="Describe a pattern")
    show_parser.add_argument("pattern", help='Pattern name, e.g. "abstract factory"')

    run_parser = subparsers.add_parser("run", help="Run the example of a pattern")
    run_parser.add_argument("pattern", help="Pattern name")
    run_parser.add_argument("-v", "--verbose", action="store_true", help="Print every step")

    run_all_parser = subparsers.add_parser("run-all", help="Run every example")
    run_all_parser.add_argument("--category", help="Only run this category")
    run_all_parser.add_argument("-v", "--verbose", action="store_true", help="Print every step")

    return parser


def print_patterns(catalogue: Catalogue, category: Optional[str] = None) -> None:
    """Print pattern names grouped by category.

    Raises:
        ValueError: If the category is unknown
    """
    wanted = Category.parse(category).value if category else None
    for group, names in catalogue.summary().items():
        if wanted is not None and group != wanted:
            continue
        print(f"\n{group.title()} patterns:")
        for name in names:
            definition = catalogue.get_definition(name)
            print(f"  {name:<26} {definition.summary}")


def print_result(name: str, result: dict) -> None:
    print(f"\n{'─' * 40}")
    print(f"{name}:")
    print(f"{'─' * 40}")
    print(json.dumps(result, indent=2, default=str))


def interactive(catalogue: Catalogue, verbose: bool) -> int:
    """Menu driven browsing, used when no command is given."""
    print("=" * 60)
    print("Design Pattern Catalogue")
    print("=" * 60)

    while True:
        print("\nAvailable actions:")
        print("1. List patterns")
        print("2. Show a pattern")
        print("3. Run a pattern")
        print("4. Run all patterns")
        print("q. Quit")

        choice = input("\nSelect action (1/2/3/4/q): ").strip().lower()

        try:
            if choice == "1":
                print_patterns(catalogue)
            elif choice == "2":
                name = input("Pattern name: ").strip()
                print(catalogue.describe(name))
            elif choice == "3":
                name = input("Pattern name: ").strip()
                print_result(name, catalogue.run(name, verbose=True))
            elif choice == "4":
                for name, result in catalogue.run_all(verbose=verbose).items():
                    print_result(name, result)
            elif choice in ("q", "quit", "exit"):
                print("Goodbye!")
                return 0
            else:
                print("Invalid choice. Please select 1, 2, 3, 4, or q.")
        except ValueError as e:
            print(f"\nError: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        configure_logging(
            level=args.log_level or config.log_level,
            log_file=config.log_file,
            json_format=config.json_logs,
            use_colors=config.use_colors,
        )
        catalogue = Catalogue(config=config)
        verbose = getattr(args, "verbose", False) or config.verbose

        if args.command is None:
            return interactive(catalogue, verbose)
        if args.command == "list":
            print_patterns(catalogue, args.category)
        elif args.command == "show":
            print(catalogue.describe(args.pattern))
        elif args.command == "run":
            print_result(args.pattern, catalogue.run(args.pattern, verbose=verbose))
        elif args.command == "run-all":
            for name, result in catalogue.run_all(args.category, verbose=verbose).items():
                print_result(name, result)
    except (KeyboardInterrupt, EOFError):
        print("\n\nInterrupted by user.")
        return 0
    except (ValueError, RuntimeError, OSError, KeyError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
