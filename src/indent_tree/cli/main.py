"""Main CLI entry point for the indent-tree command-line tool.

Loads a tree buffer from a file or stdin, runs one query or mutation over
it and prints the result. Mutations print the new buffer, or write it back
with ``--in-place``.
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from indent_tree import __version__
from indent_tree.shared import (
    ConfigError,
    IndentTreeConfig,
    configure_logging,
    get_logger,
)
from indent_tree.tree import (
    ChildrenMode,
    IndentTree,
    ReadMode,
    TreeError,
)

STDIN_SOURCE = "-"
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self) -> None:
        self.config = IndentTreeConfig()
        self.verbose = False
        self.quiet = False

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON file."""
        cli_config = cls()
        cli_config.config = IndentTreeConfig.from_json(
            config_path.read_text(encoding="utf-8")
        )
        return cli_config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CLIConfig":
        """Build configuration from a config file plus command-line overrides."""
        cli_config = cls.from_file(args.config) if args.config else cls()

        overrides: Dict[str, Any] = {}
        if args.unit is not None:
            overrides["tree__indent_unit"] = args.unit
        if args.indent_char is not None:
            overrides["tree__indent_char"] = "\t" if args.indent_char == "tab" else " "
        if args.strict:
            overrides["tree__strict"] = True
        if args.verbose:
            overrides["global___logging_level"] = "DEBUG"
        elif args.quiet:
            overrides["global___logging_level"] = "ERROR"
        if overrides:
            cli_config.config = cli_config.config.override(**overrides)

        cli_config.verbose = args.verbose
        cli_config.quiet = args.quiet
        return cli_config


def load_tree(source: str, cli_config: CLIConfig) -> IndentTree:
    """Read a tree buffer from ``source`` (a path, or ``-`` for stdin)."""
    if source == STDIN_SOURCE:
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    return IndentTree.from_text(text, cli_config.config.tree)


def write_tree(tree: IndentTree, args: argparse.Namespace) -> None:
    """Print the new buffer, or write it back to its source file."""
    text = tree.to_text()
    if args.in_place:
        if args.source == STDIN_SOURCE:
            raise ValueError("--in-place cannot be used with stdin input")
        Path(args.source).write_text(text + "\n" if text else "", encoding="utf-8")
    else:
        print(text)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="indent-tree",
        description="Query and edit trees stored as indented text"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--config", "-c", type=Path, help="JSON configuration file")
    parser.add_argument("--unit", "-u", type=int, help="Indentation unit (default: 2)")
    parser.add_argument(
        "--indent-char",
        choices=["space", "tab"],
        help="Indentation character (default: space)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject malformed indentation and out-of-range addresses"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Quiet output")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_command(name: str, help_text: str, with_address: bool = True) -> argparse.ArgumentParser:
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("source", help="Tree file, or - for stdin")
        if with_address:
            command.add_argument("address", type=int, help="Node address (0 is the root)")
        return command

    add_command("parent", "Print the parent address of a node")

    children_parser = add_command("children", "Print the child addresses of a node")
    children_parser.add_argument(
        "--all", "-a",
        action="store_true",
        help="Include all descendants, not only direct children"
    )

    add_command("leaf", "Print whether a node is a leaf")

    read_parser = add_command("read", "Print a node label or its dedented subtree")
    read_parser.add_argument(
        "--all", "-a",
        action="store_true",
        help="Include the node's descendants"
    )

    append_parser = add_command("append", "Append a node as the last child of a node")
    node_source = append_parser.add_mutually_exclusive_group(required=True)
    node_source.add_argument("--text", "-t", help="Node text (may contain newlines)")
    node_source.add_argument("--node-file", type=Path, help="File holding the node text")
    append_parser.add_argument("--in-place", "-i", action="store_true",
                               help="Write the result back to the source file")

    copy_parser = add_command("copy", "Copy a subtree under another node")
    copy_parser.add_argument("target", type=int, help="Address of the new parent")
    copy_parser.add_argument("--in-place", "-i", action="store_true",
                             help="Write the result back to the source file")

    walk_parser = add_command("walk", "Print every node in depth-first order",
                              with_address=False)
    walk_parser.add_argument("--address", type=int, help="Walk only this subtree")
    walk_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)"
    )

    validate_parser = add_command("validate", "Check the indentation invariant",
                                  with_address=False)
    validate_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)"
    )

    return parser


def format_walk(tree: IndentTree, address: Optional[int], format_type: str) -> str:
    """Format a depth-first walk for output."""
    records = [asdict(visit) for visit in tree.iter_depth_first(address)]
    if format_type == "json":
        return json.dumps(records, indent=2)

    lines = []
    for record in records:
        kind = "leaf" if record["is_leaf"] else "node"
        lines.append(
            f"{record['address']}\t{record['depth']}\t{record['sibling_index']}"
            f"\t{kind}\t{record['label']}"
        )
    return "\n".join(lines)


def format_validation(summary: Dict[str, Any], format_type: str) -> str:
    """Format a validation summary for output."""
    if format_type == "json":
        return json.dumps(summary, indent=2)

    lines = [
        f"Validated {summary['lines_validated']} lines: "
        f"{summary['error_count']} errors, {summary['warning_count']} warnings"
    ]
    for issue in summary["issues"]:
        lines.append(f"  line {issue['address']}: {issue['severity']}: {issue['message']}")
    return "\n".join(lines)


def _format_addresses(addresses: List[int]) -> str:
    return " ".join(str(address) for address in addresses)


def run_command(args: argparse.Namespace, cli_config: CLIConfig) -> int:
    """Execute a parsed command and return its exit code."""
    tree = load_tree(args.source, cli_config)

    if args.command == "parent":
        print(tree.parent_of(args.address))
    elif args.command == "children":
        mode = ChildrenMode.ALL_DESCENDANTS if args.all else ChildrenMode.DIRECT_ONLY
        print(_format_addresses(tree.children_of(args.address, mode)))
    elif args.command == "leaf":
        print("true" if tree.is_leaf(args.address) else "false")
    elif args.command == "read":
        mode = ReadMode.ALL_DESCENDANTS if args.all else ReadMode.SELF_ONLY
        print(tree.read_node(args.address, mode))
    elif args.command == "append":
        if args.node_file:
            node_text = args.node_file.read_text(encoding="utf-8")
        else:
            node_text = args.text
        write_tree(tree.append_child(args.address, node_text), args)
    elif args.command == "copy":
        write_tree(tree.copy_subtree(args.address, args.target), args)
    elif args.command == "walk":
        output = format_walk(tree, args.address, args.format)
        if output:
            print(output)
    elif args.command == "validate":
        result = tree.validate()
        print(format_validation(result.summary(), args.format))
        return EXIT_OK if result.success else EXIT_FAILURE
    else:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    try:
        cli_config = CLIConfig.from_args(args)
    except (ConfigError, OSError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(cli_config.config.global_.logging_level)
    logger = get_logger(__name__, cli_config.config.tree.correlation_id, "cli")

    try:
        return run_command(args, cli_config)
    except TreeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except (OSError, ValueError) as e:
        logger.debug("Command failed", extra={"command": args.command})
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
