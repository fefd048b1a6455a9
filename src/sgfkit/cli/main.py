# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the sgfkit command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from sgfkit.compiler.build import parse_file, serialize_file
from sgfkit.compiler.serializer import serialize
from sgfkit.config import SgfConfig, find_config, load_config
from sgfkit.errors import SgfError
from sgfkit.model.tree import GameTree
from sgfkit.validation.checks import validate

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the sgfkit CLI."""
    parser = argparse.ArgumentParser(
        prog="sgfkit",
        description="sgfkit: parse, check and format SGF game records",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    config_parent = argparse.ArgumentParser(add_help=False)
    config_parent.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: nearest .sgfkit.yaml upward from the current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        parents=[config_parent],
        help="Parse SGF files and check the FF[4] node rules",
        description="Parse each file and report value errors and node rule violations.",
    )
    check_parser.add_argument("files", nargs="+", type=Path, metavar="FILE", help="SGF files to check")

    # format subcommand
    format_parser = subparsers.add_parser(
        "format",
        parents=[config_parent],
        help="Rewrite an SGF file in canonical layout",
        description="Parse a file and write it back in canonical FF[4] layout.",
    )
    format_parser.add_argument("file", type=Path, metavar="FILE", help="SGF file to format")
    format_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (default: standard output)",
    )
    format_parser.add_argument(
        "--wrap",
        type=int,
        default=None,
        metavar="N",
        help="Wrap lines between properties at N columns (0 disables wrapping)",
    )

    # info subcommand
    info_parser = subparsers.add_parser(
        "info",
        parents=[config_parent],
        help="Summarize the games in an SGF file",
        description="Print game type, board size, players, result and tree size of each game.",
    )
    info_parser.add_argument("file", type=Path, metavar="FILE", help="SGF file to summarize")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        config = _load_config(args.config)
    except SgfError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.command == "check":
        return _cmd_check(args, config)
    if args.command == "format":
        return _cmd_format(args, config)
    if args.command == "info":
        return _cmd_info(args, config)
    return 0


def _load_config(path: Path | None) -> SgfConfig:
    if path is None:
        path = find_config(Path.cwd())
        if path is None:
            return SgfConfig()
    return load_config(path)


def _cmd_check(args: argparse.Namespace, config: SgfConfig) -> int:
    """Handle the check subcommand."""
    failed = False
    for path in args.files:
        try:
            collection = parse_file(path, config=config)
        except SgfError as exc:
            print(f"{chalk.red('FAIL')}  {path}")
            print(f"Error: {exc}", file=sys.stderr)
            failed = True
            continue

        result = validate(collection)
        status = chalk.red("FAIL") if result.has_errors else chalk.green("PASS")
        print(f"{status}  {path}")
        for warning in result.warnings:
            print(f"Warning: {warning.message}")
        for error in result.errors:
            print(f"Error: {error.message}", file=sys.stderr)
        failed = failed or result.has_errors

    return 1 if failed else 0


def _cmd_format(args: argparse.Namespace, config: SgfConfig) -> int:
    """Handle the format subcommand."""
    if args.wrap is not None:
        if args.wrap < 0:
            print("Error: --wrap must not be negative.", file=sys.stderr)
            return 1
        config = config.model_copy(update={"wrap_width": args.wrap})

    try:
        collection = parse_file(args.file, config=config)
        if args.output is None:
            sys.stdout.write(serialize(collection, config=config))
        else:
            serialize_file(collection, args.output, config=config)
    except SgfError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_info(args: argparse.Namespace, config: SgfConfig) -> int:
    """Handle the info subcommand."""
    try:
        collection = parse_file(args.file, config=config)
    except SgfError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"{args.file}: {len(collection)} game(s)")
    if not collection.games:
        print("No games found.")
        return 0
    for index, game in enumerate(collection):
        _print_game_info(index, game)
    return 0


def _print_game_info(index: int, game: GameTree) -> None:
    print(chalk.blue(f"Game {index}"))
    print(f"  Game type:  {game.game_type.name} (GM[{game.game_type.number}])")
    if game.board_size is None:
        print("  Board size: unspecified")
    else:
        print(f"  Board size: {game.board_size.columns}x{game.board_size.rows}")
    print(f"  Black:      {_text_of(game, 'PB') or '?'}")
    print(f"  White:      {_text_of(game, 'PW') or '?'}")
    print(f"  Result:     {_text_of(game, 'RE') or '?'}")
    print(f"  Nodes:      {sum(1 for _ in game.nodes())}")
    print(f"  Variations: {_count_variations(game)}")


def _text_of(game: GameTree, identifier: str) -> str | None:
    prop = game.root.get(identifier)
    if prop is None or not prop.values:
        return None
    return getattr(prop.values[0], "text", None)


def _count_variations(game: GameTree) -> int:
    # Every line of play ends at a leaf; a tree without branches has one line.
    leaves = 0
    pending = [game]
    while pending:
        tree = pending.pop()
        if not tree.children:
            leaves += 1
        pending.extend(tree.children)
    return leaves