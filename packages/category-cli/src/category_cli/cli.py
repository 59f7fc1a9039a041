import argparse
import logging
import sys

from category_source import CategorySource, CategorySourceError
from category_source.config import settings

from tree_builder.build_tree import InvalidArgumentError, build_tree
from tree_renderer import render, render_json

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print a category subtree from the catalog as an ASCII diagram."
    )
    parser.add_argument("category_id", nargs="?", type=int, help="Root category id")
    parser.add_argument("depth", nargs="?", type=int, help="Maximum depth level")
    parser.add_argument(
        "--format",
        choices=["ascii", "json"],
        default="ascii",
        help="Output format (default: ascii)",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write the rendered tree to FILE instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser.parse_args(argv)


def log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level


def prompt_int(message: str) -> int:
    answer = input(message).strip()
    try:
        return int(answer)
    except ValueError:
        raise ValueError(f"Expected an integer, got {answer!r}") from None


def run(
    category_id: int,
    depth: int,
    source: CategorySource,
    output_format: str = "ascii",
) -> str:
    """Build and render the tree under *category_id* using an open *source*."""
    root = build_tree(category_id, depth, source)
    if output_format == "json":
        return render_json(root)
    return render(root)


def start_cli(argv: list[str] | None = None) -> None:
    """CLI entrypoint used by the `category-tree` script."""
    args = parse_args(argv)

    try:
        logging.basicConfig(level=log_level(args.log_level), format=LOG_FORMAT)

        category_id = args.category_id if args.category_id is not None else prompt_int("Enter category ID: ")
        depth = args.depth if args.depth is not None else prompt_int("Enter depth level: ")

        with CategorySource.from_settings(settings) as source:
            output = run(category_id, depth, source, args.format)
    except InvalidArgumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except ValueError as exc:
        print(f"Error: invalid input. {exc}", file=sys.stderr)
        sys.exit(1)
    except EOFError:
        print("Error: no input, expected a category id and a depth level", file=sys.stderr)
        sys.exit(1)
    except CategorySourceError as exc:
        logger.debug("Build aborted", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(output + "\n")
        except OSError as exc:
            print(f"Error: cannot write {args.output}: {exc}", file=sys.stderr)
            sys.exit(1)
        print(f"Tree written to {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    start_cli()
