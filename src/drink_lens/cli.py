"""Command-line interface for drink-lens."""

import argparse
import logging
import sys

from drink_lens import __version__, match_drinks
from drink_lens.exceptions import DrinkLensError, EmptyResultError
from drink_lens.schema import DIMENSIONS


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="drink-lens",
        description="Rank drinks from menu photos against your taste preferences",
    )
    parser.add_argument("images", nargs="+", help="Paths to menu images")
    for dimension in DIMENSIONS:
        parser.add_argument(
            f"--{dimension.replace('_', '-')}",
            dest=dimension,
            help=f"Preferred {dimension.replace('_', ' ')} (default: any)",
        )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--api-key",
        help="Gemini API key (default: GEMINI_API_KEY env var)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"drink-lens {__version__}",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    preference = {dimension: getattr(args, dimension) for dimension in DIMENSIONS}

    try:
        result = match_drinks(args.images, preference, api_key=args.api_key)
    except EmptyResultError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.notes:
            print(f"Notes: {e.notes}", file=sys.stderr)
        return 1
    except DrinkLensError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2, exclude_none=True))
    else:
        _print_formatted(result)

    return 0


def _print_formatted(result) -> None:
    """Print result in human-readable format."""
    print()
    print("  drink-lens")
    print()

    for position, drink in enumerate(result.drinks, start=1):
        price = f"  {drink.price}" if drink.price else ""
        print(f"  {position:>2}. {drink.match_percentage:5.1f}%  {drink.name}{price}")
        details = _format_list([drink.alcohol_type, drink.strength, drink.glassware])
        if details:
            print(f"      {details}")
        if drink.assumptions:
            print(f"      ({drink.assumptions})")

    print()
    diagnostics = result.diagnostics
    print(
        f"  {diagnostics.drinks_shown} shown / {diagnostics.unique_drinks} unique / "
        f"{diagnostics.total_drinks_found} found in {diagnostics.images_processed} images"
    )
    if result.notes:
        print(f"  Notes: {result.notes}")
    print()


def _format_list(items: list[str | None]) -> str | None:
    """Format non-empty items as a slash-separated string."""
    values = [item for item in items if item]
    if not values:
        return None
    return " / ".join(values)


if __name__ == "__main__":
    sys.exit(main())
