"""
Command-line interface for the package matcher.

Usage:
    python -m partymatch make-example [--output example_input.json]
    python -m partymatch score --input example.json [--output scores.json]
    python -m partymatch rank --input example.json [--output ranking.json]
    python -m partymatch serve [--port 8000]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from partymatch import __version__
from partymatch.models.inputs import MatchRequest
from partymatch.pricing.price import format_price
from partymatch.ranking.ranker import PackageRanker
from partymatch.scoring.scorer import BEST_MATCH_THRESHOLD, PackageScorer


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="partymatch",
        description="Package Matcher - Scores and ranks event packages against "
                    "a user's gathering size, energy level and vibe preferences.",
    )
    parser.add_argument("--version", action="version", version=f"partymatch {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log per-package scoring details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example input JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_input.json"),
        help="Output path for example file (default: example_input.json)",
    )

    # score command
    score_parser = subparsers.add_parser(
        "score",
        help="Score each package and show the per-category breakdown",
    )
    score_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON input file with preferences and packages",
    )
    score_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )

    # rank command
    rank_parser = subparsers.add_parser(
        "rank",
        help="Rank packages and pick the best match",
    )
    rank_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON input file with preferences and packages",
    )
    rank_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def _load_request(path: Path) -> MatchRequest:
    with open(path) as f:
        input_data = json.load(f)
    return MatchRequest.model_validate(input_data)


def _write_output(output_json: str, output: Path | None, label: str) -> None:
    if output:
        with open(output, "w") as f:
            f.write(output_json)
        print(f"\n{label} saved to {output}", file=sys.stderr)
    else:
        print(output_json)


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example input JSON file."""
    example = MatchRequest.example()

    with open(args.output, "w") as f:
        f.write(example.model_dump_json(indent=2))

    print(f"Created example input file: {args.output}")
    print("\nRank packages with:")
    print(f"  python -m partymatch rank --input {args.output}")

    return 0


def cmd_score(args: argparse.Namespace) -> int:
    """Score packages with a per-category breakdown."""
    try:
        request = _load_request(args.input)

        scorer = PackageScorer()
        rows = []
        for package in request.packages:
            breakdown = scorer.breakdown(package, request.preferences)
            rows.append({"id": package.id, "name": package.name, **breakdown.model_dump()})

        _write_output(json.dumps(rows, indent=2), args.output, "Scores")
        print(f"\nScored {len(rows)} packages", file=sys.stderr)
        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_rank(args: argparse.Namespace) -> int:
    """Rank packages and report the best match."""
    try:
        request = _load_request(args.input)

        print("\nPackage Matcher", file=sys.stderr)
        print(f"Packages: {len(request.packages)}", file=sys.stderr)
        print("Ranking...", file=sys.stderr)

        result = PackageRanker().rank(request.packages, request.preferences)

        _write_output(result.model_dump_json(indent=2), args.output, "Ranking")

        # Print summary to stderr
        print(f"\nSummary: Ranked {len(result.packages)} packages", file=sys.stderr)
        print(f"  Average score: {result.average_score}", file=sys.stderr)
        if result.best_match is not None:
            best = result.best_match
            price = (
                f" ({format_price(best.price_per_person_cents)} pp)"
                if best.price_per_person_cents is not None else ""
            )
            print(
                f"  Best match: {best.name or best.id} "
                f"score {best.match_score}{price}",
                file=sys.stderr,
            )
        else:
            print(f"  No package reached the best-match threshold ({BEST_MATCH_THRESHOLD})",
                  file=sys.stderr)

        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    try:
        import uvicorn

        print("\nStarting Package Matcher API", file=sys.stderr)
        print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
        print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
        print("\nPress Ctrl+C to stop\n", file=sys.stderr)

        uvicorn.run(
            "partymatch.api.server:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return 0

    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1


def cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "make-example": cmd_make_example,
        "score": cmd_score,
        "rank": cmd_rank,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
