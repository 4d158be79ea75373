"""CLI entry point for the ceili dance visualizer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path


def _print_catalogs() -> None:
    from ceilivis.dances import DANCES
    from ceilivis.moves import ensure_loaded, get_move, list_moves, move_info

    ensure_loaded()
    print("Moves:")
    for name in list_moves():
        info = move_info(get_move(name))
        formations = ", ".join(f.value for f in info.formations)
        tag = " (background)" if info.background else ""
        print(f"  {info.name}{tag}  [{formations}]")
    print("\nDances:")
    for name, entry in DANCES.items():
        print(f"  {name}  [{entry.formation.value}]")


def main():
    parser = argparse.ArgumentParser(
        description="Ceili dance visualizer: run moves or a dance and animate it.",
    )
    parser.add_argument(
        "dance_file",
        nargs="?",
        help="Path to a text file containing the dance description. "
        "If omitted with no other source, reads from stdin.",
    )
    parser.add_argument(
        "-o", "--output",
        default="dance.html",
        help="Output HTML file path (default: dance.html)",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="LLM model to use for parsing (default: claude-sonnet-4-20250514)",
    )
    parser.add_argument(
        "--no-llm",
        action="store_true",
        help='Skip LLM parsing; expects JSON like {"formation": ..., "moves": [...]}.',
    )
    parser.add_argument("--dance", help="Run a dance from the built-in catalog")
    parser.add_argument("--moves", help="Comma-separated move names to run")
    parser.add_argument("--list", action="store_true", help="List moves and dances, then exit")
    parser.add_argument(
        "--formation",
        default=None,
        help="Starting formation (default: EIGHT_HAND_SQUARE, overridden by [formation:] header)",
    )
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument(
        "--mingle-beats",
        type=float,
        default=0.0,
        help="Mingle for this many beats before the moves start",
    )
    parser.add_argument("--scramble", action="store_true", help="Scatter the dancers first")
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Play at wall-clock pace (half a second per beat)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print state before and after the run",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    if args.list:
        _print_catalogs()
        return

    from ceilivis.config import Settings, load_settings
    from ceilivis.dances import get_dance
    from ceilivis.errors import ConfigurationError
    from ceilivis.llm.outer import dance_from_dict, parse_formation
    from ceilivis.types import Formation

    settings = load_settings(args.config) if args.config else Settings()
    if args.realtime:
        settings = settings.model_copy(update={"beat_seconds": 0.5})

    moves: list[str] | None = None
    dance = None

    try:
        default_formation = parse_formation(args.formation) if args.formation else Formation.EIGHT_HAND_SQUARE
        formation = default_formation
        if args.dance:
            entry = get_dance(args.dance)
            if entry is None:
                print(f"Unknown dance: {args.dance}", file=sys.stderr)
                sys.exit(1)
            dance, formation = entry.executor, entry.formation
            title = entry.name
        elif args.moves:
            moves = [m.strip() for m in args.moves.split(",") if m.strip()]
            title = "Ceili Moves"
        else:
            # Read dance description
            if args.dance_file:
                text = Path(args.dance_file).read_text()
            elif not sys.stdin.isatty():
                text = sys.stdin.read()
            else:
                parser.print_help()
                sys.exit(1)

            if args.no_llm:
                formation, moves = dance_from_dict(json.loads(text), default=default_formation)
            else:
                from ceilivis.llm.outer import parse_dance
                formation, moves = parse_dance(text, model=args.model)
            title = Path(args.dance_file).stem if args.dance_file else "Ceili Dance"
    except (ConfigurationError, json.JSONDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.verbose and moves is not None:
        print(f"Parsed {len(moves)} moves:")
        for name in moves:
            print(f"  {name}")
        print()

    # Run pipeline
    from ceilivis.pipeline import run_pipeline
    from ceilivis.render.html_canvas import render_html

    keyframes, choreo, warnings = run_pipeline(
        moves=moves,
        dance=dance,
        formation=formation,
        settings=settings,
        scramble=args.scramble,
        mingle_beats=args.mingle_beats,
        verbose=args.verbose,
    )

    if warnings:
        print(f"\n{len(warnings)} warnings:")
        for w in warnings:
            print(f"  ! {w}")

    # Render
    geometry = choreo.geometry
    output = render_html(
        keyframes, args.output,
        title=title,
        width=geometry.width,
        height=geometry.height,
        center=geometry.center,
    )
    print(f"\nWrote {output} ({len(keyframes)} keyframes)")


if __name__ == "__main__":
    main()
