#!/usr/bin/env python3
"""
Trim Path CLI

Loads a bodymovin shape path, applies a trim path (start / end / offset) and
prints the visible part as SVG path data, or writes it to an SVG file.

    python -m pathtrim.trim_path --shape shape.json --start 0.2 --end 0.8
"""

import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from pathtrim.cli.args import build_trim_parser
from pathtrim.core import SolverCfg, configure_logging, get_logger, load_config
from pathtrim.errors import PreconditionError
from pathtrim.geometry import (
    TrimPath,
    export_svg,
    load_shape_path,
    path_segments_to_draw,
    segments_to_path_d,
)

log = get_logger("trim_path")

EXIT_OK = 0
EXIT_FAIL = 1
EXIT_PRECONDITION = 2

STEP_LOGGERS = ("pathtrim", "solver", "splitter", "bodymovin", "trim", "svg_export", "trim_path")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_trim_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAIL

    if args.log_level:
        cfg.logging.level = args.log_level
    configure_logging(cfg.logging, STEP_LOGGERS)

    overrides = {
        "precision": args.precision,
        "max_attempts": args.max_attempts,
        "tolerance": args.tolerance,
    }
    try:
        solver = SolverCfg(**{**cfg.solver.model_dump(), **{k: v for k, v in overrides.items() if v is not None}})
        trim = TrimPath(start=args.start, end=args.end, offset=args.offset)
        poly = load_shape_path(args.shape)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAIL
    except (ValidationError, json.JSONDecodeError, ValueError) as e:
        print(f"Error: invalid input: {e}", file=sys.stderr)
        return EXIT_FAIL

    try:
        segments = path_segments_to_draw([poly], trim, settings=solver)
    except PreconditionError as e:
        log.error(f"Cannot trim {args.shape}: {e.message}")
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_PRECONDITION

    if args.out:
        ok = export_svg(
            segments,
            args.out,
            trim=trim,
            viewbox=tuple(args.viewbox) if args.viewbox else None,
            stroke=cfg.export.stroke,
            stroke_width=cfg.export.stroke_width,
            decimals=cfg.export.decimals,
        )
        return EXIT_OK if ok else EXIT_FAIL

    print(segments_to_path_d(segments, trim, cfg.export.decimals))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
