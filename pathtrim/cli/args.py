import argparse


def build_common_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(add_help=False)
    ap.add_argument("--config", default=None, help="Path to pathtrim YAML config")
    ap.add_argument("--log-level", default=None, help="Override the configured log level")
    ap.add_argument("--precision", type=float, default=None, help="Solver precision override")
    ap.add_argument("--max-attempts", type=int, default=None, help="Solver attempt bound override")
    ap.add_argument(
        "--tolerance", choices=["absolute", "relative"], default=None, help="Solver tolerance mode"
    )
    return ap


def build_trim_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Trim a bodymovin shape path by length and emit SVG path data",
        parents=[build_common_parser()],
    )
    ap.add_argument("--shape", required=True, help="Bodymovin shape/path JSON file")
    ap.add_argument("--start", type=float, default=0.0, help="Trim start (0..1)")
    ap.add_argument("--end", type=float, default=1.0, help="Trim end (0..1)")
    ap.add_argument("--offset", type=float, default=0.0, help="Trim offset")
    ap.add_argument("--out", default=None, help="Write an SVG file instead of printing path data")
    ap.add_argument("--viewbox", type=float, nargs=4, default=None, help="SVG viewBox: x y w h")
    return ap
