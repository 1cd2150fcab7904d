# tests/test_cli_contracts.py
import json
import warnings

from pydantic.warnings import PydanticDeprecatedSince20

from pathtrim.cli.args import build_common_parser, build_trim_parser
from pathtrim.trim_path import EXIT_FAIL, EXIT_OK, EXIT_PRECONDITION, main

SQUARE = {
    "v": [[0, 0], [10, 0], [10, 10], [0, 10]],
    "i": [[0, 0]] * 4,
    "o": [[0, 0]] * 4,
    "c": True,
}


def write_shape(tmp_path, data, name="shape.json"):
    p = tmp_path / name
    p.write_text(json.dumps(data), encoding="utf-8")
    return str(p)


def test_cli_flags_present():
    ap = build_common_parser()
    args = ap.parse_args(["--config", "conf/x.yaml", "--precision", "0.5", "--tolerance", "relative"])
    assert args.config == "conf/x.yaml"
    assert args.precision == 0.5
    assert args.tolerance == "relative"
    assert args.max_attempts is None


def test_trim_parser_defaults():
    args = build_trim_parser().parse_args(["--shape", "s.json"])
    assert (args.start, args.end, args.offset) == (0.0, 1.0, 0.0)
    assert args.out is None


def test_prints_trimmed_path_data(tmp_path, capsys):
    shape = write_shape(tmp_path, SQUARE)
    code = main(["--shape", shape, "--start", "0.25", "--end", "0.75"])
    assert code == EXIT_OK
    d = capsys.readouterr().out.strip().splitlines()[-1]
    assert d.startswith("M 10 0")
    assert "Z" not in d


def test_untrimmed_path_closes(tmp_path, capsys):
    shape = write_shape(tmp_path, SQUARE)
    assert main(["--shape", shape]) == EXIT_OK
    assert capsys.readouterr().out.strip().splitlines()[-1].endswith("Z")


def test_writes_svg_file(tmp_path):
    shape = write_shape(tmp_path, SQUARE)
    out = tmp_path / "out.svg"
    code = main(["--shape", shape, "--start", "0.1", "--end", "0.4", "--out", str(out), "--viewbox", "0", "0", "10", "10"])
    assert code == EXIT_OK
    assert "<path" in out.read_text(encoding="utf-8")


def test_empty_path_is_a_precondition_failure(tmp_path):
    shape = write_shape(tmp_path, {"v": [], "i": [], "o": [], "c": False})
    assert main(["--shape", shape, "--start", "0.2", "--end", "0.4"]) == EXIT_PRECONDITION


def test_missing_shape_file(tmp_path):
    assert main(["--shape", str(tmp_path / "nope.json")]) == EXIT_FAIL


def test_invalid_trim_values(tmp_path):
    shape = write_shape(tmp_path, SQUARE)
    assert main(["--shape", shape, "--start", "1.5"]) == EXIT_FAIL


def test_solver_overrides_use_current_pydantic_api(tmp_path, capsys):
    shape = write_shape(tmp_path, SQUARE)
    with warnings.catch_warnings():
        warnings.simplefilter("error", PydanticDeprecatedSince20)
        code = main(["--shape", shape, "--end", "0.5", "--precision", "0.001", "--max-attempts", "80"])
    assert code == EXIT_OK
    assert capsys.readouterr().out.strip().splitlines()[-1].startswith("M 0 0")
