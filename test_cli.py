"""
Test CLI and Configuration
==========================

Covers score file loading, YAML render configuration and the
`scoretrace render` / `scoretrace inspect` commands.

Usage:
    pytest test_cli.py
    python test_cli.py
"""

import contextlib
import io
import json
import tempfile
from pathlib import Path

import pytest

from scoretrace import (
    InvalidConfigurationError,
    LayoutConfig,
    MalformedInputError,
    RenderConfig,
    compute_scale,
    to_instant,
)
from scoretrace_cli.cli import load_scores, main


SCORES = [
    {"name": "a", "start": "2024-05-01T12:00:00Z", "duration": 100, "depth": 0},
    {"name": "b", "start": "2024-05-01T12:00:00.010Z", "duration": 50, "depth": 1},
]

YAML_SCORES = """
scores:
  - name: a
    start: 2024-05-01T12:00:00Z
    duration: 100
    depth: 0
  - name: b
    start: "2024-05-01T12:00:00.010Z"
    duration: 50
    depth: 1
"""

RENDER_YAML = """
canvas_width: 500
canvas_height: 200
layout:
  origin_top: 40
  font_size: 14
  palette: ["#123456", "#abcdef"]
"""


def run_cli(argv):
    """Run main() and capture stdout, stderr and exit code."""
    stdout, stderr = io.StringIO(), io.StringIO()
    code = 0
    with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
        try:
            main(argv)
        except SystemExit as e:
            code = e.code
    return code, stdout.getvalue(), stderr.getvalue()


def test_load_scores_json_and_yaml():
    print("\n" + "=" * 60)
    print("TEST: Score loading")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        list_path = Path(tmp) / "scores.json"
        list_path.write_text(json.dumps(SCORES))
        mapping_path = Path(tmp) / "wrapped.json"
        mapping_path.write_text(json.dumps({"scores": SCORES}))
        yaml_path = Path(tmp) / "scores.yaml"
        yaml_path.write_text(YAML_SCORES)

        from_list = load_scores(str(list_path))
        from_mapping = load_scores(str(mapping_path))
        from_yaml = load_scores(str(yaml_path))

    assert [s.name for s in from_list] == ["a", "b"]
    assert from_list == from_mapping
    assert [s.duration for s in from_yaml] == [100, 50]
    print("✓ JSON list, JSON mapping and YAML documents load")


def test_load_scores_yaml_unquoted_date():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "daily.yaml"
        path.write_text("- name: day\n  start: 2024-05-01\n  duration: 5\n")
        scores = load_scores(str(path))

    assert scores[0].start.isoformat() == "2024-05-01"
    assert compute_scale(scores, 500, 30).epoch == to_instant("2024-05-01T00:00:00Z")


def test_load_scores_errors():
    with pytest.raises(FileNotFoundError):
        load_scores("/nonexistent/scores.json")

    with tempfile.TemporaryDirectory() as tmp:
        bad_json = Path(tmp) / "bad.json"
        bad_json.write_text("{not json")
        with pytest.raises(MalformedInputError):
            load_scores(str(bad_json))

        scalar = Path(tmp) / "scalar.json"
        scalar.write_text("42")
        with pytest.raises(MalformedInputError):
            load_scores(str(scalar))

        missing_field = Path(tmp) / "missing.json"
        missing_field.write_text(json.dumps([SCORES[0], {"name": "x", "duration": 1}]))
        with pytest.raises(MalformedInputError) as exc_info:
            load_scores(str(missing_field))
        assert exc_info.value.index == 1


def test_render_config_from_yaml():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "render.yaml"
        path.write_text(RENDER_YAML)
        config = RenderConfig.from_yaml(path)

    assert config.canvas_width == 500
    assert config.canvas_height == 200
    assert config.output_destination is None
    assert config.layout.origin_top == 40
    assert config.layout.origin_left == 30
    assert config.layout.palette == ("#123456", "#abcdef")

    options = config.layout.to_options()
    assert options.font_size == 14
    print("✓ RenderConfig loaded from YAML")


def test_render_config_validation():
    with pytest.raises(InvalidConfigurationError):
        RenderConfig(canvas_width=0)
    with pytest.raises(InvalidConfigurationError):
        RenderConfig(canvas_width=20, layout=LayoutConfig(origin_left=30))
    with pytest.raises(InvalidConfigurationError):
        LayoutConfig(palette=())
    with pytest.raises(InvalidConfigurationError):
        LayoutConfig(palette=("red",))
    with pytest.raises(InvalidConfigurationError):
        LayoutConfig(palette=("#zzzzzz",))
    with pytest.raises(InvalidConfigurationError):
        RenderConfig.from_dict({"layout": 5})
    with pytest.raises(InvalidConfigurationError):
        RenderConfig.from_dict({"layout": {"palette": 5}})
    with pytest.raises(InvalidConfigurationError):
        RenderConfig.from_dict([1, 2])
    with pytest.raises(InvalidConfigurationError):
        LayoutConfig(line_height=0)
    with pytest.raises(InvalidConfigurationError):
        RenderConfig.from_dict({"layout": {"unknown_key": 1}})

    config = RenderConfig().with_canvas(width=800)
    assert (config.canvas_width, config.canvas_height) == (800, 600)


def test_cli_render_writes_output():
    print("\n" + "=" * 60)
    print("TEST: scoretrace render")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        scores_path = Path(tmp) / "scores.json"
        scores_path.write_text(json.dumps(SCORES))
        config_path = Path(tmp) / "render.yaml"
        config_path.write_text(RENDER_YAML)
        output = Path(tmp) / "out.html"

        code, stdout, _ = run_cli([
            "render", str(scores_path),
            "-o", str(output),
            "--config", str(config_path),
            "--height", "300",
        ])

        assert code == 0
        assert stdout.strip() == str(output)
        assert output.read_text().startswith('<img src="data:image/png;base64,')

    print("✓ render command wrote the artifact")


def test_cli_inspect_prints_scale():
    with tempfile.TemporaryDirectory() as tmp:
        scores_path = Path(tmp) / "scores.json"
        scores_path.write_text(json.dumps(SCORES))

        code, stdout, _ = run_cli(["inspect", str(scores_path), "--width", "500"])

    assert code == 0
    assert "max_duration: 100" in stdout
    assert "max_depth:    1" in stdout
    assert "ratio:        4.7" in stdout


def test_cli_inspect_empty_is_degenerate():
    with tempfile.TemporaryDirectory() as tmp:
        scores_path = Path(tmp) / "scores.json"
        scores_path.write_text("[]")

        code, stdout, _ = run_cli(["inspect", str(scores_path)])

    assert code == 0
    assert "ratio:        0.0" in stdout
    assert "degenerate" in stdout


def test_cli_errors_exit_1():
    with tempfile.TemporaryDirectory() as tmp:
        bad_path = Path(tmp) / "scores.json"
        bad_path.write_text(json.dumps([{"name": "x", "start": "soon", "duration": 1}]))

        code, _, stderr = run_cli(["render", str(bad_path), "-o", str(Path(tmp) / "out.html")])
        assert code == 1
        assert "Error:" in stderr
        assert not (Path(tmp) / "out.html").exists()

        not_utf8 = Path(tmp) / "latin1.json"
        not_utf8.write_bytes(b'[{"name": "caf\xe9", "start": 0, "duration": 1}]')
        code, _, stderr = run_cli(["render", str(not_utf8), "-o", str(Path(tmp) / "out.html")])
        assert code == 1
        assert "Error:" in stderr

        code, _, stderr = run_cli(["render", tmp, "-o", str(Path(tmp) / "out.html")])
        assert code == 1
        assert "Error:" in stderr

        scores_path = Path(tmp) / "good.json"
        scores_path.write_text(json.dumps(SCORES))
        for name, text in [
            ("layout_scalar.yaml", "layout: 5\n"),
            ("bad_color.yaml", 'layout:\n  palette: ["#zzzzzz"]\n'),
        ]:
            config_path = Path(tmp) / name
            config_path.write_text(text)
            code, _, stderr = run_cli([
                "render", str(scores_path),
                "-o", str(Path(tmp) / "out.html"),
                "--config", str(config_path),
            ])
            assert code == 1, name
            assert "Error:" in stderr

        assert not (Path(tmp) / "out.html").exists()

    code, _, stderr = run_cli(["render", "/nonexistent/scores.json"])
    assert code == 1
    assert "Scores file not found" in stderr

    code, _, _ = run_cli([])
    assert code == 1
    print("✓ CLI errors reported with exit code 1")


def main_tests():
    """Run all tests."""
    print("\n🔥 scoretrace - CLI Tests")
    print("=" * 60)

    tests = [value for name, value in sorted(globals().items()) if name.startswith("test_")]
    for test in tests:
        test()

    print("\n" + "=" * 60)
    print("✅ ALL CLI TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main_tests()
