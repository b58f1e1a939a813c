import logging

import pytest

from term3d.cli import main, parse_args
from term3d.config import ANIMATION_FRAMES
from term3d.logging_config import setup_logging

TRIANGLE_OBJ = """\
v -20 -20 0.5
v 20 -20 0.5
v 0 20 0.5
vn 0 0 -1
f 1//1 2//1 3//1
"""


@pytest.fixture(autouse=True)
def reset_term3d_logger():
    yield
    logger = logging.getLogger("term3d")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def model(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(TRIANGLE_OBJ)
    return path


def test_defaults():
    args = parse_args([])
    assert args.mode == "terminal"
    assert args.model is None
    assert args.frames == 1


def test_bare_model_path_means_terminal():
    args = parse_args(["model.obj"])
    assert args.mode == "terminal"
    assert args.model == "model.obj"


def test_animate_flag():
    assert parse_args(["--animate"]).animate
    assert ANIMATION_FRAMES == 60


def test_frames_must_be_positive():
    with pytest.raises(SystemExit):
        parse_args(["--frames", "0"])


def test_to_file_writes_ppm(model, tmp_path, capsys):
    out = tmp_path / "out.ppm"
    assert main(["to_file", str(model), "-o", str(out)]) == 0
    lines = out.read_text().splitlines()
    assert lines[0] == "P3"
    assert lines[1] == "180 70"
    assert len(lines) == 3 + 70
    # Normal (0, 0, -1) shades to 256 / 3 on the blue channel.
    assert "0 0 85   " in out.read_text()
    assert capsys.readouterr().out == ""


def test_terminal_prints_one_line_per_row(model, capsys):
    assert main(["terminal", str(model)]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 70
    assert lines[0].count("█") == 180


def test_builtin_cube(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    # Back face of the cube, normal (0, 0, 1), over a white background.
    assert "\033[38;2;102;102;136m█" in out
    assert "\033[38;2;0;0;0m█" in out


def test_missing_model_fails(tmp_path, capsys):
    assert main(["terminal", str(tmp_path / "missing.obj")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing.obj" in captured.err


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "term3d.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    logging.getLogger("term3d.mesh").info("hello from mesh")
    for handler in logger.handlers:
        handler.flush()
    assert "term3d.mesh - INFO - hello from mesh" in log_file.read_text()


def test_binary_model_fails(tmp_path, capsys):
    path = tmp_path / "model.obj"
    path.write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")
    assert main(["terminal", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "not a UTF-8 text file" in captured.err


def test_log_file_option(model, tmp_path, capsys):
    log_file = tmp_path / "run.log"
    out = tmp_path / "out.ppm"
    assert main(["to_file", str(model), "-o", str(out), "--log-file", str(log_file)]) == 0
    for handler in logging.getLogger("term3d").handlers:
        handler.flush()
    text = log_file.read_text()
    assert "Number of triangles: 1" in text
    assert f"Wrote {out}" in text


def test_setup_logging_replaces_handlers(tmp_path):
    setup_logging(logging.INFO, str(tmp_path / "first.log"))
    logger = setup_logging(logging.INFO)
    assert len(logger.handlers) == 1
