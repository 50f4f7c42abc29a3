"""Tests for the command-line entry point."""

import logging

from meshkit import Mesh
from meshkit.cli import main
from meshkit.logging_config import setup_logging


def test_info(cube_ply, capsys):
    assert main(["info", str(cube_ply)]) == 0
    out = capsys.readouterr().out
    assert "vertices: 8" in out
    assert "faces:    12" in out
    assert "area:     24.000000" in out
    assert "closed:   True" in out


def test_info_missing_file(tmp_path, capsys):
    assert main(["info", str(tmp_path / "missing.ply")]) == 1
    captured = capsys.readouterr()
    assert "does not exist" in captured.err
    assert captured.out == ""


def test_convert_with_transforms(uncentered_ply, tmp_path):
    dst = tmp_path / "out.dae"
    assert main(["convert", str(uncentered_ply), str(dst), "--center", "--scale", "2", "--subdivide", "1"]) == 0
    mesh = Mesh.from_file(dst)
    assert len(mesh.faces) == 48
    assert len(mesh.vertices) == 26


def test_convert_refuses_overwrite(cube_ply, tmp_path, capsys):
    dst = tmp_path / "out.ply"
    dst.write_text("existing")
    assert main(["convert", str(cube_ply), str(dst)]) == 1
    assert "already exists" in capsys.readouterr().err
    assert main(["convert", str(cube_ply), str(dst), "--overwrite"]) == 0


def test_convert_binary_stl_with_noise(cube_ply, tmp_path):
    dst = tmp_path / "out.stl"
    assert main(["convert", str(cube_ply), str(dst), "--binary-stl", "--noise", "0.01", "--seed", "3"]) == 0
    assert dst.stat().st_size == 84 + 50 * 12


def test_log_file_receives_debug_records(cube_ply, tmp_path):
    log = tmp_path / "run.log"
    assert main(["-v", "--log-file", str(log), "info", str(cube_ply)]) == 0
    setup_logging(logging.WARNING)  # closes the file handler
    assert "Loaded" in log.read_text()


def test_setup_logging_replaces_its_own_handlers():
    logger = logging.getLogger("meshkit")
    setup_logging(logging.INFO)
    setup_logging(logging.DEBUG)
    assert sum(isinstance(h, logging.StreamHandler) for h in logger.handlers) == 1
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert logger.level == logging.DEBUG
