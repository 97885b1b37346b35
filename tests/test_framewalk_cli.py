#!/usr/bin/env python3

"""
End-to-end coverage for framewalk_cli.py.
"""

# Standard Library
import os
import subprocess
import sys

# PIP3 modules
import numpy
import PIL.Image
import pytest
import yaml

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# tests helpers
TESTS_DIR = os.path.abspath(os.path.dirname(__file__))
if TESTS_DIR not in sys.path:
	sys.path.insert(0, TESTS_DIR)
from image_utils import frame_pixels
from image_utils import make_coordinate_image

# local repo modules
import framewalk_cli

#============================================

TOOL_PATH = os.path.join(REPO_ROOT, "framewalk_cli.py")

#============================================

def _run(args: list, ok: bool = True) -> subprocess.CompletedProcess:
	cmd = [sys.executable, TOOL_PATH] + args
	proc = subprocess.run(cmd, capture_output=True, text=True)
	if ok and proc.returncode != 0:
		raise RuntimeError(f"command failed: {cmd}\n{proc.stderr.strip()}")
	return proc

#============================================

def _args(input_path: str, output_path: str, x: str, y: str, dx: str, dy: str,
	fw: str, fh: str, extra: list = None) -> list:
	args = [
		"-i", input_path,
		"-o", output_path,
		"-x", x,
		"-y", y,
		"--dx", dx,
		"--dy", dy,
		"--fw", fw,
		"--fh", fh,
	]
	if extra is not None:
		args += extra
	return args

#============================================

def test_cli_horizontal_strip(tmp_path) -> None:
	input_path = str(tmp_path / "source.png")
	output_path = str(tmp_path / "strip.png")
	make_coordinate_image(input_path, 100, 100)
	proc = _run(_args(input_path, output_path, "0", "0", "10", "0", "20", "20",
		["-m", "5", "--quiet"]))
	assert "Saving 5 frames" in proc.stdout
	with PIL.Image.open(output_path) as strip:
		assert strip.size == (20, 100)
		for index in range(5):
			pixels = frame_pixels(strip, index, 20, 20)
			assert int(pixels[0, 0, 0]) == index * 10
			assert int(pixels[0, 0, 1]) == 0

#============================================

def test_cli_first_frame_outside_aborts(tmp_path) -> None:
	input_path = str(tmp_path / "source.png")
	output_path = str(tmp_path / "strip.png")
	make_coordinate_image(input_path, 50, 50)
	proc = _run(_args(input_path, output_path, "40", "40", "1", "1", "20", "20"), ok=False)
	assert proc.returncode != 0
	assert "First frame outside source image" in proc.stderr
	assert not os.path.exists(output_path)

#============================================

@pytest.mark.parametrize("flag,value,message", [
	("--fw", "0", "Integer cannot be zero"),
	("--fh", "00", "Integer cannot be zero"),
	("--fw", "-4", "invalid digit found in string"),
	("--fh", "wide", "invalid digit found in string"),
	("-m", "4294967296", "number too large to fit in target type"),
])
def test_cli_rejects_bad_positive_ints(tmp_path, flag: str, value: str, message: str) -> None:
	input_path = str(tmp_path / "source.png")
	output_path = str(tmp_path / "strip.png")
	make_coordinate_image(input_path, 50, 50)
	args = _args(input_path, output_path, "0", "0", "1", "0", "10", "10")
	args += [flag, value]
	proc = _run(args, ok=False)
	assert proc.returncode == 2
	assert flag in proc.stderr
	assert message in proc.stderr
	assert not os.path.exists(output_path)

#============================================

def test_cli_rejects_non_finite_delta(tmp_path) -> None:
	input_path = str(tmp_path / "source.png")
	make_coordinate_image(input_path, 50, 50)
	args = _args(input_path, str(tmp_path / "strip.png"), "0", "0", "nan", "0", "10", "10")
	proc = _run(args, ok=False)
	assert proc.returncode == 2
	assert "--dx" in proc.stderr

#============================================

def test_cli_missing_input(tmp_path) -> None:
	output_path = str(tmp_path / "strip.png")
	args = _args(str(tmp_path / "missing.png"), output_path, "0", "0", "1", "0", "10", "10")
	proc = _run(args, ok=False)
	assert proc.returncode != 0
	assert "file not found" in proc.stderr
	assert not os.path.exists(output_path)

#============================================

def test_main_zero_delta_stacks_copies(tmp_path, capsys) -> None:
	input_path = str(tmp_path / "source.png")
	output_path = str(tmp_path / "strip.png")
	make_coordinate_image(input_path, 40, 40)
	framewalk_cli.main(_args(input_path, output_path, "5", "6", "0", "0", "8", "8",
		["-m", "3", "-q"]))
	assert "Saving 3 frames" in capsys.readouterr().out
	with PIL.Image.open(output_path) as strip:
		assert strip.size == (8, 24)
		first = frame_pixels(strip, 0, 8, 8)
		for index in (1, 2):
			assert numpy.array_equal(frame_pixels(strip, index, 8, 8), first)

#============================================

def test_main_negative_delta_single_frame(tmp_path, capsys) -> None:
	input_path = str(tmp_path / "source.png")
	output_path = str(tmp_path / "strip.png")
	make_coordinate_image(input_path, 40, 40)
	framewalk_cli.main(_args(input_path, output_path, "3", "0", "-5", "0", "10", "10", ["-q"]))
	assert "Saving 1 frames" in capsys.readouterr().out
	with PIL.Image.open(output_path) as strip:
		assert strip.size == (10, 10)
		assert strip.getpixel((0, 0))[:2] == (3, 0)

#============================================

def test_main_dry_run_writes_nothing(tmp_path, capsys) -> None:
	input_path = str(tmp_path / "source.png")
	output_path = str(tmp_path / "strip.png")
	make_coordinate_image(input_path, 100, 100)
	framewalk_cli.main(_args(input_path, output_path, "0", "0", "10", "0", "20", "20", ["-n"]))
	assert "dry run: 9 frames planned" in capsys.readouterr().out
	assert not os.path.exists(output_path)

#============================================

def test_main_dump_plan_prints_yaml(tmp_path, capsys) -> None:
	input_path = str(tmp_path / "source.png")
	output_path = str(tmp_path / "strip.png")
	make_coordinate_image(input_path, 100, 60)
	framewalk_cli.main(_args(input_path, output_path, "0", "10", "12.5", "2", "20", "20",
		["-p", "-m", "3"]))
	plan = yaml.safe_load(capsys.readouterr().out)
	assert plan["source"] == {"width": 100, "height": 60, "mode": "RGB"}
	assert plan["frame_count"] == 3
	assert plan["frames"] == [
		{"index": 0, "x": 0, "y": 10},
		{"index": 1, "x": 13, "y": 12},
		{"index": 2, "x": 25, "y": 14},
	]
	assert not os.path.exists(output_path)

#============================================

@pytest.mark.parametrize("name,mode", [
	("source.jpg", "CMYK"),
	("source.tif", "F"),
])
def test_main_converts_unsavable_modes(tmp_path, capsys, name: str, mode: str) -> None:
	input_path = str(tmp_path / name)
	output_path = str(tmp_path / "strip.png")
	make_coordinate_image(input_path, 40, 40, mode=mode)
	framewalk_cli.main(_args(input_path, output_path, "0", "0", "10", "0", "10", "10", ["-q"]))
	assert "Saving 4 frames" in capsys.readouterr().out
	with PIL.Image.open(output_path) as strip:
		assert strip.mode == "RGBA"
		assert strip.size == (10, 40)

#============================================

@pytest.mark.parametrize("flag,value", [
	("--dx", "1_0"),
	("--dy", " 2 "),
])
def test_cli_rejects_loose_float_syntax(tmp_path, flag: str, value: str) -> None:
	input_path = str(tmp_path / "source.png")
	output_path = str(tmp_path / "strip.png")
	make_coordinate_image(input_path, 50, 50)
	args = _args(input_path, output_path, "0", "0", "1", "0", "10", "10")
	args += [flag, value]
	proc = _run(args, ok=False)
	assert proc.returncode == 2
	assert flag in proc.stderr
	assert "invalid float literal" in proc.stderr
	assert not os.path.exists(output_path)
