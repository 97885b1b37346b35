#!/usr/bin/env python3

import math
from framewalklib.core import utils

#============================================

DEFAULT_MAX_FRAMES = utils.UINT32_MAX

#============================================

class RunConfig():
	"""
	Validated settings for one framewalk run.

	Built once from the parsed command line and treated as read-only
	afterwards.
	"""
	def __init__(self, input_file: str, output_file: str, x: int, y: int,
		delta_x: float, delta_y: float, frame_width: int, frame_height: int,
		max_frames: int = DEFAULT_MAX_FRAMES, dry_run: bool = False,
		dump_plan: bool = False, quiet: bool = False):
		self.input_file = input_file
		self.output_file = output_file
		self.x = x
		self.y = y
		self.delta_x = delta_x
		self.delta_y = delta_y
		self.frame_width = frame_width
		self.frame_height = frame_height
		self.max_frames = max_frames
		self.dry_run = dry_run
		self.dump_plan = dump_plan
		self.quiet = quiet

	#============================
	@classmethod
	def from_args(cls, args) -> 'RunConfig':
		config = cls(
			str(args.input_file),
			str(args.output_file),
			args.x,
			args.y,
			args.delta_x,
			args.delta_y,
			args.frame_width,
			args.frame_height,
			max_frames=args.max_frames,
			dry_run=args.dry_run,
			dump_plan=args.dump_plan,
			quiet=args.quiet,
		)
		config.validate()
		return config

	#============================
	def validate(self) -> None:
		if self.input_file is None or str(self.input_file).strip() == "":
			raise RuntimeError("missing required -i/--input")
		if self.output_file is None or str(self.output_file).strip() == "":
			raise RuntimeError("missing required -o/--output")
		utils.ensure_file_readable(self.input_file)
		self._check_unsigned('x-start', self.x)
		self._check_unsigned('y-start', self.y)
		self._check_positive('fw', self.frame_width)
		self._check_positive('fh', self.frame_height)
		self._check_positive('max-frames', self.max_frames)
		self._check_finite('dx', self.delta_x)
		self._check_finite('dy', self.delta_y)
		return

	#============================
	def is_stationary(self) -> bool:
		return self.delta_x == 0 and self.delta_y == 0

	#============================
	def _check_unsigned(self, name: str, value) -> None:
		if not isinstance(value, int) or isinstance(value, bool):
			raise RuntimeError(f"--{name} must be an integer")
		if value < 0 or value > utils.UINT32_MAX:
			raise RuntimeError(f"--{name} must be in [0, {utils.UINT32_MAX}]")

	#============================
	def _check_positive(self, name: str, value) -> None:
		self._check_unsigned(name, value)
		if value == 0:
			raise RuntimeError(f"--{name}: Integer cannot be zero")

	#============================
	def _check_finite(self, name: str, value) -> None:
		if not isinstance(value, (int, float)) or isinstance(value, bool):
			raise RuntimeError(f"--{name} must be a number")
		if not math.isfinite(value):
			raise RuntimeError(f"--{name} must be finite")
