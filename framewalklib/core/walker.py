#!/usr/bin/env python3

import sys
import numpy
import PIL.Image
from framewalklib.core import utils

#============================================

class FrameWindow():
	def __init__(self, index: int, x: int, y: int, width: int, height: int):
		self.index = index
		self.x = x
		self.y = y
		self.width = width
		self.height = height

	#============================
	@property
	def box(self) -> tuple:
		"""PIL crop box (left, upper, right, lower)."""
		return (self.x, self.y, self.x + self.width, self.y + self.height)

	#============================
	def fits(self, source_width: int, source_height: int) -> bool:
		if self.x + self.width > source_width:
			return False
		if self.y + self.height > source_height:
			return False
		return True

	#============================
	def __repr__(self) -> str:
		return (f"FrameWindow(index={self.index}, x={self.x}, y={self.y}, "
			f"width={self.width}, height={self.height})")

#============================================

def load_source_image(input_file: str) -> PIL.Image.Image:
	"""
	Open and fully decode the source image.

	The format is detected from the file content. The decompression
	bomb guard is disabled so arbitrarily large inputs can be read.

	Args:
		input_file: Path to the source image.

	Returns:
		PIL.Image.Image: Decoded image.
	"""
	PIL.Image.MAX_IMAGE_PIXELS = None
	try:
		image = PIL.Image.open(input_file)
	except FileNotFoundError as exc:
		raise RuntimeError(f"Image not found: {input_file}") from exc
	except PIL.UnidentifiedImageError as exc:
		raise RuntimeError(f"Unable to determine image format: {input_file}") from exc
	except OSError as exc:
		raise RuntimeError(f"IO error while trying to guess image format: {input_file}") from exc
	try:
		image.load()
	except (OSError, ValueError, SyntaxError) as exc:
		raise RuntimeError(f"Unable to decode image: {input_file}") from exc
	return image

#============================================

class FrameWalker():
	"""
	Walks a fixed-size window across a source image.

	The window origin lives in single-precision accumulators. Each
	step adds the delta to the accumulator and rounds the accumulated
	value again, so rounding error never compounds.
	"""
	def __init__(self, config):
		self.config = config

	#============================
	def walk(self, source_width: int, source_height: int) -> list:
		if self.config.is_stationary() and self.config.max_frames == utils.UINT32_MAX:
			sys.stderr.write("warning: --dx and --dy are both zero; the first frame "
				"repeats until --max-frames is reached\n")
		return list(self.iter_windows(source_width, source_height))

	#============================
	def iter_windows(self, source_width: int, source_height: int):
		config = self.config
		first = FrameWindow(0, config.x, config.y,
			config.frame_width, config.frame_height)
		if not first.fits(source_width, source_height):
			raise RuntimeError("First frame outside source image")
		delta_x = numpy.float32(config.delta_x)
		delta_y = numpy.float32(config.delta_y)
		cur_x = numpy.float32(config.x)
		cur_y = numpy.float32(config.y)
		rounded_x = config.x
		rounded_y = config.y
		count = 0
		while True:
			if count == config.max_frames:
				break
			if cur_x < 0 or cur_y < 0:
				break
			if rounded_x is None or rounded_y is None:
				break
			window = FrameWindow(count, rounded_x, rounded_y,
				config.frame_width, config.frame_height)
			if not window.fits(source_width, source_height):
				break
			yield window
			count += 1
			with numpy.errstate(over='ignore'):
				cur_x = numpy.float32(cur_x + delta_x)
				cur_y = numpy.float32(cur_y + delta_y)
			rounded_x = self._round_position(cur_x)
			rounded_y = self._round_position(cur_y)

	#============================
	def _round_position(self, value):
		# an overflowed accumulator is past every edge
		if not numpy.isfinite(value):
			return None
		return utils.round_half_away(float(value))
