#!/usr/bin/env python3

import PIL.Image
from tqdm import tqdm

#============================================

# 8-bit and integer modes are kept; anything else is stacked as RGBA
CANVAS_MODES = ('1', 'L', 'LA', 'RGB', 'RGBA', 'I', 'I;16')

#============================================

def canvas_mode(source: PIL.Image.Image) -> str:
	if source.mode in CANVAS_MODES:
		return source.mode
	return 'RGBA'

#============================================

def assemble_frames(source: PIL.Image.Image, windows: list, frame_width: int,
	frame_height: int, quiet: bool = False) -> PIL.Image.Image:
	"""
	Stack the frame windows of source top to bottom on a new canvas.

	Args:
		source: Decoded source image.
		windows: Ordered FrameWindow list.
		frame_width: Width of every frame.
		frame_height: Height of every frame.
		quiet: Disable the progress bar when True.

	Returns:
		PIL.Image.Image: Canvas of size (frame_width, frame_height * len(windows)).
	"""
	mode = canvas_mode(source)
	canvas = PIL.Image.new(mode, (frame_width, frame_height * len(windows)))
	if quiet or len(windows) == 0:
		iter_windows = windows
	else:
		iter_windows = tqdm(windows, desc="frames", unit="frame")
	for index, window in enumerate(iter_windows):
		if not window.fits(source.width, source.height):
			raise RuntimeError(f"Unable to copy frame {index}: window {window.box} "
				f"outside source image {source.size}")
		frame = source.crop(window.box)
		if frame.size != (frame_width, frame_height):
			raise RuntimeError(f"Unable to copy frame {index}: size {frame.size} "
				f"does not match {(frame_width, frame_height)}")
		if frame.mode != mode:
			frame = frame.convert(mode)
		canvas.paste(frame, (0, frame_height * index))
	return canvas

#============================================

def save_canvas(canvas: PIL.Image.Image, output_file: str) -> None:
	"""
	Save the canvas; the format follows the output file extension.
	"""
	try:
		canvas.save(output_file)
	except (OSError, ValueError, KeyError) as exc:
		raise RuntimeError(f"Unable to save image: {output_file}: {exc}") from exc
	return
