#!/usr/bin/env python3

from framewalklib.core import assembler
from framewalklib.core import walker
from framewalklib.core.config import RunConfig

#============================================

class FramewalkProject():
	def __init__(self, config: RunConfig):
		self.config = config
		self.source = None
		self.windows = None

	#============================
	def validate(self) -> None:
		self.config.validate()

	#============================
	def plan(self) -> list:
		self.validate()
		if self.source is None:
			self.source = walker.load_source_image(self.config.input_file)
		frame_walker = walker.FrameWalker(self.config)
		self.windows = frame_walker.walk(self.source.width, self.source.height)
		return self.windows

	#============================
	def plan_document(self) -> dict:
		if self.windows is None:
			self.plan()
		frames = []
		for window in self.windows:
			frames.append({'index': window.index, 'x': window.x, 'y': window.y})
		document = {
			'input': self.config.input_file,
			'output': self.config.output_file,
			'source': {
				'width': self.source.width,
				'height': self.source.height,
				'mode': self.source.mode,
			},
			'frame': {
				'width': self.config.frame_width,
				'height': self.config.frame_height,
			},
			'delta': {
				'x': float(self.config.delta_x),
				'y': float(self.config.delta_y),
			},
			'frame_count': len(self.windows),
			'frames': frames,
		}
		return document

	#============================
	def run(self) -> int:
		windows = self.plan()
		if self.config.dry_run:
			if not self.config.quiet:
				print(f"dry run: {len(windows)} frames planned")
			return len(windows)
		canvas = assembler.assemble_frames(self.source, windows,
			self.config.frame_width, self.config.frame_height,
			quiet=self.config.quiet)
		print(f"Saving {len(windows)} frames")
		assembler.save_canvas(canvas, self.config.output_file)
		return len(windows)
