#!/usr/bin/env python3

import argparse
import yaml
from framewalklib.core import utils
from framewalklib.core.config import DEFAULT_MAX_FRAMES
from framewalklib.core.config import RunConfig
from framewalklib.core.project import FramewalkProject

#============================================

def parse_args(argv: list = None):
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Cut translated frames from one image and stack them vertically")
	parser.add_argument('-i', '--input', dest='input_file', required=True,
		help='path to input image')
	parser.add_argument('-o', '--output', dest='output_file', required=True,
		help='path to output image, overwritten if it exists')
	parser.add_argument('--dx', dest='delta_x', type=utils.finite_float_arg,
		required=True, help='horizontal distance to translate per frame')
	parser.add_argument('--dy', dest='delta_y', type=utils.finite_float_arg,
		required=True, help='vertical distance to translate per frame')
	parser.add_argument('-x', '--x-start', dest='x', type=utils.unsigned_int_arg,
		required=True, help='x origin of the first frame')
	parser.add_argument('-y', '--y-start', dest='y', type=utils.unsigned_int_arg,
		required=True, help='y origin of the first frame')
	parser.add_argument('--fw', dest='frame_width', type=utils.positive_int_arg,
		required=True, help='width of a frame')
	parser.add_argument('--fh', dest='frame_height', type=utils.positive_int_arg,
		required=True, help='height of a frame')
	parser.add_argument('-m', '--max-frames', dest='max_frames',
		type=utils.positive_int_arg, default=DEFAULT_MAX_FRAMES,
		help='maximum number of frames to generate')
	parser.add_argument('-n', '--dry-run', dest='dry_run', action='store_true',
		help='validate and plan only, do not write the output image')
	parser.add_argument('-p', '--dump-plan', dest='dump_plan', action='store_true',
		help='print the planned frame windows as yaml and exit')
	parser.add_argument('-q', '--quiet', dest='quiet', action='store_true',
		help='hide the progress bar')
	parser.set_defaults(dry_run=False)
	parser.set_defaults(dump_plan=False)
	parser.set_defaults(quiet=False)
	args = parser.parse_args(argv)
	return args

#============================================

def main(argv: list = None):
	args = parse_args(argv)
	config = RunConfig.from_args(args)
	project = FramewalkProject(config)
	if config.dump_plan:
		print(yaml.safe_dump(project.plan_document(), sort_keys=False))
		return
	project.run()


if __name__ == '__main__':
	main()
