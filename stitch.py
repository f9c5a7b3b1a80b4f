#!/usr/bin/env python3

from sys import exit
from interface.args import CustomArgumentParser
from interface.logs import configure_logging
from interface.stdout import progress_tqdm
from stitcher.errors import StitchError, argument_error
from stitcher.pipeline import stitch, stitch_corners, stitch_files
from utilities.stdio import eprint

version = "0.1.0"

def main(args):
	with progress_tqdm(desc="loading", total=count_inputs(args), disable=args.quiet) as bar:
		if args.using is not None:
			filepath = stitch(args.using, args.output, args.force, bar.update)
		elif args.grid is not None:
			filepath = stitch_files(args.files, *args.grid, args.output, args.force, bar.update)
		else:
			filepath = stitch_corners(*corners(args), args.output, args.force, bar.update)
	if not args.quiet:
		print(filepath)
	return filepath

def corners(args):
	return [args.top_left, args.top_right, args.bottom_left, args.bottom_right]

def count_inputs(args):
	return len(args.files) if args.grid is not None else 4

def check_args(args):
	given = [c is not None for c in corners(args)]
	modes = sum([args.using is not None, any(given), args.grid is not None])
	if modes == 0:
		raise argument_error("either specify a common --using prefix, all four corner images, or a --grid with its images")
	if modes > 1:
		raise argument_error("--using, corner images and --grid are mutually exclusive")
	if args.output == "":
		raise argument_error("output filename is empty")
	if args.files and args.grid is None:
		raise argument_error("positional images are only accepted with --grid")
	if any(given) and not (all(given) and args.output is not None):
		raise argument_error("either specify a common --using prefix or explicitly specify all four input images and an output filename")
	if args.grid is not None:
		columns, rows = args.grid
		if args.output is None:
			raise argument_error("--grid requires an output filename")
		if len(args.files) != columns * rows:
			raise argument_error(f"a {columns}x{rows} grid needs {columns * rows} images, got {len(args.files)}")
	return args

def parse_args(argv=None):
	parser = CustomArgumentParser("Stitch equally sized images into one image laid out as a grid", version)
	parser.add_naming_args().add_corner_args().add_grid_args().add_output_args()
	return parser.parse_args(argv)

def run(argv=None):
	configure_logging()
	try:
		main(check_args(parse_args(argv)))
	except StitchError as e:
		eprint(f"Error: {e}")
		return 1
	except KeyboardInterrupt:
		eprint("KeyboardInterrupt")
		return 130
	return 0


if __name__ == "__main__":
	exit(run())
