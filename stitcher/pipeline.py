import logging
from stitcher.codec import open_raster, save_raster
from stitcher.compositor import check_arity, compose
from stitcher.errors import argument_error
from stitcher.naming import corner_filepaths, output_filepath
from utilities.filesys import occupied

logger = logging.getLogger(__name__)

def check_output(output, force=False):
	if not output:
		raise argument_error("output filename is empty")
	if not force and occupied(output):
		raise argument_error(f"{output} already exists (pass --force to overwrite it)")

def load_rasters(filepaths, callback=None):
	rasters = []
	for f in filepaths:
		rasters.append(open_raster(f))
		if callback:
			callback()
	return rasters

def stitch_files(filepaths, columns, rows, output, force=False, callback=None):
	"""Decode filepaths, tile them row-major into a columns by rows grid and write the result to output.

	An existing output is only replaced when force is on; otherwise the call fails before decoding.
	Nothing is written unless every image decodes and all of them share one size.
	"""
	filepaths = list(filepaths)
	logger.info(f"stitch_files: {filepaths} {columns}x{rows} -> {output}")
	check_arity(len(filepaths), columns, rows)
	check_output(output, force)
	canvas = compose(load_rasters(filepaths, callback), columns, rows)
	return save_raster(canvas, output)

def stitch_corners(top_left, top_right, bottom_left, bottom_right, output, force=False, callback=None):
	return stitch_files([top_left, top_right, bottom_left, bottom_right], 2, 2, output, force, callback)

def stitch(prefix, output=None, force=False, callback=None):
	logger.info(f"stitch: {prefix}")
	if output is None:
		output = output_filepath(prefix)
	return stitch_corners(*corner_filepaths(prefix), output, force, callback)
