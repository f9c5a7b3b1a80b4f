import logging
from itertools import product
from numpy import zeros, uint8
from stitcher.raster import Raster
from stitcher.errors import StitchError, ErrorKind

logger = logging.getLogger(__name__)

def validate_uniform_size(rasters):
	"""Return the (width, height) shared by all rasters, taking the first one as reference."""
	rasters = iter(rasters)
	first = next(rasters, None)
	if first is None:
		raise StitchError(ErrorKind.SIZE_MISMATCH, "no images to take the cell size from")
	width, height = first.size
	for i, raster in enumerate(rasters, 1):
		if raster.size != (width, height):
			raise StitchError(ErrorKind.SIZE_MISMATCH, f"image {i} is {raster.width}x{raster.height}, expected {width}x{height}")
	return width, height

def check_arity(count, columns, rows):
	if columns < 1 or rows < 1 or count != columns * rows:
		raise StitchError(ErrorKind.GRID_ARITY_MISMATCH, f"{count} images supplied for a {columns}x{rows} grid")

def compose(rasters, columns, rows):
	"""Tile rasters in row-major order into one columns by rows raster.

	The first raster defines the cell size; cell (r, c) takes rasters[r * columns + c]
	and is placed at pixel offset (c * width, r * height) without blending.
	"""
	rasters = list(rasters)
	check_arity(len(rasters), columns, rows)
	width, height = validate_uniform_size(rasters)
	canvas = zeros((height * rows, width * columns, Raster.channels), dtype=uint8)
	for r, c in product(range(rows), range(columns)):
		x, y = c * width, r * height
		canvas[y:y + height, x:x + width] = rasters[r * columns + c].pixels
		logger.debug(f"placed image {r * columns + c} at ({x}, {y})")
	return Raster(canvas, copy=False)

def compose_corners(top_left, top_right, bottom_left, bottom_right):
	return compose([top_left, top_right, bottom_left, bottom_right], 2, 2)
