import logging
from os.path import dirname
from PIL import Image, UnidentifiedImageError
from stitcher.raster import Raster
from stitcher.errors import decode_error, encode_error
from utilities.image import to_rgba_array, to_pil_image
from utilities.filesys import mkdirs

logger = logging.getLogger(__name__)

def open_raster(filepath):
	try:
		with Image.open(filepath) as img:
			raster = Raster(to_rgba_array(img))
	except (OSError, UnidentifiedImageError, Image.DecompressionBombError, SyntaxError, ValueError) as e:
		raise decode_error(filepath, e) from e
	logger.debug(f"decoded {filepath} ({raster.width}x{raster.height})")
	return raster

def save_raster(raster, filepath, format="PNG"):
	try:
		mkdirs(dirname(filepath))
		to_pil_image(raster.pixels).save(filepath, format=format)
	except (OSError, ValueError, KeyError) as e:
		raise encode_error(filepath, e) from e
	logger.debug(f"encoded {filepath} ({raster.width}x{raster.height})")
	return filepath
