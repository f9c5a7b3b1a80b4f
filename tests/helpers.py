from numpy import full, uint8, arange
from PIL import Image
from stitcher.raster import Raster

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
YELLOW = (255, 255, 0, 255)

def solid(color, width=2, height=2):
	return Raster(full((height, width, 4), color, dtype=uint8))

def gradient(width, height, offset=0):
	values = (arange(width * height * 4) + offset) % 256
	return Raster(values.reshape(height, width, 4).astype(uint8))

def write_image(filepath, color, size=(2, 2), mode="RGBA"):
	Image.new(mode, size, color).save(filepath)
	return str(filepath)

