from PIL import Image
from numpy import asarray, uint8

def to_rgba_array(img):
	return asarray(img.convert("RGBA"), dtype=uint8)

def to_pil_image(array):
	return Image.fromarray(asarray(array, dtype=uint8), "RGBA")
