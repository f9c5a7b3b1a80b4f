from numpy import array, asarray, uint8

class Raster:
	"""Immutable RGBA pixel buffer of shape (height, width, 4).

	The buffer is copied unless copy is off, in which case the caller hands
	its array over and it is frozen in place.
	"""

	channels = 4

	def __init__(self, pixels, copy=True):
		pixels = array(pixels, dtype=uint8, copy=True) if copy else asarray(pixels, dtype=uint8)
		if pixels.ndim != 3 or pixels.shape[2] != Raster.channels:
			raise ValueError(f"RGBA pixel buffer expected, got shape {pixels.shape}")
		pixels.flags.writeable = False
		self.pixels = pixels

	def __repr__(self):
		return f"Raster({self.width}x{self.height})"

	def __eq__(self, other):
		if not isinstance(other, Raster):
			return NotImplemented
		return self.pixels.shape == other.pixels.shape and bool((self.pixels == other.pixels).all())

	__hash__ = None

	@property
	def width(self):
		return self.pixels.shape[1]

	@property
	def height(self):
		return self.pixels.shape[0]

	@property
	def size(self):
		return self.width, self.height

	def tobytes(self):
		return self.pixels.tobytes()
