CORNER_SUFFIXES = ("-tl", "-tr", "-bl", "-br")
OUTPUT_SUFFIX = "-out"
EXTENSION = "png"

def corner_filepaths(prefix, ext=EXTENSION):
	"""Input paths of the four-corner naming convention in top-left, top-right, bottom-left, bottom-right order."""
	return [f"{prefix}{s}.{ext}" for s in CORNER_SUFFIXES]

def output_filepath(prefix, ext=EXTENSION):
	return f"{prefix}{OUTPUT_SUFFIX}.{ext}"
