from enum import Enum

class ErrorKind(Enum):

	ARGUMENT = "invalid arguments"
	DECODE = "image decode failed"
	SIZE_MISMATCH = "image size mismatch"
	GRID_ARITY_MISMATCH = "grid arity mismatch"
	ENCODE = "image encode failed"

class StitchError(RuntimeError):
	"""Single failure type of the stitcher, tagged with an ErrorKind and an optional underlying cause."""

	def __init__(self, kind, message="", cause=None):
		super().__init__(kind, message)
		self.kind = kind
		self.message = message
		self.cause = cause

	def __str__(self):
		if self.message:
			return f"{self.kind.value}: {self.message}"
		return self.kind.value

def argument_error(message):
	return StitchError(ErrorKind.ARGUMENT, message)

def decode_error(filepath, cause):
	return StitchError(ErrorKind.DECODE, f"{filepath} ({cause})", cause)

def encode_error(filepath, cause):
	return StitchError(ErrorKind.ENCODE, f"{filepath} ({cause})", cause)
