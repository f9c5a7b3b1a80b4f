import os
import logging
from interface.argtypes import log_level
from utilities.stdio import eprint

env_var = "STITCHER_LOG"
default_level = logging.ERROR

def configure_logging(environ=os.environ):
	value = environ.get(env_var)
	try:
		level = default_level if value is None else log_level(value)
	except ValueError:
		eprint(f"Unknown {env_var} value: {value} (expected trace, debug, info, warn, error or off)")
		level = default_level
	logging.basicConfig(level=level)
	logging.getLogger().setLevel(level)
	return level
