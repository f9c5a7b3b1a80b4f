import os
import os.path

def mkdirs(dirpath):
	if dirpath:
		os.makedirs(os.path.normpath(dirpath), exist_ok=True)

def occupied(filepath):
	return os.path.lexists(filepath)
