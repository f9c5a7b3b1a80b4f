from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
from interface.argtypes import natural

class CustomArgumentParser(ArgumentParser):

	def __init__(self, description, version=None):
		super().__init__(allow_abbrev=False, description=description, formatter_class=ArgumentDefaultsHelpFormatter)
		if version is not None:
			self.add_argument("--version", action="version", version=f"%(prog)s {version}")

	def add_output_args(self):
		group = self.add_argument_group("output arguments")
		group.add_argument("-o", "--output", metavar="FILE", help="write the stitched PNG image to FILE (defaults to PREFIX-out.png with --using)")
		group.add_argument("-f", "--force", action="store_true", help="allow overwrite existing files")
		group.add_argument("-q", "--quiet", action="store_true", help="suppress the progress bar and the written file path")
		return self

	def add_naming_args(self):
		group = self.add_argument_group("naming convention arguments")
		group.add_argument("-u", "--using", metavar="PREFIX", help="use naming convention to determine input files (PREFIX-tl.png, PREFIX-tr.png, PREFIX-bl.png, PREFIX-br.png)")
		return self

	def add_corner_args(self):
		group = self.add_argument_group("explicit corner arguments")
		group.add_argument("-l", "--top-left", metavar="FILE", dest="top_left", help="set the top left image")
		group.add_argument("-t", "--top-right", metavar="FILE", dest="top_right", help="set the top right image")
		group.add_argument("-b", "--bottom-left", metavar="FILE", dest="bottom_left", help="set the bottom left image")
		group.add_argument("-r", "--bottom-right", metavar="FILE", dest="bottom_right", help="set the bottom right image")
		return self

	def add_grid_args(self):
		group = self.add_argument_group("grid arguments")
		group.add_argument("-g", "--grid", metavar=("COLS", "ROWS"), type=natural, nargs=2, help="tile the FILE arguments into a COLS by ROWS grid in row-major order")
		group.add_argument("files", metavar="FILE", nargs="*", help="input image for --grid (left to right, top to bottom)")
		return self
