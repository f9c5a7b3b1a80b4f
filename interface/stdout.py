from tqdm import tqdm

bar_format = "{desc} [{bar}] {percentage:5.1f}%"

def progress_tqdm(desc, total, disable=False):
	return tqdm(desc=desc, total=total, bar_format=bar_format, miniters=1, ascii=".#", ncols=70, disable=disable)
