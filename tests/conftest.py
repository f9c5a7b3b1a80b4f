import pytest
from tests.helpers import write_image, RED, GREEN, BLUE, YELLOW

@pytest.fixture
def corner_files(tmp_path):
	colors = [RED, GREEN, BLUE, YELLOW]
	return [write_image(tmp_path / f"art{s}.png", c) for s, c in zip(["-tl", "-tr", "-bl", "-br"], colors)]
