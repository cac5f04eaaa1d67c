import numpy as np
import pytest

from boxpic.source import ArraySource

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def _array_source(rows):
    """Build a source from rows of RGB(A) tuples; an empty list gives a 0x0 source."""
    if not rows:
        return ArraySource(np.zeros((0, 0, 4), dtype=np.uint8))
    return ArraySource(np.array(rows, dtype=np.uint8))


@pytest.fixture
def make_source():
    return _array_source
