from __future__ import annotations

import numpy as np
import pytest

from hexcoords import Hex


@pytest.fixture
def random_hexes() -> list[Hex]:
    rng = np.random.default_rng(20240611)
    pairs = rng.integers(-60, 61, size=(200, 2))
    return [Hex(int(x), int(y)) for x, y in pairs]
