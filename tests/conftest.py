# -*- coding: utf-8 -*-
"""
Shared pytest fixtures - Synthetic images for filter and threshold tests.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import numpy as np
import pytest


@pytest.fixture
def flat_image():
    """Constant-valued 50x50 float64 image."""
    return np.full((50, 50), 10.0)


@pytest.fixture
def random_image():
    """Reproducible 40x60 float64 image with values in [0, 100)."""
    rng = np.random.RandomState(42)
    return rng.rand(40, 60) * 100.0


@pytest.fixture
def step_edge_image():
    """40x80 image, 10.0 left of column 40 and 100.0 from it on."""
    image = np.full((40, 80), 10.0)
    image[:, 40:] = 100.0
    return image


@pytest.fixture
def gradient_uint8():
    """16x16 uint8 image covering 0..255 in row-major order."""
    return np.arange(256, dtype=np.uint8).reshape(16, 16)
