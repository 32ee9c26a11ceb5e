# -*- coding: utf-8 -*-
"""
Thresholding - Multilevel quantization of image samples.

``LevelQuantizer`` / ``quantize`` map every sample to one of ``n + 1``
bins split by ``n`` thresholds, emitting the bin index or a caller-chosen
output value per bin.

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

from imtoolbox.image_processing.threshold._validation import (
    default_values,
    sanitize_levels,
    sanitize_values,
)
from imtoolbox.image_processing.threshold.quantize import (
    LevelQuantizer,
    quantize,
)

__all__ = [
    'LevelQuantizer',
    'quantize',
    'sanitize_levels',
    'sanitize_values',
    'default_values',
]
