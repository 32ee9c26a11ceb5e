# -*- coding: utf-8 -*-
"""
Image Processing Module - Pixel-wise and neighborhood image transforms.

All processors inherit from ``ImageProcessor``, which provides version
checking and ``typing.Annotated`` tunable parameters resolved per call.

Sub-modules
-----------
threshold/
    Multilevel quantization -- ``LevelQuantizer``, ``quantize``.
filters/
    Neighborhood statistics -- ``StdDevFilter``, ``local_std_dev``.
    Auto-handles 3D band stacks via ``BandwiseTransformMixin``.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
params.py
    ``Options`` and ``Desc`` markers for processor configuration
    declared as ``Annotated`` class fields.

Usage
-----
    >>> import numpy as np
    >>> from imtoolbox.image_processing import quantize, local_std_dev
    >>>
    >>> labels = quantize(image, levels=[78, 143])
    >>> texture = local_std_dev(image, neighborhood=np.ones((5, 5)))

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

from imtoolbox.image_processing.base import (
    BandwiseTransformMixin,
    ImageProcessor,
    ImageTransform,
)
from imtoolbox.image_processing.params import Desc, Options, ParamSpec
from imtoolbox.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from imtoolbox.image_processing.filters import (
    DEFAULT_NEIGHBORHOOD,
    StdDevFilter,
    local_std_dev,
)
from imtoolbox.image_processing.threshold import LevelQuantizer, quantize

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'BandwiseTransformMixin',
    'Options',
    'Desc',
    'ParamSpec',
    'processor_version',
    'processor_tags',
    'DEFAULT_NEIGHBORHOOD',
    'StdDevFilter',
    'local_std_dev',
    'LevelQuantizer',
    'quantize',
]
