# -*- coding: utf-8 -*-
"""
Spatial Filters - Neighborhood statistics over single- or multi-band rasters.

Filters inherit from ``BandwiseTransformMixin`` and ``ImageTransform``,
so 3D band stacks are filtered one band at a time.

Statistical Filters
    ``StdDevFilter`` / ``local_std_dev`` -- local standard deviation over a
    binary neighborhood mask with reflected borders

Dependencies
------------
scipy

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

from imtoolbox.image_processing.filters._validation import (
    DEFAULT_NEIGHBORHOOD,
    validate_neighborhood,
)
from imtoolbox.image_processing.filters.statistical import (
    StdDevFilter,
    local_std_dev,
)

__all__ = [
    'DEFAULT_NEIGHBORHOOD',
    'StdDevFilter',
    'local_std_dev',
    'validate_neighborhood',
]
