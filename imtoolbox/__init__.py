# -*- coding: utf-8 -*-
"""
imtoolbox - Image quantization and local statistics on numpy arrays.

Two independent transforms over 2D images and multi-band stacks:
threshold quantization (``quantize``) and local standard deviation
filtering (``local_std_dev``). Images come in and go out as
``numpy.ndarray``; decoding and display are left to the caller.

Dependencies
------------
numpy
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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from imtoolbox.exceptions import (
    ImtoolboxError,
    SizeMismatchError,
    TypeMismatchError,
    ValidationError,
)
from imtoolbox.vocabulary import ImageModality, ProcessorCategory
from imtoolbox.image_processing import (
    DEFAULT_NEIGHBORHOOD,
    LevelQuantizer,
    StdDevFilter,
    local_std_dev,
    quantize,
)

__all__ = [
    'ImtoolboxError',
    'ValidationError',
    'SizeMismatchError',
    'TypeMismatchError',
    'ImageModality',
    'ProcessorCategory',
    'DEFAULT_NEIGHBORHOOD',
    'LevelQuantizer',
    'StdDevFilter',
    'local_std_dev',
    'quantize',
]
