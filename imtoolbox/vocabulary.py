# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for imtoolbox processor tagging.

Controlled vocabularies for image modalities and processor categories,
consumed by ``@processor_tags`` so tag values stay typo-free.

Author
------
Steven Siebert

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

from enum import Enum


class ImageModality(Enum):
    """Image layouts a processor is designed for."""

    GRAYSCALE = "grayscale"
    COLOR = "color"
    MULTIBAND = "multiband"


class ProcessorCategory(Enum):
    """Processing categories for processor tagging."""

    FILTERS = "filters"
    THRESHOLD = "threshold"
