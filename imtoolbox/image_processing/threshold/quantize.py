# -*- coding: utf-8 -*-
"""
Multilevel Quantization - Map image samples to bins defined by thresholds.

``LevelQuantizer`` assigns every sample to one of ``n + 1`` bins split
by ``n`` ascending thresholds and replaces it with that bin's output
value. Outputs default to the bin index ``0..n``. Bins are half-open,
``(t[i-1], t[i]]``: a sample equal to a threshold stays in the lower bin.

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

# Standard library
import logging
from typing import Annotated, Any, Optional

# Third-party
import numpy as np

# imtoolbox internal
from imtoolbox.image_processing._arrays import validate_image
from imtoolbox.image_processing.base import ImageTransform
from imtoolbox.image_processing.params import Desc
from imtoolbox.image_processing.versioning import processor_tags, processor_version
from imtoolbox.image_processing.threshold._validation import (
    default_values,
    sanitize_levels,
    sanitize_values,
)
from imtoolbox.vocabulary import ImageModality, ProcessorCategory

logger = logging.getLogger(__name__)


def _apply_levels(
    image: np.ndarray,
    thresholds: np.ndarray,
    outputs: np.ndarray,
) -> np.ndarray:
    """Accumulate each sample's bin output.

    ``thresholds`` must be sorted ascending and ``outputs`` hold one more
    entry. Every sample starts at ``outputs[0]`` and gains
    ``outputs[i + 1] - outputs[i]`` for each threshold ``t[i]`` it strictly
    exceeds, so it ends on the output of its bin. NaN exceeds nothing and
    stays at ``outputs[0]``.

    The sum runs in float64 and is cast back to ``outputs.dtype``. Integer
    outputs are therefore exact only up to ``2**53`` in magnitude; larger
    int64/uint64 values round to the nearest float64.
    """
    samples = image.astype(np.float64)
    wide = outputs.astype(np.float64)
    out = np.full(samples.shape, wide[0])
    for i, t in enumerate(thresholds.astype(np.float64)):
        out += (samples > t) * (wide[i + 1] - wide[i])
    return out.astype(outputs.dtype)


@processor_version('1.0.0')
@processor_tags(
    modalities=[ImageModality.GRAYSCALE, ImageModality.COLOR,
                ImageModality.MULTIBAND],
    category=ProcessorCategory.THRESHOLD,
    description='Quantize samples into bins split by sorted thresholds',
)
class LevelQuantizer(ImageTransform):
    """Quantize an image with a set of thresholds.

    With thresholds sorted to ``t[0] <= ... <= t[n-1]``, a sample ``x``
    receives ``values[m]`` for the smallest ``m`` with ``x <= t[m]``, or
    ``values[n]`` when ``x`` exceeds every threshold. Thresholds and
    values are shared by all bands of a multi-band image.

    Parameters
    ----------
    levels : array_like
        ``n >= 1`` finite thresholds, as a flat sequence, ``(1, n)`` row
        or ``(n, 1)`` column. Order does not matter.
    values : array_like, optional
        ``n + 1`` bin outputs, any one-dimensional layout. The output
        image takes their dtype. Default ``None`` gives ``0..n`` in the
        image's dtype. Outputs are accumulated in float64, so int64 and
        uint64 values beyond ``2**53`` lose their low bits.

    Raises
    ------
    ValidationError
        If *levels* or *values* is not one-dimensional.
    SizeMismatchError
        If *values* does not hold ``n + 1`` entries.
    TypeMismatchError
        If *levels* or *values* is not real numeric.

    Examples
    --------
    >>> q = LevelQuantizer(levels=[78, 143], values=[4, 9, 25])
    >>> q.apply(np.array([[50, 100, 200]], dtype=np.uint8))
    array([[ 4,  9, 25]])
    """

    levels: Annotated[object, Desc('Thresholds, one-dimensional')]
    values: Annotated[object, Desc('Bin outputs, one more than levels '
                                   '(None: 0..n)')] = None

    def __init__(
        self,
        levels: np.ndarray,
        values: Optional[np.ndarray] = None,
    ) -> None:
        thresholds = sanitize_levels(levels)
        if values is not None:
            sanitize_values(values, thresholds.size)
            values = np.array(values, copy=True)
        self.levels = np.array(levels, copy=True)
        self.values = values

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Quantize *source*.

        Parameters
        ----------
        source : np.ndarray
            2D image or 3D band stack, real numeric dtype.
        **kwargs
            Per-call ``levels`` / ``values`` overrides.

        Returns
        -------
        np.ndarray
            New array of *source*'s shape with the dtype of the values.
        """
        params = self._resolve_params(kwargs)
        image = validate_image(source, name='source')
        thresholds = sanitize_levels(params['levels'])
        n = thresholds.size
        if params['values'] is None:
            outputs = default_values(n, image.dtype)
        else:
            outputs = sanitize_values(params['values'], n)

        logger.debug("Quantizing %s %s image into %d bins",
                     image.shape, image.dtype, n + 1)
        return _apply_levels(image, thresholds, outputs)


def quantize(
    image: np.ndarray,
    levels: np.ndarray,
    values: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Quantize *image* into ``len(levels) + 1`` bins.

    Functional form of :class:`LevelQuantizer`.

    Parameters
    ----------
    image : np.ndarray
        2D image or 3D band stack.
    levels : array_like
        Thresholds, any one-dimensional layout and order.
    values : array_like, optional
        Bin outputs. Default is the bin index in the image's dtype.

    Returns
    -------
    np.ndarray
        Quantized image, dtype of *values*.
    """
    return LevelQuantizer(levels=levels, values=values).apply(image)
