# -*- coding: utf-8 -*-
"""
Statistical Filter - Local standard deviation over an arbitrary neighborhood.

Computes the sample standard deviation of every pixel's neighborhood from
two ``scipy.ndimage.correlate`` passes (sum of squares and sum) instead of
a per-pixel ``generic_filter``, so the cost does not depend on how the
neighborhood is shaped. Borders are extended by mirror reflection.

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

# Standard library
import logging
from typing import Annotated, Any, Optional

# Third-party
import numpy as np
from scipy.ndimage import correlate

# imtoolbox internal
from imtoolbox.image_processing._arrays import to_working_float
from imtoolbox.image_processing.base import BandwiseTransformMixin, ImageTransform
from imtoolbox.image_processing.params import Desc, Options
from imtoolbox.image_processing.versioning import processor_tags, processor_version
from imtoolbox.image_processing.filters._validation import validate_neighborhood
from imtoolbox.vocabulary import ImageModality, ProcessorCategory

logger = logging.getLogger(__name__)


@processor_version('1.0.0')
@processor_tags(
    modalities=[ImageModality.GRAYSCALE, ImageModality.COLOR,
                ImageModality.MULTIBAND],
    category=ProcessorCategory.FILTERS,
    description='Local standard deviation over a binary neighborhood',
)
class StdDevFilter(BandwiseTransformMixin, ImageTransform):
    """Local standard deviation filter.

    For every pixel, returns the sample standard deviation (``w - 1``
    normalization) of the pixels selected by a binary neighborhood mask
    centered on it. With ``C`` the reflect-border correlation with the
    mask and ``w`` the number of ones in it::

        var = C(I * I) / (w - 1) - C(I)**2 / (w * (w - 1))
        out = sqrt(max(var, 0))

    Integer images are first rescaled into ``[0, 1]`` by the maximum of
    their dtype, so the result is float64 for them. float32 and float64
    images are filtered as-is and keep their dtype.

    A neighborhood with a single active cell has no spread: the output is
    all zeros.

    Parameters
    ----------
    neighborhood : array_like, optional
        Binary mask with odd dimensions. ``None`` (the default) selects
        ``DEFAULT_NEIGHBORHOOD``, the 3x3 all-ones mask.
    channel_axis : int
        Band axis of 3D inputs, ``0`` for ``(bands, rows, cols)`` or
        ``-1`` for ``(rows, cols, bands)``. Default is ``0``.

    Raises
    ------
    ValidationError
        If *neighborhood* is not a valid binary mask.

    Examples
    --------
    >>> from imtoolbox.image_processing.filters import StdDevFilter
    >>> f = StdDevFilter(neighborhood=np.ones((5, 5)))
    >>> texture = f.apply(image)
    """

    neighborhood: Annotated[object, Desc('Binary neighborhood mask, odd '
                                         'dimensions (None: 3x3 square)')] = None
    channel_axis: Annotated[int, Options(0, -1),
                            Desc('Band axis of 3D inputs')] = 0

    def __init__(
        self,
        neighborhood: Optional[np.ndarray] = None,
        channel_axis: int = 0,
    ) -> None:
        validate_neighborhood(neighborhood)
        if neighborhood is not None:
            neighborhood = np.array(neighborhood, copy=True)
        self.neighborhood = neighborhood
        self.channel_axis = channel_axis
        self._resolve_params({})

    def _apply_2d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the local standard deviation filter to a single 2D band.

        Parameters
        ----------
        source : np.ndarray
            2D image array, shape ``(rows, cols)``.

        Returns
        -------
        np.ndarray
            Local standard deviation, same shape, floating dtype.
        """
        params = self._resolve_params(kwargs)
        mask, weight = validate_neighborhood(params['neighborhood'])

        image = to_working_float(source)
        if weight <= 1:
            logger.debug("Neighborhood weight %d, returning zeros", weight)
            return np.zeros(image.shape, dtype=image.dtype)

        w1 = weight - 1
        mean_sq = correlate(image * image, mask, mode='reflect') / w1
        total = correlate(image, mask, mode='reflect')
        sq_mean = total * total / (weight * w1)

        variance = mean_sq - sq_mean
        # Rounding can push flat neighborhoods slightly below zero
        np.maximum(variance, 0, out=variance)
        return np.sqrt(variance)


def local_std_dev(
    image: np.ndarray,
    neighborhood: Optional[np.ndarray] = None,
    channel_axis: int = 0,
) -> np.ndarray:
    """Local standard deviation of every pixel's neighborhood.

    Functional form of :class:`StdDevFilter`.

    Parameters
    ----------
    image : np.ndarray
        2D ``(rows, cols)`` image or 3D band stack.
    neighborhood : array_like, optional
        Binary mask with odd dimensions. Default is
        ``DEFAULT_NEIGHBORHOOD`` (3x3 all ones).
    channel_axis : int
        Band axis of 3D inputs, ``0`` or ``-1``. Default is ``0``.

    Returns
    -------
    np.ndarray
        Newly allocated array of the input's shape, float dtype.
    """
    f = StdDevFilter(neighborhood=neighborhood, channel_axis=channel_axis)
    return f.apply(image)
