# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Neighborhood mask validation.

Validates the binary masks that select which neighbor offsets take part
in a local statistic. Checks run in a fixed order (channel count, entry
values, dimension parity) and each failure carries its own message.

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
from typing import Optional, Tuple

# Third-party
import numpy as np

# imtoolbox internal
from imtoolbox.exceptions import ValidationError
from imtoolbox.image_processing._arrays import is_real_numeric


#: Neighborhood used when none is given: the 3x3 square around each pixel.
DEFAULT_NEIGHBORHOOD = np.ones((3, 3), dtype=np.float64)
DEFAULT_NEIGHBORHOOD.setflags(write=False)


def validate_neighborhood(
    neighborhood: Optional[np.ndarray] = None,
) -> Tuple[np.ndarray, int]:
    """Validate a binary neighborhood mask and count its active cells.

    Parameters
    ----------
    neighborhood : array_like, optional
        Mask of zeros and ones; ones mark participating neighbors. A 1D
        mask is treated as a single row and a ``(rows, cols, 1)`` mask as
        single-channel. ``None`` selects ``DEFAULT_NEIGHBORHOOD``.

    Returns
    -------
    mask : np.ndarray
        float64 copy of the mask, shape ``(rows, cols)``.
    weight : int
        Number of ones in the mask.

    Raises
    ------
    ValidationError
        ``"invalid neighborhood type"`` if the mask is not single-channel,
        ``"invalid neighborhood value"`` if an entry is not exactly 0 or 1,
        ``"invalid neighborhood size"`` if a dimension is even.
    """
    if neighborhood is None:
        neighborhood = DEFAULT_NEIGHBORHOOD
    h = np.asarray(neighborhood)

    if h.ndim == 1:
        h = h[np.newaxis, :]
    elif h.ndim == 3 and h.shape[-1] == 1:
        h = h[..., 0]
    if h.ndim != 2:
        raise ValidationError(
            f"invalid neighborhood type: mask must be single-channel 2D, "
            f"got shape {h.shape}"
        )

    if not is_real_numeric(h.dtype) or not np.all((h == 0) | (h == 1)):
        raise ValidationError(
            "invalid neighborhood value: mask entries must be 0 or 1"
        )

    if any(size % 2 == 0 for size in h.shape):
        raise ValidationError(
            f"invalid neighborhood size: mask dimensions must be odd, "
            f"got shape {h.shape}"
        )

    mask = h.astype(np.float64)
    return mask, int(mask.sum())
