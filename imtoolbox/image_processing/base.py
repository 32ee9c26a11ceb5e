# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for image processors.

Defines ``ImageProcessor``, the common base of every processor, the
``ImageTransform`` ABC for dense raster transforms, and
``BandwiseTransformMixin`` which applies a 2D implementation to each band
of a multi-channel stack. ``ImageProcessor`` warns once per class about a
missing processor version and turns ``typing.Annotated`` class fields
into tunable parameters resolved at call time through ``**kwargs``.

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
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# imtoolbox internal
from imtoolbox.image_processing._arrays import validate_image
from imtoolbox.image_processing.params import ParamSpec, collect_param_specs

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: concrete subclasses without a
    ``@processor_version`` declaration trigger a ``UserWarning`` at first
    instantiation. The check runs in ``__new__`` so that class decorators
    have already been applied.

    **Tunable parameters**: subclasses declare configuration as
    ``typing.Annotated`` class-body fields using the markers from
    :mod:`imtoolbox.image_processing.params`. The class attribute is the
    documented default. ``__init_subclass__`` collects the fields into
    ``__param_specs__`` and ``_resolve_params(kwargs)`` merges instance
    values with per-call overrides.
    """

    # Classes already checked, so each warns only once.
    _version_warned_classes: set = set()

    #: Tuple of :class:`~imtoolbox.image_processing.params.ParamSpec`
    #: collected from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance values with runtime *kwargs* overrides.

        Each declared parameter takes the *kwargs* value when present and
        the instance attribute otherwise; every resolved value is then
        validated against its spec. Keys in *kwargs* that are not
        declared parameters are ignored.

        Parameters
        ----------
        kwargs : Dict[str, Any]
            Runtime keyword arguments.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValueError
            If a value violates range or choices constraints.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            else:
                value = getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved


class ImageTransform(ImageProcessor):
    """
    Abstract base class for image transforms.

    A transform maps a source image array to a newly allocated output
    array. Subclasses implement ``apply`` and must not write to
    *source*.
    """

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """
        Apply the transform to a source image array.

        Parameters
        ----------
        source : np.ndarray
            Input image, ``(rows, cols)`` or a 3D band stack.

        Returns
        -------
        np.ndarray
            Transformed image.
        """
        ...


class BandwiseTransformMixin:
    """Mixin that applies a 2D transform to every band of a 3D stack.

    Mixed into an ``ImageTransform`` subclass, this provides ``apply()``:
    2D inputs go straight to ``_apply_2d()``; 3D inputs are split along
    the channel axis, each band is transformed independently, and the
    results are stacked back along the same axis.

    The channel axis is the resolved ``channel_axis`` tunable parameter
    (a per-call keyword argument or the instance value), or ``0``
    (``(bands, rows, cols)`` layout) when the processor declares none.

    Usage
    -----
    ::

        class MyFilter(BandwiseTransformMixin, ImageTransform):
            def _apply_2d(self, source, **kwargs):
                ...
    """

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the transform, handling both 2D and 3D inputs.

        Parameters
        ----------
        source : np.ndarray
            2D ``(rows, cols)`` or 3D band stack.

        Returns
        -------
        np.ndarray
            Transformed image with the same shape as *source*.
        """
        source = validate_image(source, name='source')
        if source.ndim == 2:
            return self._apply_2d(source, **kwargs)

        params = self._resolve_params(kwargs)
        axis = params.get('channel_axis', 0)
        bands = np.moveaxis(source, axis, 0)
        logger.debug("%s: applying to %d bands along axis %d",
                     type(self).__qualname__, bands.shape[0], axis)
        result = np.stack([self._apply_2d(band, **kwargs) for band in bands])
        return np.moveaxis(result, 0, axis)

    @abstractmethod
    def _apply_2d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the transform to a single 2D band."""
        ...
