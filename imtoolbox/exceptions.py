# -*- coding: utf-8 -*-
"""
imtoolbox Exception Hierarchy - Domain-specific exceptions for image operations.

Lets callers catch imtoolbox input errors distinctly from Python built-in
exceptions. Every exception subclasses both ``ImtoolboxError`` and the
matching built-in exception, so ``except ValueError`` keeps working.

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


class ImtoolboxError(Exception):
    """Base exception for all imtoolbox errors."""


class ValidationError(ImtoolboxError, ValueError):
    """Malformed shape or content of an image, levels, values, or mask.

    Raised when levels/values are not one-dimensional, a neighborhood
    mask is not single-channel, holds non-binary entries, or has an
    even dimension.
    """


class SizeMismatchError(ImtoolboxError, ValueError):
    """Output values do not number exactly one more than the levels."""


class TypeMismatchError(ImtoolboxError, TypeError):
    """Image and levels/values use element kinds that cannot be compared.

    Raised for complex, string, object, or other non-real-numeric
    dtypes.
    """
