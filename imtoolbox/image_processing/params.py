# -*- coding: utf-8 -*-
"""
Processor Parameters - Declarative configuration for imtoolbox processors.

A processor declares its configuration as ``typing.Annotated`` class
fields. ``Desc`` documents a field and ``Options`` restricts it to a fixed
set of choices; the class attribute value is the documented default, and
a field with no class value is required. ``ImageProcessor`` collects the
fields into ``__param_specs__`` when the subclass is created and checks
instance values plus per-call overrides against them in
``_resolve_params``.

Array-valued parameters (neighborhood masks, levels, bin values) are
declared as ``object``: their content is checked by the processor's own
sanitizers, not here.

Usage
-----
::

    from typing import Annotated
    from imtoolbox.image_processing.params import Desc, Options

    class MyFilter(ImageTransform):
        mask: Annotated[object, Desc('Binary mask (None: 3x3)')] = None
        channel_axis: Annotated[int, Options(0, -1), Desc('Band axis')] = 0

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

# Standard library
import numbers
from typing import Annotated, Any, Optional, Tuple, get_origin, get_type_hints


class ParamMeta:
    """Marker base for metadata recognized inside ``Annotated`` fields."""


class Options(ParamMeta):
    """Restrict a parameter to a fixed set of values.

    Parameters
    ----------
    *choices
        Allowed values. At least one is required.
    """

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """One-line parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


_MISSING = object()

# Declared scalar types and the abstract numeric types that satisfy them,
# so numpy scalars pass where Python ints and floats do.
_NUMERIC_TYPES = {
    int: numbers.Integral,
    float: numbers.Real,
}


class ParamSpec:
    """Collected declaration of one processor parameter.

    Attributes
    ----------
    name : str
        Field name, also the keyword accepted by ``apply``.
    param_type : type
        Declared type. ``object`` accepts anything.
    default : Any
        Class-body value, ``None`` for required parameters.
    description : str
        Text of the ``Desc`` marker, empty if absent.
    choices : tuple or None
        Allowed values from ``Options``.
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str = '',
        choices: Optional[Tuple] = None,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.description = description
        self.choices = choices

    @property
    def required(self) -> bool:
        """Whether the parameter has no class-body default."""
        return not self._has_default

    def _type_ok(self, value: Any) -> bool:
        if self.param_type is object:
            return True
        numeric = _NUMERIC_TYPES.get(self.param_type)
        if numeric is not None:
            return isinstance(value, numeric) and not isinstance(value, bool)
        return isinstance(value, self.param_type)

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type and choices.

        ``int`` fields take any integral number (numpy integers included);
        ``float`` fields take any real number. ``bool`` satisfies neither.
        ``None`` passes when the default is ``None``.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        ValueError
            If *value* is not one of the allowed choices.
        """
        if value is None and self._has_default and self.default is None:
            return

        if not self._type_ok(value):
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def __repr__(self) -> str:
        text = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}, "
            f"required={self.required!r}"
        )
        if not self.required:
            text += f", default={self.default!r}"
        if self.choices is not None:
            text += f", choices={self.choices!r}"
        return text + ")"


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Build the ``ParamSpec`` tuple for *cls*.

    Only ``Annotated`` fields carrying a ``Desc`` or ``Options`` marker
    are parameters. Inherited fields come first, each class in
    declaration order.
    """
    hints = get_type_hints(cls, include_extras=True)

    names: list = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in names:
                names.append(name)

    specs: list = []
    for name in names:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue

        options = next((m for m in metas if isinstance(m, Options)), None)
        desc = next((m for m in metas if isinstance(m, Desc)), None)
        default = getattr(cls, name, _MISSING)
        has_default = default is not _MISSING
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=default if has_default else None,
            has_default=has_default,
            description=desc.text if desc else '',
            choices=options.choices if options else None,
        ))

    return tuple(specs)
