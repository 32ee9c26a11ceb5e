# -*- coding: utf-8 -*-
"""
Annotated Tunable Parameter Tests.

Tests for the typing.Annotated-based tunable parameter system: constraint
markers (Options, Desc), ParamSpec validation, __init_subclass__
collection, and _resolve_params runtime resolution on the shipped
processors.

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

from typing import Annotated

import numpy as np
import pytest

from imtoolbox.image_processing.base import ImageTransform
from imtoolbox.image_processing.filters import StdDevFilter
from imtoolbox.image_processing.params import (
    Desc,
    Options,
    ParamMeta,
    ParamSpec,
    collect_param_specs,
)
from imtoolbox.image_processing.threshold import LevelQuantizer
from imtoolbox.image_processing.versioning import processor_version


# ---------------------------------------------------------------------------
# Constraint markers
# ---------------------------------------------------------------------------

class TestMarkers:
    """Test constraint marker construction."""

    def test_options(self):
        o = Options(0, -1)
        assert o.choices == (0, -1)
        assert isinstance(o, ParamMeta)
        assert repr(o) == 'Options(0, -1)'

    def test_empty_options_raises(self):
        with pytest.raises(ValueError):
            Options()

    def test_desc(self):
        assert Desc('Band axis').text == 'Band axis'


# ---------------------------------------------------------------------------
# ParamSpec
# ---------------------------------------------------------------------------

class TestParamSpec:
    """Test ParamSpec validation rules."""

    def _spec(self, **kwargs):
        base = dict(name='p', param_type=float, default=1.0, has_default=True)
        base.update(kwargs)
        return ParamSpec(**base)

    def test_int_accepted_as_float(self):
        self._spec().validate(3)

    def test_wrong_type_raises(self):
        with pytest.raises(TypeError, match="'p'"):
            self._spec().validate('x')

    def test_numpy_scalars_accepted(self):
        self._spec().validate(np.float32(0.5))
        self._spec(param_type=int, default=0).validate(np.int64(-1))
        self._spec(param_type=int, default=0).validate(np.uint8(3))

    def test_bool_rejected_for_numbers(self):
        with pytest.raises(TypeError, match="'p'"):
            self._spec(param_type=int, default=0).validate(True)
        with pytest.raises(TypeError, match="'p'"):
            self._spec().validate(np.bool_(True))

    def test_float_rejected_for_int(self):
        with pytest.raises(TypeError, match="must be int"):
            self._spec(param_type=int, default=0).validate(1.0)

    def test_choices(self):
        spec = self._spec(param_type=int, default=0, choices=(0, -1))
        spec.validate(-1)
        with pytest.raises(ValueError, match="allowed choices"):
            spec.validate(2)

    def test_object_type_skips_type_check(self):
        spec = self._spec(param_type=object, default=None)
        spec.validate(np.ones((3, 3)))
        spec.validate(None)

    def test_required(self):
        spec = self._spec(default=None, has_default=False)
        assert spec.required
        assert 'required=True' in repr(spec)


# ---------------------------------------------------------------------------
# Collection
# ---------------------------------------------------------------------------

class TestCollection:
    """Test __init_subclass__ parameter collection."""

    def test_plain_annotations_ignored(self):
        class _Plain:
            x: int = 1
        assert collect_param_specs(_Plain) == ()

    def test_desc_and_options_collected(self):
        class _Tagged:
            x: Annotated[int, Options(1, 2), Desc('pick one')] = 1
            y: Annotated[object, Desc('any array')]
        x, y = collect_param_specs(_Tagged)
        assert (x.name, x.default, x.choices) == ('x', 1, (1, 2))
        assert x.description == 'pick one'
        assert y.required
        assert y.choices is None

    def test_std_dev_filter_specs(self):
        names = [s.name for s in StdDevFilter.__param_specs__]
        assert names == ['neighborhood', 'channel_axis']
        axis = StdDevFilter.__param_specs__[1]
        assert axis.default == 0
        assert axis.choices == (0, -1)

    def test_quantizer_levels_required(self):
        specs = {s.name: s for s in LevelQuantizer.__param_specs__}
        assert specs['levels'].required
        assert not specs['values'].required
        assert specs['values'].default is None

    def test_inheritance_merges_specs(self):
        @processor_version('1.0.0')
        class _Parent(ImageTransform):
            a: Annotated[float, Desc('a')] = 1.0

            def apply(self, source, **kwargs):
                return source

        class _Child(_Parent):
            b: Annotated[str, Options('x', 'y')] = 'x'

        assert [s.name for s in _Child.__param_specs__] == ['a', 'b']


# ---------------------------------------------------------------------------
# Runtime resolution
# ---------------------------------------------------------------------------

class TestResolveParams:
    """Test _resolve_params on the shipped processors."""

    def test_defaults_resolved(self):
        params = StdDevFilter()._resolve_params({})
        assert params == {'neighborhood': None, 'channel_axis': 0}

    def test_kwargs_override(self):
        params = StdDevFilter()._resolve_params({'channel_axis': -1})
        assert params['channel_axis'] == -1

    def test_non_param_kwargs_ignored(self):
        params = StdDevFilter()._resolve_params({'unrelated': 5})
        assert 'unrelated' not in params

    def test_numpy_integer_override(self):
        params = StdDevFilter()._resolve_params({'channel_axis': np.int64(-1)})
        assert params['channel_axis'] == -1

    def test_invalid_override_raises(self):
        with pytest.raises(ValueError, match="channel_axis"):
            StdDevFilter()._resolve_params({'channel_axis': 2})

    def test_wrong_type_override_raises(self):
        with pytest.raises(TypeError, match="channel_axis"):
            StdDevFilter()._resolve_params({'channel_axis': 'last'})

    def test_channel_axis_override_on_apply(self):
        rng = np.random.RandomState(3)
        image = rng.rand(10, 12, 2)
        f = StdDevFilter()
        np.testing.assert_allclose(
            f.apply(image, channel_axis=-1),
            StdDevFilter(channel_axis=-1).apply(image),
        )
