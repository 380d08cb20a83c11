"""Tests for WktOptions"""

from decimal import Decimal

import numpy as np
import pytest
from pydantic import ValidationError

from wktgeo.core import ElementFailurePolicy
from wktgeo.models import WktOptions, DEFAULT_OPTIONS


class TestWktOptions:
    """Test suite for WktOptions"""

    def test_defaults(self):
        """Test float coordinates and propagating member failures by default"""
        options = WktOptions()
        assert options.coord_type is float
        assert options.element_failure_policy == ElementFailurePolicy.PROPAGATE
        assert DEFAULT_OPTIONS == options

    def test_policy_from_string(self):
        """Test the policy accepts its string value"""
        options = WktOptions(element_failure_policy="skip")
        assert options.element_failure_policy == ElementFailurePolicy.SKIP

    @pytest.mark.parametrize("coord_type", [float, np.float32, np.float64, Decimal])
    def test_supported_coord_types(self, coord_type):
        options = WktOptions(coord_type=coord_type)
        assert options.coord_type is coord_type

    def test_invalid_policy(self):
        with pytest.raises(ValidationError):
            WktOptions(element_failure_policy="ignore")

    def test_coord_type_must_be_callable(self):
        with pytest.raises(ValidationError):
            WktOptions(coord_type=1.5)

    def test_coord_type_must_build_numbers(self):
        """Test a callable rejecting decimal text is refused"""
        def no_numbers(text):
            raise ValueError("nope")

        with pytest.raises(ValidationError) as exc_info:
            WktOptions(coord_type=no_numbers)
        assert "coord_type" in str(exc_info.value)

    @pytest.mark.parametrize("coord_type", [int, lambda text: int(float(text))])
    def test_coord_type_must_keep_fractions(self, coord_type):
        """Test integer-only or non-numeric callables are refused"""
        with pytest.raises(ValidationError):
            WktOptions(coord_type=coord_type)

    def test_options_are_frozen(self):
        options = WktOptions()
        with pytest.raises(ValidationError):
            options.element_failure_policy = ElementFailurePolicy.SKIP
