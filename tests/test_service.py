"""Tests for ConversionService."""

import pytest

from convert_pluggable.conversion import (
    BatchLimitError,
    ConversionRequest,
    ConversionService,
)


class TestConvertOne:
    """Test single conversions through the service."""

    def test_success(self, service):
        """Test a successful conversion records the resolved units."""
        outcome = service.convert_one(ConversionRequest("ft", "in", "5", 3))
        assert outcome.succeeded
        assert outcome.result == "60.000"
        assert outcome.from_unit == "foot"
        assert outcome.to_unit == "inch"
        assert outcome.dimension == "length"
        assert outcome.error is None

    def test_unresolved_unit(self, service):
        """Test unresolved units are reported with suggestions."""
        outcome = service.convert_one(ConversionRequest("kilometr", "meter", "5", 2))
        assert not outcome.succeeded
        assert outcome.error == "UnresolvedUnitError"
        assert "kilometer" in outcome.suggestions
        assert outcome.from_unit is None

    def test_dimension_mismatch(self, service):
        """Test mismatched units keep their names but no dimension."""
        outcome = service.convert_one(ConversionRequest("kg", "m", "5", 2))
        assert outcome.error == "DimensionMismatchError"
        assert outcome.from_unit == "kilogram"
        assert outcome.to_unit == "meter"
        assert outcome.dimension is None

    def test_bad_quantity(self, service):
        """Test quantity errors are captured, not raised."""
        outcome = service.convert_one(ConversionRequest("m", "ft", "5a", 2))
        assert outcome.error == "NonNumericInputError"
        assert "5a" in outcome.message


class TestConvertBatch:
    """Test batch conversions."""

    def test_mixed_batch(self, service):
        """Test successes and failures are counted separately."""
        requests = [
            ConversionRequest("feet", "inches", "5", 3),
            ConversionRequest("celsius", "fahrenheit", "100", 1),
            ConversionRequest("kilogram", "meter", "5", 2),
            ConversionRequest("hour", "minute", "2", 0),
        ]
        summary = service.convert_batch(requests)

        assert summary.total == 4
        assert summary.succeeded == 3
        assert summary.failed == 1
        assert [outcome.result for outcome in summary.outcomes] == ["60.000", "212.0", None, "120"]
        assert len(summary.errors) == 1
        assert summary.errors[0].startswith("Request 2:")
        assert summary.dimensions_used == {"length": 1, "temperature": 1, "duration": 1}

    def test_empty_batch(self, service):
        """Test an empty batch produces an empty summary."""
        summary = service.convert_batch([])
        assert summary.total == 0
        assert summary.succeeded == 0
        assert summary.outcomes == []

    def test_batch_limit(self, service):
        """Test batches over the limit are refused."""
        requests = [ConversionRequest("m", "cm", "1", 0)] * 6
        with pytest.raises(BatchLimitError):
            service.convert_batch(requests)

    def test_batch_limit_default(self, engine, monkeypatch):
        """Test the limit defaults to the application setting."""
        from convert_pluggable.common import config

        monkeypatch.setattr(config.settings.app, "batch_limit", 2)
        service = ConversionService(engine)
        assert service.batch_limit == 2
