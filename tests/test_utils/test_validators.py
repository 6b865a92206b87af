"""
Tests for validation functions.
"""
import pytest
from gallery.utils.validators import (
    validate_path_segment, normalize_region, parse_offset, parse_limit
)
from gallery.exceptions import BadRequestError, ForbiddenError


class TestValidatePathSegment:
    """Tests for the traversal guard."""

    def test_plain_segment(self):
        """Test a normal segment passes through unchanged."""
        assert validate_path_segment("filename", "sunset.jpg") == "sunset.jpg"

    @pytest.mark.parametrize("value", ["..", "../etc", "a..b", "photo.jpg..", "..hidden"])
    def test_traversal_marker_anywhere(self, value):
        """Test any occurrence of '..' is rejected."""
        with pytest.raises(ForbiddenError) as exc_info:
            validate_path_segment("filename", value)
        assert exc_info.value.field == "filename"
        assert exc_info.value.status_code == 403

    def test_single_dot_allowed(self):
        """Test a single dot is not a traversal marker."""
        assert validate_path_segment("filename", ".a.b.c") == ".a.b.c"

    def test_custom_message(self):
        """Test the client-facing message can be chosen per route."""
        with pytest.raises(ForbiddenError) as exc_info:
            validate_path_segment("region", "..", "Invalid region")
        assert exc_info.value.message == "Invalid region"


class TestNormalizeRegion:
    """Tests for region normalization."""

    def test_lowercases(self):
        """Test region names are lowercased."""
        assert normalize_region("Paris") == "paris"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_region(self, value):
        """Test an empty region is a bad request."""
        with pytest.raises(BadRequestError):
            normalize_region(value)


class TestParseOffset:
    """Tests for offset parsing."""

    def test_numeric(self):
        assert parse_offset("12") == 12

    @pytest.mark.parametrize("value", [None, "", "abc", "1.5", " 2", "2 ", "0_2", "\uff12", "2\n"])
    def test_non_numeric_is_zero(self, value):
        """Test unparseable offsets fall back to zero."""
        assert parse_offset(value) == 0

    def test_negative_is_zero(self):
        """Test negative offsets fall back to zero."""
        assert parse_offset("-4") == 0

    def test_signed_numeric(self):
        """Test an explicit plus sign is accepted."""
        assert parse_offset("+3") == 3


class TestParseLimit:
    """Tests for limit parsing."""

    @pytest.mark.parametrize("value,expected", [("1", 1), ("15", 15), ("30", 30)])
    def test_within_range(self, value, expected):
        assert parse_limit(value) == expected

    @pytest.mark.parametrize("value", ["0", "-1", "31", "1000"])
    def test_out_of_range_is_clamped(self, value):
        """Test limits outside (0, 30] become 30."""
        assert parse_limit(value) == 30

    @pytest.mark.parametrize("value", [None, "", "ten", " 2", "0_2", "\uff12", "+"])
    def test_non_numeric_is_clamped(self, value):
        """Test unparseable limits become 30."""
        assert parse_limit(value) == 30
