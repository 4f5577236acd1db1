"""Tests for age group classification"""

import math

import pytest
from structlog.testing import capture_logs

from exercises_app.calculations.age import AgeGroup, age_group, classify_age
from exercises_app.config.defaults import AgeParams


class TestClassifyAge:
    """Test classify_age with the default brackets"""

    @pytest.mark.parametrize("age", [0, 1, 10, 15, 17])
    def test_minor(self, age):
        """Ages below 18 are Minor"""
        assert classify_age(age) == "Minor"

    @pytest.mark.parametrize("age", [18, 35, 50, 64])
    def test_adult(self, age):
        """Ages 18 through 64 are Adult"""
        assert classify_age(age) == "Adult"

    @pytest.mark.parametrize("age", [65, 70, 100, 1000])
    def test_senior(self, age):
        """Ages above 64 are Senior"""
        assert classify_age(age) == "Senior"

    def test_boundaries(self):
        """Test both bracket edges"""
        assert classify_age(17) == "Minor"
        assert classify_age(18) == "Adult"
        assert classify_age(64) == "Adult"
        assert classify_age(65) == "Senior"

    def test_fractional_ages(self):
        """Fractional ages compare like any other number"""
        assert classify_age(17.9) == "Minor"
        assert classify_age(64.0) == "Adult"
        assert classify_age(64.5) == "Senior"

    def test_unvalidated_inputs(self):
        """Implausible ages are classified, not rejected"""
        assert classify_age(-5) == "Minor"
        assert classify_age(math.inf) == "Senior"
        assert classify_age(-math.inf) == "Minor"
        assert classify_age(math.nan) == "Senior"


class TestAgeGroup:
    """Test the AgeGroup enum and custom brackets"""

    def test_returns_enum_member(self):
        """age_group returns the enum, classify_age its label"""
        assert age_group(30) is AgeGroup.ADULT
        assert AgeGroup.ADULT == "Adult"

    def test_labels(self):
        """There are exactly three labels"""
        assert [group.value for group in AgeGroup] == ["Minor", "Adult", "Senior"]

    def test_custom_brackets(self):
        """Brackets from configuration move both edges"""
        brackets = AgeParams(adult_min_age=21, senior_min_age=60)

        assert classify_age(20, brackets) == "Minor"
        assert classify_age(21, brackets) == "Adult"
        assert classify_age(59, brackets) == "Adult"
        assert classify_age(60, brackets) == "Senior"

    def test_logs_classification(self):
        """Each classification is logged at debug level"""
        with capture_logs() as logs:
            age_group(40)

        assert logs[0]["event"] == "Age classified"
        assert logs[0]["log_level"] == "debug"
        assert logs[0]["group"] == "Adult"
