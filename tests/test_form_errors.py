"""Tests for element state checks."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from form_errors import ElementStateMismatch, expect_checked, expect_option, expect_value


class TestExpectValue:
    def test_matching_value_passes(self) -> None:
        locator = MagicMock()
        locator.input_value.return_value = "TestUser_123"

        expect_value(locator, "TestUser_123", "First Name input")

    def test_mismatch_names_field_expected_and_actual(self) -> None:
        locator = MagicMock()
        locator.input_value.return_value = "TestUser_12"

        with pytest.raises(ElementStateMismatch) as exc_info:
            expect_value(locator, "TestUser_123", "First Name input")

        err = exc_info.value
        assert err.field == "First Name input"
        assert err.expected == "TestUser_123"
        assert err.actual == "TestUser_12"
        assert str(err) == "First Name input: expected 'TestUser_123', got 'TestUser_12'"


class TestExpectChecked:
    def test_checked_passes(self) -> None:
        locator = MagicMock()
        locator.is_checked.return_value = True

        expect_checked(locator, "Male gender option")

    def test_unchecked_fails(self) -> None:
        locator = MagicMock()
        locator.is_checked.return_value = False

        with pytest.raises(ElementStateMismatch, match="Male gender option: expected True, got False"):
            expect_checked(locator, "Male gender option")


class TestExpectOption:
    def test_present_option_passes(self) -> None:
        dropdown = MagicMock()
        dropdown.has_option.return_value = True

        expect_option(dropdown, "India", "Country dropdown")
        dropdown.has_option.assert_called_once_with("India")

    def test_missing_option_lists_what_was_there(self) -> None:
        dropdown = MagicMock()
        dropdown.has_option.return_value = False
        dropdown.option_texts.return_value = ["Select", "Australia"]

        with pytest.raises(ElementStateMismatch) as exc_info:
            expect_option(dropdown, "India", "Country dropdown")

        assert exc_info.value.actual == ["Select", "Australia"]
        assert isinstance(exc_info.value, AssertionError)
