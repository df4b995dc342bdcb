"""Unit tests for account and profile validators."""
import pytest

from src.infrastructure.auth.validators import (
    passwords_match,
    validate_email,
    validate_name,
    validate_password,
    validate_profile_number,
)


class TestValidateEmail:

    @pytest.mark.parametrize("email", [
        "mei@example.com",
        "mei.tan@clinic.example.com",
        "mei+tcm@example.co.uk",
        "patient_01@health-app.io",
        "  Mei@Example.COM  ",
    ])
    def test_valid(self, email):
        assert validate_email(email) == (True, "")

    @pytest.mark.parametrize("email", [
        "no-at-sign",
        "@example.com",
        "mei@",
        "mei@.com",
        "mei..tan@example.com",
        ".mei@example.com",
        "mei.@example.com",
        "mei@example",
        "mei tan@example.com",
    ])
    def test_invalid_format(self, email):
        is_valid, error = validate_email(email)
        assert not is_valid
        assert error

    @pytest.mark.parametrize("email", ["", "   ", None])
    def test_required(self, email):
        assert validate_email(email) == (False, "Email is required")

    def test_too_long(self):
        assert validate_email("a" * 250 + "@example.com") == (False, "Email is too long")

    def test_local_part_too_long(self):
        assert validate_email("a" * 65 + "@example.com") == (False, "Email local part is too long")


class TestValidatePassword:

    def test_valid(self):
        assert validate_password("Herbal#2024") == (True, "")

    @pytest.mark.parametrize("password,message", [
        ("", "Password is required"),
        ("Ab1!", "at least 8 characters"),
        ("A1!" + "a" * 130, "too long"),
        ("herbal#2024", "uppercase"),
        ("HERBAL#2024", "lowercase"),
        ("Herbal#tea", "number"),
        ("Herbal2024", "special character"),
    ])
    def test_rules(self, password, message):
        is_valid, error = validate_password(password)
        assert not is_valid
        assert message in error


class TestValidateName:

    @pytest.mark.parametrize("name", ["Mei", "Tan Mei Ling", "O'Brien", "Jean-Luc", "Dr. Wong", "陈美", "X"])
    def test_valid(self, name):
        assert validate_name(name) == (True, "")

    def test_required_uses_field_name(self):
        assert validate_name("  ", "Last name") == (False, "Last name is required")

    def test_too_long(self):
        is_valid, error = validate_name("a" * 51, "First name")
        assert not is_valid
        assert "First name is too long" in error

    @pytest.mark.parametrize("name", ["Mei2", "Mei@Tan", "<script>"])
    def test_invalid_characters(self, name):
        is_valid, error = validate_name(name)
        assert not is_valid
        assert "can only contain letters" in error


class TestPasswordsMatch:

    def test_match(self):
        assert passwords_match("Herbal#2024", "Herbal#2024") == (True, "")

    def test_mismatch_is_case_sensitive(self):
        assert passwords_match("Herbal#2024", "herbal#2024") == (False, "Passwords do not match")


class TestValidateProfileNumber:

    @pytest.mark.parametrize("value,field", [("", "age"), ("34", "age"), ("172.5", "height"), ("61", "weight")])
    def test_valid(self, value, field):
        assert validate_profile_number(value, field) == (True, "")

    def test_age_must_be_whole(self):
        assert validate_profile_number("34.5", "age") == (False, "Age must be a number")

    def test_not_a_number(self):
        assert validate_profile_number("tall", "height") == (False, "Height must be a number")

    def test_out_of_range(self):
        assert validate_profile_number("700", "weight") == (False, "Weight must be between 1 and 650")
