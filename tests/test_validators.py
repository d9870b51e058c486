import pytest

from admin_console.validators import ValidationError, validate_category_name, validate_credentials

def test_valid_credentials_pass():
    validate_credentials("admin@example.com", "secret")

@pytest.mark.parametrize("email", ["", "admin", "admin@example", "admin@example.c", "ad min@example.com", "a@b@c.com"])
def test_bad_email_rejected(email):
    with pytest.raises(ValidationError) as exc:
        validate_credentials(email, "secret")
    assert "email" in exc.value.field_errors
    assert "password" not in exc.value.field_errors

def test_missing_email_message():
    with pytest.raises(ValidationError) as exc:
        validate_credentials("   ", "secret")
    assert exc.value.field_errors["email"] == "Email is required"

def test_empty_password_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_credentials("admin@example.com", "")
    assert exc.value.field_errors == {"password": "Password is required"}

def test_all_field_errors_collected():
    with pytest.raises(ValidationError) as exc:
        validate_credentials("nope", "")
    assert exc.value.field_errors == {
        "email": "Invalid email address",
        "password": "Password is required",
    }

def test_category_name_is_stripped():
    assert validate_category_name("  Books  ") == "Books"

def test_category_name_required():
    with pytest.raises(ValidationError) as exc:
        validate_category_name("")
    assert exc.value.field_errors["name"] == "Category name is required"

def test_category_name_too_short():
    with pytest.raises(ValidationError) as exc:
        validate_category_name(" ab ")
    assert exc.value.field_errors["name"] == "Category name must be at least 3 characters"
