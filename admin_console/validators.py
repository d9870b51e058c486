import re

EMAIL_PATTERN = re.compile(r"^[^@ ]+@[^@ ]+\.[^@ .]{2,}$")
CATEGORY_NAME_MIN_LENGTH = 3

class ValidationError(ValueError):
    def __init__(self, field_errors: dict[str, str]) -> None:
        super().__init__("; ".join(field_errors.values()))
        self.field_errors = field_errors

def validate_credentials(email: str | None, password: str | None) -> None:
    errors: dict[str, str] = {}

    # email
    email = (email or "").strip()
    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.match(email):
        errors["email"] = "Invalid email address"

    # password is sent as typed, so no stripping
    if not password:
        errors["password"] = "Password is required"

    if errors:
        raise ValidationError(errors)

def validate_category_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError({"name": "Category name is required"})
    if len(name) < CATEGORY_NAME_MIN_LENGTH:
        raise ValidationError(
            {"name": f"Category name must be at least {CATEGORY_NAME_MIN_LENGTH} characters"}
        )
    return name
