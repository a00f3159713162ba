from devconnect.validation.entries import validate_education_input, validate_experience_input
from devconnect.validation.login import validate_login_input
from devconnect.validation.profile import validate_profile_input
from devconnect.validation.register import validate_register_input


def test_register_valid_input():
    errors, is_valid = validate_register_input(
        {"name": "Jane", "email": "jane@example.com", "password": "secret123", "password2": "secret123"}
    )
    assert is_valid
    assert errors == {}


def test_register_empty_input_reports_every_field():
    errors, is_valid = validate_register_input({})
    assert not is_valid
    assert errors == {
        "name": "Name field is required",
        "email": "Email field is required",
        "password": "Password field is required",
        "password2": "Confirm Password field is required",
    }


def test_register_length_format_and_match_rules():
    errors, _ = validate_register_input(
        {"name": "J", "email": "not-an-email", "password": "abc", "password2": "abcd"}
    )
    assert errors["name"] == "Name must be between 2 and 30 characters"
    assert errors["email"] == "Email is invalid"
    assert errors["password"] == "Password must be at least 6 characters"
    assert errors["password2"] == "Passwords must match"


def test_register_password_whitespace_counts():
    base = {"name": "Jane", "email": "jane@example.com"}

    errors, is_valid = validate_register_input({**base, "password": "secret1 ", "password2": "secret1"})
    assert not is_valid
    assert errors == {"password2": "Passwords must match"}

    # 5 visible characters, 7 as sent: the sent value is what gets hashed
    assert validate_register_input({**base, "password": " abcde ", "password2": " abcde "}).is_valid
    errors, _ = validate_register_input({**base, "password": "abcd ", "password2": "abcd "})
    assert errors["password"] == "Password must be at least 6 characters"

    errors, _ = validate_register_input({**base, "password": "   ", "password2": "   "})
    assert errors["password"] == "Password field is required"
    assert errors["password2"] == "Confirm Password field is required"


def test_register_treats_none_as_empty():
    errors, _ = validate_register_input({"name": None, "email": "a@example.com"})
    assert errors["name"] == "Name field is required"


def test_login_rules():
    assert validate_login_input({"email": "a@example.com", "password": "x"}).is_valid

    errors, is_valid = validate_login_input({"email": "nope"})
    assert not is_valid
    assert errors == {"email": "Email is invalid", "password": "Password field is required"}


def test_profile_required_fields():
    errors, is_valid = validate_profile_input({})
    assert not is_valid
    assert set(errors) == {"handle", "status", "skills"}


def test_profile_handle_length():
    errors, _ = validate_profile_input({"handle": "x" * 41, "status": "Dev", "skills": "py"})
    assert "handle" in errors


def test_profile_urls_checked_only_when_given():
    base = {"handle": "jane", "status": "Dev", "skills": "py"}
    assert validate_profile_input({**base, "website": "", "youtube": None}).is_valid
    assert validate_profile_input({**base, "website": "jane.dev", "linkedin": "https://linkedin.com/in/jane"}).is_valid

    errors, is_valid = validate_profile_input({**base, "website": "not a url", "facebook": "nope"})
    assert not is_valid
    assert errors == {"website": "Not a valid URL", "facebook": "Not a valid URL"}


def test_profile_skills_may_be_a_list():
    assert validate_profile_input({"handle": "jane", "status": "Dev", "skills": ["py", "sql"]}).is_valid


def test_experience_rules():
    errors, is_valid = validate_experience_input({})
    assert not is_valid
    assert set(errors) == {"title", "company", "from"}

    ok = {"title": "Engineer", "company": "Acme", "from": "2020-01-01"}
    assert validate_experience_input(ok).is_valid
    assert validate_experience_input({**ok, "from": "Jan 2020"}).errors["from"].startswith("From date must be")
    assert "to" in validate_experience_input({**ok, "to": "later"}).errors


def test_education_rules():
    errors, _ = validate_education_input({"school": "MIT"})
    assert set(errors) == {"degree", "fieldofstudy", "from"}

    ok = {"school": "MIT", "degree": "BSc", "fieldofstudy": "CS", "from": "2015-09-01", "to": "2019-06-30"}
    assert validate_education_input(ok).is_valid
