"""Tests for engagement form validation rules."""

import pytest
from storefront.errors import FormValidationError
from storefront.forms import (
    validate_contact,
    validate_donation,
    validate_join_artisan,
    validate_newsletter,
    validate_textile_donation,
    validate_volunteer,
)


def _field(validator, form):
    with pytest.raises(FormValidationError) as exc:
        validator(form)
    return exc.value.field


class TestContact:
    def test_valid(self):
        payload = validate_contact({"name": " Aisha ", "email": "aisha@example.com", "message": "I love the runner!"})
        assert payload == {"name": "Aisha", "email": "aisha@example.com", "message": "I love the runner!"}

    def test_short_name(self):
        assert _field(validate_contact, {"name": "A", "email": "a@b.co", "message": "long enough text"}) == "name"

    def test_bad_email(self):
        assert _field(validate_contact, {"name": "Aisha", "email": "nope", "message": "long enough text"}) == "email"

    def test_short_message(self):
        form = {"name": "Aisha", "email": "a@b.co", "message": "too short"}
        with pytest.raises(FormValidationError) as exc:
            validate_contact(form)
        assert exc.value.field == "message"
        assert exc.value.message_key == "form.invalid_message"


class TestDonation:
    def test_valid(self):
        payload = validate_donation({"amount": "250", "email": "d@example.com", "donor_name": "Layla", "type": "monthly"})
        assert payload == {"amount": 250.0, "donor_name": "Layla", "email": "d@example.com", "type": "monthly"}

    def test_defaults_to_one_time(self):
        assert validate_donation({"amount": 100, "email": "d@example.com"})["type"] == "one-time"

    @pytest.mark.parametrize("amount", [None, "", "0", -10, "abc"])
    def test_amount_must_be_positive(self, amount):
        with pytest.raises(FormValidationError) as exc:
            validate_donation({"amount": amount, "email": "d@example.com"})
        assert exc.value.message_key == "form.invalid_amount"

    def test_email_required(self):
        assert _field(validate_donation, {"amount": 100, "email": ""}) == "email"

    def test_unknown_type(self):
        assert _field(validate_donation, {"amount": 100, "email": "d@example.com", "type": "yearly"}) == "type"


class TestTextileDonation:
    def test_optional_fields_pass_through(self):
        payload = validate_textile_donation(
            {"name": "Nile Mills", "email": "ops@nile.eg", "company": "Nile Mills", "message": "200kg offcuts"}
        )
        assert payload["company"] == "Nile Mills"
        assert payload["phone"] == ""

    def test_name_and_email_required(self):
        assert _field(validate_textile_donation, {"name": "", "email": "ops@nile.eg"}) == "name"
        assert _field(validate_textile_donation, {"name": "Nile", "email": "ops"}) == "email"


class TestVolunteer:
    def test_valid(self):
        assert validate_volunteer({"name": "Omar", "email": "omar@example.com"})["name"] == "Omar"

    def test_email_required(self):
        assert _field(validate_volunteer, {"name": "Omar"}) == "email"


class TestJoinArtisan:
    @pytest.fixture()
    def form(self):
        return {
            "name": "Nadia",
            "phone": "01001234567",
            "email": "",
            "location": "Luxor",
            "skills": "beadwork",
        }

    def test_email_is_optional(self, form):
        assert validate_join_artisan(form)["email"] == ""

    def test_phone_is_normalized(self, form):
        assert validate_join_artisan(form)["phone"] == "+20 100 123 4567"

    def test_email_validated_when_given(self, form):
        form["email"] = "bad"
        assert _field(validate_join_artisan, form) == "email"

    def test_phone_needs_ten_characters(self, form):
        form["phone"] = "012345"
        assert _field(validate_join_artisan, form) == "phone"

    def test_location_required(self, form):
        form["location"] = "L"
        assert _field(validate_join_artisan, form) == "location"

    def test_skills_required(self, form):
        form["skills"] = ""
        assert _field(validate_join_artisan, form) == "skills"


class TestNewsletter:
    def test_valid(self):
        assert validate_newsletter({"email": "news@example.com"}) == {"email": "news@example.com"}

    def test_invalid(self):
        assert _field(validate_newsletter, {"email": "news"}) == "email"
