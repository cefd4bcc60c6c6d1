"""Tests for the Language Manager and message catalogue."""

from datetime import date

import pytest
from storefront.errors import StorageError
from storefront.i18n import LANGUAGE_STORAGE_KEY, MESSAGES, LanguageManager
from storefront.storage import MemoryStorage


class TestLanguageSelection:
    def test_defaults_to_english(self, language):
        assert language.get_current_language() == "en"
        assert language.text_direction == "ltr"

    def test_switch_persists_choice(self, storage, language):
        assert language.switch_language("ar") is True
        assert storage.get(LANGUAGE_STORAGE_KEY) == "ar"
        assert LanguageManager(storage).language == "ar"

    def test_unsupported_language_is_rejected(self, storage, language):
        assert language.switch_language("fr") is False
        assert language.language == "en"
        assert storage.get(LANGUAGE_STORAGE_KEY) is None

    def test_toggle(self, language):
        assert language.toggle_language() == "ar"
        assert language.is_rtl
        assert language.toggle_language() == "en"

    def test_ignores_unsupported_stored_value(self):
        storage = MemoryStorage()
        storage.set(LANGUAGE_STORAGE_KEY, "de")
        assert LanguageManager(storage).language == "en"

    def test_survives_unreadable_storage(self):
        class Broken(MemoryStorage):
            def get(self, key):
                raise StorageError("nope")

            def set(self, key, value):
                raise StorageError("nope")

        manager = LanguageManager(Broken())
        assert manager.language == "en"
        assert manager.switch_language("ar")
        assert manager.language == "ar"

    def test_listeners_notified_on_switch(self, language):
        seen = []
        language.subscribe(seen.append)
        language.switch_language("ar")
        language.switch_language("xx")
        assert seen == ["ar"]


class TestCatalogue:
    @pytest.mark.parametrize("key", sorted(MESSAGES))
    def test_every_message_is_bilingual(self, key):
        assert MESSAGES[key]["en"]
        assert MESSAGES[key]["ar"]

    def test_translate_follows_language(self, language):
        assert language.translate("order.success") == "Your order has been placed successfully!"
        language.switch_language("ar")
        assert language.translate("order.success") == "تم تأكيد طلبك بنجاح!"

    def test_unknown_key_falls_back_to_key(self, language):
        assert language.translate("no.such.key") == "no.such.key"

    def test_localized_record_field(self, language):
        record = {"name_en": "Tote", "name_ar": "حقيبة"}
        assert language.localized(record, "name") == "Tote"
        language.switch_language("ar")
        assert language.localized(record, "name") == "حقيبة"
        assert language.localized({"name_en": "Only English"}, "name") == "Only English"


class TestNumbersAndDates:
    def test_format_number(self, language):
        assert language.format_number(125000) == "125,000"
        language.switch_language("ar")
        assert language.format_number(35) == "٣٥"

    def test_format_date(self, language):
        assert language.format_date(date(2024, 1, 15)) == "January 15, 2024"
        assert language.format_date("2024-01-10T00:00:00+00:00") == "January 10, 2024"
        language.switch_language("ar")
        assert language.format_date(date(2024, 1, 15)) == "١٥ يناير ٢٠٢٤"
