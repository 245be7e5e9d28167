import pytest

from api.settings.repositories import settings_repository


@pytest.mark.unit
class TestSettingsRepository:

    def test_find_one_without_document(self):
        assert settings_repository.find_one() is None
        assert settings_repository.count() == 0

    def test_insert_one(self):
        settings_repository.insert_one({"language": "en"})

        assert settings_repository.find_one() == {"language": "en"}
        assert settings_repository.count() == 1

    def test_second_insert_keeps_single_document(self):
        settings_repository.insert_one({"language": "en"})
        settings_repository.insert_one({"language": "de"})

        assert settings_repository.count() == 1
        assert settings_repository.find_one() == {"language": "en"}

    def test_upsert_creates_document(self):
        settings_repository.upsert({"currency_code": "EUR"})

        assert settings_repository.find_one() == {"currency_code": "EUR"}

    def test_upsert_merges_fields(self):
        settings_repository.insert_one({"language": "en", "currency_code": "USD"})

        settings_repository.upsert({"currency_code": "EUR", "logo_file": None})

        assert settings_repository.find_one() == {
            "language": "en",
            "currency_code": "EUR",
            "logo_file": None,
        }
        assert settings_repository.count() == 1

    def test_find_one_returns_a_copy(self):
        settings_repository.insert_one({"language": "en"})

        document = settings_repository.find_one()
        document["language"] = "xx"

        assert settings_repository.find_one() == {"language": "en"}
