import asyncio

from pymongo.errors import InvalidURI, ServerSelectionTimeoutError

from app.db.user_settings import USER_SETTINGS, MongoUserSettingsStore


class FakeCollection:
    def __init__(self, doc=None, error=None):
        self.doc = doc
        self.error = error
        self.queries = []

    async def find_one(self, query, projection=None):
        self.queries.append(query)
        if self.error:
            raise self.error
        return self.doc


def _store(collection):
    return MongoUserSettingsStore(db={USER_SETTINGS: collection})


def test_reads_settings_for_user():
    col = FakeCollection({
        "gemini_api_key": "k",
        "gemini_model_preference": "gemini-pro",
        "custom_system_prompt": "Be brief",
    })
    s = asyncio.run(_store(col).get("user-1"))
    assert (s.api_key, s.model_name, s.custom_prompt) == ("k", "gemini-pro", "Be brief")
    assert col.queries == [{"user_id": "user-1"}]


def test_missing_record_is_none():
    assert asyncio.run(_store(FakeCollection()).get("user-1")) is None


def test_lookup_error_is_treated_as_missing():
    col = FakeCollection(error=ServerSelectionTimeoutError("no servers"))
    assert asyncio.run(_store(col).get("user-1")) is None


def test_client_construction_error_is_treated_as_missing(monkeypatch):
    import app.db.user_settings as user_settings

    def bad_db():
        raise InvalidURI("not a mongodb uri")

    monkeypatch.setattr(user_settings, "get_db", bad_db)
    assert asyncio.run(MongoUserSettingsStore().get("user-1")) is None
