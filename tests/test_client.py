"""
Tests for the Python API client.

The client is pointed at the in-process app by handing it the TestClient as
its HTTP transport.
"""

import io

import pytest

from test_fixtures import client, make_meal_payload, make_recipe_payload, unique_email
from client import (
    APIError,
    AuthenticationRequired,
    FileTokenStore,
    MemoryTokenStore,
    NutriTrackClient,
    TokenStore,
)

BASE_URL = "http://testserver/api"


@pytest.fixture
def redirects():
    return []


@pytest.fixture
def api(redirects):
    return NutriTrackClient(
        base_url=BASE_URL,
        token_store=MemoryTokenStore(),
        http=client,
        on_unauthorized=lambda: redirects.append("login"),
    )


def test_register_stores_token_and_authenticates_later_calls(api):
    email = unique_email("fay")
    data = api.auth.register(email, "pw123456")

    assert api.tokens.get() == data["token"]
    assert api.auth.profile()["email"] == email


def test_login_replaces_token(api):
    email = unique_email("gus")
    api.auth.register(email, "pw123456")
    api.tokens.clear()

    api.auth.login(email, "pw123456")

    assert api.tokens.get()
    assert api.auth.profile()["email"] == email


def test_unauthorized_clears_token_and_signals_login(api, redirects):
    api.tokens.set("stale-token")

    with pytest.raises(AuthenticationRequired) as excinfo:
        api.meals.list()

    assert excinfo.value.status_code == 401
    assert api.tokens.get() is None
    assert redirects == ["login"]


def test_other_errors_raise_api_error_with_message(api, redirects):
    api.auth.register(unique_email("hal"), "pw123456")

    with pytest.raises(APIError) as excinfo:
        api.recipes.search("")

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Search query is required"
    assert not isinstance(excinfo.value, AuthenticationRequired)
    assert api.tokens.get() is not None
    assert redirects == []


def test_logout_forgets_token(api):
    api.auth.register(unique_email("ivy"), "pw123456")

    api.auth.logout()

    assert api.tokens.get() is None


def test_meal_and_recipe_calls(api):
    api.auth.register(unique_email("jo"), "pw123456")

    meal = api.meals.create(make_meal_payload(calories=300, date="2024-05-02"))
    api.meals.update(meal["id"], {"calories": 350})
    assert api.meals.get(meal["id"])["calories"] == 350
    assert [m["id"] for m in api.meals.list(date="2024-05-02")] == [meal["id"]]
    assert api.meals.list(start_date="2024-05-01", end_date="2024-05-31")[0]["id"] == meal["id"]
    assert api.meals.summary("2024-05")["totalCalories"] == 350
    api.meals.delete(meal["id"])
    assert api.meals.list() == []

    recipe = api.recipes.create(make_recipe_payload(name="Pumpkin soup"))
    assert [r["id"] for r in api.recipes.search("pumpkin")] == [recipe["id"]]
    api.recipes.delete(recipe["id"])
    assert api.recipes.list() == []


def test_document_upload_from_file_object(api):
    api.auth.register(unique_email("kim"), "pw123456")

    document = api.documents.upload(io.BytesIO(b"%PDF-1.4"), "consultation", filename="visit.pdf")

    assert document["name"] == "visit.pdf"
    assert [d["id"] for d in api.documents.list("consultation")] == [document["id"]]
    api.documents.delete(document["id"])
    assert api.documents.list() == []


def test_document_upload_from_path(api, tmp_path):
    api.auth.register(unique_email("lee"), "pw123456")
    pdf = tmp_path / "plan.pdf"
    pdf.write_bytes(b"%PDF-1.4 plan")

    document = api.documents.upload(pdf, "diet-plan")

    assert document["name"] == "plan.pdf"
    assert document["size"] == len(b"%PDF-1.4 plan")


class RecordingHTTP:
    """Passes requests through to the app and keeps their keyword arguments"""

    def __init__(self):
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append(kwargs)
        return client.request(method, url, **kwargs)


@pytest.mark.parametrize(
    "filename, content_type, expected",
    [
        ("plan.pdf", None, "application/pdf"),
        ("notes.txt", None, "text/plain"),
        ("scan", None, "application/octet-stream"),
        ("scan", "image/png", "image/png"),
    ],
)
def test_document_upload_content_type(filename, content_type, expected):
    http = RecordingHTTP()
    api = NutriTrackClient(base_url=BASE_URL, token_store=MemoryTokenStore(), http=http)
    api.auth.register(unique_email("ned"), "pw123456")

    document = api.documents.upload(
        io.BytesIO(b"data"), "consultation", filename=filename, content_type=content_type
    )

    assert document["name"] == filename
    name, _, sent_type = http.calls[-1]["files"]["file"]
    assert name == filename
    assert sent_type == expected


def test_user_preference_calls(api):
    api.auth.register(unique_email("max"), "pw123456")

    api.user.update_calorie_goal(1900)
    api.user.update_diet_type("vegan")
    profile = api.user.update_profile(daily_calorie_goal=2100)

    assert profile["dailyCalorieGoal"] == 2100
    assert profile["dietType"] == "vegan"


# =============================================================================
# TOKEN STORES
# =============================================================================


def test_token_store_is_abstract():
    class GetOnly(TokenStore):
        def get(self):
            return None

    with pytest.raises(TypeError):
        TokenStore()
    with pytest.raises(TypeError):
        GetOnly()
    assert isinstance(MemoryTokenStore(), TokenStore)


def test_file_token_store_roundtrip(tmp_path):
    store = FileTokenStore(tmp_path / "nested" / "token")

    assert store.get() is None
    store.set("abc.def.ghi")
    assert store.get() == "abc.def.ghi"
    assert (store.path.stat().st_mode & 0o777) == 0o600
    store.clear()
    assert store.get() is None
    store.clear()


def test_file_token_store_treats_blank_file_as_no_token(tmp_path):
    path = tmp_path / "token"
    path.write_text("\n")

    assert FileTokenStore(path).get() is None
