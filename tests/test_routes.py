"""Tests for route handlers."""

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient

from app.dependencies import get_authenticator
from app.routes.dictionary import query_from_params
from app.routes.pages import cross_reference_url, dictionary_url
from app.services.dictionary.search import QueryState
from app.services.identity import Authenticator, Identity, Role


def _login(client: TestClient, username: str, password: str):
    return client.post(
        "/login",
        data={"username": username, "password": password},
        follow_redirects=False,
    )


class TestQueryFromParams:
    """Tests for turning request parameters into a query."""

    def test_letter_wins_over_term(self):
        assert query_from_params("K", "maison", "") == QueryState(letter="K")

    def test_term(self):
        assert query_from_params(None, "maison", "B") == QueryState(term="maison")

    def test_empty_term_is_explicit_search(self):
        assert query_from_params(None, "", "") == QueryState(term="")

    def test_seed_when_nothing_else(self):
        assert query_from_params(None, None, "B") == QueryState(letter="B")
        assert query_from_params("", None, "") == QueryState()


class TestDictionaryUrls:
    """Tests for dictionary link helpers."""

    def test_dictionary_url(self):
        assert dictionary_url(QueryState()) == "/dictionary"
        assert dictionary_url(QueryState(letter="È")) == "/dictionary?letter=%C3%88"
        assert dictionary_url(QueryState(term="bon jour")) == "/dictionary?q=bon+jour"

    def test_cross_reference_url(self):
        assert cross_reference_url("(Kanu)") == "/dictionary?q=Kanu"


class TestPages:
    """Tests for page rendering through the navigation controller."""

    def test_home_shows_word_of_day(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Mot du Jour" in response.text
        assert 'data-view="home"' in response.text

    def test_unknown_view_renders_home(self, client):
        response = client.get("/views/nowhere")
        assert response.status_code == 200
        assert 'data-view="home"' in response.text

    @pytest.mark.parametrize(
        "name, title",
        [
            ("guide", "Guide touristique"),
            ("guide-touristique", "Guide touristique"),
            ("games", "Centre de Jeux"),
            ("memory-game", "Jeu de Mémoire"),
            ("contact", "Contact"),
        ],
    )
    def test_leaf_views(self, client, name, title):
        response = client.get(f"/views/{name}")
        assert response.status_code == 200
        assert title in response.text

    def test_dictionary_seed_preselects_letter(self, client):
        response = client.get("/views/dictionary", params={"seed": "K"})
        assert "2 résultats pour la lettre &#39;K&#39;" in response.text
        assert "Kanu" in response.text

    def test_lowercase_seed_highlights_letter(self, client):
        response = client.get("/views/dictionary", params={"seed": "k"})
        assert '<a href="/dictionary" class="active">K</a>' in response.text

    def test_admin_page_renders_for_admin(self, client):
        _login(client, "admin", "admin")
        response = client.get("/views/admin")
        assert response.status_code == 200
        assert 'data-view="admin"' in response.text

    def test_admin_redirects_to_login_when_anonymous(self, client):
        response = client.get("/views/admin")
        assert response.status_code == 200
        assert 'data-view="login"' in response.text
        assert "Tableau de bord Admin" not in response.text

    def test_user_dashboard_redirects_to_login_when_anonymous(self, client):
        response = client.get("/views/user-dashboard")
        assert 'data-view="login"' in response.text


class TestDictionaryPage:
    """Tests for the dictionary page."""

    def test_prompt_without_query(self, client):
        response = client.get("/dictionary")
        assert response.status_code == 200
        assert "Commencez votre exploration" in response.text

    def test_letter_filter(self, client):
        response = client.get("/dictionary", params={"letter": "K"})
        assert "2 résultats" in response.text
        # Clicking the active letter again clears it
        assert 'href="/dictionary"' in response.text

    def test_search(self, client):
        response = client.get("/dictionary", params={"q": "maison"})
        assert "1 résultat pour &#34;maison&#34;" in response.text

    def test_empty_result(self, client):
        response = client.get("/dictionary", params={"q": "xyz"})
        assert "Aucun mot trouvé" in response.text

    def test_cross_reference_link(self, client):
        response = client.get("/dictionary", params={"q": "eau"})
        assert 'href="/dictionary?q=Kanu"' in response.text


class TestDictionaryApi:
    """Tests for the JSON dictionary API."""

    @pytest.mark.asyncio
    async def test_search(self, async_client: AsyncClient):
        response = await async_client.get("/api/dictionary/search", params={"q": "maison"})
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["results"][0]["numee"] == "Kanu"
        assert data["letter"] is None

    @pytest.mark.asyncio
    async def test_empty_search_returns_all(self, async_client: AsyncClient):
        response = await async_client.get("/api/dictionary/search")
        assert response.json()["count"] == 4

    @pytest.mark.asyncio
    async def test_letter(self, async_client: AsyncClient):
        response = await async_client.get("/api/dictionary/letter/e")
        data = response.json()
        assert [r["numee"] for r in data["results"]] == ["Èdo"]
        assert data["total"] == 4

    @pytest.mark.asyncio
    async def test_word_of_day(self, async_client: AsyncClient):
        # 2024-01-01 is day 1 -> index 1 of 4
        response = await async_client.get("/api/word-of-day", params={"date": "2024-01-01"})
        data = response.json()
        assert data["date"] == "2024-01-01"
        assert data["entry"]["numee"] == "Koko"

    @pytest.mark.asyncio
    async def test_word_of_day_empty_dictionary(self, async_client: AsyncClient, test_app):
        test_app.state.dictionary = []
        response = await async_client.get("/api/word-of-day")
        assert response.json()["entry"] is None


class TestNavigateApi:
    """Tests for POST /api/navigate."""

    def test_dictionary_keeps_seed(self, client):
        response = client.post("/api/navigate", json={"view": "dictionary", "seed": "K"})
        assert response.json() == {
            "requested": "dictionary",
            "view": "dictionary",
            "rendered": "dictionary",
            "seed": "K",
        }

    def test_other_view_drops_seed(self, client):
        response = client.post("/api/navigate", json={"view": "quiz", "seed": "K"})
        assert response.json()["seed"] == ""

    def test_admin_denied(self, client):
        response = client.post("/api/navigate", json={"view": "admin"})
        assert response.json()["view"] == "login"

    def test_unknown_view(self, client):
        response = client.post("/api/navigate", json={"view": "somewhere"})
        assert response.json()["view"] == "home"


class TestAuthRoutes:
    """Tests for login and logout."""

    def test_login_page(self, client):
        response = client.get("/login")
        assert response.status_code == 200
        assert 'name="password"' in response.text

    def test_admin_login_opens_admin(self, client):
        response = _login(client, "ADMIN", "admin")
        assert response.status_code == 303
        assert response.headers["location"] == "/views/admin"

        page = client.get("/views/admin")
        assert "Tableau de bord Admin" in page.text
        assert "Bienvenue, Admin" in page.text

    def test_user_login_opens_dashboard(self, client):
        response = _login(client, "user", "user")
        assert response.headers["location"] == "/views/user-dashboard"
        assert 'data-view="user-dashboard"' in client.get("/views/user-dashboard").text

    def test_user_cannot_open_admin(self, client):
        _login(client, "user", "user")
        assert 'data-view="login"' in client.get("/views/admin").text

    def test_failed_login(self, client):
        response = _login(client, "admin", "nope")
        assert response.status_code == 401
        assert "incorrect" in response.text
        assert client.get("/api/me").json() == {"identity": None}

    def test_failed_login_keeps_previous_identity(self, client):
        _login(client, "user", "user")
        _login(client, "admin", "nope")
        assert client.get("/api/me").json() == {"identity": {"username": "User", "role": "user"}}

    def test_logout_regates_admin(self, client):
        _login(client, "admin", "admin")
        assert "Tableau de bord Admin" in client.get("/views/admin").text

        response = client.post("/logout", follow_redirects=False)
        assert response.status_code == 303
        assert client.get("/api/me").json() == {"identity": None}
        assert 'data-view="login"' in client.get("/views/admin").text

    def test_custom_authenticator(self, client, test_app):
        class OnlyAmara(Authenticator):
            def verify(self, username, password):
                if username == "amara" and password == "pw":
                    return Identity(username="Amara", role=Role.ADMIN)
                return None

        test_app.dependency_overrides[get_authenticator] = OnlyAmara
        assert _login(client, "admin", "admin").status_code == 401
        assert _login(client, "amara", "pw").headers["location"] == "/views/admin"


class TestThemeRoute:
    """Tests for POST /theme."""

    def test_sets_theme(self, client):
        response = client.post(
            "/theme",
            data={"theme": "dark"},
            headers={"referer": "http://testserver/dictionary"},
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/dictionary"
        assert 'data-theme="dark"' in client.get("/").text

    def test_keeps_referer_query(self, client):
        response = client.post(
            "/theme",
            data={"theme": "classic"},
            headers={"referer": "http://testserver/dictionary?letter=K"},
            follow_redirects=False,
        )
        assert response.headers["location"] == "/dictionary?letter=K"

    def test_ignores_foreign_referer_host(self, client):
        response = client.post(
            "/theme",
            data={"theme": "light"},
            headers={"referer": "http://testserver//evil.example/x"},
            follow_redirects=False,
        )
        assert response.headers["location"] == "/"

    def test_rejects_unknown_theme(self, client):
        response = client.post("/theme", data={"theme": "neon"})
        assert response.status_code == 400


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_check(self, async_client: AsyncClient):
        """Should return healthy status."""
        response = await async_client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["entries"] == 4
