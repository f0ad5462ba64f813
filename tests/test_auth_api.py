"""Integration tests for the auth service endpoints via TestClient."""

from shared.core import auth
from shared.core.config import settings


def _signup(auth_client, **overrides):
    payload = {"name": "Alice", "email": "a@x.com", "password": "secret123"}
    payload.update(overrides)
    return auth_client.post("/api/auth/signup", json=payload)


class TestSignup:
    def test_fresh_email_returns_201(self, auth_client):
        response = _signup(auth_client)

        assert response.status_code == 201
        assert response.json()["message"] == "User registered successfully"

    def test_second_signup_with_same_email_fails(self, auth_client):
        assert _signup(auth_client).status_code == 201

        response = _signup(auth_client, name="Someone Else", password="another1")

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == "Failure"
        assert "already taken" in body["message"]

    def test_password_is_stored_hashed(self, auth_client, db):
        from shared.models.users import Users

        _signup(auth_client)

        user = db.query(Users).filter(Users.email == "a@x.com").one()
        assert user.password != "secret123"
        assert user.verify_password("secret123")

    def test_invalid_email_is_rejected(self, auth_client):
        response = _signup(auth_client, email="not-an-email")

        assert response.status_code == 400
        assert response.json()["status_code"] == "300"

    def test_short_password_is_rejected(self, auth_client):
        assert _signup(auth_client, password="123").status_code == 400

    def test_blank_name_is_rejected(self, auth_client):
        assert _signup(auth_client, name="   ").status_code == 400


class TestLogin:
    def test_valid_credentials_return_token(self, auth_client):
        _signup(auth_client)

        response = auth_client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "secret123"}
        )

        assert response.status_code == 200
        token = response.json()["token"]
        assert auth.verify_token(token).email == "a@x.com"

    def test_wrong_password_and_unknown_email_look_the_same(self, auth_client):
        _signup(auth_client)

        wrong_password = auth_client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "wrongpass"}
        )
        unknown_email = auth_client.post(
            "/api/auth/login", json={"email": "nobody@x.com", "password": "secret123"}
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()


class TestPasswordIsTakenVerbatim:
    def _login(self, auth_client, password):
        return auth_client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": password}
        )

    def test_surrounding_spaces_are_part_of_the_password(self, auth_client):
        assert _signup(auth_client, password="  secret123  ").status_code == 201

        assert self._login(auth_client, "secret123").status_code == 401
        assert self._login(auth_client, "  secret123  ").status_code == 200

    def test_invisible_characters_are_part_of_the_password(self, auth_client):
        assert _signup(auth_client, password="abc\u200bdef\u200bg").status_code == 201

        assert self._login(auth_client, "abcdefg").status_code == 401
        assert self._login(auth_client, "abc\u200bdef\u200bg").status_code == 200

    def test_trailing_spaces_count_towards_length(self, auth_client):
        assert _signup(auth_client, password="abc    ").status_code == 201

        assert self._login(auth_client, "abc    ").status_code == 200

    def test_other_fields_are_still_trimmed(self, auth_client, db):
        from shared.models.users import Users

        _signup(auth_client, name="  Alice  ")

        assert db.query(Users).filter(Users.email == "a@x.com").one().name == "Alice"


class TestMe:
    def test_returns_current_user(self, auth_client, register):
        headers = register("a@x.com", name="Alice")

        response = auth_client.get("/api/auth/me", headers=headers)

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Alice"
        assert body["email"] == "a@x.com"
        assert body["id"]
        assert "password" not in body

    def test_missing_token_is_unauthenticated(self, auth_client):
        response = auth_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_tampered_token_is_unauthenticated(self, auth_client, register):
        headers = register("a@x.com")
        headers["Authorization"] += "tampered"

        assert auth_client.get("/api/auth/me", headers=headers).status_code == 401

    def test_expired_token_is_unauthenticated(self, auth_client, register, monkeypatch):
        register("a@x.com")
        monkeypatch.setattr(settings, "JWT_EXPIRE_MINUTES", -5)
        token = auth.create_access_token({"sub": "a@x.com"})

        response = auth_client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    def test_token_for_unknown_user_is_unauthenticated(self, auth_client):
        token = auth.create_access_token({"sub": "ghost@x.com"})

        response = auth_client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401


def test_health(auth_client):
    assert auth_client.get("/api/auth/health").json() == {"status": "healthy"}
