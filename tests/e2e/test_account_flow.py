"""End-to-end tests for accounts: profiles, avatars and passwords."""

import re

from scribe.adapter.email import EmailSender

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def login(client, email: str, password: str):
    return client.post("/auth/login", json={"email": email, "password": password})


class TestProfiles:
    """Own profile versus public profile."""

    def test_me_includes_email(self, client, sign_up):
        alice = sign_up()

        response = client.get("/users/me", headers=alice["headers"])

        assert response.status_code == 200
        assert response.json()["email"] == "alice@example.com"

    def test_public_profile_hides_email(self, client, sign_up):
        alice = sign_up()

        response = client.get(f"/users/{alice['id']}")

        assert response.status_code == 200
        assert response.json()["username"] == "alice"
        assert "email" not in response.json()

    def test_duplicate_username_conflicts(self, client, sign_up):
        # Arrange
        sign_up("alice")

        # Act
        response = client.post(
            "/users",
            json={
                "username": "alice",
                "email": "other@example.com",
                "password": "secret",
            },
        )

        # Assert
        assert response.status_code == 409
        assert response.json()["error"] == "already_exists"

    def test_list_users(self, client, sign_up):
        sign_up("alice")
        sign_up("bob")

        response = client.get("/users")

        assert {u["username"] for u in response.json()["users"]} == {"alice", "bob"}


class TestAvatar:
    """Avatar upload."""

    def test_upload_sets_avatar_url(self, client, sign_up):
        # Arrange
        alice = sign_up()

        # Act
        response = client.put(
            "/users/me/avatar",
            files={"file": ("avatar.png", PNG, "image/png")},
            headers=alice["headers"],
        )

        # Assert
        assert response.status_code == 200, response.text
        assert response.json()["avatar_url"] == (
            f"https://avatars.test/avatars/{alice['id']}.png"
        )
        profile = client.get(f"/users/{alice['id']}").json()
        assert profile["avatar_url"] == response.json()["avatar_url"]

    def test_rejects_non_image(self, client, sign_up):
        alice = sign_up()

        response = client.put(
            "/users/me/avatar",
            files={"file": ("notes.txt", b"hello", "text/plain")},
            headers=alice["headers"],
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"


class TestPasswords:
    """Password change and recovery."""

    def test_wrong_password_rejected(self, client, sign_up):
        sign_up()

        response = login(client, "alice@example.com", "wrong-password")

        assert response.status_code == 401
        assert response.json()["error"] == "invalid_credential"

    def test_change_password(self, client, sign_up):
        # Arrange
        alice = sign_up()

        # Act
        response = client.put(
            "/auth/password",
            json={"current_password": "secret", "new_password": "better-secret"},
            headers=alice["headers"],
        )

        # Assert
        assert response.json() == {"status": "ok"}
        assert login(client, "alice@example.com", "secret").status_code == 401
        assert login(client, "alice@example.com", "better-secret").status_code == 200

    def test_change_password_requires_current(self, client, sign_up):
        alice = sign_up()

        response = client.put(
            "/auth/password",
            json={"current_password": "guess", "new_password": "better-secret"},
            headers=alice["headers"],
        )

        assert response.status_code == 400

    def test_recovery(self, client, container, sign_up):
        # Arrange
        sign_up()
        requested = client.post("/auth/recovery", json={"email": "alice@example.com"})
        sender = client.portal.call(container.get, EmailSender)
        code = re.search(r"<strong>(\d{6})</strong>", sender.sent[-1].html).group(1)

        # Act
        response = client.post(
            "/auth/recovery/reset",
            json={
                "email": "alice@example.com",
                "code": code,
                "new_password": "recovered",
            },
        )

        # Assert
        assert requested.status_code == 202
        assert sender.sent[-1].to == "alice@example.com"
        assert response.json() == {"status": "ok"}
        assert login(client, "alice@example.com", "recovered").status_code == 200

    def test_recovery_for_unknown_email_looks_the_same(self, client, container):
        response = client.post("/auth/recovery", json={"email": "nobody@example.com"})

        assert response.status_code == 202
        assert client.portal.call(container.get, EmailSender).sent == []

    def test_reset_with_wrong_code(self, client, sign_up):
        # Arrange
        sign_up()
        client.post("/auth/recovery", json={"email": "alice@example.com"})

        # Act
        response = client.post(
            "/auth/recovery/reset",
            json={
                "email": "alice@example.com",
                "code": "abcdef",
                "new_password": "recovered",
            },
        )

        # Assert
        assert response.status_code == 400
