"""End-to-end tests for posts, comments and replies."""


from uuid import uuid4


def create_post(client, headers, title="Hello") -> dict:
    response = client.post(
        "/posts", json={"title": title, "content": "Body"}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_comment(client, headers, post_id, content="Nice post") -> dict:
    response = client.post(
        f"/posts/{post_id}/comments", json={"content": content}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestPosts:
    """Post lifecycle."""

    def test_create_list_and_read(self, client, sign_up):
        # Arrange
        alice = sign_up()

        # Act
        post = create_post(client, alice["headers"])

        # Assert
        assert post["author_id"] == alice["id"]
        assert post["author_username"] == "alice"
        listed = client.get("/posts").json()["posts"]
        assert [p["post_id"] for p in listed] == [post["post_id"]]
        assert client.get(f"/posts/{post['post_id']}").json()["title"] == "Hello"

    def test_posts_by_user(self, client, sign_up):
        # Arrange
        alice, bob = sign_up("alice"), sign_up("bob")
        mine = create_post(client, alice["headers"], "Mine")
        create_post(client, bob["headers"], "Theirs")

        # Act
        public = client.get(f"/users/{alice['id']}/posts")
        own = client.get("/users/me/posts", headers=alice["headers"])

        # Assert
        assert [p["post_id"] for p in public.json()["posts"]] == [mine["post_id"]]
        assert [p["post_id"] for p in own.json()["posts"]] == [mine["post_id"]]

    def test_only_author_edits(self, client, sign_up):
        # Arrange
        alice, bob = sign_up("alice"), sign_up("bob")
        post_id = create_post(client, alice["headers"])["post_id"]

        # Act
        forbidden = client.patch(
            f"/posts/{post_id}", json={"title": "Hijacked"}, headers=bob["headers"]
        )
        allowed = client.patch(
            f"/posts/{post_id}", json={"title": "Edited"}, headers=alice["headers"]
        )

        # Assert
        assert forbidden.status_code == 403
        assert forbidden.json()["error"] == "forbidden"
        assert allowed.status_code == 200
        assert allowed.json()["title"] == "Edited"
        assert allowed.json()["content"] == "Body"

    def test_empty_title_rejected(self, client, sign_up):
        alice = sign_up()

        response = client.post(
            "/posts", json={"title": "", "content": "Body"}, headers=alice["headers"]
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_deleting_post_keeps_comments(self, client, sign_up):
        # Arrange
        alice = sign_up()
        post_id = create_post(client, alice["headers"])["post_id"]
        comment = create_comment(client, alice["headers"], post_id)

        # Act
        deleted = client.delete(f"/posts/{post_id}", headers=alice["headers"])

        # Assert
        assert deleted.json() == {"status": "ok"}
        assert client.get(f"/posts/{post_id}").status_code == 404
        remaining = client.get(f"/posts/{post_id}/comments").json()
        assert [c["comment_id"] for c in remaining["comments"]] == [
            comment["comment_id"]
        ]


class TestComments:
    """Comment and reply lifecycle."""

    def test_comment_on_missing_post(self, client, sign_up):
        alice = sign_up()

        response = client.post(
            f"/posts/{uuid4()}/comments",
            json={"content": "Hello?"},
            headers=alice["headers"],
        )

        assert response.status_code == 404

    def test_deleting_comment_keeps_post(self, client, sign_up):
        # Arrange
        alice = sign_up()
        post_id = create_post(client, alice["headers"])["post_id"]
        comment = create_comment(client, alice["headers"], post_id)
        client.post(
            f"/comments/{comment['comment_id']}/replies",
            json={"content": "Reply"},
            headers=alice["headers"],
        )

        # Act
        deleted = client.delete(
            f"/comments/{comment['comment_id']}", headers=alice["headers"]
        )

        # Assert
        assert deleted.status_code == 200
        assert client.get(f"/posts/{post_id}").status_code == 200
        assert client.get(f"/posts/{post_id}/comments").json()["total"] == 0

    def test_edit_comment_and_reply(self, client, sign_up):
        # Arrange
        alice, bob = sign_up("alice"), sign_up("bob")
        post_id = create_post(client, alice["headers"])["post_id"]
        comment_id = create_comment(client, alice["headers"], post_id)["comment_id"]
        reply_id = client.post(
            f"/comments/{comment_id}/replies",
            json={"content": "Frist"},
            headers=bob["headers"],
        ).json()["reply_id"]

        # Act
        comment = client.patch(
            f"/comments/{comment_id}",
            json={"content": "Edited comment"},
            headers=alice["headers"],
        )
        reply = client.patch(
            f"/comments/{comment_id}/replies/{reply_id}",
            json={"content": "First"},
            headers=bob["headers"],
        )
        stolen = client.patch(
            f"/comments/{comment_id}/replies/{reply_id}",
            json={"content": "Mine now"},
            headers=alice["headers"],
        )

        # Assert
        assert comment.json()["content"] == "Edited comment"
        assert reply.json()["content"] == "First"
        assert stolen.status_code == 403

    def test_delete_reply(self, client, sign_up):
        # Arrange
        alice = sign_up()
        post_id = create_post(client, alice["headers"])["post_id"]
        comment_id = create_comment(client, alice["headers"], post_id)["comment_id"]
        reply_id = client.post(
            f"/comments/{comment_id}/replies",
            json={"content": "Short-lived"},
            headers=alice["headers"],
        ).json()["reply_id"]

        # Act
        response = client.delete(
            f"/comments/{comment_id}/replies/{reply_id}", headers=alice["headers"]
        )

        # Assert
        assert response.json() == {"status": "ok"}
        listed = client.get(f"/posts/{post_id}/comments").json()["comments"][0]
        assert listed["replies"] == []
