"""
Blog Posts API — /posts Endpoint Integration Tests
===================================================

What:  Exercises the HTTP surface against a real (in-memory SQLite) database.
How:   Ten posts are seeded before each test; the database is dropped after.
       Responses are cross-checked with what the database holds.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest
from sqlalchemy import func, select

from blog_api.models.post import Post


async def count_posts(session_factory) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count(Post.id)))).scalar()


async def load_post(session_factory, post_id: str):
    async with session_factory() as session:
        return await session.get(Post, UUID(post_id))


class TestListPosts:

    @pytest.mark.asyncio
    async def test_returns_all_existing_posts(self, test_client, seeded_posts, session_factory):
        response = await test_client.get("/posts")

        assert response.status_code == 200
        posts = response.json()["posts"]
        assert len(posts) >= 1
        assert len(posts) == await count_posts(session_factory)

    @pytest.mark.asyncio
    async def test_posts_have_right_fields(self, test_client, seeded_posts, session_factory):
        response = await test_client.get("/posts")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        body = response.json()
        assert set(body) == {"posts"}
        for post in body["posts"]:
            assert set(post) == {"id", "title", "content", "author"}

        res_post = body["posts"][0]
        stored = await load_post(session_factory, res_post["id"])
        assert res_post["id"] == str(stored.id)
        assert res_post["title"] == stored.title
        assert res_post["content"] == stored.content
        assert stored.author["firstName"] in res_post["author"]

    @pytest.mark.asyncio
    async def test_empty_collection(self, test_client):
        response = await test_client.get("/posts")

        assert response.status_code == 200
        assert response.json() == {"posts": []}

    @pytest.mark.asyncio
    async def test_oldest_first(self, test_client, session_factory):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        by_created = {}
        async with session_factory() as session:
            # Inserted out of chronological order
            for days in (2, 0, 1):
                post = Post(
                    title=f"Post {days}",
                    content="body",
                    author={"firstName": "Jane", "lastName": "Doe"},
                    created=base + timedelta(days=days),
                )
                session.add(post)
                await session.flush()
                by_created[days] = str(post.id)
            await session.commit()

        response = await test_client.get("/posts")

        assert response.status_code == 200
        ids = [post["id"] for post in response.json()["posts"]]
        assert ids == [by_created[days] for days in sorted(by_created)]


class TestGetPost:

    @pytest.mark.asyncio
    async def test_get_by_id(self, test_client, seeded_posts):
        seeded = seeded_posts[0]

        response = await test_client.get(f"/posts/{seeded['id']}")

        assert response.status_code == 200
        author = seeded["author"]
        assert response.json() == {
            "id": seeded["id"],
            "title": seeded["title"],
            "content": seeded["content"],
            "author": f"{author['firstName']} {author['lastName']}",
        }

    @pytest.mark.asyncio
    async def test_unknown_id_is_404(self, test_client, seeded_posts):
        response = await test_client.get(f"/posts/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_malformed_id_is_422(self, test_client):
        response = await test_client.get("/posts/not-a-uuid")

        assert response.status_code == 422


class TestCreatePost:

    @pytest.mark.asyncio
    async def test_adds_a_new_post(self, test_client, session_factory, new_post):
        response = await test_client.post("/posts", json=new_post)

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"id", "title", "content", "author"}
        assert body["id"] is not None
        assert body["title"] == new_post["title"]
        assert body["content"] == new_post["content"]

        stored = await load_post(session_factory, body["id"])
        assert stored.title == new_post["title"]
        assert stored.content == new_post["content"]
        assert stored.author["firstName"] == new_post["author"]["firstName"]
        assert stored.author["lastName"] == new_post["author"]["lastName"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "content", "author"])
    async def test_missing_required_field_is_400(self, test_client, session_factory, new_post, missing):
        del new_post[missing]

        response = await test_client.post("/posts", json=new_post)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == f"Missing `{missing}` in request body"
        assert await count_posts(session_factory) == 0

    @pytest.mark.asyncio
    async def test_empty_title_is_400(self, test_client, session_factory, new_post):
        new_post["title"] = ""

        response = await test_client.post("/posts", json=new_post)

        assert response.status_code == 400
        assert await count_posts(session_factory) == 0

    @pytest.mark.asyncio
    async def test_blank_author_names_allowed(self, test_client, new_post):
        new_post["author"] = {"firstName": "", "lastName": ""}

        response = await test_client.post("/posts", json=new_post)

        assert response.status_code == 201
        assert response.json()["author"] == ""

    @pytest.mark.asyncio
    async def test_empty_author_object_allowed(self, test_client, new_post):
        new_post["author"] = {}

        response = await test_client.post("/posts", json=new_post)

        assert response.status_code == 201
        assert response.json()["author"] == ""


class TestUpdatePost:

    @pytest.mark.asyncio
    async def test_updates_fields_sent(self, test_client, seeded_posts, session_factory):
        seeded = seeded_posts[0]
        update_data = {
            "id": seeded["id"],
            "title": "New Title",
            "content": "This is new content.",
        }

        response = await test_client.put(f"/posts/{seeded['id']}", json=update_data)

        assert response.status_code == 204
        assert response.content == b""
        stored = await load_post(session_factory, seeded["id"])
        assert stored.title == update_data["title"]
        assert stored.content == update_data["content"]
        assert stored.author == seeded["author"]

    @pytest.mark.asyncio
    async def test_updates_author(self, test_client, seeded_posts):
        seeded = seeded_posts[0]
        update_data = {"id": seeded["id"], "author": {"firstName": "Grace", "lastName": "Hopper"}}

        response = await test_client.put(f"/posts/{seeded['id']}", json=update_data)
        assert response.status_code == 204

        response = await test_client.get(f"/posts/{seeded['id']}")
        assert response.json()["author"] == "Grace Hopper"

    @pytest.mark.asyncio
    async def test_id_mismatch_is_400(self, test_client, seeded_posts, session_factory):
        seeded = seeded_posts[0]
        update_data = {"id": seeded_posts[1]["id"], "title": "New Title"}

        response = await test_client.put(f"/posts/{seeded['id']}", json=update_data)

        assert response.status_code == 400
        assert "must match" in response.json()["message"]
        stored = await load_post(session_factory, seeded["id"])
        assert stored.title == seeded["title"]

    @pytest.mark.asyncio
    async def test_missing_body_id_is_400(self, test_client, seeded_posts):
        seeded = seeded_posts[0]

        response = await test_client.put(f"/posts/{seeded['id']}", json={"title": "New Title"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_id_is_404(self, test_client, seeded_posts):
        post_id = str(uuid4())

        response = await test_client.put(f"/posts/{post_id}", json={"id": post_id, "title": "X"})

        assert response.status_code == 404


class TestDeletePost:

    @pytest.mark.asyncio
    async def test_deletes_post_by_id(self, test_client, seeded_posts, session_factory):
        seeded = seeded_posts[0]

        response = await test_client.delete(f"/posts/{seeded['id']}")

        assert response.status_code == 204
        assert await load_post(session_factory, seeded["id"]) is None
        assert await count_posts(session_factory) == len(seeded_posts) - 1

    @pytest.mark.asyncio
    async def test_unknown_id_is_404(self, test_client, seeded_posts, session_factory):
        response = await test_client.delete(f"/posts/{uuid4()}")

        assert response.status_code == 404
        assert await count_posts(session_factory) == len(seeded_posts)


class TestCrossCutting:

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/posts", headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_request_id_in_error_body(self, test_client):
        response = await test_client.get(
            f"/posts/{uuid4()}", headers={"X-Request-ID": "trace-me"}
        )

        assert response.json()["request_id"] == "trace-me"

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
