"""Likes — verifies like/unlike semantics and the isLiked flag.

Invariants:
    - like then unlike by the same user restores the original count
    - A repeated like (or an unlike without a like) is a 400 error
    - isLiked reflects the requesting viewer only
"""

from uuid import uuid4


async def test_like_increments_count(client, blog, reader_headers):
    res = await client.post(f"/api/blogs/{blog['id']}/like", headers=reader_headers)
    assert res.status_code == 200
    assert res.json()["data"] == {"likes": 1, "isLiked": True}


async def test_second_like_is_rejected(client, blog, reader_headers):
    await client.post(f"/api/blogs/{blog['id']}/like", headers=reader_headers)
    res = await client.post(f"/api/blogs/{blog['id']}/like", headers=reader_headers)
    assert res.status_code == 400
    assert res.json()["message"] == "You already liked this blog"


async def test_like_then_unlike_restores_count(client, blog, reader_headers):
    await client.post(f"/api/blogs/{blog['id']}/like", headers=reader_headers)
    res = await client.delete(f"/api/blogs/{blog['id']}/like", headers=reader_headers)
    assert res.status_code == 200
    assert res.json()["data"] == {"likes": 0, "isLiked": False}


async def test_unlike_without_like_is_rejected(client, blog, reader_headers):
    res = await client.delete(f"/api/blogs/{blog['id']}/like", headers=reader_headers)
    assert res.status_code == 400
    assert res.json()["message"] == "You have not liked this blog"


async def test_likes_from_different_users_accumulate(
    client, blog, reader_headers, other_headers,
):
    await client.post(f"/api/blogs/{blog['id']}/like", headers=reader_headers)
    res = await client.post(f"/api/blogs/{blog['id']}/like", headers=other_headers)
    assert res.json()["data"]["likes"] == 2


async def test_is_liked_depends_on_viewer(client, blog, reader_headers, other_headers):
    await client.post(f"/api/blogs/{blog['id']}/like", headers=reader_headers)

    as_reader = await client.get("/api/blogs", headers=reader_headers)
    as_other = await client.get("/api/blogs", headers=other_headers)
    anonymous = await client.get("/api/blogs")

    assert as_reader.json()["data"][0]["isLiked"] is True
    assert as_other.json()["data"][0]["isLiked"] is False
    assert anonymous.json()["data"][0]["isLiked"] is False


async def test_like_requires_token(client, blog):
    res = await client.post(f"/api/blogs/{blog['id']}/like")
    assert res.status_code == 401


async def test_like_unknown_blog_is_404(client, reader_headers):
    res = await client.post(f"/api/blogs/{uuid4()}/like", headers=reader_headers)
    assert res.status_code == 404
