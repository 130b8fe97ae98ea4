"""End-to-end Scenario — admin publishes, a reader views and comments, admin deletes."""


async def test_publish_read_comment_delete(
    client, admin_headers, reader_headers,
):
    created = await client.post(
        "/api/blogs", json={"title": "Hello", "content": "World"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    blog = created.json()["data"]
    assert blog["likes"] == 0
    assert blog["comments"] == 0

    forbidden = await client.post(
        "/api/blogs", json={"title": "Hello", "content": "World"},
        headers=reader_headers,
    )
    assert forbidden.status_code == 403

    viewed = await client.get(f"/api/blogs/{blog['id']}", headers=reader_headers)
    assert viewed.json()["data"]["views"] == 1

    commented = await client.post(
        f"/api/blogs/{blog['id']}/comments", json={"text": "Nice!"},
        headers=reader_headers,
    )
    assert commented.json()["data"]["comments"] == 1

    deleted = await client.delete(f"/api/blogs/{blog['id']}", headers=admin_headers)
    assert deleted.status_code == 200

    gone = await client.get(f"/api/blogs/{blog['id']}", headers=reader_headers)
    assert gone.status_code == 404
