"""Product Category Membership — linking products to categories through the join table.

Invariants:
    - Linking is idempotent and returns 204
    - Listing a product's categories skips soft-deleted categories
    - Either side missing or soft-deleted → 404
"""


async def _seed(client):
    await client.post("/api/products", json={"name": "Hammer", "price": 10})
    await client.post("/api/categories", json={"name": "Tools"})
    await client.post("/api/categories", json={"name": "Hardware"})


async def test_link_and_list_categories(client):
    await _seed(client)

    assert (await client.put("/api/products/1/categories/2")).status_code == 204
    assert (await client.put("/api/products/1/categories/1")).status_code == 204

    res = await client.get("/api/products/1/categories")
    assert res.status_code == 200
    assert [c["name"] for c in res.json()] == ["Tools", "Hardware"]


async def test_link_twice_is_idempotent(client):
    await _seed(client)

    await client.put("/api/products/1/categories/1")
    assert (await client.put("/api/products/1/categories/1")).status_code == 204

    assert len((await client.get("/api/products/1/categories")).json()) == 1


async def test_soft_deleted_category_is_not_listed(client):
    await _seed(client)
    await client.put("/api/products/1/categories/1")
    await client.put("/api/products/1/categories/2")

    await client.delete("/api/categories/1")

    names = [c["name"] for c in (await client.get("/api/products/1/categories")).json()]
    assert names == ["Hardware"]


async def test_unlink(client):
    await _seed(client)
    await client.put("/api/products/1/categories/1")

    assert (await client.delete("/api/products/1/categories/1")).status_code == 204
    assert (await client.get("/api/products/1/categories")).json() == []


async def test_unlink_missing_link_returns_404(client):
    await _seed(client)
    assert (await client.delete("/api/products/1/categories/1")).status_code == 404


async def test_link_to_missing_category_returns_404(client):
    await _seed(client)
    res = await client.put("/api/products/1/categories/99")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_link_soft_deleted_product_returns_404(client):
    await _seed(client)
    await client.delete("/api/products/1")

    assert (await client.put("/api/products/1/categories/1")).status_code == 404
    assert (await client.get("/api/products/1/categories")).status_code == 404
