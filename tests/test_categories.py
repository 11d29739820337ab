from bson import ObjectId

BASE = "/api/v1/category"


def test_create_category(client, admin_headers, mongo):
    res = client.post(f"{BASE}/create-category", json={"name": "Home Office"}, headers=admin_headers)

    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "New Category Created"
    assert body["category"]["slug"] == "home-office"
    assert mongo["category"].count_documents({}) == 1


def test_create_category_requires_name(client, admin_headers):
    res = client.post(f"{BASE}/create-category", json={}, headers=admin_headers)

    assert res.status_code == 401
    assert res.json() == {"message": "Name is required"}


def test_create_duplicate_category(client, admin_headers, mongo):
    client.post(f"{BASE}/create-category", json={"name": "Toys"}, headers=admin_headers)
    res = client.post(f"{BASE}/create-category", json={"name": "Toys"}, headers=admin_headers)

    assert res.status_code == 200
    assert res.json() == {"success": False, "message": "Category Already Exists"}
    assert mongo["category"].count_documents({}) == 1


def test_create_category_needs_admin(client, user_headers):
    res = client.post(f"{BASE}/create-category", json={"name": "Toys"}, headers=user_headers)
    assert res.status_code == 403


def test_create_category_store_failure(client, admin_headers, fail_on):
    fail_on("insert_one", collection="category")
    res = client.post(f"{BASE}/create-category", json={"name": "Toys"}, headers=admin_headers)

    assert res.status_code == 500
    assert res.json()["message"] == "Error in Category"


def test_list_and_single_category(client, admin_headers):
    for name in ("Toys", "Books"):
        client.post(f"{BASE}/create-category", json={"name": name}, headers=admin_headers)

    listing = client.get(f"{BASE}/get-category").json()
    assert listing["success"] is True
    assert [c["name"] for c in listing["category"]] == ["Books", "Toys"]

    single = client.get(f"{BASE}/single-category/toys").json()
    assert single["category"]["name"] == "Toys"


def test_list_categories_store_failure(client, fail_on):
    fail_on("find", collection="category")
    res = client.get(f"{BASE}/get-category")

    assert res.status_code == 500
    assert res.json()["success"] is False


def test_update_category(client, admin_headers):
    created = client.post(f"{BASE}/create-category", json={"name": "Toys"}, headers=admin_headers).json()
    cid = created["category"]["id"]

    res = client.put(f"{BASE}/update-category/{cid}", json={"name": "Board Games"}, headers=admin_headers)

    body = res.json()
    assert body["message"] == "Category Updated Successfully"
    assert body["category"]["name"] == "Board Games"
    assert body["category"]["slug"] == "board-games"


def test_delete_category(client, admin_headers, mongo):
    created = client.post(f"{BASE}/create-category", json={"name": "Toys"}, headers=admin_headers).json()

    res = client.delete(f"{BASE}/delete-category/{created['category']['id']}", headers=admin_headers)

    assert res.json() == {"success": True, "message": "Category Deleted Successfully"}
    assert mongo["category"].find_one({"_id": ObjectId(created["category"]["id"])}) is None
