"""
HTTP tests for the Timeline API
Run: pytest test_api.py
"""

import logging

from conftest import API, PNG_BYTES


def _create_category(client, name="History", **extra):
    response = client.post(f"{API}/categories", json={"name": name, **extra})
    assert response.status_code == 201, response.text
    return response.json()["category"]


def _post_data(**overrides):
    data = {
        "title": "Founding",
        "date": "2020-01-01",
        "description": "The organisation was founded.",
        "category": "History",
        "location": "Dhaka",
        "year": "2020",
    }
    data.update(overrides)
    return data


def _create_post(client, files=None, **overrides):
    response = client.post(f"{API}/posts", data=_post_data(**overrides), files=files)
    assert response.status_code == 201, response.text
    return response.json()


def _submit_request(client, files=None, **overrides):
    data = _post_data(**overrides)
    data.setdefault("submittedBy", "Rahim")
    response = client.post(f"{API}/post-requests", data=data, files=files)
    assert response.status_code == 201, response.text
    return response.json()


def _png(name="photo.png"):
    return {"image": (name, PNG_BYTES, "image/png")}


# ============================================
# SERVICE ENDPOINTS
# ============================================

def test_root_and_health(client):
    root = client.get("/")
    assert root.status_code == 200
    assert root.json()["success"] is True

    assert client.get("/health").json() == {"success": True, "status": "healthy"}


# ============================================
# CATEGORIES
# ============================================

def test_category_lifecycle(client):
    created = _create_category(client, "History")
    assert created["postCount"] == 0
    assert created["color"] == "bg-gray-100 text-gray-800"

    _create_category(client, "Culture", color="bg-blue-100 text-blue-800")

    listing = client.get(f"{API}/categories").json()
    assert listing["success"] is True
    assert [c["name"] for c in listing["categories"]] == ["Culture", "History"]

    updated = client.put(f"{API}/categories/{created['id']}", json={"name": "Past"})
    assert updated.status_code == 200
    assert updated.json()["category"]["name"] == "Past"

    deleted = client.delete(f"{API}/categories/{created['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["success"] is True


def test_category_errors_use_envelope(client):
    _create_category(client, "History")

    duplicate = client.post(f"{API}/categories", json={"name": "History", "color": "bg-red-100"})
    assert duplicate.status_code == 400
    assert duplicate.json() == {"success": False, "message": "A category with this name already exists"}

    blank = client.post(f"{API}/categories", json={"name": "  "})
    assert blank.status_code == 400
    assert blank.json()["success"] is False

    missing = client.delete(f"{API}/categories/9999")
    assert missing.status_code == 404
    assert missing.json() == {"success": False, "message": "Category not found"}


def test_category_in_use_cannot_be_deleted(client):
    category = _create_category(client, "History")
    _create_post(client)

    response = client.delete(f"{API}/categories/{category['id']}")

    assert response.status_code == 400
    assert response.json()["success"] is False


# ============================================
# POSTS
# ============================================

def test_post_round_trip_with_image(client):
    _create_category(client)

    created = _create_post(client, files=_png())
    post = created["post"]
    assert created["postId"] == post["id"]
    assert post["status"] == "draft"
    assert post["imageUrl"] == f"/uploads/timeline/{post['image']}"

    fetched = client.get(f"{API}/posts/{post['id']}").json()["post"]
    assert fetched["title"] == "Founding"
    assert fetched["imageUrl"] == post["imageUrl"]

    served = client.get(post["imageUrl"])
    assert served.status_code == 200
    assert served.content == PNG_BYTES


def test_post_without_image_has_no_url(client):
    _create_category(client)

    post = _create_post(client)["post"]

    assert post["image"] is None
    assert post["imageUrl"] is None


def test_post_rejects_non_image_upload(client):
    _create_category(client)

    response = client.post(
        f"{API}/posts",
        data=_post_data(),
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert client.get(f"{API}/posts").json()["total"] == 0


def test_post_requires_year(client):
    _create_category(client)

    response = client.post(f"{API}/posts", data=_post_data(year="soon"))

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "A valid year is required"}


def test_duplicate_post_conflicts(client):
    _create_category(client)
    first = _create_post(client)["post"]

    response = client.post(f"{API}/posts", data=_post_data(description="Other"))

    assert response.status_code == 400
    assert client.get(f"{API}/posts/{first['id']}").json()["post"]["description"] == "The organisation was founded."


def test_list_posts_pagination(client):
    _create_category(client)
    for year in (2001, 2003, 2002):
        _create_post(client, title=f"Event {year}", year=str(year))

    page = client.get(f"{API}/posts", params={"page": 1, "limit": 2}).json()
    assert page["total"] == 3
    assert page["totalPages"] == 2
    assert [p["year"] for p in page["posts"]] == [2003, 2002]

    second = client.get(f"{API}/posts", params={"page": 2, "limit": 2}).json()
    assert [p["year"] for p in second["posts"]] == [2001]

    beyond = client.get(f"{API}/posts", params={"page": 5, "limit": 2}).json()
    assert beyond["posts"] == []
    assert beyond["total"] == 3
    assert beyond["page"] == 5


def test_list_posts_filters(client):
    _create_category(client)
    _create_category(client, "Culture")
    _create_post(client, title="Liberation War", year="1971", status="published")
    _create_post(client, title="Festival", category="Culture", year="1990")

    assert client.get(f"{API}/posts", params={"category": "Culture"}).json()["total"] == 1
    assert client.get(f"{API}/posts", params={"status": "published"}).json()["total"] == 1
    assert client.get(f"{API}/posts", params={"year": 1990}).json()["total"] == 1

    found = client.get(f"{API}/posts", params={"search": "liberation"}).json()
    assert [p["title"] for p in found["posts"]] == ["Liberation War"]


def test_bad_pagination_is_rejected(client):
    response = client.get(f"{API}/posts", params={"page": 0})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_large_page_size_is_accepted(client):
    _create_category(client)
    _create_post(client, title="Published", status="published")

    listing = client.get(f"{API}/posts", params={"limit": 200})
    assert listing.status_code == 200
    assert listing.json()["total"] == 1
    assert listing.json()["totalPages"] == 1

    by_category = client.get(f"{API}/posts/category/History", params={"limit": 500})
    assert by_category.status_code == 200
    assert len(by_category.json()["posts"]) == 1

    requests = client.get(f"{API}/post-requests", params={"limit": 200})
    assert requests.status_code == 200


def test_posts_by_category_only_published(client):
    _create_category(client)
    _create_post(client, title="Draft")
    _create_post(client, title="Published", status="published")

    response = client.get(f"{API}/posts/category/History")

    assert response.status_code == 200
    assert [p["title"] for p in response.json()["posts"]] == ["Published"]


def test_update_post_moves_category_count(client):
    _create_category(client)
    _create_category(client, "Culture")
    post = _create_post(client)["post"]

    response = client.put(f"{API}/posts/{post['id']}", data=_post_data(category="Culture"))
    assert response.status_code == 200
    assert response.json()["warnings"] == []

    counts = {c["name"]: c["postCount"] for c in client.get(f"{API}/categories").json()["categories"]}
    assert counts == {"History": 0, "Culture": 1}


def test_patch_post_status(client):
    _create_category(client)
    post = _create_post(client)["post"]

    response = client.patch(f"{API}/posts/{post['id']}/status", json={"status": "published"})
    assert response.status_code == 200
    assert response.json()["post"]["status"] == "published"

    invalid = client.patch(f"{API}/posts/{post['id']}/status", json={"status": "archived"})
    assert invalid.status_code == 400


def test_unknown_post_is_404(client):
    response = client.get(f"{API}/posts/9999")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Post not found"}


def test_delete_post(client, upload_dir):
    _create_category(client)
    post = _create_post(client, files=_png())["post"]

    response = client.delete(f"{API}/posts/{post['id']}")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert not (upload_dir / post["image"]).exists()
    assert client.get(f"{API}/posts/{post['id']}").status_code == 404


# ============================================
# POST REQUESTS
# ============================================

def test_moderation_scenario(client, upload_dir):
    category = _create_category(client)

    submitted = _submit_request(client, files=_png())
    request = submitted["request"]
    assert submitted["requestId"] == request["id"]
    assert request["status"] == "pending"
    assert request["submittedBy"] == "Rahim"
    assert request["imageUrl"].endswith(request["image"])

    stats = client.get(f"{API}/post-requests/stats/count").json()["stats"]
    assert stats == {"pending": 1, "approved": 0, "rejected": 0, "total": 1}

    approved = client.put(
        f"{API}/post-requests/{request['id']}/status",
        json={"status": "approved", "reviewNotes": "Verified"},
    )
    assert approved.status_code == 200, approved.text
    body = approved.json()
    assert body["message"] == "Request approved"
    assert body["request"]["status"] == "approved"
    assert body["request"]["reviewedBy"] == "Admin"
    assert body["request"]["reviewNotes"] == "Verified"
    assert body["post"]["status"] == "published"
    assert body["post"]["originalRequestId"] == request["id"]

    listing = client.get(f"{API}/posts", params={"status": "published"}).json()
    assert [p["id"] for p in listing["posts"]] == [body["post"]["id"]]

    counts = client.get(f"{API}/categories").json()["categories"]
    assert counts[0]["id"] == category["id"]
    assert counts[0]["postCount"] == 1

    again = client.put(f"{API}/post-requests/{request['id']}/status", json={"status": "approved"})
    assert again.status_code == 400
    assert client.get(f"{API}/posts").json()["total"] == 1

    # The post and the request share one file
    assert client.delete(f"{API}/posts/{body['post']['id']}").status_code == 200
    assert (upload_dir / request["image"]).exists()
    assert client.delete(f"{API}/post-requests/{request['id']}").status_code == 200
    assert not (upload_dir / request["image"]).exists()


def test_reject_request(client):
    _create_category(client)
    request = _submit_request(client)["request"]

    response = client.put(
        f"{API}/post-requests/{request['id']}/status",
        json={"status": "rejected", "reviewedBy": "Moderator"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Request rejected"
    assert body["post"] is None
    assert body["request"]["reviewedBy"] == "Moderator"
    assert client.get(f"{API}/posts").json()["total"] == 0


def test_approved_request_stays_approved(client):
    _create_category(client)
    request = _submit_request(client)["request"]
    client.put(f"{API}/post-requests/{request['id']}/status", json={"status": "approved"})

    response = client.put(f"{API}/post-requests/{request['id']}/status", json={"status": "rejected"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Request has already been reviewed"}
    assert client.get(f"{API}/post-requests/{request['id']}").json()["request"]["status"] == "approved"
    assert client.get(f"{API}/posts").json()["total"] == 1


def test_review_needs_valid_status(client):
    _create_category(client)
    request = _submit_request(client)["request"]

    response = client.put(f"{API}/post-requests/{request['id']}/status", json={"status": "maybe"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "A valid status is required"}


def test_submit_request_unknown_category(client):
    response = client.post(f"{API}/post-requests", data=_post_data(category="Nowhere"))

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Category not found"}


def test_submit_request_missing_title(client):
    _create_category(client)

    response = client.post(f"{API}/post-requests", data=_post_data(title=""))

    assert response.status_code == 400
    assert response.json()["message"] == "Title is required"


def test_list_requests_filters_and_detail(client):
    _create_category(client)
    first = _submit_request(client, title="First")["request"]
    _submit_request(client, title="Second", year="1999")
    client.put(f"{API}/post-requests/{first['id']}/status", json={"status": "rejected"})

    pending = client.get(f"{API}/post-requests", params={"status": "pending"}).json()
    assert [r["title"] for r in pending["requests"]] == ["Second"]

    newest_first = client.get(f"{API}/post-requests").json()
    assert [r["title"] for r in newest_first["requests"]] == ["Second", "First"]
    assert newest_first["totalPages"] == 1

    assert client.get(f"{API}/post-requests", params={"year": 1999}).json()["total"] == 1

    detail = client.get(f"{API}/post-requests/{first['id']}").json()
    assert detail["request"]["status"] == "rejected"

    missing = client.get(f"{API}/post-requests/9999")
    assert missing.status_code == 404
    assert missing.json()["success"] is False


def test_requests_are_logged_with_query(client, caplog):
    with caplog.at_level(logging.INFO, logger="app.requests"):
        client.get(f"{API}/posts", params={"page": 2})

    assert any(
        record.getMessage().startswith(f"GET {API}/posts?page=2 -> 200")
        for record in caplog.records
        if record.name == "app.requests"
    )
