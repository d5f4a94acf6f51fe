"""Tests for images API router."""

from datetime import datetime, timedelta, timezone
from typing import List

import pytest
from fastapi.testclient import TestClient

from imagespace.catalog import SENTINEL_TAG_ID, Catalog
from imagespace.models.image import Image

T1 = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def test_images(catalog: Catalog) -> List[Image]:
    """Create three images, oldest first."""
    return [
        catalog.add_image(
            f"joint_{i}.png",
            f"https://example.com/{i}.png",
            upload_date=T1 + timedelta(hours=i),
        )
        for i in range(3)
    ]


def test_list_images(client: TestClient, test_images: List[Image]) -> None:
    """Should list images newest first."""
    response = client.get("/api/images")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert [item["name"] for item in data["items"]] == [
        "joint_2.png",
        "joint_1.png",
        "joint_0.png",
    ]
    assert data["items"][0]["tag_names"] == ["Unclassified"]


def test_list_images_with_limit_and_offset(
    client: TestClient, test_images: List[Image]
) -> None:
    """Should page through the view."""
    response = client.get("/api/images?limit=2&offset=2")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert len(data["items"]) == 1
    assert data["items"][0]["name"] == "joint_0.png"


def test_list_images_with_query_and_tags(
    client: TestClient, catalog: Catalog, test_images: List[Image]
) -> None:
    """Should apply search text and tag filter and remember them."""
    catalog.update_image_tags(test_images[0].id, ["burst"])
    catalog.update_image_tags(test_images[1].id, ["offset"])

    response = client.get("/api/images?tags=burst&tags=offset&query=joint")
    data = response.json()
    assert {item["id"] for item in data["items"]} == {
        test_images[0].id,
        test_images[1].id,
    }
    assert catalog.tag_filter == {"burst", "offset"}
    assert catalog.search_query == "joint"


def test_add_image(client: TestClient, catalog: Catalog) -> None:
    """Should create an unclassified image."""
    response = client.post(
        "/api/images",
        json={"name": "a.png", "url": "data:image/png;base64,iVBORw0KGgo="},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["tags"] == [SENTINEL_TAG_ID]
    assert data["is_starred"] is False
    assert catalog.images[0].id == data["id"]


def test_add_image_rejects_wrong_type(client: TestClient, catalog: Catalog) -> None:
    """Should reject non PNG/JPEG data URLs."""
    response = client.post(
        "/api/images",
        json={"name": "a.gif", "url": "data:image/gif;base64,R0lGOD=="},
    )
    assert response.status_code == 400
    assert "unsupported" in response.json()["detail"]
    assert catalog.images == []


def test_get_image_not_found(client: TestClient) -> None:
    """Should return 404 for non-existent image."""
    response = client.get("/api/images/nonexistent-id")
    assert response.status_code == 404
    assert "not found" in response.json()["detail"].lower()


def test_update_tags_and_star(client: TestClient, test_images: List[Image]) -> None:
    """Should retag and star an image."""
    image = test_images[0]

    response = client.put(
        f"/api/images/{image.id}/tags",
        json={"tag_ids": [SENTINEL_TAG_ID, "surface_defect"]},
    )
    assert response.status_code == 200
    assert response.json()["tags"] == ["surface_defect"]
    assert response.json()["tag_names"] == ["Surface defect"]

    response = client.post(f"/api/images/{image.id}/star")
    assert response.json()["is_starred"] is True

    listing = client.get("/api/images").json()
    assert listing["items"][0]["id"] == image.id


def test_update_tags_not_found(client: TestClient) -> None:
    """Should return 404 when retagging a missing image."""
    response = client.put("/api/images/missing/tags", json={"tag_ids": ["burst"]})
    assert response.status_code == 404


def test_annotations(client: TestClient, test_images: List[Image]) -> None:
    """Should add, reject blank, and delete annotations."""
    image = test_images[0]

    blank = client.post(f"/api/images/{image.id}/annotations", json={"content": "  "})
    assert blank.status_code == 400

    created = client.post(
        f"/api/images/{image.id}/annotations", json={"content": "cold joint"}
    )
    assert created.status_code == 201
    annotation_id = created.json()["id"]

    deleted = client.delete(f"/api/images/{image.id}/annotations/{annotation_id}")
    assert deleted.status_code == 200
    again = client.delete(f"/api/images/{image.id}/annotations/{annotation_id}")
    assert again.status_code == 404


def test_delete_requires_admin(client: TestClient, test_images: List[Image]) -> None:
    """Should refuse deletion outside admin mode."""
    response = client.delete(f"/api/images/{test_images[0].id}?confirm=true")
    assert response.status_code == 403


def test_delete_requires_confirmation(
    client: TestClient, admin: Catalog, test_images: List[Image]
) -> None:
    """Should leave state unchanged without confirmation."""
    response = client.delete(f"/api/images/{test_images[0].id}")
    assert response.status_code == 428
    assert len(admin.images) == 3


def test_delete_image(
    client: TestClient, admin: Catalog, test_images: List[Image]
) -> None:
    """Should delete a confirmed image in admin mode."""
    response = client.delete(f"/api/images/{test_images[0].id}?confirm=true")
    assert response.status_code == 200
    assert len(admin.images) == 2

    missing = client.delete(f"/api/images/{test_images[0].id}?confirm=true")
    assert missing.status_code == 404
