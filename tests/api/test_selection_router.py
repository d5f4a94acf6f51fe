"""Tests for selection API router."""

from typing import List

import pytest
from fastapi.testclient import TestClient

from imagespace.catalog import SENTINEL_TAG_ID, Catalog
from imagespace.models.image import Image


@pytest.fixture
def test_images(catalog: Catalog) -> List[Image]:
    return [catalog.add_image(f"joint_{i}.png", "u") for i in range(3)]


def test_toggle_selection(client: TestClient, test_images: List[Image]) -> None:
    """Should toggle one image in and out of the selection."""
    image_id = test_images[0].id

    assert client.post(f"/api/selection/{image_id}/toggle").json() == {"selected": True}
    assert client.get("/api/selection").json()["image_ids"] == [image_id]
    assert client.post(f"/api/selection/{image_id}/toggle").json() == {"selected": False}


def test_toggle_unknown_image(client: TestClient) -> None:
    """Should return 404 for unknown images."""
    assert client.post("/api/selection/missing/toggle").status_code == 404


def test_select_all_follows_current_view(
    client: TestClient, test_images: List[Image]
) -> None:
    """Should select exactly what the last listing showed."""
    client.get("/api/images?query=joint_1")

    data = client.post("/api/selection/all").json()
    assert data["image_ids"] == [test_images[1].id]

    cleared = client.delete("/api/selection").json()
    assert cleared["count"] == 0


def test_batch_tagging(
    client: TestClient, catalog: Catalog, test_images: List[Image]
) -> None:
    """Should add and remove tags on every selected image."""
    client.post("/api/selection/all")

    added = client.post("/api/selection/tags/add", json={"tag_ids": ["burst"]})
    assert added.json() == {"count": 3}
    assert all(img.tags == ["burst"] for img in catalog.images)

    removed = client.post("/api/selection/tags/remove", json={"tag_ids": ["burst"]})
    assert removed.json() == {"count": 3}
    assert all(img.tags == [SENTINEL_TAG_ID] for img in catalog.images)


def test_copy_names(client: TestClient, test_images: List[Image]) -> None:
    """Should return comma-joined names without extensions."""
    assert client.get("/api/selection/names").status_code == 400

    client.post(f"/api/selection/{test_images[0].id}/toggle")
    client.post(f"/api/selection/{test_images[2].id}/toggle")

    data = client.get("/api/selection/names").json()
    assert data == {"names": "joint_2,joint_0", "count": 2}


def test_batch_delete(
    client: TestClient, admin: Catalog, test_images: List[Image]
) -> None:
    """Should delete selected images only when confirmed."""
    client.post(f"/api/selection/{test_images[0].id}/toggle")
    client.post(f"/api/selection/{test_images[1].id}/toggle")

    assert client.post("/api/selection/delete").status_code == 428
    assert len(admin.images) == 3

    response = client.post("/api/selection/delete?confirm=true")
    assert response.json() == {"count": 2}
    assert [img.id for img in admin.images] == [test_images[2].id]
    assert admin.selection == set()


def test_batch_delete_requires_admin(
    client: TestClient, catalog: Catalog, test_images: List[Image]
) -> None:
    """Should refuse batch deletion outside admin mode."""
    client.post("/api/selection/all")
    response = client.post("/api/selection/delete?confirm=true")
    assert response.status_code == 403
    assert len(catalog.images) == 3
