"""Tests for Image and Annotation models."""

from datetime import datetime, timezone

from imagespace.models.image import Annotation, Image


class TestAnnotation:
    def test_annotation_creation(self):
        annotation = Annotation(content="Crack near the lead")
        assert annotation.content == "Crack near the lead"
        assert annotation.id
        assert annotation.created_at.tzinfo is not None


class TestImage:
    def test_defaults(self):
        img = Image(name="a.png", url="https://example.com/a.png")
        assert img.id
        assert img.tags == []
        assert img.is_starred is False
        assert img.annotations == []
        assert img.upload_date.tzinfo is not None

    def test_lists_are_not_shared(self):
        first = Image(name="a.png", url="u")
        second = Image(name="b.png", url="u")
        first.tags.append("burst")
        assert second.tags == []

    def test_json_round_trip_preserves_instant(self):
        uploaded = datetime(2024, 1, 15, 12, 30, 45, 123456, tzinfo=timezone.utc)
        img = Image(
            name="a.png",
            url="data:image/png;base64,AAAA",
            tags=["burst", "offset"],
            is_starred=True,
            annotations=[Annotation(content="note")],
            upload_date=uploaded,
        )

        data = img.model_dump(mode="json")
        assert isinstance(data["upload_date"], str)
        assert isinstance(data["annotations"][0]["created_at"], str)

        restored = Image.model_validate(data)
        assert restored == img
        assert restored.upload_date == uploaded
        assert isinstance(restored.annotations[0], Annotation)
