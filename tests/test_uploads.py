"""Tests for image uploads."""

import re

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from docledger.uploads.exceptions import ImageTooLargeError, UnsupportedImageTypeError
from docledger.uploads.storage import unique_name, validate_image

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def png(name="site photo.png", content=PNG_BYTES):
    return SimpleUploadedFile(name, content, content_type="image/png")


@pytest.fixture
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path


class TestNaming:

    def test_unique_name_keeps_stem_and_extension(self):
        assert re.fullmatch(r"site_photo-\d{13}-\d+\.png", unique_name("site photo.PNG"))

    def test_names_do_not_repeat(self):
        assert unique_name("a.jpg") != unique_name("a.jpg")

    def test_directory_parts_are_dropped(self):
        assert unique_name("../../etc/passwd.png").startswith("passwd-")


class TestValidation:

    def test_rejects_non_images(self):
        with pytest.raises(UnsupportedImageTypeError):
            validate_image(SimpleUploadedFile("notes.pdf", b"%PDF", content_type="application/pdf"))

    def test_rejects_large_files(self, settings):
        settings.DOCLEDGER = {**settings.DOCLEDGER, "UPLOAD_MAX_BYTES": 10}
        with pytest.raises(ImageTooLargeError):
            validate_image(png())


@pytest.mark.django_db
class TestUploadApi:

    def test_single_upload_and_delete(self, api_client, media_root):
        response = api_client.post("/api/upload/image", {"image": png()})

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["originalName"] == "site photo.png"
        assert data["mimetype"] == "image/png"
        assert data["url"].startswith("/media/uploads/")
        assert (media_root / "uploads" / data["filename"]).exists()

        deleted = api_client.delete(f"/api/upload/image/{data['filename']}")
        assert deleted.status_code == 200
        assert not (media_root / "uploads" / data["filename"]).exists()

    def test_multiple_upload(self, api_client, media_root):
        response = api_client.post("/api/upload/images", {"images": [png("a.png"), png("b.png")]})
        assert response.status_code == 201
        assert len(response.json()["data"]) == 2

    def test_one_bad_file_stores_nothing(self, api_client, media_root):
        bad = SimpleUploadedFile("virus.exe", b"MZ", content_type="application/octet-stream")
        response = api_client.post("/api/upload/images", {"images": [png("a.png"), bad]})
        assert response.status_code == 400
        assert not (media_root / "uploads").exists()

    def test_missing_file(self, api_client, media_root):
        response = api_client.post("/api/upload/image", {})
        assert response.status_code == 400
        assert response.json()["message"] == "Please choose an image file"

    def test_delete_unknown_file(self, api_client, media_root):
        assert api_client.delete("/api/upload/image/missing.png").status_code == 404

    def test_upload_is_open_without_login(self, anonymous_client, media_root):
        assert anonymous_client.post("/api/upload/image", {"image": png()}).status_code == 201
