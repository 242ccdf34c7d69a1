import base64
import json
from unittest.mock import patch

from core.models.errors import StorageError
from core.utils.constants import MAX_FILE_SIZE
from handlers.get_photo.handler import handler as get_photo_handler
from handlers.upload_photo.handler import handler


class TestUploadPhotoHandler:
    def test_upload_returns_plain_text_url(
        self,
        lambda_context,
        dynamodb_put_item,
        dynamodb_get_item,
        sample_contact,
        sample_png_bytes,
        upload_photo_event,
        photo_dir,
    ) -> None:
        dynamodb_put_item(sample_contact)

        response = handler(upload_photo_event("abc123", sample_png_bytes, "me.png"), lambda_context)

        assert response["statusCode"] == 200
        assert response["headers"]["Content-Type"].startswith("text/plain")
        assert response["body"] == "https://api.example.com/contacts/image/abc123.png"
        assert (photo_dir / "abc123.png").read_bytes() == sample_png_bytes
        assert dynamodb_get_item("abc123")["photo_url"] == response["body"]

    def test_upload_then_fetch_photo(
        self,
        lambda_context,
        dynamodb_put_item,
        sample_contact,
        sample_png_bytes,
        upload_photo_event,
        get_photo_event,
    ) -> None:
        dynamodb_put_item(sample_contact)

        url = handler(upload_photo_event("abc123", sample_png_bytes, "me.png"), lambda_context)["body"]
        assert url.endswith("/contacts/image/abc123.png")

        response = get_photo_handler(get_photo_event(url.rsplit("/", 1)[-1]), lambda_context)

        assert response["statusCode"] == 200
        assert response["headers"]["Content-Type"] == "image/png"
        assert base64.b64decode(response["body"]) == sample_png_bytes

    def test_url_keeps_stage_prefix_and_port(
        self,
        lambda_context,
        dynamodb_put_item,
        sample_contact,
        sample_jpeg_bytes,
        upload_photo_event,
    ) -> None:
        dynamodb_put_item(sample_contact)
        event = upload_photo_event(
            "abc123",
            sample_jpeg_bytes,
            "portrait.jpeg",
            headers={"X-Forwarded-Proto": "http", "X-Forwarded-Port": "8080"},
            request_path="/dev/contacts/photo",
        )

        response = handler(event, lambda_context)

        assert response["body"] == "http://api.example.com:8080/dev/contacts/image/abc123.jpeg"

    def test_public_base_url_overrides_request_origin(
        self,
        lambda_context,
        dynamodb_put_item,
        sample_contact,
        sample_png_bytes,
        upload_photo_event,
        monkeypatch,
    ) -> None:
        monkeypatch.setenv("PUBLIC_BASE_URL", "https://contacts.example.org/")
        dynamodb_put_item(sample_contact)

        response = handler(upload_photo_event("abc123", sample_png_bytes), lambda_context)

        assert response["body"] == "https://contacts.example.org/contacts/image/abc123.png"

    def test_upload_unknown_contact_writes_nothing(
        self,
        lambda_context,
        contacts_table,
        sample_png_bytes,
        upload_photo_event,
        photo_dir,
    ) -> None:
        response = handler(upload_photo_event("ghost", sample_png_bytes), lambda_context)

        assert response["statusCode"] == 404
        assert not photo_dir.exists()

    def test_upload_missing_id(self, lambda_context, sample_png_bytes, upload_photo_event) -> None:
        response = handler(upload_photo_event(None, sample_png_bytes), lambda_context)

        assert response["statusCode"] == 422
        body = json.loads(response["body"])
        assert body["details"][0]["field"] == "id"

    def test_upload_missing_file(self, lambda_context, upload_photo_event) -> None:
        response = handler(upload_photo_event("abc123", None), lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["message"] == "Missing 'file' form field"

    def test_upload_file_too_large(
        self,
        lambda_context,
        dynamodb_put_item,
        sample_contact,
        upload_photo_event,
        photo_dir,
    ) -> None:
        dynamodb_put_item(sample_contact)
        big = b"\x89PNG\r\n\x1a\n" + b"x" * MAX_FILE_SIZE

        response = handler(upload_photo_event("abc123", big), lambda_context)

        assert response["statusCode"] == 413
        assert json.loads(response["body"])["error"] == "FILE_SIZE_EXCEEDED"
        assert not photo_dir.exists()

    def test_upload_empty_file(self, lambda_context, upload_photo_event) -> None:
        response = handler(upload_photo_event("abc123", b""), lambda_context)

        assert response["statusCode"] == 400

    def test_upload_not_multipart(self, lambda_context) -> None:
        event = {
            "httpMethod": "PUT",
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"id": "abc123"}),
        }

        response = handler(event, lambda_context)

        assert response["statusCode"] == 400

    def test_upload_disk_full_maps_to_507(
        self,
        lambda_context,
        dynamodb_put_item,
        sample_contact,
        sample_png_bytes,
        upload_photo_event,
    ) -> None:
        dynamodb_put_item(sample_contact)

        with patch(
            "core.infrastructure.local.local_photo_storage.LocalPhotoStorage.save_photo",
            side_effect=StorageError(message="Photo storage is full", error_code="STORAGE_FULL"),
        ):
            response = handler(upload_photo_event("abc123", sample_png_bytes), lambda_context)

        assert response["statusCode"] == 507
        assert json.loads(response["body"])["error"] == "STORAGE_FULL"

    def test_upload_write_failure_maps_to_500(
        self,
        lambda_context,
        dynamodb_put_item,
        sample_contact,
        sample_png_bytes,
        upload_photo_event,
    ) -> None:
        dynamodb_put_item(sample_contact)

        with patch(
            "core.infrastructure.local.local_photo_storage.LocalPhotoStorage.save_photo",
            side_effect=StorageError(message="Unable to save image", error_code="STORAGE_WRITE_FAILED"),
        ):
            response = handler(upload_photo_event("abc123", sample_png_bytes), lambda_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["error"] == "STORAGE_WRITE_FAILED"
