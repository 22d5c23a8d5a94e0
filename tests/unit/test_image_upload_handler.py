"""
Unit tests for ImageUploadHandler (screening and storing product images).
"""
from pathlib import Path

import pytest

from storefront.core.exceptions import FileTooLargeError, UnsupportedFileTypeError
from storefront.infrastructure.storage.image_upload_handler import ImageUploadHandler, UploadStatus


@pytest.fixture
def upload_dir(tmp_path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def handler(upload_dir) -> ImageUploadHandler:
    return ImageUploadHandler(upload_dir=str(upload_dir), max_mb=1)


class TestScreen:

    def test_none_is_absent(self, handler):
        assert handler.screen(None).status is UploadStatus.ABSENT

    def test_empty_filename_is_absent(self, handler, make_upload):
        assert handler.screen(make_upload(filename="")).absent

    @pytest.mark.parametrize("content_type", ["image/png", "image/jpeg", "IMAGE/PNG"])
    def test_allowed_types_are_accepted(self, handler, make_upload, content_type):
        outcome = handler.screen(make_upload(content_type=content_type))
        assert outcome.accepted
        assert outcome.path is None
        assert outcome.original_filename == "tv.png"

    @pytest.mark.parametrize("content_type", ["image/gif", "application/pdf", "text/plain"])
    def test_other_types_are_rejected(self, handler, make_upload, content_type, upload_dir):
        outcome = handler.screen(make_upload(filename="doc.gif", content_type=content_type))
        assert outcome.rejected
        assert "image/jpeg" in outcome.reason
        assert not upload_dir.exists()


class TestPersist:

    @pytest.mark.asyncio
    async def test_stores_under_client_filename(self, handler, make_upload, upload_dir):
        outcome = await handler.persist(make_upload(data=b"png-bytes"))
        assert outcome.accepted
        assert outcome.path == (upload_dir / "tv.png").as_posix()
        assert (upload_dir / "tv.png").read_bytes() == b"png-bytes"

    @pytest.mark.asyncio
    async def test_same_filename_overwrites(self, handler, make_upload, upload_dir):
        await handler.persist(make_upload(data=b"first"))
        await handler.persist(make_upload(data=b"second"))
        assert (upload_dir / "tv.png").read_bytes() == b"second"

    @pytest.mark.asyncio
    async def test_directory_components_are_stripped(self, handler, make_upload, upload_dir):
        outcome = await handler.persist(make_upload(filename="../../etc/evil.png"))
        assert outcome.path == (upload_dir / "evil.png").as_posix()

    @pytest.mark.asyncio
    async def test_unique_naming_keeps_extension(self, upload_dir, make_upload):
        handler = ImageUploadHandler(upload_dir=str(upload_dir), max_mb=1, naming="unique")
        outcome = await handler.persist(make_upload(filename="TV.PNG"))
        stored = Path(outcome.path)
        assert stored.suffix == ".png"
        assert stored.name != "TV.PNG"
        assert outcome.original_filename == "TV.PNG"
        assert stored.exists()

    @pytest.mark.asyncio
    async def test_rejected_upload_is_not_stored(self, handler, make_upload, upload_dir):
        with pytest.raises(UnsupportedFileTypeError):
            await handler.persist(make_upload(filename="a.gif", content_type="image/gif"))
        assert not upload_dir.exists()

    @pytest.mark.asyncio
    async def test_oversized_upload_is_removed(self, handler, make_upload, upload_dir):
        too_big = b"x" * (1024 * 1024 + 1)
        with pytest.raises(FileTooLargeError):
            await handler.persist(make_upload(data=too_big))
        assert not (upload_dir / "tv.png").exists()
