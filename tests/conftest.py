"""
Shared pytest fixtures for storefront tests.
"""
import io
import os
from unittest.mock import MagicMock, patch

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers


VALID_FIELDS = {
    "name": "TV",
    "description": "A nice large television",
    "category": "c1",
    "price": "299",
    "numberInStock": "5",
}


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_storefront",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "PRODUCT_IMAGE_UPLOAD_DIR": "test_uploads",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.product_image_upload_dir = str(tmp_path / "uploads")
    mock.product_image_max_mb = 1
    mock.product_image_naming = "original"
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("storefront.core.config.get_settings", return_value=mock), patch(
        "storefront.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def make_token(mock_settings):
    """Fixture returning a function that signs a token with the given claims."""
    from storefront.core.security import sign_credential

    def _make(**claims):
        return sign_credential(claims)

    return _make


@pytest.fixture
def valid_fields():
    return dict(VALID_FIELDS)


@pytest.fixture
def make_upload():
    """Fixture returning a builder for in-memory multipart files like the ones FastAPI hands to controllers."""

    def _make(filename: str = "tv.png", content_type: str = "image/png", data: bytes = b"\x89PNG image") -> UploadFile:
        return UploadFile(
            file=io.BytesIO(data),
            filename=filename,
            headers=Headers({"content-type": content_type}),
        )

    return _make
