from .image_upload_handler import ImageUploadHandler, UploadOutcome, UploadStatus

__all__ = ["ImageUploadHandler", "UploadOutcome", "UploadStatus"]
