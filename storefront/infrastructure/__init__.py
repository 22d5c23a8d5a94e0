"""Infrastructure layer: MongoDB repositories and file storage."""
