"""
Storefront Catalog API — root package.

This package contains the FastAPI app entry point (main.py), the product
API routes, the product use cases and validation, domain models, and the
MongoDB / file storage infrastructure.
"""
