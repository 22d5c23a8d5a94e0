"""
API layer for the storefront catalog.

Exposes the product endpoints under /api/product (list, detail, create,
update, delete).
"""
