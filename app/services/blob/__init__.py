"""Blob storage for logos and resumes."""

from app.services.blob.base import BlobStore
from app.services.blob.s3 import S3BlobStore, create_blob_store

__all__ = ["BlobStore", "S3BlobStore", "create_blob_store"]
