"""Pipeline for uploading a local file to GitHub."""

from .upload import upload_file

__all__ = ["upload_file"]
