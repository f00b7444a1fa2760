"""Request Dependencies — hand the app-scoped Storage, processor and settings to routes."""

from fastapi import Request

from pmis.config import Settings
from pmis.infrastructure.storage import Storage
from pmis.services.import_processor import ImportProcessor


def get_storage(request: Request) -> Storage:
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage not initialized")
    return storage


def get_import_processor(request: Request) -> ImportProcessor:
    processor = getattr(request.app.state, "import_processor", None)
    if processor is None:
        raise RuntimeError("Import processor not initialized")
    return processor


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
