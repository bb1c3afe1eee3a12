# /verifydip/core/deps.py
from fastapi import Request

from verifydip.core.config import Settings
from verifydip.services.idgt_service import IdgtService
from verifydip.services.upload_service import UploadService
from verifydip.storage.base import Storage


def get_storage(request: Request) -> Storage:
    """The store built (or injected) in create_app; one instance per app."""
    return request.app.state.storage


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_idgt_service(request: Request) -> IdgtService:
    return request.app.state.idgt_service


def get_upload_service(request: Request) -> UploadService:
    return UploadService(request.app.state.settings)
