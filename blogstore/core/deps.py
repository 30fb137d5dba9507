from fastapi import Depends

from blogstore.content.store import ContentStore, get_content_store as load_content_store
from blogstore.core.config import Settings, get_settings


def get_content_store(settings: Settings = Depends(get_settings)) -> ContentStore:
    """Dependency to get the process-wide content store"""
    return load_content_store(settings.content_path)
