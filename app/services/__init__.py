"""Service modules for business logic."""

from app.services.presentation_service import (
    StartResult,
    decode_upload,
    document_outline,
    read_default_content,
    start_presentation,
    press_key,
    close_window,
    resize_terminal,
)

__all__ = [
    'StartResult',
    'decode_upload',
    'document_outline',
    'read_default_content',
    'start_presentation',
    'press_key',
    'close_window',
    'resize_terminal',
]
