"""
Translation Queue Schemas
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class QueueItemCreate(BaseModel):
    content_key: str = Field(min_length=1)
    original_text: str = Field(min_length=1)
    target_language: str = Field(min_length=2, max_length=10)
    page_path: Optional[str] = None


class QueueItemResponse(BaseModel):
    id: str
    content_key: str
    original_text: str
    target_language: str
    page_path: Optional[str] = None
    status: str
    error_message: Optional[str] = None
    processed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class QueueProcessResponse(BaseModel):
    message: str
    processed: int = 0
    completed: int = 0
    failed: int = 0
    total: int = 0


class TriggerResponse(BaseModel):
    message: str
    result: Dict[str, Any]
