"""
Translation Schemas
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TranslateContentRequest(BaseModel):
    content_key: str = Field(min_length=1)
    original_text: str = Field(min_length=1)
    target_language: str = Field(min_length=2, max_length=10)
    page_path: Optional[str] = None
    element_type: Optional[str] = None


class TranslateContentResponse(BaseModel):
    translated_text: str
    cached: bool


class TranslateQueryRequest(BaseModel):
    query: str = Field(min_length=1)


class TranslateQueryResponse(BaseModel):
    translatedQuery: str


class BulkTranslateResponse(BaseModel):
    message: str
    total: int
    completed: int


class LanguageInfo(BaseModel):
    code: str
    name: str
    rtl: bool = False


class LanguagePreferenceUpdate(BaseModel):
    preferred_language: str = Field(min_length=2, max_length=10)


class LanguagePreferenceResponse(BaseModel):
    session_id: str
    preferred_language: str
    updated_at: Optional[datetime] = None
