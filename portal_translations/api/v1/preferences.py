"""
Language preference endpoints for anonymous sessions.
"""

from fastapi import APIRouter

from portal_translations.core.config import settings
from portal_translations.core.deps import SessionDep
from portal_translations.core.errors import ValidationError
from portal_translations.crud.translation import LanguagePreferenceCRUD
from portal_translations.schemas.translation import (
    LanguagePreferenceResponse,
    LanguagePreferenceUpdate,
)
from portal_translations.services.translation.languages import is_supported, normalize_language_code

router = APIRouter(prefix="/language-preferences", tags=["language-preferences"])


@router.get("/{session_id}", response_model=LanguagePreferenceResponse)
async def get_language_preference(session_id: str, db: SessionDep):
    preference = await LanguagePreferenceCRUD.get(db, session_id)
    if preference is None:
        return LanguagePreferenceResponse(
            session_id=session_id, preferred_language=settings.source_language
        )
    return LanguagePreferenceResponse(
        session_id=preference.session_id,
        preferred_language=preference.preferred_language,
        updated_at=preference.updated_at,
    )


@router.put("/{session_id}", response_model=LanguagePreferenceResponse)
async def set_language_preference(
    session_id: str, preference_in: LanguagePreferenceUpdate, db: SessionDep
):
    language = normalize_language_code(preference_in.preferred_language)
    if not is_supported(language):
        raise ValidationError(f"Unsupported language: {preference_in.preferred_language}")

    preference = await LanguagePreferenceCRUD.upsert(db, session_id, language)
    return LanguagePreferenceResponse(
        session_id=preference.session_id,
        preferred_language=preference.preferred_language,
        updated_at=preference.updated_at,
    )
