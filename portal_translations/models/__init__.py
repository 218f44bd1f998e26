from portal_translations.models.base import Base
from portal_translations.models.language_preference import LanguagePreference
from portal_translations.models.translation import Translation
from portal_translations.models.translation_queue import QueueStatus, TranslationQueueItem

__all__ = [
    "Base",
    "Translation",
    "TranslationQueueItem",
    "QueueStatus",
    "LanguagePreference",
]
