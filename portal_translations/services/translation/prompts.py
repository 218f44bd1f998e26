"""
Prompt construction for the chat-completion model
"""

from typing import List

from portal_translations.services.translation.languages import get_language_name

TRANSLATION_SYSTEM_PROMPT = """You are a professional translator. Translate the user's English text to {language_name}.

Instructions:
- Maintain the original tone and intent
- Preserve any HTML tags or special formatting exactly as they appear
- For Haitian Creole: Use standard Kreyòl orthography
- For Hebrew: Use proper right-to-left text formatting
- Keep proper nouns unchanged unless they have standard translations
- Preserve line breaks and spacing
- Return ONLY the translated text, no explanations or additional text"""

QUERY_SYSTEM_PROMPT = (
    "You are a translator. Translate the given text to English. "
    "If the text is already in English, return it as-is. "
    "Only return the translated text, nothing else."
)


def build_translation_messages(text: str, target_language: str) -> List[dict]:
    system_prompt = TRANSLATION_SYSTEM_PROMPT.format(
        language_name=get_language_name(target_language)
    )
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": text},
    ]


def build_query_messages(query: str) -> List[dict]:
    return [
        {"role": "system", "content": QUERY_SYSTEM_PROMPT},
        {"role": "user", "content": query},
    ]
