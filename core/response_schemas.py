# core/response_schemas.py
from typing import Any, Final

# OpenAPI-subset schemas understood by generateContent's responseSchema.

SURAH_SCHEMA: Final[dict[str, Any]] = {
    "type": "OBJECT",
    "properties": {
        "verses": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "number": {"type": "INTEGER"},
                    "text": {
                        "type": "STRING",
                        "description": "Arabic text of the verse with tashkeel",
                    },
                    "translation": {
                        "type": "STRING",
                        "description": "Indonesian translation",
                    },
                },
                "required": ["number", "text", "translation"],
            },
        }
    },
    "required": ["verses"],
}

TAFSIR_SCHEMA: Final[dict[str, Any]] = {
    "type": "OBJECT",
    "properties": {
        "text": {
            "type": "STRING",
            "description": "Detailed comprehensive explanation (Tafsir)",
        },
        "keyPoints": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "List of 3-5 concise key takeaways or lessons from this verse",
        },
    },
    "required": ["text", "keyPoints"],
}

THEMATIC_SCHEMA: Final[dict[str, Any]] = {
    "type": "OBJECT",
    "properties": {
        "theme": {"type": "STRING"},
        "introduction": {"type": "STRING"},
        "verses": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "surahName": {"type": "STRING"},
                    "verseNumber": {"type": "NUMBER"},
                    "text": {"type": "STRING"},
                    "translation": {"type": "STRING"},
                    "relevance": {
                        "type": "STRING",
                        "description": "Why this verse fits the theme",
                    },
                },
            },
        },
        "explanation": {"type": "STRING"},
        "conclusion": {"type": "STRING"},
    },
}
