# util/types.py
from typing import Any, Literal, TypedDict


# Flow: Narrow types for the generateContent wire format.
Role = Literal["user", "model"]


class Part(TypedDict):
    text: str


class Content(TypedDict):
    role: Role
    parts: list[Part]


class GenerationConfig(TypedDict):
    responseMimeType: str
    responseSchema: dict[str, Any]


class GenerateContentPayload(TypedDict):
    contents: list[Content]
    generationConfig: GenerationConfig
