# core/gemini_client.py
import json
from typing import Any, Dict, Optional
import httpx
from core.entities import GeminiConfig
from util.errors import ConfigurationError, UpstreamError
from util.types import GenerateContentPayload
import logging
from util.timing import timed

logger = logging.getLogger(__name__)


def require_credential(config: GeminiConfig) -> None:
    """
    Fail fast when no access credential is configured. Runs before any network I/O.
    """
    if not (config.api_key or "").strip():
        raise ConfigurationError("API key is missing", {"setting": "GEMINI_API_KEY"})


def _payload(prompt: str, schema: Dict[str, Any]) -> GenerateContentPayload:
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": schema,
        },
    }


def _candidate_text(data: Dict[str, Any]) -> str:
    """
    Concatenate the text parts of the first candidate. Returns "" when absent.
    """
    candidates = data.get("candidates") or []
    if not candidates or not isinstance(candidates, list):
        return ""
    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content")
    if not isinstance(content, dict):
        return ""
    parts = content.get("parts") or []
    return "".join(p.get("text") or "" for p in parts if isinstance(p, dict))


def _strip_fences(raw: str) -> str:
    raw = raw.strip()
    if raw.startswith("```"):
        raw = raw.strip("`")
        if raw.startswith("json"):
            raw = raw[4:]
    return raw.strip()


async def generate_json(
    config: GeminiConfig,
    *,
    prompt: str,
    schema: Dict[str, Any],
    op: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """
    One schema-constrained generateContent round trip. Returns the parsed JSON object.
    Raises ConfigurationError without a credential, UpstreamError on transport,
    status or parse failure. No retry.
    """
    require_credential(config)

    url = f"{config.api_url.rstrip('/')}/{config.model}:generateContent"
    headers = {
        "x-goog-api-key": config.api_key,
        "content-type": "application/json",
    }
    with timed(logger, f"ai.{op}", model=config.model):
        try:
            async with httpx.AsyncClient(
                timeout=config.timeout, transport=transport
            ) as client:
                resp = await client.post(url, headers=headers, json=_payload(prompt, schema))
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                "generative service returned an error status",
                {"op": op, "status": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(
                "generative service request failed", {"op": op, "err": type(e).__name__}
            ) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError("response envelope is not JSON", {"op": op}) from e

    raw = _strip_fences(_candidate_text(data) if isinstance(data, dict) else "")
    if not raw:
        raise UpstreamError("response carried no text", {"op": op})
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise UpstreamError("response text is not valid JSON", {"op": op}) from e
    if not isinstance(parsed, dict):
        raise UpstreamError("response JSON is not an object", {"op": op})
    return parsed
