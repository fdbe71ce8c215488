"""
External translation service client (LibreTranslate-compatible).

The service is treated as a black box: it receives ``{q, source, target,
format}`` and answers with ``{translatedText}``. Anything else is an error
the proxy maps to a 502.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from polyglot.config import get_translate_config
from polyglot.schemas import TranslationRequest

logger = logging.getLogger("Polyglot.Upstream")


class UpstreamError(Exception):
    """Upstream answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Upstream returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class UpstreamResponseError(Exception):
    """Upstream answered 2xx but the body is unusable."""


def build_translate_payload(request: TranslationRequest, api_key: Optional[str] = None) -> Dict[str, Any]:
    payload = {
        "q": request.text,
        "source": request.source,
        "target": request.target,
        "format": "text",
    }
    if api_key:
        payload["api_key"] = api_key
    return payload


def extract_translated_text(data: Any) -> str:
    if not isinstance(data, dict):
        raise UpstreamResponseError(f"Expected a JSON object, got {type(data).__name__}")
    translated = data.get("translatedText")
    if not isinstance(translated, str) or not translated:
        raise UpstreamResponseError("Response has no translatedText")
    return translated


async def request_translation(request: TranslationRequest, config: Optional[Dict[str, Any]] = None) -> str:
    """
    Forward one request upstream and return the translated text.

    Transport failures (``httpx.HTTPError``) propagate unchanged.
    """
    conf = config or get_translate_config()
    target = conf.get('endpoint')
    payload = build_translate_payload(request, conf.get('api_key'))
    headers = {"Content-Type": "application/json"}

    # timeout 미설정 시 httpx 기본값 사용
    kwargs = {}
    if conf.get('timeout') is not None:
        kwargs['timeout'] = conf['timeout']

    logger.debug(f"[*] Upstream Target URL: {target} ({request.source} -> {request.target})")

    async with httpx.AsyncClient() as client:
        resp = await client.post(target, json=payload, headers=headers, **kwargs)

    if not 200 <= resp.status_code < 300:
        raise UpstreamError(resp.status_code, resp.text)

    try:
        data = resp.json()
    except ValueError as e:
        raise UpstreamResponseError("Response body is not valid JSON") from e

    return extract_translated_text(data)
