import logging
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from polyglot.languages import is_supported
from polyglot.schemas import ErrorResponse, TranslationRequest, TranslationResponse
from polyglot.upstream import UpstreamError, UpstreamResponseError, request_translation

logger = logging.getLogger("Polyglot.Router")

router = APIRouter()

MSG_MISSING_FIELDS = "Missing text, source language, or target language."
MSG_UNSUPPORTED_LANGUAGE = "Unsupported language provided."
MSG_UPSTREAM_FAILED = "Translation service failed to process the request."
MSG_UNEXPECTED_RESPONSE = "Translation service returned an unexpected response."
MSG_UNEXPECTED_ERROR = "An unexpected error occurred while translating."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _translation(text: str) -> JSONResponse:
    return JSONResponse(status_code=200, content=TranslationResponse(translation=text).model_dump())


def _string_field(payload: Any, name: str) -> Optional[str]:
    """
    신뢰할 수 없는 바디에서 필드를 꺼냄.
    객체가 아니거나, 문자열이 아니거나, 빈 값이면 None.
    """
    if not isinstance(payload, dict):
        return None
    value = payload.get(name)
    if not isinstance(value, str) or not value:
        return None
    return value


@router.post("/api/translate")
async def translate_endpoint(request: Request):
    try:
        payload = await request.json()

        text = _string_field(payload, "text")
        source = _string_field(payload, "source")
        target = _string_field(payload, "target")

        # 1. 필수 필드
        if text is None or source is None or target is None:
            return _error(400, MSG_MISSING_FIELDS)

        # 2. 지원 언어
        if not is_supported(source) or not is_supported(target):
            return _error(400, MSG_UNSUPPORTED_LANGUAGE)

        # 3. 공백뿐인 입력은 upstream 호출 없이 빈 결과
        if not text.strip():
            return _translation("")

        translation_request = TranslationRequest(text=text, source=source, target=target)
        logger.info(f"[*] Translate Request: {source} -> {target} ({len(text)} chars)")

        try:
            translated = await request_translation(translation_request)
        except UpstreamError as e:
            logger.error(f"Translation API error: {e.status_code} {e.body}")
            return _error(502, MSG_UPSTREAM_FAILED)
        except UpstreamResponseError as e:
            logger.error(f"Translation API unexpected response: {e}")
            return _error(502, MSG_UNEXPECTED_RESPONSE)

        return _translation(translated)

    except Exception:
        logger.exception("Translation API handler error")
        return _error(500, MSG_UNEXPECTED_ERROR)
