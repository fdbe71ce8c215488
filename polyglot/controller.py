"""
Client State Controller.

UI에 보이는 상태(선택 언어, 입력/출력 텍스트, 상태 메시지, 로딩 플래그,
최근 번역 기록)를 보관하고, 사용자 동작 1회당 1번의 요청/응답 사이클을
처리합니다. 화면 렌더링은 이 모듈의 책임이 아닙니다.
"""
import uuid
import logging
from typing import Any, List, Optional

import httpx

from polyglot.languages import DEFAULT_SOURCE, DEFAULT_TARGET, get_language_display, resolve_language
from polyglot.schemas import Language, TranslationRecord, TranslationRequest

logger = logging.getLogger("Polyglot.Controller")

MAX_HISTORY_ITEMS = 6

STATUS_READY = "Ready when you are."
STATUS_TRANSLATING = "Translating…"
STATUS_COMPLETE = "Translation complete."
STATUS_FAILED = "Something went wrong. Please try again later."
STATUS_SWAPPED = "Languages swapped. Ready to translate again."
STATUS_CLEARED = "Cleared. Enter new text to translate."

DEFAULT_PROXY_URL = "http://127.0.0.1:8000"


class TranslationFailed(Exception):
    """Proxy round trip did not produce a usable translation."""


class TranslatorController:
    def __init__(self, base_url: str = DEFAULT_PROXY_URL, client: Optional[httpx.AsyncClient] = None):
        # 1. 언어 선택 (코드만 저장, 조회 시 기본값으로 fallback)
        self.source_code: str = DEFAULT_SOURCE.code
        self.target_code: str = DEFAULT_TARGET.code

        # 2. 입력/출력/상태
        self.text: str = ""
        self.translation: str = ""
        self.status_message: str = ""
        self.is_loading: bool = False

        # 3. 최근 번역 기록 (최신이 앞)
        self.history: List[TranslationRecord] = []

        # 4. [Stale Guard] 마지막으로 발행된 요청 번호
        self._request_seq = 0

        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(base_url=base_url)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def source_language(self) -> Language:
        return resolve_language(self.source_code, DEFAULT_SOURCE)

    @property
    def target_language(self) -> Language:
        return resolve_language(self.target_code, DEFAULT_TARGET)

    @property
    def can_translate(self) -> bool:
        return bool(self.text.strip()) and not self.is_loading

    @property
    def can_swap(self) -> bool:
        return True

    @property
    def can_reset(self) -> bool:
        return not (self.is_loading and len(self.text) == 0)

    @property
    def status_line(self) -> str:
        return self.status_message or STATUS_READY

    def history_label(self, record: TranslationRecord) -> str:
        """History card header, e.g. "English · English → Spanish · Español"."""
        return f"{get_language_display(record.source.code)} → {get_language_display(record.target.code)}"

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def select_language(self, role: str, code: str):
        if role == "source":
            self.source_code = code
        elif role == "target":
            self.target_code = code
        else:
            raise ValueError(f"Unknown language role: {role!r}")

    def set_text(self, text: str):
        self.text = text

    def swap_languages(self):
        self.source_code, self.target_code = self.target_code, self.source_code
        self.translation = ""
        self.status_message = STATUS_SWAPPED
        self._supersede()

    def reset(self):
        if not self.can_reset:
            return
        self.text = ""
        self.translation = ""
        self.status_message = STATUS_CLEARED
        self._supersede()

    async def translate(self) -> bool:
        """
        Run one translate cycle. Returns False when the action is not
        allowed right now (empty input or a request already in flight).
        """
        if not self.can_translate:
            return False

        self._request_seq += 1
        seq = self._request_seq

        # 요청 시점의 값을 고정 (응답 도착 전에 상태가 바뀔 수 있음)
        text = self.text
        source = self.source_language
        target = self.target_language
        request = TranslationRequest(text=text, source=source.code, target=target.code)

        self.is_loading = True
        self.status_message = STATUS_TRANSLATING

        try:
            translated = await self._post_translation(request)

            # swap/reset 이후 도착한 응답은 화면 상태를 덮어쓰지 않음 (기록은 유지)
            if seq == self._request_seq:
                self.translation = translated
                self.status_message = STATUS_COMPLETE
            else:
                logger.info(f"Late translation response (request #{seq}), keeping current display")

            if translated.strip():
                record = TranslationRecord(
                    id=str(uuid.uuid4()),
                    input=text,
                    output=translated,
                    source=source,
                    target=target,
                )
                self.history = [record, *self.history][:MAX_HISTORY_ITEMS]
        except Exception as e:
            logger.error(f"Translation failed: {e}")
            if seq == self._request_seq:
                self.status_message = STATUS_FAILED
        finally:
            self.is_loading = False

        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _supersede(self):
        """진행 중인 요청의 응답이 화면 상태를 덮어쓰지 않도록 함 (요청 취소 X, 기록은 유지)"""
        self._request_seq += 1

    async def _post_translation(self, request: TranslationRequest) -> str:
        response = await self.client.post("/api/translate", json=request.model_dump())
        result: Any = response.json()

        if not isinstance(result, dict):
            raise TranslationFailed("Proxy returned a non-object body")
        if not 200 <= response.status_code < 300 or result.get("error"):
            raise TranslationFailed(result.get("error") or f"HTTP {response.status_code}")

        translated = result.get("translation") or ""
        if not isinstance(translated, str):
            raise TranslationFailed("Proxy returned a non-string translation")
        return translated
