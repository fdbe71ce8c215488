"""
Supported language table.

서버(요청 검증)와 클라이언트(언어 선택)가 같은 정의를 공유하도록
단일 모듈로 관리합니다. import 시점에 한 번 만들어지고 이후 변경되지 않습니다.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

from polyglot.schemas import Language

LANGUAGES: Tuple[Language, ...] = (
    Language(code="en", name="English", native_name="English"),
    Language(code="es", name="Spanish", native_name="Español"),
    Language(code="fr", name="French", native_name="Français"),
    Language(code="de", name="German", native_name="Deutsch"),
    Language(code="it", name="Italian", native_name="Italiano"),
    Language(code="pt", name="Portuguese", native_name="Português"),
    Language(code="ru", name="Russian", native_name="Русский"),
    Language(code="zh", name="Chinese", native_name="中文"),
    Language(code="ja", name="Japanese", native_name="日本語"),
    Language(code="ko", name="Korean", native_name="한국어"),
    Language(code="ar", name="Arabic", native_name="العربية"),
    Language(code="hi", name="Hindi", native_name="हिन्दी"),
)

LANGUAGES_BY_CODE: Mapping[str, Language] = MappingProxyType({lang.code: lang for lang in LANGUAGES})
SUPPORTED_CODES = frozenset(LANGUAGES_BY_CODE)

# 선택 역할별 기본값 (알 수 없는 코드일 때 사용)
DEFAULT_SOURCE = LANGUAGES[0]
DEFAULT_TARGET = LANGUAGES[1]


def resolve_language(code: str, fallback: Language) -> Language:
    """Lookup that never fails: unknown codes resolve to ``fallback``."""
    return LANGUAGES_BY_CODE.get(code, fallback)


def is_supported(code) -> bool:
    return isinstance(code, str) and code in LANGUAGES_BY_CODE


def get_language_display(code: str) -> str:
    lang = LANGUAGES_BY_CODE.get(code)
    if lang is None:
        return code
    return f"{lang.name} · {lang.native_name}"
