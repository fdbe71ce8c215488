from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

# -------------------------------------------------------------------------
# [Static Configuration Schemas]
# -------------------------------------------------------------------------

class Language(BaseModel):
    """지원 언어 한 항목 (불변)"""
    model_config = ConfigDict(frozen=True)

    code: str                # 예: "en"
    name: str                # 영문 표시명
    native_name: str         # 해당 언어로 쓴 표시명

# -------------------------------------------------------------------------
# [Proxy Communication Schemas]
# -------------------------------------------------------------------------

class TranslationRequest(BaseModel):
    """Client -> Proxy: 번역 요청 (번역 1회마다 새로 생성)"""
    text: str
    source: str
    target: str

class TranslationResponse(BaseModel):
    """Proxy -> Client: 성공 응답"""
    translation: str

class ErrorResponse(BaseModel):
    """Proxy -> Client: 실패 응답 (상세 원인은 서버 로그에만 남김)"""
    error: str

# -------------------------------------------------------------------------
# [Client History Schemas]
# -------------------------------------------------------------------------

class TranslationRecord(BaseModel):
    """성공한(비어있지 않은) 번역 1건의 기록. 메모리에만 보관."""
    id: str
    input: str
    output: str
    source: Language
    target: Language
    created_at: datetime = Field(default_factory=datetime.now)
