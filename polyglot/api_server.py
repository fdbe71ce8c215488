import uvicorn
from typing import List
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from polyglot.config import get_allowed_origins
from polyglot.languages import LANGUAGES
from polyglot.schemas import Language
from polyglot.translate_router import router as translate_router

app = FastAPI(
    title="Polyglot Translator API",
    description="Proxy between the translator UI and the external translation service",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "polyglot"}


@app.get("/api/languages", response_model=List[Language])
async def list_languages():
    """언어 선택 UI 구성용 정적 목록"""
    return list(LANGUAGES)


app.include_router(translate_router)


def run_api_server(host: str, port: int, log_level: str = "info"):
    uvicorn.run(app, host=host, port=port, log_level=log_level)
