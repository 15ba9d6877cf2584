"""CORS (Cross-Origin Resource Sharing) configuration utilities.

Por padrão qualquer origem é aceita (o dashboard roda em outra porta).
CORS_ORIGINS restringe a lista em qualquer ambiente.
"""

from __future__ import annotations

import os
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

_READ_ONLY_METHODS = ["GET", "HEAD", "OPTIONS"]


def get_cors_origins() -> List[str]:
    """Obtém lista de origens permitidas para CORS.

    Sem CORS_ORIGINS (ou com a variável vazia) retorna ["*"].
    """
    origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "").split(",")
        if origin.strip()
    ]
    return origins or ["*"]


def configure_cors(app: FastAPI) -> None:
    """Configura middleware CORS no app FastAPI."""
    origins = get_cors_origins()

    allow_credentials = os.getenv("CORS_ALLOW_CREDENTIALS", "false").lower() == "true"
    max_age = int(os.getenv("CORS_MAX_AGE", "600"))

    # Com "*" o navegador recusa credentials
    if origins == ["*"]:
        allow_credentials = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=_READ_ONLY_METHODS,
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
        max_age=max_age,
    )
