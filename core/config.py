import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value.strip() if value and value.strip() else default


def _list_env(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return default
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or default


STORAGE_BACKEND = _str_env("STORAGE_BACKEND", "memory").lower()
FRONTEND_ORIGINS = _list_env("FRONTEND_ORIGINS", ["*"])
LOG_LEVEL = _str_env("LOG_LEVEL", "INFO").upper()
