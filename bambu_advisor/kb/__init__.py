"""
Bambu Studio Advisor Knowledge Base

카테고리별 고정 안내 문구 저장소 (읽기 전용)
엔진은 문구 내용이 아닌 카테고리 선택/순서만 결정합니다.
"""
from .models import Fragment
from .store import (
    ContentStore,
    build_default_store,
    get_content_store,
)

__all__ = [
    "Fragment",
    "ContentStore",
    "build_default_store",
    "get_content_store",
]
