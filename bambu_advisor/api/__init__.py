"""
Bambu Studio Advisor HTTP API

사용법:
    from bambu_advisor.api import router

    app.include_router(router)
"""
from .router import router

__all__ = ["router"]
