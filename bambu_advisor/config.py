"""
Bambu Studio Advisor Configuration
환경 변수 기반 설정
"""
import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class AdvisorConfig(BaseModel):
    """서버/로깅 설정"""
    server_name: str = "bambu-studio-mcp"
    server_version: str = "1.0.0"
    log_level: str = "INFO"
    allowed_origins: List[str] = ["*"]


def _parse_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_config() -> AdvisorConfig:
    """환경 변수에서 설정 로드 (호출 시점 기준)"""
    return AdvisorConfig(
        server_name=os.getenv("ADVISOR_SERVER_NAME", "bambu-studio-mcp"),
        server_version=os.getenv("ADVISOR_SERVER_VERSION", "1.0.0"),
        log_level=os.getenv("ADVISOR_LOG_LEVEL", "INFO").upper(),
        allowed_origins=_parse_origins(os.getenv("ALLOWED_ORIGINS", "*")),
    )
