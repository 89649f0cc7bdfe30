"""
Knowledge Base 모델 정의

프래그먼트: 카테고리별 고정 안내 문구
"""
from pydantic import BaseModel, ConfigDict, Field


class Fragment(BaseModel):
    """카테고리 하나에 대응하는 안내 문구"""
    model_config = ConfigDict(frozen=True)

    body: str = Field(..., min_length=1, description="마크다운 본문")
    # True면 본문의 {value} 자리에 매칭을 일으킨 입력값이 들어감
    parameterized: bool = Field(False, description="입력값 치환 여부")

    def render(self, value: str = "") -> str:
        if self.parameterized:
            return self.body.format(value=value)
        return self.body
