"""
문서 조합기

순서:
1. 프리앰블 (요청값을 그대로 보여주는 제목 블록)
2. 매칭된 섹션 (분류기 선언 순서)
3. 항상 포함 섹션 (고정 선언 순서)

섹션 사이는 빈 줄 하나. 같은 카테고리는 한 번만 렌더링.
"""
import logging
from enum import Enum
from typing import List, Optional, Sequence

from .kb import ContentStore, get_content_store
from .models import AdvisoryDomain, Section

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n"


class Composer:
    """도메인 하나에 대한 섹션 생성 + 문서 조합"""

    def __init__(self, domain: AdvisoryDomain, store: Optional[ContentStore] = None):
        self.domain = domain
        self.store = store or get_content_store()

    def section(self, category: Enum, header: Optional[str] = None, value: str = "") -> Section:
        """카테고리 프래그먼트로 섹션 생성"""
        return Section(
            category=category,
            body=self.store.render(self.domain, category, value),
            header=header,
        )

    def compose(
        self,
        preamble: Sequence[str] = (),
        matched: Sequence[Section] = (),
        always: Sequence[Section] = (),
    ) -> str:
        """섹션들을 하나의 문서로 조합"""
        parts: List[str] = [block.strip() for block in preamble if block and block.strip()]

        seen: List[Enum] = []
        for section in [*matched, *always]:
            if section.category in seen:
                logger.debug(f"[{self.domain.value}] duplicate section skipped: {section.category.value}")
                continue
            seen.append(section.category)
            parts.append(section.render())

        return SECTION_SEPARATOR.join(parts)
