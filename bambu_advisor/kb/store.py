"""
콘텐츠 저장소

(도메인, 카테고리) → 프래그먼트 읽기 전용 매핑.
생성 시 도메인별 카테고리 집합 전체를 커버하는지 검증 (누락 시 ContentStoreError).
"""
import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Type

from ..errors import ContentStoreError
from ..models import AdvisoryDomain, DOMAIN_CATEGORIES
from .models import Fragment

logger = logging.getLogger(__name__)

StoreKey = Tuple[AdvisoryDomain, str]


class ContentStore:
    """
    프래그먼트 저장소

    키는 (도메인, 카테고리 값) - 도메인이 다르면 같은 값도 별개 카테고리
    """

    def __init__(
        self,
        fragments: Mapping[AdvisoryDomain, Mapping[Enum, Fragment]],
        domain_categories: Optional[Mapping[AdvisoryDomain, Iterable[Type[Enum]]]] = None,
    ):
        table: Dict[StoreKey, Fragment] = {}
        for domain, by_category in fragments.items():
            for category, fragment in by_category.items():
                table[(domain, category.value)] = fragment

        self._fragments: Mapping[StoreKey, Fragment] = MappingProxyType(table)
        self.ensure_total(domain_categories if domain_categories is not None else DOMAIN_CATEGORIES)

    def ensure_total(self, domain_categories: Mapping[AdvisoryDomain, Iterable[Type[Enum]]]) -> None:
        """모든 카테고리에 프래그먼트가 있는지 검증"""
        missing: List[str] = []
        for domain, enum_types in domain_categories.items():
            for enum_type in enum_types:
                for category in enum_type:
                    if (domain, category.value) not in self._fragments:
                        missing.append(f"{domain.value}/{category.value}")

        if missing:
            raise ContentStoreError(f"Missing fragments: {', '.join(missing)}")

    def get(self, domain: AdvisoryDomain, category: Enum) -> Fragment:
        try:
            return self._fragments[(domain, category.value)]
        except KeyError:
            raise ContentStoreError(
                f"No fragment for {domain.value}/{category.value}"
            ) from None

    def render(self, domain: AdvisoryDomain, category: Enum, value: str = "") -> str:
        """프래그먼트 본문 (파라미터 치환 포함)"""
        return self.get(domain, category).render(value)

    def __len__(self) -> int:
        return len(self._fragments)

    def __contains__(self, key: StoreKey) -> bool:
        return key in self._fragments


def build_default_store() -> ContentStore:
    """기본 안내 데이터로 저장소 생성"""
    from .format_data import FORMAT_FRAGMENTS
    from .threemf_data import THREEMF_FRAGMENTS
    from .settings_data import SETTINGS_FRAGMENTS
    from .troubleshoot_data import TROUBLESHOOT_FRAGMENTS
    from .material_data import MATERIAL_FRAGMENTS

    store = ContentStore({
        AdvisoryDomain.FILE_FORMAT: FORMAT_FRAGMENTS,
        AdvisoryDomain.THREEMF: THREEMF_FRAGMENTS,
        AdvisoryDomain.PRINT_SETTINGS: SETTINGS_FRAGMENTS,
        AdvisoryDomain.TROUBLESHOOT: TROUBLESHOOT_FRAGMENTS,
        AdvisoryDomain.MATERIAL: MATERIAL_FRAGMENTS,
    })
    logger.info(f"Content store loaded with {len(store)} fragments")
    return store


_store_instance: Optional[ContentStore] = None


def get_content_store() -> ContentStore:
    """싱글톤 저장소 인스턴스 반환"""
    global _store_instance
    if _store_instance is None:
        _store_instance = build_default_store()
    return _store_instance
