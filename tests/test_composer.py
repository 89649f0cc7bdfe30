"""
문서 조합기 테스트
"""
import pytest

from bambu_advisor.composer import SECTION_SEPARATOR, Composer
from bambu_advisor.kb import ContentStore, Fragment
from bambu_advisor.models import AdvisoryDomain, IssueCategory, Section


@pytest.fixture
def store():
    """카테고리 값을 본문으로 쓰는 테스트 저장소"""
    fragments = {
        AdvisoryDomain.TROUBLESHOOT: {
            category: Fragment(body=f"  body-{category.value}\n")
            for category in IssueCategory
        }
    }
    return ContentStore(fragments, {AdvisoryDomain.TROUBLESHOOT: [IssueCategory]})


@pytest.fixture
def composer(store):
    return Composer(AdvisoryDomain.TROUBLESHOOT, store)


class TestSection:
    def test_render_with_header(self):
        section = Section(IssueCategory.WARPING, "  body \n", header="**Header**")
        assert section.render() == "**Header**\n\nbody"

    def test_render_without_header(self):
        assert Section(IssueCategory.WARPING, "body").render() == "body"


class TestComposer:
    """조합 순서 / 중복 제거"""

    def test_order(self, composer):
        """프리앰블 → 매칭 → 항상 포함 순서"""
        text = composer.compose(
            preamble=["**Title**"],
            matched=[composer.section(IssueCategory.STRINGING)],
            always=[composer.section(IssueCategory.GENERAL)],
        )
        assert text == SECTION_SEPARATOR.join([
            "**Title**",
            "body-stringing",
            "body-general-troubleshooting",
        ])

    def test_duplicate_category_rendered_once(self, composer):
        """같은 카테고리는 한 번만"""
        text = composer.compose(
            matched=[
                composer.section(IssueCategory.WARPING),
                composer.section(IssueCategory.WARPING),
            ],
            always=[composer.section(IssueCategory.WARPING)],
        )
        assert text.count("body-warping") == 1

    def test_blank_preamble_skipped(self, composer):
        text = composer.compose(preamble=["", "   ", "**Only**"])
        assert text == "**Only**"

    def test_section_header(self, composer):
        section = composer.section(IssueCategory.CLOGGING, header="**Clog**")
        assert section.render() == "**Clog**\n\nbody-clogging"

    def test_empty(self, composer):
        assert composer.compose() == ""
