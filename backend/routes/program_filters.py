# routes/program_filters.py
# 검색 / 필터 유틸
#
# 목록 화면의 검색창과 같은 규칙: 검색어가 제목, 팀 리드, 카테고리 중 하나에 포함되면(대소문자 무시) 남긴다.
# category를 따로 주면 해당 카테고리만 남긴다.

from typing import List, Optional

from schemas.event_schema import EventItem


def _ci_contains(text: Optional[str], needle: str) -> bool:
    """
    대소문자 무시 부분 포함 검사(contains, case-insensitive)

    :param text: 검사 대상 문자열(없으면 False)
    :param needle: 포함 여부를 확인할 문자열
    :return: needle이 text에 포함되어 있으면 True
    """

    if text is None:
        return False
    return needle.lower() in text.lower()


def _matches_query(e: EventItem, q: str) -> bool:
    return _ci_contains(e.title, q) or _ci_contains(e.team_lead, q) or _ci_contains(e.category, q)


def _apply_filters(events: List[EventItem], q: Optional[str] = None, category: Optional[str] = None) -> List[EventItem]:
    """
    일정 목록에 검색어/카테고리 필터를 적용한다. 순서는 유지됨.

    :param events: 재계산된 전체 일정
    :type events: List[EventItem]
    :param q: 검색어(비어 있으면 무시)
    :type q: Optional[str]
    :param category: 카테고리(비어 있으면 무시)
    :type category: Optional[str]
    :return: 필터링된 일정
    :rtype: List[EventItem]
    """

    q = (q or "").strip()
    category = (category or "").strip().lower()
    out = []
    for e in events:
        if q and not _matches_query(e, q):
            continue
        if category and e.category != category:
            continue
        out.append(e)
    return out
