# routes/program_render.py
# 렌더 / 서식

from typing import List

from schemas.event_schema import EventItem, EventOut


def _script_visible(e: EventItem) -> bool:
    """
    대본(script) 입력란을 보여줄 항목인지: 무대(stage) 카테고리이거나 제목/팀 리드에 'anchor'가 들어간 경우
    """

    return (
        e.category == "stage"
        or "anchor" in (e.title or "").lower()
        or "anchor" in (e.team_lead or "").lower()
    )


def _pack_event(e: EventItem, position: int) -> EventOut:
    """
    응답용으로 표시 순번(1-base)과 대본 표시 여부를 붙인다.

    :param e: 일정 항목
    :type e: EventItem
    :param position: 전체 일정에서의 0-base 위치
    :type position: int
    :return: EventOut
    :rtype: EventOut
    """

    return EventOut(**e.model_dump(), index=position + 1, show_script=_script_visible(e))


def _pack_all(events: List[EventItem]) -> List[EventOut]:
    return [_pack_event(e, i) for i, e in enumerate(events)]
