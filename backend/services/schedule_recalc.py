# services/schedule_recalc.py
# 일정 시작 시각 재계산
#
# 앵커 이벤트를 고정 시각에 맞춘 뒤, 그 다음 이벤트부터 "이전 이벤트 시작 + 이전 소요시간"으로 차례대로 계산함.
# 앵커가 없으면 첫 이벤트 시각을 기준으로 하되, 소요시간이 없는 이벤트에서는 연쇄 계산이 끊긴다.
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import config
from schemas.event_schema import EventItem
from services.schedule_time import add_minutes, parse_duration_minutes

logger = logging.getLogger(__name__)

STRATEGY_TITLE = "title"
STRATEGY_INDEX = "index"


@dataclass(frozen=True)
class AnchorPolicy:
    """
    앵커 선택 규칙과 고정 시각

    - strategy="title": 제목(소문자)에 title_keyword가 포함된 첫 이벤트
    - strategy="index": anchor_index 위치의 이벤트(범위를 벗어나면 앵커 없음)
    """
    strategy: str = STRATEGY_TITLE
    title_keyword: str = "intro: beyond learning"
    anchor_index: int = 9
    anchor_time: str = "09:50"


DEFAULT_POLICY = AnchorPolicy()


def policy_from_settings() -> AnchorPolicy:
    """
    config(환경 변수) 값으로 AnchorPolicy를 만든다. 알 수 없는 strategy는 title로 취급함.
    """

    strategy = config.ANCHOR_STRATEGY if config.ANCHOR_STRATEGY in (STRATEGY_TITLE, STRATEGY_INDEX) else STRATEGY_TITLE
    return AnchorPolicy(
        strategy=strategy,
        title_keyword=config.ANCHOR_TITLE,
        anchor_index=config.ANCHOR_INDEX,
        anchor_time=config.ANCHOR_TIME,
    )


def find_anchor(events: Sequence[EventItem], policy: AnchorPolicy = DEFAULT_POLICY) -> Optional[int]:
    if policy.strategy == STRATEGY_INDEX:
        return policy.anchor_index if 0 <= policy.anchor_index < len(events) else None

    keyword = policy.title_keyword.lower()
    for i, e in enumerate(events):
        if keyword in (e.title or "").lower():
            return i
    return None


def recalculate(events: Sequence[EventItem], policy: AnchorPolicy = DEFAULT_POLICY) -> List[EventItem]:
    """
    전체 일정의 시작 시각을 다시 계산한다.
    입력은 바꾸지 않고, 시각이 바뀐 항목만 복사본으로 교체한 새 리스트를 돌려준다. (길이/순서 유지)

    :param events: 순서대로 정렬된 일정 목록
    :type events: Sequence[EventItem]
    :param policy: 앵커 규칙
    :type policy: AnchorPolicy
    :return: 재계산된 일정 목록
    :rtype: List[EventItem]
    """

    updated = list(events or [])
    if not updated:
        return updated

    anchor = find_anchor(updated, policy)

    if anchor is not None:
        logger.debug("[Recalc] anchor=%s (%s) pinned to %s", anchor, policy.strategy, policy.anchor_time)
        updated[anchor] = _with_start(updated[anchor], policy.anchor_time)
        # 반드시 앞에서부터: 바로 앞 항목의 '갱신된' 시각을 사용함
        for i in range(anchor + 1, len(updated)):
            prev = updated[i - 1]
            start = add_minutes(prev.start_time, parse_duration_minutes(prev.duration))
            updated[i] = _with_start(updated[i], start)
        return updated

    # 앵커 없음: 첫 항목 시각을 그대로 두고, 소요시간이 있는 구간만 이어서 계산
    for i in range(1, len(updated)):
        prev = updated[i - 1]
        mins = parse_duration_minutes(prev.duration)
        if prev.duration and mins > 0:
            updated[i] = _with_start(updated[i], add_minutes(prev.start_time, mins))
    return updated


def _with_start(e: EventItem, start_time: str) -> EventItem:
    if e.start_time == start_time:
        return e
    return e.model_copy(update={"start_time": start_time})
