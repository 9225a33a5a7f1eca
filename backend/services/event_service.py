# services/event_service.py
# 프로그램(일정 목록) 저장/조회 및 편집
# - 모든 변경은 save_program을 거치므로 저장 직전에 항상 시작 시각 재계산이 수행됨
import logging
import uuid
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import config
from models.program_event import ProgramEvent, ProgramMeta
from schemas.event_schema import EventItem, EventCreate, EventUpdate
from services.sample_program import sample_program
from services.schedule_csv import parse_csv, serialize_csv
from services.schedule_recalc import policy_from_settings, recalculate

logger = logging.getLogger(__name__)

IMPORT_MODES = ("replace", "append")
SAVED_MARKER = "saved"
_ROW_FIELDS = (
    "start_time", "duration", "title", "description", "team_lead",
    "team_members", "logistics", "notes", "script", "category",
)


class ProgramStoreError(Exception):
    """저장소 읽기/쓰기 실패(사용자에게는 하나의 메시지로만 알림)"""


def _to_item(row: ProgramEvent) -> EventItem:
    return EventItem.model_validate(row)

def _apply(row: ProgramEvent, item: EventItem, position: int) -> ProgramEvent:
    row.position = position
    for k in _ROW_FIELDS:
        setattr(row, k, getattr(item, k))
    return row

def _recalc(events: List[EventItem]) -> List[EventItem]:
    return recalculate(events, policy_from_settings())


def load_program(db: Session) -> List[EventItem]:
    """
    저장된 일정을 순서대로 읽어 재계산한 결과를 반환한다.
    한 번도 저장된 적이 없고 SEED_SAMPLE_PROGRAM이 켜져 있으면 샘플 프로그램을 돌려준다. (저장은 다음 변경 때)
    비워서 저장한 일정은 빈 목록 그대로 읽힌다.

    :param db: DB 세션
    :type db: Session
    :return: 재계산된 일정 목록
    :rtype: List[EventItem]
    :raises ProgramStoreError: 조회 실패
    """

    try:
        rows = db.query(ProgramEvent).order_by(ProgramEvent.position.asc()).all()
        saved_before = bool(rows) or db.query(ProgramMeta).filter(ProgramMeta.key == SAVED_MARKER).first() is not None
    except SQLAlchemyError as e:
        logger.error("[Program:load] failed: %s", e)
        raise ProgramStoreError("Failed to load events") from e

    if not saved_before and config.SEED_SAMPLE_PROGRAM:
        logger.info("[Program:load] empty store, using sample program")
        return _recalc(sample_program())
    return _recalc([_to_item(r) for r in rows])


def save_program(db: Session, events: List[EventItem]) -> List[EventItem]:
    """
    일정 목록을 재계산한 뒤 통째로 저장한다.
    id 기준으로 기존 행은 갱신, 새 항목은 추가, 목록에서 빠진 행은 삭제하며 position은 리스트 순서로 다시 매긴다.

    :param db: DB 세션
    :type db: Session
    :param events: 저장할 일정 목록(순서 = 일정 순서)
    :type events: List[EventItem]
    :return: 재계산된 일정 목록
    :rtype: List[EventItem]
    :raises ProgramStoreError: 저장 실패(롤백됨)
    """

    calculated = _recalc(events)
    try:
        existing = {r.id: r for r in db.query(ProgramEvent).all()}
        keep = set()
        for pos, item in enumerate(calculated):
            row = existing.get(item.id)
            if row is None:
                row = ProgramEvent(id=item.id)
                db.add(row)
            _apply(row, item, pos)
            keep.add(item.id)
        for eid, row in existing.items():
            if eid not in keep:
                db.delete(row)
        db.merge(ProgramMeta(key=SAVED_MARKER, value=str(len(calculated))))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("[Program:save] failed: %s", e)
        raise ProgramStoreError("Failed to save changes") from e

    logger.info("[Program:save] saved %d events", len(calculated))
    return calculated


def _index_of(events: List[EventItem], event_id: str) -> int:
    for i, e in enumerate(events):
        if e.id == event_id:
            return i
    raise ValueError("NOT_FOUND")


def get_event(db: Session, event_id: str) -> Optional[EventItem]:
    return next((e for e in load_program(db) if e.id == event_id), None)


def add_event(db: Session, payload: EventCreate) -> Tuple[EventItem, List[EventItem]]:
    """
    새 일정을 맨 뒤에 추가한다. id가 없으면 새로 만든다.

    :return: (재계산 후의 새 항목, 전체 일정)
    :rtype: Tuple[EventItem, List[EventItem]]
    """

    data = payload.model_dump()
    data["id"] = data.get("id") or uuid.uuid4().hex
    item = EventItem(**data)
    events = load_program(db)
    if any(e.id == item.id for e in events):
        raise ValueError("DUPLICATE_ID")
    saved = save_program(db, events + [item])
    return saved[-1], saved


def update_event(db: Session, event_id: str, patch: EventUpdate) -> Tuple[EventItem, List[EventItem]]:
    events = load_program(db)
    idx = _index_of(events, event_id)
    # script만 None(없음)으로 되돌릴 수 있음
    data = {k: v for k, v in patch.model_dump(exclude_unset=True).items() if v is not None or k == "script"}
    events[idx] = events[idx].model_copy(update=data)
    saved = save_program(db, events)
    return saved[idx], saved


def delete_event(db: Session, event_id: str) -> List[EventItem]:
    events = load_program(db)
    idx = _index_of(events, event_id)
    del events[idx]
    return save_program(db, events)


def move_event(db: Session, from_index: int, to_index: int) -> List[EventItem]:
    """
    드래그 앤 드롭 이동. from_index 항목을 빼서 to_index에 끼워 넣는다. (0-base)

    :raises ValueError: OUT_OF_RANGE - 인덱스가 목록 범위를 벗어남
    """

    events = load_program(db)
    n = len(events)
    if not (0 <= from_index < n and 0 <= to_index < n):
        raise ValueError("OUT_OF_RANGE")
    moved = events.pop(from_index)
    events.insert(to_index, moved)
    return save_program(db, events)


def _swap(db: Session, event_id: str, step: int) -> List[EventItem]:
    events = load_program(db)
    idx = _index_of(events, event_id)
    other = idx + step
    # 맨 위/맨 아래에서는 아무것도 바꾸지 않음
    if not (0 <= other < len(events)):
        return events
    events[idx], events[other] = events[other], events[idx]
    return save_program(db, events)

def move_up(db: Session, event_id: str) -> List[EventItem]:
    return _swap(db, event_id, -1)

def move_down(db: Session, event_id: str) -> List[EventItem]:
    return _swap(db, event_id, 1)


def import_csv(db: Session, text: str, mode: str = "replace") -> List[EventItem]:
    """
    CSV를 읽어 일정을 교체(replace)하거나 뒤에 덧붙인다(append).

    :param text: CSV 텍스트
    :type text: str
    :param mode: "replace" | "append"
    :type mode: str
    :return: 저장된(재계산된) 일정 목록
    :rtype: List[EventItem]
    :raises ValueError: BAD_MODE - 지원하지 않는 mode
    """

    if mode not in IMPORT_MODES:
        raise ValueError("BAD_MODE")
    imported = parse_csv(text)
    logger.info("[Program:import] mode=%s rows=%d", mode, len(imported))
    events = load_program(db) + imported if mode == "append" else imported
    return save_program(db, events)


def export_csv(db: Session) -> str:
    return serialize_csv(load_program(db))


def reset_program(db: Session) -> List[EventItem]:
    logger.info("[Program:reset] restoring sample program")
    return save_program(db, sample_program())
