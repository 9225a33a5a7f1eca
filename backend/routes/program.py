# 프로그램(행사 일정) 편집 라우터.
# 추가/수정/삭제/순서 변경/CSV 가져오기·내보내기/초기화 요청을 받아 event_service로 넘기고,
# 항상 재계산된 전체 일정(또는 해당 항목)을 돌려준다.
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response
from sqlalchemy.orm import Session

import config
from database import get_db
from schemas.event_schema import EventItem, EventCreate, EventUpdate, EventOut, ReorderIn
from services import event_service
from services.event_service import ProgramStoreError
from services.schedule_recalc import policy_from_settings, recalculate
from routes.program_filters import _apply_filters
from routes.program_render import _pack_all, _pack_event

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/events", tags=["events"])

# service 계층의 ValueError 코드 -> HTTP 상태
_ERROR_STATUS = {
    "NOT_FOUND": 404,
    "OUT_OF_RANGE": 400,
    "BAD_MODE": 400,
    "DUPLICATE_ID": 409,
}


def _raise_http(e: Exception):
    """
    service 예외를 HTTPException으로 바꿔서 던진다.

    :param e: ValueError(코드 문자열) 또는 ProgramStoreError
    :type e: Exception
    :raises HTTPException: 4xx(입력 문제) 또는 500(저장소 실패)
    """
    if isinstance(e, ProgramStoreError):
        raise HTTPException(status_code=500, detail=str(e))
    code = str(e)
    raise HTTPException(status_code=_ERROR_STATUS.get(code, 400), detail=code)


@router.get("", response_model=List[EventOut])
def list_events(
    q: Optional[str] = Query(None, description="제목/팀 리드/카테고리 검색어"),
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    전체 일정 조회(재계산 결과). index는 검색 결과가 아니라 전체 일정 기준 순번이다.
    """
    try:
        events = event_service.load_program(db)
    except ProgramStoreError as e:
        _raise_http(e)
    return _apply_filters(_pack_all(events), q, category)


@router.put("", response_model=List[EventOut])
def replace_events(body: List[EventItem], db: Session = Depends(get_db)):
    """
    일정 전체를 받은 순서 그대로 저장한다. (클라이언트 쪽에서 편집한 목록을 한 번에 반영)
    """
    ids = [e.id for e in body]
    if len(ids) != len(set(ids)):
        raise HTTPException(status_code=400, detail="DUPLICATE_ID")
    try:
        return _pack_all(event_service.save_program(db, body))
    except ProgramStoreError as e:
        _raise_http(e)


@router.post("", response_model=EventOut, status_code=201)
def create_event(body: EventCreate, db: Session = Depends(get_db)):
    try:
        item, events = event_service.add_event(db, body)
    except (ValueError, ProgramStoreError) as e:
        _raise_http(e)
    return _pack_event(item, len(events) - 1)


@router.post("/recalculate", response_model=List[EventOut])
def preview_recalculate(body: List[EventItem]):
    """
    저장하지 않고 재계산 결과만 미리 본다.
    """
    return _pack_all(recalculate(body, policy_from_settings()))


@router.post("/reorder", response_model=List[EventOut])
def reorder_events(body: ReorderIn, db: Session = Depends(get_db)):
    try:
        return _pack_all(event_service.move_event(db, body.from_index, body.to_index))
    except (ValueError, ProgramStoreError) as e:
        _raise_http(e)


@router.get("/export")
def export_events(db: Session = Depends(get_db)):
    """
    CSV 파일로 내보내기(헤더 포함)
    """
    try:
        text = event_service.export_csv(db)
    except ProgramStoreError as e:
        _raise_http(e)
    return Response(
        content=text,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{config.EXPORT_FILENAME}"'},
    )


@router.post("/import", response_model=List[EventOut])
async def import_events(
    request: Request,
    mode: str = Query("replace", description="replace | append"),
    db: Session = Depends(get_db),
):
    """
    요청 본문(CSV 텍스트)을 읽어 일정을 교체하거나 뒤에 덧붙인다. 헤더 행은 있어도 되고 없어도 된다.

    :param request: 본문이 CSV 텍스트인 요청
    :type request: Request
    :param mode: replace(기본) 또는 append
    :type mode: str
    :return: 저장된 전체 일정
    :rtype: List[EventOut]
    """
    raw = await request.body()
    logger.info("[Events:import] mode=%s bytes=%d", mode, len(raw))
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV must be UTF-8")
    try:
        return _pack_all(event_service.import_csv(db, text, mode))
    except (ValueError, ProgramStoreError) as e:
        _raise_http(e)


@router.post("/reset", response_model=List[EventOut])
def reset_events(db: Session = Depends(get_db)):
    """
    샘플 프로그램으로 되돌린다. 기존 변경 사항은 모두 사라진다.
    """
    try:
        return _pack_all(event_service.reset_program(db))
    except ProgramStoreError as e:
        _raise_http(e)


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: str, db: Session = Depends(get_db)):
    try:
        events = event_service.load_program(db)
    except ProgramStoreError as e:
        _raise_http(e)
    for i, e in enumerate(events):
        if e.id == event_id:
            return _pack_event(e, i)
    raise HTTPException(status_code=404, detail="NOT_FOUND")


@router.patch("/{event_id}", response_model=EventOut)
def update_event(event_id: str, body: EventUpdate, db: Session = Depends(get_db)):
    try:
        item, events = event_service.update_event(db, event_id, body)
    except (ValueError, ProgramStoreError) as e:
        _raise_http(e)
    position = next(i for i, e in enumerate(events) if e.id == item.id)
    return _pack_event(item, position)


@router.delete("/{event_id}", response_model=List[EventOut])
def delete_event(event_id: str, db: Session = Depends(get_db)):
    try:
        return _pack_all(event_service.delete_event(db, event_id))
    except (ValueError, ProgramStoreError) as e:
        _raise_http(e)


@router.post("/{event_id}/move-up", response_model=List[EventOut])
def move_event_up(event_id: str, db: Session = Depends(get_db)):
    try:
        return _pack_all(event_service.move_up(db, event_id))
    except (ValueError, ProgramStoreError) as e:
        _raise_http(e)


@router.post("/{event_id}/move-down", response_model=List[EventOut])
def move_event_down(event_id: str, db: Session = Depends(get_db)):
    try:
        return _pack_all(event_service.move_down(db, event_id))
    except (ValueError, ProgramStoreError) as e:
        _raise_http(e)
