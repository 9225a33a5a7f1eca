# services/schedule_csv.py
# CSV 내보내기 / 가져오기

import uuid
from typing import List, Sequence

from schemas.event_schema import EventItem, CATEGORIES

CSV_HEADERS = [
    "Start Time", "Duration", "Title", "Description", "Team Lead",
    "Team Members", "Logistics", "Notes", "Script", "Category",
]
# CSV 열 순서와 같은 EventItem 필드
CSV_FIELDS = [
    "start_time", "duration", "title", "description", "team_lead",
    "team_members", "logistics", "notes", "script", "category",
]
UNTITLED = "Untitled"


def _quote(value) -> str:
    return '"' + (value or "").replace('"', '""') + '"'


def serialize_csv(events: Sequence[EventItem]) -> str:
    """
    일정 목록을 CSV 문서(헤더 포함)로 만든다. 모든 값은 큰따옴표로 감싸고 내부 따옴표는 두 번 쓴다.

    :param events: 일정 목록
    :type events: Sequence[EventItem]
    :return: CSV 텍스트(줄 구분은 '\\n')
    :rtype: str
    """

    lines = [",".join(CSV_HEADERS)]
    for e in events:
        lines.append(",".join(_quote(getattr(e, f)) for f in CSV_FIELDS))
    return "\n".join(lines)


def _split_rows(text: str) -> List[List[str]]:
    """
    따옴표 안의 쉼표/줄바꿈을 구분자로 보지 않는 문자 단위 스캐너.
    """

    rows: List[List[str]] = []
    row: List[str] = []
    field = ""
    in_quotes = False
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""
        if ch == '"':
            if in_quotes and nxt == '"':
                field += '"'
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            row.append(field)
            field = ""
        elif ch in "\r\n" and not in_quotes:
            if ch == "\r" and nxt == "\n":
                i += 1
            row.append(field)
            rows.append(row)
            row, field = [], ""
        else:
            field += ch
        i += 1

    # 마지막 줄바꿈 없이 끝난 행
    if field or row:
        row.append(field)
        rows.append(row)
    return rows


def _is_header(row: List[str]) -> bool:
    first = row[0].lower() if row else ""
    third = row[2].lower() if len(row) > 2 else ""
    return "start time" in first or "title" in third


def _normalize_category(raw: str) -> str:
    c = raw.strip().lower()
    return c if c in CATEGORIES else "general"


def parse_csv(text: str) -> List[EventItem]:
    """
    CSV 문서를 일정 목록으로 읽는다. 헤더 행은 있어도 되고 없어도 된다.
    각 항목에는 새 id를 부여하며, 제목이 비어 있는 행은 버린다. 시작 시각 재계산은 하지 않음.

    :param text: CSV 텍스트
    :type text: str
    :return: 새 id가 붙은 일정 목록(재계산 전)
    :rtype: List[EventItem]
    """

    rows = _split_rows(text or "")
    if rows and _is_header(rows[0]):
        rows = rows[1:]

    events = [_parse_row(row) for row in rows]
    return [e for e in events if e.title and e.title != UNTITLED]


def _parse_row(row: List[str]) -> EventItem:
    def cell(idx: int) -> str:
        return row[idx].strip() if idx < len(row) and row[idx] else ""

    return EventItem(
        id=uuid.uuid4().hex,
        start_time=cell(0),
        duration=cell(1),
        title=cell(2) or UNTITLED,
        description=cell(3),
        team_lead=cell(4),
        team_members=cell(5),
        logistics=cell(6),
        notes=cell(7),
        script=cell(8),
        category=_normalize_category(cell(9)),
    )
