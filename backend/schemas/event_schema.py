# schemas/event_schema.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, Literal

Category = Literal["general", "stage", "food", "registration"]
CATEGORIES = ("general", "stage", "food", "registration")

# JSON은 원본 클라이언트와 같은 camelCase(startTime, teamLead ...)를 사용하고
# 파이썬 코드에서는 snake_case 필드명으로 다룬다.
_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EventItem(BaseModel):
    """
    일정 항목 1건. 리스트 순서가 곧 일정 순서다.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    start_time: str = ""
    duration: str = ""
    title: str = ""
    description: str = ""
    team_lead: str = ""
    team_members: str = ""
    logistics: str = ""
    notes: str = ""
    script: Optional[str] = None
    category: Category = "general"


class EventCreate(BaseModel):
    # 새 일정 입력 폼의 기본값과 동일
    model_config = _CAMEL

    id: Optional[str] = None
    start_time: str = "09:00"
    duration: str = "10 mns"
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    team_lead: str = ""
    team_members: str = ""
    logistics: str = ""
    notes: str = ""
    script: Optional[str] = ""
    category: Category = "general"

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v):
        if not v.strip():
            raise ValueError("title must not be blank")
        return v


class EventUpdate(BaseModel):
    model_config = _CAMEL

    start_time: Optional[str] = None
    duration: Optional[str] = None
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    team_lead: Optional[str] = None
    team_members: Optional[str] = None
    logistics: Optional[str] = None
    notes: Optional[str] = None
    script: Optional[str] = None
    category: Optional[Category] = None


class ReorderIn(BaseModel):
    """
    드래그 앤 드롭 이동: from_index 위치의 항목을 빼서 to_index 위치에 끼워 넣는다. (0-base)
    """
    model_config = _CAMEL

    from_index: int = Field(ge=0)
    to_index: int = Field(ge=0)


class EventOut(EventItem):
    index: int  # 화면 표시용 1-base 순번
    show_script: bool = False
