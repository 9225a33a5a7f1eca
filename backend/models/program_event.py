# models/program_event.py
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()

class ProgramEvent(Base):
    __tablename__ = "program_events"
    id = Column(String(64), primary_key=True, index=True)
    position = Column(Integer, nullable=False, index=True)  # 일정 순서(0-base)
    start_time = Column(String(16), nullable=False, default="")  # "HH:MM" (오전/오후 없음)
    duration = Column(String(64), nullable=False, default="")
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    team_lead = Column(String(255), nullable=False, default="")
    team_members = Column(Text, nullable=False, default="")
    logistics = Column(Text, nullable=False, default="")
    notes = Column(Text, nullable=False, default="")
    script = Column(Text, nullable=True)
    category = Column(String(32), nullable=False, default="general")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class ProgramMeta(Base):
    # 키-값 상태. "saved" 행이 있으면 한 번이라도 저장된 적이 있는 것(빈 일정 포함)
    __tablename__ = "program_meta"
    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
