import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import config
from database import get_db
from main import app
from models.program_event import Base
from schemas.event_schema import EventItem


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _get_db():
        s = Session()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.setattr(config, "ANCHOR_STRATEGY", "title")
    monkeypatch.setattr(config, "ANCHOR_TITLE", "intro: beyond learning")
    monkeypatch.setattr(config, "ANCHOR_INDEX", 9)
    monkeypatch.setattr(config, "ANCHOR_TIME", "09:50")
    monkeypatch.setattr(config, "SEED_SAMPLE_PROGRAM", True)
    monkeypatch.setattr(config, "EXPORT_FILENAME", "program_schedule.csv")


@pytest.fixture
def no_sample(monkeypatch):
    monkeypatch.setattr(config, "SEED_SAMPLE_PROGRAM", False)


@pytest.fixture
def make_event():
    def _make(id, start="", duration="", title="Session", **kw):
        return EventItem(id=id, start_time=start, duration=duration, title=title, **kw)
    return _make
