# services/sample_program.py
# 저장된 일정이 없을 때 보여주는 기본 프로그램 (초기화 시에도 사용)

from typing import List

from schemas.event_schema import EventItem

SAMPLE_PROGRAM = [
    {
        "id": "sample-01", "startTime": "08:30", "duration": "45 mns",
        "title": "Registration & Badge Pickup", "category": "registration",
        "description": "Guests check in at the front desk and collect badges.",
        "teamLead": "Registration Desk", "teamMembers": "Volunteers A, B",
        "logistics": "2 tables, badge printer, guest list", "notes": "",
    },
    {
        "id": "sample-02", "startTime": "09:15", "duration": "20 mns",
        "title": "Welcome Coffee", "category": "food",
        "description": "Coffee and pastries in the lobby.",
        "teamLead": "Catering", "teamMembers": "",
        "logistics": "Coffee station, 120 cups", "notes": "Confirm vegan options",
    },
    {
        "id": "sample-03", "startTime": "09:35", "duration": "15 mns",
        "title": "Opening Remarks", "category": "stage",
        "description": "Host welcomes the audience.",
        "teamLead": "Anchor", "teamMembers": "Stage Manager",
        "logistics": "Handheld mic", "notes": "", "script": "",
    },
    {
        "id": "sample-04", "startTime": "09:50", "duration": "10 mns",
        "title": "Intro: Beyond Learning", "category": "stage",
        "description": "Framing talk for the day's theme.",
        "teamLead": "Program Lead", "teamMembers": "AV Team",
        "logistics": "Slides on main screen", "notes": "", "script": "",
    },
    {
        "id": "sample-05", "startTime": "10:00", "duration": "45 mns",
        "title": "Keynote", "category": "stage",
        "description": "Main keynote session.",
        "teamLead": "Program Lead", "teamMembers": "AV Team",
        "logistics": "Lapel mic, clicker", "notes": "Speaker arrives 09:30",
    },
    {
        "id": "sample-06", "startTime": "10:45", "duration": "15 mns",
        "title": "Break", "category": "food",
        "description": "", "teamLead": "Catering", "teamMembers": "",
        "logistics": "", "notes": "",
    },
    {
        "id": "sample-07", "startTime": "11:00", "duration": "1 hr",
        "title": "Panel Discussion", "category": "stage",
        "description": "Moderated panel with audience Q&A.",
        "teamLead": "Moderator", "teamMembers": "Panelists x4",
        "logistics": "4 chairs, 5 mics", "notes": "",
    },
    {
        "id": "sample-08", "startTime": "12:00", "duration": "1 hr",
        "title": "Lunch", "category": "food",
        "description": "Buffet lunch in the hall.",
        "teamLead": "Catering", "teamMembers": "",
        "logistics": "Hall B", "notes": "",
    },
    {
        "id": "sample-09", "startTime": "01:00", "duration": "30 mns",
        "title": "Workshops", "category": "general",
        "description": "Breakout sessions.",
        "teamLead": "Workshop Leads", "teamMembers": "",
        "logistics": "Rooms 1-3", "notes": "",
    },
    {
        "id": "sample-10", "startTime": "01:30", "duration": "10 mns",
        "title": "Closing & Thanks", "category": "stage",
        "description": "", "teamLead": "Anchor", "teamMembers": "",
        "logistics": "", "notes": "", "script": "",
    },
]


def sample_program() -> List[EventItem]:
    return [EventItem.model_validate(e) for e in SAMPLE_PROGRAM]
