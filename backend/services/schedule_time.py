# services/schedule_time.py
# 소요시간 / 시각 라벨 / 정규식

import re

# 문자열에서 처음 나오는 숫자 묶음
FIRST_NUMBER_RE = re.compile(r"[0-9]+")
# 시/분 칸: ASCII 숫자만(부호 허용). 밑줄이나 다른 문자권 숫자는 0으로 취급
INT_PART_RE = re.compile(r"[+-]?[0-9]+")

# 이 시간 이전(1~7시)은 오후로 본다. 일정은 08:00 ~ 19:59 사이라고 가정함
PM_CUTOFF_HOUR = 8
MINUTES_PER_DAY = 24 * 60


def parse_duration_minutes(text) -> int:
    """
    "10 mns", "1 hr", "45 mins" 같은 자유 형식 소요시간을 분 단위로 바꾼다.
    첫 번째 숫자만 사용하며(예: "10-15 mins" -> 10), 'hr' 또는 'hour'가 들어 있으면 시간 단위로 본다.

    :param text: 소요시간 문자열(비어 있어도 됨)
    :type text: str
    :return: 분(숫자가 없으면 0)
    :rtype: int
    """

    if not text:
        return 0
    d = str(text).lower().strip()
    m = FIRST_NUMBER_RE.search(d)
    if not m:
        return 0
    val = int(m.group(0))
    if "hr" in d or "hour" in d:
        val *= 60
    return val


def _to_int(s: str) -> int:
    s = s.strip()
    return int(s) if INT_PART_RE.fullmatch(s) else 0


def time_to_minutes(label) -> int:
    """
    12시간제 "HH:MM" 라벨을 자정 기준 분으로 바꾼다. (오전/오후 표기 없음)
    - 1~7시 -> 오후(13:00 ~ 19:00)
    - 8~11시 -> 오전
    - 12시 -> 정오

    :param label: 시각 문자열
    :type label: str
    :return: 자정 기준 분(':'가 없으면 0)
    :rtype: int
    """

    if not label or ":" not in label:
        return 0
    parts = label.split(":")
    h, m = _to_int(parts[0]), _to_int(parts[1])
    if h < PM_CUTOFF_HOUR:
        h += 12
    return h * 60 + m


def minutes_to_time(total_minutes: int) -> str:
    """
    자정 기준 분을 12시간제 "HH:MM" 라벨로 바꾼다. 하루를 넘기면 다시 0시부터 센다.

    :param total_minutes: 자정 기준 분
    :type total_minutes: int
    :return: 0 채움된 "HH:MM"
    :rtype: str
    """

    total_minutes %= MINUTES_PER_DAY
    h24, m = divmod(total_minutes, 60)
    h12 = h24 - 12 if h24 > 12 else h24
    if h12 == 0:
        h12 = 12
    return f"{h12:02d}:{m:02d}"


def add_minutes(label: str, delta: int) -> str:
    return minutes_to_time(time_to_minutes(label) + delta)
