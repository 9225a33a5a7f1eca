# config.py
# 환경 변수 기반 설정값
# - .env 파일이 있으면 먼저 읽어온 뒤 os.getenv로 조회함
import os
from dotenv import load_dotenv

load_dotenv()

WEB_ORIGIN = os.getenv("WEB_ORIGIN", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 앵커(기준) 이벤트 설정
# - title: 제목에 ANCHOR_TITLE이 포함된 첫 이벤트를 앵커로 사용(기본값)
# - index: ANCHOR_INDEX 위치의 이벤트를 앵커로 사용
ANCHOR_STRATEGY = os.getenv("ANCHOR_STRATEGY", "title").strip().lower()
ANCHOR_TITLE = os.getenv("ANCHOR_TITLE", "intro: beyond learning")
ANCHOR_INDEX = int(os.getenv("ANCHOR_INDEX", "9"))
ANCHOR_TIME = os.getenv("ANCHOR_TIME", "09:50")

# 저장된 일정이 없을 때 샘플 프로그램을 보여줄지 여부
SEED_SAMPLE_PROGRAM = os.getenv("SEED_SAMPLE_PROGRAM", "1").strip().lower() not in ("0", "false", "no", "off")

EXPORT_FILENAME = os.getenv("EXPORT_FILENAME", "program_schedule.csv")
