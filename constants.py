import os

CODE_TTL_SECONDS = int(os.getenv("CODE_TTL_SECONDS", 1200))

MEET_BASE_URL = os.getenv("MEET_BASE_URL", "https://meet.google.com").rstrip("/")
LANDING_URL = os.getenv("LANDING_URL", f"{MEET_BASE_URL}/landing")
PROJECT_URL = os.getenv("PROJECT_URL", "https://github.com/71/meet-url")

ALLOWED_ORIGIN = os.getenv("ALLOWED_ORIGIN", MEET_BASE_URL)
