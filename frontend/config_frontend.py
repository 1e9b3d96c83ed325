import os
from dotenv import load_dotenv

load_dotenv()

BACKEND_URL = os.getenv("BACKEND_URL", "http://127.0.0.1:8000")

# the summary request has no timeout, matching the backend's single open call
HEALTH_TIMEOUT_SEC = float(os.getenv("HEALTH_TIMEOUT_SEC", "10"))
