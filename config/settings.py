import os
from dotenv import load_dotenv

load_dotenv()

# Base dir: project root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

PORT = int(os.getenv("BUDDYUP_PORT", "5000"))
DB_PATH = os.getenv("BUDDYUP_DB_PATH", os.path.join(BASE_DIR, "db.json"))

# Single frontend origin allowed to call the API
CORS_ORIGIN = os.getenv("BUDDYUP_CORS_ORIGIN", "http://127.0.0.1:5500")

BCRYPT_ROUNDS = int(os.getenv("BUDDYUP_BCRYPT_ROUNDS", "10"))
LOG_LEVEL = os.getenv("BUDDYUP_LOG_LEVEL", "INFO")
