import os
from dotenv import load_dotenv

load_dotenv()

# Configuration API
API_URL = os.getenv("API_URL", "http://localhost:8008")
# No client-side timeout unless one is configured
API_TIMEOUT = float(os.getenv("API_TIMEOUT")) if os.getenv("API_TIMEOUT") else None

# Pause before moving on after a successful upload or generation, in seconds
UPLOAD_REDIRECT_DELAY = float(os.getenv("UPLOAD_REDIRECT_DELAY", 1.5))
GENERATION_REDIRECT_DELAY = float(os.getenv("GENERATION_REDIRECT_DELAY", 2.0))

CSV_MIME_TYPE = "text/csv"
