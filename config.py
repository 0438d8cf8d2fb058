import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# === CONFIG ===
SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-this-in-production")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Remote users API (reqres.in compatible)
USERS_API_URL = os.getenv("USERS_API_URL", "https://reqres.in")
USERS_API_KEY = os.getenv("USERS_API_KEY")  # sent as x-api-key when set
USERS_API_TIMEOUT = float(os.getenv("USERS_API_TIMEOUT", "10"))

# Pagination
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "6"))  # used when the API omits per_page
PAGINATOR_WINDOW_SIZE = int(os.getenv("PAGINATOR_WINDOW_SIZE", "5"))

# Overlay
MODAL_ROOT_ID = os.getenv("MODAL_ROOT_ID", "modal-root")
