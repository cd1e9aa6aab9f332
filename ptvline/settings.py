# ptvline/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("PTV_API_BASE_URL", "https://timetableapi.ptv.vic.gov.au")
# 0 = metropolitan train
ROUTE_TYPE = int(os.getenv("PTV_ROUTE_TYPE", "0"))
TIMEOUT = float(os.getenv("PTV_TIMEOUT", "30"))
DEFAULT_TIMEZONE = os.getenv("PTV_TIMEZONE", "Australia/Sydney")
LOG_LEVEL = os.getenv("PTV_LOG_LEVEL", "WARNING")
