import os
from dotenv import load_dotenv

# Load environment variables from .env file
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
dotenv_path = os.path.join(BASE_DIR, '.env')

# Load the .env file from that specific path
load_dotenv(dotenv_path=dotenv_path)


class Config:
    """Base configuration class."""

    SECRET_KEY = os.getenv('SECRET_KEY') or 'dev-fallback-secret-key-change-in-prod'

    # Upload limits
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_UPLOAD_MB', 16)) * 1024 * 1024
    ALLOWED_IMPORT_EXTENSIONS = {'.xlsx', '.xls'}

    # Seconds to wait when importing a workbook from a URL
    IMPORT_URL_TIMEOUT = float(os.getenv('IMPORT_URL_TIMEOUT', 30))

    # Start with the template meetings so the dashboard is not empty
    SEED_SAMPLE_MEETINGS = os.getenv('SEED_SAMPLE_MEETINGS', 'true').lower() in ['true', 'on', '1']
