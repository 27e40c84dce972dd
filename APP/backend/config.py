"""Runtime settings for the Customer Service Desk"""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

SEED_ON_START = os.getenv('SEED_ON_START', 'true').strip().lower() in ('1', 'true', 'yes', 'on')
TIMESTAMP_FORMAT = os.getenv('TIMESTAMP_FORMAT', '%Y-%m-%d %H:%M:%S')

DEFAULT_LOG_LEVEL = 'WARNING'
LOG_FILE = os.getenv('LOG_FILE', '')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*').split(',')


def resolve_log_level(name):
    """Level name from settings, default when logging does not know it"""
    name = (name or DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


LOG_LEVEL = resolve_log_level(os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL))


def setup_logging():
    """Configure root logger from settings"""
    kwargs = {'level': LOG_LEVEL, 'format': LOG_FORMAT}
    if LOG_FILE:
        kwargs['filename'] = LOG_FILE
    logging.basicConfig(**kwargs)
