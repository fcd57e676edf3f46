import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: Optional[str]
    api_version: str
    cors_origins: List[str]


def get_settings() -> Settings:
    load_dotenv()
    log_file = os.getenv('OBSCORE_LOG_FILE', '').strip() or None
    origins = [o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()]
    return Settings(
        log_level=os.getenv('OBSCORE_LOG_LEVEL', 'INFO').upper(),
        log_file=log_file,
        api_version=os.getenv('API_VERSION', 'v1'),
        cors_origins=origins,
    )
