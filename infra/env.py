import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if not value:
        return default
    return value
