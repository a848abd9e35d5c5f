from pydantic import BaseModel
from typing import List, Optional
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_MONGODB_URI = "mongodb://localhost:27017"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "t", "yes", "y")


class Settings(BaseModel):
    mongodb_uri: Optional[str] = DEFAULT_MONGODB_URI
    mongodb_db: str = "dentalapp"
    lazy_connect: bool = False
    allowed_origins: List[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        lazy = _env_flag("MONGODB_LAZY_CONNECT")
        # Serverless deployments must be given a URI explicitly
        uri = os.getenv("MONGODB_URI") or (None if lazy else DEFAULT_MONGODB_URI)
        origins = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]
        return cls(
            mongodb_uri=uri,
            mongodb_db=os.getenv("MONGODB_DB", "dentalapp"),
            lazy_connect=lazy,
            allowed_origins=origins,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


settings = Settings.from_env()
