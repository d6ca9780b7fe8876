from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    MONGODB_URI: str = "mongodb://localhost:27017/tours-travels"
    MONGODB_DB: str = "tours-travels"
    MONGODB_MAX_POOL_SIZE: int = 10
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGODB_SOCKET_TIMEOUT_MS: int = 45000

    API_VERSION: str = "1.0.0"
    CORS_ORIGINS: list[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "app.log"

    HOST: str = "0.0.0.0"
    PORT: int = 9090

    class Config:
        env_file = ".env"

settings = Settings()
