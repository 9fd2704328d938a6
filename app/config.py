from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""
    
    # Database
    DATABASE_URL: str
    
    # API
    API_TITLE: str = "Timeline API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]
    
    # Uploads
    UPLOAD_DIR: str = "public/uploads/timeline"
    UPLOAD_URL_PREFIX: str = "/uploads/timeline"
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5MB
    
    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
