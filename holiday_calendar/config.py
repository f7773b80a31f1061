"""Configuration settings for the application."""
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""
    
    app_name: str = "Holiday Calendar API"
    debug: bool = False
    log_level: str = "INFO"
    
    # Holiday data provider: calendarific, nager, abstractapi or fallback
    holiday_api_provider: str = "calendarific"
    holiday_api_base_url: Optional[str] = None
    calendarific_api_key: str = ""
    abstractapi_key: str = ""
    request_timeout_seconds: float = 10.0
    
    # Calendar layout (0 = Monday ... 6 = Sunday)
    week_start: int = Field(default=6, ge=0, le=6)
    
    # Request validation bounds
    min_year: int = 1900
    max_years_ahead: int = 10
    max_range_days: int = 730
    
    cors_origins: List[str] = ["http://localhost:3000"]
    
    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
