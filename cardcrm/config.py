from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Database
    database_url: str = "sqlite+aiosqlite:///./cardcrm.db"

    # SerpAPI (빈 값이면 뉴스 검색 비활성화)
    serp_api_key: str = ""
    serp_base_url: str = "https://serpapi.com"
    serp_timeout: float = 15.0

    # Search
    suggestion_limit: int = 5  # 회사 선택 자동완성 개수
    news_limit: int = 3

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    @property
    def news_enabled(self) -> bool:
        return bool(self.serp_api_key)


settings = Settings()
