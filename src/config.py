from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Hosted record store (PostgREST endpoint + anon/service key)
    record_store_url: str = "http://localhost:54321"
    record_store_key: str = ""
    request_timeout: float = 30.0

    schedule_table: str = "travel_schedule"
    checklist_table: str = "checklist"

    # Trip
    trip_people: List[str] = ["성진", "지열", "성동"]
    trip_days: int = 4

    log_level: str = "INFO"

    @field_validator("trip_people")
    @classmethod
    def require_people(cls, value: List[str]) -> List[str]:
        people = [person.strip() for person in value if person.strip()]
        if not people:
            raise ValueError("trip_people needs at least one person")
        return people

    def is_record_store_configured(self) -> bool:
        """Check that both the endpoint and the access key are present."""
        return bool(self.record_store_url and self.record_store_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore
