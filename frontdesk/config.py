from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FrontDeskConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FRONTDESK_", env_file=".env", extra="ignore")

    log_level: str = "WARNING"
    max_login_attempts: int = Field(default=3, gt=0)
    patient_id_prefix: str = Field(default="P", min_length=1)
    appointment_id_prefix: str = Field(default="A", min_length=1)
    seed_sample_data: bool = True
