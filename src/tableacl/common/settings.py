from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env into os.environ
load_dotenv()


class Settings(BaseSettings):
    """Access checker settings backed by environment variables."""

    table_acl_config_path: Optional[str] = Field(
        default=None,
        validation_alias="TABLE_ACL_CONFIG",
        description="Path to the JSON file holding per table access rules. Unset disables the table checker."
    )
    table_acl_reload_mode: Literal["merge", "replace"] = Field(
        default="merge",
        validation_alias="TABLE_ACL_RELOAD_MODE",
        description="Whether a reload merges into the current rules or replaces them."
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(
        default=False,
        validation_alias="LOG_JSON",
        description="Emit JSON log lines instead of the plain text format."
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


settings = Settings()

# Configure logging during import
from tableacl.common.logger import configure_logging
configure_logging(
    level=settings.log_level,
    json_format=settings.log_json
)
