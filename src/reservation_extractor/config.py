"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Entity extraction
    # Fields below this confidence are blanked at the end of extraction
    confidence_threshold: float = Field(default=0.3, ge=0.0, le=1.0)

    # Field mapping / automation macros
    default_form_type: str = "accountCreation"
    crm_accounts_url: str = (
        "https://manage.mylimobiz.com/admin/manageAccounts.asp"
        "?stab=accountManagement&action=showAccounts"
    )
    macro_name_prefix: str = "LimoAnywhere"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
