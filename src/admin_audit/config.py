import os
from pydantic import BaseModel
from dotenv import load_dotenv


class Settings(BaseModel):
    env: str = "dev"
    log_level: str = "INFO"
    log_format: str = "json"  # "json" | "console"
    app_name: str = "admin_audit"
    redact_sensitive: bool = True
    redaction_placeholder: str = "[REDACTED]"
    password_audit_backend: str = "Database"


def _load_settings() -> Settings:
    load_dotenv()
    return Settings(
        env=os.getenv("ENV", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "json"),
        app_name=os.getenv("AUDIT_APP_NAME", "admin_audit"),
        redact_sensitive=os.getenv("AUDIT_REDACT_SENSITIVE", "true").lower() == "true",
        redaction_placeholder=os.getenv("AUDIT_REDACTION_PLACEHOLDER", "[REDACTED]"),
        password_audit_backend=os.getenv("AUDIT_PASSWORD_BACKEND", "Database"),
    )


settings = _load_settings()
