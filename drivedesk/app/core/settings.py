import os


class Settings:
    def __init__(self):
        self.app_name = "DriveDesk"
        self.api_version = "1.0.0"
        self.environment = os.getenv("DRIVEDESK_ENVIRONMENT", "development")
        self.secret_key = os.getenv("DRIVEDESK_SECRET_KEY", "CHANGE_ME")
        self.SECRET_KEY = self.secret_key
        self.access_token_expire_minutes = int(os.getenv("DRIVEDESK_ACCESS_TOKEN_EXPIRE_MINUTES", "30"))
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.access_token_expire_minutes
        self.database_url = os.getenv("DRIVEDESK_DATABASE_URL", "sqlite:///./drivedesk.db")
        self.log_level = os.getenv("DRIVEDESK_LOG_LEVEL", "INFO")
        self.currency = os.getenv("DRIVEDESK_CURRENCY", "DH")
        self.cors_origins = [
            origin.strip()
            for origin in os.getenv("DRIVEDESK_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
            if origin.strip()
        ]

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
