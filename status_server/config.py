import os

class Settings:
    """Application settings"""
    def __init__(self):
        self.app_name: str = os.getenv("APP_NAME", "DevOps Assignment Web App")
        self.app_version: str = os.getenv("APP_VERSION", "1.0.0")
        self.debug: bool = os.getenv("DEBUG", "false").lower() == "true"
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3000"))

        # Deployment environment label reported by /api/info
        self.environment: str = os.getenv("APP_ENV", "development")

        # Logging settings
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")

# Global settings instance
settings = Settings()
