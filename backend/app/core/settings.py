from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront"
    DATABASE_URL: str = "sqlite:///./storefront.db"

    # Auth Config
    # Single source for the HMAC secret, used for both signing and verification.
    # Left empty here so imports never fail; startup aborts if it is not set.
    JWT_SECRET_KEY: str = ""
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Security
    PASSWORD_PEPPER: str = ""

    LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
