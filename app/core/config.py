from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "memory"
    DATA_DIR: str = "./data/collections"
    FIRESTORE_PROJECT_ID: str | None = None

    DRESSES_COLLECTION: str = "dresses"
    BOOKINGS_COLLECTION: str = "bookings"

    REQUIRE_DRESS_TYPE_AND_SIZE: bool = True


settings = Settings()
