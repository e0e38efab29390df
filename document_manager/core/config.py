from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"

    # Проверка обязательных полей документа при сохранении
    validate_documents: bool = False

    model_config = SettingsConfigDict(
        env_prefix="DOCUMENT_MANAGER_",
        env_file=".env",
        extra="ignore",
    )

settings = Settings()
