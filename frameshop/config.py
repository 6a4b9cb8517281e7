from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./frameshop.db"
    SHOP_NAME: str = "Frame Shop"
    LOG_LEVEL: str = "INFO"

    # Pricing
    TAX_RATE: float = 0.0875

    # Order intake defaults when the form leaves a field blank
    DEFAULT_FRAME_STYLE: str = "contemporary"
    DEFAULT_GLASS_TYPE: str = "regular"
    DEFAULT_BACKING_TYPE: str = "standard"
    DEFAULT_COMPLEXITY: str = "medium"

    class Config:
        env_file = ".env"


settings = Settings()
