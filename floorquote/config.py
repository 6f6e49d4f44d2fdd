from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "FloorQuote Hardwood Flooring"

    # Pricing defaults used when a quote request omits them
    DEFAULT_TAX_RATE: float = 0.08
    DEFAULT_TIER: str = "premium"
    DEFAULT_SPECIES: str = "White Oak"

    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
