from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from roll_pricing.models.pricing import DEFAULT_TAX_RATE_PERCENT
from roll_pricing.pricing.engine import REFERENCE_WIDTH_INCHES

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "roll-pricing"
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    REFERENCE_WIDTH_INCHES: float = REFERENCE_WIDTH_INCHES
    DEFAULT_TAX_RATE_PERCENT: float = DEFAULT_TAX_RATE_PERCENT
    DEFAULT_LENGTH_METERS_PER_ROLL: float = 1000.0
    MAX_ORDER_LINES: int = 200


settings = Settings()
