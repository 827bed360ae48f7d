"""
Configuration Settings
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings"""

    SERVICE_NAME: str = "bank-statement-analyzer"
    SERVICE_VERSION: str = "1.0.0"

    # Currency presentation
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "₦")
    CURRENCY_CODE: str = os.getenv("CURRENCY_CODE", "NGN")

    # Analysis
    TOP_CATEGORIES_LIMIT: int = int(os.getenv("TOP_CATEGORIES_LIMIT", "5"))

    # Agent envelope
    DEFAULT_AGENT_ID: str = os.getenv("DEFAULT_AGENT_ID", "bankAgent")

    # API Configuration
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8001"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
