from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Orderbook API (public, no credentials needed)
    ORDERBOOK_API_URL: str = "https://api.cow.fi"
    NETWORK: str = "mainnet"  # must be a key of src.ov_common.networks.NETWORKS
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Batch verification endpoint
    BATCH_MAX_UIDS: int = 50

    # App
    APP_NAME: str = "CoW Order Verifier"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev


settings = Settings()
