"""
Environment-driven settings for scripts and applications embedding the client.
"""
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from exchange_data.models.options import ClientOptions


@dataclass
class Settings:
    server_url: str | None = None
    email: str | None = None
    password: str | None = None
    options: ClientOptions = field(default_factory=ClientOptions)

    @property
    def has_credentials(self) -> bool:
        return bool(self.email and self.password)


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Load EXCHANGE_* settings from the environment, after reading a .env file if present."""
    load_dotenv(dotenv_path)
    return Settings(
        server_url=os.getenv("EXCHANGE_SERVER_URL"),
        email=os.getenv("EXCHANGE_EMAIL"),
        password=os.getenv("EXCHANGE_PASSWORD"),
        options=ClientOptions.from_env(),
    )
