import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("PARCELTRACKER_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()

DEFAULT_DATABASE_URL = "postgresql://localhost:5432/parceltracker"
DEFAULT_TEST_DATABASE_URL = "postgresql://localhost:5432/parceltracker_test"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def database_name(url: str) -> str:
    """Database name from a connection URL, e.g. ".../parceltracker_test?x=1" -> "parceltracker_test"."""
    return url.rsplit("/", 1)[1].split("?")[0]


def require_test_database(url: str) -> str:
    """
    Return the database name of a URL the test suite may drop and recreate.

    Raises RuntimeError unless the name ends in "_test".
    """
    name = database_name(url)
    if not name.endswith("_test"):
        raise RuntimeError(
            f"Refusing to recreate database '{name}': test database names must end in '_test'"
        )
    return name


@dataclass
class Config:
    environment: str
    database_url: str
    log_level: str

    @classmethod
    def from_env(cls, environment: str = None) -> "Config":
        environment = environment or env

        # The test suite drops its database, so it never reads DATABASE_URL,
        # which a copied .env points at the development database.
        if environment == "test":
            database_url = os.environ.get("TEST_DATABASE_URL", DEFAULT_TEST_DATABASE_URL)
        else:
            database_url = os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL)

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            log_level = "INFO"

        return cls(
            environment=environment,
            database_url=database_url,
            log_level=log_level,
        )


config = Config.from_env()
