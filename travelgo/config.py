import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_JWT_SECRET = "dev-secret-change-me"


class Settings:
    # Database
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./travelgo.db")

    # Tokens
    JWT_SECRET = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "24"))

    # Passwords
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # HTTP
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Seeder
    SEED_USERNAME = os.getenv("SEED_USERNAME", "demo")
    SEED_EMAIL = os.getenv("SEED_EMAIL", "demo@example.com")
    SEED_PASSWORD = os.getenv("SEED_PASSWORD", "demo123")

settings = Settings()
