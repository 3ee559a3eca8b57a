from os import getenv
from dotenv import load_dotenv

load_dotenv()

class Config:

    APP_ENV: str = getenv("APP_ENV", "development")

    ALLOWED_ORIGINS: list = getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")


    POSTGRES_USER: str = getenv("POSTGRES_USER", "tenderhub")
    POSTGRES_PASSWORD: str = getenv("POSTGRES_PASSWORD", "tenderhub")
    POSTGRES_DB: str = getenv("POSTGRES_DB", "tenderhub")
    POSTGRES_HOST: str = getenv("POSTGRES_HOST", "db")
    POSTGRES_PORT: str = getenv("POSTGRES_PORT", "5432")

    @property
    def DATABASE_URL(self) -> str:
        return getenv(
            "DATABASE_URL",
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # JWT
    JWT_SECRET: str = getenv("JWT_SECRET", "fallback-secret")
    JWT_ALGORITHM: str = getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MINUTES: int = int(getenv("JWT_EXPIRE_MINUTES", "1440"))
    BCRYPT_ROUNDS: int = int(getenv("BCRYPT_ROUNDS", "12"))

    # S3-compatible object storage
    S3_ENDPOINT_URL: str = getenv("S3_ENDPOINT_URL", "http://localhost:9000")
    S3_BUCKET_NAME: str = getenv("S3_BUCKET_NAME", "uploads")
    S3_REGION: str = getenv("S3_REGION", "us-east-1")
    S3_ACCESS_KEY: str = getenv("S3_ACCESS_KEY")
    S3_SECRET_KEY: str = getenv("S3_SECRET_KEY")
    MAX_UPLOAD_BYTES: int = int(getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

    LOG_LEVEL: str = getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = getenv("LOG_FILE")

    APP_PORT: int = int(getenv("APP_PORT", "8000"))

    def validate(self) -> None:
        """Checks required environment variables for production deployments."""
        if self.APP_ENV != "production":
            return
        required_vars = {
            "JWT_SECRET": getenv("JWT_SECRET"),
            "S3_ACCESS_KEY": self.S3_ACCESS_KEY,
            "S3_SECRET_KEY": self.S3_SECRET_KEY,
        }
        missing_vars = [key for key, value in required_vars.items() if not value]
        if missing_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")

settings = Config()
settings.validate()
