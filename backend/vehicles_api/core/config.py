from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./vehicles.db"

    # Collaborator services
    PRICING_ENDPOINT: str = "http://localhost:8082"
    MAPS_ENDPOINT: str = "http://localhost:9191"
    REQUEST_TIMEOUT_SECONDS: float = 5.0

    LOG_LEVEL: str = "INFO"

    class Config:
        # This tells Pydantic to load the variables from a .env file
        env_file = ".env"

# Create a single settings instance to be used across the application
settings = Settings()
