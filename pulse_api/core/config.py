from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Pulsechain Price API"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    # Segundos por llamada HTTP al nodo RPC
    RPC_TIMEOUT: float = 30.0
    LOG_LEVEL: str = "INFO"

settings = Settings()
