from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Support Request Builder"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3005

    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # AWS Support JSON protocol
    namespace: str = "AWSSupport"
    api_version: str = "20130415"
    service: str = "support"
    target_header: str = "x-amz-target"
    content_type: str = "application/x-amz-json-1.1"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def target_prefix(self) -> str:
        return f"{self.namespace}_{self.api_version}"


settings = Settings()
