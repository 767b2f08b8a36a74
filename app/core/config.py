from pydantic_settings import BaseSettings
from typing import List, Union
import os
import json


class Settings(BaseSettings):
    api_key: str = "my-secret-api-key"
    api_key_header: str = "x-api-key"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    environment: str = "local"
    api_prefix: str = "/api"
    # CORS origins - can be JSON array or comma-separated string
    cors_origins: Union[List[str], str] = ["*"]

    # Product listing
    default_page_size: int = 10
    seed_sample_data: bool = True

    @property
    def docs_enabled(self) -> bool:
        return self.environment == "local"

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list from either a JSON array or a comma-separated string."""
        if isinstance(self.cors_origins, str):
            try:
                origins = json.loads(self.cors_origins)
            except (json.JSONDecodeError, ValueError):
                origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        else:
            origins = self.cors_origins

        return origins if isinstance(origins, list) else [origins]

    def get_public_paths(self) -> List[str]:
        """Paths that are served without the API key."""
        paths = ["/"]
        if self.docs_enabled:
            paths.extend(["/docs", "/docs/oauth2-redirect", "/redoc", "/openapi.json"])
        return paths

    class Config:
        env_file = f"config/{os.getenv('ENV', 'local')}.env"
        case_sensitive = False


settings = Settings()
