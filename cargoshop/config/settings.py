# cargoshop/config/settings.py
from pydantic_settings import BaseSettings
from typing import List, Optional
import os

class Settings(BaseSettings):
    # App Info
    app_name: str = "Cargoshop API"
    version: str = "1.0.0"
    debug: bool = False

    # Document store
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./cargoshop.db")

    # Security
    secret_key: str = os.getenv("SECRET_KEY", "change-in-production")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # CORS
    cors_origins: List[str] = ["*"]

    # Images
    images_dir: str = "public/images"
    public_base_url: str = os.getenv("PUBLIC_BASE_URL", "http://localhost:5000")
    default_product_image: str = "template.png"
    max_image_size: int = 10 * 1024 * 1024
    allowed_image_extensions: set = {"jpg", "jpeg", "png", "gif"}

    # Cloudinary (opcional)
    cloudinary_cloud_name: Optional[str] = None
    cloudinary_api_key: Optional[str] = None
    cloudinary_api_secret: Optional[str] = None
    cloudinary_folder: str = "cargoshop"

    # Pechinchas
    enforce_pechincha_transitions: bool = False

    # Realtime
    broadcast_send_timeout: float = 5.0

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 5000))

    @property
    def database_host(self) -> str:
        """Host do banco, sem credenciais, para os logs"""
        if "@" in self.database_url:
            return self.database_url.split("@")[1]
        return self.database_url

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()
