from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List

class Settings(BaseSettings):
    # App Info
    app_name: str = "Frescos WMS API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Database
    database_url: str = "sqlite:///./warehouse.db"
    
    # CORS
    allowed_origins: List[str] = ["http://localhost:3000"]
    
    # Reglas de inventario
    min_shelf_life_days: int = Field(
        default=21,
        description="Días de vida útil que un lote debe superar para ser despachado"
    )
    
    # Paginación
    default_page_size: int = 20
    max_page_size: int = 100
    
    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    
    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
