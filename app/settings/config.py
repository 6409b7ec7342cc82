from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded with Pydantic Settings"""

    # API settings
    api_host: str = Field(default="0.0.0.0", env="API_HOST")
    api_port: int = Field(default=8000, env="API_PORT")
    api_reload: bool = Field(default=False, env="API_RELOAD")
    debug: bool = Field(default=False, env="DEBUG")

    # Log settings
    log_level: str = Field(default="info", env="LOG_LEVEL")

    # CORS settings
    cors_origins: list[str] = Field(default=["*"], env="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, env="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], env="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], env="CORS_ALLOW_HEADERS")

    # Orbit settings
    orbit_base_radius: float = Field(default=5.0, env="ORBIT_BASE_RADIUS")
    orbit_spacing: float = Field(default=4.0, env="ORBIT_SPACING")
    orbit_base_speed: float = Field(default=0.8, env="ORBIT_BASE_SPEED")
    orbit_step_scale: float = Field(default=0.01, env="ORBIT_STEP_SCALE")

    # Synthesis settings
    companion_time_points_threshold: int = Field(default=5000, env="COMPANION_TIME_POINTS_THRESHOLD")
    transit_flux_std_threshold: float = Field(default=0.01, env="TRANSIT_FLUX_STD_THRESHOLD")
    random_seed: Optional[int] = Field(default=None, env="RANDOM_SEED")
    history_size: int = Field(default=5, env="HISTORY_SIZE")

    # Scene limits
    max_scenes: int = Field(default=100, env="MAX_SCENES")
    max_bodies_per_scene: int = Field(default=32, env="MAX_BODIES_PER_SCENE")
    max_frames_per_tick: int = Field(default=600, env="MAX_FRAMES_PER_TICK")

    # Simulated archive fetch
    archive_fetch_delay: float = Field(default=2.0, env="ARCHIVE_FETCH_DELAY")  # seconds
    archive_fetch_timeout: float = Field(default=10.0, env="ARCHIVE_FETCH_TIMEOUT")  # seconds

    # Development settings
    enable_docs: bool = Field(default=True, env="ENABLE_DOCS")
    enable_redoc: bool = Field(default=True, env="ENABLE_REDOC")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields

    @property
    def is_development(self) -> bool:
        """Check whether the app runs in development mode"""
        return self.debug or self.api_reload

    @property
    def is_production(self) -> bool:
        """Check whether the app runs in production mode"""
        return not self.is_development


    def get_cors_config(self) -> dict:
        """Return CORS configuration"""
        return {
            "allow_origins": self.cors_origins,
            "allow_credentials": self.cors_allow_credentials,
            "allow_methods": self.cors_allow_methods,
            "allow_headers": self.cors_allow_headers,
        }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency to obtain settings"""
    return settings
