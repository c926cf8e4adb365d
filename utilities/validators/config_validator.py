from typing import List
from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

class MonitoringConfig(BaseSettings):
    """Monitoring configuration with defaults"""
    model_config = ConfigDict(
        extra="allow",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        env_prefix="",
        env_nested_delimiter="__"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_DIR: str = Field(
        default="logs",
        description="Directory for log files"
    )
    METRICS_DIR: str = Field(
        default="metrics",
        description="Directory for metrics files"
    )
    ENABLE_METRICS: bool = Field(
        default=False,
        description="Enable system metrics collection"
    )
    METRICS_INTERVAL: int = Field(
        default=60,
        description="Metrics collection interval in seconds"
    )

    @field_validator('LOG_LEVEL')
    def validate_log_level(cls, v):
        if v.upper() not in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']:
            raise ValueError('LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL')
        return v.upper()

    @field_validator('METRICS_INTERVAL')
    def validate_metrics_interval(cls, v):
        if v < 1:
            raise ValueError('Metrics interval must be at least 1 second')
        return v

class ClassificationConfig(BaseSettings):
    """Exercise classification configuration with defaults"""
    model_config = ConfigDict(
        extra="allow",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        env_prefix="",
        env_nested_delimiter="__"
    )
    VISIBILITY_THRESHOLD: float = Field(
        default=0.5,
        description="Minimum joint visibility accepted by every classifier"
    )
    DEFAULT_EXERCISE: str = Field(
        default="pushup",
        description="Exercise selected when a session starts without one"
    )
    TARGET_FPS: float = Field(
        default=30.0,
        description="Maximum frames classified per second, 0 disables frame dropping"
    )
    MAX_FRAMES_PER_SESSION: int = Field(
        default=54000,
        description="Frames accepted before a session is closed"
    )

    @field_validator('VISIBILITY_THRESHOLD')
    def validate_visibility_threshold(cls, v):
        if v < 0 or v > 1:
            raise ValueError('Visibility threshold must be between 0 and 1')
        return v

    @field_validator('TARGET_FPS')
    def validate_target_fps(cls, v):
        if v < 0:
            raise ValueError('Target FPS must not be negative')
        return v

    @field_validator('MAX_FRAMES_PER_SESSION')
    def validate_max_frames(cls, v):
        if v < 1:
            raise ValueError('A session must accept at least one frame')
        return v

class AppConfig(BaseSettings):
    """Application configuration with defaults and environment variable support"""
    # Basic Settings
    model_config = ConfigDict(
        extra="allow",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        env_nested_delimiter="__"
    )
    APP_NAME: str = Field(
        default="repcount",
        description="Application name"
    )
    VERSION: str = Field(
        default="1.0.0",
        description="Application version"
    )
    ENV: str = Field(
        default="development",
        description="Environment (development, testing, production)"
    )
    DEBUG: bool = Field(
        default=False,
        description="Debug mode"
    )
    API_PREFIX: str = Field(
        default="/api",
        description="API prefix"
    )

    # Component Configurations
    MONITORING: MonitoringConfig = Field(
        default_factory=MonitoringConfig,
        description="Monitoring configuration"
    )
    CLASSIFICATION: ClassificationConfig = Field(
        default_factory=ClassificationConfig,
        description="Exercise classification configuration"
    )

    # Server Settings
    HOST: str = Field(
        default="127.0.0.1",
        description="Server host"
    )
    PORT: int = Field(
        default=8000,
        description="Server port"
    )

    # CORS Settings
    ALLOWED_ORIGINS: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    ALLOWED_METHODS: List[str] = Field(
        default=["*"],
        description="Allowed CORS methods"
    )
    ALLOWED_HEADERS: List[str] = Field(
        default=["*"],
        description="Allowed CORS headers"
    )

    @field_validator('ENV')
    def validate_env(cls, v):
        if v not in ['development', 'testing', 'production']:
            raise ValueError('ENV must be one of: development, testing, production')
        return v
