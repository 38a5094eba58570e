# DEPENDENCIES
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings: primary configuration source, overridable through LEGAL_ANALYZER_* environment variables
    """
    model_config               = SettingsConfigDict(env_prefix        = "LEGAL_ANALYZER_",
                                                    env_file          = ".env",
                                                    env_file_encoding = "utf-8",
                                                    case_sensitive    = True,
                                                    extra             = "ignore",
                                                   )

    # Application Info
    APP_NAME                   : str   = "Legal Document Analyzer"
    APP_VERSION                : str   = "1.0.0"

    # Logging Settings
    LOG_DIR                    : Path  = Path("logs")
    LOG_LEVEL                  : str   = "INFO"
    LOG_FORMAT                 : str   = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Language Settings
    DEFAULT_LANGUAGE           : str   = "en"
    SUPPORTED_LANGUAGES        : list  = ["en", "tr", "de", "fr", "es", "it"]

    # Analysis Defaults
    MAX_SENTENCES              : int   = Field(default = 5, ge = 1)
    MIN_SENTENCE_LENGTH        : int   = Field(default = 20, ge = 0)
    CLAUSE_MIN_SENTENCE_LENGTH : int   = Field(default = 20, ge = 0)

    # Concurrency Settings
    PARALLEL_STAGES            : bool  = True
    MAX_WORKERS                : int   = Field(default = 4, ge = 1)

    # File Input Settings
    MAX_FILE_SIZE              : int   = 50 * 1024 * 1024  # 50 MB
    ALLOWED_EXTENSIONS         : list  = [".txt", ".text", ".md"]

    # Cache Settings
    ENABLE_CACHE               : bool  = False
    CACHE_DIR                  : Path  = Path("cache/analysis")
    CACHE_TTL                  : int   = 24 * 60 * 60  # 24 hours


# Global settings instance
settings = Settings()
