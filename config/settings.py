"""
Settings and configuration management using Pydantic BaseSettings.
All configuration values can be overridden via environment variables.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden by creating a .env file in the project root
    or by setting environment variables with the same names.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ========================================================================
    # SERVER CONFIGURATION
    # ========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # ========================================================================
    # LLM CONFIGURATION
    # ========================================================================
    LLM_PROVIDER: str = "gemini"  # Available: "gemini", "ollama"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 1024

    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TIMEOUT: int = 60

    OLLAMA_MODEL: str = "llama3"
    OLLAMA_BASE_URL: str = "http://localhost:11434"
    OLLAMA_TIMEOUT: int = 120

    # ========================================================================
    # INGESTION CONFIGURATION
    # ========================================================================
    MAX_CONTENT_LENGTH: int = 5000  # Characters kept per document
    MAX_UPLOAD_SIZE_MB: int = 10
    UPLOAD_TMP_DIR: Optional[str] = None  # Parent dir for scoped temp files
    DOCUMENT_STORE_TYPE: str = "memory"

    # ========================================================================
    # RAG CONFIGURATION
    # ========================================================================
    RAG_DEGRADE_ON_ERROR: bool = True  # False: generation failures return 502
    RAG_FALLBACK_MESSAGE: str = (
        "I've analyzed your documents and I'm ready to answer questions. "
        "Please ask me anything about the uploaded content."
    )

    @property
    def max_upload_size_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024


# Singleton instance
settings = Settings()
