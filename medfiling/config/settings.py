from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 3000

    pdf_engine: str = "pdfplumber"
    max_upload_bytes: int = 10 * 1024 * 1024
    temp_dir: str | None = None

    extraction_provider: str = "gemini"

    extraction_gemini_api_key: str = ""
    extraction_gemini_model_name: str = "gemini-1.5-flash"
    extraction_gemini_timeout_seconds: int = 30

    extraction_openai_api_key: str = ""
    extraction_openai_model_name: str = "gpt-4o-mini"
    extraction_openai_timeout_seconds: int = 30
    extraction_openai_temperature: float = 0.0

    extraction_openai_compatible_base_url: str = ""
    extraction_openai_compatible_api_key: str = ""
    extraction_openai_compatible_model_name: str = ""
    extraction_openai_compatible_timeout_seconds: int = 30

    extraction_openrouter_api_key: str = ""
    extraction_openrouter_model_name: str = ""
    extraction_openrouter_timeout_seconds: int = 30

    extraction_groq_api_key: str = ""
    extraction_groq_model_name: str = ""
    extraction_groq_timeout_seconds: int = 30

    extraction_together_api_key: str = ""
    extraction_together_model_name: str = ""
    extraction_together_timeout_seconds: int = 30

    extraction_deepseek_api_key: str = ""
    extraction_deepseek_model_name: str = ""
    extraction_deepseek_timeout_seconds: int = 30

    extraction_ollama_api_key: str = ""
    extraction_ollama_model_name: str = ""
    extraction_ollama_timeout_seconds: int = 60

    api_base_url: str = "http://localhost:3000"
    upload_timeout_seconds: float = 60.0
    extract_timeout_seconds: float = 60.0
    submit_timeout_seconds: float = 15.0
