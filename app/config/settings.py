from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_origins: list[str] = ["http://localhost:3000"]

    pdf_engine: str = "pdfplumber"
    ocr_language: str = "eng"
    tesseract_cmd: str = ""

    max_file_size_bytes: int = 10 * 1024 * 1024
    max_batch_files: int = 5
    max_extraction_workers: int = 5
    upload_temp_dir: str = ""

    full_text_limit: int = 4000
    quick_text_limit: int = 2000

    analysis_provider: str = "openai"
    analysis_temperature: float = 0.7
    analysis_timeout_seconds: int = 30

    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = "gpt-4o-mini"

    analysis_openai_compatible_base_url: str = ""
    analysis_openai_compatible_api_key: str = ""
    analysis_openai_compatible_model_name: str = ""

    analysis_openrouter_api_key: str = ""
    analysis_openrouter_model_name: str = ""
    analysis_groq_api_key: str = ""
    analysis_groq_model_name: str = ""
    analysis_together_api_key: str = ""
    analysis_together_model_name: str = ""
    analysis_deepseek_api_key: str = ""
    analysis_deepseek_model_name: str = ""
    analysis_ollama_api_key: str = "ollama"
    analysis_ollama_model_name: str = ""
