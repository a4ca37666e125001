from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    docx_engine: str = "python_docx"

    analyzer_provider: str = "gemini"
    analyzer_temperature: float = 0.1

    analyzer_openai_api_key: str = ""
    analyzer_openai_model_name: str = "gpt-4o-mini"
    analyzer_openai_timeout_seconds: int = 60

    analyzer_gemini_api_key: str = ""
    analyzer_gemini_model_name: str = "gemini-2.5-pro"
    analyzer_gemini_timeout_seconds: int = 60

    analyzer_openai_compatible_base_url: str = ""
    analyzer_openai_compatible_api_key: str = ""
    analyzer_openai_compatible_model_name: str = ""
    analyzer_openai_compatible_timeout_seconds: int = 60

    analyzer_openrouter_api_key: str = ""
    analyzer_openrouter_model_name: str = ""
    analyzer_openrouter_timeout_seconds: int = 60

    analyzer_groq_api_key: str = ""
    analyzer_groq_model_name: str = ""
    analyzer_groq_timeout_seconds: int = 60

    analyzer_together_api_key: str = ""
    analyzer_together_model_name: str = ""
    analyzer_together_timeout_seconds: int = 60

    analyzer_deepseek_api_key: str = ""
    analyzer_deepseek_model_name: str = ""
    analyzer_deepseek_timeout_seconds: int = 60

    analyzer_ollama_api_key: str = "ollama"
    analyzer_ollama_model_name: str = ""
    analyzer_ollama_timeout_seconds: int = 120
