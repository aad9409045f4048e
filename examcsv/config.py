# examcsv/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Конфиг CLI. Сам разбор CSV настроек не читает: всё, что влияет
    на результат, зафиксировано в коде.
    """

    # --------- Input ----------
    max_file_bytes: int = Field(
        default=5 * 1024 * 1024,  # 5 MB, как лимит загрузки CSV
        description="Файлы больше этого размера не разбираем.",
    )

    # --------- Output ----------
    json_indent: int = Field(
        default=2,
        description="Отступ JSON при выводе результата.",
    )

    # --------- Logging ----------
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_file: str = "examcsv.log"
    log_max_bytes: int = 5 * 1024 * 1024  # 5 MB
    log_backup_count: int = 3
    log_console: bool = True
    log_console_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EXAMCSV_",
        extra="ignore",  # лишние переменные окружения игнорируем
    )
