from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    detection_engine: str = "yolo"
    detection_model_path: str = "yolov8n.pt"
    detection_confidence_threshold: float = 0.5
    detection_device: str | None = None
    example_detection_labels: list[str] = []
    inference_timeout_seconds: float | None = None

    pdf_engine: str = "pdfplumber"

    storage_backend: str = "s3"
    storage_bucket: str = ""
    storage_local_root: str = "data/uploads"
    aws_region: str = ""
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    upload_timeout_seconds: float | None = None
    notify_on_storage_failure: bool = False

    confirmation_mode: str = "console"
