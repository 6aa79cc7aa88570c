import pytest
from pydantic import ValidationError

from moderation_gate.config.settings import Settings


class TestSettingsDefaults:
    def test_default_log_level(self) -> None:
        s = Settings()
        assert s.log_level == "INFO"

    def test_default_detection_engine(self) -> None:
        s = Settings()
        assert s.detection_engine == "yolo"
        assert s.detection_model_path == "yolov8n.pt"

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_storage_backend(self) -> None:
        s = Settings()
        assert s.storage_backend == "s3"

    def test_timeouts_disabled_by_default(self) -> None:
        s = Settings()
        assert s.inference_timeout_seconds is None
        assert s.upload_timeout_seconds is None

    def test_storage_failure_notice_off_by_default(self) -> None:
        s = Settings()
        assert s.notify_on_storage_failure is False


class TestSettingsFromEnv:
    def test_loads_storage_bucket(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_BUCKET", "moderated-uploads")
        s = Settings()
        assert s.storage_bucket == "moderated-uploads"

    def test_loads_aws_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AWS_REGION", "eu-west-1")
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIA")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")
        s = Settings()
        assert s.aws_region == "eu-west-1"
        assert s.aws_access_key_id == "AKIA"
        assert s.aws_secret_access_key == "secret"

    def test_loads_example_labels_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXAMPLE_DETECTION_LABELS", '["car", "tree"]')
        s = Settings()
        assert s.example_detection_labels == ["car", "tree"]

    def test_loads_upload_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UPLOAD_TIMEOUT_SECONDS", "2.5")
        s = Settings()
        assert s.upload_timeout_seconds == 2.5


class TestSettingsValidation:
    def test_invalid_confidence_threshold_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DETECTION_CONFIDENCE_THRESHOLD", "high")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_notify_flag_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOTIFY_ON_STORAGE_FAILURE", "sometimes")
        with pytest.raises(ValidationError):
            Settings()
