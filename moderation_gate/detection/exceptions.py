class DetectionError(Exception):
    """Raised when a detection adapter fails to load its model or run inference."""
