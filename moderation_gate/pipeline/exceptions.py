class PipelineError(Exception):
    """Base exception for faults that fail a pipeline run."""


class InvalidInputError(PipelineError):
    """Raised when the selected handle is not a readable binary file."""


class ReadError(PipelineError):
    """Raised when a selected file cannot be read or decoded."""


class ClassificationError(PipelineError):
    """Raised when the detection model cannot be loaded or inference fails."""
