class DiagnosisError(Exception):
    """Base class for errors raised by the assessment wizard."""


class FormDataError(DiagnosisError, ValueError):
    """A patch named an unknown field or carried a value of the wrong type."""


class CompletionError(DiagnosisError):
    """The completion provider could not produce a response."""


class AnalysisError(DiagnosisError):
    """An AI request or its response parsing failed. Retrying is safe."""

    retryable = True


class InvalidSubjectError(AnalysisError):
    """The AI reported that the media does not show what was asked for."""

    def __init__(self, message: str, observation: str = ""):
        super().__init__(message)
        self.observation = observation


class PermissionDeniedError(DiagnosisError):
    """Camera, microphone or storage access was refused by the user."""


class CaptureError(DiagnosisError):
    """The capture collaborator failed before producing media."""


class StepBusyError(DiagnosisError):
    """A capture was requested while a previous request is still in flight."""


class PersistenceError(DiagnosisError):
    """The report store rejected or could not receive a write."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code


class AuthSessionError(PersistenceError):
    """The report store refused the session credentials."""
