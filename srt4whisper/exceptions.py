"""Custom exception hierarchy for SRT4Whisper."""


class Srt4WhisperError(Exception):
    """Base exception for all SRT4Whisper errors."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        self.message = message
        self.error_code = error_code or "UNKNOWN"
        self.details = details or {}
        self.original_error = original_error

        full_message = f"[{self.error_code}] {message}"
        if details:
            full_message += f"\nDetails: {details}"
        if original_error:
            full_message += f"\nCaused by: {original_error}"

        super().__init__(full_message)

    def to_dict(self):
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ProcessingError(Srt4WhisperError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "PROC_ERR", details, original_error)


class ConfigError(ProcessingError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "CFG_ERR", details, original_error)


class InputError(ProcessingError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "INP_ERR", details, original_error)


class FileReadError(ProcessingError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "READ_ERR", details, original_error)


class FileWriteError(ProcessingError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "WRITE_ERR", details, original_error)


class BatchProcessingError(ProcessingError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "BATCH_ERR", details, original_error)


class BatchCancelledError(BatchProcessingError):
    """Raised when a batch cannot start because no output directory is usable."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "BATCH_CANCEL", details, original_error)
