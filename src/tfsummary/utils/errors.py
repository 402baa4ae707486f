"""Custom exception classes for tfsummary."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure classification surfaced to the operator."""
    INPUT_REQUIRED = "InputRequired"
    NOT_FOUND = "NotFound"
    PERMISSION_DENIED = "PermissionDenied"
    NOT_A_FILE = "NotAFile"
    READ_FAILED = "ReadFailed"
    INVALID_JSON = "InvalidJson"
    INVALID_STRUCTURE = "InvalidStructure"
    CONFIG = "Config"
    REPORT = "Report"


class TFSummaryError(Exception):
    """Base exception for all tfsummary errors."""
    kind: ErrorKind = None

    @property
    def message(self) -> str:
        return str(self)


class InputRequiredError(TFSummaryError):
    """Raised when the plan file path (or another required input) is empty."""
    kind = ErrorKind.INPUT_REQUIRED


class PlanFileNotFoundError(TFSummaryError):
    """Raised when the plan file does not exist."""
    kind = ErrorKind.NOT_FOUND


class PermissionDeniedError(TFSummaryError):
    """Raised when the plan file cannot be accessed due to permissions."""
    kind = ErrorKind.PERMISSION_DENIED


class NotAFileError(TFSummaryError):
    """Raised when the plan path points at a directory or other non-regular file."""
    kind = ErrorKind.NOT_A_FILE


class PlanReadError(TFSummaryError):
    """Raised when the plan file cannot be read for an unclassified reason."""
    kind = ErrorKind.READ_FAILED


class PlanLoadError(TFSummaryError):
    """Raised when Terraform plan JSON cannot be parsed into a Plan."""
    pass


class InvalidJsonError(PlanLoadError):
    """Raised when the plan file is not valid JSON."""
    kind = ErrorKind.INVALID_JSON


class InvalidStructureError(PlanLoadError):
    """Raised when the plan JSON does not have the expected shape."""
    kind = ErrorKind.INVALID_STRUCTURE


class ConfigError(TFSummaryError):
    """Raised when configuration is invalid or missing."""
    kind = ErrorKind.CONFIG


class ReportError(TFSummaryError):
    """Raised when CI report output cannot be written."""
    kind = ErrorKind.REPORT
