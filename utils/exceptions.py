# DEPENDENCIES
from typing import Any
from typing import Dict
from dataclasses import field
from dataclasses import dataclass


@dataclass
class AnalyzerError(Exception):
    """
    Base exception for document analysis errors

    Attributes:
    -----------
        message { str }  : Human-readable error description

        details { dict } : Additional context for logging / serialization
    """
    message : str
    details : Dict[str, Any] = field(default_factory = dict)

    def __post_init__(self):
        if self.details is None:
            self.details = dict()

        super().__init__(self.message)


    def __str__(self) -> str:
        return self.message


    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for logging/serialization
        """
        return {"error_type" : self.__class__.__name__,
                "message"    : self.message,
                "details"    : self.details,
               }


@dataclass
class InvalidInputError(AnalyzerError):
    """
    Input text is missing or is not a string
    """


@dataclass
class ConfigurationError(AnalyzerError):
    """
    Analysis options are malformed or reference an unsupported language
    """


@dataclass
class DocumentNotFoundError(AnalyzerError):
    """
    Source file does not exist
    """


@dataclass
class UnsupportedFormatError(AnalyzerError):
    """
    Source file extension cannot be read as plain text
    """


@dataclass
class DocumentTooLargeError(AnalyzerError):
    """
    Source file exceeds the configured size limit
    """
