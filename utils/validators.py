# DEPENDENCIES
from typing import Any
from typing import Union
from pathlib import Path
from typing import Mapping
from typing import Optional
from pydantic import ValidationError

from config.settings import settings
from utils.exceptions import InvalidInputError
from utils.exceptions import ConfigurationError
from utils.exceptions import DocumentNotFoundError
from utils.exceptions import DocumentTooLargeError
from utils.exceptions import UnsupportedFormatError
from config.analysis_options import AnalysisOptions


class InputValidator:
    """
    Call-time validation for analysis inputs: every check raises a typed error before any work is done
    """
    @staticmethod
    def validate_text(text: Any) -> str:
        """
        Reject anything that is not a string

        Arguments:
        ----------
            text { Any } : Candidate document text

        Returns:
        --------
               { str }   : The same text, unchanged
        """
        if text is None:
            raise InvalidInputError("Document text must not be None")

        if not isinstance(text, str):
            raise InvalidInputError(f"Document text must be a string, got {type(text).__name__}",
                                    details = {"received_type" : type(text).__name__},
                                   )

        return text


    @staticmethod
    def validate_options(options: Optional[Union[AnalysisOptions, Mapping[str, Any]]] = None) -> AnalysisOptions:
        """
        Build validated analysis options

        Arguments:
        ----------
            options { AnalysisOptions | dict | None } : Options to validate, None means defaults

        Returns:
        --------
                   { AnalysisOptions }                : Immutable, fully validated options
        """
        if options is None:
            return AnalysisOptions()

        if isinstance(options, AnalysisOptions):
            return options

        if not isinstance(options, Mapping):
            raise ConfigurationError(f"Options must be a mapping or AnalysisOptions, got {type(options).__name__}")

        try:
            return AnalysisOptions(**options)

        except ValidationError as e:
            errors = [{"field" : ".".join(str(part) for part in error["loc"]), "error" : error["msg"]} for error in e.errors()]

            raise ConfigurationError(f"Invalid analysis options: {'; '.join(item['field'] + ': ' + item['error'] for item in errors)}",
                                     details = {"errors" : errors},
                                    ) from e


    @staticmethod
    def validate_file(file_path: Union[str, Path]) -> Path:
        """
        Check that a file exists, has a plain-text extension and is within the size limit

        Returns:
        --------
            { Path } : Resolved file path
        """
        path = Path(file_path)

        if not path.is_file():
            raise DocumentNotFoundError(f"File not found: {file_path}", details = {"file_path" : str(file_path)})

        if path.suffix.lower() not in settings.ALLOWED_EXTENSIONS:
            raise UnsupportedFormatError(f"Unsupported file format: {path.suffix or '<none>'}",
                                         details = {"file_path"          : str(path),
                                                    "allowed_extensions" : list(settings.ALLOWED_EXTENSIONS),
                                                   },
                                        )

        file_size = path.stat().st_size

        if file_size > settings.MAX_FILE_SIZE:
            raise DocumentTooLargeError(f"File too large ({file_size} bytes, maximum {settings.MAX_FILE_SIZE})",
                                        details = {"file_path" : str(path), "file_size_bytes" : file_size},
                                       )

        return path
