# DEPENDENCIES
from typing import List
from typing import Tuple
from pydantic import Field
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import field_validator

from config.settings import settings
from config.analysis_rules import AnalysisRules


class AnalysisOptions(BaseModel):
    """
    Per-call analysis options: immutable, unknown keys are rejected
    """
    model_config        = ConfigDict(extra = "forbid", frozen = True)

    max_sentences       : int             = Field(default_factory = lambda: settings.MAX_SENTENCES, ge = 1)
    min_sentence_length : int             = Field(default_factory = lambda: settings.MIN_SENTENCE_LENGTH, ge = 0)
    focus_keywords      : Tuple[str, ...] = Field(default = AnalysisRules.DEFAULT_FOCUS_KEYWORDS, min_length = 1)
    language            : str             = Field(default_factory = lambda: settings.DEFAULT_LANGUAGE)


    @field_validator("focus_keywords", mode = "before")
    @classmethod
    def check_keywords(cls, value) -> List[str]:
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise ValueError("focus_keywords must be a list of strings")

        keywords = list()

        for keyword in value:
            if not isinstance(keyword, str) or not keyword.strip():
                raise ValueError(f"focus keyword must be a non-empty string, got {keyword!r}")

            keywords.append(keyword.strip().lower())

        return keywords


    @field_validator("language")
    @classmethod
    def check_language(cls, value: str) -> str:
        language = value.strip().lower()

        if language not in settings.SUPPORTED_LANGUAGES:
            raise ValueError(f"Invalid language: {value}. Supported: {', '.join(settings.SUPPORTED_LANGUAGES)}")

        return language
