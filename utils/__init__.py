# DEPENDENCIES
from .exceptions import AnalyzerError
from .result_cache import ResultCache
from .validators import InputValidator
from .text_processor import TextProcessor
from .exceptions import InvalidInputError
from .exceptions import ConfigurationError
from .text_processor import SentenceSegmenter
from .logger import DocumentAnalyzerLogger
from .text_processor import SegmentationPolicy


__all__ = ['ResultCache',
           'AnalyzerError',
           'TextProcessor',
           'InputValidator',
           'InvalidInputError',
           'SentenceSegmenter',
           'ConfigurationError',
           'SegmentationPolicy',
           'DocumentAnalyzerLogger',
          ]
