# DEPENDENCIES
from .data_models import RiskReport
from .data_models import ClauseMatch
from .data_models import SummaryResult
from .risk_analyzer import RiskAnalyzer
from .data_models import AnalysisResult
from .summary_generator import Summarizer
from .data_models import BatchItemResult
from .clause_extractor import ClauseDetector
from .document_analyzer import DocumentAnalyzer
from .summary_generator import PlainLanguageRewriter
from .contract_classifier import DocumentTypeClassifier


__all__ = ['RiskReport',
           'Summarizer',
           'ClauseMatch',
           'RiskAnalyzer',
           'SummaryResult',
           'AnalysisResult',
           'ClauseDetector',
           'BatchItemResult',
           'DocumentAnalyzer',
           'PlainLanguageRewriter',
           'DocumentTypeClassifier',
          ]
