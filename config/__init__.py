# DEPENDENCIES
from .settings import settings
from .analysis_rules import RiskLevel
from .analysis_rules import DocumentType
from .analysis_rules import AnalysisRules
from .analysis_rules import ClauseCategory
from .analysis_options import AnalysisOptions


__all__ = ['settings',
           'RiskLevel',
           'DocumentType',
           'AnalysisRules',
           'ClauseCategory',
           'AnalysisOptions',
          ]
