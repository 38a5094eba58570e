# DEPENDENCIES
import json
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from dataclasses import field
from dataclasses import dataclass

from config.analysis_rules import RiskLevel
from utils.text_processor import Sentence
from config.analysis_rules import DocumentType
from config.analysis_rules import ClauseCategory


@dataclass(frozen = True)
class ClauseMatch:
    """
    One sentence matched into one clause category
    """
    category : ClauseCategory
    content  : str
    position : int              # 1-based index in the filtered sentence sequence
    keywords : List[str] = field(default_factory = list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"type"     : self.category.label,
                "category" : self.category.value,
                "content"  : self.content,
                "position" : self.position,
                "keywords" : list(self.keywords),
               }


@dataclass(frozen = True)
class RiskFinding:
    """
    High or medium risk finding
    """
    type           : str
    description    : str
    severity       : str
    recommendation : str

    def to_dict(self) -> Dict[str, Any]:
        return {"type"           : self.type,
                "description"    : self.description,
                "severity"       : self.severity,
                "recommendation" : self.recommendation,
               }


@dataclass(frozen = True)
class ComplianceGap:
    """
    Missing regulatory language
    """
    type           : str
    description    : str
    regulation     : str
    recommendation : str

    def to_dict(self) -> Dict[str, Any]:
        return {"type"           : self.type,
                "description"    : self.description,
                "regulation"     : self.regulation,
                "recommendation" : self.recommendation,
               }


@dataclass(frozen = True)
class UnfairTerm:
    """
    Potentially one-sided or unenforceable term
    """
    type           : str
    description    : str
    impact         : str
    recommendation : str

    def to_dict(self) -> Dict[str, Any]:
        return {"type"           : self.type,
                "description"    : self.description,
                "impact"         : self.impact,
                "recommendation" : self.recommendation,
               }


@dataclass(frozen = True)
class RiskScore:
    """
    Weighted risk score derived from finding counts
    """
    score        : int
    level        : RiskLevel
    total_issues : int
    breakdown    : Dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        return {"score"        : self.score,
                "level"        : self.level.value,
                "total_issues" : self.total_issues,
                "breakdown"    : dict(self.breakdown),
               }


@dataclass(frozen = True)
class RiskReport:
    """
    All four risk classes plus the aggregated score
    """
    high_risks      : List[RiskFinding]
    medium_risks    : List[RiskFinding]
    compliance_gaps : List[ComplianceGap]
    unfair_terms    : List[UnfairTerm]
    risk_score      : RiskScore

    def to_dict(self) -> Dict[str, Any]:
        return {"high_risks"      : [risk.to_dict() for risk in self.high_risks],
                "medium_risks"    : [risk.to_dict() for risk in self.medium_risks],
                "compliance_gaps" : [gap.to_dict() for gap in self.compliance_gaps],
                "unfair_terms"    : [term.to_dict() for term in self.unfair_terms],
                "risk_score"      : self.risk_score.to_dict(),
               }


@dataclass(frozen = True)
class SummaryResult:
    """
    Plain-language summary with key points and compression ratio
    """
    plain_text         : str
    key_points         : List[str]
    summary_ratio      : float
    selected_sentences : List[str] = field(default_factory = list)

    def to_dict(self) -> Dict[str, Any]:
        return {"plain_text"         : self.plain_text,
                "key_points"         : list(self.key_points),
                "summary_ratio"      : self.summary_ratio,
                "selected_sentences" : list(self.selected_sentences),
               }


@dataclass(frozen = True)
class AnalysisResult:
    """
    Unified result of one document analysis
    """
    plain_text : str
    key_points : List[str]
    clauses    : Dict[ClauseCategory, List[ClauseMatch]]
    risks      : RiskReport
    metadata   : Dict[str, Any]

    @property
    def document_type(self) -> DocumentType:
        return DocumentType(self.metadata["document_type"])


    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"plain_text" : self.plain_text,
                "key_points" : list(self.key_points),
                "clauses"    : {category.value : [match.to_dict() for match in matches] for category, matches in self.clauses.items()},
                "risks"      : self.risks.to_dict(),
                "metadata"   : dict(self.metadata),
               }


    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent = indent, ensure_ascii = False, default = str)


@dataclass
class BatchItemResult:
    """
    Outcome of one document in a batch run
    """
    index   : int
    success : bool
    result  : Optional[AnalysisResult]  = None
    error   : Optional[Dict[str, Any]]  = None
    source  : Optional[str]             = None

    def to_dict(self) -> Dict[str, Any]:
        return {"index"   : self.index,
                "success" : self.success,
                "source"  : self.source,
                "result"  : self.result.to_dict() if self.result else None,
                "error"   : self.error,
               }


__all__ = ['Sentence',
           'RiskScore',
           'UnfairTerm',
           'RiskReport',
           'ClauseMatch',
           'RiskFinding',
           'ComplianceGap',
           'SummaryResult',
           'AnalysisResult',
           'BatchItemResult',
          ]
