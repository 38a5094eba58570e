# DEPENDENCIES
from typing import List
from typing import Tuple

from utils.logger import log_info
from config.analysis_rules import RiskRule
from config.analysis_rules import RiskLevel
from services.data_models import RiskScore
from services.data_models import RiskReport
from services.data_models import UnfairTerm
from utils.logger import DocumentAnalyzerLogger
from utils.validators import InputValidator
from services.data_models import RiskFinding
from services.data_models import ComplianceGap
from config.analysis_rules import AnalysisRules


class RiskAnalyzer:
    """
    Rule-based risk detection over the full lower-cased text

    Four independent detectors (high risks, medium risks, compliance gaps, unfair terms) each apply
    their RiskRule table; the risk score is derived from the four finding counts:

        score = 10 * high + 5 * medium + 7 * compliance_gaps + 6 * unfair_terms

    Levels: 0-10 low, 11-25 medium, 26-50 high, above 50 critical
    """
    def __init__(self, high_risk_rules: Tuple[RiskRule, ...] = AnalysisRules.HIGH_RISK_RULES, medium_risk_rules: Tuple[RiskRule, ...] = AnalysisRules.MEDIUM_RISK_RULES,
                 compliance_rules: Tuple[RiskRule, ...] = AnalysisRules.COMPLIANCE_RULES, unfair_term_rules: Tuple[RiskRule, ...] = AnalysisRules.UNFAIR_TERM_RULES):
        self.high_risk_rules   = high_risk_rules
        self.medium_risk_rules = medium_risk_rules
        self.compliance_rules  = compliance_rules
        self.unfair_term_rules = unfair_term_rules


    @DocumentAnalyzerLogger.log_execution_time("analyze_risks")
    def analyze(self, text: str) -> RiskReport:
        """
        Run all risk detectors

        Arguments:
        ----------
            text { str }   : Document text

        Returns:
        --------
            { RiskReport } : Findings per risk class plus the aggregated risk score
        """
        high_risks      = self.detect_high_risks(text)
        medium_risks    = self.detect_medium_risks(text)
        compliance_gaps = self.detect_compliance_gaps(text)
        unfair_terms    = self.detect_unfair_terms(text)

        risk_score      = self.calculate_risk_score(high_risks      = len(high_risks),
                                                    medium_risks    = len(medium_risks),
                                                    compliance_gaps = len(compliance_gaps),
                                                    unfair_terms    = len(unfair_terms),
                                                   )

        log_info("Risk analysis complete",
                 score        = risk_score.score,
                 level        = risk_score.level.value,
                 total_issues = risk_score.total_issues,
                )

        return RiskReport(high_risks      = high_risks,
                          medium_risks    = medium_risks,
                          compliance_gaps = compliance_gaps,
                          unfair_terms    = unfair_terms,
                          risk_score      = risk_score,
                         )


    def detect_high_risks(self, text: str) -> List[RiskFinding]:
        """
        Unlimited liability, broad indemnification, auto-renewal without notice, exclusive dealing
        """
        return [RiskFinding(type           = rule.type,
                            description    = rule.description,
                            severity       = rule.severity,
                            recommendation = rule.recommendation,
                           ) for rule in self._matching_rules(text, self.high_risk_rules)]


    def detect_medium_risks(self, text: str) -> List[RiskFinding]:
        """
        Vague termination, broad confidentiality, assignment restrictions, foreign governing law
        """
        return [RiskFinding(type           = rule.type,
                            description    = rule.description,
                            severity       = rule.severity,
                            recommendation = rule.recommendation,
                           ) for rule in self._matching_rules(text, self.medium_risk_rules)]


    def detect_compliance_gaps(self, text: str) -> List[ComplianceGap]:
        """
        GDPR reference, data subject rights, KVKK and employment protections
        """
        return [ComplianceGap(type           = rule.type,
                              description    = rule.description,
                              regulation     = rule.regulation,
                              recommendation = rule.recommendation,
                             ) for rule in self._matching_rules(text, self.compliance_rules)]


    def detect_unfair_terms(self, text: str) -> List[UnfairTerm]:
        """
        One-sided termination, penalty clauses, broad non-compete, unilateral modification
        """
        return [UnfairTerm(type           = rule.type,
                           description    = rule.description,
                           impact         = rule.impact,
                           recommendation = rule.recommendation,
                          ) for rule in self._matching_rules(text, self.unfair_term_rules)]


    @staticmethod
    def calculate_risk_score(high_risks: int, medium_risks: int, compliance_gaps: int, unfair_terms: int) -> RiskScore:
        """
        Weighted score and level from finding counts
        """
        breakdown = {"high_risks"      : high_risks,
                     "medium_risks"    : medium_risks,
                     "compliance_gaps" : compliance_gaps,
                     "unfair_terms"    : unfair_terms,
                    }

        score     = sum(AnalysisRules.RISK_WEIGHTS[name] * count for name, count in breakdown.items())

        return RiskScore(score        = score,
                         level        = RiskAnalyzer.score_to_level(score),
                         total_issues = sum(breakdown.values()),
                         breakdown    = breakdown,
                        )


    @staticmethod
    def score_to_level(score: int) -> RiskLevel:
        """
        Map a score to its level band
        """
        for upper_bound, level in AnalysisRules.RISK_LEVEL_BANDS:
            if (score <= upper_bound):
                return level

        return RiskLevel.CRITICAL


    @staticmethod
    def _matching_rules(text: str, rules: Tuple[RiskRule, ...]) -> List[RiskRule]:
        text_lower = InputValidator.validate_text(text).lower()

        return [rule for rule in rules if rule.applies(text_lower)]
