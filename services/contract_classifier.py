# DEPENDENCIES
from typing import Dict
from typing import List
from typing import Tuple

from utils.logger import log_debug
from utils.logger import DocumentAnalyzerLogger
from utils.validators import InputValidator
from config.analysis_rules import DocumentType
from config.analysis_rules import AnalysisRules


class DocumentTypeClassifier:
    """
    Keyword-weighted document type classifier

    Every pattern of a type contributes its weight once if it matches anywhere in the text (presence-only,
    never a match count). `general_contract` starts at a base score of 1, so it wins whenever nothing
    else scores higher; equal scores go to the type declared first in AnalysisRules.DOCUMENT_TYPE_PATTERNS
    """
    def __init__(self, type_patterns = AnalysisRules.DOCUMENT_TYPE_PATTERNS, base_scores = AnalysisRules.DOCUMENT_TYPE_BASE_SCORES):
        self.type_patterns = type_patterns
        self.base_scores   = base_scores


    @DocumentAnalyzerLogger.log_execution_time("classify_document_type")
    def classify(self, text: str) -> DocumentType:
        """
        Classify text into exactly one document type

        Arguments:
        ----------
            text { str }       : Document text

        Returns:
        --------
            { DocumentType }   : Best scoring type, never None
        """
        scores        = self.score_types(text)

        best_type     = DocumentType.GENERAL_CONTRACT
        best_score    = None

        # Strict comparison keeps the first declared type on ties
        for document_type, score in scores.items():
            if (best_score is None) or (score > best_score):
                best_type  = document_type
                best_score = score

        log_debug("Document type classified",
                  document_type = best_type.value,
                  score         = best_score,
                 )

        return best_type


    def score_types(self, text: str) -> Dict[DocumentType, int]:
        """
        Presence-only weighted score for every declared type, in declaration order
        """
        InputValidator.validate_text(text)

        text_lower = text.lower()
        scores     = dict()

        for document_type, weighted_patterns in self.type_patterns:
            score = self.base_scores.get(document_type, 0)

            for pattern, weight in weighted_patterns:
                if pattern.search(text_lower):
                    score += weight

            scores[document_type] = score

        return scores


    def ranked_types(self, text: str, top_n: int = 3) -> List[Tuple[DocumentType, int]]:
        """
        Highest scoring types first, ties kept in declaration order
        """
        scores = self.score_types(text)

        return sorted(scores.items(), key = lambda item: item[1], reverse = True)[:top_n]
