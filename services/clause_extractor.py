# DEPENDENCIES
from typing import Dict
from typing import List
from typing import Tuple
from typing import Pattern
from typing import Optional

from utils.logger import log_info
from services.data_models import ClauseMatch
from utils.logger import DocumentAnalyzerLogger
from utils.text_processor import SentenceSegmenter
from utils.text_processor import SegmentationPolicy
from config.analysis_rules import AnalysisRules
from config.analysis_rules import ClauseCategory


class ClauseDetector:
    """
    Pattern-based detection of the eight standard clause categories

    A sentence contributes at most one match per category (the first pattern of that category that
    matches), but may appear under several categories
    """
    def __init__(self, min_sentence_length: int = 20, clause_patterns: Optional[Tuple[Tuple[ClauseCategory, Tuple[Pattern, ...]], ...]] = None):
        """
        Arguments:
        ----------
            min_sentence_length { int }   : Sentence length filter used before matching

            clause_patterns     { tuple } : (category, patterns) pairs, defaults to AnalysisRules.CLAUSE_PATTERNS
        """
        self.clause_patterns = clause_patterns or AnalysisRules.CLAUSE_PATTERNS
        self.segmenter       = SentenceSegmenter(policy              = SegmentationPolicy.LOOSE,
                                                 min_sentence_length = min_sentence_length,
                                                )


    @DocumentAnalyzerLogger.log_execution_time("detect_clauses")
    def detect(self, text: str) -> Dict[ClauseCategory, List[ClauseMatch]]:
        """
        Detect clause occurrences

        Arguments:
        ----------
            text { str } : Document text

        Returns:
        --------
               { dict }  : Every category mapped to its matches (empty list when nothing matched), first-seen order
        """
        sentences = self.segmenter.segment(text)
        clauses   = {category : list() for category, _ in self.clause_patterns}
        seen      = {category : set() for category, _ in self.clause_patterns}

        for sentence in sentences:
            sentence_lower = sentence.content.lower()

            for category, patterns in self.clause_patterns:
                match = self._match_category(sentence_lower = sentence_lower,
                                             patterns       = patterns,
                                            )

                if match is None:
                    continue

                # Deduplicate by exact original-case content within the category
                if sentence.content in seen[category]:
                    continue

                seen[category].add(sentence.content)
                clauses[category].append(ClauseMatch(category = category,
                                                     content  = sentence.content,
                                                     position = sentence.position,
                                                     keywords = self._extract_keywords(sentence_lower, match),
                                                    ))

        log_info("Clause detection complete",
                 sentence_count = len(sentences),
                 **{category.value : len(matches) for category, matches in clauses.items()}
                )

        return clauses


    @staticmethod
    def _match_category(sentence_lower: str, patterns: Tuple[Pattern, ...]) -> Optional[Pattern]:
        """
        First pattern of the category that matches, or None
        """
        for pattern in patterns:
            if pattern.search(sentence_lower):
                return pattern

        return None


    @staticmethod
    def _extract_keywords(sentence_lower: str, pattern: Pattern) -> List[str]:
        """
        Every literal substring matched by the winning pattern
        """
        keywords = [match.group(0).strip() for match in pattern.finditer(sentence_lower)]

        return [keyword for keyword in keywords if keyword]
