# DEPENDENCIES
from typing import Any
from typing import List
from typing import Union
from typing import Mapping
from typing import Optional

from utils.logger import log_info
from utils.logger import DocumentAnalyzerLogger
from utils.validators import InputValidator
from services.data_models import SummaryResult
from utils.text_processor import SentenceSegmenter
from utils.text_processor import SegmentationPolicy
from config.analysis_rules import AnalysisRules
from config.analysis_options import AnalysisOptions


class PlainLanguageRewriter:
    """
    Rule-based legal-to-plain English rewriting
    """
    @staticmethod
    def introduction(sentences: List[str]) -> str:
        """
        Pick the fixed introductory sentence matching the document context of the given sentences
        """
        combined_text = " ".join(sentences).lower()

        for pattern, introduction in AnalysisRules.CONTEXT_INTRODUCTIONS:
            if pattern.search(combined_text):
                return introduction

        return AnalysisRules.GENERIC_INTRODUCTION


    @staticmethod
    def simplify(sentence: str) -> str:
        """
        Apply the ordered phrase substitutions, then drop filler words
        """
        simplified = sentence

        for pattern, replacement in AnalysisRules.PLAIN_LANGUAGE_SUBSTITUTIONS:
            simplified = pattern.sub(replacement, simplified)

        simplified = AnalysisRules.FILLER_WORDS_PATTERN.sub('', simplified)

        return simplified.strip()



class Summarizer:
    """
    Extractive summariser: scores sentences by legal salience, keeps the top ones and rewrites them in plain language

    Scoring (all checks case-insensitive presence tests, bonuses add up):
    - +2.0 per focus keyword
    - +1.5 per legal action word
    - +1.0 per important legal phrase
    - -0.5 for sentences longer than 200 characters
    - +1.0 for a duration ("30 days"), +0.5 for an amount or percentage
    """
    def __init__(self, options: Optional[Union[AnalysisOptions, Mapping[str, Any]]] = None):
        """
        Arguments:
        ----------
            options { AnalysisOptions | dict } : max_sentences, min_sentence_length, focus_keywords
        """
        self.options   = InputValidator.validate_options(options)
        self.rewriter  = PlainLanguageRewriter()
        self.segmenter = SentenceSegmenter(policy              = SegmentationPolicy.STRICT,
                                           min_sentence_length = self.options.min_sentence_length,
                                          )


    @DocumentAnalyzerLogger.log_execution_time("summarize")
    def summarize(self, text: str, options: Optional[Union[AnalysisOptions, Mapping[str, Any]]] = None) -> SummaryResult:
        """
        Summarise a document

        Arguments:
        ----------
            text    { str }             : Document text

            options { AnalysisOptions } : Per-call override of the options given at construction

        Returns:
        --------
            { SummaryResult } : Plain text, up to five key points and the compression ratio
        """
        InputValidator.validate_text(text)

        if options is not None:
            return Summarizer(options = options)._summarize(text)

        return self._summarize(text)


    def _summarize(self, text: str) -> SummaryResult:
        sentences     = self.segmenter.segment_texts(text)
        key_sentences = self.select_key_sentences(sentences)

        result        = SummaryResult(plain_text         = self.build_plain_text(key_sentences),
                                      key_points         = self.extract_key_points(sentences),
                                      summary_ratio      = self.calculate_summary_ratio(sentences, key_sentences),
                                      selected_sentences = key_sentences,
                                     )

        log_info("Summary generated",
                 sentence_count = len(sentences),
                 selected       = len(key_sentences),
                 key_points     = len(result.key_points),
                 summary_ratio  = result.summary_ratio,
                )

        return result


    def score_sentence(self, sentence: str) -> float:
        """
        Legal salience score of a single sentence
        """
        score          = 0.0
        sentence_lower = sentence.lower()

        for keyword in self.options.focus_keywords:
            if keyword in sentence_lower:
                score += AnalysisRules.FOCUS_KEYWORD_WEIGHT

        for action in AnalysisRules.LEGAL_ACTION_WORDS:
            if action in sentence_lower:
                score += AnalysisRules.LEGAL_ACTION_WEIGHT

        for phrase in AnalysisRules.IMPORTANT_PHRASES:
            if phrase in sentence_lower:
                score += AnalysisRules.IMPORTANT_PHRASE_WEIGHT

        # Very long sentences are usually boilerplate
        if (len(sentence) > AnalysisRules.LONG_SENTENCE_LENGTH):
            score -= AnalysisRules.LONG_SENTENCE_PENALTY

        if AnalysisRules.DURATION_PATTERN.search(sentence):
            score += AnalysisRules.DURATION_BONUS

        if AnalysisRules.AMOUNT_PATTERN.search(sentence):
            score += AnalysisRules.AMOUNT_BONUS

        return score


    def select_key_sentences(self, sentences: List[str]) -> List[str]:
        """
        Top `max_sentences` by score; sorted() is stable so ties keep document order
        """
        ranked = sorted(sentences, key = lambda sentence: -self.score_sentence(sentence))

        return ranked[:self.options.max_sentences]


    def build_plain_text(self, key_sentences: List[str]) -> str:
        """
        Introductory sentence followed by each selected sentence in plain language

        With nothing selected the summary is empty rather than the generic introduction alone, so an
        empty document yields empty text
        """
        if not key_sentences:
            return ""

        summary_parts = [self.rewriter.introduction(key_sentences)]

        for sentence in key_sentences:
            plain_sentence = self.rewriter.simplify(sentence)

            if plain_sentence:
                summary_parts.append(plain_sentence)

        return " ".join(summary_parts)


    @staticmethod
    def extract_key_points(sentences: List[str]) -> List[str]:
        """
        Fixed-text points for duration, payment, termination, liability and confidentiality signals

        Scans every filtered sentence; points are deduplicated in first-seen order and capped at five
        """
        points = list()

        for sentence in sentences:
            sentence_lower = sentence.lower()
            duration       = AnalysisRules.KEY_POINT_DURATION.search(sentence)

            if duration:
                points.append(f"Duration: {duration.group(0)}")

            if AnalysisRules.KEY_POINT_PAYMENT.search(sentence):
                points.append(AnalysisRules.PAYMENT_KEY_POINT)

            for substrings, point in AnalysisRules.KEY_POINT_SUBSTRINGS:
                if any(substring in sentence_lower for substring in substrings):
                    points.append(point)

        unique_points = list(dict.fromkeys(points))

        return unique_points[:AnalysisRules.MAX_KEY_POINTS]


    @staticmethod
    def calculate_summary_ratio(sentences: List[str], key_sentences: List[str]) -> float:
        """
        Summary length as a percentage of the filtered text length, two decimals
        """
        original_length = len(" ".join(sentences))
        summary_length  = len(" ".join(key_sentences))

        if (original_length == 0):
            return 0.0

        return round(summary_length / original_length * 100, 2)
