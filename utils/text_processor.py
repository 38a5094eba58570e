# DEPENDENCIES
import re
from enum import Enum
from typing import List
from typing import Dict
from typing import Pattern
from dataclasses import dataclass

from utils.validators import InputValidator


@dataclass(frozen = True)
class Sentence:
    """
    A cleaned sentence and its 1-based position in the filtered sequence
    """
    content  : str
    position : int

    def to_dict(self) -> Dict:
        return {"content"  : self.content,
                "position" : self.position,
               }


class SegmentationPolicy(Enum):
    """
    Sentence boundary rules

    - STRICT : terminal punctuation followed by whitespace and an uppercase letter
    - LOOSE  : terminal punctuation followed by any whitespace
    """
    STRICT = "strict"
    LOOSE  = "loose"


BOUNDARY_PATTERNS = {SegmentationPolicy.STRICT : re.compile(r'(?<=[.!?])\s+(?=[A-Z])'),
                     SegmentationPolicy.LOOSE  : re.compile(r'(?<=[.!?])\s+'),
                    }

WHITESPACE_RUN    = re.compile(r'\s+')


class SentenceSegmenter:
    """
    Splits raw text into filtered, 1-based positioned sentences
    """
    def __init__(self, policy: SegmentationPolicy = SegmentationPolicy.LOOSE, min_sentence_length: int = 20):
        """
        Arguments:
        ----------
            policy              { SegmentationPolicy } : Boundary rule to split on

            min_sentence_length        { int }         : Sentences shorter than this (after whitespace clean-up) are dropped
        """
        self.policy              = policy
        self.min_sentence_length = min_sentence_length
        self._boundary           = BOUNDARY_PATTERNS[policy]


    @property
    def boundary(self) -> Pattern:
        return self._boundary


    def segment(self, text: str) -> List[Sentence]:
        """
        Split text into sentences

        Arguments:
        ----------
            text { str } : Raw document text

        Returns:
        --------
               { list }  : Sentence objects, positions counted over the filtered sequence
        """
        InputValidator.validate_text(text)

        sentences = list()

        for chunk in self._boundary.split(text):
            content = TextProcessor.collapse_whitespace(chunk)

            if (len(content) < self.min_sentence_length) or not content:
                continue

            sentences.append(Sentence(content  = content,
                                      position = len(sentences) + 1,
                                     ))

        return sentences


    def segment_texts(self, text: str) -> List[str]:
        """
        Same as segment() but returns the sentence strings only
        """
        return [sentence.content for sentence in self.segment(text)]



class TextProcessor:
    """
    Text processing and normalization utilities
    """
    @staticmethod
    def collapse_whitespace(text: str) -> str:
        """
        Replace whitespace runs with a single space and trim
        """
        return WHITESPACE_RUN.sub(' ', text).strip()


    @staticmethod
    def normalize_text(text: str, lowercase: bool = True) -> str:
        """
        Normalize text for analysis

        Arguments:
        ----------
            text      { str }  : Input text

            lowercase { bool } : Convert to lowercase

        Returns:
        --------
                  { str }      : Normalized text
        """
        if lowercase:
            text = text.lower()

        return TextProcessor.collapse_whitespace(text)


    @staticmethod
    def count_words(text: str) -> int:
        """
        Count words in text
        """
        return len(text.split())
