# DEPENDENCIES
import re
from enum import Enum
from typing import List
from typing import Tuple
from typing import Pattern
from typing import Optional
from dataclasses import dataclass


class DocumentType(str, Enum):
    NDA                   = "nda"
    SERVICE_AGREEMENT     = "service_agreement"
    EMPLOYMENT_CONTRACT   = "employment_contract"
    PRIVACY_POLICY        = "privacy_policy"
    LICENSE_AGREEMENT     = "license_agreement"
    TERMS_OF_USE          = "terms_of_use"
    PURCHASE_AGREEMENT    = "purchase_agreement"
    LEASE_AGREEMENT       = "lease_agreement"
    PARTNERSHIP_AGREEMENT = "partnership_agreement"
    GENERAL_CONTRACT      = "general_contract"


class ClauseCategory(str, Enum):
    DATA_PROCESSING       = "data_processing"
    LIABILITY             = "liability"
    CONFIDENTIALITY       = "confidentiality"
    TERMINATION           = "termination"
    PAYMENT               = "payment"
    INTELLECTUAL_PROPERTY = "intellectual_property"
    DISPUTE_RESOLUTION    = "dispute_resolution"
    GOVERNING_LAW         = "governing_law"

    @property
    def label(self) -> str:
        """
        Human readable category name, e.g. "Intellectual Property"
        """
        return self.value.replace("_", " ").title()


class RiskLevel(str, Enum):
    LOW      = "low"
    MEDIUM   = "medium"
    HIGH     = "high"
    CRITICAL = "critical"


def _compile(patterns: List[str]) -> Tuple[Pattern, ...]:
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


def _weighted(pairs: List[Tuple[str, int]]) -> Tuple[Tuple[Pattern, int], ...]:
    return tuple((re.compile(pattern, re.IGNORECASE), weight) for pattern, weight in pairs)


@dataclass(frozen = True)
class RiskRule:
    """
    Finding template that fires when every `requires` pattern matches and no `excludes` pattern does
    """
    type           : str
    description    : str
    recommendation : str
    requires       : Tuple[Pattern, ...]
    excludes       : Tuple[Pattern, ...] = ()
    severity       : Optional[str]       = None
    regulation     : Optional[str]       = None
    impact         : Optional[str]       = None

    def applies(self, text_lower: str) -> bool:
        if not all(pattern.search(text_lower) for pattern in self.requires):
            return False

        return not any(pattern.search(text_lower) for pattern in self.excludes)


class AnalysisRules:
    """
    Static pattern and weight tables shared by every analysis stage: built once at import time and never mutated
    """
    # Document type scoring (presence-only), declaration order is the tie-break order
    DOCUMENT_TYPE_PATTERNS       = ((DocumentType.NDA,                   _weighted([(r'non.?disclosure', 3), (r'\bnda\b', 2), (r'confidential', 2), (r'proprietary', 1)])),
                                    (DocumentType.SERVICE_AGREEMENT,     _weighted([(r'service\s+agreement', 3), (r'terms\s+of\s+service', 3), (r'\btos\b', 2), (r'service\s+level', 2), (r'\bservices?\b', 1)])),
                                    (DocumentType.EMPLOYMENT_CONTRACT,   _weighted([(r'employment', 3), (r'employee', 2), (r'employer', 2), (r'salary', 2), (r'\bjob\b', 1), (r'\bposition\b', 1)])),
                                    (DocumentType.PRIVACY_POLICY,        _weighted([(r'privacy\s+policy', 3), (r'data\s+protection', 2), (r'\bgdpr\b', 2), (r'\bkvkk\b', 2), (r'personal\s+data', 1), (r'\bcookies?\b', 1)])),
                                    (DocumentType.LICENSE_AGREEMENT,     _weighted([(r'licen[cs]e\s+agreement', 3), (r'licens(?:e|ing)', 2), (r'licensee', 2), (r'licensor', 2), (r'intellectual\s+property', 1)])),
                                    (DocumentType.TERMS_OF_USE,          _weighted([(r'terms\s+of\s+use', 3), (r'acceptable\s+use', 2), (r'\busers?\b', 1), (r'\bwebsite\b|\bplatform\b', 1)])),
                                    (DocumentType.PURCHASE_AGREEMENT,    _weighted([(r'purchase\s+agreement', 3), (r'\bbuyer\b', 2), (r'\bseller\b', 2), (r'purchase\s+price', 2), (r'deliver(?:y|ies)', 1), (r'\bgoods\b', 1)])),
                                    (DocumentType.LEASE_AGREEMENT,       _weighted([(r'\blease\b', 3), (r'landlord', 2), (r'tenant', 2), (r'\brent\b', 1), (r'premises', 1)])),
                                    (DocumentType.PARTNERSHIP_AGREEMENT, _weighted([(r'partnership', 3), (r'joint\s+venture', 3), (r'profit\s+shar', 2), (r'capital\s+contribution', 2), (r'\bpartners?\b', 1)])),
                                    (DocumentType.GENERAL_CONTRACT,      ()),
                                   )

    DOCUMENT_TYPE_BASE_SCORES    = {DocumentType.GENERAL_CONTRACT : 1}

    # Clause detection: ordered patterns per category, the first match wins within a category
    CLAUSE_PATTERNS              = ((ClauseCategory.DATA_PROCESSING,       _compile([r'data\s+processing', r'personal\s+data', r'gdpr', r'kvkk', r'data\s+protection', r'privacy\s+policy', r'data\s+subject', r'data\s+controller', r'data\s+processor'])),
                                    (ClauseCategory.LIABILITY,             _compile([r'liabilit', r'liable', r'indemnif', r'damages', r'limitation\s+of\s+liability', r'exclude.*liability', r'consequential\s+damages', r'indirect\s+damages'])),
                                    (ClauseCategory.CONFIDENTIALITY,       _compile([r'confidential', r'non.?disclosure', r'proprietary\s+information', r'trade\s+secret', r'confidentiality\s+agreement', r'nda'])),
                                    (ClauseCategory.TERMINATION,           _compile([r'terminat', r'end\s+this\s+agreement', r'breach.*agreement', r'notice\s+of\s+termination', r'expir', r'cancel'])),
                                    (ClauseCategory.PAYMENT,               _compile([r'payment', r'fee', r'\$[\d,]+', r'invoice', r'billing', r'compensation', r'remuneration', r'salary', r'wage'])),
                                    (ClauseCategory.INTELLECTUAL_PROPERTY, _compile([r'intellectual\s+property', r'copyright', r'trademark', r'patent', r'trade\s+mark', r'proprietary\s+rights', r'ownership', r'license', r'licensing'])),
                                    (ClauseCategory.DISPUTE_RESOLUTION,    _compile([r'dispute', r'arbitration', r'mediation', r'litigation', r'court', r'jurisdiction', r'resolution\s+of\s+disputes', r'legal\s+proceedings'])),
                                    (ClauseCategory.GOVERNING_LAW,         _compile([r'governing\s+law', r'applicable\s+law', r'laws?\s+of', r'jurisdiction', r'governed\s+by', r'subject\s+to.*law'])),
                                   )

    # Sentence salience scoring
    DEFAULT_FOCUS_KEYWORDS       = ("agreement", "contract", "party", "parties", "obligation", "liability",
                                    "termination", "confidentiality", "data", "protection", "privacy",
                                    "payment", "fee", "term", "condition", "warranty", "indemnity",
                                   )

    LEGAL_ACTION_WORDS           = ("shall", "must", "will", "may", "agree", "consent", "terminate", "breach")

    IMPORTANT_PHRASES            = ("in the event", "subject to", "provided that", "notwithstanding",
                                    "pursuant to", "in accordance with", "for the purpose of",
                                   )

    FOCUS_KEYWORD_WEIGHT         = 2.0
    LEGAL_ACTION_WEIGHT          = 1.5
    IMPORTANT_PHRASE_WEIGHT      = 1.0
    LONG_SENTENCE_LENGTH         = 200
    LONG_SENTENCE_PENALTY        = 0.5
    DURATION_BONUS               = 1.0
    AMOUNT_BONUS                 = 0.5

    DURATION_PATTERN             = re.compile(r'\d+\s+(?:days?|months?|years?)', re.IGNORECASE)
    AMOUNT_PATTERN               = re.compile(r'\$\d+|\d+%')

    # Plain-language rewriting, order matters
    PLAIN_LANGUAGE_SUBSTITUTIONS = ((re.compile(r'shall\s+', re.IGNORECASE),                 'will '),
                                    (re.compile(r'pursuant to', re.IGNORECASE),              'according to'),
                                    (re.compile(r'in the event that', re.IGNORECASE),        'if'),
                                    (re.compile(r'provided that', re.IGNORECASE),            'as long as'),
                                    (re.compile(r'notwithstanding', re.IGNORECASE),          'despite'),
                                    (re.compile(r'heretofore', re.IGNORECASE),               'before this'),
                                    (re.compile(r'hereafter', re.IGNORECASE),                'after this'),
                                    (re.compile(r'whereas', re.IGNORECASE),                  'since'),
                                    (re.compile(r'whereby', re.IGNORECASE),                  'by which'),
                                    (re.compile(r'aforementioned', re.IGNORECASE),           'mentioned above'),
                                    (re.compile(r'party of the first part', re.IGNORECASE),  'first party'),
                                    (re.compile(r'party of the second part', re.IGNORECASE), 'second party'),
                                   )

    FILLER_WORDS_PATTERN         = re.compile(r'\b(?:said|such|aforesaid)\s+', re.IGNORECASE)

    CONTEXT_INTRODUCTIONS        = ((re.compile(r'non.?disclosure|confidentiality'),          "This Non-Disclosure Agreement establishes confidentiality obligations between parties."),
                                    (re.compile(r'employment|job|position'),                  "This Employment Agreement outlines the terms of employment."),
                                    (re.compile(r'service|provide|deliver'),                  "This Service Agreement defines the terms for service delivery."),
                                    (re.compile(r'privacy|data protection|gdpr|kvkk'),        "This Privacy Policy explains how personal data is handled."),
                                    (re.compile(r'license|licensing|intellectual property'),  "This License Agreement grants specific usage rights."),
                                   )

    GENERIC_INTRODUCTION         = "This legal agreement establishes terms and conditions between parties."

    # Key point signals, checked per sentence in this order
    KEY_POINT_DURATION           = re.compile(r'\d+\s+(?:days?|months?|years?|weeks?)', re.IGNORECASE)
    KEY_POINT_PAYMENT            = re.compile(r'\$[\d,]+|\d+\s*(?:dollars?|pounds?|euros?)', re.IGNORECASE)
    PAYMENT_KEY_POINT            = "Contains payment terms"
    KEY_POINT_SUBSTRINGS         = ((("terminat",),                        "Includes termination provisions"),
                                    (("liabilit", "liable"),               "Contains liability provisions"),
                                    (("confidential", "non-disclosure"),   "Includes confidentiality requirements"),
                                   )
    MAX_KEY_POINTS               = 5

    # Risk detection rules over the lower-cased full text
    HIGH_RISK_RULES              = (RiskRule(type           = "Unlimited Liability",
                                             description    = "Agreement may expose party to unlimited financial liability",
                                             recommendation = "Consider adding liability caps or limitations",
                                             severity       = "high",
                                             requires       = _compile([r'unlimited\s+liability|no\s+limit.*liability']),
                                            ),
                                    RiskRule(type           = "Broad Indemnification",
                                             description    = "Very broad indemnification obligations that could be costly",
                                             recommendation = "Narrow the scope of indemnification obligations",
                                             severity       = "high",
                                             requires       = _compile([r'indemnify.*against.*claims|hold\s+harmless.*all.*claims']),
                                            ),
                                    RiskRule(type           = "Automatic Renewal",
                                             description    = "Agreement may auto-renew without adequate termination notice",
                                             recommendation = "Ensure adequate notice periods for termination",
                                             severity       = "high",
                                             requires       = _compile([r'automatic.*renew|automatically.*extend']),
                                             excludes       = _compile([r'notice.*terminat|notice.*cancel']),
                                            ),
                                    RiskRule(type           = "Exclusive Dealing",
                                             description    = "Agreement may contain exclusive dealing obligations",
                                             recommendation = "Review exclusivity terms carefully",
                                             severity       = "high",
                                             requires       = _compile([r'exclusive|solely|only.*party', r'deal|contract|agreement']),
                                            ),
                                   )

    MEDIUM_RISK_RULES            = (RiskRule(type           = "Vague Termination",
                                             description    = "Termination clauses lack specific notice periods",
                                             recommendation = "Specify clear termination notice requirements",
                                             severity       = "medium",
                                             requires       = _compile([r'terminat.*convenience|terminat.*reason']),
                                             excludes       = _compile([r'\d+\s+days?\s+notice']),
                                            ),
                                    RiskRule(type           = "Overly Broad Confidentiality",
                                             description    = "Confidentiality obligations may be too broad",
                                             recommendation = "Define confidential information more specifically",
                                             severity       = "medium",
                                             requires       = _compile([r'all\s+information.*confidential|any\s+information.*confidential']),
                                            ),
                                    RiskRule(type           = "Assignment Restrictions",
                                             description    = "Agreement restricts assignment rights",
                                             recommendation = "Consider if assignment restrictions are necessary",
                                             severity       = "medium",
                                             requires       = _compile([r'not.*assign|cannot.*assign|may\s+not.*assign']),
                                            ),
                                    RiskRule(type           = "Foreign Governing Law",
                                             description    = "Agreement governed by foreign law",
                                             recommendation = "Consider implications of foreign law governance",
                                             severity       = "medium",
                                             requires       = _compile([r'laws?\s+of.*(?:foreign|international)']),
                                            ),
                                   )

    COMPLIANCE_RULES             = (RiskRule(type           = "Missing GDPR Reference",
                                             description    = "Document processes personal data but lacks GDPR compliance language",
                                             recommendation = "Add GDPR compliance clauses",
                                             regulation     = "GDPR",
                                             requires       = _compile([r'personal\s+data|data\s+processing']),
                                             excludes       = _compile([r'gdpr|general\s+data\s+protection']),
                                            ),
                                    RiskRule(type           = "Missing Data Subject Rights",
                                             description    = "No mention of data subject rights under GDPR",
                                             recommendation = "Include data subject rights provisions",
                                             regulation     = "GDPR",
                                             requires       = _compile([r'personal\s+data|data\s+processing']),
                                             excludes       = _compile([r'data\s+subject\s+rights|right\s+to\s+erasure|right\s+of\s+access']),
                                            ),
                                    RiskRule(type           = "Missing KVKK Compliance",
                                             description    = "Turkish context requires KVKK compliance",
                                             recommendation = "Add KVKK compliance provisions",
                                             regulation     = "KVKK",
                                             requires       = _compile([r'turkey|turkish|kvkk', r'personal\s+data']),
                                             excludes       = _compile([r'kvkk|kişisel\s+verilerin\s+korunması']),
                                            ),
                                    RiskRule(type           = "Missing Employment Protections",
                                             description    = "Employment agreement lacks standard protection clauses",
                                             recommendation = "Add anti-discrimination and harassment policies",
                                             regulation     = "Employment Law",
                                             requires       = _compile([r'employment|employee|job']),
                                             excludes       = _compile([r'equal\s+opportunity|discrimination|harassment']),
                                            ),
                                   )

    UNFAIR_TERM_RULES            = (RiskRule(type           = "One-sided Termination",
                                             description    = "Only one party has termination rights",
                                             recommendation = "Consider mutual termination rights",
                                             impact         = "Creates imbalanced relationship",
                                             requires       = _compile([r'company.*may.*terminat']),
                                             excludes       = _compile([r'employee.*may.*terminat|party.*may.*terminat']),
                                            ),
                                    RiskRule(type           = "Penalty Clauses",
                                             description    = "Agreement contains penalty or liquidated damages clauses",
                                             recommendation = "Review enforceability of penalty clauses",
                                             impact         = "May be unenforceable or unfair",
                                             requires       = _compile([r'penalty|fine|liquidated\s+damages']),
                                            ),
                                    RiskRule(type           = "Broad Non-Compete",
                                             description    = "Non-compete clause may be overly broad",
                                             recommendation = "Ensure non-compete is reasonable in scope and duration",
                                             impact         = "Could restrict future employment opportunities",
                                             requires       = _compile([r'non.?compete|not.*compete']),
                                             excludes       = _compile([r'reasonable.*period|limited.*scope']),
                                            ),
                                    RiskRule(type           = "Unilateral Modification",
                                             description    = "One party can modify agreement without consent",
                                             recommendation = "Require mutual consent for modifications",
                                             impact         = "Creates uncertainty and imbalance",
                                             requires       = _compile([r'may.*modify.*agreement|reserve.*right.*change']),
                                             excludes       = _compile([r'mutual.*consent|both.*parties']),
                                            ),
                                   )

    # Risk scoring
    RISK_WEIGHTS                 = {"high_risks"      : 10,
                                    "medium_risks"    : 5,
                                    "compliance_gaps" : 7,
                                    "unfair_terms"    : 6,
                                   }

    # Inclusive upper bounds, anything above the last band is critical
    RISK_LEVEL_BANDS             = ((10, RiskLevel.LOW),
                                    (25, RiskLevel.MEDIUM),
                                    (50, RiskLevel.HIGH),
                                   )
