"""
Configuration for the guided program matcher.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

# Paths
PROJECT_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = Path(os.getenv("PROGRAM_MATCH_DATA_DIR", str(PROJECT_ROOT / "data")))
PROGRAMS_FILE = "programs.json"
PROGRAM_BANDS_FILE = "programsBand.json"
SKILLS_FILE = "skills.json"

# Score blend. Empirically tuned; keep them overridable rather than re-derived.
KEYWORD_WEIGHT = float(os.getenv("MATCH_KEYWORD_WEIGHT", "0.5"))
SEMANTIC_WEIGHT = float(os.getenv("MATCH_SEMANTIC_WEIGHT", "0.35"))
INTENT_WEIGHT = float(os.getenv("MATCH_INTENT_WEIGHT", "1.0"))
SEMANTIC_SCALE = float(os.getenv("MATCH_SEMANTIC_SCALE", "12"))

# Keyword scorer
SKILL_PHRASE_WEIGHT = float(os.getenv("MATCH_SKILL_PHRASE_WEIGHT", "4"))
OVERVIEW_OVERLAP_CAP = 3.0
EXTRA_OVERLAP_FACTOR = 0.75
EXTRA_OVERLAP_CAP = 4.0

# Intent scorer
DOMAIN_INTENT_BONUS = 4.0
HOSPITALITY_MARKETING_FACTOR = 0.5
FAST_BONUS_LARGE = 3.0
FAST_BONUS_SMALL = 1.5
FAST_MONTHS_LARGE = 12
FAST_MONTHS_SMALL = 18
FAST_COURSES_LARGE = 4
FAST_COURSES_SMALL = 8
BAND_BASELINE_WEIGHT = 0.15
BAND_PREFERENCE_WEIGHT = 1.1

# Result presentation
OVERVIEW_MAX_CHARS = 220
DEFAULT_RESULT_LIMIT = 10

# Text processing
STOPWORDS = frozenset({
    "the", "and", "or", "for", "of", "to", "in", "on", "with",
    "a", "an", "at", "by", "from", "about",
})

# Query-side widening only; catalog text is matched on its own vocabulary.
SYNONYM_MAP: Dict[str, List[str]] = {
    "client": ["customer", "customers", "service"],
    "clients": ["customer", "customers", "service"],
    "customer": ["client", "service"],
    "customers": ["client", "service"],
    "people": ["customer", "service", "team"],
    "guests": ["hospitality", "customer", "guest"],
    "guest": ["hospitality", "customer"],
    "hotel": ["hospitality", "tourism", "guest"],
    "hotels": ["hospitality", "tourism", "guest"],
    "restaurant": ["hospitality", "food", "service"],
    "restaurants": ["hospitality", "food", "service"],
    "travel": ["tourism", "hospitality"],
    "events": ["event", "hospitality", "tourism", "planning"],
    "event": ["hospitality", "tourism", "planning"],
    "social": ["marketing", "media", "digital"],
    "media": ["marketing", "digital"],
    "advertising": ["marketing", "promotion"],
    "sales": ["marketing", "customer", "selling"],
    "money": ["finance", "accounting"],
    "numbers": ["accounting", "finance", "data"],
    "bookkeeping": ["accounting", "payroll"],
    "accounting": ["bookkeeping", "finance"],
    "budget": ["finance", "accounting"],
    "data": ["analytics", "analysis", "spreadsheet"],
    "analytics": ["data", "analysis"],
    "spreadsheets": ["spreadsheet", "data", "excel"],
    "computers": ["computer", "technology", "data"],
    "boss": ["management", "leadership"],
    "lead": ["leadership", "management"],
    "leading": ["leadership", "management"],
    "manage": ["management", "leadership"],
    "managing": ["management", "leadership"],
    "manager": ["management", "leadership"],
    "hiring": ["recruitment", "human", "resources"],
    "recruiting": ["recruitment", "human", "resources"],
    "hr": ["human", "resources"],
    "startup": ["entrepreneurship", "business"],
    "entrepreneur": ["entrepreneurship", "business"],
    "office": ["administration", "administrative"],
}

# Intent triggers. Each phrase must start at a word boundary of the
# normalized query; a trailing space also requires it to end on one.
INTENT_PATTERNS: Dict[str, List[str]] = {
    "fast_completion": [
        "start working soon", "soon", "quick", "fast", "short program",
        "shorter", "asap", "right away", "few months", "less than a year",
    ],
    "management": [
        "manage", "management", "manager", "leader", "lead a team", "supervis",
        "boss", "run a team", "in charge",
    ],
    "marketing": [
        "marketing", "social media", "advertis", "brand", "promot",
        "content creat", "digital media", "sales",
    ],
    "finance": [
        "finance", "financial", "accounting", "accountant", "bookkeep",
        "money", "numbers", "tax", "budget", "bank",
    ],
    "data": [
        "data", "analytic", "analysis", "spreadsheet", "excel", "statistic",
        "report",
    ],
    "hospitality": [
        "hotel", "restaurant", "hospitality", "tourism", "travel", "guest",
        "event ", "events ", "resort",
    ],
    "human_resources": [
        "human resource", "hr ", "hiring", "recruit", "training staff",
        "employee", "workplace relations",
    ],
    "small_business": [
        "small business", "own business", "entrepreneur", "startup",
        "start-up", "start my own", "self-employ", "my own company",
    ],
    "strong_demand": [
        "demand", "job security", "stable job", "lots of jobs", "job openings",
        "opportunit", "easy to find work", "secure job",
    ],
    "high_earnings": [
        "earn", "salary", "pay well", "good pay", "high pay", "well paid",
        "well-paid", "income", "wage",
    ],
}

# Keyword families matched against an entry's combined text, anchored the
# same way as the intent triggers.
DOMAIN_KEYWORDS: Dict[str, List[str]] = {
    "management": ["management", "manager", "leadership", "supervis"],
    "marketing": [
        "marketing", "social media", "advertising", "brand", "digital media",
        "promotion",
    ],
    "finance": [
        "accounting", "finance", "financial", "bookkeeping", "payroll", "tax ",
        "taxes ", "taxation",
    ],
    "data": ["data", "analytics", "analysis", "spreadsheet", "excel", "statistics"],
    "hospitality": [
        "hospitality", "hotel", "tourism", "restaurant", "event ", "events ",
        "guest",
    ],
    "human_resources": [
        "human resource", "recruitment", "hiring", "employee relations",
        "labour relations",
    ],
    "small_business": [
        "small business", "entrepreneur", "business plan", "start-up", "startup",
    ],
}

HOSPITALITY_MARKERS = ("hospitality", "tourism", "hotel", "restaurant")

# Band vocabularies. BandLink records use the hyphenated ids; programs carry
# the underscore ids inline.
LINK_EARNING_LEVELS: Dict[str, int] = {
    "earning-entry": 1,
    "earning-moderate": 2,
    "earning-good": 3,
    "earning-strong": 4,
}
LINK_OPPORTUNITY_LEVELS: Dict[str, int] = {
    "opportunity-limited": 1,
    "opportunity-steady": 2,
    "opportunity-good": 3,
    "opportunity-strong": 4,
}
INLINE_EARNING_LEVELS: Dict[str, int] = {
    "entry": 1,
    "entry_to_medium": 2,
    "medium": 3,
    "medium_high": 4,
}
INLINE_OPPORTUNITY_LEVELS: Dict[str, int] = {
    "medium": 1,
    "medium_high": 2,
    "high": 3,
    "very_high": 4,
}

EARNING_BAND_LABELS: Dict[str, str] = {
    "earning-entry": "Entry (around $18-22/hr)",
    "earning-moderate": "Entry to medium ($20-26/hr)",
    "earning-good": "Medium (around $24-30/hr)",
    "earning-strong": "Medium to high ($28-35+/hr)",
    "entry": "Entry ($18-22/hr approx.)",
    "entry_to_medium": "Entry to medium ($20-26/hr approx.)",
    "medium": "Medium ($24-30/hr approx.)",
    "medium_high": "Medium to high ($28-35+ /hr approx.)",
}
OPPORTUNITY_BAND_LABELS: Dict[str, str] = {
    "opportunity-limited": "Some opportunities in the region",
    "opportunity-steady": "Good opportunities in the region",
    "opportunity-good": "Strong opportunities in the region",
    "opportunity-strong": "Very strong and stable demand",
    "medium": "Some opportunities in the region",
    "medium_high": "Good opportunities in the region",
    "high": "Strong opportunities in the region",
    "very_high": "Very strong and stable demand",
    "broad": "Broad opportunities across sectors",
    "emerging": "Emerging or growing area",
}


class MatchWeights(BaseModel):
    """Tunable constants of the combined score, overridable per call."""

    keyword: float = KEYWORD_WEIGHT
    semantic: float = SEMANTIC_WEIGHT
    intent: float = INTENT_WEIGHT
    semantic_scale: float = SEMANTIC_SCALE
    skill_phrase: float = SKILL_PHRASE_WEIGHT
    domain_intent: float = DOMAIN_INTENT_BONUS
    band_baseline: float = BAND_BASELINE_WEIGHT
    band_preference: float = BAND_PREFERENCE_WEIGHT


# Pydantic schemas
class MatchItem(BaseModel):
    id: str
    name: str
    score: int
    credential_type: Optional[str] = None
    overview: Optional[str] = None
    time_commitment: Optional[str] = None
    stack_message: Optional[str] = None
    earning_label: Optional[str] = None
    opportunity_label: Optional[str] = None
    skill_clusters: List[str] = Field(default_factory=list)
    reasons: List[str] = Field(default_factory=list)


class MatchResponse(BaseModel):
    matches: List[MatchItem]


class ProgramSummary(BaseModel):
    id: str
    name: str
    earning_label: Optional[str] = None
    opportunity_label: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
