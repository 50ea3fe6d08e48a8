"""Static reference data for query understanding.

Five dictionaries (companies, roles, schools, skills, stop-words), the synonym
graph, the concept-tag graph with its query aliases and a canonical alias
table. The tables are bundled into an immutable ``Gazetteer`` built once at
start-up and injected into the parser and scorers; tests can swap in smaller
dictionaries.
"""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

COMPANIES: frozenset[str] = frozenset({
    # FAANG
    "google", "facebook", "meta", "amazon", "apple", "microsoft", "netflix", "alphabet",
    # Big Tech
    "uber", "airbnb", "stripe", "openai", "tesla", "nvidia", "adobe", "salesforce",
    "linkedin", "twitter", "bytedance", "tiktok",
    # Consulting
    "mckinsey", "bain", "bcg", "boston consulting", "boston consulting group",
    "deloitte", "accenture", "pwc", "kpmg", "oliver wyman",
    # Finance
    "goldman", "goldman sachs", "morgan stanley", "jpmorgan", "jp morgan",
    "blackrock", "citadel", "bridgewater", "bank of america",
    # Startups / unicorns
    "databricks", "figma", "notion", "canva", "spacex", "plaid",
    "instacart", "doordash", "coinbase",
})

ROLES: frozenset[str] = frozenset({
    # Product
    "product manager", "pm", "program manager", "project manager", "product owner",
    # Engineering
    "engineer", "software engineer", "swe", "sde", "developer", "programmer",
    "frontend engineer", "backend engineer", "fullstack engineer",
    "ml engineer", "data engineer", "devops engineer",
    # Data
    "data scientist", "data analyst", "analyst",
    # Design
    "designer", "product designer", "ux designer", "ui designer",
    # Leadership
    "founder", "cofounder", "ceo", "cto", "vp", "director", "manager", "lead",
    # Other
    "consultant", "researcher", "scientist", "investor", "recruiter",
})

SCHOOLS: frozenset[str] = frozenset({
    # Ivy League
    "harvard", "yale", "princeton", "columbia", "penn", "upenn",
    "brown", "dartmouth", "cornell",
    "harvard university", "yale university", "princeton university",
    "columbia university", "university of pennsylvania", "brown university",
    "cornell university", "dartmouth college", "wharton",
    # Top US
    "stanford", "stanford university", "mit", "massachusetts institute of technology",
    "berkeley", "uc berkeley", "caltech", "uchicago", "university of chicago",
    "duke", "northwestern", "johns hopkins", "carnegie mellon", "umich",
    "university of michigan",
    # Top International
    "oxford", "cambridge", "imperial", "eth zurich",
    # Top China
    "tsinghua", "peking", "fudan", "sjtu", "shanghai jiao tong",
    "zhejiang", "zju", "ustc", "nanjing", "nju",
})

SKILLS: frozenset[str] = frozenset({
    # Programming
    "python", "java", "javascript", "typescript", "c++", "go", "rust", "swift",
    # Web
    "react", "vue", "angular", "node", "django", "flask",
    # Data/ML
    "machine learning", "ml", "ai", "deep learning", "nlp", "computer vision",
    "tensorflow", "pytorch", "sql",
    # Other
    "leadership", "marketing", "sales", "design", "ux", "ui",
    "product strategy", "fundraising",
})

# Modifier trigger words (not, no, must, only, around, about, ...) must never
# appear here or the modifier extractor cannot see them.
STOP_WORDS: frozenset[str] = frozenset({
    # Prepositions
    "in", "at", "on", "to", "for", "of", "with", "from", "by", "as",
    "across", "through", "into", "over", "under", "between", "among",
    "within", "during", "before", "after", "above", "below",
    # Articles
    "an", "the",
    # Pronouns
    "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "my", "your", "his", "its", "our", "their",
    "that", "this", "these", "those", "there", "here",
    "who", "what", "where", "when", "why", "how", "which",
    # Conjunctions
    "and", "or", "but", "so", "yet", "nor",
    # Auxiliary verbs
    "is", "am", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did",
    "will", "would", "can", "could", "may", "might", "should",
    # Domain filler
    "want", "wanna", "looking", "find", "person", "people", "someone", "anyone",
    "very", "much", "more", "most", "many", "some", "any", "all",
    "experience", "exp", "experienced", "works", "working", "worked",
    "like", "also", "just", "please",
})

SYNONYMS: dict[str, list[str]] = {
    # Role abbreviations
    "pm": ["product manager", "program manager", "project manager"],
    "swe": ["software engineer", "software developer", "engineer"],
    "sde": ["software engineer", "software developer"],
    "ds": ["data scientist"],
    "ml": ["machine learning"],
    "ai": ["artificial intelligence", "machine learning"],
    "ux": ["user experience"],
    "ui": ["user interface"],
    # Company abbreviations
    "fb": ["facebook", "meta"],
    "msft": ["microsoft"],
    "amzn": ["amazon"],
    "googl": ["google", "alphabet"],
    # Degrees
    "bs": ["bachelor", "bachelors"],
    "ms": ["master", "masters"],
    "mba": ["master of business administration"],
    "phd": ["doctor", "doctorate"],
    # Other
    "mentor": ["coach", "advisor", "guide"],
    "alumni": ["alum", "graduate", "graduated"],
    "founder": ["entrepreneur", "startup owner", "cofounder"],
    "years": ["year", "yrs", "yr"],
}

CONCEPTS: dict[str, list[str]] = {
    "top tech": ["google", "facebook", "meta", "amazon", "apple", "microsoft", "netflix", "uber"],
    "faang": ["facebook", "meta", "apple", "amazon", "netflix", "google"],
    "big tech": ["google", "facebook", "meta", "amazon", "apple", "microsoft", "netflix", "uber", "airbnb"],
    "mbb": ["mckinsey", "bain", "bcg"],
    "consulting": ["mckinsey", "bain", "bcg", "deloitte", "accenture"],
    "investment bank": ["goldman sachs", "morgan stanley", "jpmorgan", "bank of america"],
    "ivy league": ["harvard", "yale", "princeton", "columbia", "penn", "brown", "dartmouth", "cornell"],
    "ivy": ["harvard", "yale", "princeton", "columbia", "penn", "brown", "dartmouth", "cornell"],
    "top mba": ["harvard", "stanford", "wharton", "kellogg", "booth", "columbia", "haas"],
    "stanford": ["stanford university"],
    "unicorn": ["stripe", "databricks", "figma", "notion", "canva"],
    "startup": ["startup"],
}

# Query phrasings that stand for a concept category.
CONCEPT_ALIASES: dict[str, str] = {
    "large tech": "big tech",
    "top consulting": "mbb",
    "management consulting": "mbb",
    "consultant": "consulting",
    "wall street": "investment bank",
    "finance": "investment bank",
    "elite university": "ivy league",
    "m7": "top mba",
    "elite mba": "top mba",
    "entrepreneurial": "startup",
}

# Short forms recorded under their canonical entity name.
ALIASES: dict[str, str] = {
    "pm": "product manager",
    "swe": "software engineer",
    "sde": "software engineer",
    "cofounder": "founder",
    "goldman": "goldman sachs",
    "jp morgan": "jpmorgan",
    "boston consulting group": "boston consulting",
    "stanford": "stanford university",
    "mit": "massachusetts institute of technology",
    "penn": "university of pennsylvania",
    "upenn": "university of pennsylvania",
    "harvard": "harvard university",
    "yale": "yale university",
    "princeton": "princeton university",
    "columbia": "columbia university",
    "cornell": "cornell university",
    "dartmouth": "dartmouth college",
    "berkeley": "uc berkeley",
    "uchicago": "university of chicago",
    "umich": "university of michigan",
    "ml": "machine learning",
}


class Gazetteer(BaseModel):
    """Immutable bundle of every table the parser and scorers read."""
    companies: frozenset[str] = COMPANIES
    roles: frozenset[str] = ROLES
    schools: frozenset[str] = SCHOOLS
    skills: frozenset[str] = SKILLS
    stop_words: frozenset[str] = STOP_WORDS
    synonyms: dict[str, tuple[str, ...]] = {k: tuple(v) for k, v in SYNONYMS.items()}
    concepts: dict[str, tuple[str, ...]] = {k: tuple(v) for k, v in CONCEPTS.items()}
    concept_aliases: dict[str, str] = CONCEPT_ALIASES
    aliases: dict[str, str] = ALIASES

    model_config = {"frozen": True}

    def dictionaries(self) -> dict[str, frozenset[str]]:
        """Entity dictionaries keyed by the QueryEntities field they feed."""
        return {
            "companies": self.companies,
            "roles": self.roles,
            "schools": self.schools,
            "skills": self.skills,
        }

    def canonical(self, term: str) -> str:
        return self.aliases.get(term, term)

    def surface_forms(self, canonical: str) -> set[str]:
        """Every spelling that maps to ``canonical``, including itself."""
        forms = {alias for alias, target in self.aliases.items() if target == canonical}
        forms.add(canonical)
        return forms


def load_gazetteer(path: str | Path) -> Gazetteer:
    """Load a gazetteer from YAML. Missing tables fall back to the embedded ones."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    gazetteer = Gazetteer.model_validate(data)
    logger.info(
        "Loaded gazetteer from %s (%d companies, %d roles, %d schools, %d skills)",
        path,
        len(gazetteer.companies),
        len(gazetteer.roles),
        len(gazetteer.schools),
        len(gazetteer.skills),
    )
    return gazetteer


@lru_cache(maxsize=1)
def default_gazetteer() -> Gazetteer:
    """Return the process-wide gazetteer, loading the YAML override once if set."""
    from config import settings

    if settings.gazetteer_path:
        return load_gazetteer(settings.gazetteer_path)
    return Gazetteer()
