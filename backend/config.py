import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    rate_limit: str = "30/minute"

    # Query parsing
    gazetteer_path: str = ""  # optional YAML file overriding the embedded tables
    fuzzy_phrase_threshold: float = 0.85
    synonym_fanout_cap: int = 3

    # Scoring
    alumni_fuzzy_threshold: float = 0.8
    experience_sigma: float = 2.0
    time_decay_half_life: float = 3.0
    reference_year: int | None = None  # None -> current year at pipeline construction
    zone_weight_identity: float = 1.0
    zone_weight_professional: float = 3.0
    zone_weight_skills: float = 1.5

    # Ranking pipeline
    default_top_k: int = 5
    pool_multiplier: int = 10
    min_pool_size: int = 20
    validation_batch_size: int = 25

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
