"""
Service configuration.

Values come from environment variables, read once by the application; engines
and adapters receive them explicitly.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class Settings:
    huggingface_api_key: str = ""
    classifier_model: str = "facebook/bart-large-mnli"
    analysis_model: str = "distilbert-base-uncased-finetuned-sst-2-english"
    classifier_timeout: float = 10.0
    use_redis: bool = False
    redis_host: str = "localhost"
    redis_port: int = 6379
    history_limit: int = 20
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            huggingface_api_key=os.getenv("HUGGINGFACE_API_KEY", ""),
            classifier_model=os.getenv("HF_CLASSIFIER_MODEL", cls.classifier_model),
            analysis_model=os.getenv("HF_ANALYSIS_MODEL", cls.analysis_model),
            classifier_timeout=float(os.getenv("CLASSIFIER_TIMEOUT", cls.classifier_timeout)),
            use_redis=_env_flag("USE_REDIS", "false"),
            redis_host=os.getenv("REDIS_HOST", cls.redis_host),
            redis_port=int(os.getenv("REDIS_PORT", cls.redis_port)),
            history_limit=int(os.getenv("HISTORY_LIMIT", cls.history_limit)),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
        )
