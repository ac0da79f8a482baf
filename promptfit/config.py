from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Prompt budget
    max_length: int = 16_000  # characters, not tokens
    extractor: str = "none"  # "none" (reject on overflow), "prefix" or "boundary"

    @field_validator("extractor", mode="before")
    @classmethod
    def normalize_extractor(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip().lower()
            if v not in ("none", "prefix", "boundary"):
                raise ValueError(f"unknown extractor '{v}'")
        return v

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {"env_prefix": "PROMPTFIT_", "env_file": ".env"}
