from pydantic import field_validator
from pydantic_settings import BaseSettings

from vuereg.models.component import FailurePolicy


def normalize_ext(ext: str) -> str:
    """Return ``ext`` with exactly one leading dot (``jsx`` -> ``.jsx``)."""
    ext = ext.strip()
    if not ext or ext == ".":
        raise ValueError("extension must not be empty")
    if ext[0] != ".":
        ext = "." + ext
    return ext


class Settings(BaseSettings):
    # Output
    ext: str = "js"
    registry: str = "window.VueComponents"

    # Input
    source_ext: str = ".vue"

    # Behavior when a .vue file does not have the expected shape
    on_error: FailurePolicy = FailurePolicy.SKIP

    log_level: str = "info"

    model_config = {"env_file": ".env", "env_prefix": "VUEREG_", "case_sensitive": False, "extra": "ignore"}

    @field_validator("ext", "source_ext")
    @classmethod
    def _leading_dot(cls, value: str) -> str:
        return normalize_ext(value)
