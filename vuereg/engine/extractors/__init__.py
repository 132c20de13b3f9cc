from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class SectionExtractor(Protocol):
    """Protocol for single-file component section extractors."""

    def extract(self, source: str) -> Optional[str]:
        """Return the section body, or None when the section is absent."""
        ...


# Registry of extractors by section name
_EXTRACTORS: dict[str, type] = {}


def register_extractor(section: str):
    """Decorator to register an extractor for a section name."""

    def decorator(cls):
        _EXTRACTORS[section] = cls
        return cls

    return decorator


def get_extractor(section: str) -> SectionExtractor:
    """Get extractor for a section name."""
    if section not in _EXTRACTORS:
        raise ValueError(f"No extractor for section: {section}")
    return _EXTRACTORS[section]()


# Import all extractors to trigger registration
from vuereg.engine.extractors.template import TemplateExtractor  # noqa: F401, E402
from vuereg.engine.extractors.script import ScriptExtractor  # noqa: F401, E402
