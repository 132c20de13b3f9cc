from pydantic import BaseModel
from typing import Optional
from enum import StrEnum


class Section(StrEnum):
    TEMPLATE = "template"
    SCRIPT = "script"


class FailurePolicy(StrEnum):
    SKIP = "skip"
    FAIL = "fail"


class ComponentSections(BaseModel):
    """The two regions pulled out of a single-file component."""

    template: Optional[str] = None
    script: Optional[str] = None

    @property
    def missing(self) -> list[Section]:
        missing = []
        if self.template is None:
            missing.append(Section.TEMPLATE)
        if self.script is None:
            missing.append(Section.SCRIPT)
        return missing
