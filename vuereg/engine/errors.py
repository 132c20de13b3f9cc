from typing import Optional


class CompileError(ValueError):
    """A single-file component could not be compiled."""


class SectionNotFoundError(CompileError):
    """A required section is missing or not in the expected shape."""

    def __init__(self, section: str, component: Optional[str] = None):
        self.section = section
        self.component = component
        where = f" in component '{component}'" if component else ""
        if section == "script":
            detail = "no <script> block of the form 'export default { ... };'"
        else:
            detail = f"no <{section}>...</{section}> block"
        super().__init__(f"{detail}{where}")


class SourceDecodeError(CompileError):
    """A source file is not valid UTF-8."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot decode {path} as utf-8: {reason}")
