from pathlib import Path

from pydantic import BaseModel, ConfigDict, model_validator


class SourceFile(BaseModel):
    """One file flowing through the pipeline.

    ``base`` is the root the file was discovered under; ``relative`` is the
    path below it. Instances are frozen, the pipeline yields copies.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    base: Path
    contents: bytes

    @model_validator(mode="after")
    def _path_under_base(self) -> "SourceFile":
        if not self.path.is_relative_to(self.base):
            raise ValueError(f"path {self.path} is not under base {self.base}")
        return self

    @property
    def relative(self) -> Path:
        return self.path.relative_to(self.base)

    @property
    def stem(self) -> str:
        return self.path.stem

    @property
    def suffix(self) -> str:
        return self.path.suffix

    @property
    def text(self) -> str:
        return self.contents.decode("utf-8")
