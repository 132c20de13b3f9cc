import re
from typing import Optional

from vuereg.engine.extractors import register_extractor

# Non-greedy: always stop at the first closing tag after the opening one
TEMPLATE_PATTERN = re.compile(r"<template>(.*?)</template>", re.DOTALL)


@register_extractor("template")
class TemplateExtractor:
    """Extract the markup between the first <template> and </template>."""

    pattern = TEMPLATE_PATTERN

    def extract(self, source: str) -> Optional[str]:
        match = self.pattern.search(source)
        return match.group(1) if match else None
