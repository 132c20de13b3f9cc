import re
from typing import Optional

from vuereg.engine.extractors import register_extractor

# <script> export default { ... }; </script>
# Only whitespace may follow the terminating semicolon, so a "};" nested
# inside a method body never ends the literal early.
SCRIPT_PATTERN = re.compile(
    r"<script>\W*?export\W*?default\W*?(\{.*?\});\s*?</script>",
    re.DOTALL | re.ASCII,
)


@register_extractor("script")
class ScriptExtractor:
    """Extract the default-exported object literal from the <script> block.

    The returned text runs from the opening brace through the closing brace
    of the literal; the terminating semicolon is not included.
    """

    pattern = SCRIPT_PATTERN

    def extract(self, source: str) -> Optional[str]:
        match = self.pattern.search(source)
        return match.group(1) if match else None
