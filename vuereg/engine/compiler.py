"""Reassemble a single-file component into a registry assignment.

The template markup becomes a backtick string literal injected as the
``template`` property of the component's default-exported object::

    window.VueComponents = window.VueComponents || {};
    window.VueComponents['HelloWorld'] = {
      data() { ... },
    template: `<div>...</div>`
    };
"""

from vuereg.engine.errors import SectionNotFoundError
from vuereg.engine.extractors import get_extractor
from vuereg.models.component import ComponentSections, Section
from vuereg.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_REGISTRY = "window.VueComponents"


def escape_template(markup: str) -> str:
    """Escape markup for embedding in a backtick string literal."""
    return markup.replace("`", "\\`")


def _ends_with_separator(body: str) -> bool:
    """True if the last code before any // comments is "{" or ","."""
    for line in reversed(body.splitlines()):
        code = line.strip()
        if not code:
            continue
        if "//" not in code:
            return code.endswith(("{", ","))
        prefixes = [
            code[:i].rstrip() for i in range(len(code)) if code.startswith("//", i)
        ]
        if not prefixes[0]:
            # whole-line comment
            continue
        return any(p.endswith(("{", ",")) for p in prefixes + [code])
    return False


def open_literal(literal: str) -> str:
    """Drop the closing brace of an object literal so properties can follow.

    A separating comma is appended unless the literal is empty or already
    ends with one. After a trailing // comment the comma goes on its own line.
    """
    body = literal.rstrip()
    if body.endswith("}"):
        body = body[:-1]
    body = body.rstrip()
    if _ends_with_separator(body):
        return body
    if "//" in body.rsplit("\n", 1)[-1]:
        return body + "\n,"
    return body + ","


class ComponentCompiler:
    """Compile .vue source text into a registry assignment."""

    def __init__(self, registry: str = DEFAULT_REGISTRY):
        self.registry = registry

    def extract(self, source: str) -> ComponentSections:
        return ComponentSections(
            template=get_extractor(Section.TEMPLATE).extract(source),
            script=get_extractor(Section.SCRIPT).extract(source),
        )

    def compile(self, source: str, name: str) -> str:
        """Return the compiled text for component ``name``.

        Raises SectionNotFoundError when either section is missing; no
        partial output is ever produced.
        """
        sections = self.extract(source)
        if sections.missing:
            raise SectionNotFoundError(sections.missing[0], component=name)

        logger.debug(
            "compiler.sections_extracted",
            component=name,
            template_len=len(sections.template),
            script_len=len(sections.script),
        )

        dest = f"{self.registry} = {self.registry} || {{}};\n"
        dest += f"{self.registry}['{name}'] = "
        dest += open_literal(sections.script)
        dest += "\ntemplate: `"
        dest += escape_template(sections.template)
        dest += "`\n};"
        return dest


def compile_component(
    source: str, name: str, registry: str = DEFAULT_REGISTRY
) -> str:
    """Compile ``source`` as component ``name``. See ComponentCompiler."""
    return ComponentCompiler(registry).compile(source, name)
