"""
Section extraction for ZMX source units.

Splits one raw source unit into its template, style and script text. This is
pattern matching over raw text rather than a parser: a missing section is an
empty string and later duplicates of a section are ignored.
"""
from zmx_core.grammar import SECTION_PATTERNS
from zmx_core.models import ComponentSource


def extract_section(source, section):
    """Return the body of the first `<section>...</section>` pair, or ''."""
    match = SECTION_PATTERNS[section].search(source)
    return match.group(1) if match else ""


def extract_sections(name, source):
    """
    Build a ComponentSource from raw ZMX text.

    Args:
        name: Component name (the filename without its suffix)
        source: Raw text of the source unit

    Returns:
        ComponentSource with template, style and script text
    """
    return ComponentSource(
        name=name,
        template_text=extract_section(source, "template"),
        style_text=extract_section(source, "style"),
        script_text=extract_section(source, "script"),
    )
