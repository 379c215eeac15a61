"""
ZMX Placeholder Extraction - Introspection for template props.

This module contains the TemplateTransformer class that turns the placeholder
token stream of a template into text/placeholder segments, plus the helpers
the registry builder uses to read prop names out of template text.
"""

from lark import Lark, Transformer

from zmx_core.grammar import placeholder_grammar
from zmx_core.models import Placeholder

_parser = None


def get_parser():
    """Return the shared placeholder parser, building it on first use."""
    global _parser
    if _parser is None:
        _parser = Lark(placeholder_grammar, parser='lalr', lexer='basic')
    return _parser


def parse_placeholder(body):
    """
    Split the inside of a `{...}` token on its first colon.

    Both the name and the default are trimmed. The default is None when the
    token carries no colon at all, and may be an empty string for `{name:}`.
    """
    name, sep, default = body.partition(':')
    return Placeholder(name=name.strip(), default=default.strip() if sep else None)


class TemplateTransformer(Transformer):
    """
    Transforms the placeholder parse tree into an ordered list of segments.

    Each segment is either a plain string (literal template text) or a
    Placeholder. Adjacent literal tokens are merged so a stray '{' does not
    split the surrounding text.
    """

    def start(self, items):
        """Merge adjacent text and keep placeholders in order."""
        segments = []
        for item in items:
            if isinstance(item, str) and segments and isinstance(segments[-1], str):
                segments[-1] += item
            else:
                segments.append(item)
        return segments

    def PLACEHOLDER(self, t):
        return parse_placeholder(str(t)[1:-1])

    def TEXT(self, t): return str(t)
    def LBRACE(self, t): return str(t)


def parse_template(template_text):
    """Parse template text into literal strings and Placeholder segments."""
    if not template_text:
        return []
    tree = get_parser().parse(template_text)
    return TemplateTransformer().transform(tree)


def extract_placeholders(template_text):
    """Return every placeholder in first-appearance order, duplicates included."""
    return [s for s in parse_template(template_text) if isinstance(s, Placeholder)]


def extract_prop_names(template_text):
    """Return placeholder names in first-appearance order, duplicates included."""
    return [p.name for p in extract_placeholders(template_text)]
