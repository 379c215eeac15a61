"""
Reference renderer for ZMX templates.

Applies the same substitution rule as the generated `render` functions, so
template behaviour can be checked without a browser.
"""
from zmx_core.introspection import parse_template


def js_text(value):
    """
    Convert a JSON-like scalar the way JavaScript's String() does.

    Booleans become 'true'/'false' and integral floats lose their '.0'.
    Other values use str(), which matches String() for strings and ints.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_placeholder(placeholder, props):
    """Value of a prop if present and non-empty, else its default, else ''."""
    value = props.get(placeholder.name)
    if value is not None and js_text(value) != "":
        return js_text(value)
    return placeholder.default if placeholder.default is not None else ""


def render_template(template_text, props=None):
    """Render template text against a props mapping in a single pass."""
    props = props or {}
    return "".join(
        segment if isinstance(segment, str) else resolve_placeholder(segment, props)
        for segment in parse_template(template_text)
    )
