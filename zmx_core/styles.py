"""
Style aggregation: raw style text of every component, in registry order.
"""


def aggregate_styles(registry):
    """Join every non-empty style section with a single newline."""
    return "\n".join(d.style_text for d in registry if d.style_text)
