"""
ZMX Grammar Definition.

Section markers are matched with regular expressions; placeholders inside
template text are tokenised by a Lark lexer grammar.
"""
import re

# First occurrence only, non-greedy up to the first closing marker.
SECTION_PATTERNS = {
    "template": re.compile(r"<template>([\s\S]*?)</template>"),
    "style": re.compile(r"<style>([\s\S]*?)</style>"),
    "script": re.compile(r"<script>([\s\S]*?)</script>"),
}

# PLACEHOLDER wins over LBRACE; an unterminated '{' falls through as text.
placeholder_grammar = r"""
    start: (PLACEHOLDER | TEXT | LBRACE)*

    PLACEHOLDER.2: /\{[^}]+\}/
    TEXT: /[^{]+/
    LBRACE: "{"
"""
