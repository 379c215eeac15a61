# ZMX Runtime Components
"""
Runtime fragments that get spliced into the generated artifacts.

These are real JavaScript files so they can be read and linted on their own,
but they are inserted verbatim into the generated module and host document
at compile time.
"""

import os

# Order matters - helpers must be defined before the entry point uses them
MODULE_PARTS = [
    'prelude.js',      # assertContainer, renderTemplate
    'initialize.js',   # injectStyles, initializeComponents, globals
]

BOOT_SCRIPT = 'boot.js'  # DOM-ready hook for the host document

ROOT_ID_MARKER = '__ROOT_ID__'


def read_runtime(name):
    """Read a single runtime fragment by filename."""
    path = os.path.join(os.path.dirname(__file__), name)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def get_runtime(parts):
    """Read and return the named runtime fragments, in order."""
    return [read_runtime(part) for part in parts]
