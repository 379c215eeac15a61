# ZMX - Core Compiler Components
"""
Core modules for the ZMX component compiler:
- errors: Error types for filesystem, config and run-state failures
- grammar: Section patterns and the Lark placeholder grammar
- discovery: Source listing and processing order
- sections: Template/style/script extraction
- introspection: Placeholder and prop name extraction
- registry: Component descriptors and the ordered registry
- styles: Style aggregation
- codegen: JavaScript module generation
- harness: HTML host document generation
- render: Python reference renderer for templates
- config: Compiler configuration
"""

from .errors import ZmxError, FileSystemError, ConfigError, RunStateError
from .models import ComponentSource, ComponentDescriptor, Placeholder, Artifacts
from .config import CompilerConfig, load_config
from .discovery import discover_sources
from .sections import extract_sections
from .introspection import extract_prop_names, extract_placeholders, TemplateTransformer
from .registry import Registry, build_descriptor
from .styles import aggregate_styles
from .codegen import ModuleGenerator, generate_module, generate_render_function
from .harness import assemble_html
from .render import render_template

__all__ = [
    'ZmxError',
    'FileSystemError',
    'ConfigError',
    'RunStateError',
    'ComponentSource',
    'ComponentDescriptor',
    'Placeholder',
    'Artifacts',
    'CompilerConfig',
    'load_config',
    'discover_sources',
    'extract_sections',
    'extract_prop_names',
    'extract_placeholders',
    'TemplateTransformer',
    'Registry',
    'build_descriptor',
    'aggregate_styles',
    'ModuleGenerator',
    'generate_module',
    'generate_render_function',
    'assemble_html',
    'render_template',
]
