"""
ZMX Code Generator - Converts a component registry to a JavaScript module.

This module contains the ModuleGenerator class that turns registered
component descriptors into a self-contained browser script defining
`ComponentRegistry` and `initializeComponents`.
"""

import json

from zmx_core.runtime import MODULE_PARTS, get_runtime
from zmx_core.styles import aggregate_styles

MODULE_HEADER = "// Generated by zmx. Do not edit."


def js_string(value):
    """Encode a Python string as a JavaScript string literal."""
    # ensure_ascii keeps U+2028/U+2029 and non-ASCII text escaped
    return json.dumps(value, ensure_ascii=True)


class ModuleGenerator:
    """
    Generates the component module for a registry.

    The module is wrapped in an IIFE and is byte-for-byte reproducible for a
    given registry and configuration.
    """

    def __init__(self, runtime_parts=None):
        """
        Initialize the generator.

        Args:
            runtime_parts: Optional list of runtime fragments to splice around
                the registry. If None, reads the bundled runtime files.
        """
        if runtime_parts is None:
            runtime_parts = get_runtime(MODULE_PARTS)
        self._prelude, self._initialize = runtime_parts

    def render_function(self, descriptor):
        """Generate the registry entry and render function for one component."""
        return (
            f"  ComponentRegistry[{js_string(descriptor.name)}] = function render(container, props) {{\n"
            f"    assertContainer(container);\n"
            f"    container.innerHTML = renderTemplate({js_string(descriptor.template_text)}, props || {{}});\n"
            f"  }};\n"
        )

    def declarations(self, registry, config):
        """Generate the constants the runtime reads."""
        order = ", ".join(js_string(name) for name in registry.names())
        return (
            f"  var COMPONENT_ATTRIBUTE = {js_string(config.component_attribute)};\n"
            f"  var COMPONENT_STYLES = {js_string(aggregate_styles(registry))};\n"
            f"  var COMPONENT_ORDER = [{order}];\n"
            f"  var ComponentRegistry = {{}};\n"
        )

    def generate(self, registry, config):
        """Combine runtime fragments, declarations and render functions."""
        entries = [self.render_function(d) for d in registry]
        parts = [self._prelude, self.declarations(registry, config)] + entries + [self._initialize]
        body = "\n".join(part.rstrip("\n") + "\n" for part in parts)
        return (
            f"{MODULE_HEADER}\n"
            f"(function (global) {{\n"
            f"  'use strict';\n\n"
            f"{body}"
            f"}})(window);\n"
        )


def generate_render_function(descriptor):
    """Generate the render function for one descriptor, without the runtime."""
    return ModuleGenerator(runtime_parts=["", ""]).render_function(descriptor)


def generate_module(registry, config):
    """Generate the full component module text for a registry."""
    return ModuleGenerator().generate(registry, config)
