"""
Host document generation.

Emits the HTML harness: one attributed container per registered component
inside the fixed root container, a reference to the generated module and a
DOM-ready hook that initializes the root.
"""
from html import escape

from zmx_core.codegen import js_string
from zmx_core.runtime import BOOT_SCRIPT, ROOT_ID_MARKER, read_runtime


def component_containers(registry, config):
    """One empty placeholder element per component, in registry order."""
    attribute = escape(config.component_attribute)
    return [f'<div {attribute}="{escape(name)}"></div>' for name in registry.names()]


def boot_script(config, boot_source=None):
    """The DOM-ready hook with the root container id filled in."""
    if boot_source is None:
        boot_source = read_runtime(BOOT_SCRIPT)
    return boot_source.replace(ROOT_ID_MARKER, js_string(config.root_id))


def assemble_html(registry, config, boot_source=None):
    """
    Generate the host document for a registry.

    Args:
        registry: Registry whose components get a container each
        config: CompilerConfig with the root id, attribute, module filename and title
        boot_source: Optional DOM-ready hook source, defaults to the bundled one

    Returns:
        The HTML document as a string
    """
    root_id = escape(config.root_id)
    containers = component_containers(registry, config)
    if containers:
        root = f'<div id="{root_id}">\n    ' + "\n    ".join(containers) + "\n  </div>"
    else:
        root = f'<div id="{root_id}"></div>'

    # Indent each non-empty line of the hook by 4 spaces
    hook = "\n".join(
        f"    {line}" if line.strip() else ""
        for line in boot_script(config, boot_source).rstrip("\n").split("\n")
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(config.title)}</title>
</head>
<body>
  {root}
  <script src="./{escape(config.module_filename)}"></script>
  <script>
{hook}
  </script>
</body>
</html>
"""
