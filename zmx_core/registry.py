"""
Component registry for one compiler run.

The registry is an ordered mapping from component name to descriptor.
Insertion order decides the order of render functions in the generated
module, of containers in the host document and of aggregated styles.
"""
from zmx_core.introspection import extract_prop_names
from zmx_core.models import ComponentDescriptor


def build_descriptor(source):
    """Turn a ComponentSource into a ComponentDescriptor with its prop names."""
    return ComponentDescriptor(
        name=source.name,
        template_text=source.template_text,
        style_text=source.style_text,
        prop_names=extract_prop_names(source.template_text),
    )


class Registry:
    """Ordered name -> ComponentDescriptor mapping owned by a single run."""

    def __init__(self):
        self._components = {}

    def register(self, source):
        """
        Build and store the descriptor for a source unit.

        Registering a name twice replaces the earlier descriptor but keeps
        its original position.
        """
        descriptor = build_descriptor(source)
        self._components[descriptor.name] = descriptor
        return descriptor

    def names(self):
        return list(self._components)

    def get(self, name):
        return self._components.get(name)

    def __contains__(self, name):
        return name in self._components

    def __iter__(self):
        return iter(self._components.values())

    def __len__(self):
        return len(self._components)
