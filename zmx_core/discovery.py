"""
Source discovery for the ZMX compiler.

Lists source units in a directory in processing order: the entry unit
first, every other unit in ascending code-point order of its filename.
"""
import os

from zmx_core.errors import FileSystemError


def discover_sources(directory, suffix=".zmx", entry_name="main"):
    """
    List ZMX source filenames in processing order.

    Args:
        directory: Directory to scan (not recursive)
        suffix: Exact, case-sensitive filename suffix of source units
        entry_name: Base name of the unit that is always processed first

    Returns:
        List of filenames (not paths)

    Raises:
        FileSystemError: If the directory is missing or unreadable
    """
    try:
        entries = os.listdir(directory)
    except OSError as e:
        raise FileSystemError.from_os_error("list source directory", directory, e) from e

    names = [entry for entry in entries if entry.endswith(suffix)]

    entry_file = entry_name + suffix
    ordered = []
    if entry_file in names:
        names.remove(entry_file)
        ordered.append(entry_file)

    return ordered + sorted(names)


def component_name(filename, suffix=".zmx"):
    """Derive the component name from a source filename."""
    return filename[:-len(suffix)] if suffix and filename.endswith(suffix) else filename


def read_source(path):
    """Read one source unit as UTF-8 text."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise FileSystemError.from_os_error("read source unit", path, e) from e
