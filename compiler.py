import os
import sys
from enum import Enum

from zmx_core.codegen import generate_module
from zmx_core.config import CompilerConfig
from zmx_core.discovery import component_name, discover_sources, read_source
from zmx_core.errors import FileSystemError, RunStateError
from zmx_core.harness import assemble_html
from zmx_core.models import Artifacts
from zmx_core.registry import Registry
from zmx_core.sections import extract_sections

# Global verbose flag
_VERBOSE = False

def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = value

def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)


class RunState(str, Enum):
    """Lifecycle of a single compiler run. Runs only move forward."""
    IDLE = "idle"
    DISCOVERING = "discovering"
    EXTRACTING = "extracting"
    BUILDING = "building"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


def build_registry(sources):
    """Register ComponentSources in the given order into a fresh registry."""
    registry = Registry()
    for source in sources:
        descriptor = registry.register(source)
        debug_log(f"Registered '{descriptor.name}' with props {descriptor.prop_names}")
    return registry


def compile_registry(registry, config=None):
    """Generate the module and host document for a registry, in memory."""
    config = config or CompilerConfig()
    return Artifacts(
        module_text=generate_module(registry, config),
        html_text=assemble_html(registry, config),
    )


def compile_source(name, source_code, config=None):
    """Compile a single ZMX source unit into artifacts, in memory."""
    return compile_registry(build_registry([extract_sections(name, source_code)]), config)


def write_artifact(path, text):
    """Write one generated file as UTF-8 with '\\n' line endings."""
    try:
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
    except OSError as e:
        raise FileSystemError.from_os_error("write artifact", path, e) from e


class CompilerRun:
    """
    One end-to-end compilation of a source directory.

    The run owns its registry exclusively and executes at most once; any
    error moves it to FAILED and propagates. Artifacts already written are
    left on disk.
    """

    def __init__(self, config=None):
        self.config = config or CompilerConfig()
        self.state = RunState.IDLE
        self.registry = Registry()
        self.artifacts = None
        self.written = []

    def _enter(self, state):
        debug_log(f"Run state: {self.state.value} -> {state.value}")
        self.state = state

    def execute(self):
        """Run discovery, extraction, generation and writing. Returns written paths."""
        if self.state != RunState.IDLE:
            raise RunStateError(
                f"Compiler run already {self.state.value}",
                suggestion="Create a new CompilerRun for each compilation",
            )
        try:
            self._run()
        except Exception:
            self._enter(RunState.FAILED)
            raise
        return self.written

    def _run(self):
        config = self.config

        self._enter(RunState.DISCOVERING)
        filenames = discover_sources(config.source_dir, config.source_suffix, config.entry_name)
        debug_log(f"Discovered {len(filenames)} source unit(s) in {config.source_dir}")

        self._enter(RunState.EXTRACTING)
        sources = []
        for filename in filenames:
            source_code = read_source(os.path.join(config.source_dir, filename))
            sources.append(extract_sections(component_name(filename, config.source_suffix), source_code))

        self._enter(RunState.BUILDING)
        self.registry = build_registry(sources)
        self.artifacts = compile_registry(self.registry, config)

        self._enter(RunState.WRITING)
        try:
            os.makedirs(config.output_dir, exist_ok=True)
        except OSError as e:
            raise FileSystemError.from_os_error("create output directory", config.output_dir, e) from e

        # Module first: if the document write fails the module stays on disk
        for filename, text in (
            (config.module_filename, self.artifacts.module_text),
            (config.html_filename, self.artifacts.html_text),
        ):
            path = os.path.join(config.output_dir, filename)
            write_artifact(path, text)
            self.written.append(path)

        self._enter(RunState.DONE)


def compile_directory(config=None):
    """Compile every source unit of the configured directory. Returns written paths."""
    return CompilerRun(config).execute()
