import argparse
import sys

from compiler import compile_directory, set_verbose
from zmx_core.config import CONFIG_FILE, load_config
from zmx_core.errors import ZmxError

def log(message):
    """Log informational messages to stderr."""
    print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)

def build(config_path=CONFIG_FILE):
    """Compile the configured source directory and return the written paths."""
    config = load_config(config_path)
    set_verbose(config.verbose)
    return compile_directory(config)

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compile .zmx components into a JavaScript module and HTML harness. "
                    f"Settings are read from {CONFIG_FILE} when present."
    )
    parser.parse_args(argv)

    try:
        written = build()
    except ZmxError as e:
        print(f"Error: Compilation Failed:\n{e}", file=sys.stderr)
        return 1

    for path in written:
        log(f"Generated: {path}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
