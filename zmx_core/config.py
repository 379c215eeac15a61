"""
Compiler configuration.

Every setting has a default, so a project without a config file compiles
`.` into `./dist`. A `zmx.json` next to the invocation overrides them.
"""
import json
import os

from pydantic import BaseModel, ConfigDict, ValidationError

from zmx_core.errors import ConfigError

CONFIG_FILE = "zmx.json"


class CompilerConfig(BaseModel):
    """Settings for one compiler run."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    source_dir: str = "."
    output_dir: str = "./dist"
    source_suffix: str = ".zmx"
    entry_name: str = "main"
    module_filename: str = "components.js"
    html_filename: str = "index.html"
    root_id: str = "generated-component-container"
    component_attribute: str = "data-component"
    title: str = "Generated Components"
    verbose: bool = False


def load_config(path=CONFIG_FILE):
    """Load configuration from a JSON file, falling back to defaults if absent."""
    if not os.path.exists(path):
        return CompilerConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Could not read config: {e.strerror or e}", path=path) from e
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON at line {e.lineno}, column {e.colno}",
            path=path,
            suggestion="The config file must be a single JSON object",
        ) from e

    if not isinstance(data, dict):
        raise ConfigError("Config must be a JSON object", path=path)

    try:
        return CompilerConfig.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigError(
            f"Invalid config value(s): {fields}",
            path=path,
            suggestion="Check the setting names and types",
        ) from e
