"""
Immutable data models shared by the compilation pipeline.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ComponentSource(BaseModel):
    """Raw sections of one ZMX source unit."""
    model_config = ConfigDict(frozen=True)

    name: str
    template_text: str = ""
    style_text: str = ""
    # Parsed but never emitted.
    script_text: str = ""


class Placeholder(BaseModel):
    """A `{name}` or `{name:default}` token from template text."""
    model_config = ConfigDict(frozen=True)

    name: str
    default: Optional[str] = None


class ComponentDescriptor(BaseModel):
    """A component as registered: its template, style and prop names."""
    model_config = ConfigDict(frozen=True)

    name: str
    template_text: str
    style_text: str
    prop_names: List[str]


class Artifacts(BaseModel):
    """Generated module and host document text, before being written."""
    model_config = ConfigDict(frozen=True)

    module_text: str
    html_text: str
