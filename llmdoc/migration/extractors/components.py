"""
Component extraction: one markdown file per component.

The id comes from the file stem (auth_service.md -> comp-auth-service);
the display name is the file's top-level heading when it has one.
"""

from pathlib import Path
from typing import Iterator

from llmdoc.migration import vocab
from llmdoc.migration.extractors.base import Extractor, list_markdown
from llmdoc.migration.markdown import (
    extract_field,
    extract_items,
    extract_section,
    first_heading,
)
from llmdoc.migration.models import Category, Component, Span
from llmdoc.migration.vocab import ComponentType

DESCRIPTION_SECTIONS = ("Overview", "Purpose")


def component_id(path: Path) -> str:
    return "comp-" + path.stem.replace('_', '-')


def _section_items(text: str, name: str) -> list[str]:
    body = extract_section(text, name)
    return extract_items(body) if body else []


class ComponentExtractor(Extractor):
    category = Category.COMPONENT

    def source_root(self) -> Path:
        return self.layout.components_dir

    def find_sources(self) -> list[Path]:
        return list_markdown(self.layout.components_dir)

    def split_spans(self, source: Path, text: str) -> Iterator[Span]:
        yield Span(source=source, ref=component_id(source), text=text)

    def parse_span(self, span: Span) -> Component:
        text = span.text
        component = Component(id=span.ref, name=first_heading(text) or span.ref)

        # Absent means the usual case; present but unknown means "other"
        declared_type = extract_field(text, "Type")
        if declared_type:
            component.component_type = vocab.COMPONENT_TYPE.normalize(declared_type)
        else:
            component.component_type = ComponentType.MODULE

        for name in DESCRIPTION_SECTIONS:
            description = extract_section(text, name)
            if description:
                component.description = description
                break

        component.dependencies = _section_items(text, "Dependencies")
        component.interfaces = _section_items(text, "Interfaces")
        component.tech_stack = _section_items(text, "Tech Stack")
        component.owner = extract_field(text, "Owner")
        return component
