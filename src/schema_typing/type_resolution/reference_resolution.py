"""Reference resolver collaborators mapping schema names to document locations."""

from __future__ import annotations

from schema_typing.configuration.runtime_settings import RenderingSettings

from .type_resolver import RefResolver


def resolve_locally(simple_ref: str) -> str | None:
    """Resolver for single-document output: every reference is a local anchor."""
    return None


def build_definition_document_resolver(settings: RenderingSettings) -> RefResolver:
    """Build a resolver returning the document that holds a named definition."""
    cross_references = settings.cross_references
    if not cross_references.inter_document:
        return resolve_locally

    extension = settings.markup.language.file_extension

    def resolve(simple_ref: str) -> str | None:
        if cross_references.separated_definitions:
            document = f"{cross_references.definitions_document}/{simple_ref}{extension}"
        else:
            document = f"{cross_references.definitions_document}{extension}"
        return f"{cross_references.prefix}{document}"

    return resolve
