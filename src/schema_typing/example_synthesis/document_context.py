"""Document context collaborators rendering cross-reference placeholders."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Protocol

from schema_typing.configuration.runtime_settings import MarkupLanguage

_WHITESPACE = re.compile(r"\s+")
_ANCHOR_DROP = re.compile(r"[^a-z0-9_-]")


class DocumentContext(Protocol):
    """Renders a cross reference to a schema anchor inside the generated document."""

    def cross_reference(self, anchor: str, document: str | None = None) -> str: ...


@dataclass(frozen=True)
class MarkupDocumentContext:
    """Cross references in Markdown or AsciiDoc link syntax."""

    markup_language: MarkupLanguage = MarkupLanguage.MARKDOWN
    anchor_prefix: str = ""

    def cross_reference(self, anchor: str, document: str | None = None) -> str:
        target = document or ""
        if self.markup_language is MarkupLanguage.ASCIIDOC:
            normalized = normalize_anchor(self.anchor_prefix + anchor, separator="_")
            if target:
                return f"<<{target}#_{normalized},{anchor}>>"
            return f"<<_{normalized},{anchor}>>"
        normalized = normalize_anchor(self.anchor_prefix + anchor, separator="-")
        return f"[{anchor}]({target}#{normalized})"


def normalize_anchor(anchor: str, *, separator: str) -> str:
    """Lower-case an anchor, fold accents and collapse whitespace into `separator`."""
    folded = unicodedata.normalize("NFKD", anchor).encode("ascii", "ignore").decode("ascii")
    collapsed = _WHITESPACE.sub(separator, folded.strip().lower())
    return _ANCHOR_DROP.sub("", collapsed)
