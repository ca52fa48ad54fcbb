"""Default settings schema for zotsync.

Every recognized settings section is declared here as a dataclass whose
field defaults are the canonical default values. ``get_defaults()`` builds a
fresh instance of each section on every call, so callers can merge into or
mutate the result without leaking changes into later calls.

Usage:
    from zotsync.core.defaults import get_defaults, SECTION_NAMES

    defaults = get_defaults()
    print(defaults["other"]["autoload"])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

# =============================================================================
# Static tables
# =============================================================================

TYPEMAP_DEFAULT: dict[str, str] = {
    "artwork": "Illustration",
    "audioRecording": "Recording",
    "bill": "Legislation",
    "blogPost": "Blog Post",
    "book": "Book",
    "bookSection": "Chapter",
    "case": "Legal case",
    "computerProgram": "Data",
    "conferencePaper": "Conference",
    "document": "Document",
    "email": "Letter",
    "encyclopediaArticle": "Encyclopaedia Article",
    "film": "Film",
    "forumPost": "Forum Post",
    "hearing": "Hearing",
    "instantMessage": "Instant Message",
    "interview": "Interview",
    "journalArticle": "Article",
    "letter": "Letter",
    "magazineArticle": "Magazine Article",
    "manuscript": "Manuscript",
    "map": "Image",
    "newspaperArticle": "Newspaper Article",
    "patent": "Patent",
    "podcast": "Podcast",
    "presentation": "Presentation",
    "radioBroadcast": "Radio Broadcast",
    "report": "Report",
    "statute": "Statute",
    "thesis": "Thesis",
    "tvBroadcast": "TV Broadcast",
    "videoRecording": "Recording",
    "webpage": "Webpage",
}

PAGE_MENU_DEFAULTS: tuple[str, ...] = (
    "addMetadata",
    "importNotes",
    "viewItemInfo",
    "openZoteroLocal",
    "openZoteroWeb",
    "pdfLinks",
    "sciteBadge",
    "connectedPapers",
    "semanticScholar",
    "googleScholar",
    "citingPapers",
)

# Commands that can be bound to a keyboard shortcut, with their default binding
SHORTCUT_DEFAULTS: dict[str, str] = {
    "closeSearchPanel": "Escape",
    "copyDefault": "",
    "copyCitation": "",
    "copyCitekey": "",
    "copyPageRef": "",
    "copyTag": "",
    "focusSearchBar": "",
    "goToItemPage": "",
    "importMetadata": "",
    "toggleDashboard": "",
    "toggleNotes": "alt+N",
    "toggleQuickCopy": "",
    "toggleSearchPanel": "alt+E",
    "toggleSettingsPanel": "",
}


# =============================================================================
# Section dataclasses
# =============================================================================


@dataclass
class AnnotationsSettings:
    """How Zotero annotations are formatted when imported."""

    func: str = ""
    group_by: Any = False
    template_comment: str = "{{comment}}"
    template_highlight: str = "[[>]] {{highlight}} ([p. {{page_label}}]({{link_page}})) {{tags_string}}"
    use: str = "default"
    with_: str = "formatted"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (stored key names)."""
        return {
            "func": self.func,
            "group_by": self.group_by,
            "template_comment": self.template_comment,
            "template_highlight": self.template_highlight,
            "use": self.use,
            "__with": self.with_,
        }


@dataclass
class AutocompleteSettings:
    """Inline citation autocomplete."""

    display_char: str = ""
    display_use: str = "preset"
    display: str = "citekey"
    format_char: str = ""
    format_use: str = "preset"
    format: str = "citation"
    trigger: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "display_char": self.display_char,
            "display_use": self.display_use,
            "display": self.display,
            "format_char": self.format_char,
            "format_use": self.format_use,
            "format": self.format,
            "trigger": self.trigger,
        }


@dataclass
class CopySettings:
    """Copy-to-clipboard behavior for items."""

    always: bool = False
    override_key: str = "shiftKey"
    preset: str = "citekey"
    template: str = "@{{key}}"
    use_as_default: str = "preset"
    use_quick_copy: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (stored key names)."""
        return {
            "always": self.always,
            "overrideKey": self.override_key,
            "preset": self.preset,
            "template": self.template,
            "useAsDefault": self.use_as_default,
            "useQuickCopy": self.use_quick_copy,
        }


@dataclass
class SmartblockConfig:
    """Parameters passed to a SmartBlock when importing metadata."""

    param: str = "srcUid"
    param_value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"param": self.param, "paramValue": self.param_value}


@dataclass
class MetadataSettings:
    """Metadata import settings."""

    func: str = ""
    smartblock: SmartblockConfig = field(default_factory=SmartblockConfig)
    use: str = "default"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "func": self.func,
            "smartblock": self.smartblock.to_dict(),
            "use": self.use,
        }


@dataclass
class NotesSettings:
    """Zotero notes import settings."""

    func: str = ""
    nest_char: str = ""
    nest_position: str = "top"
    nest_preset: str = "[[Notes]]"
    nest_use: str = "preset"
    split_char: str = ""
    split_preset: str = "\n"
    split_use: str = "preset"
    use: str = "text"
    with_: str = "text"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (stored key names)."""
        return {
            "func": self.func,
            "nest_char": self.nest_char,
            "nest_position": self.nest_position,
            "nest_preset": self.nest_preset,
            "nest_use": self.nest_use,
            "split_char": self.split_char,
            "split_preset": self.split_preset,
            "split_use": self.split_use,
            "use": self.use,
            "__with": self.with_,
        }


@dataclass
class OtherSettings:
    """Miscellaneous toggles."""

    autoload: bool = False
    cache_enabled: bool = False
    dark_theme: bool = False
    render_inline: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (stored key names)."""
        return {
            "autoload": self.autoload,
            "cacheEnabled": self.cache_enabled,
            "darkTheme": self.dark_theme,
            "render_inline": self.render_inline,
        }


@dataclass
class PageMenuSettings:
    """Entries shown in the item page menu."""

    defaults: list[str] = field(default_factory=lambda: list(PAGE_MENU_DEFAULTS))
    trigger: Any = "default"

    def to_dict(self) -> dict[str, Any]:
        return {"defaults": list(self.defaults), "trigger": self.trigger}


@dataclass
class SciteBadgeSettings:
    """scite.ai badge display."""

    layout: str = "horizontal"
    show_labels: bool = False
    show_zero: bool = True
    small: bool = False
    tooltip_placement: str = "auto"
    tooltip_slide: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (stored key names)."""
        return {
            "layout": self.layout,
            "showLabels": self.show_labels,
            "showZero": self.show_zero,
            "small": self.small,
            "tooltipPlacement": self.tooltip_placement,
            "tooltipSlide": self.tooltip_slide,
        }


@dataclass
class ShortcutsSettings:
    """Keyboard shortcuts, keyed by command name."""

    bindings: dict[str, str] = field(default_factory=lambda: dict(SHORTCUT_DEFAULTS))

    def to_dict(self) -> dict[str, Any]:
        return dict(self.bindings)


@dataclass
class TypemapSettings:
    """Display label for each Zotero item type."""

    labels: dict[str, str] = field(default_factory=lambda: dict(TYPEMAP_DEFAULT))

    def to_dict(self) -> dict[str, Any]:
        return dict(self.labels)


@dataclass
class WebimportSettings:
    """Web import (Zotero connector) settings."""

    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"tags": list(self.tags)}


# =============================================================================
# Registry
# =============================================================================

_SECTION_FACTORIES: dict[str, Callable[[], Any]] = {
    "annotations": AnnotationsSettings,
    "autocomplete": AutocompleteSettings,
    "copy": CopySettings,
    "metadata": MetadataSettings,
    "notes": NotesSettings,
    "other": OtherSettings,
    "pageMenu": PageMenuSettings,
    "sciteBadge": SciteBadgeSettings,
    "shortcuts": ShortcutsSettings,
    "typemap": TypemapSettings,
    "webimport": WebimportSettings,
}

SECTION_NAMES: tuple[str, ...] = tuple(_SECTION_FACTORIES)


def get_section_defaults(name: str) -> dict[str, Any]:
    """Return a fresh default value for one settings section.

    Raises:
        KeyError: If ``name`` is not a recognized section
    """
    factory = _SECTION_FACTORIES[name]
    return factory().to_dict()


def get_defaults() -> dict[str, Any]:
    """Return a freshly constructed, fully-populated default settings object."""
    return {name: get_section_defaults(name) for name in SECTION_NAMES}
