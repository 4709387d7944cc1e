"""Filter selection engine: draft toggles, visibility and commit for the filter dialog."""

from typing import Callable, Iterable, Mapping, Optional

from car_catalog.application.dtos.filters import (
    DEFAULT_FILTER_SECTIONS,
    FilterSection,
    SelectionState,
    copy_selection,
)
from car_catalog.domain.value_objects.tag_variant import TagVariant


class FilterSelectionEngine:
    """State machine for per-section option selection.

    Every toggle replaces the selection map with a new one; the previous map
    handed out to callers is never mutated.
    """

    def __init__(
        self,
        sections: Iterable[FilterSection] = (),
        initial_selection: Optional[Mapping[str, Iterable[str]]] = None,
        multi_select: bool = True,
        initial_visibility: Optional[Mapping[str, bool]] = None,
        on_apply: Optional[Callable[[SelectionState], None]] = None,
    ) -> None:
        """
        Initialize filter selection engine.

        Args:
            sections: Declared filter sections; the default catalog sections are used when empty
            initial_selection: Optional seed selection (section id -> values)
            multi_select: Allow several values per section; otherwise each toggle replaces
            initial_visibility: Optional expand/collapse overrides per section id
            on_apply: Optional callback invoked once per commit with the selection

        Raises:
            ValueError: If two sections share the same id
        """
        provided = tuple(sections)
        self._sections: tuple[FilterSection, ...] = provided or DEFAULT_FILTER_SECTIONS

        section_ids = [section.id for section in self._sections]
        duplicates = sorted({sid for sid in section_ids if section_ids.count(sid) > 1})
        if duplicates:
            raise ValueError(f"Duplicate filter section ids: {', '.join(duplicates)}")

        self._multi_select = multi_select
        self._on_apply = on_apply
        self._selection: SelectionState = copy_selection(initial_selection or {})
        self._visibility: dict[str, bool] = {section_id: True for section_id in section_ids}
        if initial_visibility:
            self._visibility.update(initial_visibility)

    @property
    def sections(self) -> tuple[FilterSection, ...]:
        """Get the active filter sections in display order."""
        return self._sections

    @property
    def multi_select(self) -> bool:
        """Whether a section may hold more than one selected value."""
        return self._multi_select

    @property
    def selection(self) -> SelectionState:
        """Get a copy of the current draft selection."""
        return dict(self._selection)

    @property
    def visibility(self) -> dict[str, bool]:
        """Get a copy of the expand/collapse state."""
        return dict(self._visibility)

    def selected(self, section_id: str) -> frozenset[str]:
        """Get the selected values for a section (empty if none)."""
        return self._selection.get(section_id, frozenset())

    def is_selected(self, section_id: str, value: str) -> bool:
        """Check whether a value is selected in a section."""
        return value in self.selected(section_id)

    def is_expanded(self, section_id: str) -> bool:
        """Check whether a section's options are shown. Unknown sections read as collapsed."""
        return self._visibility.get(section_id, False)

    def option_variant(self, section_id: str, value: str) -> TagVariant:
        """Get the tag variant an option pill should render with."""
        return TagVariant.for_filter_option(self.is_selected(section_id, value))

    def toggle_visibility(self, section_id: str) -> bool:
        """
        Flip a section between expanded and collapsed.

        Args:
            section_id: Section identifier; unknown ids get an entry

        Returns:
            New expanded state
        """
        expanded = not self.is_expanded(section_id)
        self._visibility[section_id] = expanded
        return expanded

    def toggle_option(self, section_id: str, value: str) -> SelectionState:
        """
        Toggle a value in a section.

        A selected value is removed whatever the mode. An unselected value is
        added in multi-select mode, or replaces the whole section otherwise.

        Args:
            section_id: Section identifier; unknown ids get an entry
            value: Option value (not the option id)

        Returns:
            Copy of the new selection
        """
        current = self.selected(section_id)
        if value in current:
            updated = current - {value}
        elif self._multi_select:
            updated = current | {value}
        else:
            updated = frozenset([value])

        selection = dict(self._selection)
        selection[section_id] = updated
        self._selection = selection
        return self.selection

    def reset(self) -> None:
        """Clear every section's selection. Visibility is kept."""
        self._selection = {}

    def seed(self, selection: Mapping[str, Iterable[str]]) -> None:
        """Replace the draft with a copy of the given selection."""
        self._selection = copy_selection(selection)

    def commit(self) -> SelectionState:
        """
        Externalize the current selection.

        The selection is left as is; calling commit twice yields equal results.

        Returns:
            Copy of the selection passed to on_apply
        """
        committed = self.selection
        if self._on_apply:
            self._on_apply(dict(committed))
        return committed
