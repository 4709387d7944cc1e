"""Filter dialog use case with explicit draft and applied selections."""

from typing import Any, Callable, Iterable, Mapping, Optional

from car_catalog.application.dtos.filters import (
    FilterSection,
    SelectionState,
    copy_selection,
    selections_equal,
)
from car_catalog.application.ports.input_event_source import InputEventSource
from car_catalog.application.use_cases.dismissal_scope import DismissalScope
from car_catalog.application.use_cases.filter_selection_engine import FilterSelectionEngine
from car_catalog.domain.value_objects.tag_variant import TagVariant

FILTER_DIALOG_REGION = "filter-dialog"


class FilterDialogUseCase:
    """Use case for the filter dialog.

    The applied selection is what the host list renders. Opening the dialog
    copies it into a fresh draft engine; apply commits the draft back, while
    cancel (close button, escape, outside click) throws the draft away.
    """

    def __init__(
        self,
        on_apply: Callable[[SelectionState], None],
        sections: Iterable[FilterSection] = (),
        multi_select: bool = True,
        initial_filters: Optional[Mapping[str, Iterable[str]]] = None,
        event_source: Optional[InputEventSource] = None,
        logger: Optional[Callable[..., None]] = None,
        dismissal_logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize filter dialog use case.

        Args:
            on_apply: Host callback receiving the committed selection
            sections: Declared filter sections (defaults are used when empty)
            multi_select: Allow several values per section
            initial_filters: Selection already applied to the host list
            event_source: Optional input event source for escape / outside-click dismissal
            logger: Optional logger function (component, **kwargs)
            dismissal_logger: Optional logger for dismissal events
        """
        self._on_apply = on_apply
        self._multi_select = multi_select
        self._logger = logger
        self._applied: SelectionState = copy_selection(initial_filters or {})

        # Validates the sections once; drafts are rebuilt from these.
        probe = FilterSelectionEngine(sections, multi_select=multi_select)
        self._sections = probe.sections
        self._visibility = probe.visibility

        self._draft: Optional[FilterSelectionEngine] = None
        self._dismissal: Optional[DismissalScope] = None
        if event_source is not None:
            self._dismissal = DismissalScope(
                event_source,
                FILTER_DIALOG_REGION,
                on_dismiss=lambda _reason: self.cancel(),
                logger=dismissal_logger,
            )

    def _log(self, **kwargs: Any) -> None:
        """
        Log event if logger is available.

        Args:
            **kwargs: Additional log fields
        """
        if self._logger:
            self._logger("filter_dialog", **kwargs)

    @property
    def is_open(self) -> bool:
        return self._draft is not None

    @property
    def sections(self) -> tuple[FilterSection, ...]:
        return self._sections

    @property
    def applied_selection(self) -> SelectionState:
        """Get a copy of the last applied selection."""
        return dict(self._applied)

    @property
    def draft_selection(self) -> SelectionState:
        """Get a copy of the draft selection (raises if the dialog is closed)."""
        return self._require_draft().selection

    def _require_draft(self) -> FilterSelectionEngine:
        if self._draft is None:
            raise RuntimeError("Filter dialog is not open")
        return self._draft

    def open(self) -> None:
        """Open the dialog with a draft seeded from the applied selection."""
        if self._draft is not None:
            return
        self._draft = FilterSelectionEngine(
            self._sections,
            initial_selection=self._applied,
            multi_select=self._multi_select,
            initial_visibility=self._visibility,
            on_apply=self._handle_commit,
        )
        if self._dismissal is not None:
            self._dismissal.acquire()
        self._log(action="open", applied_sections=sorted(self._applied))

    def toggle_section(self, section_id: str) -> bool:
        """Expand or collapse a section; the state survives reopening."""
        expanded = self._require_draft().toggle_visibility(section_id)
        self._visibility[section_id] = expanded
        return expanded

    def toggle_option(self, section_id: str, value: str) -> SelectionState:
        """Toggle an option in the draft."""
        return self._require_draft().toggle_option(section_id, value)

    def is_selected(self, section_id: str, value: str) -> bool:
        return self._require_draft().is_selected(section_id, value)

    def is_expanded(self, section_id: str) -> bool:
        return self._visibility.get(section_id, False)

    def option_variant(self, section_id: str, value: str) -> TagVariant:
        return self._require_draft().option_variant(section_id, value)

    def reset(self) -> None:
        """Clear the draft. The applied selection only changes on apply."""
        self._require_draft().reset()
        self._log(action="reset")

    def apply(self) -> SelectionState:
        """
        Commit the draft, hand it to the host and close the dialog.

        Returns:
            The applied selection

        Raises:
            RuntimeError: If the dialog is not open
        """
        draft = self._require_draft()
        try:
            return draft.commit()
        finally:
            self._close()

    def cancel(self) -> None:
        """Close without applying; the draft is discarded."""
        if self._draft is None:
            return
        self._close()
        self._log(action="cancel")

    def dispose(self) -> None:
        """Tear down the dialog, releasing any listener it holds."""
        self._close()

    def _handle_commit(self, selection: SelectionState) -> None:
        changed = not selections_equal(self._applied, selection)
        self._applied = copy_selection(selection)
        self._log(action="apply", filters=self._applied, changed=changed)
        self._on_apply(dict(self._applied))

    def _close(self) -> None:
        if self._dismissal is not None:
            self._dismissal.release()
        self._draft = None
