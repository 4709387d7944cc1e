"""Unit tests for FilterSelectionEngine."""

from unittest.mock import Mock

import pytest

from car_catalog.application.dtos.filters import DEFAULT_FILTER_SECTIONS, FilterOption, FilterSection
from car_catalog.application.use_cases.filter_selection_engine import FilterSelectionEngine
from car_catalog.domain.value_objects.tag_variant import TagVariant


@pytest.fixture
def sections() -> list[FilterSection]:
    """Two-section layout used by most tests."""
    return [
        FilterSection(
            id="carType",
            title="CAR TYPE",
            options=(
                FilterOption(id="manual", label="Manual", value="manual"),
                FilterOption(id="automatic", label="Automatic", value="automatic"),
            ),
        ),
        FilterSection(
            id="specs",
            title="SPECIFICATIONS",
            options=(
                FilterOption(id="engineA", label="Engine A", value="engineA"),
                FilterOption(id="engineB", label="Engine B", value="engineB"),
            ),
        ),
    ]


class TestFilterSelectionEngine:
    """Test cases for FilterSelectionEngine."""

    def test_initial_state_is_empty_and_expanded(self, sections) -> None:
        """Test a fresh engine has no selection and every section expanded."""
        engine = FilterSelectionEngine(sections)

        assert engine.selection == {}
        assert engine.visibility == {"carType": True, "specs": True}
        assert engine.multi_select is True

    def test_defaults_used_when_no_sections_given(self) -> None:
        """Test the default catalog sections are used when none are provided."""
        engine = FilterSelectionEngine()

        assert engine.sections == DEFAULT_FILTER_SECTIONS
        assert [section.id for section in engine.sections] == ["carType", "specifications"]
        assert engine.is_expanded("specifications") is True

    def test_seeded_from_initial_selection(self, sections) -> None:
        """Test the engine starts from a copy of the initial map."""
        initial = {"carType": ["manual"]}
        engine = FilterSelectionEngine(sections, initial_selection=initial)

        assert engine.selected("carType") == frozenset({"manual"})
        engine.toggle_option("carType", "automatic")
        assert initial == {"carType": ["manual"]}

    def test_duplicate_section_ids_rejected(self, sections) -> None:
        """Test construction fails when two sections share an id."""
        with pytest.raises(ValueError, match="Duplicate filter section ids: carType"):
            FilterSelectionEngine([sections[0], sections[0]])

    def test_toggle_twice_restores_prior_set(self, sections) -> None:
        """Test toggling the same value twice is an involution."""
        engine = FilterSelectionEngine(sections, initial_selection={"specs": {"engineB"}})

        before = engine.selected("specs")
        engine.toggle_option("specs", "engineA")
        engine.toggle_option("specs", "engineA")

        assert engine.selected("specs") == before

    def test_involution_in_single_select_mode(self, sections) -> None:
        """Test involution also holds when a toggle replaced the section."""
        engine = FilterSelectionEngine(sections, multi_select=False)

        engine.toggle_option("carType", "manual")
        engine.toggle_option("carType", "manual")

        assert engine.selected("carType") == frozenset()

    def test_multi_select_accumulates(self, sections) -> None:
        """Test multi-select toggles build up a set."""
        engine = FilterSelectionEngine(sections, multi_select=True)

        engine.toggle_option("specs", "engineA")
        engine.toggle_option("specs", "engineB")

        assert engine.selected("specs") == frozenset({"engineA", "engineB"})

    def test_single_select_replaces(self, sections) -> None:
        """Test single-select toggles replace the section's set."""
        engine = FilterSelectionEngine(sections, multi_select=False)

        assert engine.toggle_option("carType", "manual") == {"carType": frozenset({"manual"})}
        assert engine.toggle_option("carType", "automatic") == {"carType": frozenset({"automatic"})}

    def test_single_select_keeps_other_sections(self, sections) -> None:
        """Test single-select only replaces within the toggled section."""
        engine = FilterSelectionEngine(sections, multi_select=False)

        engine.toggle_option("carType", "manual")
        engine.toggle_option("specs", "engineA")

        assert engine.selection == {
            "carType": frozenset({"manual"}),
            "specs": frozenset({"engineA"}),
        }

    def test_removal_is_symmetric_in_single_select(self, sections) -> None:
        """Test a selected value is removed even in single-select mode."""
        engine = FilterSelectionEngine(
            sections, initial_selection={"specs": ["engineA", "engineB"]}, multi_select=False
        )

        engine.toggle_option("specs", "engineA")

        assert engine.selected("specs") == frozenset({"engineB"})

    def test_toggle_returns_detached_copy(self, sections) -> None:
        """Test a returned selection is not affected by later toggles."""
        engine = FilterSelectionEngine(sections)

        first = engine.toggle_option("carType", "manual")
        engine.toggle_option("carType", "automatic")

        assert first == {"carType": frozenset({"manual"})}

    def test_unknown_section_creates_entry(self, sections) -> None:
        """Test toggling in an undeclared section is permitted."""
        engine = FilterSelectionEngine(sections)

        engine.toggle_option("color", "red")

        assert engine.selected("color") == frozenset({"red"})

    def test_reset_clears_selection_but_not_visibility(self, sections) -> None:
        """Test reset empties every section and keeps visibility."""
        engine = FilterSelectionEngine(sections, initial_selection={"carType": ["manual"]})
        engine.toggle_option("specs", "engineA")
        engine.toggle_visibility("specs")
        visibility_before = engine.visibility

        engine.reset()

        assert engine.selected("carType") == frozenset()
        assert engine.selected("specs") == frozenset()
        assert engine.visibility == visibility_before

    def test_toggle_visibility(self, sections) -> None:
        """Test visibility flips per section."""
        engine = FilterSelectionEngine(sections)

        assert engine.toggle_visibility("carType") is False
        assert engine.is_expanded("carType") is False
        assert engine.is_expanded("specs") is True
        assert engine.toggle_visibility("carType") is True

    def test_toggle_visibility_unknown_section(self, sections) -> None:
        """Test an unknown section reads as collapsed and the first toggle expands it."""
        engine = FilterSelectionEngine(sections)

        assert engine.is_expanded("color") is False
        assert engine.toggle_visibility("color") is True
        assert engine.visibility["color"] is True

    def test_initial_visibility_override(self, sections) -> None:
        """Test visibility overrides apply on top of the all-expanded default."""
        engine = FilterSelectionEngine(sections, initial_visibility={"specs": False})

        assert engine.visibility == {"carType": True, "specs": False}

    def test_commit_does_not_mutate_and_notifies_once(self, sections) -> None:
        """Test commit externalizes the selection once per call."""
        on_apply = Mock()
        engine = FilterSelectionEngine(sections, on_apply=on_apply)
        engine.toggle_option("carType", "manual")

        first = engine.commit()
        second = engine.commit()

        assert first == second == {"carType": frozenset({"manual"})}
        assert engine.selection == first
        assert on_apply.call_count == 2
        on_apply.assert_called_with({"carType": frozenset({"manual"})})

    def test_seed_replaces_draft(self, sections) -> None:
        """Test seeding swaps in a fresh copy of the given map."""
        engine = FilterSelectionEngine(sections)
        engine.toggle_option("carType", "manual")

        engine.seed({"specs": ["engineB"]})

        assert engine.selection == {"specs": frozenset({"engineB"})}

    def test_option_variant(self, sections) -> None:
        """Test selected options render with the selected filter variant."""
        engine = FilterSelectionEngine(sections)
        engine.toggle_option("carType", "manual")

        assert engine.option_variant("carType", "manual") is TagVariant.FILTER_SELECTED
        assert engine.option_variant("carType", "automatic") is TagVariant.FILTER

    def test_scenario_multi_select_then_commit(self, sections) -> None:
        """Test the toggle/untoggle/commit walk-through across two sections."""
        on_apply = Mock()
        engine = FilterSelectionEngine(sections, multi_select=True, on_apply=on_apply)

        assert engine.toggle_option("carType", "manual") == {"carType": frozenset({"manual"})}
        assert engine.toggle_option("specs", "engineA") == {
            "carType": frozenset({"manual"}),
            "specs": frozenset({"engineA"}),
        }
        assert engine.toggle_option("carType", "manual") == {
            "carType": frozenset(),
            "specs": frozenset({"engineA"}),
        }

        engine.commit()

        on_apply.assert_called_once_with({"carType": frozenset(), "specs": frozenset({"engineA"})})
