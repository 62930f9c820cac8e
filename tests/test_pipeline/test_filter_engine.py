"""Tests for building the filtered resume."""

import copy

import pytest

from resume_curator.models.selection import BasicsSelection, SelectionState
from resume_curator.pipeline.filter_engine import (
    build_filtered_resume,
    filter_basics,
    filter_entries,
)

NOTHING = BasicsSelection(
    include_name=False,
    include_label=False,
    include_image=False,
    include_email=False,
    include_phone=False,
    include_url=False,
    include_summary=False,
    include_location=False,
)


class TestFilterEntries:
    def test_subset_in_source_order(self):
        entries = [{"n": 0}, {"n": 1}, {"n": 2}, {"n": 3}]
        result = filter_entries(entries, {3, 1})
        assert result == [{"n": 1}, {"n": 3}]
        assert result[0] is entries[1]
        assert result[1] is entries[3]

    def test_out_of_range_matches_nothing(self):
        assert filter_entries([{"n": 0}], {5, -1}) == []

    def test_missing_source(self):
        assert filter_entries(None, {0}) == []


class TestFilterBasics:
    def test_location_drops_street_level_only(self):
        raw = {"location": {"city": "Paris", "address": "1 Rue", "postalCode": "75001", "region": "IDF"}}
        selection = BasicsSelection(include_location=True, include_street_address=False)
        basics = filter_basics(raw, selection)
        assert basics["location"] == {"city": "Paris", "region": "IDF"}
        # Source untouched
        assert raw["location"]["address"] == "1 Rue"

    def test_location_with_street_address(self):
        raw = {"location": {"city": "Paris", "address": "1 Rue", "postalCode": "75001"}}
        basics = filter_basics(raw, BasicsSelection())
        assert basics["location"] == raw["location"]
        assert basics["location"] is not raw["location"]

    def test_postal_code_dropped_without_street_address(self):
        raw = {"location": {"city": "Oslo", "postalCode": "0150"}}
        basics = filter_basics(raw, BasicsSelection())
        assert basics["location"] == {"city": "Oslo"}

    def test_postal_code_dropped_with_blank_street_address(self):
        raw = {"location": {"city": "Oslo", "address": "", "postalCode": "0150"}}
        basics = filter_basics(raw, BasicsSelection(include_street_address=True))
        assert basics["location"] == {"city": "Oslo"}

    def test_flag_over_absent_field_is_noop(self):
        assert filter_basics({"name": "A"}, BasicsSelection(include_email=True)) == {"name": "A"}

    def test_empty_values_not_copied(self):
        assert filter_basics({"name": "", "email": None}, BasicsSelection()) == {}

    def test_profiles_by_index(self, sample_resume):
        selection = NOTHING.model_copy(update={"selected_profile_indexes": {1}})
        basics = filter_basics(sample_resume["basics"], selection)
        assert basics == {"profiles": [sample_resume["basics"]["profiles"][1]]}
        assert basics["profiles"][0] == {"network": "Mastodon", "username": "@ada@hachyderm.io"}

    def test_no_profiles_selected_omits_key(self, sample_resume):
        basics = filter_basics(sample_resume["basics"], BasicsSelection())
        assert "profiles" not in basics

    def test_non_object_basics(self):
        assert filter_basics("nope", BasicsSelection()) == {}


class TestBuildFilteredResume:
    def test_scenario_work_subset(self):
        document = {
            "work": [{"name": "A"}, {"name": "B"}, {"name": "C"}],
            "education": [],
        }
        state = SelectionState(sections={"work": {0, 2}}, basics=NOTHING)
        result = build_filtered_resume(document, state)
        assert result == {"work": [{"name": "A"}, {"name": "C"}]}
        assert "education" not in result

    def test_strict_subset_is_identical_entries(self, sample_resume):
        state = SelectionState(sections={"skills": {1}}, basics=NOTHING)
        result = build_filtered_resume(sample_resume, state)
        assert len(result["skills"]) == 1
        assert result["skills"][0] is sample_resume["skills"][1]

    def test_chosen_but_emptied_section_present(self, sample_resume):
        state = SelectionState(sections={"work": set(), "skills": {0}}, basics=NOTHING)
        result = build_filtered_resume(sample_resume, state)
        assert result["work"] == []
        assert list(result) == ["work", "skills"]

    def test_section_order_follows_state(self, sample_resume):
        state = SelectionState(sections={"education": {0}, "interests": {0}}, basics=NOTHING)
        assert list(build_filtered_resume(sample_resume, state)) == ["education", "interests"]

    def test_basics_omitted_when_nothing_survives(self, sample_resume):
        state = SelectionState(sections={"work": {0}}, basics=NOTHING)
        assert "basics" not in build_filtered_resume(sample_resume, state)

    def test_location_invariant(self):
        document = {"basics": {"location": {"city": "Leeds", "address": "1 High St", "postalCode": "LS1"}}}
        state = SelectionState(
            basics=BasicsSelection(include_location=True, include_street_address=False)
        )
        location = build_filtered_resume(document, state)["basics"]["location"]
        assert location == {"city": "Leeds"}

    def test_select_all_never_emits_orphan_postal_code(self):
        document = {"basics": {"location": {"city": "Oslo", "postalCode": "0150"}}, "work": [{}]}
        state = SelectionState(sections={"work": {0}}, basics=BasicsSelection())
        result = build_filtered_resume(document, state)
        assert result["basics"] == {"location": {"city": "Oslo"}}
        assert result["work"] == [{}]

    def test_unrecognized_fields_never_emitted(self, sample_resume):
        state = SelectionState.select_all(sample_resume)
        state.sections["volunteer"] = {0}
        result = build_filtered_resume(sample_resume, state)
        assert "volunteer" not in result
        assert "meta" not in result
        assert "$schema" not in result

    def test_does_not_mutate_document(self, sample_resume):
        before = copy.deepcopy(sample_resume)
        state = SelectionState(
            sections={"work": {1}},
            basics=BasicsSelection(include_street_address=False, selected_profile_indexes={0}),
        )
        build_filtered_resume(sample_resume, state)
        assert sample_resume == before

    @pytest.mark.parametrize(
        "sections",
        [{"work": {0, 2}, "skills": {1}}, {"languages": {0, 1}}, {"projects": set()}],
    )
    def test_fixed_point(self, sample_resume, sections):
        first = build_filtered_resume(
            sample_resume,
            SelectionState(
                sections=sections,
                basics=BasicsSelection(include_image=True, selected_profile_indexes={1}),
            ),
        )
        second = build_filtered_resume(first, SelectionState.select_all(first))
        assert second == first
