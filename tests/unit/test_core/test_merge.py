"""Tests for the settings merger."""

import copy

import pytest

from zotsync.core.defaults import SECTION_NAMES, get_defaults
from zotsync.core.merge import MergeResult, merge, setup_initial_settings


class TestEmptyInput:
    """Absent or unusable input behaves like an empty mapping."""

    @pytest.mark.parametrize("raw", [None, {}, "not a mapping", 42, ["annotations"]])
    def test_returns_defaults(self, raw):
        result = merge(raw)
        assert result.settings == get_defaults()
        assert result.missing_top_level_keys == list(SECTION_NAMES)
        assert result.is_complete is False

    def test_setup_initial_settings_has_all_sections(self):
        settings = setup_initial_settings({})
        for name in SECTION_NAMES:
            assert name in settings


class TestUserValues:
    """User values win over defaults."""

    def test_merges_user_settings_with_defaults(self):
        raw = {"other": {"autoload": True, "cacheEnabled": True, "darkTheme": True, "render_inline": True}}
        settings = setup_initial_settings(raw)
        assert settings["other"] == raw["other"]
        assert settings["annotations"] == get_defaults()["annotations"]

    def test_partial_section_is_filled(self):
        raw = {"annotations": {"use": "function"}, "shortcuts": {"toggleDashboard": "ctrl+shift+z"}}
        settings = setup_initial_settings(raw)
        assert settings["annotations"]["use"] == "function"
        assert settings["annotations"]["func"] == ""
        assert settings["annotations"]["group_by"] is False
        assert settings["shortcuts"]["toggleDashboard"] == "ctrl+shift+z"
        assert settings["shortcuts"]["toggleNotes"] == "alt+N"

    @pytest.mark.parametrize("value", [False, "", 0, None, []])
    def test_falsy_values_are_kept(self, value):
        settings = setup_initial_settings({"sciteBadge": {"showZero": value}})
        assert settings["sciteBadge"]["showZero"] == value

    def test_list_value_replaces_default(self):
        settings = setup_initial_settings({"pageMenu": {"defaults": ["pdfLinks"]}})
        assert settings["pageMenu"]["defaults"] == ["pdfLinks"]

    def test_nested_record_is_merged(self):
        settings = setup_initial_settings({"metadata": {"smartblock": {"paramValue": "Import"}}})
        assert settings["metadata"]["smartblock"] == {"param": "srcUid", "paramValue": "Import"}
        assert settings["metadata"]["use"] == "default"

    def test_typemap_override(self):
        settings = setup_initial_settings({"typemap": {"book": "Monograph"}})
        assert settings["typemap"]["book"] == "Monograph"
        assert settings["typemap"]["journalArticle"] == "Article"


class TestMissingKeys:
    """Only absent sections are reported as missing."""

    def test_reports_absent_sections_in_schema_order(self):
        result = merge({"typemap": {}, "annotations": {"use": "function"}})
        assert "annotations" not in result.missing_top_level_keys
        assert "typemap" not in result.missing_top_level_keys
        assert result.missing_top_level_keys == [n for n in SECTION_NAMES if n not in ("annotations", "typemap")]

    def test_empty_section_is_not_missing(self):
        result = merge({"other": {}})
        assert "other" not in result.missing_top_level_keys
        assert result.settings["other"] == get_defaults()["other"]

    def test_complete_input(self):
        result = merge(get_defaults())
        assert result.missing_top_level_keys == []
        assert result.is_complete is True


class TestMalformedSections:
    """Non-mapping sections and records fall back to defaults in memory."""

    def test_non_mapping_section(self):
        result = merge({"other": "yes"})
        assert result.settings["other"] == get_defaults()["other"]
        assert "other" not in result.missing_top_level_keys

    def test_non_mapping_nested_record(self):
        settings = setup_initial_settings({"metadata": {"smartblock": None, "use": "smartblock"}})
        assert settings["metadata"]["smartblock"] == {"param": "srcUid", "paramValue": ""}
        assert settings["metadata"]["use"] == "smartblock"


class TestPassThrough:
    """Unrecognized keys are preserved."""

    def test_unknown_top_level_key(self):
        settings = setup_initial_settings({"futureSection": {"enabled": True}})
        assert settings["futureSection"] == {"enabled": True}

    def test_unknown_leaf_key(self):
        settings = setup_initial_settings({"other": {"experimental": "on"}})
        assert settings["other"]["experimental"] == "on"
        assert settings["other"]["autoload"] is False


class TestNoAliasing:
    """The merge never mutates or shares objects with its input."""

    def test_input_not_mutated(self):
        raw = {"annotations": {"use": "function"}, "pageMenu": {"defaults": ["pdfLinks"]}}
        before = copy.deepcopy(raw)
        merge(raw)
        assert raw == before

    def test_result_does_not_share_objects_with_input(self):
        raw = {"pageMenu": {"defaults": ["pdfLinks"]}, "extra": {"nested": [1]}}
        settings = merge(raw).settings
        settings["pageMenu"]["defaults"].append("sciteBadge")
        settings["extra"]["nested"].append(2)
        assert raw["pageMenu"]["defaults"] == ["pdfLinks"]
        assert raw["extra"]["nested"] == [1]


def test_merge_result_default_missing_list():
    result = MergeResult(settings={})
    assert result.missing_top_level_keys == []
