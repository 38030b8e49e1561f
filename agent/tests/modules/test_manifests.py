"""Tests for module manifests: tool definitions must be valid.

These tests import each module's manifest and verify structural correctness:
tool names follow conventions, required fields are present, and parameter
types are valid.
"""

from __future__ import annotations

import importlib

import pytest

# Modules that have a manifest.py with a MANIFEST object.
MODULE_MANIFESTS = [
    "modules.intervals.manifest",
]

VALID_PARAM_TYPES = {"string", "integer", "number", "boolean", "array", "object"}
VALID_PERMISSION_LEVELS = {"guest", "user", "admin", "owner"}

INTERVALS_ACTIONS = {
    "get_athlete_profile",
    "get_activities",
    "get_activity_detail",
    "get_activity_intervals",
    "get_activity_power_curve",
    "get_activity_streams",
    "get_wellness",
    "get_wellness_for_date",
    "get_power_curves",
    "get_pace_curves",
    "get_hr_curves",
    "get_events",
    "get_gear",
    "search_activities",
    "get_athlete_summary",
    "get_power_hr_curve",
    "get_activities_with_details",
    "get_recent_activities_with_details",
    "get_max_activity_data",
    "check_activity_source",
}


def _all_manifests():
    return [(path, importlib.import_module(path).MANIFEST) for path in MODULE_MANIFESTS]


# ===================================================================
# Parametrized tests
# ===================================================================


@pytest.mark.parametrize(
    "module_path,manifest",
    _all_manifests(),
    ids=MODULE_MANIFESTS,
)
class TestManifestStructure:
    """Structural validation for module manifests."""

    def test_module_name_is_set(self, module_path, manifest):
        assert manifest.module_name, f"{module_path}: module_name is empty"

    def test_has_description(self, module_path, manifest):
        assert manifest.description, f"{module_path}: description is empty"

    def test_tool_names_prefixed_with_module(self, module_path, manifest):
        """Tool names must be 'module.action' format."""
        for tool in manifest.tools:
            parts = tool.name.split(".")
            assert len(parts) == 2 and parts[0] == manifest.module_name, (
                f"{module_path}: tool '{tool.name}' should be "
                f"'{manifest.module_name}.<action>'"
            )

    def test_tools_have_descriptions(self, module_path, manifest):
        for tool in manifest.tools:
            assert tool.description, f"{module_path}: tool '{tool.name}' has empty description"

    def test_parameters_are_valid(self, module_path, manifest):
        for tool in manifest.tools:
            for param in tool.parameters:
                assert param.type in VALID_PARAM_TYPES, (
                    f"{module_path}: tool '{tool.name}' param '{param.name}' "
                    f"has invalid type '{param.type}'"
                )
                assert param.description, (
                    f"{module_path}: tool '{tool.name}' param '{param.name}' has empty description"
                )

    def test_permission_levels_are_valid(self, module_path, manifest):
        for tool in manifest.tools:
            assert tool.required_permission in VALID_PERMISSION_LEVELS

    def test_no_duplicate_names(self, module_path, manifest):
        names = [t.name for t in manifest.tools]
        assert len(names) == len(set(names))
        for tool in manifest.tools:
            param_names = [p.name for p in tool.parameters]
            assert len(param_names) == len(set(param_names)), tool.name


# ===================================================================
# Intervals specifics
# ===================================================================


def test_intervals_tool_set():
    from modules.intervals.manifest import MANIFEST

    assert {t.action for t in MANIFEST.tools} == INTERVALS_ACTIONS


def test_intervals_tools_are_implemented():
    from modules.intervals.manifest import MANIFEST
    from modules.intervals.tools import IntervalsTools

    for tool in MANIFEST.tools:
        assert callable(getattr(IntervalsTools, tool.action, None)), tool.action


def test_get_tool_accepts_both_name_forms():
    from modules.intervals.manifest import MANIFEST

    assert MANIFEST.get_tool("intervals.get_gear") is MANIFEST.get_tool("get_gear")
    assert MANIFEST.get_tool("get_nothing") is None


def test_required_parameters():
    from modules.intervals.manifest import MANIFEST

    required = {
        t.action: [p.name for p in t.parameters if p.required] for t in MANIFEST.tools
    }
    assert required["get_activities"] == ["oldest"]
    assert required["get_activities_with_details"] == ["oldest"]
    assert required["get_recent_activities_with_details"] == []
    assert required["get_wellness_for_date"] == ["date"]
    assert required["search_activities"] == ["query"]
    assert required["get_power_hr_curve"] == ["start", "end"]
    assert required["check_activity_source"] == ["activity_id"]
