"""Tests for the static tool catalog."""

import pytest
from mcp.types import Tool

from mcp_jira.catalog import get_tool, list_tools
from mcp_jira.dispatcher import ROUTES

EXPECTED_ORDER = [
    "execute_jql",
    "get_only_ticket_name_and_description",
    "create_ticket",
    "list_projects",
    "delete_ticket",
    "edit_ticket",
    "get_all_statuses",
    "assign_ticket",
    "query_assignable",
]


def test_list_tools_order_is_stable():
    """Tools are always listed in the same order."""
    assert [tool.name for tool in list_tools()] == EXPECTED_ORDER
    assert [tool.name for tool in list_tools()] == EXPECTED_ORDER


def test_list_tools_returns_tool_definitions():
    tools = list_tools()
    assert all(isinstance(tool, Tool) for tool in tools)
    assert len({tool.name for tool in tools}) == len(tools)
    for tool in tools:
        assert tool.description
        assert tool.inputSchema["type"] == "object"


def test_list_tools_returns_a_fresh_list():
    """Callers mutating the returned list cannot alter the catalog."""
    tools = list_tools()
    tools.clear()
    assert len(list_tools()) == len(EXPECTED_ORDER)


@pytest.mark.parametrize(
    "name,required,optional_defaults",
    [
        ("execute_jql", ["jql"], {"number_of_results": 1}),
        ("get_only_ticket_name_and_description", ["jql"], {"number_of_results": 1}),
        (
            "create_ticket",
            ["project", "summary", "description", "issuetype"],
            {"parent": None},
        ),
        ("list_projects", [], {"number_of_results": 1}),
        ("delete_ticket", ["issueIdOrKey"], {}),
        (
            "edit_ticket",
            ["issueIdOrKey"],
            {
                "summary": None,
                "description": None,
                "labels": None,
                "parent": None,
                "priority": None,
                "components": None,
            },
        ),
        ("get_all_statuses", [], {"number_of_results": 50}),
        ("assign_ticket", ["accountId", "issueIdOrKey"], {}),
        ("query_assignable", ["project_key"], {}),
    ],
)
def test_tool_input_contracts(name, required, optional_defaults):
    """Each tool declares its required fields, optional fields and defaults."""
    schema = get_tool(name).inputSchema

    assert schema.get("required", []) == required
    assert set(schema["properties"]) == set(required) | set(optional_defaults)
    for field_name, default in optional_defaults.items():
        assert schema["properties"][field_name].get("default") == default


def test_create_ticket_nested_requirements():
    properties = get_tool("create_ticket").inputSchema["properties"]

    assert properties["project"]["type"] == "object"
    assert properties["project"]["required"] == ["key"]
    assert properties["issuetype"]["type"] == "object"
    assert properties["issuetype"]["required"] == ["name"]


def test_number_of_results_is_integer():
    for name in ("execute_jql", "list_projects", "get_all_statuses"):
        prop = get_tool(name).inputSchema["properties"]["number_of_results"]
        assert prop["type"] == "integer"


def test_get_tool_unknown():
    assert get_tool("not_a_tool") is None


def test_every_tool_has_a_route():
    """The catalog and the dispatcher route table describe the same tools."""
    assert set(ROUTES) == set(EXPECTED_ORDER)


@pytest.mark.parametrize("name", EXPECTED_ORDER)
def test_schema_defaults_match_argument_models(name):
    """Documented defaults are the ones applied when an argument is absent."""
    schema = get_tool(name).inputSchema
    model = ROUTES[name].arguments

    for field_name, prop in schema["properties"].items():
        if "default" not in prop:
            continue
        model_field = next(
            field
            for key, field in model.model_fields.items()
            if (field.alias or key) == field_name
        )
        assert model_field.default == prop["default"]
