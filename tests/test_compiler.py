"""
Tests for the compilation pass and the developer command
"""

import json

from click.testing import CliRunner

from compile_safe_outputs import main
from compiler import CompiledSafeOutputs, compile_safe_outputs
from models import SafeOutputsConfig


def test_no_safe_outputs(markdown_path):
    assert compile_safe_outputs(None, markdown_path) == CompiledSafeOutputs(config_json="", tools_json="[]")


def test_dispatch_extensions_reach_runtime_config(markdown_path, write_workflow, dispatch_lock_yaml, dispatch_yml):
    write_workflow("deploy", ".lock.yml", dispatch_lock_yaml)
    write_workflow("notify", ".yml", dispatch_yml)
    safe_outputs = SafeOutputsConfig.model_validate({
        "dispatch-workflow": {"workflows": ["deploy", "notify", "absent"], "max": 2},
    })

    compiled = compile_safe_outputs(safe_outputs, markdown_path)

    config = json.loads(compiled.config_json)
    assert config["dispatch_workflow"] == {
        "workflows": ["deploy", "notify", "absent"],
        "workflow_files": {"deploy": ".lock.yml", "notify": ".yml"},
        "max": 2,
    }
    # Partial resolution still yields a tool for every configured workflow
    tools = json.loads(compiled.tools_json)
    assert [tool["_workflow_name"] for tool in tools] == ["deploy", "notify", "absent"]
    assert tools[2]["inputSchema"]["properties"] == {}


def test_caller_aggregate_not_mutated(markdown_path, write_workflow, dispatch_lock_yaml):
    write_workflow("deploy", ".lock.yml", dispatch_lock_yaml)
    safe_outputs = SafeOutputsConfig.model_validate({"dispatch-workflow": ["deploy"]})

    compile_safe_outputs(safe_outputs, markdown_path)

    assert safe_outputs.dispatch_workflow.workflow_files == {}


def test_locator_consulted_once_per_target(markdown_path):
    calls = []

    def locator(name, base):
        calls.append(name)
        raise FileNotFoundError(name)

    safe_outputs = SafeOutputsConfig.model_validate({"dispatch-workflow": ["deploy", "notify"]})

    compile_safe_outputs(safe_outputs, markdown_path, locator=locator)

    assert calls == ["deploy", "notify"]


def test_compilation_is_deterministic(markdown_path):
    safe_outputs = SafeOutputsConfig.model_validate({
        "create-issue": {"max": 2, "allowed-repos": ["octo-org/other"]},
        "missing-tool": {"create-issue": True},
        "jobs": {"release": {"inputs": {"tag": {"type": "string", "required": True}}}},
        "mentions": {"enabled": True},
    })

    assert compile_safe_outputs(safe_outputs, markdown_path) == compile_safe_outputs(safe_outputs, markdown_path)


def test_config_and_catalog_agree_on_enabled_kinds(markdown_path):
    safe_outputs = SafeOutputsConfig.model_validate({
        "add-labels": {},
        "update-release": {},
        "missing-data": {"create-issue": True},
    })

    compiled = compile_safe_outputs(safe_outputs, markdown_path)

    config = json.loads(compiled.config_json)
    tool_names = {tool["name"] for tool in json.loads(compiled.tools_json)}
    assert tool_names == {"add_labels", "update_release", "missing_data"}
    assert set(config) == tool_names | {"create_missing_data_issue"}


# ============================================================================
# DEVELOPER COMMAND
# ============================================================================

SOURCE_YAML = """\
safe-outputs:
  create-issue:
    title-prefix: "[bot] "
  noop:
"""


def test_command_writes_artifacts(tmp_path):
    source = tmp_path / "safe-outputs.yml"
    source.write_text(SOURCE_YAML, encoding="utf-8")
    config_out = tmp_path / "config.json"
    tools_out = tmp_path / "tools.json"

    result = CliRunner().invoke(main, [
        str(source), "--config-out", str(config_out), "--tools-out", str(tools_out),
    ])

    assert result.exit_code == 0, result.output
    assert json.loads(config_out.read_text(encoding="utf-8")) == {
        "create_issue": {"max": 1},
        "noop": {"max": 1},
    }
    tools = json.loads(tools_out.read_text(encoding="utf-8"))
    assert [tool["name"] for tool in tools] == ["create_issue", "noop"]


def test_command_rejects_invalid_source(tmp_path):
    source = tmp_path / "safe-outputs.yml"
    source.write_text("create-issue:\n  max: many\n", encoding="utf-8")

    result = CliRunner().invoke(main, [str(source)])

    assert result.exit_code == 1
    assert "Invalid safe outputs" in result.output
