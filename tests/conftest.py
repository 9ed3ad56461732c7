"""
pytest shared fixtures
"""

import os
import sys
import textwrap

import pytest
import structlog

# Project root on the path (flat layout)
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from models import SafeOutputsConfig  # noqa: E402


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration a test applied"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def workflows_dir(tmp_path):
    """Repository tree with an empty .github/workflows directory"""
    path = tmp_path / ".github" / "workflows"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def markdown_path(workflows_dir):
    """The compiling workflow"""
    path = workflows_dir / "orchestrator.md"
    path.write_text("---\non: issues\n---\n# Orchestrator\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def write_workflow(workflows_dir):
    """Write a sibling workflow file: write_workflow("deploy", ".lock.yml", yaml_text)"""
    def _write(name, extension, content=""):
        path = workflows_dir / f"{name}{extension}"
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_safe_outputs():
    """Build an aggregate from a frontmatter-style mapping"""
    def _make(**sections):
        return SafeOutputsConfig.model_validate(sections)
    return _make


DISPATCH_LOCK_YAML = """\
name: Deploy
on:
  workflow_dispatch:
    inputs:
      environment:
        description: Target environment
        type: choice
        options: [staging, production]
        required: true
      dry_run:
        type: boolean
        default: false
      region:
        type: environment
jobs:
  deploy:
    runs-on: ubuntu-latest
    steps:
      - run: echo deploy
"""

DISPATCH_YML = """\
name: Deploy (source)
on:
  workflow_dispatch:
    inputs:
      legacy:
        type: string
"""


@pytest.fixture
def dispatch_lock_yaml():
    return DISPATCH_LOCK_YAML


@pytest.fixture
def dispatch_yml():
    return DISPATCH_YML
