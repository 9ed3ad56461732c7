"""
Dispatch workflow resolution

For each workflow named in the dispatch-workflow policy, locate the
sibling workflow file relative to the compiling workflow, prefer the
compiled lock file over the plain YAML file, and read the inputs its
``workflow_dispatch`` trigger declares.

Resolution problems never abort compilation: a target that cannot be
found or read is logged and still produces an input-less tool.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

import structlog
import yaml
from pydantic import ValidationError

from config import get_settings
from models import DispatchWorkflowConfig, SafeOutputsConfig, WorkflowInput

logger = structlog.get_logger()

LOCK_EXTENSION = ".lock.yml"
YML_EXTENSION = ".yml"
MD_EXTENSION = ".md"


@dataclass(frozen=True)
class WorkflowFileResult:
    """Which forms of a workflow exist on disk"""
    lock_path: Optional[Path] = None
    yml_path: Optional[Path] = None
    md_path: Optional[Path] = None

    @property
    def lock_exists(self) -> bool:
        return self.lock_path is not None

    @property
    def yml_exists(self) -> bool:
        return self.yml_path is not None

    @property
    def md_exists(self) -> bool:
        return self.md_path is not None


@dataclass
class DispatchTarget:
    """Outcome of resolving one dispatch workflow"""
    workflow_name: str
    path: Optional[Path] = None
    extension: Optional[str] = None
    inputs: Dict[str, WorkflowInput] = field(default_factory=dict)


WorkflowLocator = Callable[[str, str], WorkflowFileResult]
InputExtractor = Callable[[Path], Mapping[str, Any]]


# ============================================================================
# DEFAULT COLLABORATORS
# ============================================================================

def _find_repo_root(start: Path) -> Optional[Path]:
    for candidate in (start, *start.parents):
        if (candidate / ".github").is_dir():
            return candidate
    return None


def candidate_directories(markdown_path: str) -> List[Path]:
    """
    Directories probed for sibling workflows, in order:
    the compiling workflow's own directory, then the repository's
    workflows directory.
    """
    workflow_dir = Path(markdown_path).resolve().parent
    directories = [workflow_dir]

    repo_root = _find_repo_root(workflow_dir)
    if repo_root is not None:
        workflows_dir = (repo_root / get_settings().workflows_dir).resolve()
        if workflows_dir not in directories:
            directories.append(workflows_dir)

    return directories


def find_workflow_file(workflow_name: str, markdown_path: str) -> WorkflowFileResult:
    """
    Locate the forms of ``workflow_name`` next to the compiling workflow

    The first directory holding a given form wins for that form.

    Raises:
        ValueError: If the workflow name is not a plain file stem
    """
    if (
        not workflow_name
        or workflow_name in (".", "..")
        or "/" in workflow_name
        or "\\" in workflow_name
    ):
        raise ValueError(f"Invalid workflow name: {workflow_name!r}")

    found: Dict[str, Path] = {}
    for directory in candidate_directories(markdown_path):
        for extension in (LOCK_EXTENSION, YML_EXTENSION, MD_EXTENSION):
            candidate = directory / f"{workflow_name}{extension}"
            if extension not in found and candidate.is_file():
                found[extension] = candidate

    return WorkflowFileResult(
        lock_path=found.get(LOCK_EXTENSION),
        yml_path=found.get(YML_EXTENSION),
        md_path=found.get(MD_EXTENSION),
    )


def extract_workflow_dispatch_inputs(workflow_path: Path) -> Dict[str, Any]:
    """
    Read the ``on.workflow_dispatch.inputs`` mapping of a workflow file

    Returns an empty mapping when the trigger declares no inputs.

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file is not valid YAML
    """
    with open(workflow_path, "r", encoding="utf-8") as f:
        document = yaml.safe_load(f)

    if not isinstance(document, dict):
        return {}

    # YAML 1.1 loads a bare `on` key as boolean True
    triggers = document.get("on", document.get(True))
    if not isinstance(triggers, dict):
        return {}

    dispatch = triggers.get("workflow_dispatch")
    if not isinstance(dispatch, dict):
        return {}

    inputs = dispatch.get("inputs")
    return dict(inputs) if isinstance(inputs, dict) else {}


# ============================================================================
# RESOLUTION
# ============================================================================

def parse_dispatch_inputs(workflow_name: str, raw_inputs: Mapping[str, Any]) -> Dict[str, WorkflowInput]:
    """
    Validate extracted inputs once

    Non-mapping entries are skipped. A mistyped attribute is ignored and
    falls back to its default; the input itself is kept.
    """
    inputs: Dict[str, WorkflowInput] = {}
    for input_name, attributes in raw_inputs.items():
        if not isinstance(attributes, dict):
            logger.debug("dispatch_input_skipped", workflow=workflow_name, input=input_name)
            continue

        attributes = {key: value for key, value in attributes.items() if value is not None}
        try:
            input_def = WorkflowInput.model_validate(attributes)
        except ValidationError as e:
            invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
            logger.warning(
                "dispatch_input_attributes_ignored",
                workflow=workflow_name,
                input=input_name,
                attributes=sorted(str(key) for key in invalid),
            )
            input_def = WorkflowInput.model_validate(
                {key: value for key, value in attributes.items() if key not in invalid}
            )
        inputs[str(input_name)] = input_def
    return inputs


def resolve_dispatch_workflow(
    workflow_name: str,
    markdown_path: str,
    locator: WorkflowLocator = find_workflow_file,
    extractor: InputExtractor = extract_workflow_dispatch_inputs,
) -> DispatchTarget:
    """Resolve one dispatch target; every failure degrades to an empty input set"""
    target = DispatchTarget(workflow_name=workflow_name)

    try:
        file_result = locator(workflow_name, markdown_path)
    except (OSError, ValueError) as e:
        logger.warning("dispatch_workflow_lookup_failed", workflow=workflow_name, error=str(e))
        return target

    # Priority: .lock.yml > .yml
    if file_result.lock_exists:
        target.path, target.extension = file_result.lock_path, LOCK_EXTENSION
    elif file_result.yml_exists:
        target.path, target.extension = file_result.yml_path, YML_EXTENSION
    else:
        logger.warning(
            "dispatch_workflow_not_compiled",
            workflow=workflow_name,
            markdown_exists=file_result.md_exists,
        )
        return target

    try:
        raw_inputs = extractor(target.path)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.warning(
            "dispatch_workflow_inputs_unreadable",
            workflow=workflow_name,
            path=str(target.path),
            error=str(e),
        )
        raw_inputs = {}

    target.inputs = parse_dispatch_inputs(workflow_name, raw_inputs)
    logger.debug(
        "dispatch_workflow_resolved",
        workflow=workflow_name,
        extension=target.extension,
        inputs=len(target.inputs),
    )
    return target


def resolve_dispatch_workflows(
    dispatch: Optional[DispatchWorkflowConfig],
    markdown_path: str,
    locator: WorkflowLocator = find_workflow_file,
    extractor: InputExtractor = extract_workflow_dispatch_inputs,
) -> List[DispatchTarget]:
    """Resolve every configured target, in configured order"""
    if dispatch is None or not dispatch.workflows:
        return []

    logger.info("dispatch_workflows_resolving", count=len(dispatch.workflows))
    return [
        resolve_dispatch_workflow(workflow_name, markdown_path, locator, extractor)
        for workflow_name in dispatch.workflows
    ]


def apply_workflow_files(dispatch: DispatchWorkflowConfig, targets: List[DispatchTarget]) -> None:
    """Record the resolved extension of each target on the policy"""
    for target in targets:
        if target.extension is not None:
            dispatch.workflow_files[target.workflow_name] = target.extension


def populate_dispatch_workflow_files(
    safe_outputs: Optional[SafeOutputsConfig],
    markdown_path: str,
    locator: WorkflowLocator = find_workflow_file,
    extractor: InputExtractor = extract_workflow_dispatch_inputs,
) -> List[DispatchTarget]:
    """
    Resolve dispatch targets and fill ``workflow_files`` on the policy

    Must run before the runtime config is generated so the extensions are
    embedded in it.
    """
    if safe_outputs is None or safe_outputs.dispatch_workflow is None:
        return []

    targets = resolve_dispatch_workflows(
        safe_outputs.dispatch_workflow, markdown_path, locator, extractor
    )
    apply_workflow_files(safe_outputs.dispatch_workflow, targets)
    return targets
