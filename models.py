"""
Data model for the safe-outputs section of a workflow.

The aggregate is built once per compilation from already-parsed
frontmatter. Every model accepts the frontmatter spelling of a key
(``allowed-labels``) as well as the Python field name (``allowed_labels``).
Shapes are validated here, at construction time, so the generators never
re-check types of nested values.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SafeOutputModel(BaseModel):
    """Base for every safe-outputs model"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ============================================================================
# POLICY BASES
# ============================================================================

class SafeOutputPolicy(SafeOutputModel):
    """Common shape of an output policy. ``max`` of 0 means unset."""

    max: int = 0


class CrossRepositoryTarget(SafeOutputPolicy):
    """Policy that can act on repositories other than the current one"""

    target_repo_slug: str = Field(default="", alias="target-repo")
    allowed_repos: List[str] = Field(default_factory=list, alias="allowed-repos")


# ============================================================================
# ISSUES & COMMENTS
# ============================================================================

class CreateIssueConfig(CrossRepositoryTarget):
    title_prefix: str = Field(default="", alias="title-prefix")
    labels: List[str] = Field(default_factory=list)
    allowed_labels: List[str] = Field(default_factory=list, alias="allowed-labels")
    assignees: List[str] = Field(default_factory=list)
    expires: int = 0
    group: bool = False


class CreateAgentSessionConfig(CrossRepositoryTarget):
    base: str = ""


class AddCommentConfig(CrossRepositoryTarget):
    target: str = ""
    hide_older_comments: bool = Field(default=False, alias="hide-older-comments")


class CloseIssueConfig(CrossRepositoryTarget):
    target: str = ""
    required_labels: List[str] = Field(default_factory=list, alias="required-labels")
    required_title_prefix: str = Field(default="", alias="required-title-prefix")


class UpdateIssueConfig(CrossRepositoryTarget):
    target: str = ""
    status: bool = False
    title: bool = False
    body: bool = False


class LabelsConfig(CrossRepositoryTarget):
    """Shared shape of add-labels and remove-labels"""

    allowed: List[str] = Field(default_factory=list)
    target: str = ""


class AssignMilestoneConfig(CrossRepositoryTarget):
    allowed: List[str] = Field(default_factory=list)
    target: str = ""


class AssignToAgentConfig(CrossRepositoryTarget):
    default_agent: str = Field(default="", alias="name")
    allowed: List[str] = Field(default_factory=list)
    target: str = ""


class AssignToUserConfig(CrossRepositoryTarget):
    allowed: List[str] = Field(default_factory=list)
    target: str = ""


class LinkSubIssueConfig(CrossRepositoryTarget):
    parent_required_labels: List[str] = Field(default_factory=list, alias="parent-required-labels")
    sub_required_labels: List[str] = Field(default_factory=list, alias="sub-required-labels")


class HideCommentConfig(CrossRepositoryTarget):
    allowed_reasons: List[str] = Field(default_factory=list, alias="allowed-reasons")


# ============================================================================
# DISCUSSIONS
# ============================================================================

class CreateDiscussionConfig(CrossRepositoryTarget):
    title_prefix: str = Field(default="", alias="title-prefix")
    category: str = ""
    labels: List[str] = Field(default_factory=list)
    allowed_labels: List[str] = Field(default_factory=list, alias="allowed-labels")
    expires: int = 0


class CloseDiscussionConfig(CrossRepositoryTarget):
    target: str = ""
    required_category: str = Field(default="", alias="required-category")
    required_labels: List[str] = Field(default_factory=list, alias="required-labels")
    required_title_prefix: str = Field(default="", alias="required-title-prefix")


class UpdateDiscussionConfig(CrossRepositoryTarget):
    target: str = ""
    allowed_labels: List[str] = Field(default_factory=list, alias="allowed-labels")


# ============================================================================
# PULL REQUESTS
# ============================================================================

class CreatePullRequestConfig(CrossRepositoryTarget):
    title_prefix: str = Field(default="", alias="title-prefix")
    labels: List[str] = Field(default_factory=list)
    allowed_labels: List[str] = Field(default_factory=list, alias="allowed-labels")
    draft: Optional[bool] = None
    allow_empty: bool = Field(default=False, alias="allow-empty")
    auto_merge: bool = Field(default=False, alias="auto-merge")
    expires: int = 0


class CreatePullRequestReviewCommentConfig(CrossRepositoryTarget):
    side: str = ""
    target: str = ""


class ClosePullRequestConfig(CrossRepositoryTarget):
    target: str = ""
    required_labels: List[str] = Field(default_factory=list, alias="required-labels")
    required_title_prefix: str = Field(default="", alias="required-title-prefix")


class UpdatePullRequestConfig(CrossRepositoryTarget):
    target: str = ""
    title: bool = True
    body: bool = True


class MarkPullRequestAsReadyForReviewConfig(CrossRepositoryTarget):
    target: str = ""


class AddReviewerConfig(CrossRepositoryTarget):
    reviewers: List[str] = Field(default_factory=list)
    target: str = ""


class PushToPullRequestBranchConfig(SafeOutputPolicy):
    target: str = ""
    title_prefix: str = Field(default="", alias="title-prefix")
    labels: List[str] = Field(default_factory=list)


# ============================================================================
# CODE SCANNING, ASSETS, RELEASES
# ============================================================================

class CreateCodeScanningAlertConfig(SafeOutputPolicy):
    driver: str = ""


class AutofixCodeScanningAlertConfig(SafeOutputPolicy):
    pass


class UploadAssetConfig(SafeOutputPolicy):
    branch: str = ""
    max_size_kb: int = Field(default=0, alias="max-size")
    allowed_exts: List[str] = Field(default_factory=list, alias="allowed-exts")


class UpdateReleaseConfig(SafeOutputPolicy):
    pass


# ============================================================================
# PROJECTS
# ============================================================================

class UpdateProjectConfig(SafeOutputPolicy):
    pass


class CreateProjectStatusUpdateConfig(SafeOutputPolicy):
    pass


class CreateProjectConfig(SafeOutputPolicy):
    target_owner: str = Field(default="", alias="target-owner")
    title_prefix: str = Field(default="", alias="title-prefix")


# ============================================================================
# REPORTING
# ============================================================================

class MissingReportConfig(SafeOutputPolicy):
    """missing-tool / missing-data; ``create_issue`` activates the shadow issue tool"""

    create_issue: bool = Field(default=False, alias="create-issue")
    title_prefix: str = Field(default="", alias="title-prefix")
    labels: List[str] = Field(default_factory=list)


class NoOpConfig(SafeOutputPolicy):
    pass


# ============================================================================
# NON-REGISTRY SECTIONS
# ============================================================================

class WorkflowInput(SafeOutputModel):
    """
    One declared input of a custom job or a dispatch target.

    ``type`` is kept verbatim; unknown values map to a string schema.
    """

    type: str = ""
    description: str = ""
    required: bool = False
    default: Any = None
    options: List[Any] = Field(default_factory=list)


class SafeJobConfig(SafeOutputModel):
    """User-defined job exposed to the agent as a tool"""

    description: str = ""
    output: str = ""
    inputs: Dict[str, WorkflowInput] = Field(default_factory=dict)


class MentionsConfig(SafeOutputModel):
    """Mention policy; ``None`` means the field was not set"""

    enabled: Optional[bool] = None
    allow_team_members: Optional[bool] = Field(default=None, alias="allow-team-members")
    allow_context: Optional[bool] = Field(default=None, alias="allow-context")
    allowed: List[str] = Field(default_factory=list)
    max: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def _expand_boolean(cls, data: Any) -> Any:
        # mentions: false
        if isinstance(data, bool):
            return {"enabled": data}
        return data


class DispatchWorkflowConfig(SafeOutputModel):
    """
    Cross-workflow dispatch policy.

    ``workflow_files`` is filled at compile time with the extension
    (``.lock.yml`` or ``.yml``) resolved for each workflow.
    """

    workflows: List[str] = Field(default_factory=list)
    workflow_files: Dict[str, str] = Field(default_factory=dict, alias="workflow-files")
    max: int = 0

    @model_validator(mode="before")
    @classmethod
    def _expand_shorthand(cls, data: Any) -> Any:
        # dispatch-workflow: [a, b]
        if isinstance(data, list):
            return {"workflows": data}
        return data


# ============================================================================
# AGGREGATE
# ============================================================================

class SafeOutputsConfig(SafeOutputModel):
    """Root of the safe-outputs configuration; absent policies are ``None``"""

    create_issue: Optional[CreateIssueConfig] = Field(default=None, alias="create-issue")
    create_agent_session: Optional[CreateAgentSessionConfig] = Field(default=None, alias="create-agent-session")
    add_comment: Optional[AddCommentConfig] = Field(default=None, alias="add-comment")
    create_discussion: Optional[CreateDiscussionConfig] = Field(default=None, alias="create-discussion")
    close_discussion: Optional[CloseDiscussionConfig] = Field(default=None, alias="close-discussion")
    close_issue: Optional[CloseIssueConfig] = Field(default=None, alias="close-issue")
    close_pull_request: Optional[ClosePullRequestConfig] = Field(default=None, alias="close-pull-request")
    create_pull_request: Optional[CreatePullRequestConfig] = Field(default=None, alias="create-pull-request")
    create_pull_request_review_comment: Optional[CreatePullRequestReviewCommentConfig] = Field(
        default=None, alias="create-pull-request-review-comment"
    )
    create_code_scanning_alert: Optional[CreateCodeScanningAlertConfig] = Field(
        default=None, alias="create-code-scanning-alert"
    )
    autofix_code_scanning_alert: Optional[AutofixCodeScanningAlertConfig] = Field(
        default=None, alias="autofix-code-scanning-alert"
    )
    add_labels: Optional[LabelsConfig] = Field(default=None, alias="add-labels")
    remove_labels: Optional[LabelsConfig] = Field(default=None, alias="remove-labels")
    add_reviewer: Optional[AddReviewerConfig] = Field(default=None, alias="add-reviewer")
    assign_milestone: Optional[AssignMilestoneConfig] = Field(default=None, alias="assign-milestone")
    assign_to_agent: Optional[AssignToAgentConfig] = Field(default=None, alias="assign-to-agent")
    assign_to_user: Optional[AssignToUserConfig] = Field(default=None, alias="assign-to-user")
    update_issue: Optional[UpdateIssueConfig] = Field(default=None, alias="update-issue")
    update_discussion: Optional[UpdateDiscussionConfig] = Field(default=None, alias="update-discussion")
    update_pull_request: Optional[UpdatePullRequestConfig] = Field(default=None, alias="update-pull-request")
    mark_pull_request_as_ready_for_review: Optional[MarkPullRequestAsReadyForReviewConfig] = Field(
        default=None, alias="mark-pull-request-as-ready-for-review"
    )
    push_to_pull_request_branch: Optional[PushToPullRequestBranchConfig] = Field(
        default=None, alias="push-to-pull-request-branch"
    )
    upload_asset: Optional[UploadAssetConfig] = Field(default=None, alias="upload-asset")
    missing_tool: Optional[MissingReportConfig] = Field(default=None, alias="missing-tool")
    missing_data: Optional[MissingReportConfig] = Field(default=None, alias="missing-data")
    update_project: Optional[UpdateProjectConfig] = Field(default=None, alias="update-project")
    create_project_status_update: Optional[CreateProjectStatusUpdateConfig] = Field(
        default=None, alias="create-project-status-update"
    )
    create_project: Optional[CreateProjectConfig] = Field(default=None, alias="create-project")
    update_release: Optional[UpdateReleaseConfig] = Field(default=None, alias="update-release")
    link_sub_issue: Optional[LinkSubIssueConfig] = Field(default=None, alias="link-sub-issue")
    noop: Optional[NoOpConfig] = Field(default=None, alias="noop")
    hide_comment: Optional[HideCommentConfig] = Field(default=None, alias="hide-comment")

    jobs: Dict[str, SafeJobConfig] = Field(default_factory=dict)
    mentions: Optional[MentionsConfig] = None
    dispatch_workflow: Optional[DispatchWorkflowConfig] = Field(default=None, alias="dispatch-workflow")

    @model_validator(mode="before")
    @classmethod
    def _enable_empty_policies(cls, data: Any) -> Any:
        """
        A frontmatter key with an empty body (``create-issue:``) enables
        the policy with its defaults. Python callers omit the key instead.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, field in cls.model_fields.items():
            if name in _NON_POLICY_FIELDS or field.alias is None:
                continue
            if field.alias in data and data[field.alias] is None:
                data[field.alias] = {}
        return data


_NON_POLICY_FIELDS = frozenset({"jobs", "mentions", "dispatch_workflow"})
