"""Merge request approval settings and rules at project and merge request level."""

from __future__ import annotations

from .base import endpoint, param
from .common import PAGINATION

RULE_FIELDS = (
    param("user_ids", "integer[]", "The IDs of users as approvers"),
    param("group_ids", "integer[]", "The IDs of groups as approvers"),
    param("usernames", "array", "The usernames of approvers"),
)

PROJECT_RULE_FIELDS = (
    *RULE_FIELDS,
    param("protected_branch_ids", "integer[]", "The IDs of protected branches to scope the rule by"),
    param("applies_to_all_protected_branches", "boolean", "Whether the rule is applied to all protected branches"),
    param("report_type", description="The report type required when the rule type is report_approver", enum=("license_scanning", "code_coverage")),
    param("rule_type", description="The type of rule", enum=("any_approver", "regular")),
)

ENDPOINTS = (
    # Project-level
    endpoint("GET", "/projects/{id}/approvals", "Get the approval configuration of a project"),
    endpoint(
        "POST",
        "/projects/{id}/approvals",
        "Change the approval configuration of a project",
        param("approvals_before_merge", "integer", "How many approvals are required before a merge request can be merged (deprecated)"),
        param("disable_overriding_approvers_per_merge_request", "boolean", "Allow or prevent overriding approvers per merge request"),
        param("merge_requests_author_approval", "boolean", "Allow or prevent authors from self approving merge requests"),
        param("merge_requests_disable_committers_approval", "boolean", "Allow or prevent committers from self approving merge requests"),
        param("require_password_to_approve", "boolean", "Require approver to enter a password to authenticate before adding the approval"),
        param("reset_approvals_on_push", "boolean", "Reset approvals on a new push"),
        param("selective_code_owner_removals", "boolean", "Reset approvals from Code Owners if their files changed"),
    ),
    endpoint("GET", "/projects/{id}/approval_rules", "Get project-level approval rules", *PAGINATION),
    endpoint("GET", "/projects/{id}/approval_rules/{approval_rule_id}", "Get a single project-level approval rule"),
    endpoint(
        "POST",
        "/projects/{id}/approval_rules",
        "Create a project-level approval rule",
        param("name", description="The name of the approval rule", required=True),
        param("approvals_required", "integer", "The number of required approvals for this rule", required=True),
        PROJECT_RULE_FIELDS,
    ),
    endpoint(
        "PUT",
        "/projects/{id}/approval_rules/{approval_rule_id}",
        "Update a project-level approval rule",
        param("name", description="The name of the approval rule"),
        param("approvals_required", "integer", "The number of required approvals for this rule"),
        param("remove_hidden_groups", "boolean", "Whether hidden groups should be removed from the approval rule"),
        PROJECT_RULE_FIELDS,
    ),
    endpoint("DELETE", "/projects/{id}/approval_rules/{approval_rule_id}", "Delete a project-level approval rule"),
    # Merge request level
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/approvals", "List approvals for a given merge request"),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/approval_state", "Get the approval state of a merge request"),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/approval_settings",
        "Get the approval settings of a merge request",
    ),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/approval_rules", "Get the approval rules of a merge request", *PAGINATION),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/approval_rules/{approval_rule_id}",
        "Get information about a single merge request approval rule",
    ),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/approval_rules",
        "Create a merge request-level approval rule",
        param("name", description="The name of the approval rule", required=True),
        param("approvals_required", "integer", "The number of required approvals for this rule", required=True),
        param("approval_project_rule_id", "integer", "The ID of a project-level approval rule"),
        RULE_FIELDS,
    ),
    endpoint(
        "PUT",
        "/projects/{id}/merge_requests/{merge_request_iid}/approval_rules/{approval_rule_id}",
        "Update a merge request-level approval rule",
        param("name", description="The name of the approval rule"),
        param("approvals_required", "integer", "The number of required approvals for this rule"),
        param("remove_hidden_groups", "boolean", "Whether hidden groups should be removed"),
        RULE_FIELDS,
    ),
    endpoint(
        "DELETE",
        "/projects/{id}/merge_requests/{merge_request_iid}/approval_rules/{approval_rule_id}",
        "Delete a merge request-level approval rule",
    ),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/approve",
        "Approve a merge request",
        param("sha", description="The HEAD of the merge request"),
        param("approval_password", description="Current user's password. Required if Require user re-authentication to approve is enabled"),
    ),
    endpoint("POST", "/projects/{id}/merge_requests/{merge_request_iid}/unapprove", "Remove the current user's approval of a merge request"),
    endpoint("PUT", "/projects/{id}/merge_requests/{merge_request_iid}/reset_approvals", "Clear all approvals of a merge request"),
)
