"""Merge requests, their notes, discussions and emoji reactions."""

from __future__ import annotations

from .base import endpoint, param
from .common import (
    AWARD_EMOJI,
    CREATED_RANGE,
    NOTE_BODY,
    NOTE_FILTERS,
    PAGINATION,
    SEARCH,
    SORT,
    STATE_EVENT,
    UPDATED_RANGE,
    order_by,
)

MR_FILTERS = (
    param("state", description="Return all merge requests or just those that are opened, closed, locked, or merged", enum=("opened", "closed", "locked", "merged", "all")),
    order_by("created_at", "label_priority", "milestone_due", "popularity", "priority", "title", "updated_at", "merged_at"),
    SORT,
    param("milestone", description="Return merge requests for a specific milestone. None returns merge requests with no milestone"),
    param("view", description="If simple, returns the iid, URL, title, description, and basic state of merge request", enum=("simple",)),
    param("labels", description="Return merge requests matching a comma-separated list of labels"),
    param("with_labels_details", "boolean", "If true, response returns more details for each label"),
    param("with_merge_status_recheck", "boolean", "If true, this projection requests an asynchronous recalculation of the merge_status field"),
    *CREATED_RANGE,
    *UPDATED_RANGE,
    param("scope", description="Return merge requests for the given scope", enum=("created_by_me", "assigned_to_me", "all")),
    param("author_id", "integer", "Returns merge requests created by the given user id"),
    param("author_username", description="Returns merge requests created by the given username"),
    param("assignee_id", "any", "Returns merge requests assigned to the given user id. None returns unassigned merge requests"),
    param("approver_ids", "integer[]", "Returns merge requests which have specified all the users with the given IDs as individual approvers"),
    param("approved_by_ids", "integer[]", "Returns merge requests which have been approved by all the users with the given IDs"),
    param("reviewer_id", "any", "Returns merge requests which have the user as a reviewer with the given user ID"),
    param("reviewer_username", description="Returns merge requests which have the user as a reviewer with the given username"),
    param("my_reaction_emoji", description="Return merge requests reacted by the authenticated user by the given emoji"),
    param("source_branch", description="Return merge requests with the given source branch"),
    param("target_branch", description="Return merge requests with the given target branch"),
    SEARCH,
    param("in", description="Modify the scope of the search attribute: title, description, or a string joining them with comma"),
    param("draft", "boolean", "Filter merge requests against their draft status"),
    param("not", "object", "Return merge requests that do not match the parameters supplied"),
    param("environment", description="Returns merge requests deployed to the given environment"),
    param("deployed_before", description="Return merge requests deployed before the given date/time"),
    param("deployed_after", description="Return merge requests deployed after the given date/time"),
    *PAGINATION,
)

MR_FIELDS = (
    param("assignee_id", "integer", "Assignee user ID"),
    param("assignee_ids", "integer[]", "The IDs of the users to assign the merge request to"),
    param("reviewer_ids", "integer[]", "The IDs of the users added as a reviewer to the merge request"),
    param("description", description="Description of the merge request. Limited to 1,048,576 characters"),
    param("labels", description="Labels for the merge request, as a comma-separated list"),
    param("milestone_id", "integer", "The global ID of a milestone"),
    param("remove_source_branch", "boolean", "Flag indicating if a merge request should remove the source branch when merging"),
    param("squash", "boolean", "If true, squash all commits into a single commit on merge"),
    param("allow_collaboration", "boolean", "Allow commits from members who can merge to the target branch"),
)

ENDPOINTS = (
    endpoint("GET", "/merge_requests", "List all merge requests the authenticated user has access to", MR_FILTERS),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests",
        "List all merge requests for this project",
        param("iids", "integer[]", "Return the request having the given iid"),
        MR_FILTERS,
    ),
    endpoint(
        "GET",
        "/groups/{id}/merge_requests",
        "Get all merge requests for this group and its subgroups",
        param("non_archived", "boolean", "Return merge requests from non-archived projects only"),
        MR_FILTERS,
    ),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}",
        "Show information about a single merge request",
        param("include_diverged_commits_count", "boolean", "If true, response includes the commits behind the target branch"),
        param("include_rebase_in_progress", "boolean", "If true, response includes whether a rebase operation is in progress"),
        param("render_html", "boolean", "If true, response includes rendered HTML for title and description"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests",
        "Create a new merge request",
        param("source_branch", description="The source branch", required=True),
        param("target_branch", description="The target branch", required=True),
        param("title", description="Title of merge request", required=True),
        param("target_project_id", "integer", "Numeric ID of the target project"),
        MR_FIELDS,
    ),
    endpoint(
        "PUT",
        "/projects/{id}/merge_requests/{merge_request_iid}",
        "Update an existing merge request",
        param("target_branch", description="The target branch"),
        param("title", description="Title of merge request"),
        param("state_event", description="New state (close/reopen)", enum=STATE_EVENT),
        param("discussion_locked", "boolean", "Flag indicating if the merge request's discussion is locked"),
        param("add_labels", description="Comma-separated label names to add to a merge request"),
        param("remove_labels", description="Comma-separated label names to remove from a merge request"),
        MR_FIELDS,
    ),
    endpoint("DELETE", "/projects/{id}/merge_requests/{merge_request_iid}", "Delete a merge request (administrators and project owners only)"),
    endpoint(
        "PUT",
        "/projects/{id}/merge_requests/{merge_request_iid}/merge",
        "Accept and merge changes submitted with a merge request",
        param("merge_commit_message", description="Custom merge commit message"),
        param("squash_commit_message", description="Custom squash commit message"),
        param("squash", "boolean", "If true, the commits are squashed into a single commit on merge"),
        param("should_remove_source_branch", "boolean", "If true, removes the source branch"),
        param("merge_when_pipeline_succeeds", "boolean", "If true, the merge request is merged when the pipeline succeeds"),
        param("auto_merge", "boolean", "If true, the merge request is merged when all checks pass"),
        param("sha", description="If present, then this SHA must match the HEAD of the source branch, otherwise the merge fails"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/cancel_merge_when_pipeline_succeeds",
        "Cancel auto-merge for a merge request",
    ),
    endpoint(
        "PUT",
        "/projects/{id}/merge_requests/{merge_request_iid}/rebase",
        "Automatically rebase the source_branch of the merge request against its target_branch",
        param("skip_ci", "boolean", "Set to true to skip creating a CI pipeline"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/merge_ref",
        "Show the merge request's merge-ref, the commit resulting from merging the source into the target branch",
    ),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/commits", "Get a list of merge request commits", *PAGINATION),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/changes",
        "Show information about the merge request including its files and changes",
        param("access_raw_diffs", "boolean", "Retrieve change diffs through Gitaly"),
        param("unidiff", "boolean", "Present change diffs in the unified diff format"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/diffs",
        "List diffs of the files changed in a merge request",
        param("unidiff", "boolean", "Present diffs in the unified diff format"),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/raw_diffs",
        "Show raw diffs of the files changed in a merge request",
        raw=True,
    ),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/pipelines", "Get a list of merge request pipelines", *PAGINATION),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/pipelines",
        "Create a new pipeline for a merge request",
    ),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/participants", "Get a list of merge request participants"),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/reviewers", "Get a list of merge request reviewers"),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/closes_issues",
        "Get all the issues that would be closed by merging the provided merge request",
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/related_issues",
        "Get all the related issues of the merge request",
        *PAGINATION,
    ),
    endpoint("POST", "/projects/{id}/merge_requests/{merge_request_iid}/subscribe", "Subscribe the authenticated user to a merge request"),
    endpoint("POST", "/projects/{id}/merge_requests/{merge_request_iid}/unsubscribe", "Unsubscribe the authenticated user from a merge request"),
    endpoint("POST", "/projects/{id}/merge_requests/{merge_request_iid}/todo", "Manually create a to-do item for the current user on a merge request"),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/versions", "Get a list of merge request diff versions"),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/versions/{version_id}",
        "Get a single merge request diff version",
        param("unidiff", "boolean", "Present diffs in the unified diff format"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/time_estimate",
        "Set an estimated time of work for this merge request",
        param("duration", description="The duration in human format, such as 3h30m", required=True),
    ),
    endpoint("POST", "/projects/{id}/merge_requests/{merge_request_iid}/reset_time_estimate", "Reset the estimated time for this merge request to 0 seconds"),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/add_spent_time",
        "Add spent time for this merge request",
        param("duration", description="The duration in human format, such as 3h30m", required=True),
        param("summary", description="A summary of how the time was spent"),
    ),
    endpoint("POST", "/projects/{id}/merge_requests/{merge_request_iid}/reset_spent_time", "Reset the total spent time for this merge request to 0 seconds"),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/time_stats", "Get time tracking stats"),
    # Notes
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/notes", "Get a list of all notes for a single merge request", NOTE_FILTERS),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/notes/{note_id}", "Get a single note for a given merge request"),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/notes",
        "Create a new note for a single merge request",
        NOTE_BODY,
        param("merge_request_diff_head_sha", description="Required for the /merge quick action. The SHA of the head commit"),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/merge_requests/{merge_request_iid}/notes/{note_id}",
        "Modify existing note of a merge request",
        param("body", description="The content of a note. Limited to 1,000,000 characters"),
    ),
    endpoint("DELETE", "/projects/{id}/merge_requests/{merge_request_iid}/notes/{note_id}", "Delete an existing note of a merge request"),
    # Discussions
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/discussions", "Get a list of all discussion items for a single merge request", *PAGINATION),
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/discussions/{discussion_id}", "Return a single discussion item for a specific project merge request"),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/discussions",
        "Create a new thread to a single project merge request",
        param("body", description="The content of the thread", required=True),
        param("commit_id", description="SHA referencing commit to start this thread on"),
        param("created_at", description="Date time string, ISO 8601 formatted"),
        param("position", "object", "Position when creating a diff note"),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/merge_requests/{merge_request_iid}/discussions/{discussion_id}",
        "Resolve or unresolve a thread of discussion in a merge request",
        param("resolved", "boolean", "Resolve or unresolve the discussion", required=True),
    ),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/discussions/{discussion_id}/notes",
        "Add a new note to the thread",
        param("body", description="The content of the note or reply", required=True),
        param("created_at", description="Date time string, ISO 8601 formatted"),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/merge_requests/{merge_request_iid}/discussions/{discussion_id}/notes/{note_id}",
        "Modify or resolve an existing thread note of a merge request",
        param("body", description="The content of the note or reply"),
        param("resolved", "boolean", "Resolve or unresolve the note"),
    ),
    endpoint(
        "DELETE",
        "/projects/{id}/merge_requests/{merge_request_iid}/discussions/{discussion_id}/notes/{note_id}",
        "Delete an existing thread note of a merge request",
    ),
    # Emoji reactions
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/award_emoji", "List all emoji reactions for a specified merge request", *PAGINATION),
    endpoint("POST", "/projects/{id}/merge_requests/{merge_request_iid}/award_emoji", "Add an emoji reaction to a merge request", AWARD_EMOJI),
    endpoint("DELETE", "/projects/{id}/merge_requests/{merge_request_iid}/award_emoji/{award_id}", "Delete an emoji reaction from a merge request"),
    endpoint(
        "GET",
        "/projects/{id}/merge_requests/{merge_request_iid}/notes/{note_id}/award_emoji",
        "List all emoji reactions for a merge request comment",
        *PAGINATION,
    ),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/notes/{note_id}/award_emoji",
        "Add an emoji reaction to a merge request comment",
        AWARD_EMOJI,
    ),
    # Draft notes
    endpoint("GET", "/projects/{id}/merge_requests/{merge_request_iid}/draft_notes", "Get a list of all draft notes for a single merge request"),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/draft_notes",
        "Create a draft note for a given merge request",
        param("note", description="The content of a note", required=True),
        param("commit_id", description="The SHA of a commit to associate the draft note to"),
        param("in_reply_to_discussion_id", description="The ID of a discussion the draft note replies to"),
        param("resolve_discussion", "boolean", "The associated discussion should be resolved"),
        param("position", "object", "Position when creating a diff note"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/merge_requests/{merge_request_iid}/draft_notes/bulk_publish",
        "Bulk publish all existing draft notes for a given merge request",
    ),
)
