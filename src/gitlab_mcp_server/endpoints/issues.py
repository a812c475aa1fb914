"""Issues, issue notes and links, labels, milestones and boards."""

from __future__ import annotations

from .base import endpoint, param
from .common import (
    AWARD_EMOJI,
    CREATED_RANGE,
    LABEL_FIELDS,
    MILESTONE_FIELDS,
    MILESTONE_FILTERS,
    NOTE_BODY,
    NOTE_FILTERS,
    PAGINATION,
    SEARCH,
    SORT,
    STATE_EVENT,
    UPDATED_RANGE,
    order_by,
)

ISSUE_FILTERS = (
    param("state", description="Return all issues or just those that are opened or closed", enum=("opened", "closed", "all")),
    param("labels", description="Comma-separated list of label names, issues must have all labels to be returned"),
    param("with_labels_details", "boolean", "If true, the response returns more details for each label"),
    param("milestone", description="The milestone title. None lists all issues with no milestone"),
    param("milestone_id", description="Returns issues assigned to milestones with a given timebox value"),
    param("iteration_id", "integer", "Return issues assigned to the given iteration ID"),
    param("scope", description="Return issues for the given scope", enum=("created_by_me", "assigned_to_me", "all")),
    param("author_id", "integer", "Return issues created by the given user id"),
    param("author_username", description="Return issues created by the given username"),
    param("assignee_id", "any", "Return issues assigned to the given user id. None returns unassigned issues"),
    param("assignee_username", "array", "Return issues assigned to the given username"),
    param("my_reaction_emoji", description="Return issues reacted by the authenticated user by the given emoji"),
    param("weight", "integer", "Return issues with the specified weight"),
    param("iids", "integer[]", "Return only the issues having the given iid"),
    order_by("created_at", "due_date", "label_priority", "milestone_due", "popularity", "priority", "relative_position", "title", "updated_at", "weight"),
    SORT,
    SEARCH,
    param("in", description="Modify the scope of the search attribute: title, description, or a string joining them with comma"),
    *CREATED_RANGE,
    *UPDATED_RANGE,
    param("due_date", description="Return issues that have no due date, are overdue, or whose due date is this week, this month, or between two weeks ago and next month"),
    param("confidential", "boolean", "Filter confidential or public issues"),
    param("issue_type", description="Filter to a given type of issue", enum=("issue", "incident", "test_case", "task")),
    param("not", "object", "Return issues that do not match the parameters supplied"),
    *PAGINATION,
)

ISSUE_FIELDS = (
    param("description", description="The description of an issue. Limited to 1,048,576 characters"),
    param("assignee_ids", "integer[]", "The IDs of the users to assign the issue to"),
    param("milestone_id", "integer", "The global ID of a milestone to assign the issue to"),
    param("labels", description="Comma-separated label names to assign to the issue"),
    param("confidential", "boolean", "Set an issue to be confidential"),
    param("due_date", description="The due date. Date time string in the format YYYY-MM-DD"),
    param("weight", "integer", "The weight of the issue"),
    param("epic_id", "integer", "ID of the epic to add the issue to"),
    param("issue_type", description="The type of issue", enum=("issue", "incident", "test_case", "task")),
)

ENDPOINTS = (
    endpoint("GET", "/issues", "Get all issues the authenticated user has access to", ISSUE_FILTERS),
    endpoint("GET", "/projects/{id}/issues", "Get a list of a project's issues", ISSUE_FILTERS),
    endpoint(
        "GET",
        "/groups/{id}/issues",
        "Get a list of a group's issues",
        param("non_archived", "boolean", "Return issues from non archived projects"),
        ISSUE_FILTERS,
    ),
    endpoint("GET", "/issues/{id}", "Get a single issue by global ID (administrators only)"),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}", "Get a single project issue"),
    endpoint(
        "POST",
        "/projects/{id}/issues",
        "Create a new project issue",
        param("title", description="The title of an issue", required=True),
        param("iid", "integer", "The internal ID of the project's issue (administrators and project owners only)"),
        param("created_at", description="When the issue was created. Date time string, ISO 8601 formatted"),
        param("merge_request_to_resolve_discussions_of", "integer", "The IID of a merge request in which to resolve all issues"),
        param("discussion_to_resolve", description="The ID of a discussion to resolve"),
        ISSUE_FIELDS,
    ),
    endpoint(
        "PUT",
        "/projects/{id}/issues/{issue_iid}",
        "Update an existing project issue",
        param("title", description="The title of an issue"),
        param("state_event", description="The state event of an issue", enum=STATE_EVENT),
        param("add_labels", description="Comma-separated label names to add to an issue"),
        param("remove_labels", description="Comma-separated label names to remove from an issue"),
        param("discussion_locked", "boolean", "Flag indicating if the issue's discussion is locked"),
        param("updated_at", description="When the issue was updated. Date time string, ISO 8601 formatted"),
        ISSUE_FIELDS,
    ),
    endpoint("DELETE", "/projects/{id}/issues/{issue_iid}", "Delete an issue (administrators and project owners only)"),
    endpoint(
        "PUT",
        "/projects/{id}/issues/{issue_iid}/reorder",
        "Reorder an issue",
        param("move_after_id", "integer", "The global ID of a project's issue that should be placed after this issue"),
        param("move_before_id", "integer", "The global ID of a project's issue that should be placed before this issue"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/issues/{issue_iid}/move",
        "Move an issue to a different project",
        param("to_project_id", "integer", "The ID of the new project", required=True),
    ),
    endpoint(
        "POST",
        "/projects/{id}/issues/{issue_iid}/clone",
        "Clone the issue to given project",
        param("to_project_id", "integer", "ID of the project the issue should be copied to", required=True),
        param("with_notes", "boolean", "Clone the issue with notes"),
    ),
    endpoint("POST", "/projects/{id}/issues/{issue_iid}/subscribe", "Subscribe the authenticated user to an issue"),
    endpoint("POST", "/projects/{id}/issues/{issue_iid}/unsubscribe", "Unsubscribe the authenticated user from an issue"),
    endpoint("POST", "/projects/{id}/issues/{issue_iid}/todo", "Manually create a to-do item for the current user on an issue"),
    endpoint(
        "POST",
        "/projects/{id}/issues/{issue_iid}/time_estimate",
        "Set an estimated time of work for this issue",
        param("duration", description="The duration in human format, such as 3h30m", required=True),
    ),
    endpoint("POST", "/projects/{id}/issues/{issue_iid}/reset_time_estimate", "Reset the estimated time for this issue to 0 seconds"),
    endpoint(
        "POST",
        "/projects/{id}/issues/{issue_iid}/add_spent_time",
        "Add spent time for this issue",
        param("duration", description="The duration in human format, such as 3h30m", required=True),
        param("summary", description="A summary of how the time was spent"),
    ),
    endpoint("POST", "/projects/{id}/issues/{issue_iid}/reset_spent_time", "Reset the total spent time for this issue to 0 seconds"),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/time_stats", "Get time tracking stats for an issue"),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/related_merge_requests", "Get all the merge requests that are related to the issue", *PAGINATION),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/closed_by", "Get all the merge requests that close a particular issue when merged"),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/participants", "List users that are participants of an issue"),
    endpoint("GET", "/projects/{id}/issues_statistics", "Get issues count statistics for given project", ISSUE_FILTERS),
    # Links
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/links", "Get a list of an issue's linked issues, sorted by the relationship creation datetime"),
    endpoint(
        "POST",
        "/projects/{id}/issues/{issue_iid}/links",
        "Create a two-way relation between two issues",
        param("target_project_id", description="The ID or URL-encoded path of a target project", required=True),
        param("target_issue_iid", description="The internal ID of a target project's issue", required=True),
        param("link_type", description="The type of the relation", enum=("relates_to", "blocks", "is_blocked_by")),
    ),
    endpoint("DELETE", "/projects/{id}/issues/{issue_iid}/links/{issue_link_id}", "Delete an issue link, thus removing the two-way relationship"),
    # Notes
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/notes", "Get a list of all notes for a single issue", NOTE_FILTERS),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/notes/{note_id}", "Get a single note for a specific project issue"),
    endpoint("POST", "/projects/{id}/issues/{issue_iid}/notes", "Create a new note for a single project issue", NOTE_BODY),
    endpoint(
        "PUT",
        "/projects/{id}/issues/{issue_iid}/notes/{note_id}",
        "Modify existing note of an issue",
        param("body", description="The content of a note. Limited to 1,000,000 characters"),
        param("confidential", "boolean", "The confidential flag of a note"),
    ),
    endpoint("DELETE", "/projects/{id}/issues/{issue_iid}/notes/{note_id}", "Delete an existing note of an issue"),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/discussions", "Get a list of all discussion items for a single issue", *PAGINATION),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/discussions/{discussion_id}", "Return a single discussion item for a specific project issue"),
    endpoint(
        "POST",
        "/projects/{id}/issues/{issue_iid}/discussions",
        "Create a new thread to a single project issue",
        param("body", description="The content of the thread", required=True),
        param("created_at", description="Date time string, ISO 8601 formatted"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/issues/{issue_iid}/discussions/{discussion_id}/notes",
        "Add a new note to the thread",
        param("body", description="The content of the note or reply", required=True),
        param("created_at", description="Date time string, ISO 8601 formatted"),
    ),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/award_emoji", "List all emoji reactions for a specified issue", *PAGINATION),
    endpoint("POST", "/projects/{id}/issues/{issue_iid}/award_emoji", "Add an emoji reaction to an issue", AWARD_EMOJI),
    endpoint("DELETE", "/projects/{id}/issues/{issue_iid}/award_emoji/{award_id}", "Delete an emoji reaction from an issue"),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/resource_label_events", "Get a list of all label events for a single issue", *PAGINATION),
    endpoint("GET", "/projects/{id}/issues/{issue_iid}/resource_state_events", "Get a list of all state events for a single issue", *PAGINATION),
    # Labels
    endpoint(
        "GET",
        "/projects/{id}/labels",
        "Get all labels for a given project",
        param("with_counts", "boolean", "Whether or not to include issue and merge request counts"),
        param("include_ancestor_groups", "boolean", "Include ancestor groups"),
        SEARCH,
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/labels/{label_id}",
        "Get a single label for a given project",
        param("include_ancestor_groups", "boolean", "Include ancestor groups"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/labels",
        "Create a new label for the given repository with the given name and color",
        param("name", description="The name of the label", required=True),
        LABEL_FIELDS,
    ),
    endpoint(
        "PUT",
        "/projects/{id}/labels/{label_id}",
        "Update an existing label with new name or new color",
        param("new_name", description="The new name of the label"),
        LABEL_FIELDS,
    ),
    endpoint("DELETE", "/projects/{id}/labels/{label_id}", "Delete a label with a given name"),
    endpoint("PUT", "/projects/{id}/labels/{label_id}/promote", "Promote a project label to a group label"),
    endpoint("POST", "/projects/{id}/labels/{label_id}/subscribe", "Subscribe the authenticated user to a label"),
    endpoint("POST", "/projects/{id}/labels/{label_id}/unsubscribe", "Unsubscribe the authenticated user from a label"),
    # Milestones
    endpoint("GET", "/projects/{id}/milestones", "Return a list of project milestones", MILESTONE_FILTERS),
    endpoint("GET", "/projects/{id}/milestones/{milestone_id}", "Get a single project milestone"),
    endpoint(
        "POST",
        "/projects/{id}/milestones",
        "Create a new project milestone",
        param("title", description="The title of a milestone", required=True),
        MILESTONE_FIELDS,
    ),
    endpoint(
        "PUT",
        "/projects/{id}/milestones/{milestone_id}",
        "Update an existing project milestone",
        param("title", description="The title of a milestone"),
        param("state_event", description="The state event of the milestone", enum=("close", "activate")),
        MILESTONE_FIELDS,
    ),
    endpoint("DELETE", "/projects/{id}/milestones/{milestone_id}", "Delete a project milestone (users with at least the Reporter role only)"),
    endpoint("GET", "/projects/{id}/milestones/{milestone_id}/issues", "Get all issues assigned to a single project milestone", *PAGINATION),
    endpoint("GET", "/projects/{id}/milestones/{milestone_id}/merge_requests", "Get all merge requests assigned to a single project milestone", *PAGINATION),
    endpoint("POST", "/projects/{id}/milestones/{milestone_id}/promote", "Promote a project milestone to a group milestone"),
    # Boards
    endpoint("GET", "/projects/{id}/boards", "List project issue boards", *PAGINATION),
    endpoint("GET", "/projects/{id}/boards/{board_id}", "Get a single project issue board"),
    endpoint(
        "POST",
        "/projects/{id}/boards",
        "Create a project issue board",
        param("name", description="The name of the new board", required=True),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/boards/{board_id}",
        "Update a project issue board",
        param("name", description="The new name of the board"),
        param("hide_backlog_list", "boolean", "Hide the Open list"),
        param("hide_closed_list", "boolean", "Hide the Closed list"),
        param("assignee_id", "integer", "The assignee the board should be scoped to"),
        param("milestone_id", "integer", "The milestone the board should be scoped to"),
        param("labels", description="Comma-separated list of label names which the board should be scoped to"),
        param("weight", "integer", "The weight range from 0 to 9, to which the board should be scoped to"),
    ),
    endpoint("DELETE", "/projects/{id}/boards/{board_id}", "Delete a project issue board"),
    endpoint("GET", "/projects/{id}/boards/{board_id}/lists", "Get a list of the board's lists", *PAGINATION),
    endpoint(
        "POST",
        "/projects/{id}/boards/{board_id}/lists",
        "Create a new issue board list",
        param("label_id", "integer", "The ID of a label"),
        param("assignee_id", "integer", "The ID of a user"),
        param("milestone_id", "integer", "The ID of a milestone"),
        param("iteration_id", "integer", "The ID of an iteration"),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/boards/{board_id}/lists/{list_id}",
        "Update an existing issue board list",
        param("position", "integer", "The position of the list", required=True),
    ),
    endpoint("DELETE", "/projects/{id}/boards/{board_id}/lists/{list_id}", "Delete an issue board list (administrators and project owners only)"),
)
