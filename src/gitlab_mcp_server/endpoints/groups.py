"""Groups, subgroups, group members, labels, milestones, badges and hooks."""

from __future__ import annotations

from .base import endpoint, param
from .common import (
    BADGE_FIELDS,
    HOOK_EVENTS,
    LABEL_FIELDS,
    MEMBER_FIELDS,
    MILESTONE_FIELDS,
    MILESTONE_FILTERS,
    PAGINATION,
    SEARCH,
    SORT,
    VISIBILITY,
    WITH_CUSTOM_ATTRIBUTES,
    member_filters,
    order_by,
)

GROUP_FILTERS = (
    param("skip_groups", "integer[]", "Skip the group IDs passed"),
    param("all_available", "boolean", "Show all the groups you have access to"),
    SEARCH,
    order_by("name", "path", "id", "similarity", description="Order groups by name, path, id, or similarity"),
    SORT,
    param("statistics", "boolean", "Include group statistics (administrators only)"),
    param("visibility", description="Limit to groups with a visibility level", enum=VISIBILITY),
    WITH_CUSTOM_ATTRIBUTES,
    param("owned", "boolean", "Limit to groups explicitly owned by the current user"),
    param("min_access_level", "integer", "Limit to groups where current user has at least this role"),
    param("top_level_only", "boolean", "Limit to top-level groups, excluding all subgroups"),
    param("repository_storage", description="Filter by repository storage used by the group (administrators only)"),
    param("marked_for_deletion_on", description="Filter by date when group was marked for deletion"),
    *PAGINATION,
)

GROUP_SETTINGS = (
    param("description", description="The group's description"),
    param("visibility", description="The group's visibility", enum=VISIBILITY),
    param("membership_lock", "boolean", "Users cannot be added to projects in this group"),
    param("share_with_group_lock", "boolean", "Prevent sharing a project with another group within this group"),
    param("request_access_enabled", "boolean", "Allow users to request member access"),
    param("lfs_enabled", "boolean", "Enable or disable Large File Storage (LFS) for the projects in this group"),
    param("project_creation_level", description="Determine if developers can create projects in the group", enum=("noone", "owner", "maintainer", "developer")),
    param("subgroup_creation_level", description="Allowed to create subgroups", enum=("owner", "maintainer")),
    param("default_branch", description="The default branch name for group's projects"),
    param("two_factor_grace_period", "integer", "Time before Two-factor authentication is enforced (in hours)"),
    param("require_two_factor_authentication", "boolean", "Require all users in this group to set up two-factor authentication"),
    param("auto_devops_enabled", "boolean", "Default to Auto DevOps pipeline for all projects within this group"),
    param("emails_enabled", "boolean", "Enable email notifications"),
    param("mentions_disabled", "boolean", "Disable the capability of a group from getting mentioned"),
    param("avatar", description="Image file for avatar of the group"),
)

ENDPOINTS = (
    endpoint("GET", "/groups", "Get a list of visible groups for the authenticated user", GROUP_FILTERS),
    endpoint(
        "GET",
        "/groups/{id}",
        "Get all details of a group",
        WITH_CUSTOM_ATTRIBUTES,
        param("with_projects", "boolean", "Include details from projects that belong to the specified group"),
    ),
    endpoint(
        "POST",
        "/groups",
        "Create a new project group",
        param("name", description="The name of the group", required=True),
        param("path", description="The path of the group", required=True),
        param("parent_id", "integer", "The parent group ID for creating nested group"),
        GROUP_SETTINGS,
    ),
    endpoint(
        "PUT",
        "/groups/{id}",
        "Update the project group",
        param("name", description="The name of the group"),
        param("path", description="The path of the group"),
        param("prevent_forking_outside_group", "boolean", "When enabled, users can not fork projects from this group to external namespaces"),
        GROUP_SETTINGS,
    ),
    endpoint(
        "DELETE",
        "/groups/{id}",
        "Remove group, and queue a background job to delete all projects in the group",
        param("full_path", description="Full path of group to use with permanently_remove"),
        param("permanently_remove", "boolean", "Immediately deletes a subgroup if it is marked for deletion"),
    ),
    endpoint("POST", "/groups/{id}/restore", "Restore a group marked for deletion"),
    endpoint("POST", "/groups/{id}/archive", "Archive a group"),
    endpoint("POST", "/groups/{id}/unarchive", "Unarchive a group"),
    endpoint("GET", "/groups/{id}/subgroups", "Get a list of visible direct subgroups in this group", GROUP_FILTERS),
    endpoint("GET", "/groups/{id}/descendant_groups", "Get a list of visible descendant groups of this group", GROUP_FILTERS),
    endpoint(
        "GET",
        "/groups/{id}/projects",
        "Get a list of projects in this group",
        param("archived", "boolean", "Limit by archived status"),
        param("visibility", description="Limit by visibility", enum=VISIBILITY),
        order_by("id", "name", "path", "created_at", "updated_at", "similarity", "star_count", "last_activity_at"),
        SORT,
        SEARCH,
        param("simple", "boolean", "Return only limited fields for each project"),
        param("owned", "boolean", "Limit by projects owned by the current user"),
        param("starred", "boolean", "Limit by projects starred by the current user"),
        param("topic", description="Return projects matching the topic"),
        param("with_issues_enabled", "boolean", "Limit by projects with issues feature enabled"),
        param("with_merge_requests_enabled", "boolean", "Limit by projects with merge requests feature enabled"),
        param("with_shared", "boolean", "Include projects shared to this group"),
        param("include_subgroups", "boolean", "Include projects in subgroups of this group"),
        param("min_access_level", "integer", "Limit to projects where current user has at least this role"),
        WITH_CUSTOM_ATTRIBUTES,
        param("with_security_reports", "boolean", "Return only projects that have security reports artifacts present"),
        *PAGINATION,
    ),
    endpoint("GET", "/groups/{id}/shared_projects", "Get a list of projects shared to this group", SEARCH, SORT, *PAGINATION),
    endpoint(
        "POST",
        "/groups/{id}/projects/{project_id}",
        "Transfer a project to the group namespace (administrators only)",
    ),
    endpoint(
        "POST",
        "/groups/{id}/transfer",
        "Transfer a group to a new parent group or turn a subgroup to a top-level group",
        param("group_id", "integer", "ID of the new parent group. When not specified, the group is transferred to top-level"),
    ),
    endpoint(
        "POST",
        "/groups/{id}/share",
        "Share a group with another group",
        param("group_id", "integer", "The ID of the group to share with", required=True),
        param("group_access", "integer", "The role to grant to the group", required=True),
        param("expires_at", description="Share expiration date in ISO 8601 format"),
    ),
    endpoint("DELETE", "/groups/{id}/share/{group_id}", "Unshare the group from another group"),
    # Members
    endpoint("GET", "/groups/{id}/members", "List all members of a group", member_filters()),
    endpoint(
        "GET",
        "/groups/{id}/members/all",
        "List all members of a group, including inherited and invited members",
        member_filters(),
        param("show_seat_info", "boolean", "Show seat information for users"),
        param("state", description="Filter results by member state", enum=("awaiting", "active")),
    ),
    endpoint("GET", "/groups/{id}/members/{user_id}", "Get a member of a group"),
    endpoint("GET", "/groups/{id}/members/all/{user_id}", "Get a member of a group, including inherited and invited members"),
    endpoint("GET", "/groups/{id}/billable_members", "List billable members of a top-level group", SEARCH, param("sort", description="A query string containing parameters that specify the sort attribute"), *PAGINATION),
    endpoint(
        "POST",
        "/groups/{id}/members",
        "Add a member to a group",
        param("user_id", description="The user ID of the new member or multiple IDs separated by commas"),
        param("username", description="The username of the new member or multiple usernames separated by commas"),
        MEMBER_FIELDS,
    ),
    endpoint("PUT", "/groups/{id}/members/{user_id}", "Update a member of a group", MEMBER_FIELDS),
    endpoint(
        "DELETE",
        "/groups/{id}/members/{user_id}",
        "Remove a member from a group",
        param("skip_subresources", "boolean", "Whether the deletion of direct memberships of the removed member in subgroups and projects should be skipped"),
        param("unassign_issuables", "boolean", "Whether the removed member should be unassigned from any issues or merge requests"),
    ),
    endpoint("GET", "/groups/{id}/access_requests", "List access requests for a group", *PAGINATION),
    endpoint("POST", "/groups/{id}/access_requests", "Request access to a group"),
    endpoint(
        "PUT",
        "/groups/{id}/access_requests/{user_id}/approve",
        "Approve an access request for the given user",
        param("access_level", "integer", "A valid access level (defaults to 30, Developer)"),
    ),
    endpoint("DELETE", "/groups/{id}/access_requests/{user_id}", "Deny an access request for the given user"),
    # Labels
    endpoint(
        "GET",
        "/groups/{id}/labels",
        "Get all labels for a given group",
        param("with_counts", "boolean", "Whether or not to include issue and merge request counts"),
        param("include_ancestor_groups", "boolean", "Include ancestor groups"),
        param("include_descendant_groups", "boolean", "Include descendant groups"),
        param("only_group_labels", "boolean", "Toggle to include only group labels or also project labels"),
        SEARCH,
        *PAGINATION,
    ),
    endpoint("GET", "/groups/{id}/labels/{label_id}", "Get a single label for a given group"),
    endpoint(
        "POST",
        "/groups/{id}/labels",
        "Create a new group label for a given group",
        param("name", description="The name of the label", required=True),
        param("color", description="The color of the label in 6-digit hex notation or a CSS color name", required=True),
        param("description", description="The description of the label"),
    ),
    endpoint(
        "PUT",
        "/groups/{id}/labels/{label_id}",
        "Update an existing group label",
        param("new_name", description="The new name of the label"),
        LABEL_FIELDS,
    ),
    endpoint("DELETE", "/groups/{id}/labels/{label_id}", "Delete a group label with a given name"),
    # Milestones
    endpoint("GET", "/groups/{id}/milestones", "Return a list of group milestones", MILESTONE_FILTERS),
    endpoint("GET", "/groups/{id}/milestones/{milestone_id}", "Get a single group milestone"),
    endpoint(
        "POST",
        "/groups/{id}/milestones",
        "Create a new group milestone",
        param("title", description="The title of a milestone", required=True),
        MILESTONE_FIELDS,
    ),
    endpoint(
        "PUT",
        "/groups/{id}/milestones/{milestone_id}",
        "Update an existing group milestone",
        param("title", description="The title of a milestone"),
        param("state_event", description="The state event of the milestone", enum=("close", "activate")),
        MILESTONE_FIELDS,
    ),
    endpoint("DELETE", "/groups/{id}/milestones/{milestone_id}", "Delete a group milestone"),
    endpoint("GET", "/groups/{id}/milestones/{milestone_id}/issues", "Get all issues assigned to a single group milestone", *PAGINATION),
    endpoint("GET", "/groups/{id}/milestones/{milestone_id}/merge_requests", "Get all merge requests assigned to a single group milestone", *PAGINATION),
    # Badges
    endpoint("GET", "/groups/{id}/badges", "List all badges of a group", param("name", description="Name of the badges to return (case-sensitive)"), *PAGINATION),
    endpoint("GET", "/groups/{id}/badges/{badge_id}", "Get a badge of a group"),
    endpoint("POST", "/groups/{id}/badges", "Add a badge to a group", BADGE_FIELDS),
    endpoint("PUT", "/groups/{id}/badges/{badge_id}", "Update a badge of a group", BADGE_FIELDS),
    endpoint("DELETE", "/groups/{id}/badges/{badge_id}", "Remove a badge from a group"),
    # Hooks
    endpoint("GET", "/groups/{id}/hooks", "Get a list of group hooks", *PAGINATION),
    endpoint("GET", "/groups/{id}/hooks/{hook_id}", "Get a specific hook for a group"),
    endpoint(
        "POST",
        "/groups/{id}/hooks",
        "Add a hook to the specified group",
        param("url", description="The hook URL", required=True),
        param("subgroup_events", "boolean", "Trigger hook on subgroup events"),
        param("member_events", "boolean", "Trigger hook on member events"),
        HOOK_EVENTS,
    ),
    endpoint(
        "PUT",
        "/groups/{id}/hooks/{hook_id}",
        "Edit a hook for a specified group",
        param("url", description="The hook URL", required=True),
        param("subgroup_events", "boolean", "Trigger hook on subgroup events"),
        param("member_events", "boolean", "Trigger hook on member events"),
        HOOK_EVENTS,
    ),
    endpoint("DELETE", "/groups/{id}/hooks/{hook_id}", "Remove a hook from a group"),
    # Boards
    endpoint("GET", "/groups/{id}/boards", "List issue boards in the given group", *PAGINATION),
    endpoint("GET", "/groups/{id}/boards/{board_id}", "Get a single group issue board"),
    endpoint("GET", "/groups/{id}/boards/{board_id}/lists", "Get a list of the board's lists", *PAGINATION),
    # Epics
    endpoint(
        "GET",
        "/groups/{id}/epics",
        "Get all epics of the requested group and its subgroups",
        param("author_id", "integer", "Return epics created by the given user id"),
        param("labels", description="Return epics matching a comma-separated list of labels names"),
        param("state", description="Search epics against their state", enum=("opened", "closed", "all")),
        order_by("created_at", "updated_at", "title"),
        SORT,
        SEARCH,
        param("include_descendant_groups", "boolean", "Include epics from the requested group's descendants"),
        *PAGINATION,
    ),
    endpoint("GET", "/groups/{id}/epics/{epic_iid}", "Get a single epic"),
    endpoint(
        "POST",
        "/groups/{id}/epics",
        "Create a new epic",
        param("title", description="The title of the epic", required=True),
        param("labels", description="The comma-separated list of labels"),
        param("description", description="The description of the epic"),
        param("confidential", "boolean", "Whether the epic should be confidential"),
        param("start_date_fixed", description="The fixed start date of an epic"),
        param("due_date_fixed", description="The fixed due date of an epic"),
        param("parent_id", "integer", "The ID of a parent epic"),
    ),
    endpoint(
        "PUT",
        "/groups/{id}/epics/{epic_iid}",
        "Update an epic",
        param("title", description="The title of an epic"),
        param("description", description="The description of an epic"),
        param("labels", description="Comma-separated label names for an issue"),
        param("state_event", description="State event for an epic", enum=("close", "reopen")),
        param("confidential", "boolean", "Whether the epic should be confidential"),
        param("parent_id", "integer", "The ID of a parent epic"),
    ),
    endpoint("DELETE", "/groups/{id}/epics/{epic_iid}", "Delete an epic of a group"),
    endpoint("GET", "/groups/{id}/epics/{epic_iid}/issues", "Get all issues that are assigned to an epic", *PAGINATION),
    # Search and audit
    endpoint(
        "GET",
        "/groups/{id}/search",
        "Search within the specified group",
        param("scope", description="The scope to search in", required=True, enum=("issues", "merge_requests", "milestones", "projects", "users", "blobs", "commits", "notes", "wiki_blobs")),
        param("search", description="The search query", required=True),
        param("confidential", "boolean", "Filter by confidentiality (issues scope only)"),
        param("state", description="Filter by state (issues and merge_requests scopes only)"),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/groups/{id}/audit_events",
        "Retrieve group audit events",
        param("created_after", description="Return group audit events created on or after the given time"),
        param("created_before", description="Return group audit events created on or before the given time"),
        *PAGINATION,
    ),
)
