"""Projects, project members, hooks, badges and sharing."""

from __future__ import annotations

from .base import endpoint, param
from .common import (
    BADGE_FIELDS,
    CREATED_RANGE,
    HOOK_EVENTS,
    MEMBER_FIELDS,
    PAGINATION,
    SEARCH,
    SORT,
    UPDATED_RANGE,
    VISIBILITY,
    WITH_CUSTOM_ATTRIBUTES,
    member_filters,
    order_by,
)

PROJECT_FILTERS = (
    order_by(
        "id",
        "name",
        "path",
        "created_at",
        "updated_at",
        "star_count",
        "last_activity_at",
        "similarity",
        "repository_size",
        "storage_size",
        "packages_size",
        "wiki_size",
    ),
    SORT,
    param("archived", "boolean", "Limit by archived status"),
    param("visibility", description="Limit by visibility", enum=VISIBILITY),
    SEARCH,
    param("search_namespaces", "boolean", "Include ancestor namespaces when matching search criteria"),
    param("owned", "boolean", "Limit by projects explicitly owned by the current user"),
    param("starred", "boolean", "Limit by projects starred by the current user"),
    param("imported", "boolean", "Limit results to projects imported by the current user"),
    param("membership", "boolean", "Limit by projects that the current user is a member of"),
    param("with_issues_enabled", "boolean", "Limit by enabled issues feature"),
    param("with_merge_requests_enabled", "boolean", "Limit by enabled merge requests feature"),
    param("with_programming_language", description="Limit by projects which use the given programming language"),
    param("min_access_level", "integer", "Limit by current user minimal access level"),
    param("id_after", "integer", "Limit results to projects with IDs greater than the specified ID"),
    param("id_before", "integer", "Limit results to projects with IDs less than the specified ID"),
    param("last_activity_after", description="Limit results to projects with last activity after specified time"),
    param("last_activity_before", description="Limit results to projects with last activity before specified time"),
    param("repository_storage", description="Limit results to projects stored on repository_storage"),
    param("topic", description="Comma-separated topic names. Limit results to projects that match all given topics"),
    param("topic_id", "integer", "Limit results to projects with the assigned topic given by the topic ID"),
    *UPDATED_RANGE,
    param("include_pending_delete", "boolean", "Include projects pending deletion"),
    param("marked_for_deletion_on", description="Filter by date when project was marked for deletion"),
    param("active", "boolean", "Limit by projects that are not archived and not marked for deletion"),
    param("wiki_checksum_failed", "boolean", "Limit projects where the wiki checksum calculation has failed"),
    param("repository_checksum_failed", "boolean", "Limit projects where the repository checksum calculation has failed"),
    param("include_hidden", "boolean", "Include hidden projects (administrators only)"),
    *PAGINATION,
    param("simple", "boolean", "Return only limited fields for each project"),
    param("statistics", "boolean", "Include project statistics"),
    WITH_CUSTOM_ATTRIBUTES,
)

PROJECT_SETTINGS = (
    param("description", description="Short project description"),
    param("visibility", description="See project visibility level", enum=VISIBILITY),
    param("default_branch", description="The default branch name"),
    param("topics", "array", "The list of topics for a project"),
    param("issues_access_level", description="One of disabled, private, or enabled"),
    param("merge_requests_access_level", description="One of disabled, private, or enabled"),
    param("builds_access_level", description="One of disabled, private, or enabled"),
    param("wiki_access_level", description="One of disabled, private, or enabled"),
    param("snippets_access_level", description="One of disabled, private, or enabled"),
    param("container_registry_access_level", description="One of disabled, private, or enabled"),
    param("merge_method", description="Set the project's merge method", enum=("merge", "rebase_merge", "ff")),
    param("squash_option", description="Squash option", enum=("never", "always", "default_on", "default_off")),
    param("only_allow_merge_if_pipeline_succeeds", "boolean", "Set whether merge requests can only be merged with successful pipelines"),
    param("only_allow_merge_if_all_discussions_are_resolved", "boolean", "Set whether merge requests can only be merged when all the discussions are resolved"),
    param("remove_source_branch_after_merge", "boolean", "Enable Delete source branch option by default for all new merge requests"),
    param("lfs_enabled", "boolean", "Enable LFS"),
    param("request_access_enabled", "boolean", "Allow users to request member access"),
    param("shared_runners_enabled", "boolean", "Enable instance runners for this project"),
    param("ci_config_path", description="The path to CI configuration file"),
    param("build_timeout", "integer", "The maximum amount of time, in seconds, that jobs can run"),
    param("auto_devops_enabled", "boolean", "Enable Auto DevOps for this project"),
    param("printing_merge_request_link_enabled", "boolean", "Show link to create or view a merge request when pushing from the command line"),
    param("avatar", description="Image file for avatar of the project"),
)

ENDPOINTS = (
    endpoint("GET", "/projects", "Get a list of visible projects for authenticated user", PROJECT_FILTERS),
    endpoint(
        "POST",
        "/projects",
        "Create new project",
        param("name", description="The name of the new project. Equals path if not provided"),
        param("path", description="Repository name for new project. Generated based on name if not provided"),
        param("namespace_id", "integer", "Namespace for the new project. Defaults to the current user's namespace"),
        param("initialize_with_readme", "boolean", "Whether to create a Git repository with just a README.md file"),
        param("import_url", description="URL to import repository from"),
        param("template_name", description="Name of a built-in project template"),
        PROJECT_SETTINGS,
    ),
    endpoint(
        "POST",
        "/projects/user/{user_id}",
        "Create a project for the specified user (administrators only)",
        param("name", description="The name of the new project", required=True),
        param("path", description="Custom repository name for new project"),
        PROJECT_SETTINGS,
    ),
    endpoint(
        "GET",
        "/projects/{id}",
        "Get a single project",
        param("statistics", "boolean", "Include project statistics"),
        WITH_CUSTOM_ATTRIBUTES,
        param("license", "boolean", "Include project license data"),
    ),
    endpoint(
        "PUT",
        "/projects/{id}",
        "Update an existing project",
        param("name", description="The name of the project"),
        param("path", description="Custom repository name for the project"),
        PROJECT_SETTINGS,
    ),
    endpoint(
        "DELETE",
        "/projects/{id}",
        "Delete a project",
        param("full_path", description="Full path of project to use with permanently_remove"),
        param("permanently_remove", "boolean", "Immediately deletes a project if it is marked for deletion"),
    ),
    endpoint(
        "GET",
        "/users/{user_id}/projects",
        "Get a list of visible projects owned by the given user",
        PROJECT_FILTERS,
    ),
    endpoint(
        "GET",
        "/users/{user_id}/starred_projects",
        "Get projects starred by the given user",
        order_by("id", "name", "path", "created_at", "updated_at", "last_activity_at"),
        SORT,
        SEARCH,
        param("simple", "boolean", "Return only limited fields for each project"),
        *PAGINATION,
    ),
    endpoint("POST", "/projects/{id}/archive", "Archive a project"),
    endpoint("POST", "/projects/{id}/unarchive", "Unarchive a project"),
    endpoint("POST", "/projects/{id}/restore", "Restore a project marked for deletion"),
    endpoint("POST", "/projects/{id}/star", "Star a project"),
    endpoint("POST", "/projects/{id}/unstar", "Unstar a project"),
    endpoint("GET", "/projects/{id}/starrers", "List users who starred a project", SEARCH, *PAGINATION),
    endpoint("GET", "/projects/{id}/languages", "Get languages used in a project with percentage value"),
    endpoint(
        "POST",
        "/projects/{id}/fork",
        "Fork a project into the user namespace of the authenticated user or the one provided",
        param("namespace_id", "integer", "The ID of the namespace that the project is forked to"),
        param("namespace_path", description="The path of the namespace that the project is forked to"),
        param("name", description="The name assigned to the resultant project after forking"),
        param("path", description="The path assigned to the resultant project after forking"),
        param("branches", description="Branches to fork (empty for all branches)"),
        param("description", description="The description assigned to the resultant project after forking"),
        param("visibility", description="The visibility level assigned to the resultant project", enum=VISIBILITY),
        param("mr_default_target_self", "boolean", "For forked projects, target merge requests to this project"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/forks",
        "List the projects accessible to the calling user that have an established, forked relationship",
        PROJECT_FILTERS,
    ),
    endpoint(
        "POST",
        "/projects/{id}/fork/{forked_from_id}",
        "Create a forked from/to relation between existing projects",
    ),
    endpoint("DELETE", "/projects/{id}/fork", "Delete an existing forked from relationship"),
    endpoint(
        "PUT",
        "/projects/{id}/transfer",
        "Transfer a project to a new namespace",
        param("namespace", description="The ID or path of the namespace to transfer to", required=True),
    ),
    endpoint(
        "GET",
        "/projects/{id}/transfer_locations",
        "Retrieve a list of groups to which the user can transfer a project",
        SEARCH,
        *PAGINATION,
    ),
    endpoint(
        "POST",
        "/projects/{id}/share",
        "Share a project with a group",
        param("group_id", "integer", "The ID of the group to share with", required=True),
        param("group_access", "integer", "The access level to grant the group", required=True),
        param("expires_at", description="Share expiration date in ISO 8601 format"),
    ),
    endpoint("DELETE", "/projects/{id}/share/{group_id}", "Unshare the project from the group"),
    endpoint(
        "POST",
        "/projects/{id}/housekeeping",
        "Start the housekeeping task for a project",
        param("task", description="Type of housekeeping", enum=("prune", "eager")),
    ),
    endpoint(
        "POST",
        "/projects/{id}/import_project_members/{project_id}",
        "Import members from another project",
    ),
    endpoint(
        "GET",
        "/projects/{id}/users",
        "Get the users list of a project",
        SEARCH,
        param("skip_users", "integer[]", "Filter out users with the specified IDs"),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/groups",
        "Get a list of ancestor groups for this project",
        SEARCH,
        param("skip_groups", "integer[]", "Skip the group IDs passed"),
        param("with_shared", "boolean", "Include projects shared with this group"),
        param("shared_min_access_level", "integer", "Limit to shared groups with at least this access level"),
        param("shared_visible_only", "boolean", "Limit to shared groups user has access to"),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/events",
        "List a project's visible events",
        param("action", description="Include only events of a particular action type"),
        param("target_type", description="Include only events of a particular target type"),
        param("before", description="Include only events created before a particular date (YYYY-MM-DD)"),
        param("after", description="Include only events created after a particular date (YYYY-MM-DD)"),
        SORT,
        *PAGINATION,
    ),
    endpoint(
        "POST",
        "/projects/{id}/uploads",
        "Upload a file to the specified project, to be used in an issue or merge request description, or a comment",
        param("file", description="The file to be uploaded", required=True),
    ),
    # Members
    endpoint(
        "GET", "/projects/{id}/members", "List all members of a project", member_filters()
    ),
    endpoint(
        "GET",
        "/projects/{id}/members/all",
        "List all members of a project, including inherited and invited members",
        member_filters(),
        param("show_seat_info", "boolean", "Show seat information for users"),
        param("state", description="Filter results by member state", enum=("awaiting", "active")),
    ),
    endpoint("GET", "/projects/{id}/members/{user_id}", "Get a member of a project"),
    endpoint("GET", "/projects/{id}/members/all/{user_id}", "Get a member of a project, including inherited and invited members"),
    endpoint(
        "POST",
        "/projects/{id}/members",
        "Add a member to a project",
        param("user_id", description="The user ID of the new member or multiple IDs separated by commas"),
        param("username", description="The username of the new member or multiple usernames separated by commas"),
        MEMBER_FIELDS,
    ),
    endpoint("PUT", "/projects/{id}/members/{user_id}", "Update a member of a project", MEMBER_FIELDS),
    endpoint(
        "DELETE",
        "/projects/{id}/members/{user_id}",
        "Remove a member from a project",
        param("skip_subresources", "boolean", "Whether the deletion of direct memberships of the removed member in subgroups and projects should be skipped"),
        param("unassign_issuables", "boolean", "Whether the removed member should be unassigned from any issues or merge requests"),
    ),
    endpoint("GET", "/projects/{id}/access_requests", "List access requests for a project", *PAGINATION),
    endpoint("POST", "/projects/{id}/access_requests", "Request access to a project"),
    endpoint(
        "PUT",
        "/projects/{id}/access_requests/{user_id}/approve",
        "Approve an access request for the given user",
        param("access_level", "integer", "A valid access level (defaults to 30, Developer)"),
    ),
    endpoint("DELETE", "/projects/{id}/access_requests/{user_id}", "Deny an access request for the given user"),
    # Hooks
    endpoint("GET", "/projects/{id}/hooks", "List project webhooks", *PAGINATION),
    endpoint("GET", "/projects/{id}/hooks/{hook_id}", "Get a specific webhook for a project"),
    endpoint(
        "POST",
        "/projects/{id}/hooks",
        "Add a webhook to a project",
        param("url", description="The hook URL", required=True),
        HOOK_EVENTS,
    ),
    endpoint(
        "PUT",
        "/projects/{id}/hooks/{hook_id}",
        "Edit a webhook for a project",
        param("url", description="The hook URL", required=True),
        HOOK_EVENTS,
    ),
    endpoint("DELETE", "/projects/{id}/hooks/{hook_id}", "Delete a webhook from a project"),
    endpoint(
        "POST",
        "/projects/{id}/hooks/{hook_id}/test/{trigger}",
        "Trigger a test hook for a specified project",
    ),
    # Badges
    endpoint(
        "GET",
        "/projects/{id}/badges",
        "List all badges of a project",
        param("name", description="Name of the badges to return (case-sensitive)"),
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/badges/{badge_id}", "Get a badge of a project"),
    endpoint("POST", "/projects/{id}/badges", "Add a badge to a project", BADGE_FIELDS),
    endpoint("PUT", "/projects/{id}/badges/{badge_id}", "Update a badge of a project", BADGE_FIELDS),
    endpoint("DELETE", "/projects/{id}/badges/{badge_id}", "Remove a badge from a project"),
    endpoint(
        "GET",
        "/projects/{id}/badges/render",
        "Preview a badge with placeholders interpolated",
        param("link_url", description="URL of the badge link", required=True),
        param("image_url", description="URL of the badge image", required=True),
    ),
    # Integrations
    endpoint("GET", "/projects/{id}/integrations", "List all active integrations for a project"),
    endpoint("GET", "/projects/{id}/integrations/{service_slug}", "Get the settings of an integration"),
    endpoint("DELETE", "/projects/{id}/integrations/{service_slug}", "Disable an integration"),
    # Search
    endpoint(
        "GET",
        "/projects/{id}/search",
        "Search within the specified project",
        param(
            "scope",
            description="The scope to search in",
            required=True,
            enum=(
                "blobs",
                "commits",
                "issues",
                "merge_requests",
                "milestones",
                "notes",
                "users",
                "wiki_blobs",
            ),
        ),
        param("search", description="The search query", required=True),
        param("ref", description="The name of a repository branch or tag to search on"),
        param("confidential", "boolean", "Filter by confidentiality (issues scope only)"),
        param("state", description="Filter by state (issues and merge_requests scopes only)"),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/statistics",
        "Get the clone statistics of the last 30 days",
    ),
    endpoint(
        "GET",
        "/projects/{id}/audit_events",
        "Retrieve project audit events",
        *CREATED_RANGE,
        *PAGINATION,
    ),
)
