"""Instance-wide resources: snippets, search, to-do items, events, topics and administration."""

from __future__ import annotations

from .base import endpoint, param
from .common import PAGINATION, SEARCH, SORT, VISIBILITY

SNIPPET_FILES = param(
    "files",
    "any",
    "An array of snippet files, each with file_path, content and, for updates, action and previous_path",
)

SNIPPET_FIELDS = (
    param("description", description="Description of the snippet"),
    param("visibility", description="Snippet's visibility", enum=VISIBILITY),
    param("content", description="Deprecated: Use files instead. Content of the snippet"),
    param("file_name", description="Deprecated: Use files instead. Name of a snippet file"),
)

BROADCAST_FIELDS = (
    param("starts_at", description="Starting time (defaults to current time in UTC, ISO 8601)"),
    param("ends_at", description="Ending time (defaults to one hour from current time in UTC, ISO 8601)"),
    param("font", description="Foreground color hex code"),
    param("target_access_levels", "integer[]", "Target access levels (roles) of the broadcast message"),
    param("target_path", description="Target path of the broadcast message"),
    param("broadcast_type", description="Appearance type", enum=("banner", "notification")),
    param("dismissable", "boolean", "Can the user dismiss the message"),
    param("theme", description="The color theme for the broadcast message (banners only)"),
)

ENDPOINTS = (
    # Snippets
    endpoint("GET", "/snippets", "Get a list of the current user's snippets", param("created_after", description="Return snippets created after the given time"), param("created_before", description="Return snippets created before the given time"), *PAGINATION),
    endpoint("GET", "/snippets/public", "List all public snippets", *PAGINATION),
    endpoint("GET", "/snippets/all", "List all snippets the current user has access to", param("repository_storage", description="Filter by repository storage used by the snippet (administrators only)"), *PAGINATION),
    endpoint("GET", "/snippets/{id}", "Get a single snippet"),
    endpoint("GET", "/snippets/{id}/raw", "Get a single snippet's raw contents", raw=True),
    endpoint(
        "POST",
        "/snippets",
        "Create a new snippet",
        param("title", description="Title of a snippet", required=True),
        SNIPPET_FILES,
        SNIPPET_FIELDS,
    ),
    endpoint(
        "PUT",
        "/snippets/{id}",
        "Update an existing snippet",
        param("title", description="Title of a snippet"),
        SNIPPET_FILES,
        SNIPPET_FIELDS,
    ),
    endpoint("DELETE", "/snippets/{id}", "Delete an existing snippet"),
    endpoint("GET", "/projects/{id}/snippets", "Get a list of project snippets", *PAGINATION),
    endpoint("GET", "/projects/{id}/snippets/{snippet_id}", "Get a single project snippet"),
    endpoint("GET", "/projects/{id}/snippets/{snippet_id}/raw", "Get the raw project snippet as plain text", raw=True),
    endpoint(
        "POST",
        "/projects/{id}/snippets",
        "Create a new project snippet",
        param("title", description="Title of a snippet", required=True),
        SNIPPET_FILES,
        SNIPPET_FIELDS,
    ),
    endpoint(
        "PUT",
        "/projects/{id}/snippets/{snippet_id}",
        "Update an existing project snippet",
        param("title", description="Title of a snippet"),
        SNIPPET_FILES,
        SNIPPET_FIELDS,
    ),
    endpoint("DELETE", "/projects/{id}/snippets/{snippet_id}", "Delete an existing project snippet"),
    # Search
    endpoint(
        "GET",
        "/search",
        "Search the expression within the specified scope across the GitLab instance",
        param("scope", description="The scope to search in", required=True, enum=("projects", "issues", "merge_requests", "milestones", "snippet_titles", "users", "blobs", "commits", "notes", "wiki_blobs")),
        param("search", description="The search query", required=True),
        param("confidential", "boolean", "Filter by confidentiality (issues scope only)"),
        param("state", description="Filter by state (issues and merge_requests scopes only)"),
        param("order_by", description="Allowed values are created_at only"),
        SORT,
        *PAGINATION,
    ),
    # To-do items
    endpoint(
        "GET",
        "/todos",
        "Get a list of to-do items",
        param("action", description="The action to be filtered", enum=("assigned", "mentioned", "build_failed", "marked", "approval_required", "unmergeable", "directly_addressed", "merge_train_removed", "member_access_requested")),
        param("author_id", "integer", "The ID of an author"),
        param("project_id", "integer", "The ID of a project"),
        param("group_id", "integer", "The ID of a group"),
        param("state", description="The state of the to-do item", enum=("pending", "done")),
        param("type", description="The type of to-do item", enum=("Issue", "MergeRequest", "Commit", "Epic", "DesignManagement::Design", "AlertManagement::Alert")),
        *PAGINATION,
    ),
    endpoint("POST", "/todos/{id}/mark_as_done", "Mark a single pending to-do item given by its ID for the current user as done"),
    endpoint("POST", "/todos/mark_as_done", "Mark all pending to-do items for the current user as done"),
    # Events
    endpoint(
        "GET",
        "/events",
        "List all events for the authenticated user",
        param("action", description="Include only events of a particular action type"),
        param("target_type", description="Include only events of a particular target type"),
        param("before", description="Include only events created before this date"),
        param("after", description="Include only events created after this date"),
        param("scope", description="Include all events across a user's projects"),
        SORT,
        *PAGINATION,
    ),
    # Topics
    endpoint(
        "GET",
        "/topics",
        "Returns a list of project topics in the GitLab instance ordered by number of associated projects",
        SEARCH,
        param("without_projects", "boolean", "Limit results to topics without assigned projects"),
        *PAGINATION,
    ),
    endpoint("GET", "/topics/{id}", "Get a project topic by ID"),
    endpoint(
        "POST",
        "/topics",
        "Create a new project topic (administrators only)",
        param("name", description="Slug (name)", required=True),
        param("title", description="Title", required=True),
        param("description", description="Description"),
    ),
    endpoint(
        "PUT",
        "/topics/{id}",
        "Update a project topic (administrators only)",
        param("name", description="Slug (name)"),
        param("title", description="Title"),
        param("description", description="Description"),
    ),
    endpoint("DELETE", "/topics/{id}", "Delete a project topic (administrators only)"),
    endpoint(
        "POST",
        "/topics/merge",
        "Merge a source topic into a target topic (administrators only)",
        param("source_topic_id", "integer", "ID of source project topic", required=True),
        param("target_topic_id", "integer", "ID of target project topic", required=True),
    ),
    # Metadata and helpers
    endpoint("GET", "/version", "Retrieve version information for this GitLab instance"),
    endpoint("GET", "/metadata", "Retrieve metadata information for this GitLab instance"),
    endpoint(
        "POST",
        "/markdown",
        "Render an arbitrary Markdown document",
        param("text", description="The Markdown text to render", required=True),
        param("gfm", "boolean", "Render text using GitLab Flavored Markdown"),
        param("project", description="Use project as a context when creating references using GitLab Flavored Markdown"),
    ),
    endpoint(
        "GET",
        "/avatar",
        "Get a single avatar URL for a user with the given email address",
        param("email", description="Public email address of the user", required=True),
        param("size", "integer", "Single pixel dimension"),
    ),
    endpoint("GET", "/templates/licenses", "Get all license templates", param("popular", "boolean", "If passed, returns only popular licenses"), *PAGINATION),
    endpoint("GET", "/templates/gitignores", "Get all .gitignore templates", *PAGINATION),
    endpoint("GET", "/templates/gitlab_ci_ymls", "Get all GitLab CI/CD YAML templates", *PAGINATION),
    endpoint(
        "POST",
        "/ci/lint",
        "Check if CI/CD YAML configuration is valid",
        param("content", description="The CI/CD configuration content", required=True),
        param("include_merged_yaml", "boolean", "If the expanded CI/CD configuration should be included in the response"),
        param("include_jobs", "boolean", "If the list of jobs should be included in the response"),
    ),
    # Administration
    endpoint("GET", "/application/settings", "List the current application settings of the GitLab instance (administrators only)"),
    endpoint("PUT", "/application/settings", "Change application settings (administrators only)"),
    endpoint("GET", "/application/statistics", "List the current statistics of the GitLab instance (administrators only)"),
    endpoint("GET", "/application/appearance", "Get the current appearance configuration of the GitLab instance (administrators only)"),
    endpoint("GET", "/applications", "List all registered applications (administrators only)", *PAGINATION),
    endpoint(
        "POST",
        "/applications",
        "Create an application by posting a JSON payload (administrators only)",
        param("name", description="Name of the application", required=True),
        param("redirect_uri", description="Redirect URI of the application", required=True),
        param("scopes", description="Scopes of the application", required=True),
        param("confidential", "boolean", "The application is used where the client secret can be kept confidential"),
    ),
    endpoint("DELETE", "/applications/{id}", "Delete a specific application (administrators only)"),
    endpoint("GET", "/broadcast_messages", "List all broadcast messages", *PAGINATION),
    endpoint("GET", "/broadcast_messages/{id}", "Get a specific broadcast message"),
    endpoint(
        "POST",
        "/broadcast_messages",
        "Create a new broadcast message (administrators only)",
        param("message", description="Message to display", required=True),
        BROADCAST_FIELDS,
    ),
    endpoint(
        "PUT",
        "/broadcast_messages/{id}",
        "Update an existing broadcast message (administrators only)",
        param("message", description="Message to display"),
        BROADCAST_FIELDS,
    ),
    endpoint("DELETE", "/broadcast_messages/{id}", "Delete a broadcast message (administrators only)"),
    endpoint("GET", "/hooks", "Get a list of all system hooks (administrators only)", *PAGINATION),
    endpoint("GET", "/hooks/{id}", "Get a system hook by its ID (administrators only)"),
    endpoint(
        "POST",
        "/hooks",
        "Add a new system hook (administrators only)",
        param("url", description="The hook URL", required=True),
        param("repository_update_events", "boolean", "When true, the hook fires on repository update events"),
        param("merge_requests_events", "boolean", "Trigger hook on merge requests events"),
        param("tag_push_events", "boolean", "When true, the hook fires on new tags being pushed"),
        param("push_events", "boolean", "When true, the hook fires on push events"),
        param("enable_ssl_verification", "boolean", "Do SSL verification when triggering the hook"),
        param("token", description="Secret token to validate received payloads"),
        param("name", description="Name of the hook"),
        param("description", description="Description of the hook"),
    ),
    endpoint("POST", "/hooks/{id}", "Test a system hook (administrators only)"),
    endpoint("DELETE", "/hooks/{id}", "Delete a system hook (administrators only)"),
    endpoint(
        "GET",
        "/audit_events",
        "Retrieve instance audit events (administrators only)",
        param("created_after", description="Return audit events created on or after the given time"),
        param("created_before", description="Return audit events created on or before the given time"),
        param("entity_type", description="Return audit events for the given entity type", enum=("User", "Group", "Project", "Gitlab::Audit::InstanceScope")),
        param("entity_id", "integer", "Return audit events for the given entity ID"),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/features",
        "Get a list of all persisted feature flags, with its gate values (administrators only)",
    ),
)

