"""Users, the current user, SSH/GPG keys, emails, tokens and namespaces."""

from __future__ import annotations

from .base import endpoint, param
from .common import CREATED_RANGE, PAGINATION, SEARCH, SORT, WITH_CUSTOM_ATTRIBUTES, order_by

USER_FIELDS = (
    param("admin", "boolean", "User is an administrator"),
    param("bio", description="User's biography"),
    param("can_create_group", "boolean", "User can create top-level groups"),
    param("external", "boolean", "Flags the user as external"),
    param("linkedin", description="LinkedIn"),
    param("location", description="User's location"),
    param("organization", description="Organization name"),
    param("private_profile", "boolean", "User's profile is private"),
    param("projects_limit", "integer", "Number of projects user can create"),
    param("public_email", description="Public email of the user"),
    param("skype", description="Skype ID"),
    param("twitter", description="X (formerly Twitter) account"),
    param("website_url", description="Website URL"),
    param("job_title", description="Job title"),
    param("note", description="Administrator notes for this user"),
    param("theme_id", "integer", "GitLab theme for the user"),
    param("color_scheme_id", "integer", "User's color scheme for the file viewer"),
)

TOKEN_FIELDS = (
    param("name", description="Name of the token", required=True),
    param("scopes", "array", "Array of scopes of the token", required=True),
    param("expires_at", description="Expiration date of the token in ISO format (YYYY-MM-DD)"),
    param("description", description="Description of the token"),
)

ENDPOINTS = (
    endpoint(
        "GET",
        "/users",
        "Get a list of users",
        param("username", description="Get a single user with a specific username"),
        param("extern_uid", description="Get a single user with a specific external authentication provider UID"),
        param("provider", description="The external provider"),
        SEARCH,
        param("active", "boolean", "Filters only active users"),
        param("blocked", "boolean", "Filters only blocked users"),
        param("external", "boolean", "Filters only external users"),
        param("exclude_internal", "boolean", "Filters only non internal users"),
        param("exclude_external", "boolean", "Filters only non external users"),
        param("without_project_bots", "boolean", "Filters user without project bots"),
        param("admins", "boolean", "Return only administrators"),
        param("two_factor", description="Filter users by two-factor authentication", enum=("enabled", "disabled")),
        param("humans", "boolean", "Filters only human users"),
        *CREATED_RANGE,
        order_by("id", "name", "username", "created_at", "updated_at"),
        SORT,
        WITH_CUSTOM_ATTRIBUTES,
        *PAGINATION,
    ),
    endpoint("GET", "/users/{id}", "Get a single user", WITH_CUSTOM_ATTRIBUTES),
    endpoint(
        "POST",
        "/users",
        "Create a new user (administrators only)",
        param("email", description="Email", required=True),
        param("name", description="Name", required=True),
        param("username", description="Username", required=True),
        param("password", description="Password"),
        param("reset_password", "boolean", "Send user password reset link"),
        param("force_random_password", "boolean", "Set user password to a random value"),
        param("skip_confirmation", "boolean", "Skip confirmation"),
        USER_FIELDS,
    ),
    endpoint(
        "PUT",
        "/users/{id}",
        "Modify an existing user (administrators only)",
        param("email", description="Email"),
        param("name", description="Name"),
        param("username", description="Username"),
        param("password", description="Password"),
        param("skip_reconfirmation", "boolean", "Skip reconfirmation"),
        USER_FIELDS,
    ),
    endpoint(
        "DELETE",
        "/users/{id}",
        "Delete a user (administrators only)",
        param("hard_delete", "boolean", "If true, contributions that would usually be moved to Ghost User are deleted instead"),
    ),
    endpoint("POST", "/users/{id}/block", "Block the specified user (administrators only)"),
    endpoint("POST", "/users/{id}/unblock", "Unblock the specified user (administrators only)"),
    endpoint("POST", "/users/{id}/activate", "Activate the specified user (administrators only)"),
    endpoint("POST", "/users/{id}/deactivate", "Deactivate the specified user (administrators only)"),
    endpoint("POST", "/users/{id}/ban", "Ban the specified user (administrators only)"),
    endpoint("POST", "/users/{id}/unban", "Unban the specified user (administrators only)"),
    endpoint("POST", "/users/{id}/approve", "Approve the specified user (administrators only)"),
    endpoint("POST", "/users/{id}/reject", "Reject the specified user pending approval (administrators only)"),
    endpoint("GET", "/users/{id}/status", "Get the status of a user"),
    endpoint("GET", "/users/{id}/followers", "Get the followers of a user", *PAGINATION),
    endpoint("GET", "/users/{id}/following", "Get the list of users being followed", *PAGINATION),
    endpoint("POST", "/users/{id}/follow", "Follow a user"),
    endpoint("POST", "/users/{id}/unfollow", "Unfollow a user"),
    endpoint(
        "GET",
        "/users/{id}/memberships",
        "List all projects and groups a user is a member of (administrators only)",
        param("type", description="Filter memberships by type", enum=("Project", "Namespace")),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/users/{id}/events",
        "Get the contribution events for the specified user",
        param("action", description="Include only events of a particular action type"),
        param("target_type", description="Include only events of a particular target type"),
        param("before", description="Include only events created before a particular date"),
        param("after", description="Include only events created after a particular date"),
        SORT,
        *PAGINATION,
    ),
    endpoint("GET", "/users/{id}/associations_count", "Get a list of a user's count of projects, groups, issues and merge requests"),
    endpoint("GET", "/users/{id}/contributed_projects", "Get projects the given user has contributed to", order_by("id", "name", "path", "created_at", "updated_at", "last_activity_at"), SORT, param("simple", "boolean", "Return only limited fields for each project"), *PAGINATION),
    endpoint("GET", "/users/{id}/groups", "List groups the given user belongs to", *PAGINATION),
    # Current user
    endpoint("GET", "/user", "Get the authenticated user"),
    endpoint("GET", "/user/status", "Get the status of the authenticated user"),
    endpoint(
        "PUT",
        "/user/status",
        "Set the status of the current user",
        param("emoji", description="Name of the emoji to use as status"),
        param("message", description="Message to set as a status. It can also contain emoji codes"),
        param("availability", description="The availability of the user", enum=("not_set", "busy")),
        param("clear_status_after", description="Automatically clean up the status after a given time frame", enum=("30_minutes", "3_hours", "8_hours", "1_day", "3_days", "7_days", "30_days")),
    ),
    endpoint("GET", "/user/preferences", "Get the preferences of the authenticated user"),
    endpoint(
        "PUT",
        "/user/preferences",
        "Update the preferences of the authenticated user",
        param("view_diffs_file_by_file", "boolean", "Flag indicating the user sees only one file diff per page"),
        param("show_whitespace_in_diffs", "boolean", "Flag indicating the user sees whitespace changes in diffs"),
        param("pass_user_identities_to_ci_jwt", "boolean", "Flag indicating the user passes their external identities as CI information"),
    ),
    endpoint("GET", "/user/activities", "Get the last activity date for all users (administrators only)", param("from", description="Date string in the format YEAR-MM-DD"), *PAGINATION),
    # SSH keys
    endpoint("GET", "/user/keys", "Get a list of the authenticated user's SSH keys", *PAGINATION),
    endpoint("GET", "/user/keys/{key_id}", "Get a single SSH key of the authenticated user"),
    endpoint(
        "POST",
        "/user/keys",
        "Create a new SSH key owned by the authenticated user",
        param("title", description="New SSH key's title", required=True),
        param("key", description="New SSH key", required=True),
        param("expires_at", description="Expiration date of the SSH key in ISO 8601 format"),
        param("usage_type", description="Scope of usage for the SSH key", enum=("auth", "signing", "auth_and_signing")),
    ),
    endpoint("DELETE", "/user/keys/{key_id}", "Delete an SSH key owned by the authenticated user"),
    endpoint("GET", "/users/{id}/keys", "Get a list of a specified user's SSH keys", *PAGINATION),
    endpoint("GET", "/keys/{id}", "Get a single SSH key along with user information"),
    endpoint("GET", "/keys", "Get SSH key with user by fingerprint (administrators only)", param("fingerprint", description="The fingerprint of the SSH key", required=True)),
    # GPG keys
    endpoint("GET", "/user/gpg_keys", "Get a list of the authenticated user's GPG keys", *PAGINATION),
    endpoint(
        "POST",
        "/user/gpg_keys",
        "Create a new GPG key owned by the authenticated user",
        param("key", description="The new GPG key", required=True),
    ),
    endpoint("DELETE", "/user/gpg_keys/{key_id}", "Delete a GPG key owned by the authenticated user"),
    # Emails
    endpoint("GET", "/user/emails", "Get a list of the authenticated user's emails", *PAGINATION),
    endpoint(
        "POST",
        "/user/emails",
        "Create a new email owned by the authenticated user",
        param("email", description="Email address", required=True),
    ),
    endpoint("DELETE", "/user/emails/{email_id}", "Delete an email owned by the authenticated user"),
    # Tokens
    endpoint(
        "GET",
        "/personal_access_tokens",
        "List personal access tokens",
        param("user_id", "integer", "Filter tokens by user ID (administrators only)"),
        param("state", description="Filter tokens by state", enum=("active", "inactive")),
        param("revoked", "boolean", "Filter tokens by revoked state"),
        SEARCH,
        *CREATED_RANGE,
        param("expires_before", description="Limit results to tokens that expire before specified date"),
        param("expires_after", description="Limit results to tokens that expire after specified date"),
        *PAGINATION,
    ),
    endpoint("GET", "/personal_access_tokens/self", "Get details on the personal access token used to authenticate the request"),
    endpoint("GET", "/personal_access_tokens/{id}", "Get a single personal access token by ID"),
    endpoint("DELETE", "/personal_access_tokens/self", "Revoke the personal access token used to authenticate the request"),
    endpoint("DELETE", "/personal_access_tokens/{id}", "Revoke a personal access token by ID"),
    endpoint(
        "POST",
        "/personal_access_tokens/{id}/rotate",
        "Rotate a personal access token",
        param("expires_at", description="Expiration date of the token in ISO format (YYYY-MM-DD)"),
    ),
    endpoint("POST", "/users/{user_id}/personal_access_tokens", "Create a personal access token for a user (administrators only)", TOKEN_FIELDS),
    endpoint(
        "GET",
        "/users/{user_id}/impersonation_tokens",
        "Retrieve every impersonation token of the user (administrators only)",
        param("state", description="Filter tokens based on state", enum=("all", "active", "inactive")),
        *PAGINATION,
    ),
    endpoint("POST", "/users/{user_id}/impersonation_tokens", "Create a new impersonation token (administrators only)", TOKEN_FIELDS),
    endpoint("GET", "/users/{user_id}/impersonation_tokens/{impersonation_token_id}", "Show a user's impersonation token (administrators only)"),
    endpoint("DELETE", "/users/{user_id}/impersonation_tokens/{impersonation_token_id}", "Revoke an impersonation token (administrators only)"),
    endpoint("GET", "/projects/{id}/access_tokens", "Get a list of project access tokens", param("state", description="Limit results to tokens with specified state", enum=("active", "inactive")), *PAGINATION),
    endpoint("GET", "/projects/{id}/access_tokens/{token_id}", "Get a project access token by ID"),
    endpoint(
        "POST",
        "/projects/{id}/access_tokens",
        "Create a project access token",
        TOKEN_FIELDS,
        param("access_level", "integer", "Access level. Valid values are 10, 15, 20, 30, 40, and 50"),
    ),
    endpoint("DELETE", "/projects/{id}/access_tokens/{token_id}", "Revoke a project access token"),
    endpoint("GET", "/groups/{id}/access_tokens", "Get a list of group access tokens", param("state", description="Limit results to tokens with specified state", enum=("active", "inactive")), *PAGINATION),
    endpoint(
        "POST",
        "/groups/{id}/access_tokens",
        "Create a group access token",
        TOKEN_FIELDS,
        param("access_level", "integer", "Access level. Valid values are 10, 20, 30, 40, and 50"),
    ),
    endpoint("DELETE", "/groups/{id}/access_tokens/{token_id}", "Revoke a group access token"),
    # Namespaces
    endpoint(
        "GET",
        "/namespaces",
        "Get a list of the namespaces of the authenticated user",
        SEARCH,
        param("owned_only", "boolean", "In GitLab 14.2 and later, returns a list of owned namespaces only"),
        param("top_level_only", "boolean", "In GitLab 16.8 and later, returns a list of top level namespaces only"),
        *PAGINATION,
    ),
    endpoint("GET", "/namespaces/{id}", "Get a namespace by ID or URL-encoded path"),
    endpoint(
        "GET",
        "/namespaces/{id}/exists",
        "Get existence of a namespace, including a suggested name if it already exists",
        param("parent_id", "integer", "The ID of the parent namespace"),
    ),
)
