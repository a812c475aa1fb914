"""CI/CD settings: variables, environments, deployments, runners, keys, tokens and registries."""

from __future__ import annotations

from .base import endpoint, param
from .common import PAGINATION, SORT, UPDATED_RANGE, VARIABLE_FIELDS, order_by

VARIABLE_FILTER = param(
    "filter",
    "object",
    "Available filters: [environment_scope]",
)

RUNNER_FILTERS = (
    param("type", description="The type of runners to return", enum=("instance_type", "group_type", "project_type")),
    param("status", description="The status of runners to return", enum=("online", "offline", "stale", "never_contacted")),
    param("paused", "boolean", "Whether to include only runners that are accepting or ignoring new jobs"),
    param("tag_list", "array", "A list of runner tags"),
    param("version_prefix", description="The prefix of the version of the runners to return"),
    *PAGINATION,
)

RUNNER_FIELDS = (
    param("description", description="The description of the runner"),
    param("paused", "boolean", "Specifies if the runner should ignore new jobs"),
    param("tag_list", "array", "The list of tags for the runner"),
    param("run_untagged", "boolean", "Specifies if the runner can execute untagged jobs"),
    param("locked", "boolean", "Specifies if the runner is locked"),
    param("access_level", description="The access level of the runner", enum=("not_protected", "ref_protected")),
    param("maximum_timeout", "integer", "Maximum timeout that limits the amount of time (in seconds) that runners can run jobs"),
    param("maintenance_note", description="Free-form maintenance notes for the runner (1024 characters)"),
)

DEPLOY_TOKEN_FIELDS = (
    param("name", description="New deploy token's name", required=True),
    param("scopes", "array", "Indicates the deploy token scopes", required=True),
    param("expires_at", description="Expiration date for the deploy token (ISO 8601)"),
    param("username", description="Username for deploy token. Default is gitlab+deploy-token-{n}"),
)

ENDPOINTS = (
    # Project variables
    endpoint("GET", "/projects/{id}/variables", "Get list of a project's variables", *PAGINATION),
    endpoint("GET", "/projects/{id}/variables/{key}", "Get the details of a single variable", VARIABLE_FILTER),
    endpoint(
        "POST",
        "/projects/{id}/variables",
        "Create a new variable",
        param("key", description="The key of a variable; must have no more than 255 characters; only A-Z, a-z, 0-9, and _ are allowed", required=True),
        VARIABLE_FIELDS,
    ),
    endpoint("PUT", "/projects/{id}/variables/{key}", "Update a project's variable", VARIABLE_FIELDS, VARIABLE_FILTER),
    endpoint("DELETE", "/projects/{id}/variables/{key}", "Delete a project's variable", VARIABLE_FILTER),
    # Group variables
    endpoint("GET", "/groups/{id}/variables", "Get list of a group's variables", *PAGINATION),
    endpoint("GET", "/groups/{id}/variables/{key}", "Get the details of a group's specific variable", VARIABLE_FILTER),
    endpoint(
        "POST",
        "/groups/{id}/variables",
        "Create a new group variable",
        param("key", description="The key of a variable", required=True),
        VARIABLE_FIELDS,
    ),
    endpoint("PUT", "/groups/{id}/variables/{key}", "Update a group's variable", VARIABLE_FIELDS, VARIABLE_FILTER),
    endpoint("DELETE", "/groups/{id}/variables/{key}", "Delete a group's variable", VARIABLE_FILTER),
    # Instance variables
    endpoint("GET", "/admin/ci/variables", "Get the list of all instance-level variables", *PAGINATION),
    endpoint("GET", "/admin/ci/variables/{key}", "Get the details of a specific instance-level variable"),
    endpoint(
        "POST",
        "/admin/ci/variables",
        "Create a new instance-level variable",
        param("key", description="The key of the variable", required=True),
        param("value", description="The value of the variable", required=True),
        param("variable_type", description="The type of the variable", enum=("env_var", "file")),
        param("protected", "boolean", "Whether the variable is protected"),
        param("masked", "boolean", "Whether the variable is masked"),
        param("raw", "boolean", "Whether the variable is treated as a raw string"),
        param("description", description="The description of the variable"),
    ),
    endpoint(
        "PUT",
        "/admin/ci/variables/{key}",
        "Update an instance-level variable",
        param("value", description="The value of the variable", required=True),
        param("variable_type", description="The type of the variable", enum=("env_var", "file")),
        param("protected", "boolean", "Whether the variable is protected"),
        param("masked", "boolean", "Whether the variable is masked"),
        param("raw", "boolean", "Whether the variable is treated as a raw string"),
        param("description", description="The description of the variable"),
    ),
    endpoint("DELETE", "/admin/ci/variables/{key}", "Remove an instance-level variable"),
    # Environments
    endpoint(
        "GET",
        "/projects/{id}/environments",
        "Get all environments for a given project",
        param("name", description="Return the environment with this name. Mutually exclusive with search"),
        param("search", description="Return list of environments matching the search criteria. Mutually exclusive with name"),
        param("states", description="List all environments that match a specific state", enum=("available", "stopping", "stopped")),
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/environments/{environment_id}", "Get a specific environment"),
    endpoint(
        "POST",
        "/projects/{id}/environments",
        "Create a new environment with the given name and external_url",
        param("name", description="The name of the environment", required=True),
        param("external_url", description="Place to link to for this environment"),
        param("tier", description="The tier of the new environment", enum=("production", "staging", "testing", "development", "other")),
        param("description", description="The description of the environment"),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/environments/{environment_id}",
        "Update an existing environment's external_url or tier",
        param("external_url", description="The new external_url"),
        param("tier", description="The tier of the environment", enum=("production", "staging", "testing", "development", "other")),
        param("description", description="The description of the environment"),
    ),
    endpoint("DELETE", "/projects/{id}/environments/{environment_id}", "Delete an environment"),
    endpoint(
        "POST",
        "/projects/{id}/environments/{environment_id}/stop",
        "Stop an environment",
        param("force", "boolean", "Force environment to stop without executing on_stop actions"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/environments/stop_stale",
        "Issue stop request to all environments that were last modified or deployed to before a specified date",
        param("before", description="Stop environments that have been modified or deployed to before the specified date (ISO 8601)", required=True),
    ),
    endpoint("DELETE", "/projects/{id}/environments/review_apps", "Delete multiple stopped review apps"),
    # Deployments
    endpoint(
        "GET",
        "/projects/{id}/deployments",
        "Get a list of deployments in a project",
        order_by("id", "iid", "created_at", "updated_at", "finished_at", "ref", description="Return deployments ordered by field"),
        SORT,
        param("environment", description="The name of the environment to filter deployments by"),
        param("status", description="The status to filter deployments by", enum=("created", "running", "success", "failed", "canceled", "blocked")),
        *UPDATED_RANGE,
        param("finished_after", description="Return deployments finished after the specified date"),
        param("finished_before", description="Return deployments finished before the specified date"),
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/deployments/{deployment_id}", "Get a specific deployment"),
    endpoint(
        "POST",
        "/projects/{id}/deployments",
        "Create a deployment",
        param("environment", description="The name of the environment to create the deployment for", required=True),
        param("sha", description="The SHA of the commit that is deployed", required=True),
        param("ref", description="The name of the branch or tag that is deployed", required=True),
        param("tag", "boolean", "A boolean that indicates if the deployed ref is a tag (true) or not (false)", required=True),
        param("status", description="The status of the deployment", required=True, enum=("running", "success", "failed", "canceled")),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/deployments/{deployment_id}",
        "Update a deployment",
        param("status", description="The new status of the deployment", required=True, enum=("running", "success", "failed", "canceled")),
    ),
    endpoint("DELETE", "/projects/{id}/deployments/{deployment_id}", "Delete a specific deployment that is not currently the last deployment for an environment"),
    endpoint("GET", "/projects/{id}/deployments/{deployment_id}/merge_requests", "List of merge requests shipped with a given deployment", *PAGINATION),
    endpoint(
        "POST",
        "/projects/{id}/deployments/{deployment_id}/approval",
        "Approve or reject a blocked deployment",
        param("status", description="The status of the approval", required=True, enum=("approved", "rejected")),
        param("comment", description="A comment to go with the approval"),
        param("represented_as", description="The name of the user or group to use for the approval"),
    ),
    # Runners
    endpoint("GET", "/runners", "Get a list of specific runners available to the user", RUNNER_FILTERS),
    endpoint("GET", "/runners/all", "Get a list of all runners in the GitLab instance (administrators only)", RUNNER_FILTERS),
    endpoint("GET", "/runners/{id}", "Get details of a runner"),
    endpoint("PUT", "/runners/{id}", "Update details of a runner", RUNNER_FIELDS),
    endpoint("DELETE", "/runners/{id}", "Delete a runner by ID"),
    endpoint(
        "GET",
        "/runners/{id}/jobs",
        "List jobs that are being processed or were processed by the specified runner",
        param("status", description="Status of the job", enum=("running", "success", "failed", "canceled")),
        order_by("id"),
        SORT,
        *PAGINATION,
    ),
    endpoint("POST", "/runners/{id}/reset_authentication_token", "Reset the runner's authentication token by using the runner ID"),
    endpoint("GET", "/projects/{id}/runners", "List all runners available in the project", RUNNER_FILTERS),
    endpoint(
        "POST",
        "/projects/{id}/runners",
        "Assign an available project runner to the project",
        param("runner_id", "integer", "The ID of a runner", required=True),
    ),
    endpoint("DELETE", "/projects/{id}/runners/{runner_id}", "Unassign a project runner from the project"),
    endpoint("GET", "/groups/{id}/runners", "List all runners available in the group and its ancestor groups", RUNNER_FILTERS),
    # Deploy keys
    endpoint("GET", "/deploy_keys", "Get a list of all deploy keys across all projects (administrators only)", param("public", "boolean", "Only return deploy keys that are public"), *PAGINATION),
    endpoint("GET", "/projects/{id}/deploy_keys", "Get a list of a project's deploy keys", *PAGINATION),
    endpoint("GET", "/projects/{id}/deploy_keys/{key_id}", "Get a single key"),
    endpoint(
        "POST",
        "/projects/{id}/deploy_keys",
        "Create a new deploy key for a project",
        param("key", description="New deploy key", required=True),
        param("title", description="New deploy key's title", required=True),
        param("can_push", "boolean", "Can deploy key push to the project's repository"),
        param("expires_at", description="Expiration date for the deploy key (ISO 8601)"),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/deploy_keys/{key_id}",
        "Update a deploy key for a project",
        param("title", description="New deploy key's title"),
        param("can_push", "boolean", "Can deploy key push to the project's repository"),
    ),
    endpoint("DELETE", "/projects/{id}/deploy_keys/{key_id}", "Remove a deploy key from the project"),
    endpoint("POST", "/projects/{id}/deploy_keys/{key_id}/enable", "Enable a deploy key for a project so this can be used"),
    # Deploy tokens
    endpoint("GET", "/deploy_tokens", "Get a list of all deploy tokens across the GitLab instance (administrators only)", param("active", "boolean", "Limit by active status"), *PAGINATION),
    endpoint("GET", "/projects/{id}/deploy_tokens", "Get a list of a project's deploy tokens", param("active", "boolean", "Limit by active status"), *PAGINATION),
    endpoint("GET", "/projects/{id}/deploy_tokens/{token_id}", "Get a single project's deploy token by ID"),
    endpoint("POST", "/projects/{id}/deploy_tokens", "Create a new deploy token for a project", DEPLOY_TOKEN_FIELDS),
    endpoint("DELETE", "/projects/{id}/deploy_tokens/{token_id}", "Remove a deploy token from the project"),
    endpoint("GET", "/groups/{id}/deploy_tokens", "Get a list of a group's deploy tokens", param("active", "boolean", "Limit by active status"), *PAGINATION),
    endpoint("POST", "/groups/{id}/deploy_tokens", "Create a new deploy token for a group", DEPLOY_TOKEN_FIELDS),
    endpoint("DELETE", "/groups/{id}/deploy_tokens/{token_id}", "Remove a deploy token from the group"),
    # Packages and registry
    endpoint(
        "GET",
        "/projects/{id}/packages",
        "Get a list of project packages",
        order_by("created_at", "name", "version", "type"),
        SORT,
        param("package_type", description="Filter the returned packages by type"),
        param("package_name", description="Filter the project packages with a fuzzy search by name"),
        param("package_version", description="Filter the project packages by version"),
        param("include_versionless", "boolean", "When set to true, versionless packages are included in the response"),
        param("status", description="Filter the returned packages by status", enum=("default", "hidden", "processing", "error", "pending_destruction")),
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/packages/{package_id}", "Get a single project package"),
    endpoint("GET", "/projects/{id}/packages/{package_id}/package_files", "Get a list of package files of a single package", *PAGINATION),
    endpoint("DELETE", "/projects/{id}/packages/{package_id}", "Delete a project package"),
    endpoint("DELETE", "/projects/{id}/packages/{package_id}/package_files/{package_file_id}", "Delete a package file"),
    endpoint(
        "GET",
        "/projects/{id}/registry/repositories",
        "Get a list of registry repositories in a project",
        param("tags", "boolean", "If the parameter is included as true, each repository includes an array of tags in the response"),
        param("tags_count", "boolean", "If the parameter is included as true, each repository includes tags_count in the response"),
        *PAGINATION,
    ),
    endpoint("DELETE", "/projects/{id}/registry/repositories/{repository_id}", "Delete a repository in registry"),
    endpoint("GET", "/projects/{id}/registry/repositories/{repository_id}/tags", "Get a list of tags for given registry repository", *PAGINATION),
    endpoint("GET", "/projects/{id}/registry/repositories/{repository_id}/tags/{tag_name}", "Get details of a registry repository tag"),
    endpoint("DELETE", "/projects/{id}/registry/repositories/{repository_id}/tags/{tag_name}", "Delete a registry repository tag"),
    endpoint(
        "DELETE",
        "/projects/{id}/registry/repositories/{repository_id}/tags",
        "Delete registry repository tags in bulk based on given criteria",
        param("name_regex_delete", description="The re2 regex of the name to delete"),
        param("name_regex_keep", description="The re2 regex of the name to keep"),
        param("keep_n", "integer", "The amount of latest tags of given name to keep"),
        param("older_than", description="Tags to delete that are older than the given time, written in human readable form 1h, 1d, 1month"),
    ),
    # Feature flags
    endpoint(
        "GET",
        "/projects/{id}/feature_flags",
        "Get all feature flags of the requested project",
        param("scope", description="The condition of feature flags", enum=("enabled", "disabled")),
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/feature_flags/{feature_flag_name}", "Get a single feature flag"),
    endpoint(
        "POST",
        "/projects/{id}/feature_flags",
        "Create a new feature flag",
        param("name", description="The name of the feature flag", required=True),
        param("version", description="The version of the feature flag. Must be new_version_flag", required=True),
        param("description", description="The description of the feature flag"),
        param("active", "boolean", "The active state of the flag. Defaults to true"),
        param("strategies", "any", "The feature flag strategies"),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/feature_flags/{feature_flag_name}",
        "Update a feature flag",
        param("name", description="The new name of the feature flag"),
        param("description", description="The description of the feature flag"),
        param("active", "boolean", "The active state of the flag"),
        param("strategies", "any", "The feature flag strategies"),
    ),
    endpoint("DELETE", "/projects/{id}/feature_flags/{feature_flag_name}", "Delete a feature flag"),
    # Cluster agents
    endpoint("GET", "/projects/{id}/cluster_agents", "Return the list of agents registered for the project", *PAGINATION),
    endpoint("GET", "/projects/{id}/cluster_agents/{agent_id}", "Get a single agent details"),
    endpoint(
        "POST",
        "/projects/{id}/cluster_agents",
        "Register an agent with the project",
        param("name", description="Name for the agent", required=True),
    ),
    endpoint("DELETE", "/projects/{id}/cluster_agents/{agent_id}", "Delete an existing agent registration"),
    # Freeze periods
    endpoint("GET", "/projects/{id}/freeze_periods", "Paginated list of freeze periods, sorted by created_at in ascending order", *PAGINATION),
    endpoint(
        "POST",
        "/projects/{id}/freeze_periods",
        "Create a freeze period",
        param("freeze_start", description="Start of the freeze period in cron format", required=True),
        param("freeze_end", description="End of the freeze period in cron format", required=True),
        param("cron_timezone", description="The time zone for the cron fields, defaults to UTC if not provided"),
    ),
)
