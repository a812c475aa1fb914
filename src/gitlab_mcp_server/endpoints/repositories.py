"""Repository contents: tree, files, branches, tags, commits and releases."""

from __future__ import annotations

from .base import endpoint, param
from .common import PAGINATION, SEARCH, SORT, order_by

FILE_REF = param("ref", description="The name of branch, tag or commit", required=True)

FILE_WRITE = (
    param("branch", description="Name of the new branch to create. The commit is added to this branch", required=True),
    param("commit_message", description="The commit message", required=True),
    param("start_branch", description="Name of the base branch to create the new branch from"),
    param("author_email", description="The commit author's email address"),
    param("author_name", description="The commit author's name"),
)

FILE_CONTENT = (
    param("content", description="The file's content", required=True),
    param("encoding", description="Change encoding to base64. Default is text", enum=("text", "base64")),
    param("execute_filemode", "boolean", "Enables or disables the execute flag on the file"),
)

PROTECTION_LEVELS = (
    param("push_access_level", "integer", "Access levels allowed to push (defaults: 40, Maintainer role)"),
    param("merge_access_level", "integer", "Access levels allowed to merge (defaults: 40, Maintainer role)"),
    param("unprotect_access_level", "integer", "Access levels allowed to unprotect (defaults: 40, Maintainer role)"),
    param("allow_force_push", "boolean", "Allow all users with push access to force push"),
    param("allowed_to_push", "any", "Array of push access levels, each described by a hash"),
    param("allowed_to_merge", "any", "Array of merge access levels, each described by a hash"),
    param("allowed_to_unprotect", "any", "Array of unprotect access levels, each described by a hash"),
    param("code_owner_approval_required", "boolean", "Prevent pushes to this branch if it matches an item in the CODEOWNERS file"),
)

RELEASE_FIELDS = (
    param("name", description="The release name"),
    param("description", description="The description of the release. You can use Markdown"),
    param("milestones", "array", "The title of each milestone the release is associated with"),
    param("released_at", description="Date and time for the release (ISO 8601)"),
)

ENDPOINTS = (
    # Tree and files
    endpoint(
        "GET",
        "/projects/{id}/repository/tree",
        "Get a list of repository files and directories in a project",
        param("path", description="The path inside the repository. Used to get content of subdirectories"),
        param("ref", description="The name of a repository branch or tag or, if not given, the default branch"),
        param("recursive", "boolean", "Boolean value used to get a recursive tree"),
        param("pagination", description="If keyset, use the keyset-based pagination method", enum=("keyset", "legacy")),
        param("page_token", description="The tree record ID at which to fetch the next page. Used only with keyset pagination"),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/blobs/{sha}",
        "Get information about a blob in the repository, like size and content",
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/blobs/{sha}/raw",
        "Get the raw file contents for a blob, by blob SHA",
        raw=True,
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/archive",
        "Get an archive of the repository",
        param("sha", description="The commit SHA to download"),
        param("format", description="The archive format", enum=("tar.gz", "tar.bz2", "tbz", "tbz2", "tb2", "bz2", "tar", "zip")),
        param("path", description="The subpath of the repository to download"),
        raw=True,
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/compare",
        "Compare branches, tags or commits",
        param("from", description="The commit SHA or branch name", required=True),
        param("to", description="The commit SHA or branch name", required=True),
        param("from_project_id", "integer", "The ID to compare from"),
        param("straight", "boolean", "Comparison method: true for direct comparison between from and to, false to compare using merge base"),
        param("unidiff", "boolean", "Present diffs in the unified diff format"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/contributors",
        "Get repository contributors list",
        param("ref", description="The name of a repository branch or tag"),
        order_by("name", "email", "commits"),
        SORT,
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/merge_base",
        "Get the common ancestor for 2 or more refs",
        param("refs", "array", "The refs to find the common ancestor of. Accepts multiple refs", required=True),
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/files/{file_path}",
        "Get file from repository, including name, size and content (Base64 encoded)",
        FILE_REF,
    ),
    endpoint(
        "HEAD",
        "/projects/{id}/repository/files/{file_path}",
        "Get file metadata from repository",
        FILE_REF,
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/files/{file_path}/raw",
        "Get raw file from repository",
        param("ref", description="The name of branch, tag or commit. Default is the HEAD of the project"),
        param("lfs", "boolean", "Whether the response should be Git LFS file contents rather than the pointer"),
        raw=True,
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/files/{file_path}/blame",
        "Get blame information for a file",
        FILE_REF,
        param("range[start]", "integer", "The first line of the range to blame"),
        param("range[end]", "integer", "The last line of the range to blame"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/repository/files/{file_path}",
        "Create a new file in the repository",
        FILE_WRITE,
        FILE_CONTENT,
    ),
    endpoint(
        "PUT",
        "/projects/{id}/repository/files/{file_path}",
        "Update an existing file in the repository",
        FILE_WRITE,
        FILE_CONTENT,
        param("last_commit_id", description="Last known file commit ID"),
    ),
    endpoint(
        "DELETE",
        "/projects/{id}/repository/files/{file_path}",
        "Delete an existing file in the repository",
        FILE_WRITE,
        param("last_commit_id", description="Last known file commit ID"),
    ),
    # Branches
    endpoint(
        "GET",
        "/projects/{id}/repository/branches",
        "Get a list of repository branches from a project, sorted by name alphabetically",
        SEARCH,
        param("regex", description="Return list of branches with names matching a re2 regular expression"),
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/repository/branches/{branch}", "Get a single project repository branch"),
    endpoint(
        "POST",
        "/projects/{id}/repository/branches",
        "Create a new branch in the repository",
        param("branch", description="Name of the branch", required=True),
        param("ref", description="Branch name or commit SHA to create branch from", required=True),
    ),
    endpoint("DELETE", "/projects/{id}/repository/branches/{branch}", "Delete a branch from the repository"),
    endpoint(
        "DELETE",
        "/projects/{id}/repository/merged_branches",
        "Delete all branches that are merged into the project's default branch",
    ),
    endpoint("GET", "/projects/{id}/protected_branches", "Get a list of protected branches", SEARCH, *PAGINATION),
    endpoint("GET", "/projects/{id}/protected_branches/{name}", "Get a single protected branch or wildcard protected branch"),
    endpoint(
        "POST",
        "/projects/{id}/protected_branches",
        "Protect a single repository branch or several project repository branches using a wildcard",
        param("name", description="The name of the branch or wildcard", required=True),
        PROTECTION_LEVELS,
    ),
    endpoint(
        "PATCH",
        "/projects/{id}/protected_branches/{name}",
        "Update a protected branch",
        PROTECTION_LEVELS,
    ),
    endpoint("DELETE", "/projects/{id}/protected_branches/{name}", "Unprotect the given protected branch or wildcard protected branch"),
    # Tags
    endpoint(
        "GET",
        "/projects/{id}/repository/tags",
        "Get a list of repository tags from a project, sorted by update date and time in descending order",
        order_by("name", "updated", "version"),
        SORT,
        SEARCH,
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/repository/tags/{tag_name}", "Get a specific repository tag"),
    endpoint(
        "POST",
        "/projects/{id}/repository/tags",
        "Create a new tag in the repository that points to the supplied ref",
        param("tag_name", description="The name of a tag", required=True),
        param("ref", description="Create a tag from a commit SHA, another tag name, or branch name", required=True),
        param("message", description="Create an annotated tag"),
    ),
    endpoint("DELETE", "/projects/{id}/repository/tags/{tag_name}", "Delete a tag of a repository with given name"),
    endpoint("GET", "/projects/{id}/repository/tags/{tag_name}/signature", "Get the X.509 signature of a tag"),
    endpoint("GET", "/projects/{id}/protected_tags", "Get a list of protected tags from a project", *PAGINATION),
    endpoint("GET", "/projects/{id}/protected_tags/{name}", "Get a single protected tag or wildcard protected tag"),
    endpoint(
        "POST",
        "/projects/{id}/protected_tags",
        "Protect a single repository tag or several project repository tags using a wildcard protected tag",
        param("name", description="The name of the tag or wildcard", required=True),
        param("create_access_level", "integer", "Access levels allowed to create (defaults: 40, Maintainer role)"),
        param("allowed_to_create", "any", "Array of access levels allowed to create tags, each described by a hash"),
    ),
    endpoint("DELETE", "/projects/{id}/protected_tags/{name}", "Unprotect the given protected tag or wildcard protected tag"),
    # Commits
    endpoint(
        "GET",
        "/projects/{id}/repository/commits",
        "Get a list of repository commits in a project",
        param("ref_name", description="The name of a repository branch, tag or revision range"),
        param("since", description="Only commits after or on this date are returned (ISO 8601)"),
        param("until", description="Only commits before or on this date are returned (ISO 8601)"),
        param("path", description="The file path"),
        param("author", description="Search commits by commit author"),
        param("all", "boolean", "Retrieve every commit from the repository"),
        param("with_stats", "boolean", "Stats about each commit are added to the response"),
        param("first_parent", "boolean", "Follow only the first parent commit upon seeing a merge commit"),
        param("order", description="List commits in order", enum=("default", "topo")),
        param("trailers", "boolean", "Parse and include Git trailers for every commit"),
        *PAGINATION,
    ),
    endpoint(
        "POST",
        "/projects/{id}/repository/commits",
        "Create a commit by posting a JSON payload",
        param("branch", description="Name of the branch to commit into", required=True),
        param("commit_message", description="Commit message", required=True),
        param("start_branch", description="Name of the branch to start the new branch from"),
        param("start_sha", description="SHA of the commit to start the new branch from"),
        param("start_project", description="The project ID or URL-encoded path of the project to start the new branch from"),
        param("actions", "any", "An array of action hashes to commit as a batch", required=True),
        param("author_email", description="Specify the commit author's email address"),
        param("author_name", description="Specify the commit author's name"),
        param("stats", "boolean", "Include commit stats"),
        param("force", "boolean", "When true overwrites the target branch with a new commit based on the start_branch or start_sha"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/commits/{sha}",
        "Get a specific commit identified by the commit hash or name of a branch or tag",
        param("stats", "boolean", "Include commit stats"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/commits/{sha}/refs",
        "Get all references (from branches or tags) a commit is pushed to",
        param("type", description="The scope of commits", enum=("branch", "tag", "all")),
        *PAGINATION,
    ),
    endpoint(
        "POST",
        "/projects/{id}/repository/commits/{sha}/cherry_pick",
        "Cherry-pick a commit to a given branch",
        param("branch", description="The name of the branch", required=True),
        param("dry_run", "boolean", "Does not commit any changes"),
        param("message", description="A custom commit message to use for the new commit"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/repository/commits/{sha}/revert",
        "Revert a commit in a given branch",
        param("branch", description="Target branch name", required=True),
        param("dry_run", "boolean", "Does not commit any changes"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/commits/{sha}/diff",
        "Get the diff of a commit in a project",
        param("unidiff", "boolean", "Present diffs in the unified diff format"),
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/repository/commits/{sha}/comments", "Get the comments of a commit in a project", *PAGINATION),
    endpoint(
        "POST",
        "/projects/{id}/repository/commits/{sha}/comments",
        "Add a comment to a commit",
        param("note", description="The text of the comment", required=True),
        param("path", description="The file path relative to the repository"),
        param("line", "integer", "The line number where the comment should be placed"),
        param("line_type", description="The line type", enum=("new", "old")),
    ),
    endpoint("GET", "/projects/{id}/repository/commits/{sha}/discussions", "Get the discussions of a commit in a project", *PAGINATION),
    endpoint(
        "GET",
        "/projects/{id}/repository/commits/{sha}/statuses",
        "List the statuses of a commit in a project",
        param("ref", description="The name of a repository branch or tag"),
        param("stage", description="Filter by build stage"),
        param("name", description="Filter by job name"),
        param("pipeline_id", "integer", "Filter by pipeline ID"),
        param("all", "boolean", "Return all statuses, not only the latest ones"),
        *PAGINATION,
    ),
    endpoint(
        "POST",
        "/projects/{id}/statuses/{sha}",
        "Add or update the build status of a commit",
        param("state", description="The state of the status", required=True, enum=("pending", "running", "success", "failed", "canceled", "skipped")),
        param("ref", description="The ref (branch or tag) to which the status refers"),
        param("name", description="The label to differentiate this status from the status of other systems"),
        param("target_url", description="The target URL to associate with this status"),
        param("description", description="The short description of the status"),
        param("coverage", "number", "The total code coverage"),
        param("pipeline_id", "integer", "The ID of the pipeline to set status"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/repository/commits/{sha}/merge_requests",
        "Get a list of merge requests related to the specified commit",
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/repository/commits/{sha}/signature", "Get the signature from a commit, if it is signed"),
    # Releases
    endpoint(
        "GET",
        "/projects/{id}/releases",
        "Paginated list of releases, sorted by released_at",
        order_by("released_at", "created_at"),
        SORT,
        param("include_html_description", "boolean", "If true, a response includes HTML rendered Markdown of the release description"),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/releases/{tag_name}",
        "Get a release for the given tag",
        param("include_html_description", "boolean", "If true, a response includes HTML rendered Markdown of the release description"),
    ),
    endpoint("GET", "/projects/{id}/releases/permalink/latest", "Get the latest release"),
    endpoint(
        "POST",
        "/projects/{id}/releases",
        "Create a release",
        param("tag_name", description="The tag where the release is created from", required=True),
        param("tag_message", description="Message to use if creating a new annotated tag"),
        param("ref", description="If a tag specified in tag_name doesn't exist, the release is created from ref"),
        param("assets", "object", "Release assets, for example {\"links\": [...]}"),
        RELEASE_FIELDS,
    ),
    endpoint("PUT", "/projects/{id}/releases/{tag_name}", "Update a release", RELEASE_FIELDS),
    endpoint("DELETE", "/projects/{id}/releases/{tag_name}", "Delete a release. Deleting a release doesn't delete the associated tag"),
    endpoint("GET", "/projects/{id}/releases/{tag_name}/assets/links", "Get assets as links from a release", *PAGINATION),
    endpoint("GET", "/projects/{id}/releases/{tag_name}/assets/links/{link_id}", "Get an asset as a link from a release"),
    endpoint(
        "POST",
        "/projects/{id}/releases/{tag_name}/assets/links",
        "Create an asset as a link from a release",
        param("name", description="The name of the link", required=True),
        param("url", description="The URL of the link", required=True),
        param("direct_asset_path", description="Optional path for a direct asset link"),
        param("link_type", description="The type of the link", enum=("other", "runbook", "image", "package")),
    ),
    endpoint("DELETE", "/projects/{id}/releases/{tag_name}/assets/links/{link_id}", "Delete an asset as a link from a release"),
    # Wikis
    endpoint(
        "GET",
        "/projects/{id}/wikis",
        "Get all wiki pages for a given project",
        param("with_content", "boolean", "Include pages' content"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/wikis/{slug}",
        "Get a wiki page for a given project",
        param("render_html", "boolean", "Return the rendered HTML of the wiki page"),
        param("version", description="Wiki page version SHA"),
    ),
    endpoint(
        "POST",
        "/projects/{id}/wikis",
        "Create a new wiki page for the given repository with the given title, slug, and content",
        param("title", description="The title of the wiki page", required=True),
        param("content", description="The content of the wiki page", required=True),
        param("format", description="The format of the wiki page", enum=("markdown", "rdoc", "asciidoc", "org")),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/wikis/{slug}",
        "Update an existing wiki page",
        param("title", description="The title of the wiki page"),
        param("content", description="The content of the wiki page"),
        param("format", description="The format of the wiki page", enum=("markdown", "rdoc", "asciidoc", "org")),
    ),
    endpoint("DELETE", "/projects/{id}/wikis/{slug}", "Delete a wiki page with a given slug"),
)
