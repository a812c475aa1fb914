"""Parameter groups shared across endpoint families."""

from __future__ import annotations

from .base import Param, param

PAGINATION = (
    param("page", "integer", "Current page number"),
    param("per_page", "integer", "Number of items to list per page (max 100)"),
)

SORT = param("sort", description="Return results sorted in asc or desc order", enum=("asc", "desc"))

SEARCH = param("search", description="Return only results matching the search criteria")

WITH_CUSTOM_ATTRIBUTES = param(
    "with_custom_attributes", "boolean", "Include custom attributes in response (administrators only)"
)

VISIBILITY = ("private", "internal", "public")

STATE_EVENT = ("close", "reopen")

CREATED_RANGE = (
    param("created_after", description="Return items created on or after the given time (ISO 8601)"),
    param("created_before", description="Return items created on or before the given time (ISO 8601)"),
)

UPDATED_RANGE = (
    param("updated_after", description="Return items updated on or after the given time (ISO 8601)"),
    param("updated_before", description="Return items updated on or before the given time (ISO 8601)"),
)


def order_by(*fields: str, description: str = "Return results ordered by the given field") -> Param:
    return param("order_by", description=description, enum=fields)


def member_filters() -> tuple[Param, ...]:
    return (
        param("query", description="Filter results by name, email, or username"),
        param("user_ids", "integer[]", "Filter the results on the given user IDs"),
        param("skip_users", "integer[]", "Filter skipped users out of the results"),
        *PAGINATION,
    )


MEMBER_FIELDS = (
    param("access_level", "integer", "A valid access level", required=True),
    param("expires_at", description="A date string in the format YEAR-MONTH-DAY"),
    param("member_role_id", "integer", "The ID of a member role"),
)

VARIABLE_FIELDS = (
    param("value", description="The value of a variable"),
    param("variable_type", description="The type of the variable", enum=("env_var", "file")),
    param("protected", "boolean", "Whether the variable is protected"),
    param("masked", "boolean", "Whether the variable is masked"),
    param("masked_and_hidden", "boolean", "Whether the variable is masked and hidden"),
    param("raw", "boolean", "Whether the variable is treated as a raw string"),
    param("environment_scope", description="The environment_scope of the variable"),
    param("description", description="The description of the variable"),
)

LABEL_FIELDS = (
    param("color", description="The color of the label in 6-digit hex notation or a CSS color name"),
    param("description", description="The description of the label"),
    param("priority", "integer", "The priority of the label"),
)

MILESTONE_FIELDS = (
    param("description", description="The description of the milestone"),
    param("due_date", description="The due date of the milestone (YYYY-MM-DD)"),
    param("start_date", description="The start date of the milestone (YYYY-MM-DD)"),
)

MILESTONE_FILTERS = (
    param("iids", "integer[]", "Return only the milestones having the given iid"),
    param("state", description="Return only active or closed milestones", enum=("active", "closed")),
    param("title", description="Return only the milestones having the given title"),
    SEARCH,
    param("include_ancestors", "boolean", "Include milestones from all parent groups"),
    *UPDATED_RANGE,
    *PAGINATION,
)

HOOK_EVENTS = (
    param("push_events", "boolean", "Trigger hook on push events"),
    param("push_events_branch_filter", description="Trigger hook on push events for matching branches only"),
    param("issues_events", "boolean", "Trigger hook on issues events"),
    param("confidential_issues_events", "boolean", "Trigger hook on confidential issues events"),
    param("merge_requests_events", "boolean", "Trigger hook on merge requests events"),
    param("tag_push_events", "boolean", "Trigger hook on tag push events"),
    param("note_events", "boolean", "Trigger hook on note events"),
    param("confidential_note_events", "boolean", "Trigger hook on confidential note events"),
    param("job_events", "boolean", "Trigger hook on job events"),
    param("pipeline_events", "boolean", "Trigger hook on pipeline events"),
    param("wiki_page_events", "boolean", "Trigger hook on wiki events"),
    param("deployment_events", "boolean", "Trigger hook on deployment events"),
    param("releases_events", "boolean", "Trigger hook on release events"),
    param("enable_ssl_verification", "boolean", "Do SSL verification when triggering the hook"),
    param("token", description="Secret token to validate received payloads"),
    param("name", description="Name of the hook"),
    param("description", description="Description of the hook"),
)

BADGE_FIELDS = (
    param("link_url", description="URL of the badge link"),
    param("image_url", description="URL of the badge image"),
    param("name", description="Name of the badge"),
)

AWARD_EMOJI = param("name", description="Name of the emoji without colons", required=True)

NOTE_FILTERS = (
    param("sort", description="Return notes sorted in asc or desc order", enum=("asc", "desc")),
    param("order_by", description="Return notes ordered by field", enum=("created_at", "updated_at")),
    *PAGINATION,
)

NOTE_BODY = (
    param("body", description="The content of a note. Limited to 1,000,000 characters", required=True),
    param("created_at", description="Date time string, ISO 8601 formatted (administrators only)"),
    param("internal", "boolean", "The internal flag of a note"),
)
