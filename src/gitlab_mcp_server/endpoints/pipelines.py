"""Pipelines, jobs, artifacts, schedules and triggers."""

from __future__ import annotations

from .base import endpoint, param
from .common import PAGINATION, SORT, UPDATED_RANGE, order_by

PIPELINE_STATUS = (
    "created",
    "waiting_for_resource",
    "preparing",
    "pending",
    "running",
    "success",
    "failed",
    "canceled",
    "skipped",
    "manual",
    "scheduled",
)

JOB_SCOPE = param(
    "scope",
    "array",
    "Scope of jobs to show: created, pending, running, failed, success, canceled, skipped, waiting_for_resource, or manual",
)

SCHEDULE_FIELDS = (
    param("description", description="The description of the pipeline schedule"),
    param("ref", description="The branch or tag name that is triggered"),
    param("cron", description="The cron schedule, for example: 0 1 * * *"),
    param("cron_timezone", description="The time zone supported by ActiveSupport::TimeZone, for example: Pacific Time (US & Canada)"),
    param("active", "boolean", "The activation of pipeline schedule"),
)

ENDPOINTS = (
    # Pipelines
    endpoint(
        "GET",
        "/projects/{id}/pipelines",
        "List pipelines in a project",
        param("scope", description="The scope of pipelines", enum=("running", "pending", "finished", "branches", "tags")),
        param("status", description="The status of pipelines", enum=PIPELINE_STATUS),
        param("source", description="How the pipeline was triggered, for example push, web, schedule, or merge_request_event"),
        param("ref", description="The ref of pipelines"),
        param("sha", description="The SHA of pipelines"),
        param("yaml_errors", "boolean", "Returns pipelines with invalid configurations"),
        param("username", description="The username of the user who triggered pipelines"),
        param("name", description="Return pipelines with the specified name"),
        *UPDATED_RANGE,
        order_by("id", "status", "ref", "updated_at", "user_id", description="Order pipelines by"),
        SORT,
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/pipelines/latest", "Get the latest pipeline for the most recent commit on a specific ref", param("ref", description="The branch or tag to check for the latest pipeline")),
    endpoint("GET", "/projects/{id}/pipelines/{pipeline_id}", "Get one pipeline of a project"),
    endpoint("GET", "/projects/{id}/pipelines/{pipeline_id}/variables", "Get variables of a pipeline"),
    endpoint("GET", "/projects/{id}/pipelines/{pipeline_id}/test_report", "Get a pipeline's test report"),
    endpoint("GET", "/projects/{id}/pipelines/{pipeline_id}/test_report_summary", "Get a pipeline's test report summary"),
    endpoint(
        "POST",
        "/projects/{id}/pipeline",
        "Create a new pipeline",
        param("ref", description="The branch or tag to run the pipeline on", required=True),
        param("variables", "any", "An array of hashes containing the variables available in the pipeline, matching the structure [{ 'key': 'UPLOAD_TO_S3', 'variable_type': 'file', 'value': 'true' }]"),
        param("inputs", "object", "A hash containing the inputs to use when creating the pipeline"),
    ),
    endpoint("POST", "/projects/{id}/pipelines/{pipeline_id}/retry", "Retry failed builds in the pipeline"),
    endpoint("POST", "/projects/{id}/pipelines/{pipeline_id}/cancel", "Cancel all builds in the pipeline"),
    endpoint("DELETE", "/projects/{id}/pipelines/{pipeline_id}", "Delete a pipeline and its job logs and artifacts"),
    endpoint(
        "PUT",
        "/projects/{id}/pipelines/{pipeline_id}/metadata",
        "Update the name of a pipeline",
        param("name", description="The new name of the pipeline", required=True),
    ),
    endpoint(
        "GET",
        "/projects/{id}/pipelines/{pipeline_id}/jobs",
        "Get a list of jobs for a pipeline",
        JOB_SCOPE,
        param("include_retried", "boolean", "Include retried jobs in the response"),
        *PAGINATION,
    ),
    endpoint(
        "GET",
        "/projects/{id}/pipelines/{pipeline_id}/bridges",
        "Get a list of trigger jobs for a pipeline",
        JOB_SCOPE,
        *PAGINATION,
    ),
    # Jobs
    endpoint("GET", "/projects/{id}/jobs", "Get a list of jobs in a project", JOB_SCOPE, *PAGINATION),
    endpoint("GET", "/projects/{id}/jobs/{job_id}", "Get a single job of a project"),
    endpoint("GET", "/projects/{id}/jobs/{job_id}/trace", "Get a log (trace) of a specific job of a project", raw=True),
    endpoint("POST", "/projects/{id}/jobs/{job_id}/cancel", "Cancel a single job of a project"),
    endpoint("POST", "/projects/{id}/jobs/{job_id}/retry", "Retry a single job of a project"),
    endpoint("POST", "/projects/{id}/jobs/{job_id}/erase", "Erase a single job of a project (remove job artifacts and a job log)"),
    endpoint(
        "POST",
        "/projects/{id}/jobs/{job_id}/play",
        "Trigger a manual action to start a job",
        param("job_variables_attributes", "any", "An array containing the custom variables available to the job"),
    ),
    endpoint("GET", "/job", "Retrieve the job that generated a job token", param("job_token", description="Token value associated with the job")),
    # Artifacts
    endpoint("GET", "/projects/{id}/jobs/{job_id}/artifacts/{artifact_path}", "Download a single artifact file from a job", raw=True),
    endpoint(
        "GET",
        "/projects/{id}/jobs/artifacts/{ref_name}/raw/{artifact_path}",
        "Download a single artifact file for a specific job of the latest successful pipeline for the given reference name",
        param("job", description="The name of the job", required=True),
        raw=True,
    ),
    endpoint("POST", "/projects/{id}/jobs/{job_id}/artifacts/keep", "Prevent artifacts from being deleted when expiration is set"),
    endpoint("DELETE", "/projects/{id}/jobs/{job_id}/artifacts", "Delete artifacts of a job"),
    endpoint("DELETE", "/projects/{id}/artifacts", "Delete artifacts of all jobs which are eligible for deletion"),
    # Schedules
    endpoint(
        "GET",
        "/projects/{id}/pipeline_schedules",
        "Get a list of the pipeline schedules of a project",
        param("scope", description="The scope of pipeline schedules", enum=("active", "inactive")),
        *PAGINATION,
    ),
    endpoint("GET", "/projects/{id}/pipeline_schedules/{pipeline_schedule_id}", "Get the pipeline schedule of a project"),
    endpoint("GET", "/projects/{id}/pipeline_schedules/{pipeline_schedule_id}/pipelines", "Get all pipelines triggered by a pipeline schedule", *PAGINATION),
    endpoint(
        "POST",
        "/projects/{id}/pipeline_schedules",
        "Create a new pipeline schedule of a project",
        param("description", description="The description of the pipeline schedule", required=True),
        param("ref", description="The branch or tag name that is triggered", required=True),
        param("cron", description="The cron schedule, for example: 0 1 * * *", required=True),
        param("cron_timezone", description="The time zone supported by ActiveSupport::TimeZone"),
        param("active", "boolean", "The activation of pipeline schedule"),
    ),
    endpoint("PUT", "/projects/{id}/pipeline_schedules/{pipeline_schedule_id}", "Update the pipeline schedule of a project", SCHEDULE_FIELDS),
    endpoint("POST", "/projects/{id}/pipeline_schedules/{pipeline_schedule_id}/take_ownership", "Update the owner of the pipeline schedule of a project"),
    endpoint("POST", "/projects/{id}/pipeline_schedules/{pipeline_schedule_id}/play", "Trigger a new scheduled pipeline, which runs immediately"),
    endpoint("DELETE", "/projects/{id}/pipeline_schedules/{pipeline_schedule_id}", "Delete the pipeline schedule of a project"),
    endpoint(
        "POST",
        "/projects/{id}/pipeline_schedules/{pipeline_schedule_id}/variables",
        "Create a new variable of a pipeline schedule",
        param("key", description="The key of a variable", required=True),
        param("value", description="The value of a variable", required=True),
        param("variable_type", description="The type of the variable", enum=("env_var", "file")),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/pipeline_schedules/{pipeline_schedule_id}/variables/{key}",
        "Update the variable of a pipeline schedule",
        param("value", description="The value of a variable", required=True),
        param("variable_type", description="The type of the variable", enum=("env_var", "file")),
    ),
    endpoint("DELETE", "/projects/{id}/pipeline_schedules/{pipeline_schedule_id}/variables/{key}", "Delete the variable of a pipeline schedule"),
    # Triggers
    endpoint("GET", "/projects/{id}/triggers", "Get a list of a project's pipeline trigger tokens", *PAGINATION),
    endpoint("GET", "/projects/{id}/triggers/{trigger_id}", "Get details of a project's pipeline trigger"),
    endpoint(
        "POST",
        "/projects/{id}/triggers",
        "Create a pipeline trigger token for a project",
        param("description", description="The trigger name", required=True),
    ),
    endpoint(
        "PUT",
        "/projects/{id}/triggers/{trigger_id}",
        "Update a pipeline trigger token for a project",
        param("description", description="The trigger name"),
    ),
    endpoint("DELETE", "/projects/{id}/triggers/{trigger_id}", "Remove a project's pipeline trigger token"),
    endpoint(
        "POST",
        "/projects/{id}/trigger/pipeline",
        "Trigger a pipeline with a token",
        param("token", description="The trigger token or CI/CD job token", required=True),
        param("ref", description="The branch or tag to run the pipeline on", required=True),
        param("variables", "object", "A map of key-valued strings containing the pipeline variables"),
        param("inputs", "object", "A map of inputs to use when creating the pipeline"),
    ),
    # Lint
    endpoint(
        "POST",
        "/projects/{id}/ci/lint",
        "Check if CI/CD YAML configuration is valid in the namespace of the project",
        param("content", description="The CI/CD configuration content", required=True),
        param("dry_run", "boolean", "Run pipeline creation simulation, or only do static check"),
        param("include_jobs", "boolean", "If the list of jobs that would exist in a static check or pipeline simulation should be included"),
        param("ref", description="When dry_run is true, sets the branch or tag context to use to validate the CI/CD YAML configuration"),
    ),
    endpoint(
        "GET",
        "/projects/{id}/ci/lint",
        "Check if a project's latest .gitlab-ci.yml configuration is valid",
        param("content_ref", description="The CI/CD configuration content is taken from this commit SHA, branch or tag"),
        param("dry_run", "boolean", "Run pipeline creation simulation, or only do static check"),
        param("dry_run_ref", description="When dry_run is true, sets the branch or tag context to use to validate the CI/CD YAML configuration"),
        param("include_jobs", "boolean", "If the list of jobs that would exist in a static check or pipeline simulation should be included"),
    ),
)
