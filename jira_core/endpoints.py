# =============================================================================
# jira_core/endpoints.py - The Endpoint Descriptor table (Jira 7.6.1 REST)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares every Jira REST operation exposed as an MCP tool.  One entry per
#   endpoint: tool name, HTTP method, path template, parameters, description.
#   There is no per-endpoint code; RequestAdapter executes any entry.
#
# ADDING AN ENDPOINT:
#   Append an Endpoint(...) to ENDPOINTS.  Path placeholders ("{id}") must be
#   declared with path_param(); Endpoint raises ValueError at import time if
#   the template and the declared path parameters disagree.
#
# TOOL NAMING:
#   <method>_<path segments>, matching the Jira REST reference, e.g.
#   GET /api/2/issue/{issueIdOrKey}  →  get_api_2_issue_issueIdOrKey
#
# Paths are relative to JIRA_BASE_URL, which includes the "/rest" prefix.
# =============================================================================

from jira_core.models import Endpoint, ParamType, path_param, query_param

INTEGER = ParamType.INTEGER
BOOLEAN = ParamType.BOOLEAN

# Descriptions shared by several endpoints.
_START_AT = "the index of the first result to return (0-based)"
_MAX_USERS = (
    "the maximum number of users to return (defaults to 50). The maximum allowed "
    "value is 1000; higher values are truncated."
)
_ADJUST_ESTIMATE = (
    "how to update the remaining estimate of the issue: \"new\" sets it to newEstimate, "
    "\"leave\" leaves it as is, \"manual\" increases it by increaseBy, \"auto\" (default) "
    "adjusts it from the worklog's timeSpent."
)
_NEW_ESTIMATE = "(required when \"new\" is selected for adjustEstimate) the new remaining estimate, e.g. \"2d\""
_WORKFLOW_NAME = "the name of the workflow to use."
_WORKFLOW_MODE = "the type of workflow to use. Can either be \"live\" or \"draft\"."
_TRANSITION_ID = "the id of the transition."
_ISSUE_ID_OR_KEY = "the id or key of the issue (e.g. 10000 or TEST-123)."
_RENDERED_BODY = "optional flags: renderedBody (provides body rendered in HTML)"


ENDPOINTS: tuple[Endpoint, ...] = (
    # ============ Issues ============
    Endpoint(
        name="post_api_2_issue",
        method="POST",
        path="/api/2/issue",
        description=(
            "Creates an issue or a sub-task from a JSON representation. The fields that can be "
            "set on create can be determined using the /rest/api/2/issue/createmeta resource. "
            "A sub-task needs a sub-task issue type and a parent field with the id or key of "
            "the parent issue."
        ),
    ),
    Endpoint(
        name="get_api_2_issue_issueIdOrKey",
        method="GET",
        path="/api/2/issue/{issueIdOrKey}",
        description=(
            "Returns a full representation of the issue for the given issue key or id. "
            "The fields param gives a comma-separated list of fields to include (*all, "
            "*navigable, summary,comment, -comment). The properties param works the same way "
            "for issue properties, which are not included by default. The expand param can "
            "include renderedFields, names, schema, transitions, operations, editmeta, "
            "changelog and versionedRepresentations."
        ),
        params=(
            path_param("issueIdOrKey", _ISSUE_ID_OR_KEY),
            query_param("fields", "the list of fields to return for the issue. By default, all fields are returned."),
            query_param("expand", "comma-separated parts of the response to expand."),
            query_param("properties", "the list of properties to return for the issue. By default no properties are returned."),
        ),
    ),
    Endpoint(
        name="put_api_2_issue_issueIdOrKey",
        method="PUT",
        path="/api/2/issue/{issueIdOrKey}",
        description=(
            "Edits an issue from a JSON representation. Fields can be set explicitly or "
            "changed with an operation; the editable fields are listed by "
            "/rest/api/2/issue/{issueIdOrKey}/editmeta."
        ),
        params=(
            path_param("issueIdOrKey", _ISSUE_ID_OR_KEY),
            query_param(
                "notifyUsers",
                "send the email with notification that the issue was updated to users that watch it. "
                "Admin or project admin permissions are required to disable the notification.",
                BOOLEAN,
            ),
        ),
    ),
    Endpoint(
        name="get_api_2_issue_createmeta",
        method="GET",
        path="/api/2/issue/createmeta",
        description=(
            "Returns the meta data for creating issues: the available projects, issue types and "
            "fields, including field types and whether they are required. Fields are only "
            "returned with expand=projects.issuetypes.fields. Results can be filtered by project "
            "and/or issue type."
        ),
        params=(
            query_param("projectIds", "comma-separated project ids to filter the results by. If absent, all projects are returned."),
            query_param("projectKeys", "comma-separated project keys to filter the results by. If absent, all projects are returned."),
            query_param("issuetypeIds", "comma-separated issue type ids to filter the results by. If absent, all issue types are returned."),
            query_param("issuetypeNames", "issue type name to filter the results by. If absent, all issue types are returned."),
        ),
    ),
    Endpoint(
        name="get_api_2_issue_picker",
        method="GET",
        path="/api/2/issue/picker",
        description=(
            "Returns suggested issues which match the auto-completion query for the user which "
            "executes this request, based on the user's history and browsing context."
        ),
        params=(
            query_param("query", "the query."),
            query_param("currentJQL", "the JQL in context of which the request is executed. Only issues which match this JQL query will be included in results."),
            query_param("currentIssueKey", "the key of the issue in context of which the request is executed. That issue is never included in the result."),
            query_param("currentProjectId", "the id of the project in context of which the request is executed. Suggested issues will be only from this project."),
            query_param("showSubTasks", "if set to false, subtasks will not be included in the list.", BOOLEAN),
            query_param("showSubTaskParent", "if set to false and the context issue is a subtask, its parent will not be included.", BOOLEAN),
        ),
    ),
    Endpoint(
        name="post_api_2_issue_issueIdOrKey_attachments",
        method="POST",
        path="/api/2/issue/{issueIdOrKey}/attachments",
        description=(
            "Add one or more attachments to an issue. Jira expects a multipart/form-data post "
            "with the part named \"file\" and the header X-Atlassian-Token: no-check."
        ),
        params=(path_param("issueIdOrKey", _ISSUE_ID_OR_KEY),),
    ),
    Endpoint(
        name="post_api_2_issueLink",
        method="POST",
        path="/api/2/issueLink",
        description=(
            "Creates an issue link between two issues, using the outward description of the link "
            "type from the first issue and the inward description from the second. An optional "
            "comment is added to the first issue."
        ),
    ),
    Endpoint(
        name="get_api_2_search",
        method="GET",
        path="/api/2/search",
        description="Searches for issues using JQL.",
        params=(
            query_param("jql", "a JQL query string"),
            query_param("startAt", "the index of the first issue to return (0-based)", INTEGER),
            query_param(
                "maxResults",
                "the maximum number of issues to return (defaults to 50). The upper bound is the "
                "Jira property 'jira.search.views.default.max'.",
                INTEGER,
            ),
            query_param("validateQuery", "whether to validate the JQL query", BOOLEAN),
            query_param("fields", "the list of fields to return for each issue. By default, all navigable fields are returned."),
            query_param("expand", "A comma-separated list of the parameters to expand."),
        ),
    ),

    # ============ Comments ============
    Endpoint(
        name="get_api_2_issue_issueIdOrKey_comment",
        method="GET",
        path="/api/2/issue/{issueIdOrKey}/comment",
        description="Returns all comments for an issue.",
        params=(
            path_param("issueIdOrKey", _ISSUE_ID_OR_KEY),
            query_param("startAt", "the page offset, if not specified then defaults to 0", INTEGER),
            query_param("maxResults", "how many results on the page should be included. Defaults to 50.", INTEGER),
            query_param("orderBy", "ordering of the results."),
            query_param("expand", _RENDERED_BODY),
        ),
    ),
    Endpoint(
        name="put_api_2_issue_issueIdOrKey_comment_id",
        method="PUT",
        path="/api/2/issue/{issueIdOrKey}/comment/{id}",
        description="Updates an existing comment using its JSON representation.",
        params=(
            path_param("issueIdOrKey", _ISSUE_ID_OR_KEY),
            path_param("id", "the id of the comment."),
            query_param("expand", _RENDERED_BODY),
        ),
    ),

    # ============ Worklogs ============
    Endpoint(
        name="put_api_2_issue_issueIdOrKey_worklog_id",
        method="PUT",
        path="/api/2/issue/{issueIdOrKey}/worklog/{id}",
        description=(
            "Updates an existing worklog entry. Editable fields are comment, visibility, started, "
            "timeSpent and timeSpentSeconds; fields which are not set are not updated."
        ),
        params=(
            path_param("issueIdOrKey", _ISSUE_ID_OR_KEY),
            path_param("id", "the id of the worklog."),
            query_param("adjustEstimate", _ADJUST_ESTIMATE),
            query_param("newEstimate", _NEW_ESTIMATE),
        ),
    ),
    Endpoint(
        name="delete_api_2_issue_issueIdOrKey_worklog_id",
        method="DELETE",
        path="/api/2/issue/{issueIdOrKey}/worklog/{id}",
        description="Deletes an existing worklog entry.",
        params=(
            path_param("issueIdOrKey", _ISSUE_ID_OR_KEY),
            path_param("id", "the id of the worklog."),
            query_param("adjustEstimate", _ADJUST_ESTIMATE),
            query_param("newEstimate", _NEW_ESTIMATE),
            query_param(
                "increaseBy",
                "(required when \"manual\" is selected for adjustEstimate) the amount to increase the remaining estimate by, e.g. \"2d\"",
            ),
        ),
    ),

    # ============ Users ============
    Endpoint(
        name="get_api_2_user_assignable_search",
        method="GET",
        path="/api/2/user/assignable/search",
        description=(
            "Returns a list of users that match the search string and can be assigned issues. "
            "This resource cannot be accessed anonymously."
        ),
        params=(
            query_param("username", "the username"),
            query_param("project", "the key of the project we are finding assignable users for"),
            query_param("issueKey", "the issue key for the issue being edited we need to find assignable users for."),
            query_param("startAt", "the index of the first user to return (0-based)", INTEGER),
            query_param("maxResults", _MAX_USERS, INTEGER),
            query_param("actionDescriptorId", "the id of the workflow transition the user will be assigned in."),
        ),
    ),
    Endpoint(
        name="get_api_2_user_picker",
        method="GET",
        path="/api/2/user/picker",
        description=(
            "Returns a list of users matching query with highlighting. "
            "This resource cannot be accessed anonymously."
        ),
        params=(
            query_param("query", "A string used to search username, Name or e-mail address"),
            query_param("maxResults", _MAX_USERS, INTEGER),
            query_param("showAvatar", "whether to include avatar urls in the result.", BOOLEAN),
            query_param("exclude", "usernames to exclude from the result."),
        ),
    ),
    Endpoint(
        name="get_api_2_user_viewissue_search",
        method="GET",
        path="/api/2/user/viewissue/search",
        description=(
            "Returns a list of active users that match the search string and have permission to "
            "browse the issue or project. This resource cannot be accessed anonymously."
        ),
        params=(
            query_param("username", "the username filter, no users returned if left blank"),
            query_param("issueKey", "the issue key for the issue being edited we need to find viewable users for."),
            query_param("projectKey", "the optional project key to search for users with if no issueKey is supplied."),
            query_param("startAt", "the index of the first user to return (0-based)", INTEGER),
            query_param("maxResults", _MAX_USERS, INTEGER),
        ),
    ),
    Endpoint(
        name="put_api_2_user_properties_propertyKey",
        method="PUT",
        path="/api/2/user/properties/{propertyKey}",
        description="Sets the value of the specified user's property.",
        params=(
            path_param("propertyKey", "the key of the property to set."),
            query_param("userKey", "key of the user whose property is to be set"),
            query_param("username", "username of the user whose property is to be set"),
        ),
    ),
    Endpoint(
        name="post_api_2_user_avatar_temporary",
        method="POST",
        path="/api/2/user/avatar/temporary",
        description=(
            "Creates a temporary avatar for a user using a multipart upload named \"avatar\". "
            "This is the first step of upload, crop, confirm."
        ),
        params=(query_param("username", "Username"),),
    ),
    Endpoint(
        name="post_api_2_avatar_type_temporary",
        method="POST",
        path="/api/2/avatar/{type}/temporary",
        description="Creates temporary avatar",
        params=(
            path_param("type", "the avatar type, e.g. \"project\" or \"user\"."),
            query_param("filename", "name of file being uploaded"),
            query_param("size", "size of file", INTEGER),
        ),
    ),
    Endpoint(
        name="post_api_2_password_policy_createUser",
        method="POST",
        path="/api/2/password/policy/createUser",
        description=(
            "Returns a list of statements explaining why the password policy would disallow a "
            "proposed password for a new user. Only the policy is checked, not other user "
            "creation rules."
        ),
    ),
    Endpoint(
        name="get_api_2_mypermissions",
        method="GET",
        path="/api/2/mypermissions",
        description=(
            "Returns all permissions in the system and whether the currently logged in user has "
            "them. Optionally scoped by projectKey, projectId, issueKey or issueId; without a "
            "context, project permissions are true if the user has them in ANY project."
        ),
        params=(
            query_param("projectKey", "key of project to scope returned permissions for."),
            query_param("projectId", "id of project to scope returned permissions for."),
            query_param("issueKey", "key of the issue to scope returned permissions for."),
            query_param("issueId", "id of the issue to scope returned permissions for."),
        ),
    ),

    # ============ Groups & project roles ============
    Endpoint(
        name="get_api_2_group",
        method="GET",
        path="/api/2/group",
        description=(
            "Returns REST representation for the requested group. With the \"users\" expand "
            "option the active users of the group and its subgroups are listed; page through "
            "them with e.g. \"users[10:15]\". Deprecated in favour of the group/member API."
        ),
        params=(
            query_param("groupname", "A name of requested group."),
            query_param("expand", "List of fields to expand. Currently only available expand is \"users\"."),
        ),
    ),
    Endpoint(
        name="delete_api_2_project_projectIdOrKey_role_id",
        method="DELETE",
        path="/api/2/project/{projectIdOrKey}/role/{id}",
        description="Deletes actors (users or groups) from a project role.",
        params=(
            path_param("projectIdOrKey", "the id or key of the project."),
            path_param("id", "the id of the project role."),
            query_param("user", "the username to remove from the project role"),
            query_param("group", "the groupname to remove from the project role"),
        ),
    ),
    Endpoint(
        name="get_api_2_notificationscheme_id",
        method="GET",
        path="/api/2/notificationscheme/{id}",
        description=(
            "Returns a full representation of the notification scheme for the given id: its "
            "events and the recipients configured for them. Requires permission to administer "
            "at least one project using the scheme."
        ),
        params=(
            path_param("id", "the id of the notification scheme."),
            query_param("expand", "extra recipient details to include: user, group, field, projectRole."),
        ),
    ),

    # ============ Dashboards ============
    Endpoint(
        name="get_api_2_dashboard",
        method="GET",
        path="/api/2/dashboard",
        description="Returns a list of all dashboards, optionally filtering them.",
        params=(
            query_param(
                "filter",
                "an optional filter: \"favourite\" returns only favourite dashboards, \"my\" returns "
                "dashboards owned by the calling user.",
            ),
            query_param("startAt", "the index of the first dashboard to return (0-based). Must be 0 or a multiple of maxResults.", INTEGER),
            query_param("maxResults", "a hint as to the maximum number of dashboards to return in each call.", INTEGER),
        ),
    ),
    Endpoint(
        name="put_api_2_dashboard_dashboardId_items_itemId_properties_propertyKey",
        method="PUT",
        path="/api/2/dashboard/{dashboardId}/items/{itemId}/properties/{propertyKey}",
        description=(
            "Sets the value of the specified dashboard item's property. The caller must be "
            "allowed to administer the dashboard item."
        ),
        params=(
            path_param("dashboardId", "the id of the dashboard."),
            path_param("itemId", "the id of the dashboard item."),
            path_param("propertyKey", "the key of the property to set."),
        ),
    ),

    # ============ Workflow transition properties ============
    Endpoint(
        name="get_api_2_workflow_api_2_transitions_id_properties",
        method="GET",
        path="/api/2/workflow/api/2/transitions/{id}/properties",
        description="Return the property or properties associated with a transition.",
        params=(
            path_param("id", _TRANSITION_ID),
            query_param(
                "includeReservedKeys",
                "some keys under the \"jira.\" prefix are not editable. Set this to true to include them in the response.",
                BOOLEAN,
            ),
            query_param("key", "the name of the property key to query. Can be left off the query to return all properties."),
            query_param("workflowName", _WORKFLOW_NAME),
            query_param("workflowMode", _WORKFLOW_MODE),
        ),
    ),
    Endpoint(
        name="post_api_2_workflow_api_2_transitions_id_properties",
        method="POST",
        path="/api/2/workflow/api/2/transitions/{id}/properties",
        description="Add a new property to a transition. Trying to add a property that already exists will fail.",
        params=(
            path_param("id", _TRANSITION_ID),
            query_param("key", "the name of the property to add."),
            query_param("workflowName", _WORKFLOW_NAME),
            query_param("workflowMode", _WORKFLOW_MODE),
        ),
    ),

    # ============ Indexing & auditing ============
    Endpoint(
        name="get_api_2_index_summary",
        method="GET",
        path="/api/2/index/summary",
        description="Summarizes index condition of current node.",
    ),
    Endpoint(
        name="post_api_2_reindex",
        method="POST",
        path="/api/2/reindex",
        description="Kicks off a reindex.  Need Admin permissions to perform this reindex.",
        params=(
            query_param("type", "Case insensitive String indicating type of reindex.  If omitted, then defaults to BACKGROUND_PREFERRED."),
            query_param("indexComments", "Indicates that comments should also be reindexed. Not relevant for foreground reindex.", BOOLEAN),
            query_param("indexChangeHistory", "Indicates that changeHistory should also be reindexed. Not relevant for foreground reindex.", BOOLEAN),
            query_param("indexWorklogs", "Indicates that worklogs should also be reindexed. Not relevant for foreground reindex.", BOOLEAN),
        ),
    ),
    Endpoint(
        name="post_api_2_reindex_issue",
        method="POST",
        path="/api/2/reindex/issue",
        description=(
            "Reindexes one or more individual issues.  Indexing is performed synchronously - the "
            "call returns when indexing of the issues has completed or a failure occurs."
        ),
        params=(
            query_param("issueId", "the IDs or keys of one or more issues to reindex."),
            query_param("indexComments", "Indicates that comments should also be reindexed.", BOOLEAN),
            query_param("indexChangeHistory", "Indicates that changeHistory should also be reindexed.", BOOLEAN),
            query_param("indexWorklogs", "Indicates that worklogs should also be reindexed.", BOOLEAN),
        ),
    ),
    Endpoint(
        name="get_api_2_auditing_record",
        method="GET",
        path="/api/2/auditing/record",
        description="Returns auditing records filtered using provided parameters",
        params=(
            query_param("offset", "the number of record from which search starts", INTEGER),
            query_param("limit", "maximum number of returned results (if limit is <= 0 or > 1000, it is set to 1000)", INTEGER),
            query_param("filter", "text query; each record returned must contain the provided text in one of its fields"),
            query_param("from", "timestamp in past; only records created at or after 'from' are returned"),
            query_param("to", "timestamp in past; only records created at or before 'to' are returned"),
            query_param("projectIds", "list of project ids to look for"),
            query_param("userIds", "list of user ids to look for"),
        ),
    ),
)

_BY_NAME: dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in ENDPOINTS}

if len(_BY_NAME) != len(ENDPOINTS):
    raise ValueError("duplicate tool names in ENDPOINTS")


def get_endpoint(name: str) -> Endpoint:
    """Look up a descriptor by tool name.

    Raises:
        KeyError: if no endpoint has that name.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown Jira tool: {name!r}") from None


def list_endpoint_names() -> list[str]:
    return [endpoint.name for endpoint in ENDPOINTS]
