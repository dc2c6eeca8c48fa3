"""Schemas of the alert resource and data source, and the mapping of alert conditions to state."""

from __future__ import annotations

import re
import sys
from typing import Any, Mapping

from .schema import Attribute, ResourceSchema, ValueType
from .validations import (
    validate_id,
    validate_int_enum,
    validate_int_range,
    validate_pattern,
    validate_string_enum,
)

_DESCRIPTION = (
    "Alerts let you monitor data including network traffic and activities, or various security "
    "events like password resets and missing certificates.\n"
    "You can examine and filter any type of event, as well as define alert notifications to be "
    "sent to email, webhooks (integrating with SaaS apps), PagerDuty or Slack.\n"
    "Alerts can be configured using either `spike_condition` or `threshold_condition`"
)
_CHANNELS = "List of notification channel IDs."
_GROUP_BY = "The group by field name."
_NOTIFY_MESSAGE = (
    "Creates a custom message that will be sent to your notification channels.\n"
    '\tYou can use free text and/or alert field names surrounded with a "${ }". '
    'For example, "${hits} have failed to login".'
)
_SOURCE_TYPE = (
    "Logs type. Supported log types:\n"
    "\t- **security_audit**- The `security_audit` logs provide the administrator visibility into "
    "events which are generated by device and user security-related activity, such as user "
    "authenticating into Proofpoint NaaS, users changing their passwords, posture check "
    "failures, etc.\n"
    "\t- **api_audit** - The `api_audit` logs capture details of administrator activity: the "
    "timestamp and identity of administrators who accessed the Proofpoint NaaS tenant, and "
    "configuration changes that were made by the administrator.\n"
    "\t- **traffic_audit** - The `traffic_audit` logs provide detailed visibility into each "
    "element in the system covering network traffic including DNS and other OSI Layer 3 and 4 "
    "traffic details.\n"
    "\t- **metaproxy_audit** - The `metaproxy_audit` logs provide the administrator visibility "
    "into the clientless access of their employees to web applications configured via EasyLink "
    "policy.\n"
    "\t- **webfilter_audit** - The `webfilter_audit` logs provide the administrator visibility "
    "into the events generated by the Web Security engine.\n"
)
_MIN_HITS = "Minimum number of hits in current window to check the spike."
_SPIKE_RATIO = "The difference between hits that triggers alert (in percents)."
_SPIKE_TYPE = "Spike type, ENUM: `up`, `down`, `both`."
_TIME_DIFF = (
    "Time difference in minutes between current and reference window, "
    "Enum: `1`, `3`, `5`, `60`, `1440`, `10080`."
)
_FORMULA = "Mathematical formula to run on the events, ENUM: `count`."
_OP = (
    "Operator used to compare to the threshold, "
    "ENUM: `greater`, `greaterequals`, `less`, `lessequals`, `equals`."
)
_THRESHOLD = "The threshold to compare result of the formula."
_WINDOW = (
    "The time window of the check (in mins), "
    "ENUM: `1`, `3`, `5`, `10`, `30`, `60`, `360`, `1440`, `2880`, `10080`."
)

EXCLUDED_KEYS = ("id", "spike_condition", "threshold_condition")

_MAX_INT = sys.maxsize
_GROUP_BY_PATTERN = re.compile(r"^[\w-]*\Z", re.ASCII)


def resource_schema() -> ResourceSchema:
    """Schema of the managed alert resource."""
    spike_condition = ResourceSchema(
        attributes={
            "min_hits": Attribute(
                ValueType.INT,
                optional=True,
                default=0,
                validator=validate_int_range(0, _MAX_INT),
                description=_MIN_HITS,
            ),
            "spike_ratio": Attribute(
                ValueType.INT,
                required=True,
                validator=validate_int_range(1, 100),
                description=_SPIKE_RATIO,
            ),
            "spike_type": Attribute(
                ValueType.STRING,
                required=True,
                validator=validate_string_enum("up", "down", "both"),
                description=_SPIKE_TYPE,
            ),
            "time_diff": Attribute(
                ValueType.INT,
                required=True,
                validator=validate_int_enum(1, 3, 5, 60, 1440, 10080),
                description=_TIME_DIFF,
            ),
        }
    )
    threshold_condition = ResourceSchema(
        attributes={
            "formula": Attribute(
                ValueType.STRING,
                optional=True,
                validator=validate_string_enum("count"),
                description=_FORMULA,
            ),
            "op": Attribute(
                ValueType.STRING,
                required=True,
                validator=validate_string_enum(
                    "greater", "greaterequals", "less", "lessequals", "equals"
                ),
                description=_OP,
            ),
            "threshold": Attribute(ValueType.INT, required=True, description=_THRESHOLD),
        }
    )
    return ResourceSchema(
        description=_DESCRIPTION,
        attributes={
            "id": Attribute(ValueType.STRING, computed=True),
            "name": Attribute(ValueType.STRING, required=True),
            "description": Attribute(ValueType.STRING, optional=True),
            "enabled": Attribute(ValueType.BOOL, optional=True, default=True),
            "channels": Attribute(
                ValueType.LIST,
                required=True,
                elem=ValueType.STRING,
                validator=validate_id(False, "nch"),
                description=_CHANNELS,
            ),
            "group_by": Attribute(
                ValueType.STRING,
                optional=True,
                validator=validate_pattern(_GROUP_BY_PATTERN),
                description=_GROUP_BY,
            ),
            "notify_message": Attribute(
                ValueType.STRING, optional=True, description=_NOTIFY_MESSAGE
            ),
            "query_text": Attribute(ValueType.STRING, required=True),
            "source_type": Attribute(
                ValueType.STRING,
                required=True,
                validator=validate_string_enum(
                    "security_audit",
                    "api_audit",
                    "traffic_audit",
                    "webfilter_audit",
                    "webfilter_audit",
                ),
                description=_SOURCE_TYPE,
            ),
            "spike_condition": Attribute(
                ValueType.LIST,
                optional=True,
                elem=spike_condition,
                max_items=1,
                conflicts_with=("threshold_condition",),
            ),
            "threshold_condition": Attribute(
                ValueType.LIST,
                optional=True,
                elem=threshold_condition,
                max_items=1,
                conflicts_with=("spike_condition",),
            ),
            "window": Attribute(
                ValueType.INT,
                required=True,
                validator=validate_int_enum(1, 3, 5, 10, 30, 60, 360, 1440, 2880, 10080),
                description=_WINDOW,
            ),
            "type": Attribute(ValueType.STRING, computed=True),
        },
    )


def data_source_schema() -> ResourceSchema:
    """Schema of the alert data source, looked up by id."""
    spike_condition = ResourceSchema(
        attributes={
            "min_hits": Attribute(ValueType.INT, computed=True, description=_MIN_HITS),
            "spike_ratio": Attribute(ValueType.INT, computed=True, description=_SPIKE_RATIO),
            "spike_type": Attribute(ValueType.STRING, computed=True, description=_SPIKE_TYPE),
            "time_diff": Attribute(ValueType.INT, computed=True, description=_TIME_DIFF),
        }
    )
    threshold_condition = ResourceSchema(
        attributes={
            "formula": Attribute(ValueType.STRING, computed=True, description=_FORMULA),
            "op": Attribute(ValueType.STRING, computed=True, description=_OP),
            "threshold": Attribute(ValueType.INT, computed=True, description=_THRESHOLD),
        }
    )
    return ResourceSchema(
        description=_DESCRIPTION,
        attributes={
            "id": Attribute(ValueType.STRING, required=True),
            "name": Attribute(ValueType.STRING, computed=True),
            "description": Attribute(ValueType.STRING, computed=True),
            "enabled": Attribute(ValueType.BOOL, computed=True),
            "channels": Attribute(
                ValueType.LIST, computed=True, elem=ValueType.STRING, description=_CHANNELS
            ),
            "group_by": Attribute(ValueType.STRING, computed=True, description=_GROUP_BY),
            "notify_message": Attribute(
                ValueType.STRING, computed=True, description=_NOTIFY_MESSAGE
            ),
            "query_text": Attribute(ValueType.STRING, computed=True),
            "source_type": Attribute(ValueType.STRING, computed=True, description=_SOURCE_TYPE),
            "spike_condition": Attribute(ValueType.LIST, computed=True, elem=spike_condition),
            "threshold_condition": Attribute(
                ValueType.LIST, computed=True, elem=threshold_condition
            ),
            "window": Attribute(ValueType.INT, computed=True, description=_WINDOW),
            "type": Attribute(ValueType.STRING, computed=True),
        },
    )


def conditions_to_state(alert: Mapping[str, Any]) -> dict[str, list[dict[str, Any]]]:
    """Turn an alert's conditions into single-block lists for state.

    Only the conditions present (and not null) in ``alert`` appear in the result.
    """
    state: dict[str, list[dict[str, Any]]] = {}
    spike = alert.get("spike_condition")
    if spike is not None:
        state["spike_condition"] = [
            {
                "min_hits": spike.get("min_hits", 0),
                "spike_ratio": spike.get("spike_ratio", 0),
                "spike_type": spike.get("spike_type", ""),
                "time_diff": spike.get("time_diff", 0),
            }
        ]
    threshold = alert.get("threshold_condition")
    if threshold is not None:
        state["threshold_condition"] = [
            {
                "formula": threshold.get("formula", ""),
                "op": threshold.get("op", ""),
                "threshold": threshold.get("threshold", 0),
            }
        ]
    return state