"""Wire serialization — records to dicts keyed with the service's field names."""

import json
from typing import Optional

from logtrack.models import (
    EnvironmentDetail,
    ErrorItem,
    ErrorRecord,
    LogMessage,
    StackFrame,
    WebRequestDetail,
)


def _compact(payload: dict) -> dict:
    """Drop None values; the service treats missing and null alike."""
    return {key: val for key, val in payload.items() if val is not None}


def to_json(payload) -> str:
    """Compact JSON, no whitespace between tokens."""
    return json.dumps(payload, separators=(",", ":"))


def serialize_mdc(mdc: Optional[dict]) -> str:
    """Diagnostic context as a JSON object of strings, insertion order kept."""
    if not mdc:
        return "{}"
    return to_json({str(key): str(val) for key, val in mdc.items()})


def frame_to_dict(frame: StackFrame) -> dict:
    return _compact({
        "CodeFileName": frame.file,
        "LineNum": frame.line,
        "Method": frame.qualified_method,
    })


def error_item_to_dict(item: ErrorItem) -> dict:
    return _compact({
        "Message": item.message,
        "ErrorType": item.error_type,
        "ErrorTypeCode": item.error_type_code,
        "Data": item.data or None,
        "SourceMethod": item.source_method,
        "StackTrace": [frame_to_dict(frame) for frame in item.stack_trace],
        "InnerError": error_item_to_dict(item.inner_error) if item.inner_error else None,
    })


def environment_to_dict(env: EnvironmentDetail) -> dict:
    return _compact({
        "DeviceName": env.device_name,
        "AppName": env.app_name,
        "AppLocation": env.app_location,
        "ConfiguredAppName": env.configured_app_name,
        "ConfiguredEnvironmentName": env.configured_environment_name,
    })


def web_request_to_dict(request: WebRequestDetail) -> dict:
    return _compact({
        "UserIPAddress": request.user_ip_address,
        "HttpMethod": request.http_method,
        "RequestProtocol": request.request_protocol,
        "RequestUrl": request.request_url,
        "RequestUrlRoot": request.request_url_root,
        "ReferralUrl": request.referral_url,
        "Headers": request.headers or None,
        "Cookies": request.cookies or None,
        "QueryString": request.query_string or None,
        "PostData": request.post_data or None,
        "SessionData": request.session_data or None,
        "PostDataRaw": request.post_data_raw,
        "MVCAction": request.mvc_action,
        "MVCController": request.mvc_controller,
        "MVCArea": request.mvc_area,
    })


def error_record_to_dict(record: ErrorRecord) -> dict:
    return _compact({
        "EnvironmentDetail": environment_to_dict(record.environment),
        "OccurredEpochMillis": record.occurred_epoch_millis,
        "Error": error_item_to_dict(record.error),
        "WebRequestDetail": (web_request_to_dict(record.web_request_detail)
                             if record.web_request_detail else None),
        "ServerVariables": record.server_variables,
        "CustomerName": record.customer_name,
        "UserName": record.user_name,
    })


def log_message_to_dict(message: LogMessage) -> dict:
    """Wire form of a LogMessage; the environment travels with the error only."""
    return _compact({
        "Msg": message.msg,
        "data": message.data,
        "Ex": error_record_to_dict(message.ex) if message.ex else None,
        "Th": message.th,
        "EpochMs": message.epoch_ms,
        "Level": message.level,
        "TransID": message.trans_id,
        "SrcMethod": message.src_method,
        "SrcLine": message.src_line,
    })
