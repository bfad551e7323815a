"""Normalized records handed to the error-tracking service."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class StackFrame:
    class_name: str = ""
    method: str = ""
    file: str = ""
    line: Optional[int] = None

    @property
    def qualified_method(self) -> str:
        if not self.class_name:
            return self.method
        return f"{self.class_name}.{self.method}"


@dataclass(frozen=True)
class ErrorItem:
    """One link of a captured exception chain."""

    error_type: str
    message: Optional[str] = None
    error_type_code: Optional[str] = None
    source_method: Optional[str] = None
    stack_trace: list[StackFrame] = field(default_factory=list)
    inner_error: Optional["ErrorItem"] = None
    data: dict = field(default_factory=dict)

    def chain(self) -> list["ErrorItem"]:
        """Return this item followed by every nested inner error."""
        items = []
        item = self
        while item is not None:
            items.append(item)
            item = item.inner_error
        return items


@dataclass(frozen=True)
class EnvironmentDetail:
    device_name: Optional[str] = None
    app_name: Optional[str] = None
    app_location: Optional[str] = None
    configured_app_name: Optional[str] = None
    configured_environment_name: Optional[str] = None


@dataclass(frozen=True)
class WebRequestDetail:
    user_ip_address: Optional[str] = None
    http_method: Optional[str] = None
    request_protocol: Optional[str] = None
    request_url: Optional[str] = None
    request_url_root: Optional[str] = None
    referral_url: Optional[str] = None
    headers: dict = field(default_factory=dict)
    cookies: dict = field(default_factory=dict)
    query_string: dict = field(default_factory=dict)
    post_data: dict = field(default_factory=dict)
    session_data: dict = field(default_factory=dict)
    post_data_raw: Optional[str] = None
    mvc_action: Optional[str] = None
    mvc_controller: Optional[str] = None
    mvc_area: Optional[str] = None


@dataclass(frozen=True)
class ErrorRecord:
    environment: EnvironmentDetail
    occurred_epoch_millis: int
    error: ErrorItem
    web_request_detail: Optional[WebRequestDetail] = None
    user_name: Optional[str] = None
    server_variables: Optional[dict] = None
    customer_name: Optional[str] = None


@dataclass(frozen=True)
class LogMessage:
    msg: Optional[str]
    data: str
    level: str
    environment: EnvironmentDetail
    ex: Optional[ErrorRecord] = None
    th: Optional[str] = None
    epoch_ms: Optional[int] = None
    src_method: Optional[str] = None
    src_line: Optional[int] = None
    trans_id: Optional[str] = None
