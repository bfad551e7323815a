"""Per-request context: user, transaction id and web request of one logical request."""

from typing import Optional

from logtrack.models import WebRequestDetail


class RequestContext:
    def __init__(self, user: Optional[str] = None, transaction_id: Optional[str] = None,
                 web_request: Optional[WebRequestDetail] = None):
        self._user = user
        self._transaction_id = transaction_id
        self._web_request = web_request

    def get_user(self) -> Optional[str]:
        return self._user

    def put_user(self, user: Optional[str]):
        self._user = user

    def get_transaction_id(self) -> Optional[str]:
        return self._transaction_id

    def put_transaction_id(self, transaction_id: Optional[str]):
        self._transaction_id = transaction_id

    def get_web_request(self) -> Optional[WebRequestDetail]:
        return self._web_request

    def put_web_request(self, web_request: Optional[WebRequestDetail]):
        self._web_request = web_request

    def clear(self):
        """Forget everything; called when the request finishes."""
        self._user = None
        self._transaction_id = None
        self._web_request = None

    def __repr__(self):
        return (f"RequestContext(user={self._user!r}, "
                f"transaction_id={self._transaction_id!r})")
