"""HTTP client for the Q&A backend.

Endpoints (relative to the configured base URL):
- GET    /qa/{context_id}  full nested tree of a discussion
- POST   /qa               create a question or reply (form body)
- PUT    /qa/{item_id}     update text and attachment (form body)
- DELETE /qa/{item_id}     delete an item and its replies

Every request carries the stored bearer token.
"""

from typing import Any, List, Optional

import httpx
import logfire
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from forum.adapter.error import (
    AuthorizationError,
    BackendError,
    InvalidResponseError,
    ItemNotFoundError,
    NetworkError,
)
from forum.domain.model.draft import AttachmentChange, ChangeKind
from forum.domain.model.qa_item import QAItem
from forum.domain.repository import QARepository, TokenRepository
from forum.domain.value import AttachmentFile, ContextId, QAItemId

_forest_adapter = TypeAdapter(List[QAItem])


class QABackendClient(QARepository):
    """Q&A repository backed by the REST API."""

    def __init__(
        self,
        base_url: str,
        token_repository: TokenRepository,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize backend client.

        Args:
            base_url: API base URL including any prefix (e.g. ``https://host/api``)
            token_repository: Storage holding the bearer token
            timeout: Request timeout in seconds
            transport: Custom httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.token_repository = token_repository
        self.timeout = timeout
        self.transport = transport

    async def find_by_context(self, context_id: ContextId) -> List[QAItem]:
        """Fetch the full nested tree of a discussion."""
        response = await self._request("GET", f"/qa/{context_id}")
        payload = self._json(response)
        if payload is None:
            return []

        try:
            return _forest_adapter.validate_python(payload)
        except PydanticValidationError as e:
            logfire.error(
                "Invalid Q&A tree from backend",
                context_id=context_id,
                error=str(e),
            )
            raise InvalidResponseError(f"Invalid Q&A tree: {e}")

    async def create(
        self,
        context_id: ContextId,
        text: str,
        parent_id: Optional[QAItemId] = None,
        attachment: Optional[AttachmentFile] = None,
    ) -> QAItem:
        """Create a question or reply."""
        data = {"text": text, "collaboration_id": str(context_id)}
        if parent_id is not None:
            data["parent_id"] = str(parent_id)

        response = await self._request(
            "POST", "/qa", data=data, files=self._files(attachment)
        )
        return self._item(response)

    async def update(
        self,
        item_id: QAItemId,
        context_id: ContextId,
        text: str,
        change: AttachmentChange,
    ) -> QAItem:
        """Update an item's text and attachment."""
        data = {"text": text, "collaboration_id": str(context_id)}
        attachment = None
        if change.kind == ChangeKind.REPLACE:
            attachment = change.file
        elif change.kind == ChangeKind.REMOVE:
            data["remove_attachment"] = "true"

        response = await self._request(
            "PUT", f"/qa/{item_id}", data=data, files=self._files(attachment)
        )
        return self._item(response)

    async def delete(self, item_id: QAItemId) -> None:
        """Delete an item and its replies."""
        await self._request("DELETE", f"/qa/{item_id}")

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request and map failures to adapter errors.

        Raises:
            NetworkError: If the backend is unreachable
            AuthorizationError: On 401/403
            ItemNotFoundError: On 404
            BackendError: On any other non-2xx status
        """
        headers = await self._auth_headers()

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logfire.error(
                "Q&A backend unreachable",
                method=method,
                path=path,
                error=str(e),
            )
            raise NetworkError(f"HTTP error during {method} {path}: {e}")

        if response.is_error:
            message = _error_message(response)
            logfire.error(
                "Q&A backend request failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise _error_for_status(response.status_code, message)

        return response

    async def _auth_headers(self) -> dict[str, str]:
        token = await self.token_repository.get()
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    @staticmethod
    def _files(attachment: Optional[AttachmentFile]) -> Optional[dict]:
        if attachment is None:
            return None
        return {
            "attachment": (attachment.name, attachment.content, attachment.content_type)
        }

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(f"Response is not JSON: {e}")

    def _item(self, response: httpx.Response) -> QAItem:
        payload = self._json(response)
        try:
            return QAItem.model_validate(payload)
        except PydanticValidationError as e:
            logfire.error("Invalid Q&A item from backend", error=str(e))
            raise InvalidResponseError(f"Invalid Q&A item: {e}")


def _error_message(response: httpx.Response) -> Optional[str]:
    """Extract the backend's reason from an error body, if any.

    Update and delete failures use ``message``, create failures ``error``.
    """
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    for key in ("message", "error", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def _error_for_status(status_code: int, message: Optional[str]) -> BackendError:
    if status_code in (401, 403):
        return AuthorizationError(status_code, message)
    if status_code == 404:
        return ItemNotFoundError(status_code, message)
    return BackendError(status_code, message)
