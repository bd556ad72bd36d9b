"""HTTP client for the comment board API, used by presentation code."""

from typing import Any, Dict, List, Optional

import httpx

from commentboard.config.settings import Settings
from commentboard.mutations.results import (
    Committed,
    MutationResult,
    PersistenceFailed,
    ValidationFailed,
)
from commentboard.optimistic import OptimisticState
from commentboard.utils.logger import setup_logger

client_logger = setup_logger("commentboard.client")


class CommentBoardAPIError(Exception):
    """Raised when a read endpoint cannot be reached or answers with an error."""
    pass


class CommentBoardClient:
    """Async client for the comment board endpoints."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = (base_url or Settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else Settings.CLIENT_TIMEOUT
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
            headers={'User-Agent': 'CommentBoard-Client'}
        )

    async def fetch_comments(self) -> List[str]:
        """
        Fetch the full comment log.

        Raises:
            CommentBoardAPIError: If the request fails or returns non-200
        """
        return await self._get_list("/comments")

    async def search(self, query: Optional[str] = None) -> List[str]:
        """Fetch comments matching query (all comments when query is empty)."""
        params = {'query': query} if query else None
        return await self._get_list("/search", params=params)

    async def submit_comment(self, comment: str) -> MutationResult:
        return await self._post_form("/comments", {'comment': comment})

    async def submit_feedback(self, name: str, email: str, feedback: str) -> MutationResult:
        return await self._post_form(
            "/feedback", {'name': name, 'email': email, 'feedback': feedback}
        )

    async def _get_list(self, path: str, params: Optional[Dict[str, str]] = None) -> List[Any]:
        try:
            async with self._client() as client:
                response = await client.get(path, params=params)
        except httpx.HTTPError as e:
            raise CommentBoardAPIError(f"Request to {path} failed: {e}") from e

        if response.status_code != 200:
            raise CommentBoardAPIError(f"{path} returned {response.status_code}")

        return response.json()

    async def _post_form(self, path: str, form: Dict[str, str]) -> MutationResult:
        """
        Post a form and decode the MutationResult.

        Transport errors and unexpected statuses become PersistenceFailed so
        callers can offer a retry without re-prompting for input.
        """
        try:
            async with self._client() as client:
                response = await client.post(path, data=form)
        except httpx.HTTPError as e:
            client_logger.warning("submit_transport_error", extra={
                "data": {"path": path, "error": str(e)}
            })
            return PersistenceFailed(reason=f"Could not reach server: {e}")

        if response.status_code == 200:
            return Committed()

        body = _json_body(response)

        if response.status_code == 422 and 'errors' in body:
            return ValidationFailed(errors=body['errors'], values=body.get('values', {}))

        if response.status_code == 503 and 'reason' in body:
            return PersistenceFailed(reason=body['reason'])

        client_logger.warning("submit_unexpected_status", extra={
            "data": {"path": path, "status": response.status_code}
        })
        return PersistenceFailed(reason=f"Server returned {response.status_code}")


def _json_body(response: httpx.Response) -> Dict[str, Any]:
    # Proxies may answer with HTML error pages
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


async def optimistic_comment(state: OptimisticState[str], client: CommentBoardClient,
                             comment: str) -> MutationResult:
    """Show comment immediately, submit it, then reconcile with the server's log."""
    return await state.submit(comment, client.submit_comment, refetch=client.fetch_comments)
