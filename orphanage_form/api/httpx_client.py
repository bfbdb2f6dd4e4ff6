from typing import Any

import httpx

from orphanage_form.api.base import BaseOrphanageClient
from orphanage_form.api.exceptions import (
    DUPLICATE_NAME_BCODE,
    DuplicateNameError,
    UnknownSubmissionError,
)
from orphanage_form.api.payload import SubmissionPayload
from orphanage_form.logging.logger import Log


class HttpxOrphanageClient(BaseOrphanageClient):
    """Posts the multipart create request with httpx."""

    def __init__(
        self,
        *,
        base_url: str,
        path: str,
        timeout_seconds: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._path = path
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def create_orphanage(self, payload: SubmissionPayload) -> None:
        Log.debug(
            f"POST {self._base_url}/{self._path} fields={sorted(payload.data)} "
            f"images={len(payload.files)}"
        )
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._path,
                    data=payload.data,
                    files=payload.files,
                )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise UnknownSubmissionError(f"Network error: {exc}") from exc
        except httpx.HTTPError as exc:
            raise UnknownSubmissionError(f"HTTP error: {exc}") from exc

        if response.is_success:
            return
        self._raise_for_rejection(response, payload)

    @staticmethod
    def _raise_for_rejection(response: httpx.Response, payload: SubmissionPayload) -> None:
        bcode = _extract_bcode(response)
        if bcode == DUPLICATE_NAME_BCODE:
            raise DuplicateNameError(payload.name, bcode)
        raise UnknownSubmissionError(
            f"Server rejected submission with status {response.status_code}",
            status_code=response.status_code,
            bcode=bcode,
        )


def _extract_bcode(response: httpx.Response) -> int | None:
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    bcode = body.get("bcode")
    if isinstance(bcode, bool) or not isinstance(bcode, int):
        return None
    return bcode
