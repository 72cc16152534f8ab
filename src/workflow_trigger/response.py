"""Classification of dispatch responses into success or a typed error."""

from __future__ import annotations

import requests
from pydantic import BaseModel, ValidationError

from workflow_trigger.errors import APIError, ResponseDecodeError, ServerError


class ErrorEnvelope(BaseModel):
    """Error body GitHub returns for rejected API calls."""

    message: str = ""


def classify_response(response: requests.Response) -> None:
    """Raise the error a final dispatch response describes, if any.

    Any status below 400 is success. 5xx bodies are never parsed. Every 4xx is
    decoded as an :class:`ErrorEnvelope`; there is no silent fall-through for
    unlisted client errors.

    The response is always closed.

    Raises:
        ServerError: For any 5xx status.
        APIError: For a 4xx with a decodable error envelope.
        ResponseDecodeError: For a 4xx whose body is not an error envelope.
    """

    try:
        status = response.status_code
        if status < 400:
            return
        if status >= 500:
            raise ServerError(status)

        try:
            body = response.content
        except requests.RequestException as e:
            raise ResponseDecodeError(
                f"unexpected error reading api response: {e}", status_code=status
            ) from e

        try:
            envelope = ErrorEnvelope.model_validate_json(body)
        except ValidationError as e:
            raise ResponseDecodeError(
                f"unexpected error parsing api response: {e}", status_code=status
            ) from e
        raise APIError(envelope.message, status_code=status)
    finally:
        response.close()
