"""JSON-over-HTTP transport shared by the generation clients."""
from typing import Any, Dict, Optional

import requests

from chat.llm_clients.base import LLMConnectionError, LLMResponseError


def post_json(
    url: str,
    payload: Dict[str, Any],
    *,
    service: str,
    timeout: int,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """POST *payload* and return the decoded JSON body.

    Transport failures are mapped onto the generation error taxonomy so
    callers only ever see GenerationError subclasses.

    Raises:
        LLMConnectionError: On connection failure or timeout
        LLMResponseError: On an HTTP error status, or a body that is not a JSON object
    """
    try:
        response = requests.post(url, json=payload, headers=headers, timeout=timeout)
        response.raise_for_status()
        body = response.json()
    except requests.exceptions.ConnectionError as e:
        raise LLMConnectionError(
            f"Failed to connect to {service} at {url}. Error: {e}"
        ) from e
    except requests.exceptions.Timeout as e:
        raise LLMConnectionError(
            f"Request to {service} timed out after {timeout}s. Error: {e}"
        ) from e
    except requests.exceptions.HTTPError as e:
        detail = e.response.text if e.response is not None else "N/A"
        raise LLMResponseError(
            f"{service} API returned error: {e}. Response: {detail}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise LLMConnectionError(f"Request to {service} failed: {e}") from e
    except ValueError as e:
        raise LLMResponseError(f"{service} returned a non-JSON body: {e}") from e

    if not isinstance(body, dict):
        raise LLMResponseError(
            f"Unexpected response format from {service}: expected a JSON object, "
            f"got {type(body).__name__}"
        )
    return body
