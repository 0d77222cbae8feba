"""Envelope handling shared by the share and volume dispatchers"""

from typing import Any, Callable

from opensds_fake.models.schemas import (
    STATUS_FAILURE,
    STATUS_SUCCESS,
    DefaultResponse,
)
from opensds_fake.utils.exceptions import BackendFailureError, ResponseDecodeError
from opensds_fake.utils.logger import get_logger

LOG = get_logger(__name__)


def decode_result(result, error_prefix: str, decoder: Callable[[str], Any]) -> Any:
    """
    Check an envelope and decode its message body.

    Args:
        result: Envelope returned by the backend
        error_prefix: Log prefix naming the operation
        decoder: Callable turning the message text into a typed response

    Returns:
        The decoded response

    Raises:
        BackendFailureError: The envelope reports a failure
        ResponseDecodeError: The message body cannot be decoded
    """
    if result.status == STATUS_FAILURE:
        LOG.error(f"{error_prefix} {result.error}")
        raise BackendFailureError(result.error)

    try:
        return decoder(result.message)
    except ResponseDecodeError as e:
        LOG.error(f"{error_prefix} {e}")
        raise


def default_result(result, error_prefix: str) -> DefaultResponse:
    """
    Turn an envelope into a status-only response without decoding a body.

    Args:
        result: Envelope returned by the backend
        error_prefix: Log prefix naming the operation

    Returns:
        DefaultResponse mirroring the envelope status and error
    """
    if result.status == STATUS_FAILURE:
        LOG.error(f"{error_prefix} {result.error}")
        return DefaultResponse(status=STATUS_FAILURE, error=result.error)

    return DefaultResponse(status=STATUS_SUCCESS)
