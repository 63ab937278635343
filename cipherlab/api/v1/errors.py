import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from cipherlab.core.config import Settings
from cipherlab.core.exceptions import CipherLabError, TextTooLongError
from cipherlab.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input or key"},
    500: {"model": ErrorResponse, "description": "Cipher operation failed"},
}


def check_text_length(text: str, settings: Settings) -> None:
    """Reject text longer than the configured maximum."""
    if len(text) > settings.max_text_length:
        error = TextTooLongError(len(text), settings.max_text_length)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )


@contextmanager
def cipher_errors(operation: str) -> Iterator[None]:
    """Translate library errors into HTTP errors."""
    try:
        yield
    except CipherLabError as e:
        logger.info("%s rejected: %s", operation, e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("%s failed", operation)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"{operation} failed: {str(e)}",
        )
