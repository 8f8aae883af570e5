"""Controller translating user requests into store lookups and HTTP responses."""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from user_directory.services.user_store import UserStore

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "Not Found"

# ASCII digits only; Unicode decimal digits are rejected
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
# Most significant digits a signed 32-bit value can have
_MAX_DIGITS = 10
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class IdParseError(str, Enum):
    """Reason a user id path parameter was rejected."""

    MISSING = "missing"
    INVALID = "invalid"


@dataclass(frozen=True)
class UserIdParseResult:
    """Outcome of parsing a user id: either a value or an error reason."""

    value: int | None = None
    error: IdParseError | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_user_id(raw: str | None) -> UserIdParseResult:
    """Parse a base-10 user id path parameter.

    Accepts an optional sign followed by ASCII digits, within the signed
    32-bit range.

    Args:
        raw: Raw path segment, or None if the parameter was not supplied

    Returns:
        UserIdParseResult with either the parsed value or the error reason
    """
    if raw is None or raw == "":
        return UserIdParseResult(error=IdParseError.MISSING, message="Missing user id")

    if not _INT_PATTERN.fullmatch(raw) or len(raw.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        return UserIdParseResult(error=IdParseError.INVALID, message=f"Invalid user id: '{raw}'")

    value = int(raw)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return UserIdParseResult(error=IdParseError.INVALID, message=f"Invalid user id: '{raw}'")

    return UserIdParseResult(value=value)


class UserController:
    """Adapts HTTP requests to UserStore calls and shapes the responses."""

    def __init__(self, store: UserStore, not_found_status_code: int = status.HTTP_200_OK) -> None:
        """Initialize the controller.

        Args:
            store: User store to read from
            not_found_status_code: Status sent with the plain-text Not Found body
        """
        self.store = store
        self.not_found_status_code = not_found_status_code

    def handle_list_usernames(self) -> JSONResponse:
        """Respond with a JSON array of every username, in insertion order."""
        return JSONResponse(content=self.store.list_usernames(), status_code=status.HTTP_200_OK)

    def handle_get_by_id(self, raw_id: str | None) -> Response:
        """Respond with the user matching a raw id path parameter.

        Args:
            raw_id: Raw path segment, or None if absent

        Returns:
            JSON user object, or the plain-text Not Found body

        Raises:
            HTTPException: 400 if the id is missing or not an integer
        """
        parsed = parse_user_id(raw_id)
        if not parsed.ok:
            logger.info("Rejected user id %r: %s", raw_id, parsed.error.value)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=parsed.message)

        user = self.store.find_by_id(parsed.value)
        if user is None:
            logger.debug("No user with id %d", parsed.value)
            return PlainTextResponse(NOT_FOUND_BODY, status_code=self.not_found_status_code)

        return JSONResponse(content=user.model_dump(), status_code=status.HTTP_200_OK)
