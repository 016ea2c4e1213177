"""Dealer submission form handling.

Each request moves through CheckMethod -> ParseForm -> ValidateFields and
is either accepted or rejected with a ValidationError. Nothing is stored.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

from aiohttp import hdrs, web

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Form submitted successfully"

# "%" not followed by two hex digits
_MALFORMED_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


class ValidationError(Exception):
    """Client-caused rejection of a submission."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


@dataclass(frozen=True)
class SubmissionRecord:
    """Validated dealer submission, alive for one request."""

    email: str
    name: str


def create_form_routes() -> list[web.RouteDef]:
    # Any method, so non-POST requests get 405 instead of the page fallback
    return [web.route(hdrs.METH_ANY, "/submitDealer", submit_dealer)]


async def submit_dealer(request: web.Request) -> web.Response:
    try:
        record = await parse_submission(request)
    except ValidationError as e:
        headers = {hdrs.ALLOW: hdrs.METH_POST} if e.status == 405 else None
        return web.Response(status=e.status, text=e.message, headers=headers)

    logger.info(f"Received submission - Email: {record.email}, Name: {record.name}")
    return web.Response(text=SUCCESS_MESSAGE)


async def parse_submission(request: web.Request) -> SubmissionRecord:
    """Validate a submission request.

    Args:
        request: Incoming request

    Returns:
        SubmissionRecord with non-empty email and name

    Raises:
        ValidationError: 405 for non-POST, 400 for unparsable or incomplete forms
    """
    if request.method != hdrs.METH_POST:
        raise ValidationError(405, "Method not allowed")

    try:
        form = await _read_form(request)
    except (ValueError, LookupError) as e:
        # LookupError covers unknown charsets and a missing multipart boundary
        logger.debug(f"Form parse failed: {e}")
        raise ValidationError(400, "Error parsing form data") from e

    email = _form_value(form, request, "email")
    name = _form_value(form, request, "name")

    if not email or not name:
        raise ValidationError(400, "Email and name are required")

    return SubmissionRecord(email=email, name=name)


def _form_value(form: Mapping[str, object], request: web.Request, field_name: str) -> str:
    # Body values take precedence over query string values
    value = form.get(field_name)
    if value is None:
        value = request.query.get(field_name, "")
    if not isinstance(value, str):
        # File upload in a multipart body
        raise ValidationError(400, "Error parsing form data")
    return value.strip()


async def _read_form(request: web.Request) -> Mapping[str, object]:
    """Parse the request body as form data.

    Raises:
        ValueError: If a urlencoded body contains a malformed percent-escape,
                    or the body can't be decoded or parsed
        LookupError: If the declared charset is unknown
        KeyError: If a multipart body declares no boundary (a LookupError)
    """
    if request.content_type == "application/x-www-form-urlencoded":
        body = await request.read()
        if _MALFORMED_ESCAPE.search(body):
            raise ValueError("Malformed percent-escape in form body")
    return await request.post()
