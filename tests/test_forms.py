"""Tests for the dealer submission endpoint."""

import logging

import pytest
from aiohttp import FormData
from aiohttp.test_utils import TestClient
from showroom.config import Config
from showroom.core.types import ContentStore
from showroom.forms import SUCCESS_MESSAGE
from showroom.server import create_app


@pytest.fixture
def client(test_config: Config, store: ContentStore, aiohttp_client) -> TestClient:
    return aiohttp_client(create_app(test_config, store))


class TestSubmitDealer:
    """Tests for POST /submitDealer."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("email", "name"),
        [
            ("dealer@example.com", "Acme Fire"),
            ("a@b", "x"),
            ("ünïcode@example.com", "Løkke Brannbiler"),
        ],
    )
    async def test__valid_fields__returns_success(self, client, email: str, name: str) -> None:
        """Accept any non-empty email and name."""
        test_client = await client
        response = await test_client.post("/submitDealer", data={"email": email, "name": name})

        assert response.status == 200
        assert await response.text() == SUCCESS_MESSAGE

    @pytest.mark.asyncio
    async def test__valid_submission__logged(
        self, client, caplog: pytest.LogCaptureFixture
    ) -> None:
        test_client = await client

        with caplog.at_level(logging.INFO, logger="showroom.forms"):
            await test_client.post(
                "/submitDealer", data={"email": "dealer@example.com", "name": "Acme"}
            )

        assert "Email: dealer@example.com, Name: Acme" in caplog.text

    @pytest.mark.asyncio
    async def test__multipart_body__accepted(self, client) -> None:
        test_client = await client
        form = FormData()
        form.add_field("email", "dealer@example.com")
        form.add_field("name", "Acme")
        form.add_field("logo", b"\x89PNG", filename="logo.png")

        response = await test_client.post("/submitDealer", data=form)

        assert response.status == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "data",
        [
            {"name": "Acme"},
            {"email": "dealer@example.com"},
            {},
            {"email": "", "name": "Acme"},
            {"email": "dealer@example.com", "name": "   "},
        ],
    )
    async def test__missing_field__returns_400(self, client, data: dict[str, str]) -> None:
        """Reject submissions without both email and name."""
        test_client = await client
        response = await test_client.post("/submitDealer", data=data)

        assert response.status == 400
        assert await response.text() == "Email and name are required"

    @pytest.mark.asyncio
    async def test__query_string_fields__accepted(self, client) -> None:
        """Fields may come from the query string when absent from the body."""
        test_client = await client
        response = await test_client.post(
            "/submitDealer", params={"email": "dealer@example.com", "name": "Acme"}
        )

        assert response.status == 200

    @pytest.mark.asyncio
    async def test__body_value__takes_precedence_over_query(
        self, client, caplog: pytest.LogCaptureFixture
    ) -> None:
        test_client = await client

        with caplog.at_level(logging.INFO, logger="showroom.forms"):
            await test_client.post(
                "/submitDealer",
                params={"name": "Query"},
                data={"email": "dealer@example.com", "name": "Body"},
            )

        assert "Name: Body" in caplog.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
    async def test__non_post_method__returns_405(self, client, method: str) -> None:
        """Only POST is allowed; other methods don't fall through to page rendering."""
        test_client = await client
        response = await test_client.request(method, "/submitDealer")

        assert response.status == 405
        assert await response.text() == "Method not allowed"

    @pytest.mark.asyncio
    async def test__non_post_method__advertises_allowed_method(self, client) -> None:
        test_client = await client
        response = await test_client.get("/submitDealer")

        assert response.status == 405
        assert response.headers["Allow"] == "POST"


class TestSubmitDealerParseErrors:
    """Tests for bodies that can't be parsed as form data."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("content_type", "body"),
        [
            ("application/x-www-form-urlencoded; charset=bogus", b"email=a%40b&name=x"),
            ("application/x-www-form-urlencoded", b"email=\xff\xfe&name=x"),
            ("application/x-www-form-urlencoded", b"email=%zz&name=x"),
            ("application/x-www-form-urlencoded", b"email=a%4&name=x"),
            ("application/x-www-form-urlencoded", b"email=a@b&name=x%"),
            ("multipart/form-data; boundary=xyz", b"not a multipart body"),
            ("multipart/form-data", b"--xyz\r\n\r\n--xyz--\r\n"),
        ],
        ids=[
            "unknown-charset",
            "invalid-utf8",
            "bad-escape",
            "short-escape",
            "trailing-percent",
            "malformed-multipart",
            "multipart-without-boundary",
        ],
    )
    async def test__unparsable_body__returns_400(
        self, client, content_type: str, body: bytes
    ) -> None:
        """Reject bodies that aren't valid form data."""
        test_client = await client
        response = await test_client.post(
            "/submitDealer", data=body, headers={"Content-Type": content_type}
        )

        assert response.status == 400
        assert await response.text() == "Error parsing form data"

    @pytest.mark.asyncio
    async def test__valid_escapes__decoded(
        self, client, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Well-formed percent-escapes and plus signs are accepted."""
        test_client = await client

        with caplog.at_level(logging.INFO, logger="showroom.forms"):
            response = await test_client.post(
                "/submitDealer",
                data=b"email=dealer%40example.com&name=Acme+Fire%2C+Inc",
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )

        assert response.status == 200
        assert "Email: dealer@example.com, Name: Acme Fire, Inc" in caplog.text
