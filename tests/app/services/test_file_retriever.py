"""Testes da recuperação de um único arquivo."""

from __future__ import annotations

import pytest

from app.domain.file_records import (
    FILE_DOWNLOAD_FAILED_MESSAGE,
    FILE_NOT_FOUND_MESSAGE,
    Record,
    RetrievalStatus,
)
from app.services.file_retriever import error_message_for, retrieve_file, to_file_result
from tests.fakes.fake_upstream_client import FakeUpstreamClient

HEX = "1234567890abcdef1234567890abcdef"


@pytest.mark.asyncio
async def test_retrieve_file_parses_body() -> None:
    client = FakeUpstreamClient({"a.csv": f"file,text,number,hex\na.csv,hello,42,{HEX}"})

    outcome = await retrieve_file(client, "a.csv")

    assert outcome.ok
    assert outcome.file == "a.csv"
    assert outcome.records == (Record(text="hello", number=42, hex=HEX),)


@pytest.mark.asyncio
async def test_retrieve_file_ok_even_without_valid_records() -> None:
    client = FakeUpstreamClient({"empty.csv": "file,text,number,hex\nbroken,line"})

    outcome = await retrieve_file(client, "empty.csv")

    assert outcome.status is RetrievalStatus.OK
    assert outcome.records == ()


@pytest.mark.asyncio
async def test_retrieve_file_not_found() -> None:
    outcome = await retrieve_file(FakeUpstreamClient(), "missing.csv")

    assert outcome.status is RetrievalStatus.NOT_FOUND
    assert outcome.records == ()
    assert error_message_for(outcome) == FILE_NOT_FOUND_MESSAGE


@pytest.mark.asyncio
async def test_retrieve_file_unavailable() -> None:
    client = FakeUpstreamClient({"a.csv": "irrelevant"}, failures={"a.csv"})

    outcome = await retrieve_file(client, "a.csv")

    assert outcome.status is RetrievalStatus.UNAVAILABLE
    assert error_message_for(outcome) == FILE_DOWNLOAD_FAILED_MESSAGE


class TestToFileResult:
    """Conversão do outcome em dado (erro embutido)."""

    @pytest.mark.asyncio
    async def test_success_has_no_error(self) -> None:
        client = FakeUpstreamClient({"a.csv": f"h\na.csv,hello,42,{HEX}"})

        result = to_file_result(await retrieve_file(client, "a.csv"))

        assert result.error is None
        assert result.model_dump(exclude_none=True) == {
            "file": "a.csv",
            "lines": [{"text": "hello", "number": 42, "hex": HEX}],
        }

    @pytest.mark.asyncio
    async def test_not_found_is_reified(self) -> None:
        result = to_file_result(await retrieve_file(FakeUpstreamClient(), "x.csv"))

        assert result.file == "x.csv"
        assert result.lines == []
        assert result.error == FILE_NOT_FOUND_MESSAGE

    @pytest.mark.asyncio
    async def test_unavailable_is_reified(self) -> None:
        client = FakeUpstreamClient(failures={"x.csv"})

        result = to_file_result(await retrieve_file(client, "x.csv"))

        assert result.lines == []
        assert result.error == FILE_DOWNLOAD_FAILED_MESSAGE
