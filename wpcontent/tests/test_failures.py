"""Failover and failure handling tests"""

import pytest
from conftest import PRIMARY, SECONDARY

from wpcontent.core.exceptions import AllSourcesFailedError, HttpStatusError, NetworkError
from wpcontent.ingestion.failover import with_failover


def warnings(records):
    return [r for r in records if r["level"].name == "WARNING"]


class TestWithFailover:
    """Test the two-attempt primary/secondary sequence"""

    @pytest.mark.asyncio
    async def test_primary_success(self, log_records):
        """Test secondary is never tried when primary succeeds"""
        calls = []

        async def operation(base_url):
            calls.append(base_url)
            return base_url

        assert await with_failover(operation, (PRIMARY, SECONDARY)) == PRIMARY
        assert calls == [PRIMARY]
        assert warnings(log_records) == []

    @pytest.mark.asyncio
    async def test_secondary_after_primary_failure(self, log_records):
        """Test one warning naming the primary endpoint, result from secondary"""
        calls = []

        async def operation(base_url):
            calls.append(base_url)
            if base_url == PRIMARY:
                raise HttpStatusError(base_url, 503)
            return "from secondary"

        assert await with_failover(operation, (PRIMARY, SECONDARY)) == "from secondary"
        assert calls == [PRIMARY, SECONDARY]

        warned = warnings(log_records)
        assert len(warned) == 1
        assert PRIMARY in warned[0]["message"]
        assert "503" in warned[0]["message"]

    @pytest.mark.asyncio
    async def test_both_fail(self, log_records):
        """Test both failing raises AllSourcesFailedError with the secondary cause"""
        calls = []

        async def operation(base_url):
            calls.append(base_url)
            if base_url == PRIMARY:
                raise HttpStatusError(base_url, 500)
            raise NetworkError("Connection reset", base_url)

        with pytest.raises(AllSourcesFailedError) as exc_info:
            await with_failover(operation, (PRIMARY, SECONDARY), "post information")

        error = exc_info.value
        assert isinstance(error.cause, NetworkError)
        assert error.__cause__ is error.cause
        assert "Connection reset" in str(error)
        assert "post information" in str(error)
        assert calls == [PRIMARY, SECONDARY]
        assert len(warnings(log_records)) == 1
        assert any(r["level"].name == "ERROR" for r in log_records)
