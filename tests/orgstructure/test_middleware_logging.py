"""
Unit tests for orgstructure/middleware/logging.py
"""
import pytest
from unittest.mock import Mock, AsyncMock, patch
from fastapi import Request, Response

from orgstructure.middleware.logging import logging_middleware


class TestLoggingMiddleware:
    """Tests for logging_middleware."""

    @pytest.fixture
    def mock_request(self):
        request = Mock(spec=Request)
        request.state = Mock()
        request.state.trace_id = "test-trace-id"
        request.url.path = "/api/departments"
        request.method = "GET"
        request.client = Mock()
        request.client.host = "127.0.0.1"
        request.query_params = {"department": "Sales"}
        return request

    @pytest.fixture
    def mock_call_next(self):
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_logging_success(self, mock_request, mock_call_next):
        expected_response = Response(content="ok", status_code=200)
        mock_call_next.return_value = expected_response

        with patch("orgstructure.middleware.logging.logger") as mock_logger, \
             patch("orgstructure.middleware.logging.bind_request_context") as mock_bind, \
             patch("orgstructure.middleware.logging.clear_request_context") as mock_clear:

            response = await logging_middleware(mock_request, mock_call_next)

            assert response == expected_response
            mock_bind.assert_called_once_with(
                trace_id="test-trace-id",
                method="GET",
                path="/api/departments",
                client_ip="127.0.0.1",
            )
            assert mock_logger.info.call_count == 2
            mock_logger.info.assert_any_call(
                "Request started", query_params={"department": "Sales"}
            )
            args, kwargs = mock_logger.info.call_args_list[1]
            assert args[0] == "Request completed"
            assert kwargs["status_code"] == 200
            assert kwargs["duration_ms"] >= 0
            mock_clear.assert_called_once()

    @pytest.mark.asyncio
    async def test_logging_without_client(self, mock_request, mock_call_next):
        mock_request.client = None
        mock_call_next.return_value = Response(status_code=200)

        with patch("orgstructure.middleware.logging.bind_request_context") as mock_bind:
            await logging_middleware(mock_request, mock_call_next)

        assert mock_bind.call_args.kwargs["client_ip"] == "unknown"

    @pytest.mark.asyncio
    async def test_logging_exception(self, mock_request, mock_call_next):
        mock_call_next.side_effect = ValueError("Test error")

        with patch("orgstructure.middleware.logging.logger") as mock_logger, \
             patch("orgstructure.middleware.logging.bind_request_context"), \
             patch("orgstructure.middleware.logging.clear_request_context") as mock_clear:

            with pytest.raises(ValueError):
                await logging_middleware(mock_request, mock_call_next)

            mock_logger.error.assert_called_once()
            assert mock_logger.error.call_args.kwargs["error_type"] == "ValueError"
            mock_clear.assert_called_once()
