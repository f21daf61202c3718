"""
Tests for the Streamlit backend client.

requests.request is patched so no backend needs to be running.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from streamlit_app.utils import api_client
from streamlit_app.utils.api_client import ApiError


def make_response(payload=None, status_code=200, json_error=None):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture(autouse=True)
def backend_url():
    with patch.dict("os.environ", {"BACKEND_URL": "http://backend.test/"}):
        yield


class TestCatalogCalls:
    """Test cases for search and random."""

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_search_sends_query(self, mock_request):
        mock_request.return_value = make_response([{"id": "1", "title": "Pie", "thumb": "", "source": ""}])

        results = api_client.search_recipes("pie")

        assert results[0]["title"] == "Pie"
        mock_request.assert_called_once_with(
            "GET",
            "http://backend.test/api/search",
            timeout=api_client.CATALOG_TIMEOUT,
            params={"q": "pie"},
        )

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_search_error_carries_status(self, mock_request):
        """Test that a 500 from the backend surfaces as 'Search failed: 500'."""
        mock_request.return_value = make_response({"error": "search failed"}, status_code=500)

        with pytest.raises(ApiError) as exc_info:
            api_client.search_recipes("pie")

        assert exc_info.value.message == "Search failed: 500"
        assert exc_info.value.status_code == 500

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_random_null_is_none(self, mock_request):
        mock_request.return_value = make_response(None)
        assert api_client.get_random_recipe() is None

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_connection_error(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ApiError) as exc_info:
            api_client.get_random_recipe()

        assert exc_info.value.status_code is None
        assert "could not connect" in exc_info.value.message

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_timeout(self, mock_request):
        mock_request.side_effect = requests.exceptions.Timeout()

        with pytest.raises(ApiError) as exc_info:
            api_client.search_recipes("pie")

        assert "timed out" in exc_info.value.message

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_invalid_json(self, mock_request):
        mock_request.return_value = make_response(json_error=ValueError("not json"))

        with pytest.raises(ApiError):
            api_client.list_favorites()


class TestFavoriteCalls:
    """Test cases for the favorites calls."""

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_save_posts_full_payload(self, mock_request):
        mock_request.return_value = make_response({"ok": True})

        assert api_client.save_favorite("52772", "Teriyaki", "t", "s") == {"ok": True}
        mock_request.assert_called_once_with(
            "POST",
            "http://backend.test/api/favorites",
            timeout=api_client.DEFAULT_TIMEOUT,
            json={"id": "52772", "title": "Teriyaki", "thumb": "t", "source": "s"},
        )

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_update_quotes_id(self, mock_request):
        mock_request.return_value = make_response({"ok": True})

        api_client.update_favorite_title("a/b c", "New Name")

        args, kwargs = mock_request.call_args
        assert args == ("PUT", "http://backend.test/api/favorites/a%2Fb%20c")
        assert kwargs["json"] == {"title": "New Name"}

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_remove_uses_delete(self, mock_request):
        mock_request.return_value = make_response({"ok": True})

        api_client.remove_favorite("52772")

        args, _ = mock_request.call_args
        assert args == ("DELETE", "http://backend.test/api/favorites/52772")

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_update_400_raises(self, mock_request):
        mock_request.return_value = make_response({"error": "title required"}, status_code=400)

        with pytest.raises(ApiError) as exc_info:
            api_client.update_favorite_title("1", "")

        assert exc_info.value.message == "Update failed: 400"

    @patch("streamlit_app.utils.api_client.requests.request")
    def test_list_non_list_body_is_empty(self, mock_request):
        mock_request.return_value = make_response({"unexpected": True})
        assert api_client.list_favorites() == []



class TestModuleSurface:
    """Test cases for the client's public functions."""

    def test_only_backend_calls_used_by_the_page_are_exposed(self):
        public = {
            name for name in dir(api_client)
            if callable(getattr(api_client, name)) and not name.startswith("_")
        }
        assert "get_health_status" not in public
        assert {"search_recipes", "get_random_recipe", "list_favorites", "save_favorite",
                "update_favorite_title", "remove_favorite"} <= public
