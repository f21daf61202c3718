"""
Tests for the TheMealDB connector.

requests.get is patched in every test so no real network calls are made.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from recipebox.connectors.mealdb_connector import MealDBConnector
from recipebox.errors import UpstreamError

BASE_URL = "https://mealdb.test/api/json/v1/1"


def make_response(payload=None, status_code=200, json_error=None):
    """Build a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def connector():
    return MealDBConnector(base_url=BASE_URL, timeout=None)


class TestMealDBSearch:
    """Test cases for MealDBConnector.search_recipes."""

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_search_calls_search_endpoint(self, mock_get, connector):
        """Test that search hits search.php with the s parameter and returns the meals list."""
        meals = [{"idMeal": "1", "strMeal": "Chicken Handi"}, {"idMeal": "2", "strMeal": "Chicken Congee"}]
        mock_get.return_value = make_response({"meals": meals})

        result = connector.search_recipes("chicken")

        assert result == meals
        mock_get.assert_called_once_with(f"{BASE_URL}/search.php", params={"s": "chicken"}, timeout=None)

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_search_null_meals_is_empty(self, mock_get, connector):
        mock_get.return_value = make_response({"meals": None})
        assert connector.search_recipes("zzzz") == []

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_search_absent_meals_is_empty(self, mock_get, connector):
        mock_get.return_value = make_response({})
        assert connector.search_recipes("zzzz") == []

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_non_dict_entries_are_dropped(self, mock_get, connector):
        mock_get.return_value = make_response({"meals": [{"idMeal": "1"}, None, "junk"]})
        assert connector.search_recipes("x") == [{"idMeal": "1"}]

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_http_error_raises_upstream_error(self, mock_get, connector):
        """Test that a non-success status becomes UpstreamError carrying the status code."""
        mock_get.return_value = make_response(status_code=503)

        with pytest.raises(UpstreamError) as exc_info:
            connector.search_recipes("chicken")

        assert exc_info.value.status_code == 503

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_network_error_raises_upstream_error(self, mock_get, connector):
        mock_get.side_effect = requests.exceptions.ConnectionError("DNS failure")

        with pytest.raises(UpstreamError):
            connector.search_recipes("chicken")

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_invalid_json_raises_upstream_error(self, mock_get, connector):
        mock_get.return_value = make_response(json_error=ValueError("Expecting value"))

        with pytest.raises(UpstreamError):
            connector.search_recipes("chicken")

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_non_object_body_raises_upstream_error(self, mock_get, connector):
        mock_get.return_value = make_response(["not", "an", "object"])

        with pytest.raises(UpstreamError):
            connector.search_recipes("chicken")


class TestMealDBRandom:
    """Test cases for MealDBConnector.random_recipes."""

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_random_calls_random_endpoint(self, mock_get, connector):
        meal = {"idMeal": "52772", "strMeal": "Teriyaki Chicken Casserole"}
        mock_get.return_value = make_response({"meals": [meal]})

        assert connector.random_recipes() == [meal]
        mock_get.assert_called_once_with(f"{BASE_URL}/random.php", params=None, timeout=None)

    @patch("recipebox.connectors.mealdb_connector.requests.get")
    def test_random_null_meals_is_empty(self, mock_get, connector):
        mock_get.return_value = make_response({"meals": None})
        assert connector.random_recipes() == []


class TestMealDBConfiguration:
    """Test cases for connector configuration."""

    @patch.dict("os.environ", {"MEALDB_BASE_URL": "https://mirror.test/api/", "MEALDB_TIMEOUT": "2.5"})
    def test_reads_base_url_and_timeout_from_environment(self):
        connector = MealDBConnector()
        assert connector.base_url == "https://mirror.test/api"
        assert connector.timeout == 2.5

    @patch.dict("os.environ", {}, clear=True)
    def test_defaults_to_public_endpoint_without_timeout(self):
        connector = MealDBConnector()
        assert connector.base_url == "https://www.themealdb.com/api/json/v1/1"
        assert connector.timeout is None

    def test_uses_given_session(self):
        session = Mock()
        session.get.return_value = make_response({"meals": []})

        connector = MealDBConnector(base_url=BASE_URL, session=session)
        connector.search_recipes("pie")

        session.get.assert_called_once()
