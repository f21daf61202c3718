"""
Tests for the Streamlit feedback helpers.
"""

from unittest.mock import patch

from ui.feedback import show_empty_state, show_error


class TestFeedback:
    """Test cases for error and empty-state rendering."""

    @patch("ui.feedback.st")
    def test_show_error_renders_message_only(self, mock_st):
        show_error("Search failed: 500")

        mock_st.error.assert_called_once_with("⚠️ Search failed: 500")
        mock_st.caption.assert_not_called()

    @patch("ui.feedback.st")
    def test_show_empty_state(self, mock_st):
        show_empty_state("No favorites saved.")

        args, kwargs = mock_st.markdown.call_args
        assert "No favorites saved." in args[0]
        assert kwargs == {"unsafe_allow_html": True}
