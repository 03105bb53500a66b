from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        AUTH_TOKEN = "auth-token"
        VIEW_STATE = "view-state"

    class Control:
        # Routing
        URL = "url"
        PAGE_CONTENT = "page-content"

        # Login page
        LOGIN_EMAIL = "login-email"
        LOGIN_EMAIL_FEEDBACK = "login-email-feedback"
        LOGIN_PASSWORD = "login-password"
        LOGIN_PASSWORD_FEEDBACK = "login-password-feedback"
        LOGIN_SUBMIT = "login-submit"
        LOGIN_ERROR = "login-error"

        # Dashboard page
        LISTING_ROOT = "listing-root"
        LISTING_ERROR = "listing-error"
        LISTING_CONTENT = "listing-content"
        LOGOUT_BTN = "logout-btn"

        SEARCH_INPUT = "search-input"
        FILTER_SELECT = "filter-select"
        SUMMARY_TEXT = "summary-text"
        RECORD_GRID = "record-grid"
        PAGINATION = "pagination"
        PAGINATION_CONTAINER = "pagination-container"
