from __future__ import annotations

__all__ = ["IDs", "record_card_id", "form_remove_id"]


class IDs:
    class Store:
        REVISION = "ui-revision"

    class Control:
        # Navbar
        TOGGLE_VIEW_BTN = "toggle-view-btn"
        RELOAD_BTN = "reload-btn"
        NEW_RECORD_BTN = "new-record-btn"

        # Toolbar
        SEARCH_INPUT = "search-input"
        STATUS_TEXT = "status-text"
        COLUMN_VISIBILITY = "column-visibility"
        MOVE_SOURCE = "move-column-source"
        MOVE_TARGET = "move-column-target"
        MOVE_BTN = "move-column-btn"

        # Alerts
        LOAD_ERROR = "load-error-alert"
        NOTICE = "notice-alert"

        # Views
        TABLE = "records-table"
        TABLE_CONTAINER = "records-table-container"
        CARDS_CONTAINER = "records-cards-container"

        # Detail modal
        DETAIL_MODAL = "detail-modal"
        DETAIL_TITLE = "detail-title"
        DETAIL_BODY = "detail-body"
        DETAIL_CLOSE_BTN = "detail-close-btn"
        DETAIL_EDIT_BTN = "detail-edit-btn"
        DETAIL_DELETE_BTN = "detail-delete-btn"
        DELETE_CONFIRM = "delete-confirm"

        # Create/edit form modal
        FORM_MODAL = "form-modal"
        FORM_TITLE = "form-title"
        FORM_NAME = "form-name"
        FORM_EXPLANATION = "form-explanation"
        FORM_RATING = "form-rating"
        FORM_IMAGE = "form-image"
        FORM_POWER_INPUT = "form-power-input"
        FORM_POWER_ADD = "form-power-add"
        FORM_POWER_LIST = "form-power-list"
        FORM_TIP_INPUT = "form-tip-input"
        FORM_TIP_ADD = "form-tip-add"
        FORM_TIP_LIST = "form-tip-list"
        FORM_ALERT = "form-alert"
        FORM_SUBMIT_BTN = "form-submit-btn"
        FORM_CANCEL_BTN = "form-cancel-btn"

    class Pattern:
        # pattern-matching "type" strings
        RECORD_CARD = "record-card"
        FORM_REMOVE = "form-remove-item"


def record_card_id(record_id: int) -> dict:
    return {"type": IDs.Pattern.RECORD_CARD, "index": record_id}


def form_remove_id(list_field: str, index: int) -> dict:
    return {"type": IDs.Pattern.FORM_REMOVE, "field": list_field, "index": index}
