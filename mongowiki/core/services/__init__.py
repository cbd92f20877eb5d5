from mongowiki.core.services.pages_service import delete_page, edit_page, list_titles, save_page, view_page

__all__ = [
    "delete_page",
    "edit_page",
    "list_titles",
    "save_page",
    "view_page",
]
