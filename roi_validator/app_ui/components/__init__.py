# This package groups reusable Streamlit components shared by the screens.

__all__ = ["edit_dialog", "investment_form", "investment_list", "layout", "summary_cards"]
