# This package contains the Streamlit application: screens, reusable components,
# and the thin layers that connect them to the auth and data clients.

__all__ = ["app"]
