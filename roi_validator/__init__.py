"""
Package marker for the ROI Validator application.
Domain logic lives in `investments` and `routing`; `backend` talks to the hosted
auth/data service and `app_ui` holds the Streamlit screens.
"""

__version__ = "0.1.0"
