# This file stores headings, button labels, and status messages shown across the screens.

from __future__ import annotations

APP_TITLE = "ROI Validator"

LANDING_TITLE = "Validate Your Business Ideas"
LANDING_SUBTITLE = "Stop guessing. Calculate ROI instantly."
LANDING_CTA = "Start Validating"
LANDING_FEATURES: tuple[tuple[str, str], ...] = (
    (
        "Instant ROI Calculation",
        "Get real-time ROI percentages for every business idea you validate.",
    ),
    (
        "Visual Validation",
        "See immediately if your project is validated or burning cash with color-coded feedback.",
    ),
    (
        "Secure & Private",
        "Your business ideas are encrypted and only visible to you.",
    ),
)

LOGIN_TITLE = "Welcome Back"
LOGIN_SUBTITLE = "Sign in to validate your ideas"
LOGIN_SUBMIT = "Sign In"
LOGIN_FORGOT_LINK = "Forgot password?"
LOGIN_SIGNUP_PROMPT = "Don't have an account?"
LOGIN_SIGNUP_LINK = "Sign up"

SIGNUP_TITLE = "Create Account"
SIGNUP_SUBTITLE = "Start validating your business ideas"
SIGNUP_SUBMIT = "Sign Up"
SIGNUP_LOGIN_PROMPT = "Already have an account?"
SIGNUP_LOGIN_LINK = "Sign in"
SIGNUP_SUCCESS_TITLE = "Account Created!"
SIGNUP_SUCCESS_BODY = "You can now sign in to start validating your ideas."
SIGNUP_SUCCESS_CTA = "Go to Login"

RESET_TITLE = "Reset Password"
RESET_SUBTITLE = "Enter your email to receive reset instructions"
RESET_SUBMIT = "Send Reset Instructions"
RESET_BACK = "Back to login"
RESET_SUCCESS_TITLE = "Check Your Email"
RESET_SUCCESS_BODY = "We've sent password reset instructions to {email}"
RESET_SUCCESS_CTA = "Back to Login"

DASHBOARD_TITLE = "Validate Your Ideas"
DASHBOARD_SUBTITLE = "Calculate ROI and track your project investments"
LOGOUT = "Log Out"

FORM_TITLE = "Add Investment"
FORM_SUBMIT = "Calculate ROI"
EDIT_TITLE = "Edit Investment"
EDIT_SUBMIT = "Update"
EDIT_CANCEL = "Cancel"

PROJECT_NAME_LABEL = "Project Name"
PROJECT_NAME_PLACEHOLDER = "E.g., Mobile App Launch"
COST_LABEL = "Investment Cost ($)"
COST_PLACEHOLDER = "10000"
REVENUE_LABEL = "Expected Revenue ($)"
REVENUE_PLACEHOLDER = "15000"

LIST_TITLE = "Your Investments"
EMPTY_INVESTMENTS_TITLE = "No investments yet"
EMPTY_INVESTMENTS_BODY = "Add your first project to start calculating ROI"
ROI_CAPTION = "Return on Investment"

LOADING = "Loading..."
