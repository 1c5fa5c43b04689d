"""Constants used across the Cloud Print client.

How to use the most important parts:
- Import this module to reference the fixed Cloud Print endpoints and the default
  Google OAuth token URL without hardcoding them in your application logic.
"""

APP_NAME = "cloudprint"
APP_AUTHOR = "cloudprint"

# Cloud Print endpoints
PRINTERS_SEARCH_URL = "https://www.google.com/cloudprint/search"
SUBMIT_URL = "https://www.google.com/cloudprint/submit"
JOBS_URL = "https://www.google.com/cloudprint/jobs"

# Authentication Endpoints
TOKEN_URL = "https://accounts.google.com/o/oauth2/token"

DEFAULT_TIMEOUT = 30.0

# Content type that makes the submit endpoint fetch the document itself
URL_CONTENT_TYPE = "url"
