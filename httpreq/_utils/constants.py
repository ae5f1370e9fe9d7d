# Environment variables
ENV_TIMEOUT = "HTTPREQ_TIMEOUT"
ENV_DISABLE_SSL_VERIFY = "HTTPREQ_DISABLE_SSL_VERIFY"
ENV_DEBUG = "HTTPREQ_DEBUG"
ENV_TRUST_STORE = "HTTPREQ_TRUST_STORE"
ENV_CA_BUNDLE = "HTTPREQ_CA_BUNDLE"
FALLBACK_CA_BUNDLE_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Transport options
OPTION_METHOD = "method"
OPTION_HEADER = "header"
OPTION_CONTENT = "content"
OPTION_TIMEOUT = "timeout"
OPTION_PROXY = "proxy"
OPTION_USER_AGENT = "user_agent"
OPTION_FOLLOW_LOCATION = "follow_location"
OPTION_MAX_REDIRECTS = "max_redirects"
OPTION_IGNORE_ERRORS = "ignore_errors"

# Content types
CONTENT_TYPE_URLENCODED = "application/x-www-form-urlencoded"
CONTENT_TYPE_MULTIPART = "multipart/form-data"
DEFAULT_CONTENT_TYPE = f"{CONTENT_TYPE_URLENCODED}; charset=utf-8"

CRLF = "\r\n"
