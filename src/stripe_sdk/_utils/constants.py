# Environment variables
ENV_API_KEY = "STRIPE_API_KEY"
ENV_BASE_URL = "STRIPE_URL"
ENV_API_VERSION = "STRIPE_API_VERSION"
ENV_MAX_NETWORK_RETRIES = "STRIPE_MAX_NETWORK_RETRIES"

DEFAULT_BASE_URL = "https://api.stripe.com/v1"
DEFAULT_API_VERSION = "2017-06-05"

# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_AUTHORIZATION = "Authorization"
HEADER_API_VERSION = "Stripe-Version"
HEADER_CONNECT_ACCOUNT = "Stripe-Account"
HEADER_IDEMPOTENCY_KEY = "Idempotency-Key"
HEADER_REQUEST_ID = "Request-Id"

# Request options understood by the transport
OPT_API_KEY = "api_key"
OPT_API_VERSION = "api_version"
OPT_CONNECT_ACCOUNT = "connect_account"
OPT_IDEMPOTENCY_KEY = "idempotency_key"

LOGGER_NAME = "stripe_sdk"
SDK_VERSION = "0.1.0"
