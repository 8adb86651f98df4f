"""Internal constants shared across the library."""

USER_AGENT = "hassrest"
DEFAULT_TIMEOUT = 30.0

#: ``message`` returned by ``GET /api/`` on a healthy instance.
API_RUNNING_MESSAGE = "API running."

# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

API_STATUS = "/api/"
CONFIG = "/api/config"
EVENTS = "/api/events"
SERVICES = "/api/services"
HISTORY_PERIOD = "/api/history/period"
LOGBOOK = "/api/logbook"
STATES = "/api/states"
ERROR_LOG = "/api/error_log"
CAMERA_PROXY = "/api/camera_proxy"
CALENDARS = "/api/calendars"
TEMPLATE = "/api/template"
CHECK_CONFIG = "/api/config/core/check_config"

# Longest slice of an error body kept in exception messages.
ERROR_BODY_PREVIEW = 200
