"""Constants for schemaform"""

# ==================== File Paths ====================
LOG_FILE_DEFAULT = "data/schemaform.log"
CONFIG_FILE_DEFAULT = "schemaform.toml"

# ==================== Titles ====================
TITLE_MAX_LENGTH = 33  # titles longer than this are truncated
TITLE_TRUNCATE_LENGTH = 30
TITLE_ELLIPSIS = "..."

# ==================== Filtering ====================
MIN_ITEM_COUNT_IF_NEED_FILTER = 6

# ==================== Validation ====================
# Not drawn from the locale table.
FIELD_REQUIRED_MESSAGE = "Field is required"

# ==================== Display Hints ====================
BASE64_IMAGE_PREFIX = "data:image/"
BASE64_IMAGE_MARKER = ";base64,"
HTTP_PREFIX = "http://"
HTTPS_PREFIX = "https://"
IMAGE_EXTENSIONS = [".png", ".jpg", ".bmp", ".gif"]

# ==================== Environment ====================
ENV_PREFIX = "SCHEMAFORM_"
ENV_NESTED_DELIMITER = "__"
