"""Core constants: GSA wire protocol names and shared literal values.

Single source of truth for the element/attribute names read from GSA XML
results and the defaults substituted into GSA query URLs.
"""

# Substituted when a policy leaves frontend or collection empty
DEFAULT_FRONTEND = "default_frontend"
DEFAULT_COLLECTION = "default_collection"

# GSA query URL pieces
GSA_SEARCH_PATH = "/search"
GSA_HTTP_SCHEME = "http://"
GSA_XML_OUTPUT = "xml_no_dtd"
GSA_PROXY_STYLESHEET = DEFAULT_FRONTEND

# GSA XML elements traversed to reach each result
GSA_RESULTS = "RES"
GSA_RESULT = "R"
GSA_HAS = "HAS"
GSA_CACHE = "C"

# GSA XML elements and attributes holding extracted values
GSA_TITLE = "T"
GSA_URL = "U"
GSA_SNIPPET = "S"
GSA_SIZE = "SZ"
GSA_INDENT = "L"

# Used when the result carries no cached size
SIZE_UNKNOWN = "Size unknown"

# Responses are decoded with a fixed encoding regardless of headers
RESPONSE_ENCODING = "utf-8"

# Longest URL shown in a side-by-side column before trimming
MAX_DISPLAY_URL_LENGTH = 65
