"""Core constants: length bounds, cache key prefixes and response header values.

Single source of truth for values shared by the coordinator, the edge
cache key builders and the HTTP layer (DRY).
"""

# Input text and stored translation are both bounded to this many characters.
MAX_TEXT_LENGTH = 64
MAX_TRANSLATION_LENGTH = 64

# Edge cache key prefixes (used as edge:translation:<cache_key>)
CACHE_PREFIX_EDGE = "edge"
CACHE_PREFIX_TRANSLATION = "translation"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Entries are immortal once written, so clients may cache responses forever.
IMMUTABLE_CACHE_CONTROL = "public, max-age=31536000, immutable"
CACHE_STATUS_HEADER = "X-Cache-Status"

# Administrative listing returns at most this many rows (newest first).
ADMIN_LIST_LIMIT = 100
