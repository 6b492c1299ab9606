"""Package-wide constants.

Default option values for slug fields, kept in one place so the settings
models and the CLI agree on them.
"""

# Slug Generation
DEFAULT_SEPARATOR = "-"  # Joins words within a slug and the slug to its suffix
DEFAULT_UNIQUE = True  # Enforce uniqueness among sibling records
DEFAULT_INCLUDE_TRASHED = False  # Soft-deleted siblings do not block a slug

# Reserved words
RESERVED_SUFFIX = "1"  # Appended once when a candidate hits a reserved word

# Source extraction
SOURCE_JOINER = " "  # Joins the values of multiple source fields

# Record stores
DEFAULT_KEY_NAME = "id"  # Primary key attribute of a record
SOFT_DELETE_FIELD = "deleted_at"  # Attribute marking a trashed record

# Conflict retry
DEFAULT_SAVE_ATTEMPTS = 3  # Attempts before a storage-level conflict propagates

# CLI
CONFIG_ENV_VAR = "SLUGGABLE_CONFIG"  # Environment variable holding the YAML config path
