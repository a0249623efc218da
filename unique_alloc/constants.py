"""Library-wide constants.

Default budgets and generator settings shared by the strategies, the config
models and the CLI.
"""

# Retry budgets
DEFAULT_MAX_ATTEMPTS = 10  # Attempts for random candidates (insert or exists check)
DEFAULT_SLUG_MAX_ATTEMPTS = 50  # Attempts for suffixed slugs, base slug included

# Slug Generation
DEFAULT_SLUG_MAX_LENGTH = 60  # Hard cap on slug length, suffix included
SLUG_SEPARATOR = "-"
SLUG_FIRST_SUFFIX = 2  # The bare base occupies slot 1

# Id Generation
DEFAULT_ID_ALPHABET = "abcdefghjkmnpqrstuvwxyz23456789"  # No 0/1/i/l/o
DEFAULT_ID_LENGTH = 10

# Duplicate-key error codes
MONGO_DUPLICATE_KEY_CODE = 11000  # E11000 duplicate key
POSTGRES_UNIQUE_VIOLATION = "23505"  # unique_violation SQLSTATE
