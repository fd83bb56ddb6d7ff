# topmark:header:start
#
#   project      : PwText
#   file         : exit_codes.py
#   file_relpath : src/pwtext/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Exit codes for the PwText CLI.

Values follow the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PwText CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags/arguments. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Malformed input text or a failed conversion. Mirrors BSD
            ``EX_DATAERR (65)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG
