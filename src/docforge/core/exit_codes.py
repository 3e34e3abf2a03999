# topmark:header:start
#
#   project      : DocForge
#   file         : exit_codes.py
#   file_relpath : src/docforge/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DocForge CLI.

DocForge aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is `INCONSISTENT=2`,
returned by ``docforge pdf inspect`` when a document parses but its cross-reference
data disagrees with the real object positions. Click reports its own usage errors
with 2 as well, so callers tell the two apart by the inspection report on stdout.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for DocForge CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        INCONSISTENT: An inspected document has offset or count mismatches.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input could not be decoded (empty CSV, missing rows, bad header,
            malformed PDF, undecodable bytes). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNEXPECTED_ERROR: Internal contract violation. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    INCONSISTENT = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNEXPECTED_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
