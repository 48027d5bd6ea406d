"""
Classification of failures coming back from the Supabase client.

PostgREST raises APIError with a `code` and `message`; Supabase Auth raises
AuthApiError with a `status`. Callers decide how to recover from each kind.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    AUTH = "auth"
    NOT_FOUND = "not_found"
    SCHEMA_MISMATCH = "schema_mismatch"
    VALIDATION = "validation"
    UNEXPECTED = "unexpected"


# PGRST116: .single() matched zero (or several) rows
NOT_FOUND_CODES = {"PGRST116"}
# 42P01 undefined table, 42703 undefined column, PGRST204/205 column/table missing from schema cache
SCHEMA_MISMATCH_CODES = {"42P01", "42703", "PGRST204", "PGRST205"}
AUTH_STATUSES = {400, 401, 403, 422}


def error_message(exc: Exception) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc)


def error_code(exc: Exception) -> Optional[str]:
    code = getattr(exc, "code", None)
    return str(code) if code is not None else None


def classify_error(exc: Exception) -> ErrorKind:
    code = error_code(exc)
    message = error_message(exc).lower()
    if code in SCHEMA_MISMATCH_CODES or "does not exist" in message:
        return ErrorKind.SCHEMA_MISMATCH
    if code in NOT_FOUND_CODES:
        return ErrorKind.NOT_FOUND
    if isinstance(exc, (ValueError, TypeError)):
        return ErrorKind.VALIDATION
    if getattr(exc, "status", None) in AUTH_STATUSES:
        return ErrorKind.AUTH
    return ErrorKind.UNEXPECTED
