"""
Railway-Oriented Programming (ROP) support for better_pem.

Explicit, composable error handling — every fallible stage returns a Result.

    from better_pem.railway import ErrorCode, Result

    result = normalizer.normalize(source).flat_map(demultiplexer.parse_all)
    match result:
        case Success(pems):
            ...
        case Failure(error) if error.code is ErrorCode.BLOCK_PARSE_FAILURE:
            ...
"""

from better_pem.railway.result import Result, Success, Failure
from better_pem.railway.failure import ErrorCode, FailureDescription
from better_pem.railway.result_failures import ResultFailures
from better_pem.railway.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "FailureDescription",
    "ResultFailures",
    "ResultAssertions",
]
