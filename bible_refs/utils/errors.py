# bible_refs/utils/errors.py
"""
JSON error bodies for the references API.

Request problems come back as {"error": "<code>", "detail": "..."} with a
4xx status. Failures while fetching verses are not request errors: they are
reported per reference in the "error" field of each resolved result.
"""

from flask import jsonify


def error_response(code: str, status: int = 400, detail: str = None):
    """Return (response, status) for an error code and optional detail."""
    payload = {"error": code}
    if detail:
        payload["detail"] = detail
    return jsonify(payload), status


def text_required():
    """No text to scan was sent."""
    return error_response("text_required", 400, "Send the text to scan for references")


def invalid_version(value):
    """Version was sent but is not a version code."""
    return error_response(
        "invalid_version", 400,
        f"version must be a string like 'kjv', got {type(value).__name__}",
    )


def unknown_book(abbrev: str):
    return error_response("not_found", 404, f"No book with abbreviation '{abbrev}'")
