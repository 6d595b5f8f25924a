"""JSON schema definition for structured submission reports."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

REPORT_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "solcheck report",
    "type": "object",
    "required": ["schema_version", "generated_at", "task", "solution", "summary", "results"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "task": {"type": "string"},
        "solution": {"type": "string"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "errors"],
            "properties": {
                "total": {"type": "integer", "minimum": 0},
                "passed": {"type": "integer", "minimum": 0},
                "failed": {"type": "integer", "minimum": 0},
                "errors": {"type": "integer", "minimum": 0},
            },
        },
        "results": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["index", "status", "passed", "actual_output"],
                "properties": {
                    "index": {"type": "integer", "minimum": 0},
                    "status": {"type": "string", "enum": ["passed", "failed", "error"]},
                    "passed": {"type": "boolean"},
                    "actual_output": {"type": "string"},
                    "input": {"type": "string"},
                    "expected": {"type": "string"},
                    "strategy": {"type": "string"},
                    "description": {"type": "string"},
                    "error": {"type": "string"},
                },
            },
        },
    },
}
