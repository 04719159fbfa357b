"""
Parsers for the ad hoc text and structured output of host tools.

Every function here is total: malformed input yields None (or an empty
mapping entry), never an exception. Callers decide what absent data means.

Public exports:
    parse_device_count: Device count from ``xcena_cli num-device`` output
    parse_labeled_fields: ``Label: value`` extraction from free text
    parse_json_records: List of JSON objects from tool output
    is_empty_listing: Empty output or an empty-collection sentinel
"""

import json
import re
from typing import Any, Dict, Iterable, List, Optional

DEVICE_COUNT_PATTERN = re.compile(r"Number of devices\s*:\s*([0-9]+)")
BARE_INTEGER_PATTERN = re.compile(r"^[0-9]+$")
EMPTY_COLLECTION_SENTINELS = ("[]", "{}")


def parse_device_count(text: Optional[str]) -> Optional[int]:
    """
    Extract a device count from CLI output.

    Tries the labeled form ``Number of devices : N`` anywhere in the text
    first, then accepts output that is a bare integer. The first pattern that
    matches wins.

    Args:
        text: Raw command output, possibly None.

    Returns:
        The count, or None when neither form is present.

    Examples:
        >>> parse_device_count("Number of devices : 2\\n")
        2
        >>> parse_device_count("4")
        4
        >>> parse_device_count("no devices") is None
        True
    """
    if not text:
        return None

    match = DEVICE_COUNT_PATTERN.search(text)
    if match:
        return int(match.group(1))

    stripped = text.strip()
    if BARE_INTEGER_PATTERN.match(stripped):
        return int(stripped)

    return None


def parse_labeled_fields(text: Optional[str], labels: Iterable[str],
                         separator: str = ":") -> Dict[str, Optional[str]]:
    """
    Extract ``Label: value`` fields from semi-structured text.

    A line matches a label when, after stripping leading whitespace, it starts
    with that label. The value is everything after the first separator,
    trimmed. The first matching line wins for each label.

    Args:
        text: Raw command output, possibly None.
        labels: Labels to look for.
        separator: Character between label and value.

    Returns:
        Mapping of every requested label to its value, or None if not found.

    Examples:
        >>> parse_labeled_fields("Target : MX1\\nBDF: 0000:17:00.0", ["Target", "BDF"])
        {'Target': 'MX1', 'BDF': '0000:17:00.0'}
    """
    fields: Dict[str, Optional[str]] = {label: None for label in labels}
    if not text:
        return fields

    for line in text.splitlines():
        stripped = line.strip()
        for label in fields:
            if fields[label] is not None or not stripped.startswith(label):
                continue
            if separator not in stripped:
                continue
            fields[label] = stripped.split(separator, 1)[1].strip()

    return fields


def parse_json_records(text: Optional[str]) -> Optional[List[Dict[str, Any]]]:
    """
    Parse tool output as a list of JSON objects.

    A single top-level object is treated as a one-element list. Non-object
    entries of a list are skipped.

    Args:
        text: Raw command output, possibly None.

    Returns:
        List of dictionaries, or None if the text is not valid JSON of that
        shape.
    """
    if not text or not text.strip():
        return None
    try:
        data = json.loads(text)
    except ValueError:
        return None

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return [item for item in data if isinstance(item, dict)]
    return None


def is_empty_listing(text: Optional[str]) -> bool:
    """True for empty output or a literal empty-collection token such as ``[]``."""
    if text is None:
        return True
    stripped = text.strip()
    return not stripped or stripped in EMPTY_COLLECTION_SENTINELS
