"""
Format checks for names, labels and display names. Each check returns a list
of messages describing what is wrong with the value; an empty list means the
value is acceptable.
"""

import re
import unicodedata

DNS1123_LABEL_MAX_LENGTH = 63
DNS1123_SUBDOMAIN_MAX_LENGTH = 253
QUALIFIED_NAME_MAX_LENGTH = 63
LABEL_VALUE_MAX_LENGTH = 63
DISPLAY_NAME_MAX_LENGTH = 255

_DNS1123_LABEL_FMT = "[a-z0-9]([-a-z0-9]*[a-z0-9])?"
_DNS1123_SUBDOMAIN_FMT = rf"{_DNS1123_LABEL_FMT}(\.{_DNS1123_LABEL_FMT})*"
_QUALIFIED_NAME_FMT = "([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]"

_DNS1123_LABEL_RE = re.compile(_DNS1123_LABEL_FMT)
_DNS1123_SUBDOMAIN_RE = re.compile(_DNS1123_SUBDOMAIN_FMT)
_QUALIFIED_NAME_RE = re.compile(_QUALIFIED_NAME_FMT)
_LABEL_VALUE_RE = re.compile(f"({_QUALIFIED_NAME_FMT})?")


def _max_length_message(length: int) -> str:
    return f"must be no more than {length} characters"


def is_dns1123_label(value: str) -> list[str]:
    messages = []
    if len(value) > DNS1123_LABEL_MAX_LENGTH:
        messages.append(_max_length_message(DNS1123_LABEL_MAX_LENGTH))
    if not _DNS1123_LABEL_RE.fullmatch(value):
        messages.append(
            "a lowercase RFC 1123 label must consist of lower case alphanumeric "
            "characters or '-', and must start and end with an alphanumeric "
            "character"
        )
    return messages


def is_dns1123_subdomain(value: str) -> list[str]:
    messages = []
    if len(value) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        messages.append(_max_length_message(DNS1123_SUBDOMAIN_MAX_LENGTH))
    if not _DNS1123_SUBDOMAIN_RE.fullmatch(value):
        messages.append(
            "a lowercase RFC 1123 subdomain must consist of lower case "
            "alphanumeric characters, '-' or '.', and must start and end with "
            "an alphanumeric character"
        )
    return messages


def is_qualified_name(value: str) -> list[str]:
    """
    A qualified name is an optional DNS subdomain prefix followed by a slash
    and a name part, e.g. `example.com/team`.
    """
    parts = value.split("/")

    match parts:
        case [name]:
            prefix = None
        case [prefix, name]:
            if not prefix:
                return ["prefix part must be non-empty"]
        case _:
            return [
                "a qualified name must consist of alphanumeric characters, '-', "
                "'_' or '.', with an optional DNS subdomain prefix and '/'"
            ]

    messages = []

    if prefix is not None:
        messages.extend(f"prefix part {m}" for m in is_dns1123_subdomain(prefix))

    if not name:
        messages.append("name part must be non-empty")
    elif len(name) > QUALIFIED_NAME_MAX_LENGTH:
        messages.append(
            f"name part {_max_length_message(QUALIFIED_NAME_MAX_LENGTH)}"
        )

    if name and not _QUALIFIED_NAME_RE.fullmatch(name):
        messages.append(
            "name part must consist of alphanumeric characters, '-', '_' or '.', "
            "and must start and end with an alphanumeric character"
        )

    return messages


def is_valid_label_value(value: str) -> list[str]:
    messages = []
    if len(value) > LABEL_VALUE_MAX_LENGTH:
        messages.append(_max_length_message(LABEL_VALUE_MAX_LENGTH))
    if not _LABEL_VALUE_RE.fullmatch(value):
        messages.append(
            "a valid label must be an empty string or consist of alphanumeric "
            "characters, '-', '_' or '.', and must start and end with an "
            "alphanumeric character"
        )
    return messages


def is_display_name(value: str) -> list[str]:
    """
    Display names are free text shown to humans: any printable characters,
    but not empty, not padded with whitespace and of bounded length.
    """
    if not value:
        return ["must be specified"]

    messages = []
    if len(value) > DISPLAY_NAME_MAX_LENGTH:
        messages.append(_max_length_message(DISPLAY_NAME_MAX_LENGTH))
    if value != value.strip():
        messages.append("must not start or end with whitespace")
    if any(unicodedata.category(c) == "Cc" for c in value):
        messages.append("must not contain control characters")
    return messages
