"""Service pattern matching.

Publisher patterns are shell-style globs (``*`` and ``?``) compared
case-insensitively against both the service name and its display name.
Brackets are literal characters, not character classes.
"""

import fnmatch
import re
from collections.abc import Iterable

from avd_readiness.model.inventory import ServiceRecord


def glob_match(value: str | None, pattern: str | None) -> bool:
    """Case-insensitive glob match; empty values never match."""
    if not value or not pattern:
        return False
    # "[[]" is fnmatch's spelling of a literal "["
    literal = pattern.lower().replace("[", "[[]")
    return fnmatch.fnmatchcase(value.lower(), literal)


def service_matches(service: ServiceRecord, patterns: Iterable[str]) -> bool:
    """True if the service name or display name matches any pattern."""
    for pattern in patterns:
        if glob_match(service.name, pattern) or glob_match(service.display_name, pattern):
            return True
    return False


def match_services(
    services: Iterable[ServiceRecord],
    patterns: Iterable[str],
) -> dict[str, ServiceRecord]:
    """Return matching services keyed by service name.

    A service that matches several patterns is kept once. If the same name
    is reported twice, the record with the lowest display name wins so the
    result does not depend on input order.
    """
    pattern_list = [p for p in patterns if p]
    matches: dict[str, ServiceRecord] = {}
    for service in services:
        if service is None or not service_matches(service, pattern_list):
            continue
        key = service.name or ""
        current = matches.get(key)
        if current is None or (service.display_name or "") < (current.display_name or ""):
            matches[key] = service
    return matches


def exclude_names(
    matches: dict[str, ServiceRecord],
    names: Iterable[str],
) -> dict[str, ServiceRecord]:
    excluded = set(names)
    return {name: svc for name, svc in matches.items() if name not in excluded}


def exclude_regex(
    matches: dict[str, ServiceRecord],
    pattern: str,
) -> dict[str, ServiceRecord]:
    """Drop services whose name or display name satisfies the regex."""
    compiled = re.compile(pattern, re.IGNORECASE)
    return {
        name: svc
        for name, svc in matches.items()
        if not (compiled.search(svc.name or "") or compiled.search(svc.display_name or ""))
    }
