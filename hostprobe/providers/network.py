"""
Public IP lookup over HTTP.
"""

import ipaddress
import logging
from typing import List, Optional

import requests

from hostprobe.config import PUBLIC_IP_SERVICES, PUBLIC_IP_TIMEOUT
from hostprobe.error_messages import format_error
from hostprobe.errors import ProviderUnavailable
from hostprobe.interfaces.providers import NetworkProvider

logger = logging.getLogger(__name__)


class HttpPublicIpProvider(NetworkProvider):
    """
    Ask plain-text IP echo services for the caller's address.

    Services are tried in order; the first one answering with a valid IPv4
    or IPv6 address wins. There are no retries beyond moving to the next
    service.
    """

    def __init__(self, services: Optional[List[str]] = None, timeout: float = PUBLIC_IP_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.services = list(services) if services is not None else list(PUBLIC_IP_SERVICES)
        self.timeout = timeout
        self.session = session or requests.Session()

    def is_available(self) -> bool:
        return bool(self.services)

    def public_ip(self) -> str:
        failures = []
        for service in self.services:
            try:
                response = self.session.get(service, timeout=self.timeout)
                response.raise_for_status()
            except requests.RequestException as e:
                logger.debug(f"Public IP service {service} failed: {e}")
                failures.append(f"{service} ({type(e).__name__})")
                continue

            candidate = response.text.strip()
            try:
                address = ipaddress.ip_address(candidate)
            except ValueError:
                logger.debug(f"Public IP service {service} returned {candidate[:64]!r}")
                failures.append(f"{service} (invalid address)")
                continue
            return str(address)

        raise ProviderUnavailable(
            format_error('PUBLIC_IP_UNREACHABLE', services=", ".join(failures) or "none configured"),
            provider=self.name,
            reason="no service answered",
            suggestion="Check outbound HTTPS connectivity or proxy settings",
        )
