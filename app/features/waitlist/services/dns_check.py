from typing import List, Optional

import dns.asyncresolver
import dns.exception

from app.platform.exceptions import InvalidEmailDomainError
from app.platform.logger import get_logger

logger = get_logger(__name__)

DOMAIN_UNREACHABLE = "Invalid email domain (fake/unreachable)"
DOMAIN_CANNOT_RECEIVE_MAIL = "Email domain is invalid or cannot receive emails"


class MXResolver:
    """
    Single-attempt MX lookups bounded by `timeout` seconds.

    One instance lives on app.state; the system resolver configuration is
    read on the first lookup and reused afterwards.
    """

    def __init__(self, timeout: float):
        self.timeout = timeout
        self._resolver: Optional[dns.asyncresolver.Resolver] = None

    def _get_resolver(self) -> dns.asyncresolver.Resolver:
        # Raises NoResolverConfiguration (a DNSException) when resolv.conf is unusable
        if self._resolver is None:
            self._resolver = dns.asyncresolver.Resolver()
        return self._resolver

    async def lookup(self, domain: str) -> List[str]:
        answers = await self._get_resolver().resolve(domain, "MX", lifetime=self.timeout)
        hosts = [str(rdata.exchange).rstrip(".") for rdata in answers]
        # Null MX (RFC 7505) publishes "." to say the domain takes no mail
        return [host for host in hosts if host]


async def verify_mail_domain(resolver: MXResolver, domain: str) -> None:
    try:
        hosts = await resolver.lookup(domain)
    except (dns.exception.DNSException, OSError) as exc:
        logger.warning(f"DNS check failed for domain {domain}: {exc!r}")
        raise InvalidEmailDomainError(DOMAIN_UNREACHABLE) from exc

    if not hosts:
        logger.info(f"Domain {domain} publishes no mail exchangers")
        raise InvalidEmailDomainError(DOMAIN_CANNOT_RECEIVE_MAIL)
