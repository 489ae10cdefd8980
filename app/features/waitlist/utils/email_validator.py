import re

# local@domain.tld: no whitespace, exactly one "@", at least one "." in the domain
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: str) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def extract_domain(email: str) -> str:
    return email.rsplit("@", 1)[-1]
