"""
Rate Limiting Configuration

Redirects are cheap and public, so they get a generous limit. Admin
submissions write to the database and touch shortlinks, so they are
limited more tightly.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Format: "count/period"
RATE_LIMITS = {
    "redirect": "100/minute",
    "admin": "30/minute",
}
