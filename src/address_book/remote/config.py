from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class LookupConfig:
    """Configuration for the address lookup API."""

    base_url: str = field(
        default_factory=lambda: os.getenv("ADDRESS_BOOK_API_URL", "http://localhost:3000")
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("ADDRESS_BOOK_TIMEOUT", "10"))
    )
    path: str = "/api/getAddresses"
