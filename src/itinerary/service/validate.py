# SPDX-License-Identifier: MIT

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN = re.compile(
    r"^(https?://)?"
    r"([a-z\d]([a-z\d-]*[a-z\d])?\.)+[a-z]{2,}"
    r"(:\d+)?"
    r"(/[-a-z\d%_.~+]*)*"
    r"(\?[;&a-z\d%_.~+=-]*)?"
    r"(#[-a-z\d_]*)?$",
    re.IGNORECASE,
)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


def is_valid_url(url: str) -> bool:
    return URL_PATTERN.match(url) is not None
