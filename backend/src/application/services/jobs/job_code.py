"""
Job Code Generator
Human-readable reference codes for job posts
"""
import random
import string
import time
from typing import Optional

_CODE_ALPHABET = string.digits + string.ascii_uppercase


def generate_job_code(now_ms: Optional[int] = None, rng: Optional[random.Random] = None) -> str:
    """
    Build a code like ``JOB-482913-K7QZ``.

    The middle part is the last six digits of the epoch time in milliseconds,
    the suffix four random base36 characters.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    rng = rng or random

    timestamp_part = str(now_ms)[-6:]
    random_part = "".join(rng.choice(_CODE_ALPHABET) for _ in range(4))
    return f"JOB-{timestamp_part}-{random_part}"
