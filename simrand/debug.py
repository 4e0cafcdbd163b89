"""
Flag-gated debug logging for the RNG.
"""
import time

from . import config

# Debug logging (set DEBUG_RNG=1 in the environment / .env to see RNG logs)
DEBUG_RNG = config.DEBUG_RNG

_last_log = {}
def debug_log(msg, throttle_key=None):
    if not DEBUG_RNG:
        return
    # Throttle repeated messages
    if throttle_key:
        now = time.monotonic()
        if throttle_key in _last_log and now - _last_log[throttle_key] < 1.0:
            return
        _last_log[throttle_key] = now
    print(f"[rng] {msg}")
