"""
Configuration settings for the simrand deterministic RNG.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Seeding
# 0 means "derive a seed from the wall clock"; the derived seed is logged so a run can be replayed.
RNG_SEED = int(os.getenv("RNG_SEED", "0"))

# Exclusion picks redraw at most this many times before accepting the last draw.
RNG_MAX_EXCLUDE_RETRIES = int(os.getenv("RNG_MAX_EXCLUDE_RETRIES", "1000"))

# Debug logging (set DEBUG_RNG=1 to see seeding / unbound-mode logs)
DEBUG_RNG = os.getenv("DEBUG_RNG", "0").strip().lower() in ("1", "true", "yes", "on")
