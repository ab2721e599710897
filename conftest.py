"""Global pytest configuration."""

import os

# Disable simulated upstream latency before any settings are loaded
os.environ.setdefault("SIMULATED_LATENCY_MIN_MS", "0")
os.environ.setdefault("SIMULATED_LATENCY_MAX_MS", "0")
