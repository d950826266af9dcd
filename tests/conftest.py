from __future__ import annotations

import os
import random
import sys
from pathlib import Path
from typing import Callable

import pytest

try:
    from hypothesis import HealthCheck, settings
except ImportError:  # pragma: no cover - hypothesis is optional in some environments
    HealthCheck = None  # type: ignore[assignment]
    settings = None  # type: ignore[assignment]

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def seeded_entropy() -> Callable[[int], bytes]:
    """Deterministic byte source standing in for ``secrets.token_bytes``."""

    rng = random.Random(1234)

    def draw(count: int) -> bytes:
        return bytes(rng.randrange(256) for _ in range(count))

    return draw


@pytest.fixture
def counter_ids() -> Callable[[], str]:
    """Id source yielding ``t1``, ``t2``... so rendered markup is predictable."""

    state = {"n": 0}

    def next_id() -> str:
        state["n"] += 1
        return f"t{state['n']}"

    return next_id


def pytest_configure(config: pytest.Config) -> None:
    """Declare pytest markers and configure Hypothesis defaults."""

    config.addinivalue_line("markers", "cli: Tests that drive the swapui command line entry point.")

    default_profile = _configure_hypothesis_profiles()
    if settings is None:
        return

    # the hypothesis plugin owns --hypothesis-profile and loads it itself
    selected = config.getoption("hypothesis_profile", None)
    if selected:
        settings.load_profile(selected)
    elif os.getenv("CI"):
        settings.load_profile("ci")
    else:
        settings.load_profile(default_profile)


_HYPOTHESIS_PROFILES_REGISTERED = False


def _configure_hypothesis_profiles() -> str:
    """Register Hypothesis profiles and return the default profile name."""

    global _HYPOTHESIS_PROFILES_REGISTERED
    if settings is None:
        return "dev"

    if not _HYPOTHESIS_PROFILES_REGISTERED:
        suppress_checks = (HealthCheck.filter_too_much,) if HealthCheck else ()
        settings.register_profile(
            "dev",
            settings(max_examples=25, deadline=500, suppress_health_check=suppress_checks),
        )
        settings.register_profile(
            "ci",
            settings(max_examples=75, deadline=750, print_blob=True, suppress_health_check=suppress_checks),
        )
        settings.register_profile(
            "stress",
            settings(max_examples=150, deadline=None, print_blob=True, suppress_health_check=suppress_checks),
        )
        _HYPOTHESIS_PROFILES_REGISTERED = True
    return "dev"


_configure_hypothesis_profiles()
