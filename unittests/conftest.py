import pytest


def reference(dim, radius):
    """Straightforward nested-loop enumeration, skipping the center by test."""
    window = 2 * radius + 1
    neighbors = []
    for index in range(window**dim):
        neighbor = []
        for _ in range(dim):
            neighbor.append(index % window - radius)
            index //= window
        if any(neighbor):
            neighbors.append(neighbor)
    return neighbors


@pytest.fixture
def reference_fn():
    return reference
