import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from SceneStore import CelestialBody  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def bodies():
    return [
        CelestialBody("0", 12.0, 0.0, "Sun", 1.0),
        CelestialBody("1", 6.0, 45.0, "Moon", 1.0),
        CelestialBody("2", 18.0, -45.0, "Mars", 1.0),
    ]
