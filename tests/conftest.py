import jax.numpy as jnp
import pytest

from trs2crs.config import set_dtype
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.eop import static_eop

# Finals lines from IERS Bulletin A (2023-11-01, 2023-12-20) and a prediction row
FINALS_LINES = (
    "2311 1 60249.00 I  0.274620 0.000020  0.268283 0.000018  I 0.0113205 0.0000039 -0.3630 0.0029  I     0.293    0.290    -0.045    0.041  0.274569  0.268315  0.0113342     0.238    -0.039  ",
    "2311 2 60250.00 I  0.276230 0.000021  0.268020 0.000018  I 0.0116742 0.0000041 -0.3474 0.0029  I     0.299    0.290    -0.044    0.041  0.276174  0.268066  0.0116872     0.245    -0.036  ",
    "241228 60672.00 P  0.173369 0.019841  0.266914 0.028808  P 0.0420038 0.0254096                                                                                                             ",
)


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    With pytest-xdist, each worker process starts with the default float32.
    This fixture ensures all tests get float64 unless they explicitly override
    it (e.g. test_config.py has its own autouse fixture that sets float32).
    """
    set_dtype(jnp.float64)


@pytest.fixture
def finals_path(tmp_path):
    """Small IERS standard format file with two complete days and a prediction."""
    path = tmp_path / "finals.all.iau2000.txt"
    path.write_text("\n".join(FINALS_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_eop():
    """Static EOP table of plausible 2020 values, offsets above the FCN threshold."""
    return static_eop(
        xp=0.1 * 4.84813681109536e-6,
        yp=0.35 * 4.84813681109536e-6,
        ut1_minus_tai=-37.2,
        dx=1.0e-7,
        dy=-1.2e-7,
    )


@pytest.fixture
def epoch_2020():
    return Epoch(2020, 6, 1, 12, 0, 0.0, scale=TimeScale.UTC)
