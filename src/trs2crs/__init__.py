"""
trs2crs computes the rotation between the terrestrial and celestial reference systems, with
Earth orientation partials, following the IERS Conventions in JAX.
"""

from .constants import (
    AS2RAD,
    RAD2AS,
    UAS2RAD,
    MAS2RAD,
    JD_MJD_OFFSET,
    MJD2000,
    OMEGA_EARTH,
)

from .config import (
    set_dtype,
    get_dtype,
    CIPRoute,
    NutationModel,
    TransformConfig,
)

from .errors import (
    ConfigurationError,
    DataGapError,
    NumericDomainWarning,
)

from .epoch import Epoch, TimeScale

from .rotations import (
    Rx,
    Ry,
    Rz,
    dRx,
    dRy,
    dRz,
    RotationFactor,
    rotation_factor,
)

from .fundamental_arguments import fundamental_arguments, delaunay_arguments
from .harmonic import HarmonicSeries, PoissonSeries
from .windowed_cache import CacheState, CorrectionSample, WindowedCache
from .tides import diurnal_correction, zonal_correction
from .fcn import FCNCorrection, fcn_offsets
from .earth_rotation import earth_rotation_angle, tio_locator

from .precession import (
    BPNResult,
    FrameBuilder,
    PrecessionAngles,
    greenwich_mean_sidereal_time,
    mean_obliquity,
    precession_angles,
)

from .nutation import CIPAngles, NutationEvaluator, cip_angles

from .eop import (
    EOPCorrector,
    EOPRecord,
    EOPTable,
    OffsetKind,
    UT1Mode,
    static_eop,
    load_eop_from_file,
    load_eop_from_csv,
    load_cached_eop,
)

from .composer import FrameTransformResult, RotationComposer
