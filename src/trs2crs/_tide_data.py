"""Coefficients of the tidal and libration corrections to the EOP.

Diurnal and semidiurnal rows use the argument set
``(gamma, l, l', F, D, Om)`` where ``gamma = GMST + pi``; zonal rows use
the Delaunay arguments ``(l, l', F, D, Om)``.  Amplitudes come first in
``(sin, cos)`` pairs, one pair per output channel, followed by the
integer multipliers.

- :data:`OCEAN_POLE_TERMS`: ocean tide effect on ``(xp, yp)`` in
  microarcseconds, IERS Conventions (2010) Table 8.2a/b.
- :data:`OCEAN_UT1_TERMS`: ocean tide effect on UT1 in microseconds,
  IERS Conventions (2010) Table 8.3a/b.
- :data:`LIBRATION_POLE_TERMS`: prograde diurnal libration in polar
  motion in microarcseconds, IERS Conventions (2010) Table 5.1a
  (degree 2 rows; the long-period rows are part of the observed pole).
- :data:`LIBRATION_UT1_TERMS`: semidiurnal libration in UT1 and LOD in
  microseconds, IERS Conventions (2010) Table 5.1b.
- :data:`ZONAL_TERMS`: long-period zonal tide effect on UT1 and LOD in
  microseconds, after Ray & Erofeeva (2014) Table 3.  The Doodson
  multipliers are rewritten as Delaunay multipliers and the quarter-cycle
  phase offsets are folded into the amplitudes.
"""

# fmt: off

OCEAN_POLE_TERMS = (
    (-0.05, 0.94, -0.94, -0.05, 1, -1, 0, -2, -2, -2),
    (0.06, 0.64, -0.64, 0.06, 1, -2, 0, -2, 0, -1),
    (0.30, 3.42, -3.42, 0.30, 1, -2, 0, -2, 0, -2),
    (0.08, 0.78, -0.78, 0.08, 1, 0, 0, -2, -2, -1),
    (0.46, 4.15, -4.15, 0.45, 1, 0, 0, -2, -2, -2),
    (1.19, 4.96, -4.96, 1.19, 1, -1, 0, -2, 0, -1),
    (6.24, 26.31, -26.31, 6.23, 1, -1, 0, -2, 0, -2),
    (0.24, 0.94, -0.94, 0.24, 1, 1, 0, -2, -2, -1),
    (1.28, 4.99, -4.99, 1.28, 1, 1, 0, -2, -2, -2),
    (-0.28, -0.77, 0.77, -0.28, 1, 0, 0, -2, 0, 0),
    (9.22, 25.06, -25.06, 9.22, 1, 0, 0, -2, 0, -1),
    (48.82, 132.91, -132.90, 48.82, 1, 0, 0, -2, 0, -2),
    (-0.32, -0.86, 0.86, -0.32, 1, -2, 0, 0, 0, 0),
    (-0.66, -1.72, 1.72, -0.66, 1, 0, 0, 0, -2, 0),
    (-0.42, -0.92, 0.92, -0.42, 1, -1, 0, -2, 2, -2),
    (-0.30, -0.64, 0.64, -0.30, 1, 1, 0, -2, 0, -1),
    (-1.61, -3.46, 3.46, -1.61, 1, 1, 0, -2, 0, -2),
    (-4.48, -9.61, 9.61, -4.48, 1, -1, 0, 0, 0, 0),
    (-0.90, -1.93, 1.93, -0.90, 1, -1, 0, 0, 0, -1),
    (-0.86, -1.81, 1.81, -0.86, 1, 1, 0, 0, -2, 0),
    (1.54, 3.03, -3.03, 1.54, 1, 0, -1, -2, 2, -2),
    (-0.29, -0.58, 0.58, -0.29, 1, 0, 0, -2, 2, -1),
    (26.13, 51.25, -51.25, 26.13, 1, 0, 0, -2, 2, -2),
    (-0.22, -0.42, 0.42, -0.22, 1, 0, 1, -2, 2, -2),
    (-0.61, -1.20, 1.20, -0.61, 1, 0, -1, 0, 0, 0),
    (1.54, 3.00, -3.00, 1.54, 1, 0, 0, 0, 0, 1),
    (-77.48, -151.74, 151.74, -77.48, 1, 0, 0, 0, 0, 0),
    (-10.52, -20.56, 20.56, -10.52, 1, 0, 0, 0, 0, -1),
    (0.23, 0.44, -0.44, 0.23, 1, 0, 0, 0, 0, -2),
    (-0.61, -1.19, 1.19, -0.61, 1, 0, 1, 0, 0, 0),
    (-1.09, -2.11, 2.11, -1.09, 1, 0, 0, 2, -2, 2),
    (-0.69, -1.43, 1.43, -0.69, 1, -1, 0, 0, 2, 0),
    (-3.46, -7.28, 7.28, -3.46, 1, 1, 0, 0, 0, 0),
    (-0.69, -1.44, 1.44, -0.69, 1, 1, 0, 0, 0, -1),
    (-0.37, -1.06, 1.06, -0.37, 1, 0, 0, 0, 2, 0),
    (-0.17, -0.51, 0.51, -0.17, 1, 2, 0, 0, 0, 0),
    (-1.10, -3.42, 3.42, -1.09, 1, 0, 0, 2, 0, 2),
    (-0.70, -2.19, 2.19, -0.70, 1, 0, 0, 2, 0, 1),
    (-0.15, -0.46, 0.46, -0.15, 1, 0, 0, 2, 0, 0),
    (-0.03, -0.59, 0.59, -0.03, 1, 1, 0, 2, 0, 2),
    (-0.02, -0.38, 0.38, -0.02, 1, 1, 0, 2, 0, 1),
    (-0.49, -0.04, 0.63, 0.24, 2, -3, 0, -2, 0, -2),
    (-1.33, -0.17, 1.53, 0.68, 2, -1, 0, -2, -2, -2),
    (-6.08, -1.61, 3.13, 3.35, 2, -2, 0, -2, 0, -2),
    (-7.59, -2.05, 3.44, 4.23, 2, 0, 0, -2, -2, -2),
    (-0.52, -0.14, 0.22, 0.29, 2, 0, 1, -2, -2, -2),
    (0.47, 0.11, -0.10, -0.27, 2, -1, -1, -2, 0, -2),
    (2.12, 0.49, -0.41, -1.23, 2, -1, 0, -2, 0, -1),
    (-56.87, -12.93, 11.15, 32.88, 2, -1, 0, -2, 0, -2),
    (-0.54, -0.12, 0.10, 0.31, 2, -1, 1, -2, 0, -2),
    (-11.01, -2.40, 1.89, 6.41, 2, 1, 0, -2, -2, -2),
    (-0.51, -0.11, 0.08, 0.30, 2, 1, 1, -2, -2, -2),
    (0.98, 0.11, -0.11, -0.58, 2, -2, 0, -2, 2, -2),
    (1.13, 0.11, -0.13, -0.67, 2, 0, -1, -2, 0, -2),
    (12.32, 1.00, -1.41, -7.31, 2, 0, 0, -2, 0, -1),
    (-330.15, -26.96, 37.58, 195.92, 2, 0, 0, -2, 0, -2),
    (-1.01, -0.07, 0.11, 0.60, 2, 0, 1, -2, 0, -2),
    (2.47, -0.28, -0.44, -1.48, 2, -1, 0, -2, 2, -2),
    (9.40, -1.44, -1.88, -5.65, 2, 1, 0, -2, 0, -2),
    (-2.35, 0.37, 0.47, 1.41, 2, -1, 0, 0, 0, 0),
    (-1.04, 0.17, 0.21, 0.62, 2, -1, 0, 0, 0, -1),
    (-8.51, 3.50, 3.29, 5.11, 2, 0, -1, -2, 2, -2),
    (-144.13, 63.56, 59.23, 86.56, 2, 0, 0, -2, 2, -2),
    (1.19, -0.56, -0.52, -0.72, 2, 0, 1, -2, 2, -2),
    (0.49, -0.25, -0.23, -0.29, 2, 0, 0, 0, 0, 1),
    (-38.48, 19.14, 17.72, 23.11, 2, 0, 0, 0, 0, 0),
    (-11.44, 5.75, 5.32, 6.87, 2, 0, 0, 0, 0, -1),
    (-1.24, 0.63, 0.58, 0.75, 2, 0, 0, 0, 0, -2),
    (-1.77, 1.79, 1.71, 1.04, 2, 1, 0, 0, 0, 0),
    (-0.77, 0.78, 0.75, 0.45, 2, 1, 0, 0, 0, -1),
    (-0.33, 0.62, 0.65, 0.19, 2, 0, 0, 2, 0, 2),
)

OCEAN_UT1_TERMS = (
    (0.396, -0.078, 1, -1, 0, -2, -2, -2),
    (0.195, -0.059, 1, -2, 0, -2, 0, -1),
    (1.034, -0.314, 1, -2, 0, -2, 0, -2),
    (0.224, -0.073, 1, 0, 0, -2, -2, -1),
    (1.187, -0.387, 1, 0, 0, -2, -2, -2),
    (0.966, -0.474, 1, -1, 0, -2, 0, -1),
    (5.118, -2.499, 1, -1, 0, -2, 0, -2),
    (0.172, -0.090, 1, 1, 0, -2, -2, -1),
    (0.911, -0.475, 1, 1, 0, -2, -2, -2),
    (-0.093, 0.070, 1, 0, 0, -2, 0, 0),
    (3.025, -2.280, 1, 0, 0, -2, 0, -1),
    (16.020, -12.069, 1, 0, 0, -2, 0, -2),
    (-0.103, 0.078, 1, -2, 0, 0, 0, 0),
    (-0.194, 0.154, 1, 0, 0, 0, -2, 0),
    (-0.083, 0.074, 1, -1, 0, -2, 2, -2),
    (-0.057, 0.050, 1, 1, 0, -2, 0, -1),
    (-0.308, 0.271, 1, 1, 0, -2, 0, -2),
    (-0.856, 0.751, 1, -1, 0, 0, 0, 0),
    (-0.172, 0.151, 1, -1, 0, 0, 0, -1),
    (-0.161, 0.137, 1, 1, 0, 0, -2, 0),
    (0.315, -0.189, 1, 0, -1, -2, 2, -2),
    (-0.062, 0.035, 1, 0, 0, -2, 2, -1),
    (5.512, -3.095, 1, 0, 0, -2, 2, -2),
    (-0.047, 0.025, 1, 0, 1, -2, 2, -2),
    (-0.134, 0.070, 1, 0, -1, 0, 0, 0),
    (0.348, -0.171, 1, 0, 0, 0, 0, 1),
    (-17.620, 8.548, 1, 0, 0, 0, 0, 0),
    (-2.392, 1.159, 1, 0, 0, 0, 0, -1),
    (0.052, -0.025, 1, 0, 0, 0, 0, -2),
    (-0.144, 0.065, 1, 0, 1, 0, 0, 0),
    (-0.267, 0.111, 1, 0, 0, 2, -2, 2),
    (-0.288, 0.043, 1, -1, 0, 0, 2, 0),
    (-1.610, 0.187, 1, 1, 0, 0, 0, 0),
    (-0.320, 0.037, 1, 1, 0, 0, 0, -1),
    (-0.407, -0.005, 1, 0, 0, 0, 2, 0),
    (-0.213, -0.005, 1, 2, 0, 0, 0, 0),
    (-1.436, -0.037, 1, 0, 0, 2, 0, 2),
    (-0.921, -0.023, 1, 0, 0, 2, 0, 1),
    (-0.193, -0.005, 1, 0, 0, 2, 0, 0),
    (-0.396, -0.024, 1, 1, 0, 2, 0, 2),
    (-0.253, -0.015, 1, 1, 0, 2, 0, 1),
    (-0.089, -0.011, 2, -3, 0, -2, 0, -2),
    (-0.224, -0.032, 2, -1, 0, -2, -2, -2),
    (-0.637, -0.177, 2, -2, 0, -2, 0, -2),
    (-0.745, -0.222, 2, 0, 0, -2, -2, -2),
    (-0.049, -0.015, 2, 0, 1, -2, -2, -2),
    (0.033, 0.013, 2, -1, -1, -2, 0, -2),
    (0.141, 0.058, 2, -1, 0, -2, 0, -1),
    (-3.795, -1.556, 2, -1, 0, -2, 0, -2),
    (-0.035, -0.015, 2, -1, 1, -2, 0, -2),
    (-0.698, -0.298, 2, 1, 0, -2, -2, -2),
    (-0.032, -0.014, 2, 1, 1, -2, -2, -2),
    (0.050, 0.022, 2, -2, 0, -2, 2, -2),
    (0.056, 0.025, 2, 0, -1, -2, 0, -2),
    (0.605, 0.266, 2, 0, 0, -2, 0, -1),
    (-16.195, -7.140, 2, 0, 0, -2, 0, -2),
    (-0.049, -0.021, 2, 0, 1, -2, 0, -2),
    (0.111, 0.034, 2, -1, 0, -2, 2, -2),
    (0.425, 0.117, 2, 1, 0, -2, 0, -2),
    (-0.106, -0.029, 2, -1, 0, 0, 0, 0),
    (-0.047, -0.013, 2, -1, 0, 0, 0, -1),
    (-0.437, -0.019, 2, 0, -1, -2, 2, -2),
    (-7.547, -0.159, 2, 0, 0, -2, 2, -2),
    (0.064, 0.000, 2, 0, 1, -2, 2, -2),
    (0.027, -0.001, 2, 0, 0, 0, 0, 1),
    (-2.104, 0.041, 2, 0, 0, 0, 0, 0),
    (-0.627, 0.015, 2, 0, 0, 0, 0, -1),
    (-0.068, 0.002, 2, 0, 0, 0, 0, -2),
    (-0.146, 0.037, 2, 1, 0, 0, 0, 0),
    (-0.064, 0.017, 2, 1, 0, 0, 0, -1),
    (-0.049, 0.018, 2, 0, 0, 2, 0, 2),
)

LIBRATION_POLE_TERMS = (
    (-0.4, 0.3, -0.3, -0.4, 1, -1, 0, -2, 0, -1),
    (-2.3, 1.3, -1.3, -2.3, 1, -1, 0, -2, 0, -2),
    (-0.4, 0.3, -0.3, -0.4, 1, 1, 0, -2, -2, -2),
    (-2.1, 1.2, -1.2, -2.1, 1, 0, 0, -2, 0, -1),
    (-11.4, 6.5, -6.5, -11.4, 1, 0, 0, -2, 0, -2),
    (0.8, -0.5, 0.5, 0.8, 1, -1, 0, 0, 0, 0),
    (-4.8, 2.7, -2.7, -4.8, 1, 0, 0, -2, 2, -2),
    (14.3, -8.2, 8.2, 14.3, 1, 0, 0, 0, 0, 0),
    (1.9, -1.1, 1.1, 1.9, 1, 0, 0, 0, 0, -1),
    (0.8, -0.4, 0.4, 0.8, 1, 1, 0, 0, 0, 0),
)

LIBRATION_UT1_TERMS = (
    (0.05, -0.03, -0.3, -0.6, 2, -2, 0, -2, 0, -2),
    (0.06, -0.03, -0.4, -0.7, 2, 0, 0, -2, -2, -2),
    (0.35, -0.20, -2.4, -4.1, 2, -1, 0, -2, 0, -2),
    (0.07, -0.04, -0.5, -0.8, 2, 1, 0, -2, -2, -2),
    (-0.07, 0.04, 0.5, 0.8, 2, 0, 0, -2, 0, -1),
    (1.75, -1.01, -12.2, -21.3, 2, 0, 0, -2, 0, -2),
    (-0.05, 0.03, 0.3, 0.6, 2, 1, 0, -2, 0, -2),
    (0.04, -0.03, -0.3, -0.6, 2, 0, -1, -2, 2, -2),
    (0.76, -0.44, -5.5, -9.6, 2, 0, 0, -2, 2, -2),
    (0.21, -0.12, -1.5, -2.6, 2, 0, 0, 0, 0, 0),
    (0.06, -0.04, -0.4, -0.8, 2, 0, 0, 0, 0, -1),
)

ZONAL_TERMS = (
    (-7.03, 0.07, 0.000, 0.006, 0, 2, -2, 2, -3),
    (172958.94, -1764.00, -1.630, -159.851, 0, 0, 0, 0, -1),
    (-840.24, 8.46, 0.016, 1.553, 0, 0, 0, 0, -2),
    (-4.22, 0.04, 0.000, 0.008, -1, 1, 0, 1, 0),
    (44.55, -0.47, -0.002, -0.214, -2, 0, 2, 0, 1),
    (14.35, -0.15, -0.001, -0.082, -2, 0, 2, 0, 0),
    (3.62, -0.05, -0.001, -0.055, 1, 0, 0, -1, 0),
    (-14.53, 0.19, 0.003, 0.236, 0, 1, 0, 0, 1),
    (-1608.33, 20.78, 0.358, 27.666, 0, 1, 0, 0, 0),
    (84.40, -1.09, -0.019, -1.452, 0, -1, 2, -2, 2),
    (9.64, -0.13, -0.002, -0.175, 0, 1, 0, 0, -1),
    (-4.74, 0.06, 0.001, 0.086, 0, -1, 2, -2, 1),
    (3.88, -0.05, -0.002, -0.115, 2, 0, 0, -2, 1),
    (-57.28, 0.80, 0.024, 1.748, 2, 0, 0, -2, 0),
    (5.15, -0.07, -0.002, -0.162, 2, 0, 0, -2, -1),
    (-19.55, 0.28, 0.010, 0.673, 0, 2, 0, 0, 0),
    (-5042.06, 71.94, 2.475, 173.475, 0, 0, 2, -2, 2),
    (122.29, -1.76, -0.062, -4.321, 0, 0, 2, -2, 1),
    (26.27, -0.38, -0.014, -0.952, 0, 0, 2, -2, 0),
    (-195.78, 3.20, 0.165, 10.104, 0, 1, 2, -2, 2),
    (3.38, -0.06, -0.003, -0.178, 0, 1, 2, -2, 1),
    (-5.95, 0.11, 0.008, 0.409, 0, 2, 2, -2, 2),
    (-8.82, 0.30, 0.054, 1.590, -1, -1, 0, 2, 0),
    (1.87, -0.07, -0.013, -0.361, 1, 0, -2, 2, -1),
    (13.56, -0.49, -0.096, -2.667, -1, 0, 0, 2, 1),
    (-187.98, 6.78, 1.339, 37.128, -1, 0, 0, 2, 0),
    (12.15, -0.44, -0.087, -2.410, -1, 0, 0, 2, -1),
    (-5.65, 0.21, 0.045, 1.192, 1, -1, 0, 0, 0),
    (4.82, -0.18, -0.039, -1.025, 0, 0, 0, 1, 0),
    (55.99, -2.23, -0.506, -12.716, 1, 0, 0, 0, 1),
    (-849.42, 33.91, 7.731, 193.690, 1, 0, 0, 0, 0),
    (54.90, -2.20, -0.503, -12.569, 1, 0, 0, 0, -1),
    (44.68, -1.80, -0.419, -10.362, -1, 0, 2, 0, 2),
    (18.10, -0.73, -0.171, -4.215, -1, 0, 2, 0, 1),
    (4.84, -0.20, -0.046, -1.132, -1, 0, 2, 0, 0),
    (4.04, -0.17, -0.042, -0.991, 1, 1, 0, 0, 0),
    (10.27, -0.45, -0.119, -2.696, 1, 0, 2, -2, 2),
    (5.10, -0.22, -0.059, -1.342, 1, 0, 2, -2, 1),
    (-1.51, 0.09, 0.034, 0.595, -2, 0, 0, 4, 0),
    (-5.09, 0.30, 0.123, 2.080, 0, -1, 0, 2, 0),
    (-5.30, 0.32, 0.136, 2.250, 0, 0, 0, 2, 1),
    (-74.13, 4.48, 1.908, 31.545, 0, 0, 0, 2, 0),
    (4.74, -0.29, -0.122, -2.021, 0, 0, 0, 2, -1),
    (-2.46, 0.15, 0.067, 1.088, 0, -1, 2, 0, 2),
    (1.82, -0.11, -0.052, -0.827, 2, 0, 0, 0, 1),
    (-34.07, 2.15, 0.978, 15.536, 2, 0, 0, 0, 0),
    (2.21, -0.14, -0.064, -1.008, 2, 0, 0, 0, -1),
    (-779.88, 49.36, 22.702, 358.699, 0, 0, 2, 0, 2),
    (-322.67, 20.45, 9.423, 148.708, 0, 0, 2, 0, 1),
    (-30.11, 1.91, 0.882, 13.907, 0, 0, 2, 0, 0),
    (2.58, -0.17, -0.079, -1.231, 0, 1, 2, 0, 2),
    (2.19, -0.14, -0.070, -1.074, 2, 0, 2, -2, 2),
    (0.84, -0.06, -0.027, -0.414, 2, 0, 2, -2, 1),
    (-1.52, 0.11, 0.069, 0.949, -1, 0, 0, 4, 0),
    (-0.92, 0.07, 0.044, 0.590, -1, -1, 2, 2, 2),
    (-0.77, 0.06, 0.037, 0.500, 1, 0, 0, 2, 1),
    (-7.46, 0.56, 0.363, 4.879, 1, 0, 0, 2, 0),
    (-19.42, 1.45, 0.952, 12.766, -1, 0, 2, 2, 2),
    (-8.04, 0.60, 0.395, 5.291, -1, 0, 2, 2, 1),
    (-0.72, 0.05, 0.036, 0.478, -1, 0, 2, 2, 0),
    (-0.93, 0.07, 0.047, 0.626, 1, -1, 2, 0, 2),
    (-1.78, 0.13, 0.092, 1.218, 3, 0, 0, 0, 0),
    (-97.40, 7.37, 5.068, 67.010, 1, 0, 2, 0, 2),
    (-40.31, 3.05, 2.101, 27.770, 1, 0, 2, 0, 1),
    (-3.77, 0.28, 0.197, 2.601, 1, 0, 2, 0, 0),
    (0.80, -0.06, -0.043, -0.563, 1, 1, 2, 0, 2),
    (-0.55, 0.04, 0.037, 0.464, 0, 0, 0, 4, 0),
    (-0.82, 0.07, 0.056, 0.710, 0, -1, 2, 2, 2),
    (-0.64, 0.05, 0.045, 0.565, 2, 0, 0, 2, 0),
    (-11.87, 0.94, 0.832, 10.509, 0, 0, 2, 2, 2),
    (-4.91, 0.39, 0.345, 4.355, 0, 0, 2, 2, 1),
    (-0.46, 0.04, 0.032, 0.406, 0, 0, 2, 2, 0),
    (-9.48, 0.75, 0.688, 8.684, 2, 0, 2, 0, 2),
    (-3.93, 0.31, 0.285, 3.600, 2, 0, 2, 0, 1),
    (-0.45, 0.04, 0.038, 0.484, -1, 0, 2, 4, 2),
    (-2.25, 0.18, 0.195, 2.502, 1, 0, 2, 2, 2),
    (-0.93, 0.07, 0.081, 1.037, 1, 0, 2, 2, 1),
    (-0.84, 0.07, 0.075, 0.964, 3, 0, 2, 0, 2),
    (-0.35, 0.03, 0.031, 0.400, 3, 0, 2, 0, 1),
    (-0.31, 0.02, 0.031, 0.412, 2, 0, 2, 2, 2),
)
# fmt: on
