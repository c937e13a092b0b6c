"""Empirical free core nutation amplitudes (S. Lambert, IERS Conventions 2010, Section 5.5.5).

Rows are ``(mjd, x_cos, x_sin, sigma)`` with amplitudes and their formal
uncertainty in microarcseconds, one row per year from 1984 to 2014.
"""

# fmt: off

FCN_TABLE = (
    (45700.0,    4.55,  -36.58, 19.72),
    (46066.0, -141.82, -105.35, 11.12),
    (46431.0, -246.56, -170.21,  9.47),
    (46796.0, -281.89, -159.24,  8.65),
    (47161.0, -255.05,  -43.58,  8.11),
    (47527.0, -210.46,  -88.56,  7.31),
    (47892.0, -187.79,  -57.35,  6.41),
    (48257.0, -163.01,   26.26,  5.52),
    (48622.0, -145.53,   44.65,  4.80),
    (48988.0, -145.31,   51.49,  5.95),
    (49353.0, -132.93,   73.03,  4.68),
    (49718.0, -130.93,   98.61,  4.76),
    (50083.0, -125.61,  117.50,  5.13),
    (50449.0, -130.16,  120.83,  4.88),
    (50814.0, -103.44,  125.25,  4.49),
    (51179.0,  -76.67,  141.33,  3.57),
    (51544.0,  -88.83,  149.24,  2.71),
    (51910.0,  -97.26,  150.67,  2.28),
    (52275.0,  -98.96,  161.38,  2.11),
    (52640.0,  -96.08,  171.33,  2.04),
    (53005.0,  -99.14,  174.26,  2.24),
    (53371.0,  -95.03,  178.86,  2.45),
    (53736.0,  -90.28,  174.76,  2.21),
    (54101.0,  -83.13,  173.79,  2.42),
    (54466.0,  -71.48,  171.71,  2.25),
    (54832.0,  -54.38,  179.95,  2.22),
    (55197.0,  -38.26,  187.71,  2.39),
    (55562.0,  -38.11,  182.62,  2.54),
    (55927.0,  -31.55,  182.96,  2.44),
    (56293.0,  -15.15,  181.58,  3.48),
    (56658.0,   -5.60,  178.95,  4.67),
)

# fmt: on
