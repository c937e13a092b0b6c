"""Series coefficients for the nutation angles in longitude and obliquity.

Rows follow the layout of :mod:`trs2crs._cip_data`:
``(sin_amplitude, cos_amplitude, l, l', F, D, Om, L_Me, L_Ve, L_E, L_Ma,
L_J, L_Sa, L_U, L_Ne, p_A)`` with amplitudes in microarcseconds, grouped
in tiers by power of ``t``.

The IAU 2000A sets hold the 678 luni-solar terms (with their secular
rates in the ``j = 1`` tier) followed by the 687 planetary terms of the
MHB2000 model, as tabulated in the SOFA/ERFA ``nut00a`` routine.  The
IAU 2006 sets are the IAU 2000A_R06 series of IERS Conventions (2010)
Tables 5.3a and 5.3b, which already carry the IAU 2006 adjustments.
"""

# fmt: off

PSI2000_TERMS = (
    # j = 0
    (
        (-17206416.1, 3338.6, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1317090.6, -1369.6, 0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-227641.3, 279.6, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (207455.4, -69.8, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (147587.7, 1181.7, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-51682.1, -52.4, 0, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (71115.9, -87.2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-38729.8, 38.0, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-30146.1, 81.6, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (21582.9, 11.1, 0, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (12822.7, 18.1, 0, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (12345.7, 1.9, -1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (15699.4, -16.8, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6311.0, 2.7, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5797.6, -18.9, -1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5964.1, 14.9, -1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5161.3, 12.9, 1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4589.3, 3.1, -2, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6338.4, -15.0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3857.1, 15.8, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3248.1, 0.0, 0, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4772.2, -1.8, -2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3104.6, 13.1, 2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2859.3, -0.1, 1, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2044.1, 1.0, -1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2924.3, -7.4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2588.7, -6.6, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1405.3, 7.9, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1516.4, 1.1, -1, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1579.4, -1.6, 0, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2178.3, 1.3, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1287.3, -3.7, 1, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1265.4, 6.3, 0, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1020.4, 2.5, -1, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1670.7, -1.0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-769.1, 4.4, 1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1102.4, -1.4, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (756.6, -1.1, 0, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-663.7, 2.5, 0, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-714.1, 0.8, 0, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-630.2, 0.2, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (580.0, 0.2, 1, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (644.3, -0.7, 2, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-577.4, -1.5, -2, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-535.0, 2.1, 2, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-475.2, -0.3, 0, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-494.0, -2.1, 0, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (735.0, -0.8, -1, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (406.5, 0.6, 2, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (657.9, -2.4, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (357.9, 0.5, 0, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (472.5, -0.6, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-307.5, -0.2, -2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-290.4, 1.5, 3, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (434.8, -1.0, 0, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-287.8, 0.8, 1, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-423.0, 0.5, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-281.9, 0.7, -1, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-405.6, 0.5, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-264.7, 1.1, 0, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-229.4, -1.0, -2, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (248.1, -0.7, 1, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (217.9, -0.2, 2, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (327.6, 0.1, -1, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-338.9, 0.5, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (333.9, -1.3, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-198.7, -0.6, -1, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-198.1, 0.0, 1, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (402.6, -35.3, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (166.0, -0.5, 0, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-152.1, 0.9, -1, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (131.4, 0.0, -1, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-128.3, 0.0, 0, -2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-133.1, 0.8, 1, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (138.3, -0.2, -2, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (140.5, 0.4, -1, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (129.0, 0.0, 1, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-121.4, 0.5, -2, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (114.6, -0.3, -1, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (101.9, -0.1, 2, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-110.0, 0.9, 2, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-97.0, 0.2, 1, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (157.5, -0.6, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (93.4, -0.3, 3, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (92.2, -0.1, 0, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (81.5, -0.1, 0, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (83.4, 0.2, 0, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (124.8, 0.0, 0, 0, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (133.8, -0.5, -1, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (71.6, -0.2, 2, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (128.2, -0.3, -2, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (74.2, 0.1, -1, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (102.0, -2.5, -1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (71.5, -0.4, 0, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-66.6, -0.3, 0, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-66.7, 0.1, 0, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-70.4, 0.0, 0, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-69.4, 0.5, 0, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-101.4, -0.1, -2, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-58.5, -0.2, 1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-94.9, 0.1, -1, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-59.5, 0.0, -1, 1, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (52.8, 0.0, 1, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-59.0, 0.4, 1, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (57.0, -0.2, -1, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-50.2, 0.3, 3, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-87.5, 0.1, 0, 1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-49.2, -0.3, -1, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (53.5, -0.2, 0, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-46.7, 0.1, -1, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (59.1, 0.0, 0, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-45.3, -0.1, 1, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (76.6, 0.1, -1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-44.6, 0.2, 0, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-48.8, 0.2, 2, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-46.8, 0.0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-42.1, 0.1, 1, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (46.3, 0.0, -1, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-67.3, 0.2, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (65.8, 0.0, 0, -1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-43.8, 0.0, 0, 3, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-39.0, 0.0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (63.9, -0.2, -1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (41.2, -0.2, 2, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-36.1, 0.0, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (36.0, -0.1, 1, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (58.8, -0.3, 2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-57.8, 0.1, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-39.6, 0.0, -1, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (56.5, -0.1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-33.5, -0.1, 0, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (35.7, 0.1, -1, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (32.1, 0.1, 0, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-30.1, -0.1, -1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-33.4, 0.0, 1, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (49.3, -0.2, 1, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (49.4, -0.2, 0, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (33.7, -0.1, 1, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (28.0, -0.1, 0, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (30.9, 0.1, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-26.3, 0.2, -1, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (25.3, 0.1, 1, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (24.5, 0.0, 1, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (41.6, -0.2, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-22.9, 0.0, -1, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (23.1, 0.0, -2, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-25.9, 0.2, 4, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (37.5, -0.1, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (25.2, 0.0, 2, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-24.5, 0.1, 0, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (24.3, -0.1, 1, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (20.8, 0.1, -1, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (19.9, 0.0, 0, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-20.8, 0.1, -2, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (33.5, -0.2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-32.5, 0.1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-18.7, 0.0, -1, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (19.7, -0.1, -1, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-19.2, 0.2, 2, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-18.8, 0.0, 0, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (27.6, 0.0, -1, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-28.6, 0.1, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (18.6, -0.1, 0, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-21.9, 0.0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (27.6, 0.0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-15.3, -0.1, 0, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-15.6, 0.0, 0, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-15.4, 0.1, 0, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-17.4, 0.1, -1, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-16.3, 0.2, 1, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-22.8, 0.0, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.1, -0.4, -2, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (17.5, 0.0, -2, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-15.9, 0.0, -1, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (14.1, 0.0, 0, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (14.7, 0.0, 3, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-13.2, 0.0, -2, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (15.9, -2.8, 1, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (21.3, 0.0, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (12.3, 0.0, -2, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-11.8, -0.1, -3, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (14.4, -0.1, 1, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-12.1, 0.1, 0, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-13.4, 0.1, 3, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.5, 0.0, -1, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.2, 0.0, 2, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (12.0, 0.0, 0, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (10.1, 0.0, 2, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-11.3, 0.0, -1, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.6, 0.0, 0, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-12.9, 0.1, 0, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-11.4, 0.0, 2, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (11.3, -0.1, 4, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.2, 0.0, 2, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.4, 0.0, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.0, -0.1, 1, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.7, 0.0, 0, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (16.1, 0.0, -3, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.6, 0.0, -1, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (15.1, -0.1, -1, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.4, 0.0, -1, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-11.0, 0.0, -2, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.0, 0.1, 1, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.2, -0.5, -2, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.2, 0.0, -2, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.2, 0.0, 2, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.8, 0.0, -3, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.7, 0.0, -2, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, 0.0, -1, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.4, 0.0, 0, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.3, 0.0, -1, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.3, 1.0, 0, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.3, 0.0, -1, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.1, 0.0, 2, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (12.8, 0.0, 0, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.9, 0.0, -2, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.3, 0.0, -1, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.4, 0.0, -1, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.3, 0.0, 3, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.1, 0.0, -1, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.7, 0.0, 2, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.4, 0.0, 0, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.2, 0.1, 0, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.2, 0.1, 2, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.4, 0.0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.8, 0.0, -1, -1, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.1, 0.0, 0, -2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.1, 0.0, 1, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.2, 0.0, 1, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.3, 0.0, -1, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.3, 0.0, 1, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (11.5, 0.0, -2, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.3, 0.0, -1, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.3, 0.0, -2, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.4, 0.0, 0, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.3, -0.3, 1, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.9, 0.0, 2, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.7, 0.0, 1, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.4, 0.0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.4, 0.0, 2, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.3, 0.0, 3, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.8, 0.0, -2, 2, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.3, 0.0, 1, 0, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.5, 0.0, 1, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.7, 0.0, -1, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.8, 0.0, 0, -1, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.5, 0.0, 0, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.6, 0.0, -2, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.8, 0.0, -2, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.5, 0.0, -1, 0, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.5, 0.0, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.9, 0.0, 0, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.4, -0.3, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.9, 0.0, 1, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.5, 0.0, 1, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.1, 0.0, 2, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.0, 0.0, 1, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.1, 0.0, 2, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.2, 0.0, -2, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5.1, 0.0, 1, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.2, 0.0, 0, 1, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.9, 0.0, 1, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.6, 0.0, -2, 0, 4, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5.3, 0.0, 1, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.2, 0.0, 1, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.1, -0.1, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.7, 0.0, 2, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.3, 0.0, 3, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.5, 0.0, 4, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.4, 0.0, -2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.3, 0.0, 0, 1, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.1, 0.0, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.8, 0.0, 0, -1, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.8, 0.0, 2, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.3, 0.0, -1, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.0, 0.0, 1, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.8, 0.0, 0, 1, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.7, 0.0, 0, 0, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.8, 0.0, -1, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.1, 0.0, 0, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.9, 0.0, -2, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.8, 0.0, -1, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.2, 0.0, 2, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.5, 0.0, 0, 0, 4, -4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.4, 0.0, 0, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.8, 0.0, -1, -2, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5.1, 0.0, -2, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.6, 0.0, 1, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.4, 0.0, -3, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.6, 0.0, -3, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.0, 0.0, -2, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.5, 0.0, 2, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.7, 0.0, -2, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.7, 0.0, 1, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.6, 0.0, 0, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.6, 0.0, -1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.5, 0.0, 0, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.7, 0.0, 1, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.2, 0.0, 1, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.5, 0.0, -1, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.2, 0.0, 3, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.5, 0.0, 0, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.7, 0.0, 2, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.2, 0.0, 0, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.7, 0.0, 2, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.0, 0.0, -1, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.2, 0.0, 1, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.1, 0.0, 1, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.7, 0.0, 0, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.1, 0.0, -1, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.9, 0.0, 3, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.2, 0.0, -1, 0, 4, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.3, 0.0, 1, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.3, 0.0, -2, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.6, 0.0, 2, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.2, 0.0, -1, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.9, 0.0, 1, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.7, 0.0, 2, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.0, 0.0, 1, 1, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, -3, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.1, 0.0, 2, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.4, 0.0, -1, 0, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, -4, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.6, 0.0, -1, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.9, 0.0, 0, 0, -2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.2, 0.0, 1, 0, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.1, 0.0, 0, -1, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.9, 0.0, -2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.5, 0.0, 0, 0, 2, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.0, 0.0, -2, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.8, 0.0, -2, 0, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.7, 0.0, 0, -2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.2, 0.0, 1, 2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.4, 0.0, 3, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.4, 0.0, -1, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, 0.0, 1, -1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.4, 0.0, 1, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.4, 0.0, -3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.8, 0.0, -3, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.8, 0.0, -2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.1, 0.0, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.6, 0.0, -3, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.9, 0.0, -1, -1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.8, 0.0, 0, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, 2, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.7, 0.0, 0, 2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, 1, 0, 0, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.6, 0.0, -2, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.2, 0.0, -2, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.0, 0.0, -4, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.3, 0.0, 1, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.7, 0.0, -1, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.4, 0.0, 0, 0, 4, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 3, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.4, 0.0, -3, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.9, 0.0, -3, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.4, 0.0, 1, -1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.0, 0.0, -1, -1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, 1, -2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.8, 0.0, 1, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.3, 0.0, 0, 0, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.7, 0.0, -1, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.2, 0.0, 1, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.5, 0.0, 0, -1, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, -1, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.3, 0.0, 1, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.8, 0.0, -1, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.5, 0.0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, -1, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.9, 0.0, -1, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.6, 0.0, 3, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.8, 0.0, 1, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, 1, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 0.0, -2, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.1, 0.0, 0, -1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.5, 0.0, -2, 1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, -2, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.9, 0.0, 2, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.9, 0.0, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.2, 0.0, 0, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.2, 0.0, 1, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, -2, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.0, 0.0, 2, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.0, 0.0, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.7, 0.0, 0, -1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.5, 0.0, 0, 0, 4, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.8, 0.0, 0, 2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.4, 0.0, -3, 0, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.2, 0.0, -1, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.5, 0.0, 1, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.3, 0.0, -1, 0, 0, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.4, 0.0, -1, -2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.3, 0.0, -1, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.7, 0.0, 1, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.2, 0.0, 0, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, -2, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 0.0, 0, 0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.5, 0.0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.2, 0.0, -1, 1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.8, 0.0, -1, -1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.5, 0.0, -2, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.3, 0.0, 1, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.2, 0.0, 0, -1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.9, 0.0, 3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.5, 0.0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.2, 0.0, 1, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.8, 0.0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.5, 0.0, 1, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.3, 0.0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.2, 0.0, 3, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.8, 0.0, 2, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.9, 0.0, 1, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, 0, 0, 4, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.1, 0.0, 1, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.3, 0.0, -2, 0, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.6, 0.0, 0, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.9, 0.0, -2, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.2, 0.0, 0, -2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.7, 0.0, 0, -1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.6, 0.0, -1, 0, 2, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.9, 0.0, -2, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, 2, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.9, 0.0, 2, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.9, 0.0, -1, 1, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.8, 0.0, 3, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.8, 0.0, 4, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.6, 0.0, -1, 0, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, -1, -2, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.3, 0.0, -3, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.6, 0.0, -1, 0, 2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.2, 0.0, 3, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.8, 0.0, 3, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.0, 0.0, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.4, 0.0, 1, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 0.0, 5, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.6, 0.0, 0, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.6, 0.0, 2, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.7, 0.0, 0, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.4, 0.0, 1, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.2, 0.0, 3, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.4, 0.0, 3, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.3, 0.0, 5, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.3, 0.0, 0, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.5, 0.0, 4, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -198.8, 0, -1, 1, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -6.3, -1, 0, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, -2, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 1, 0, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 2, -2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 36.4, -1, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -104.4, -1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -1, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -2, 2, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 33.0, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, -4, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -3, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 1, 0, -2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 2, -1, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -4, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -3, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, -1, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, -2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 0, -2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, -3, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, -2, -1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, -1, 0, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.2, 0.0, -4, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 2, 1, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 2, -1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, -2, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 1, 1, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.2, 1, 0, 1, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 0, 2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 1, -1, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -1, 1, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, -2, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -2, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, -2, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 2, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 1, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -1, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 2, 0, 0, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -1, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, -1, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.8, 0.0, 0, 0, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, -2, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 1, -2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 1, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -3, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, -1, 1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -1, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, -3, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -3, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 2, 0, 2, -6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 0, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 2, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -2, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 0, -1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, 0, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 2, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -4, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -1, -1, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, 0, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -3, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -2, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.8, 0.0, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -2, -1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 0, 2, -6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -1, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 1, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 2, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 2, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 1, 4, -4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 1, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, -1, -1, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, -1, -3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -1, 0, -2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, -1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -2, 0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.3, 0.0, 0, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, -3, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 0.0, 1, 1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -1, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 1.3, 1, -2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.0, 0, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -16.2, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 7.5, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, -1, 2, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 2, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 3, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 0, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 2, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -1, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, -2, -2, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.9, 0.0, 0, -3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 0, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, -1, -1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, 0, 0, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -1, 0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 1, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.6, -0.3, 0, -2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, -1, 0, 1, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, 0.0, -1, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -1, -1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, 0.0, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.3, 2, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 1, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.3, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.6, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 2, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, -1, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 4, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 1, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, 4, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.8, 0.0, 2, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 2, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, 0.0, -1, -2, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -1, -3, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -3, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -3, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.8, 0.0, -1, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -3, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, 0.0, -3, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, 0, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -2, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.8, 0.0, -4, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, -1, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -3, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, -1, 1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, 1, -2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 0, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, -1, 0, 2, 2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -2, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -1, 1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 3, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 2, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 2, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.6, 0, 0, 3, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.0, 0, 0, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, -1, 2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.3, 0.0, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 1, 2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 3, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 1, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -2, -1, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, -2, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, 0, 0, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, -2, -2, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 0, -3, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, 0, 0, 0, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, -1, -1, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.3, 0.0, -2, 0, 2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 2, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, 0, 1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 1, -1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 0, 0, 2, 2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, -2, 0, 4, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 2, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.2, 0.0, 2, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 2, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 3, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, 1, 0, 3, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, 1, 1, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 0, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 2, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 4, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -1, -1, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -3, -1, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -1, 0, 0, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -3, 0, 2, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.2, 0.0, 1, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -2, 0, 2, 5, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 1, -2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 3, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 1, -1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 0, 2, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -1, 1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, 0, 1, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -1, 0, 4, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 2, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, 2, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 1, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 3, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 3, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -2, -1, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, 0, -2, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, -2, 0, 2, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 2, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 0.0, 2, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 2, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 0, 0, 2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 1, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 4, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, 0.0, 2, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 0, 4, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, 4, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 3, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 2, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 4, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -1, -1, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -1, 0, 2, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 1, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 3, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 5, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 2, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 2, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (144.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 8, -16, 4, 5, 0, 0, 0),
        (5.6, -11.7, 0, 0, 0, 0, 0, 0, 0, -8, 16, -4, -5, 0, 0, 2),
        (12.5, -4.3, 0, 0, 0, 0, 0, 0, 0, 8, -16, 4, 5, 0, 0, 2),
        (0.0, 0.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 2, 2),
        (0.3, -0.7, 0, 0, 0, 0, 0, 0, 0, -4, 8, -1, -5, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 1),
        (-11.4, 0.0, 0, 0, 1, -1, 1, 0, 0, 3, -8, 3, 0, 0, 0, 0),
        (-21.9, 8.9, -1, 0, 0, 0, 0, 0, 10, -3, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -2, 6, -3, 0, 2),
        (-46.2, 160.4, 0, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (9.9, 0.0, 0, 0, 1, -1, 1, 0, 0, -5, 8, -3, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -4, 8, -3, 0, 0, 0, 1),
        (0.0, 0.6, 0, 0, 0, 0, 0, 0, 0, 4, -8, 1, 5, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, -5, 6, 4, 0, 0, 0, 0, 2),
        (-1.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 2),
        (1.4, -21.8, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 1),
        (3.1, -48.1, 0, 0, 1, -1, 1, 0, 0, -1, 0, 2, -5, 0, 0, 0),
        (-49.1, 12.8, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 0),
        (-308.4, 512.3, 0, 0, 1, -1, 1, 0, 0, -1, 0, -2, 5, 0, 0, 0),
        (-144.4, 240.9, 0, 0, 0, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 1),
        (1.1, -2.4, 0, 0, 0, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 2),
        (2.6, -0.9, 2, 0, -1, -1, 0, 0, 0, 3, -7, 0, 0, 0, 0, 0),
        (10.3, -6.0, 1, 0, 0, -2, 0, 0, 19, -21, 3, 0, 0, 0, 0, 0),
        (0.0, -1.3, 0, 0, 1, -1, 1, 0, 2, -4, 0, -3, 0, 0, 0, 0),
        (-2.6, -2.9, 1, 0, 0, -1, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.9, -2.7, 0, 0, 1, -1, 1, 0, 0, -1, 0, -4, 10, 0, 0, 0),
        (1.2, 0.0, -2, 0, 0, 2, 1, 0, 0, 2, 0, 0, -5, 0, 0, 0),
        (-0.7, 0.0, 0, 0, 0, 0, 0, 0, 3, -7, 4, 0, 0, 0, 0, 0),
        (0.0, 2.4, 0, 0, -1, 1, 0, 0, 0, 1, 0, 1, -1, 0, 0, 0),
        (28.4, 0.0, -2, 0, 0, 2, 1, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (22.6, 10.1, -1, 0, 0, 0, 0, 0, 18, -16, 0, 0, 0, 0, 0, 0),
        (0.0, -0.8, -2, 0, 1, 1, 2, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (0.0, -0.6, -1, 0, 1, -1, 1, 0, 18, -17, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, -1, 0, 0, 1, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (-4.1, 17.5, 0, 0, 0, 0, 0, 0, -8, 13, 0, 0, 0, 0, 0, 2),
        (0.0, 1.5, 0, 0, 2, -2, 2, 0, -8, 11, 0, 0, 0, 0, 0, 0),
        (42.5, 21.2, 0, 0, 0, 0, 0, 0, -8, 13, 0, 0, 0, 0, 0, 1),
        (120.0, 59.8, 0, 0, 1, -1, 1, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (23.5, 33.4, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, 0),
        (1.1, -1.2, 0, 0, 1, -1, 1, 0, 8, -14, 0, 0, 0, 0, 0, 0),
        (0.5, -0.6, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, 1),
        (-0.5, 0.0, -2, 0, 0, 2, 1, 0, 0, 2, 0, -4, 5, 0, 0, 0),
        (0.6, 0.0, -2, 0, 0, 2, 2, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (1.5, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -3, 1, 0, 0, 0),
        (1.3, 0.0, 0, 0, 0, 0, 1, 0, 3, -5, 0, 2, 0, 0, 0, 0),
        (-0.6, -0.9, -2, 0, 0, 2, 0, 0, 0, 2, 0, -4, 3, 0, 0, 0),
        (26.6, -7.8, 0, 0, -1, 1, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0),
        (-46.0, -43.5, 0, 0, 0, 0, 1, 0, 0, -1, 2, 0, 0, 0, 0, 0),
        (0.0, 1.5, 0, 0, 1, -1, 2, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -1, 0, 1, 0, 1, 0, 3, -5, 0, 0, 0, 0, 0, 0),
        (0.0, 13.1, -1, 0, 0, 1, 0, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -2, -2, 0, 0, 0),
        (0.0, 0.3, -2, 0, 2, 0, 2, 0, 0, -5, 9, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, -1, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0),
        (-1.7, -1.9, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 2, 0),
        (-0.9, -1.1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 1),
        (-0.6, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2),
        (-1.6, 0.8, -1, 0, 0, 1, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, -1, 1, 0, 0, 0, 1, 0, 0, 2, 0, 0, 0),
        (1.1, 2.4, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, 2, 0, 0, 0),
        (-0.3, -0.4, 0, 0, 0, 0, 1, 0, 0, -9, 17, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 2, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (0.0, -0.8, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 2, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0),
        (0.0, 0.5, 1, 0, 0, -2, 0, 0, 17, -16, 0, -2, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 1, -1, 1, 0, 0, -1, 0, 1, -3, 0, 0, 0),
        (-0.6, 0.4, -2, 0, 0, 2, 1, 0, 0, 5, -6, 0, 0, 0, 0, 0),
        (-0.3, -0.5, 0, 0, -2, 2, 0, 0, 0, 9, -13, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, 1, 0, 0, 0),
        (0.4, 2.4, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0),
        (-4.2, 2.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0),
        (-1.0, 23.3, 0, 0, -2, 2, 0, 0, 5, -6, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, -1, 1, 1, 0, 5, -7, 0, 0, 0, 0, 0, 0),
        (7.8, -1.8, -2, 0, 0, 2, 0, 0, 6, -8, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 2, 0, 1, -3, 1, 0, -6, 7, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 0, 0, 2, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, -1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 0, 0),
        (0.0, -0.8, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 2, 0, 0),
        (0.0, -0.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1),
        (-0.7, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2),
        (-1.4, 0.8, 0, 0, 0, 0, 0, 0, 0, -8, 15, 0, 0, 0, 0, 2),
        (0.0, 0.8, 0, 0, 0, 0, 0, 0, 0, -8, 15, 0, 0, 0, 0, 1),
        (0.0, 1.9, 0, 0, 1, -1, 1, 0, 0, -9, 15, 0, 0, 0, 0, 0),
        (4.5, -2.2, 0, 0, 0, 0, 0, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 0, -1, -1, 0, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (0.0, -0.3, 2, 0, 0, -2, 0, 0, 2, -5, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, -2, 0, 0, 2, 0, 0, 0, 2, 0, -5, 5, 0, 0, 0),
        (0.3, 0.5, 2, 0, 0, -2, 1, 0, 0, -6, 8, 0, 0, 0, 0, 0),
        (8.9, -1.6, 2, 0, 0, -2, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.0, 0.3, -2, 0, 1, 1, 0, 0, 0, 1, 0, -3, 0, 0, 0, 0),
        (-0.3, 0.7, -2, 0, 1, 1, 1, 0, 0, 1, 0, -3, 0, 0, 0, 0),
        (-34.9, -6.2, -2, 0, 0, 2, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (-1.5, 2.2, -2, 0, 0, 2, 0, 0, 0, 6, -8, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -1, -5, 0, 0, 0),
        (-5.3, 0.0, -1, 0, 0, 1, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.5, 0.0, -1, 0, 1, 1, 1, 0, -20, 20, 0, 0, 0, 0, 0, 0),
        (0.0, -0.8, 1, 0, 0, -2, 0, 0, 20, -21, 0, 0, 0, 0, 0, 0),
        (1.5, -0.7, 0, 0, 0, 0, 1, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 2, -2, 1, 0, 0, -10, 15, 0, 0, 0, 0, 0),
        (-2.1, -7.8, 0, 0, -1, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0),
        (2.0, -7.0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (0.0, 0.6, 0, 0, 1, -1, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.5, 0.3, 0, 0, 1, -1, 1, 0, 0, -1, 0, -2, 4, 0, 0, 0),
        (-1.7, -0.4, 2, 0, 0, -2, 1, 0, -6, 8, 0, 0, 0, 0, 0, 0),
        (0.0, 0.6, 0, 0, -2, 2, 1, 0, 5, -6, 0, 0, 0, 0, 0, 0),
        (3.2, 1.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 1),
        (17.4, 8.4, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, -1, 0, 0, 0),
        (1.1, 5.6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0),
        (-6.6, -1.2, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 1, 0, 0, 0),
        (4.7, 0.8, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1),
        (0.0, 0.8, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 2),
        (1.0, -2.2, 0, 0, 2, -2, 1, 0, 0, -9, 13, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 1, 0, 0, 7, -13, 0, 0, 0, 0, 0),
        (-2.4, 1.2, -2, 0, 0, 2, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0),
        (0.5, -0.6, 0, 0, 0, 0, 0, 0, 0, 9, -17, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -9, 17, 0, 0, 0, 0, 2),
        (0.4, 0.3, 1, 0, 0, -1, 1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (0.0, 2.9, 1, 0, 0, -1, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (-0.5, -0.4, 0, 0, 0, 0, 2, 0, 0, -1, 2, 0, 0, 0, 0, 0),
        (0.8, -0.3, 0, 0, -1, 1, 1, 0, 0, 0, 2, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, -2, 2, 0, 1, 0, -2, 0, 0, 0, 0, 0, 0),
        (1.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 2, 0, 0, 0, 0),
        (0.3, 0.0, -2, 0, 0, 2, 1, 0, 0, 2, 0, -3, 1, 0, 0, 0),
        (-0.5, 0.0, -2, 0, 0, 2, 1, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (4.6, 6.6, 0, 0, 0, 0, 1, 0, 8, -13, 0, 0, 0, 0, 0, 0),
        (-1.4, 0.7, 0, 0, -1, 1, 0, 0, 8, -12, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 2, -2, 1, 0, -8, 11, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -1, 0, 0, 1, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (-6.8, -3.4, -1, 0, 0, 0, 1, 0, 18, -16, 0, 0, 0, 0, 0, 0),
        (0.0, 1.4, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 1, 0, 0, 0),
        (1.0, -0.6, 0, 0, 0, 0, 1, 0, 3, -7, 4, 0, 0, 0, 0, 0),
        (-0.5, -0.4, -2, 0, 1, 1, 1, 0, 0, -3, 7, 0, 0, 0, 0, 0),
        (-0.3, 0.5, 0, 0, 1, -1, 2, 0, 0, -1, 0, -2, 5, 0, 0, 0),
        (7.6, 1.7, 0, 0, 0, 0, 1, 0, 0, 0, 0, -2, 5, 0, 0, 0),
        (8.4, 29.8, 0, 0, 0, 0, 1, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.3, 0.0, 1, 0, 0, 0, 1, 0, -10, 3, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 2, -2, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -1, 0, 0, 0, 1, 0, 10, -3, 0, 0, 0, 0, 0, 0),
        (-8.2, 29.2, 0, 0, 0, 0, 1, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (-7.3, 1.7, 0, 0, 0, 0, 1, 0, 0, 0, 0, 2, -5, 0, 0, 0),
        (-0.9, -1.6, 0, 0, -1, 1, 0, 0, 0, 1, 0, 2, -5, 0, 0, 0),
        (0.3, 0.0, 2, 0, -1, -1, 1, 0, 0, 3, -7, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, 0, -5, 0, 0, 0),
        (-0.9, -0.5, 0, 0, 0, 0, 1, 0, -3, 7, -4, 0, 0, 0, 0, 0),
        (-43.9, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (5.7, -2.8, 1, 0, 0, 0, 1, 0, -18, 16, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, -2, 0, 1, 1, 1, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 1, -1, 2, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (-4.0, 5.7, 0, 0, 0, 0, 1, 0, -8, 13, 0, 0, 0, 0, 0, 0),
        (2.3, 0.7, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 1),
        (27.3, 8.0, 0, 0, 1, -1, 1, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (-44.9, 43.0, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0),
        (-0.8, -4.7, 0, 0, 1, -1, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (0.6, 4.7, 0, 0, 0, 0, 0, 0, 0, -1, 2, 0, 0, 0, 0, 1),
        (0.0, 2.3, -1, 0, 0, 1, 1, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -1, 0, 0, 1, 1, 0, 0, 3, -4, 0, 0, 0, 0, 0),
        (0.3, -0.4, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, -2, 0, 0, 0),
        (-4.8, -11.0, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 2, 0, 0, 0),
        (5.1, 11.4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 1),
        (-13.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 2),
        (0.0, 0.4, 0, 0, 1, -1, 0, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (-2.1, -0.6, 0, 0, 0, 0, 1, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 1, -1, 2, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (-1.1, -2.1, 0, 0, 0, 0, 1, 0, 0, -2, 4, 0, 0, 0, 0, 0),
        (-1.8, -43.6, 0, 0, 2, -2, 1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (3.5, -0.7, 0, 0, -1, 1, 0, 0, 5, -7, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 0, 0, 0, 0, 1, 0, 5, -8, 0, 0, 0, 0, 0, 0),
        (1.1, -0.3, -2, 0, 0, 2, 1, 0, 6, -8, 0, 0, 0, 0, 0, 0),
        (-0.5, -0.3, 0, 0, 0, 0, 1, 0, 0, -8, 15, 0, 0, 0, 0, 0),
        (-5.3, -0.9, -2, 0, 0, 2, 1, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.0, 0.3, -2, 0, 0, 2, 1, 0, 0, 6, -8, 0, 0, 0, 0, 0),
        (0.4, 0.0, 1, 0, 0, -1, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0),
        (-5.0, 19.4, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (-1.3, 5.2, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 1),
        (-9.1, 24.8, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (0.6, 4.9, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1),
        (-0.6, -4.7, 0, 0, 1, -1, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.0, 0.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1),
        (5.2, 2.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, -1, 0, 0, 0),
        (0.0, 0.5, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0),
        (-0.4, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, 0, -1, 0, 0, 0),
        (-0.4, 0.8, 0, 0, 0, 0, 0, 0, 0, -7, 13, 0, 0, 0, 0, 2),
        (1.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 7, -13, 0, 0, 0, 0, 0),
        (0.3, 0.0, 2, 0, 0, -2, 1, 0, 0, -5, 6, 0, 0, 0, 0, 0),
        (0.0, 0.8, 0, 0, 2, -2, 1, 0, 0, -8, 11, 0, 0, 0, 0, 0),
        (0.0, 0.8, 0, 0, 2, -2, 1, -1, 0, 2, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, -2, 0, 0, 2, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0),
        (-0.8, 0.4, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 3, 0, 0, 0),
        (0.8, -0.4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 1),
        (0.0, 1.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 2),
        (-13.8, 0.0, -2, 0, 0, 2, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.0, -0.7, 0, 0, 0, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.0, -0.7, 0, 0, 0, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (5.4, 0.0, 2, 0, 0, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.0, 1.0, 0, 0, 1, -1, 2, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (-0.7, 0.0, 0, 0, 1, -1, 2, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (-3.7, 3.5, 0, 0, 0, 0, 1, 0, 0, 1, -2, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, -1, 1, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (-0.4, 0.9, 0, 0, -1, 1, 0, 0, 0, 1, 0, 0, -2, 0, 0, 0),
        (0.8, 0.0, 0, 0, 2, -2, 1, 0, 0, -2, 0, 0, 2, 0, 0, 0),
        (-0.9, -1.4, 0, 0, 1, -1, 1, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (-0.3, -0.9, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, 1),
        (-14.5, 4.7, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, 0),
        (-1.0, 4.0, 0, 0, 1, -1, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (1.1, -4.9, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 0, 1),
        (-215.0, 0.0, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 0, 2),
        (-1.2, 0.0, 0, 0, 2, -2, 2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (8.5, 0.0, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 0, 2),
        (0.4, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 1),
        (0.3, 0.0, 0, 0, 1, -1, 1, 0, 0, 1, -4, 0, 0, 0, 0, 0),
        (-8.6, 15.3, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0),
        (-0.6, 0.9, 0, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 1),
        (0.9, -1.3, 0, 0, 1, -1, 1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (-0.8, 1.2, 0, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 1),
        (-5.1, 0.0, 0, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 2),
        (-1.1, -26.8, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 0, 2),
        (0.0, 1.2, 0, 0, 2, -2, 2, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (0.0, 0.7, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 0, 2),
        (3.1, 0.6, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 0, 1),
        (14.0, 2.7, 0, 0, 1, -1, 1, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (5.7, 1.1, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 0, 1),
        (-1.4, -3.9, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, 0, 0, 1, -1, 2, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (0.4, 1.5, 0, 0, 0, 0, 1, 0, 0, 0, 0, -1, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, -1, 1, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 2, -2, 1, 0, 0, -2, 0, 1, 0, 0, 0, 0),
        (0.0, 1.1, 0, 0, 0, 0, 0, 0, 0, -6, 11, 0, 0, 0, 0, 2),
        (0.9, 0.6, 0, 0, 0, 0, 0, 0, 0, 6, -11, 0, 0, 0, 0, 0),
        (-0.4, 1.0, 0, 0, 0, 0, 0, -1, 0, 4, 0, 0, 0, 0, 0, 2),
        (0.5, 0.3, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, 0, 0, 0),
        (1.6, 0.0, 2, 0, 0, -2, 1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, 0, -2, 0, 0, 0),
        (0.0, 0.3, 0, 0, 2, -2, 1, 0, 0, -7, 9, 0, 0, 0, 0, 0),
        (0.7, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 2),
        (-2.5, 2.2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0),
        (4.2, 22.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 1),
        (-2.7, -14.3, 0, 0, 1, -1, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.9, 4.9, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 1),
        (-116.6, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 2),
        (-0.5, 0.0, 0, 0, 2, -2, 2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-0.6, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 5, 0, 0, 2),
        (-0.8, 0.0, 0, 0, 0, 0, 1, 0, 3, -5, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, -1, 1, 0, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (11.7, 0.0, 0, 0, 2, -2, 1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.8, 0, 0, 0, 0, 1, 0, 0, 2, -4, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 2, -2, 1, 0, 0, -4, 4, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 0, 0, 1, -1, 2, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (0.0, 3.1, 0, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 0, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 1),
        (0.4, 0.0, 0, 0, 1, -1, 1, 0, 0, -4, 6, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 1),
        (-2.4, -1.3, 0, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, -1, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.0, -3.2, 0, 0, 0, 0, 1, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (0.8, 1.2, 0, 0, 0, 0, 0, 0, 0, -5, 9, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -5, 9, 0, 0, 0, 0, 1),
        (0.7, 1.3, 0, 0, 0, 0, 0, 0, 0, 5, -9, 0, 0, 0, 0, 0),
        (-0.3, 1.6, 0, 0, -1, 1, 0, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (5.0, 0.0, 0, 0, 2, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.0, -0.5, -2, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (1.3, 0.0, 0, 0, -2, 2, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 0, 0, 0, 0, 0, 0, -6, 10, 0, 0, 0, 0, 0, 1),
        (2.4, 0.5, 0, 0, 0, 0, 0, 0, -6, 10, 0, 0, 0, 0, 0, 2),
        (0.5, -1.1, 0, 0, 0, 0, 0, 0, -2, 3, 0, 0, 0, 0, 0, 2),
        (3.0, -0.3, 0, 0, 0, 0, 0, 0, -2, 3, 0, 0, 0, 0, 0, 1),
        (1.8, 0.0, 0, 0, 1, -1, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.8, 61.4, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (0.3, -0.3, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, 1),
        (0.6, 1.7, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 1),
        (-0.3, -0.9, 0, 0, 1, -1, 1, 0, 0, -1, 0, 3, 0, 0, 0, 0),
        (0.0, 0.6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 1),
        (-12.7, 2.1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 2),
        (0.3, 0.5, 0, 0, 0, 0, 0, 0, 0, 4, -8, 0, 0, 0, 0, 0),
        (-0.6, -1.0, 0, 0, 0, 0, 0, 0, 0, -4, 8, 0, 0, 0, 0, 2),
        (0.5, 0.0, 0, 0, -2, 2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (1.6, 0.9, 0, 0, 0, 0, 0, 0, 0, -4, 7, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -4, 7, 0, 0, 0, 0, 1),
        (0.0, 2.2, 0, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, 0),
        (0.0, 1.9, 0, 0, 0, 0, 1, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 0, 0, 2, -2, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.0, -0.5, 0, 0, 0, 0, 0, 0, 0, -5, 10, 0, 0, 0, 0, 2),
        (0.0, 0.3, 0, 0, 0, 0, 1, 0, -1, 2, 0, 0, 0, 0, 0, 0),
        (-0.9, 0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 2),
        (1.7, 0.0, 0, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 2),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 1),
        (-2.0, 3.4, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0),
        (-1.0, 0.0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, 1),
        (-0.4, 0.0, 0, 0, 1, -1, 1, 0, 1, -3, 0, 0, 0, 0, 0, 0),
        (2.2, -8.7, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, -1, 2, 0, 0, 0, 0, 0, 1),
        (-0.3, -0.6, 0, 0, 0, 0, 0, 0, -1, 2, 0, 0, 0, 0, 0, 2),
        (-1.6, -0.3, 0, 0, 0, 0, 0, 0, -7, 11, 0, 0, 0, 0, 0, 2),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, -7, 11, 0, 0, 0, 0, 0, 1),
        (0.4, 0.0, 0, 0, -2, 2, 0, 0, 4, -4, 0, 0, 0, 0, 0, 0),
        (-6.8, 3.9, 0, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0),
        (2.7, 0.0, 0, 0, 2, -2, 1, 0, -4, 4, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, -1, 1, 0, 0, 4, -5, 0, 0, 0, 0, 0, 0),
        (-2.5, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0),
        (-1.2, -0.3, 0, 0, 0, 0, 0, 0, -4, 7, 0, 0, 0, 0, 0, 1),
        (0.3, 0.0, 0, 0, 1, -1, 1, 0, -4, 6, 0, 0, 0, 0, 0, 0),
        (0.3, 6.6, 0, 0, 0, 0, 0, 0, -4, 7, 0, 0, 0, 0, 0, 2),
        (49.0, 0.0, 0, 0, 0, 0, 0, 0, -4, 6, 0, 0, 0, 0, 0, 2),
        (-2.2, 9.3, 0, 0, 0, 0, 0, 0, -4, 6, 0, 0, 0, 0, 0, 1),
        (-0.7, 2.8, 0, 0, 1, -1, 1, 0, -4, 5, 0, 0, 0, 0, 0, 0),
        (-0.3, 1.3, 0, 0, 0, 0, 0, 0, -4, 6, 0, 0, 0, 0, 0, 1),
        (-4.6, 1.4, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -2, 0, 0, 2, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.2, 0.1, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, -1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0),
        (-2.8, 0.0, 0, 0, 0, 0, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 5, 0, 0, 0, 2),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0),
        (-1.1, 0.0, 0, 0, 0, 0, 0, 0, 0, -1, 3, 0, 0, 0, 0, 2),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, -7, 12, 0, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, -1, 1, 0, 0, 0, 0, 0, 2),
        (2.5, 10.6, 0, 0, 0, 0, 0, 0, -1, 1, 0, 0, 0, 0, 0, 1),
        (0.5, 2.1, 0, 0, 1, -1, 1, 0, -1, 0, 0, 0, 0, 0, 0, 0),
        (148.5, 0.0, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (-0.7, -3.2, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 1),
        (0.0, 0.5, 0, 0, 1, -1, 1, 0, 1, -2, 0, 0, 0, 0, 0, 0),
        (-0.6, -0.3, 0, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 0, 0, 2),
        (3.0, -0.6, 0, 0, 0, 0, 0, 0, 0, -1, 0, 4, 0, 0, 0, 2),
        (-0.4, 0.4, 0, 0, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, 0),
        (-1.9, 0.0, 0, 0, 0, 0, 1, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, 0, -6, 10, 0, 0, 0, 0, 2),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, -6, 10, 0, 0, 0, 0, 0),
        (0.4, 0.0, 0, 0, 2, -2, 1, 0, 0, -3, 0, 3, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 0, -3, 7, 0, 0, 0, 0, 2),
        (-0.3, 0.0, -2, 0, 0, 2, 0, 0, 4, -4, 0, 0, 0, 0, 0, 0),
        (0.5, 0.3, 0, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 2),
        (0.0, 1.1, 0, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0),
        (11.8, 0.0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 3, 0, 0, 0, 2),
        (0.0, -0.5, 0, 0, 0, 0, 0, 0, 0, -1, 0, 3, 0, 0, 0, 1),
        (-2.8, 3.6, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 0, 0, 0, 0),
        (0.5, -0.5, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0, 0),
        (1.4, -5.9, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 0, 1),
        (0.0, 0.9, 0, 0, 1, -1, 1, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (-45.8, 0.0, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 0, 2),
        (0.0, -4.5, 0, 0, 0, 0, 0, 0, -6, 9, 0, 0, 0, 0, 0, 2),
        (0.9, 0.0, 0, 0, 0, 0, 0, 0, -6, 9, 0, 0, 0, 0, 0, 1),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 0, 0, 1, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (1.1, 0.0, 0, 0, 2, -2, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 0, 0, 0, 0, 0, 0, 0, -4, 6, 0, 0, 0, 0, 2),
        (-1.6, 2.3, 0, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 0, 0, 1, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 2, 0, 0, 0, 2),
        (-16.6, 26.9, 0, 0, 0, 0, 0, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (1.5, 0.0, 0, 0, 0, 0, 1, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (1.0, 0.0, 0, 0, 0, 0, 0, 0, -5, 9, 0, 0, 0, 0, 0, 2),
        (-7.8, 4.5, 0, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0),
        (0.0, -0.5, 0, 0, 0, 0, 0, 0, -3, 4, 0, 0, 0, 0, 0, 2),
        (0.7, 0.0, 0, 0, 0, 0, 0, 0, -3, 4, 0, 0, 0, 0, 0, 1),
        (-0.5, 32.8, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, 1),
        (0.5, 0.0, 0, 0, 0, 0, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -3, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, -5, 0, 0, 0),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, 0, -1, 0, 1, 0, 0, 0, 1),
        (-122.3, -2.6, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, 0.7, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 1),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 5, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (-0.6, 2.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -2, 0, 0, 0),
        (-36.8, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (-7.5, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -1, 0, 0, 0),
        (1.1, 0.0, 0, 0, 0, 0, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, -8, 14, 0, 0, 0, 0, 0, 2),
        (-1.3, -3.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, -5, 0, 0, 0),
        (2.1, 0.3, 0, 0, 0, 0, 0, 0, 0, 5, -8, 3, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -8, 3, 0, 0, 0, 2),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 1),
        (0.8, -2.7, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-1.9, -1.1, 0, 0, 0, 0, 0, 0, 0, 3, -8, 3, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, 0, -3, 8, -3, 0, 0, 0, 2),
        (0.0, 0.5, 0, 0, 0, 0, 0, 0, 0, 1, 0, -2, 5, 0, 0, 2),
        (-0.6, 0.0, 0, 0, 0, 0, 0, 0, -8, 12, 0, 0, 0, 0, 0, 2),
        (-0.8, 0.0, 0, 0, 0, 0, 0, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, -2, 0, 0, 0),
        (-1.4, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 2),
        (0.6, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0),
        (-7.4, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 2, 0, 0, 2),
        (0.4, 0.0, 0, 0, 2, -2, 1, 0, -5, 5, 0, 0, 0, 0, 0, 0),
        (0.8, 1.1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1),
        (-26.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 2),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.0, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 0, 1),
        (0.0, -2.7, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 0, 2),
        (-1.9, -0.8, 0, 0, 0, 0, 0, 0, 0, -1, 4, 0, 0, 0, 0, 2),
        (20.2, 0.0, 0, 0, 0, 0, 0, 0, -5, 7, 0, 0, 0, 0, 0, 2),
        (-0.8, 3.5, 0, 0, 0, 0, 0, 0, -5, 7, 0, 0, 0, 0, 0, 1),
        (0.0, 0.4, 0, 0, 1, -1, 1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (1.6, -0.5, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 0, 0, 2, -2, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.1, 0.0, 0, 0, 0, 0, 0, -1, 0, 3, 0, 0, 0, 0, 0, 2),
        (-3.5, -4.8, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, 0, 0, 0, 2),
        (-0.3, -0.5, 0, 0, 0, 0, 0, 0, 0, -2, 6, 0, 0, 0, 0, 2),
        (0.6, 0.0, 0, 0, 0, 0, 1, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -6, 9, 0, 0, 0, 0, 2),
        (0.0, -0.5, 0, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0),
        (1.2, 5.5, 0, 0, 0, 0, 0, 0, -2, 2, 0, 0, 0, 0, 0, 1),
        (0.0, 0.5, 0, 0, 1, -1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0),
        (-59.8, 0.0, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (-0.3, -1.3, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, 1),
        (-0.5, -0.7, 0, 0, 0, 0, 0, 0, 0, 1, 0, 3, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -5, 7, 0, 0, 0, 0, 2),
        (0.5, -0.7, 0, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0),
        (0.4, 0.0, 0, 0, 0, 0, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (1.6, -0.6, 0, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0),
        (0.8, -0.3, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0, 0),
        (0.8, -3.1, 0, 0, 0, 0, 0, 0, -1, 3, 0, 0, 0, 0, 0, 1),
        (0.0, 0.3, 0, 0, 1, -1, 1, 0, -1, 2, 0, 0, 0, 0, 0, 0),
        (11.3, 0.0, 0, 0, 0, 0, 0, 0, -1, 3, 0, 0, 0, 0, 0, 2),
        (0.0, -2.4, 0, 0, 0, 0, 0, 0, -7, 10, 0, 0, 0, 0, 0, 2),
        (0.4, 0.0, 0, 0, 0, 0, 0, 0, -7, 10, 0, 0, 0, 0, 0, 1),
        (2.7, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, -4, 8, 0, 0, 0, 0, 0, 2),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, -4, 5, 0, 0, 0, 0, 0, 2),
        (0.5, 0.0, 0, 0, 0, 0, 0, 0, -4, 5, 0, 0, 0, 0, 0, 1),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0, 0),
        (-1.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 2),
        (0.5, 0.0, 0, 0, 0, 0, 0, 0, 0, -2, 0, 5, 0, 0, 0, 2),
        (-1.8, -1.0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 2),
        (-0.4, -2.8, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.6, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, -9, 13, 0, 0, 0, 0, 0, 2),
        (-0.5, -0.9, 0, 0, 0, 0, 0, 0, 0, -1, 5, 0, 0, 0, 0, 2),
        (1.7, 0.0, 0, 0, 0, 0, 0, 0, 0, -2, 0, 4, 0, 0, 0, 2),
        (1.1, 0.4, 0, 0, 0, 0, 0, 0, 0, 2, 0, -4, 0, 0, 0, 0),
        (0.0, -0.6, 0, 0, 0, 0, 0, 0, 0, -2, 7, 0, 0, 0, 0, 2),
        (8.3, 1.5, 0, 0, 0, 0, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 0, 0, 0, 1),
        (0.0, -11.4, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 0, 0, 0, 2),
        (11.7, 0.0, 0, 0, 0, 0, 0, 0, -6, 8, 0, 0, 0, 0, 0, 2),
        (-0.5, 1.9, 0, 0, 0, 0, 0, 0, -6, 8, 0, 0, 0, 0, 0, 1),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 6, -8, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 1, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 0, -3, 9, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0),
        (0.0, -0.6, 0, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 2),
        (39.3, 0.3, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (-0.4, 2.1, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 1),
        (-0.6, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 2),
        (-0.3, 0.8, 0, 0, 0, 0, 0, 0, -5, 10, 0, 0, 0, 0, 0, 2),
        (0.8, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0),
        (1.8, -2.9, 0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 2),
        (0.8, 3.4, 0, 0, 0, 0, 0, 0, -3, 3, 0, 0, 0, 0, 0, 1),
        (8.9, 0.0, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.3, 1.2, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 1),
        (5.4, -1.5, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 2),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -3, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -5, 13, 0, 0, 0, 0, 2),
        (0.0, 3.5, 0, 0, 0, 0, 0, 0, 0, 2, 0, -1, 0, 0, 0, 0),
        (-15.4, -3.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, -1, 0, 0, 0, 2),
        (1.5, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -2, 0, 0, 0),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -2, 0, 0, 1),
        (0.0, 0.9, 0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 0),
        (8.0, -7.1, 0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 2),
        (0.0, -2.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -1, 0, 0, 2),
        (1.1, 0.5, 0, 0, 0, 0, 0, 0, 0, -6, 15, 0, 0, 0, 0, 2),
        (6.1, -9.6, 0, 0, 0, 0, 0, 0, -8, 15, 0, 0, 0, 0, 0, 2),
        (1.4, 0.9, 0, 0, 0, 0, 0, 0, -3, 9, -4, 0, 0, 0, 0, 2),
        (-1.1, -0.6, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2, -5, 0, 0, 2),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 0, -2, 8, -1, -5, 0, 0, 2),
        (12.3, -41.5, 0, 0, 0, 0, 0, 0, 0, 6, -8, 3, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0),
        (0.7, -3.2, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1),
        (0.0, -0.9, 0, 0, 1, -1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1),
        (-8.9, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 2),
        (0.0, -8.6, 0, 0, 0, 0, 0, 0, 0, -6, 16, -4, -5, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, -2, 8, -3, 0, 0, 0, 2),
        (-12.3, -41.6, 0, 0, 0, 0, 0, 0, 0, -2, 8, -3, 0, 0, 0, 2),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 0, 6, -8, 1, 5, 0, 0, 2),
        (1.2, -0.6, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 5, 0, 0, 2),
        (-1.3, 0.9, 0, 0, 0, 0, 0, 0, 3, -5, 4, 0, 0, 0, 0, 2),
        (0.0, -1.5, 0, 0, 0, 0, 0, 0, -8, 11, 0, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, -8, 11, 0, 0, 0, 0, 0, 1),
        (-6.2, -9.7, 0, 0, 0, 0, 0, 0, -8, 11, 0, 0, 0, 0, 0, 2),
        (-1.1, 0.5, 0, 0, 0, 0, 0, 0, 0, 11, 0, 0, 0, 0, 0, 2),
        (0.0, -1.9, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 1, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 3, -3, 0, 2, 0, 0, 0, 2),
        (0.0, 0.4, 0, 0, 2, -2, 1, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 1, -1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, 2, -2, 1, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (-8.5, -7.0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 0, 0, 2),
        (16.3, -1.2, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1, 0, 0, 0, 2),
        (-6.3, -1.6, 0, 0, 0, 0, 0, 0, -3, 7, 0, 0, 0, 0, 0, 2),
        (-2.1, -3.2, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0, 2),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, -5, 6, 0, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, -5, 6, 0, 0, 0, 0, 0, 1),
        (0.0, 0.8, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, 0),
        (0.3, 1.0, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2, 0, 0, 0, 2),
        (0.0, -0.7, 0, 0, 0, 0, 0, 0, 0, -1, 6, 0, 0, 0, 0, 2),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, 0, 7, -9, 0, 0, 0, 0, 2),
        (0.6, 1.9, 0, 0, 0, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0),
        (0.5, -17.3, 0, 0, 0, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 2),
        (0.0, -0.7, 0, 0, 0, 0, 0, 0, 0, 6, -7, 0, 0, 0, 0, 2),
        (0.7, -1.2, 0, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, -1, 4, 0, 0, 0, 0, 0, 1),
        (0.3, -0.4, 0, 0, 0, 0, 0, 0, -1, 4, 0, 0, 0, 0, 0, 2),
        (7.4, 0.0, 0, 0, 0, 0, 0, 0, -7, 9, 0, 0, 0, 0, 0, 2),
        (-0.3, 1.2, 0, 0, 0, 0, 0, 0, -7, 9, 0, 0, 0, 0, 0, 1),
        (2.6, -1.4, 0, 0, 0, 0, 0, 0, 0, 4, -3, 0, 0, 0, 0, 2),
        (1.9, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 2),
        (0.6, 2.4, 0, 0, 0, 0, 0, 0, -4, 4, 0, 0, 0, 0, 0, 1),
        (8.3, 0.0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 0),
        (0.0, -1.0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 1),
        (1.1, -0.3, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -3, 0, 5, 0, 0, 0, 2),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0),
        (0.5, -2.3, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1),
        (-33.9, 0.0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 2),
        (0.0, -1.0, 0, 0, 0, 0, 0, 0, -9, 12, 0, 0, 0, 0, 0, 2),
        (0.5, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, 0, -4, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 2, -2, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, 0, 7, -8, 0, 0, 0, 0, 2),
        (1.8, -0.3, 0, 0, 0, 0, 0, 0, 0, 3, 0, -3, 0, 0, 0, 0),
        (0.9, -1.1, 0, 0, 0, 0, 0, 0, 0, 3, 0, -3, 0, 0, 0, 2),
        (-0.8, 0.0, 0, 0, 0, 0, 0, 0, -2, 6, 0, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, -6, 7, 0, 0, 0, 0, 0, 1),
        (0.0, 0.9, 0, 0, 0, 0, 0, 0, 6, -7, 0, 0, 0, 0, 0, 0),
        (0.6, -0.9, 0, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 2),
        (-0.4, -1.2, 0, 0, 0, 0, 0, 0, 0, 3, 0, -2, 0, 0, 0, 0),
        (6.7, -9.1, 0, 0, 0, 0, 0, 0, 0, 3, 0, -2, 0, 0, 0, 2),
        (3.0, -1.8, 0, 0, 0, 0, 0, 0, 0, 5, -4, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 0, 0),
        (0.0, -11.4, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, 0, -1, 0, 0, 0, 2),
        (51.7, 1.6, 0, 0, 0, 0, 0, 0, 0, 3, 0, -1, 0, 0, 0, 2),
        (0.0, -0.7, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, -2, 0, 0, 2),
        (14.3, -0.3, 0, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 2),
        (2.9, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, -1, 0, 0, 2),
        (-0.4, 0.0, 0, 0, 2, -2, 1, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (-0.6, 0.0, 0, 0, 0, 0, 0, 0, -8, 16, 0, 0, 0, 0, 0, 2),
        (0.5, 1.2, 0, 0, 0, 0, 0, 0, 0, 3, 0, 2, -5, 0, 0, 2),
        (-2.5, 0.0, 0, 0, 0, 0, 0, 0, 0, 7, -8, 3, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -5, 16, -4, -5, 0, 0, 2),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 2),
        (-2.2, 1.2, 0, 0, 0, 0, 0, 0, 0, -1, 8, -3, 0, 0, 0, 2),
        (5.0, 0.0, 0, 0, 0, 0, 0, 0, -8, 10, 0, 0, 0, 0, 0, 2),
        (0.0, 0.7, 0, 0, 0, 0, 0, 0, -8, 10, 0, 0, 0, 0, 0, 1),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, -8, 10, 0, 0, 0, 0, 0, 2),
        (-0.4, 0.4, 0, 0, 0, 0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 2),
        (-0.5, -1.1, 0, 0, 0, 0, 0, 0, 0, 3, 0, 1, 0, 0, 0, 2),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, -3, 8, 0, 0, 0, 0, 0, 2),
        (0.4, 1.7, 0, 0, 0, 0, 0, 0, -5, 5, 0, 0, 0, 0, 0, 1),
        (5.9, 0.0, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 1),
        (-0.8, 0.0, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0),
        (0.4, -1.5, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 1),
        (37.0, -0.8, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 2),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 2),
        (-0.6, 0.3, 0, 0, 0, 0, 0, 0, 0, 6, -5, 0, 0, 0, 0, 2),
        (0.0, 0.6, 0, 0, 0, 0, 0, 0, 7, -8, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 2),
        (0.0, 0.9, 0, 0, 0, 0, 0, 0, 4, -3, 0, 0, 0, 0, 0, 2),
        (0.4, 1.7, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 0, 0, 0, 2),
        (3.4, 0.0, 0, 0, 0, 0, 0, 0, -9, 11, 0, 0, 0, 0, 0, 2),
        (0.0, 0.5, 0, 0, 0, 0, 0, 0, -9, 11, 0, 0, 0, 0, 0, 1),
        (-0.5, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, 0, -4, 0, 0, 0, 2),
        (-3.7, -0.7, 0, 0, 0, 0, 0, 0, 0, 4, 0, -3, 0, 0, 0, 2),
        (0.3, 1.3, 0, 0, 0, 0, 0, 0, -6, 6, 0, 0, 0, 0, 0, 1),
        (4.0, 0.0, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 0, 1),
        (-18.4, -0.3, 0, 0, 0, 0, 0, 0, 0, 4, 0, -2, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, -4, 0, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 0),
        (0.0, -1.0, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 1),
        (3.1, -0.6, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 2),
        (-0.3, -3.2, 0, 0, 0, 0, 0, 0, 0, 4, 0, -1, 0, 0, 0, 2),
        (-0.7, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, -2, 0, 0, 2),
        (0.0, -0.8, 0, 0, 0, 0, 0, 0, 0, 5, -2, 0, 0, 0, 0, 2),
        (0.3, -0.4, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, 8, -9, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 5, -4, 0, 0, 0, 0, 0, 2),
        (1.9, -2.3, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 1),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 1),
        (0.0, 0.9, 0, 0, 0, 0, 0, 0, -7, 7, 0, 0, 0, 0, 0, 1),
        (2.8, 0.0, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 0, 0),
        (0.0, -0.7, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 1),
        (0.8, -0.4, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, 0, -4, 0, 0, 0, 2),
        (-0.9, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, 0, -3, 0, 0, 0, 2),
        (0.3, 1.2, 0, 0, 0, 0, 0, 0, 0, 5, 0, -2, 0, 0, 0, 2),
        (1.7, -0.3, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 2),
        (0.0, 0.7, 0, 0, 0, 0, 0, 0, -8, 8, 0, 0, 0, 0, 0, 1),
        (1.9, 0.0, 0, 0, 0, 0, 0, 0, 8, -8, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 0, 1),
        (1.4, -0.3, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, -9, 9, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, -9, 9, 0, 0, 0, 0, 0, 1),
        (0.0, 0.5, 0, 0, 0, 0, 0, 0, -9, 9, 0, 0, 0, 0, 0, 1),
        (1.3, 0.0, 0, 0, 0, 0, 0, 0, 9, -9, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 6, -4, 0, 0, 0, 0, 0, 1),
        (0.2, 0.9, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0),
        (0.8, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 1),
        (0.6, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 2),
        (0.6, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 1),
        (0.5, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2),
        (-0.3, 0.0, 1, 0, 0, -2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.6, 0.0, 1, 0, 0, -2, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 1, 0, 0, -2, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (-0.4, 0.0, 1, 0, 0, -2, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -1, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, -1, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, -0.4, -1, 0, 0, 2, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, -0.4, 1, 0, 0, -2, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.5, 0.0, -2, 0, 0, 2, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (-0.3, 0.0, -1, 0, 0, 0, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.4, 0.0, -1, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (-0.5, 0.0, -1, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, -1, 0, 0, 2, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 1, 0, -1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (1.3, 0.0, -1, 0, 0, 2, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (2.1, 1.1, -2, 0, 0, 0, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.0, -0.5, 1, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, -0.5, -1, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 1, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, -1, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (-0.3, 0.0, -1, 0, 0, 2, 1, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (2.0, 1.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (-3.4, 0.0, -1, 0, 0, 2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (-1.9, 0.0, -1, 0, 0, 2, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 1, 0, 0, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 0, 2, -2, 2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, 1, 0, 2, -2, 2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-0.4, 0.0, 1, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 1, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, -2, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 0, 0, 0, -2, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 2, 0, 2, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.6, 0.0, 0, 0, 2, 0, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (-0.8, 0.0, 0, 0, 2, 0, 2, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 2, 0, 2, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 1, 1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (12.6, -6.3, 1, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -1, 0, 2, 0, 2, 0, 10, -3, 0, 0, 0, 0, 0, 0),
        (-0.3, 2.8, 0, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.5, 0.0, 1, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.9, 0, 0, 2, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, 0.9, 0, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (-12.6, -6.3, -1, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.3, 0.0, 2, 0, 2, -2, 2, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (2.1, -1.1, 1, 0, 2, 0, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-2.1, -1.1, -1, 0, 2, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, 0, 2, 2, 2, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 2, 0, 2, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (0.8, 0.0, 0, 0, 2, 0, 2, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (-0.6, 0.0, 0, 0, 2, 0, 2, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 2, 0, 2, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, -1, 0, 2, 2, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (-0.3, 0.0, 1, 0, 2, 0, 2, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, -1, 0, 2, 2, 2, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (2.4, -1.2, 2, 0, 2, 0, 2, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.0, 0.3, 1, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.0, 0.3, 1, 0, 2, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, 0.3, 1, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-2.4, -1.2, 0, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 2, 0, 2, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (1.3, 0.0, -1, 0, 2, 2, 2, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.7, 0.0, -1, 0, 2, 2, 2, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 1, 0, 2, 0, 2, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 2, 2, 2, 0, 0, 2, 0, -2, 0, 0, 0, 0),
    ),
    # j = 1
    (
        (-17466.6, 0.0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-167.5, 0.0, 0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-23.4, 0.0, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (20.7, 0.0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-363.3, 0.0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (122.6, 0.0, 0, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.3, 0.0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-36.7, 0.0, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.6, 0.0, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-49.4, 0.0, 0, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (13.7, 0.0, 0, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, 0.0, -1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 0.0, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.3, 0.0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.3, 0.0, -1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, -1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.2, 0.0, 1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.0, 0.0, -2, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, 0.0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.0, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.0, 2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.1, 0.0, -1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.5, 0.0, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 0.0, -1, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.2, 0.0, 0, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, 1, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, 0.0, 0, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.5, 0.0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.1, 0.0, 0, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, 0, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.1, 0.0, 0, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 0.0, 1, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, -2, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, 0, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, 0, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, -1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    ),
)

EPS2000_TERMS = (
    # j = 0
    (
        (1537.7, 9205233.1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-458.7, 573033.6, 0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (137.4, 97845.9, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-29.1, -89749.2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-192.4, 7387.1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-17.4, 22438.6, 0, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (35.8, -675.0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (31.8, 20072.8, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (36.7, 12902.5, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (13.2, -9592.9, 0, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.9, -6898.2, 0, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, -5331.1, -1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.2, -123.5, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.9, -3322.8, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.5, 3142.9, -1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.6, 2554.3, -1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.8, 2636.6, 1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.0, -2423.6, -2, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.9, -122.0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.8, 1645.2, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1387.0, 0, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.5, 47.7, -2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.9, 1323.8, 2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, -1233.8, 1, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, -1075.8, -1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.3, -60.9, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, -55.0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.5, 855.1, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -800.1, -1, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 685.0, 0, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.3, -16.7, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.4, 695.3, 1, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.6, 641.5, 0, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.5, 522.2, -1, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.0, 16.8, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.9, 326.8, 1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, 10.4, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, -325.0, 0, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.4, 335.3, 0, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 307.0, 0, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 327.2, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -304.5, 1, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, -276.8, 2, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 304.1, -2, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.2, 269.5, 2, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, 271.9, 0, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.9, 272.0, 0, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, -5.1, -1, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, -220.6, 2, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, -19.9, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, -190.0, 0, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, -4.1, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 131.3, -2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.7, 123.3, 3, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, -8.1, 0, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 123.2, 1, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, -2.0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 120.7, -1, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, 4.0, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.5, 112.9, 0, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.4, 126.6, -2, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.3, -106.2, 1, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, -112.9, 2, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.9, -1, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, 3.5, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, -10.7, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, 107.3, -1, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 85.4, 1, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-13.9, -55.3, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, -71.0, 0, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 64.7, -1, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -70.0, -1, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 67.2, 0, -2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 66.3, 1, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, -59.4, -2, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, -61.0, -1, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -55.6, 1, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, 51.8, -2, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -49.0, -1, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -52.7, 2, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 46.5, 2, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 49.6, 1, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -5.0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -39.9, 3, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -39.5, 0, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -42.2, 0, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, -44.0, 0, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, -17.0, 0, 0, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -3.9, -1, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -38.9, 2, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, -2.3, -2, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -39.1, -1, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, -49.5, -1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, -32.6, 0, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 36.9, 0, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 34.6, 0, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 30.4, 0, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, 29.4, 0, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.4, -2, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 31.6, 1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.8, -1, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 25.8, -1, 1, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -27.9, 1, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, 25.2, 1, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -24.4, -1, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.2, 25.0, 3, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.9, 0, 1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 27.5, -1, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -22.8, 0, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 24.0, -1, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -25.3, 0, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 24.4, 1, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.9, -1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 22.5, 0, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 20.7, 2, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 20.1, 0, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 21.6, 1, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -20.0, -1, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.4, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, -1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 18.8, 0, 3, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 20.5, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.9, -1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -17.6, 2, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 18.9, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -18.5, 1, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.4, 2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 17.1, -1, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 18.4, 0, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -15.4, -1, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -17.4, 0, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 16.2, -1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 14.4, 1, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.5, 1, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.9, 0, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -14.3, 1, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -14.4, 0, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -13.4, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 13.1, -1, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -13.8, 1, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -12.8, 1, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.7, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 12.8, -1, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -12.0, -2, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 10.9, 4, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.8, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -10.8, 2, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 10.4, 0, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -10.4, 1, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -11.2, -1, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -10.2, 0, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 10.5, -2, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.4, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.7, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 9.6, -1, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -10.0, -1, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 9.4, 2, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 8.3, 0, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -1, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.6, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -7.9, 0, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 4.3, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 8.4, 0, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 8.1, 0, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 7.8, 0, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 7.5, -1, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 6.9, 1, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, -5.4, -2, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -7.5, -2, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 6.9, -1, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -7.2, 0, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -7.5, 3, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 6.9, -2, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.1, -5.4, 1, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -6.4, -2, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 6.6, -3, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -6.1, 1, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 6.0, 0, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 5.6, 3, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 5.7, -1, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 5.6, 2, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -5.2, 0, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -5.4, 2, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 5.9, -1, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 6.1, 0, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 5.5, 0, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 5.7, 2, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -4.9, 4, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 4.4, 2, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 5.1, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 5.6, 1, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -4.7, 0, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -3, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -5.0, -1, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, -1, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 4.4, -1, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 4.8, -2, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 5.0, 1, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, 1.2, -2, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -4.5, -2, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -4.5, 2, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 4.1, -3, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 4.3, -2, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 5.4, -1, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -4.0, 0, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 4.0, -1, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, 4.0, 0, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -3.6, -1, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.9, 2, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 0, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.4, -2, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 4.7, -1, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -4.4, -1, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -4.3, 3, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -3.9, -1, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.9, 2, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -4.3, 0, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.9, 0, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.9, 2, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -3.6, -1, -1, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.2, 0, -2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -3.1, 1, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -3.4, 1, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.3, -1, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.2, 1, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -2, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.8, -2, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -3.2, 0, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.3, 1, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.0, 2, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.9, 1, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -3.3, 2, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.6, 3, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.0, -2, 2, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.4, 1, 0, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.3, 1, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.4, -1, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.5, 0, -1, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.6, 0, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.5, -2, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.6, 0, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, -0.1, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.1, 1, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.0, 1, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.2, 2, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.1, 1, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.1, 2, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.4, -2, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.2, 1, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.2, 0, 1, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.1, 1, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.8, -2, 0, 4, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.2, 1, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 1, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.9, 2, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.3, 3, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.2, 4, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.6, 0, 1, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.5, 0, -1, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.9, 2, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.1, -1, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.0, 0, 1, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.4, 0, 0, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -2.0, -1, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.3, 0, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.5, -2, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.5, -1, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.5, 2, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.8, 0, 0, 4, -4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.9, 0, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.5, -1, -2, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.0, 1, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.9, -3, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.4, -3, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.8, 2, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.1, -2, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 1, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.5, 0, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 2.0, -1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.9, 0, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.9, 1, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.6, 1, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.4, -1, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.3, 3, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 2, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.6, 0, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.6, 2, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.5, -1, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.6, 1, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.3, 1, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.6, 0, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.3, -1, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 3, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.3, -1, 0, 4, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.2, 1, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.8, -2, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.1, 2, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.4, -1, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.4, 1, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.2, 2, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 1, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, -3, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.0, 2, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.5, -1, 0, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.6, -4, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, -2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 1, 0, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 0, -1, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 2, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.0, -2, 0, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, -2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.2, 1, 2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.7, 3, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.1, -1, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, 1, -1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, 1, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.8, -3, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.8, -3, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, -1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.0, 0, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 2, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.0, 0, 2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 1, 0, 0, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, -2, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.2, -2, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -4, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.6, 1, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.9, -1, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.8, 0, 0, 4, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.7, 0, 3, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.0, -3, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, -1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.8, -1, -1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, 1, -2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.7, 1, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, 0, 0, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 1, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.8, 0, -1, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, -1, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, 1, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, -1, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.0, -1, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.1, 3, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 1, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 1, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, -2, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.9, 0, -1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, -2, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.0, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, 0, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.9, 1, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, -2, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.1, 2, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.7, 0, -1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 4, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, 0, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.6, -1, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.6, -1, 0, 0, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.8, -1, -2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, -1, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.9, 1, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.6, 0, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, -2, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, 0, 0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -1, -1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.7, -2, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.0, 1, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, 0, -1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 1, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.5, 3, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 2, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, 4, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.9, 1, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -2, 0, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.8, 0, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.9, -2, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.0, 0, -2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 0, -1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.8, -1, 0, 2, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.8, -2, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 2, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 2, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, -1, 1, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 3, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.9, 4, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -1, 0, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, -1, -2, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.9, -3, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -1, 0, 2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.6, 3, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 3, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.0, 1, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 5, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.7, 0, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.7, 2, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.7, 0, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.0, 1, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 3, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.1, 3, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.9, 5, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.5, 0, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.7, 4, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-167.9, 0.0, 0, -1, 1, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.7, 0.0, -1, 0, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, -2, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.4, 0.0, 1, 0, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 2, -2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (17.6, 0.0, -1, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-89.1, 0.0, -1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -1, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -2, 2, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -4, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -3, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -2, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 1, 0, -2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 2, -1, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -4, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 0, -2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, -2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -2, -1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -4, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 2, 1, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 2, -1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, -2, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 1, 1, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.0, 0.0, 1, 0, 1, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 1, -1, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 1, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, -2, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -2, -2, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 1, 2, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 1, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 2, 0, 0, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, -1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -1, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 1, -2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 1, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -1, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 2, 0, 2, -6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 2, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, -1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 2, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -4, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, -1, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -2, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, -1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 1, 0, 2, -6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -1, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 1, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 2, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 2, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 1, 4, -4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 0, 1, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, -1, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, -3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 0, -2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, -1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, -2, 0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -1, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.6, 1, -2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.4, 0.0, 0, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-13.8, 0.0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, -1, 2, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 2, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 3, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 2, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, -2, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, -3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, -1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -2, 0, 0, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.1, 0.3, 0, -2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.0, -1, 0, 1, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -1, -1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.3, 2, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 1, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 2, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 0, -1, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 4, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 1, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 4, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 2, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 2, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, -2, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -1, -3, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -3, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -3, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, -1, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -3, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -3, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, -4, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, -1, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -3, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 0, 0, 0, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, -1, 1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 1, -2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -1, 0, 2, 2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 3, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 2, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.0, 0, 0, 3, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 0, 0, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, -1, 2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 1, 2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 3, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 1, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, -1, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, -2, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, 0, 0, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, -2, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, -3, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -1, -1, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 2, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 1, -1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 2, 2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, -2, 0, 4, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 2, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 3, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.0, 1, 0, 3, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 1, 1, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 2, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 4, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, -1, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -3, -1, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, -1, 0, 0, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -3, 0, 2, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 1, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -2, 0, 2, 5, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 1, -2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 3, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, -1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 2, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -1, 1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 1, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, -1, 0, 4, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 2, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 2, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 1, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 3, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 3, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -2, -1, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, -2, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, -2, 0, 2, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 2, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 2, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 1, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 4, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 4, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 4, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 3, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 2, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 4, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, -1, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 0, 2, 6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 1, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 1, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 3, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 5, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 2, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 2, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 8, -16, 4, 5, 0, 0, 0),
        (-4.2, -4.0, 0, 0, 0, 0, 0, 0, 0, -8, 16, -4, -5, 0, 0, 2),
        (0.0, -5.4, 0, 0, 0, 0, 0, 0, 0, 8, -16, 4, 5, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 2, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -4, 8, -1, -5, 0, 0, 2),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 1),
        (0.0, 6.1, 0, 0, 1, -1, 1, 0, 0, 3, -8, 3, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 0, 0, 0, 10, -3, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -2, 6, -3, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, -5.3, 0, 0, 1, -1, 1, 0, 0, -5, 8, -3, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, 0, -4, 8, -3, 0, 0, 0, 1),
        (0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, -8, 1, 5, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, -5, 6, 4, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 2),
        (11.7, 0.8, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 1),
        (-25.7, -1.7, 0, 0, 1, -1, 1, 0, 0, -1, 0, 2, -5, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 0),
        (273.5, 164.7, 0, 0, 1, -1, 1, 0, 0, -1, 0, -2, 5, 0, 0, 0),
        (-128.6, -77.1, 0, 0, 0, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 1),
        (-1.1, -0.9, 0, 0, 0, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 2),
        (0.0, 0.0, 2, 0, -1, -1, 0, 0, 0, 3, -7, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, -2, 0, 0, 19, -21, 3, 0, 0, 0, 0, 0),
        (-0.7, 0.0, 0, 0, 1, -1, 1, 0, 2, -4, 0, -3, 0, 0, 0, 0),
        (-1.6, 1.4, 1, 0, 0, -1, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (-1.4, -0.5, 0, 0, 1, -1, 1, 0, 0, -1, 0, -4, 10, 0, 0, 0),
        (0.0, -0.6, -2, 0, 0, 2, 1, 0, 0, 2, 0, 0, -5, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -7, 4, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, 1, -1, 0, 0, 0),
        (0.0, -15.1, -2, 0, 0, 2, 1, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 0, 0, 0, 18, -16, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.0, -2, 0, 1, 1, 2, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (-0.3, 0.0, -1, 0, 1, -1, 1, 0, 18, -17, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, -1, 0, 0, 1, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (7.6, 1.7, 0, 0, 0, 0, 0, 0, -8, 13, 0, 0, 0, 0, 0, 2),
        (0.6, 0.0, 0, 0, 2, -2, 2, 0, -8, 11, 0, 0, 0, 0, 0, 0),
        (-13.3, 26.9, 0, 0, 0, 0, 0, 0, -8, 13, 0, 0, 0, 0, 0, 1),
        (31.9, -64.1, 0, 0, 1, -1, 1, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, 0),
        (-0.7, -0.6, 0, 0, 1, -1, 1, 0, 8, -14, 0, 0, 0, 0, 0, 0),
        (0.3, 0.3, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, 1),
        (0.0, 0.3, -2, 0, 0, 2, 1, 0, 0, 2, 0, -4, 5, 0, 0, 0),
        (0.0, -0.3, -2, 0, 0, 2, 2, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -3, 1, 0, 0, 0),
        (0.0, -0.7, 0, 0, 0, 0, 1, 0, 3, -5, 0, 2, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -4, 3, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0),
        (-23.2, 24.6, 0, 0, 0, 0, 1, 0, 0, -1, 2, 0, 0, 0, 0, 0),
        (0.7, 0.0, 0, 0, 1, -1, 2, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 0, 1, 0, 1, 0, 3, -5, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 1, 0, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -2, -2, 0, 0, 0),
        (0.0, 0.0, -2, 0, 2, 0, 2, 0, 0, -5, 9, 0, 0, 0, 0, 0),
        (0.2, 0.0, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, -1, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0),
        (-1.0, 0.9, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 2, 0),
        (0.6, -0.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 1),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2),
        (0.0, 0.0, -1, 0, 0, 1, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, 0, 2, 0, 0, 0),
        (1.1, -0.5, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, 2, 0, 0, 0),
        (-0.2, 0.1, 0, 0, 0, 0, 1, 0, 0, -9, 17, 0, 0, 0, 0, 0),
        (0.0, -0.1, 0, 0, 0, 0, 2, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 2, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, -2, 0, 0, 17, -16, 0, -2, 0, 0, 0, 0),
        (0.2, 0.0, 0, 0, 1, -1, 1, 0, 0, -1, 0, 1, -3, 0, 0, 0),
        (0.2, 0.3, -2, 0, 0, 2, 1, 0, 0, 5, -6, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -2, 2, 0, 0, 0, 9, -13, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, 1, 0, 0, 0),
        (1.3, -0.2, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0),
        (0.0, 0.0, 0, 0, -2, 2, 0, 0, 5, -6, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 0, 0, -1, 1, 1, 0, 5, -7, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 6, -8, 0, 0, 0, 0, 0, 0),
        (0.1, 0.0, 2, 0, 1, -3, 1, 0, -6, 7, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (-0.2, 0.1, 0, 0, -1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 0, 0),
        (-0.4, -0.1, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 2, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2),
        (0.3, 0.6, 0, 0, 0, 0, 0, 0, 0, -8, 15, 0, 0, 0, 0, 2),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, 0, -8, 15, 0, 0, 0, 0, 1),
        (1.0, 0.0, 0, 0, 1, -1, 1, 0, 0, -9, 15, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, -1, -1, 0, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (0.0, 0.0, 2, 0, 0, -2, 0, 0, 2, -5, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -5, 5, 0, 0, 0),
        (0.3, -0.2, 2, 0, 0, -2, 1, 0, 0, -6, 8, 0, 0, 0, 0, 0),
        (-0.9, -4.8, 2, 0, 0, -2, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 1, 1, 0, 0, 0, 1, 0, -3, 0, 0, 0, 0),
        (0.4, 0.2, -2, 0, 1, 1, 1, 0, 0, 1, 0, -3, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 6, -8, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -1, -5, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 1, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, -0.3, -1, 0, 1, 1, 1, 0, -20, 20, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, -2, 0, 0, 20, -21, 0, 0, 0, 0, 0, 0),
        (-0.4, -0.8, 0, 0, 0, 0, 1, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (0.0, 0.1, 0, 0, 2, -2, 1, 0, 0, -10, 15, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0),
        (-3.7, -1.1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 1, -1, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.2, -0.2, 0, 0, 1, -1, 1, 0, 0, -1, 0, -2, 4, 0, 0, 0),
        (-0.2, 0.9, 2, 0, 0, -2, 1, 0, -6, 8, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, -2, 2, 1, 0, 5, -6, 0, 0, 0, 0, 0, 0),
        (-0.8, 1.7, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 1),
        (4.5, -9.3, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, -1, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0),
        (-0.6, 3.5, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 1, 0, 0, 0),
        (0.4, -2.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1),
        (0.4, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 2),
        (-1.2, -0.5, 0, 0, 2, -2, 1, 0, 0, -9, 13, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 0, 0, 1, 0, 0, 7, -13, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 9, -17, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, 0, -9, 17, 0, 0, 0, 0, 2),
        (0.1, -0.2, 1, 0, 0, -1, 1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (1.5, 0.0, 1, 0, 0, -1, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.2, 0, 0, 0, 0, 2, 0, 0, -1, 2, 0, 0, 0, 0, 0),
        (-0.1, -0.5, 0, 0, -1, 1, 1, 0, 0, 0, 2, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -2, 2, 0, 1, 0, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 2, 0, 0, 0, 0),
        (0.0, -0.2, -2, 0, 0, 2, 1, 0, 0, 2, 0, -3, 1, 0, 0, 0),
        (0.0, 0.3, -2, 0, 0, 2, 1, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (3.5, -2.5, 0, 0, 0, 0, 1, 0, 8, -13, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 8, -12, 0, 0, 0, 0, 0, 0),
        (0.2, 0.0, 0, 0, 2, -2, 1, 0, -8, 11, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 1, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (-1.8, 3.6, -1, 0, 0, 0, 1, 0, 18, -16, 0, 0, 0, 0, 0, 0),
        (0.7, 0.0, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 1, 0, 0, 0),
        (-0.3, -0.5, 0, 0, 0, 0, 1, 0, 3, -7, 4, 0, 0, 0, 0, 0),
        (-0.2, 0.3, -2, 0, 1, 1, 1, 0, 0, -3, 7, 0, 0, 0, 0, 0),
        (0.2, 0.1, 0, 0, 1, -1, 2, 0, 0, -1, 0, -2, 5, 0, 0, 0),
        (0.9, -4.1, 0, 0, 0, 0, 1, 0, 0, 0, 0, -2, 5, 0, 0, 0),
        (15.9, -4.5, 0, 0, 0, 0, 1, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.0, -0.1, 1, 0, 0, 0, 1, 0, -10, 3, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 2, -2, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -1, 0, 0, 0, 1, 0, 10, -3, 0, 0, 0, 0, 0, 0),
        (15.6, 4.4, 0, 0, 0, 0, 1, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.9, 3.9, 0, 0, 0, 0, 1, 0, 0, 0, 0, 2, -5, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, 2, -5, 0, 0, 0),
        (-0.1, -0.2, 2, 0, -1, -1, 1, 0, 0, 3, -7, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, 0, -5, 0, 0, 0),
        (-0.3, 0.5, 0, 0, 0, 0, 1, 0, -3, 7, -4, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (-1.5, -3.0, 1, 0, 0, 0, 1, 0, -18, 16, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, -2, 0, 1, 1, 1, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 1, -1, 2, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (3.0, 2.1, 0, 0, 0, 0, 1, 0, -8, 13, 0, 0, 0, 0, 0, 0),
        (0.3, -1.3, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 1),
        (4.3, -14.6, 0, 0, 1, -1, 1, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0),
        (-2.5, 0.4, 0, 0, 1, -1, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (2.5, -0.3, 0, 0, 0, 0, 0, 0, 0, -1, 2, 0, 0, 0, 0, 1),
        (1.3, 0.0, -1, 0, 0, 1, 1, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 0, 0, 1, 1, 0, 0, 3, -4, 0, 0, 0, 0, 0),
        (-0.2, -0.2, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, -2, 0, 0, 0),
        (-5.9, 2.6, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 2, 0, 0, 0),
        (6.1, -2.7, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 1),
        (0.0, 5.7, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 2),
        (0.0, 0.0, 0, 0, 1, -1, 0, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (-0.3, 1.1, 0, 0, 0, 0, 1, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.0, 0, 0, 1, -1, 2, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (-1.1, 0.6, 0, 0, 0, 0, 1, 0, 0, -2, 4, 0, 0, 0, 0, 0),
        (-23.3, 0.9, 0, 0, 2, -2, 1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 5, -7, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 1, 0, 5, -8, 0, 0, 0, 0, 0, 0),
        (-0.1, -0.6, -2, 0, 0, 2, 1, 0, 6, -8, 0, 0, 0, 0, 0, 0),
        (-0.1, 0.3, 0, 0, 0, 0, 1, 0, 0, -8, 15, 0, 0, 0, 0, 0),
        (-0.5, 2.8, -2, 0, 0, 2, 1, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.2, 0.1, -2, 0, 0, 2, 1, 0, 0, 6, -8, 0, 0, 0, 0, 0),
        (0.0, -0.2, 1, 0, 0, -1, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0),
        (10.3, 2.7, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (2.8, 0.7, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (2.6, -0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1),
        (-2.5, 0.3, 0, 0, 1, -1, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1),
        (1.0, -2.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 2),
        (0.0, 0.1, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, -1, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, 0, -1, 0, 0, 0),
        (0.3, 0.2, 0, 0, 0, 0, 0, 0, 0, -7, 13, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 7, -13, 0, 0, 0, 0, 0),
        (0.0, -0.2, 2, 0, 0, -2, 1, 0, 0, -5, 6, 0, 0, 0, 0, 0),
        (0.4, 0.0, 0, 0, 2, -2, 1, 0, 0, -8, 11, 0, 0, 0, 0, 0),
        (0.4, 0.1, 0, 0, 2, -2, 1, -1, 0, 2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0),
        (0.2, 0.4, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 3, 0, 0, 0),
        (-0.2, -0.4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 1),
        (0.7, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 2),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, -2.9, 2, 0, 0, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.4, 0.0, 0, 0, 1, -1, 2, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 1, -1, 2, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (1.9, 2.0, 0, 0, 0, 0, 1, 0, 0, 1, -2, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, 0, -2, 0, 0, 0),
        (0.0, -0.4, 0, 0, 2, -2, 1, 0, 0, -2, 0, 0, 2, 0, 0, 0),
        (-0.8, 0.5, 0, 0, 1, -1, 1, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.3, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, 0),
        (2.1, 0.5, 0, 0, 1, -1, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (-2.6, -0.7, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 0, 1),
        (0.0, 93.2, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 0, 2),
        (0.0, 0.5, 0, 0, 2, -2, 2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.0, -3.7, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 0, 2),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 1),
        (0.0, -0.2, 0, 0, 1, -1, 1, 0, 0, 1, -4, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0),
        (0.5, 0.3, 0, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 1),
        (-0.7, -0.5, 0, 0, 1, -1, 1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (0.6, 0.4, 0, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 1),
        (0.0, 2.2, 0, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 2),
        (-11.6, 0.5, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 0, 2),
        (0.5, 0.0, 0, 0, 2, -2, 2, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 0, 2),
        (0.3, -1.7, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 0, 1),
        (1.4, -7.5, 0, 0, 1, -1, 1, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (0.6, -3.0, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 1, -1, 2, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (0.8, -0.2, 0, 0, 0, 0, 1, 0, 0, 0, 0, -1, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, 0.1, 0, 0, 2, -2, 1, 0, 0, -2, 0, 1, 0, 0, 0, 0),
        (0.5, 0.0, 0, 0, 0, 0, 0, 0, 0, -6, 11, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, -11, 0, 0, 0, 0, 0),
        (0.4, 0.2, 0, 0, 0, 0, 0, -1, 0, 4, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, 0, 0, 0),
        (0.0, -0.9, 2, 0, 0, -2, 1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 2, 0, 0, -2, 0, 0, 0),
        (0.2, -0.1, 0, 0, 2, -2, 1, 0, 0, -7, 9, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0),
        (11.9, -2.2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 1),
        (-7.7, 1.4, 0, 0, 1, -1, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (2.6, -0.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 1),
        (0.0, 50.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 2),
        (0.0, 0.2, 0, 0, 2, -2, 2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 5, 0, 0, 2),
        (0.1, 0.4, 0, 0, 0, 0, 1, 0, 3, -5, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.0, -6.3, 0, 0, 2, -2, 1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.4, 0.2, 0, 0, 0, 0, 1, 0, 0, 2, -4, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 2, -2, 1, 0, 0, -4, 4, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 1, -1, 2, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0),
        (0.1, 0.3, 0, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 1),
        (0.0, -0.2, 0, 0, 1, -1, 1, 0, 0, -4, 6, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 1),
        (-0.6, 1.0, 0, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (-1.7, 0.0, 0, 0, 0, 0, 1, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (0.5, -0.3, 0, 0, 0, 0, 0, 0, 0, -5, 9, 0, 0, 0, 0, 2),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, 0, -5, 9, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -9, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (0.0, -2.7, 0, 0, 2, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-0.3, 0.0, -2, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -2, 2, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.3, 0.1, 0, 0, 0, 0, 0, 0, -6, 10, 0, 0, 0, 0, 0, 1),
        (0.2, -1.1, 0, 0, 0, 0, 0, 0, -6, 10, 0, 0, 0, 0, 0, 2),
        (-0.5, -0.2, 0, 0, 0, 0, 0, 0, -2, 3, 0, 0, 0, 0, 0, 2),
        (-0.2, -1.6, 0, 0, 0, 0, 0, 0, -2, 3, 0, 0, 0, 0, 0, 1),
        (0.0, -0.9, 0, 0, 1, -1, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (-0.1, -0.2, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, 1),
        (0.9, -0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 1),
        (-0.5, 0.2, 0, 0, 1, -1, 1, 0, 0, -1, 0, 3, 0, 0, 0, 0),
        (0.3, -0.1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 1),
        (0.9, 5.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, -8, 0, 0, 0, 0, 0),
        (-0.4, 0.3, 0, 0, 0, 0, 0, 0, 0, -4, 8, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, -2, 2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.4, -0.7, 0, 0, 0, 0, 0, 0, 0, -4, 7, 0, 0, 0, 0, 2),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, 0, -4, 7, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, 0),
        (1.0, 0.0, 0, 0, 0, 0, 1, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 2, -2, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, -5, 10, 0, 0, 0, 0, 2),
        (0.1, 0.0, 0, 0, 0, 0, 1, 0, -1, 2, 0, 0, 0, 0, 0, 0),
        (0.1, 0.4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 2),
        (0.0, -0.7, 0, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 2),
        (-0.2, -0.1, 0, 0, 0, 0, 0, 0, 0, -3, 5, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0),
        (0.1, 0.5, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, 1),
        (0.0, 0.2, 0, 0, 1, -1, 1, 0, 1, -3, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, -1, 2, 0, 0, 0, 0, 0, 1),
        (-0.2, 0.1, 0, 0, 0, 0, 0, 0, -1, 2, 0, 0, 0, 0, 0, 2),
        (-0.1, 0.7, 0, 0, 0, 0, 0, 0, -7, 11, 0, 0, 0, 0, 0, 2),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, -7, 11, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, -2, 2, 0, 0, 4, -4, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0),
        (0.0, -1.4, 0, 0, 2, -2, 1, 0, -4, 4, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 4, -5, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0),
        (-0.2, 0.6, 0, 0, 0, 0, 0, 0, -4, 7, 0, 0, 0, 0, 0, 1),
        (0.0, -0.1, 0, 0, 1, -1, 1, 0, -4, 6, 0, 0, 0, 0, 0, 0),
        (2.9, -0.1, 0, 0, 0, 0, 0, 0, -4, 7, 0, 0, 0, 0, 0, 2),
        (0.0, -21.3, 0, 0, 0, 0, 0, 0, -4, 6, 0, 0, 0, 0, 0, 2),
        (4.9, 1.2, 0, 0, 0, 0, 0, 0, -4, 6, 0, 0, 0, 0, 0, 1),
        (1.5, 0.4, 0, 0, 1, -1, 1, 0, -4, 5, 0, 0, 0, 0, 0, 0),
        (0.7, 0.2, 0, 0, 0, 0, 0, 0, -4, 6, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, -1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.5, 0, 0, 0, 0, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, 0, -1, 0, 5, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0),
        (0.0, 0.5, 0, 0, 0, 0, 0, 0, 0, -1, 3, 0, 0, 0, 0, 2),
        (0.1, 0.0, 0, 0, 0, 0, 0, 0, 0, -7, 12, 0, 0, 0, 0, 2),
        (0.0, 0.1, 0, 0, 0, 0, 0, 0, -1, 1, 0, 0, 0, 0, 0, 2),
        (5.7, -1.3, 0, 0, 0, 0, 0, 0, -1, 1, 0, 0, 0, 0, 0, 1),
        (1.1, -0.3, 0, 0, 1, -1, 1, 0, -1, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (-1.7, 0.4, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 1),
        (0.3, 0.0, 0, 0, 1, -1, 1, 0, 1, -2, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.3, 0, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 0, 0, 2),
        (-0.2, -1.3, 0, 0, 0, 0, 0, 0, 0, -1, 0, 4, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, 0),
        (0.0, 1.0, 0, 0, 0, 0, 1, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.2, -0.1, 0, 0, 0, 0, 0, 0, 0, -6, 10, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, -6, 10, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 2, -2, 1, 0, 0, -3, 0, 3, 0, 0, 0, 0),
        (-0.1, 0.0, 0, 0, 0, 0, 0, 0, 0, -3, 7, 0, 0, 0, 0, 2),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 4, -4, 0, 0, 0, 0, 0, 0),
        (0.1, -0.2, 0, 0, 0, 0, 0, 0, 0, -5, 8, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0),
        (0.0, -5.2, 0, 0, 0, 0, 0, 0, 0, -1, 0, 3, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 3, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0, 0),
        (-3.1, -0.8, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 0, 1),
        (0.5, 0.1, 0, 0, 1, -1, 1, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (0.0, 19.8, 0, 0, 0, 0, 0, 0, -2, 4, 0, 0, 0, 0, 0, 2),
        (-2.0, 0.0, 0, 0, 0, 0, 0, 0, -6, 9, 0, 0, 0, 0, 0, 2),
        (0.0, -0.5, 0, 0, 0, 0, 0, 0, -6, 9, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0, 0),
        (-0.2, -0.1, 0, 0, 0, 0, 1, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (0.0, -0.6, 0, 0, 2, -2, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, 0, -4, 6, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 1, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, 0, -1, 0, 2, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (0.0, -0.8, 0, 0, 0, 0, 1, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, -5, 9, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, -3, 4, 0, 0, 0, 0, 0, 2),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, -3, 4, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, 1),
        (0.0, -0.2, 0, 0, 0, 0, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (0.1, 0.0, 0, 0, 0, 0, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -3, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, -5, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 1, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 5, 0, 0, 0),
        (0.2, 0.0, 0, 0, 0, 0, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -2, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -1, 0, 0, 0),
        (0.0, -0.6, 0, 0, 0, 0, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 0, 0, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (0.0, 0.1, 0, 0, 0, 0, 0, 0, -8, 14, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, -5, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -8, 3, 0, 0, 0, 0),
        (0.0, 0.1, 0, 0, 0, 0, 0, 0, 0, 5, -8, 3, 0, 0, 0, 2),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, -8, 3, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, 0, -3, 8, -3, 0, 0, 0, 2),
        (0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -2, 5, 0, 0, 2),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, -8, 12, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, -2, 0, 0, 0),
        (0.0, 0.6, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0),
        (0.0, 3.2, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2),
        (-0.1, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 2, 0, 0, 2),
        (0.0, -0.2, 0, 0, 2, -2, 1, 0, -5, 5, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0),
        (0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1),
        (0.0, 11.4, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 0, 1),
        (-1.2, 0.0, 0, 0, 0, 0, 0, 0, -3, 6, 0, 0, 0, 0, 0, 2),
        (-0.4, 0.8, 0, 0, 0, 0, 0, 0, 0, -1, 4, 0, 0, 0, 0, 2),
        (0.0, -8.7, 0, 0, 0, 0, 0, 0, -5, 7, 0, 0, 0, 0, 0, 2),
        (1.9, 0.5, 0, 0, 0, 0, 0, 0, -5, 7, 0, 0, 0, 0, 0, 1),
        (0.2, 0.0, 0, 0, 1, -1, 1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 2, -2, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, -1, 0, 3, 0, 0, 0, 0, 0, 2),
        (-2.1, 1.5, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, 0, 0, 0, 2),
        (-0.2, 0.1, 0, 0, 0, 0, 0, 0, 0, -2, 6, 0, 0, 0, 0, 2),
        (0.0, -0.3, 0, 0, 0, 0, 1, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, 0, -6, 9, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0),
        (2.9, -0.6, 0, 0, 0, 0, 0, 0, -2, 2, 0, 0, 0, 0, 0, 1),
        (0.3, 0.0, 0, 0, 1, -1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (-0.7, 0.1, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, 1),
        (-0.3, 0.2, 0, 0, 0, 0, 0, 0, 0, 1, 0, 3, 0, 0, 0, 2),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, 0, -5, 7, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 0, 0, 0, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0, 0),
        (-1.6, -0.4, 0, 0, 0, 0, 0, 0, -1, 3, 0, 0, 0, 0, 0, 1),
        (0.1, 0.0, 0, 0, 1, -1, 1, 0, -1, 2, 0, 0, 0, 0, 0, 0),
        (0.0, -4.9, 0, 0, 0, 0, 0, 0, -1, 3, 0, 0, 0, 0, 0, 2),
        (-1.0, 0.0, 0, 0, 0, 0, 0, 0, -7, 10, 0, 0, 0, 0, 0, 2),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, -7, 10, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0),
        (0.0, 0.1, 0, 0, 0, 0, 0, 0, -4, 8, 0, 0, 0, 0, 0, 2),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, -4, 5, 0, 0, 0, 0, 0, 2),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, -4, 5, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0, 0),
        (0.0, 0.6, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 2),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, 0, -2, 0, 5, 0, 0, 0, 2),
        (-0.4, 0.8, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0),
        (0.3, 0.2, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 2),
        (0.0, 0.1, 0, 0, 0, 0, 0, 0, -9, 13, 0, 0, 0, 0, 0, 2),
        (-0.4, 0.2, 0, 0, 0, 0, 0, 0, 0, -1, 5, 0, 0, 0, 0, 2),
        (0.0, -0.7, 0, 0, 0, 0, 0, 0, 0, -2, 0, 4, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, -4, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, -2, 7, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 0, 0, 0, 1),
        (-4.9, 0.0, 0, 0, 0, 0, 0, 0, -2, 5, 0, 0, 0, 0, 0, 2),
        (0.0, -5.1, 0, 0, 0, 0, 0, 0, -6, 8, 0, 0, 0, 0, 0, 2),
        (1.0, 0.2, 0, 0, 0, 0, 0, 0, -6, 8, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 6, -8, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, 0, 0, 0, 0, 1, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (-0.1, 0.0, 0, 0, 0, 0, 0, 0, 0, -3, 9, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (1.1, 0.2, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 1),
        (-0.1, 0.3, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 2),
        (0.4, 0.1, 0, 0, 0, 0, 0, 0, -5, 10, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0),
        (-1.3, -0.8, 0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 2),
        (1.8, -0.4, 0, 0, 0, 0, 0, 0, -3, 3, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.6, -0.1, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 1),
        (-0.7, -2.4, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -3, 0, 0, 0),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, 0, -5, 13, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, -1, 0, 0, 0, 0),
        (-1.3, 6.7, 0, 0, 0, 0, 0, 0, 0, 2, 0, -1, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -2, 0, 0, 0),
        (0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -2, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 0),
        (-3.1, -3.5, 0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 2),
        (-0.9, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -1, 0, 0, 2),
        (0.2, -0.5, 0, 0, 0, 0, 0, 0, 0, -6, 15, 0, 0, 0, 0, 2),
        (-4.2, -2.7, 0, 0, 0, 0, 0, 0, -8, 15, 0, 0, 0, 0, 0, 2),
        (0.4, -0.6, 0, 0, 0, 0, 0, 0, -3, 9, -4, 0, 0, 0, 0, 2),
        (-0.3, 0.5, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2, -5, 0, 0, 2),
        (-0.1, 0.0, 0, 0, 0, 0, 0, 0, 0, -2, 8, -1, -5, 0, 0, 2),
        (-18.0, -5.3, 0, 0, 0, 0, 0, 0, 0, 6, -8, 3, 0, 0, 0, 2),
        (0.0, -3.5, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0),
        (-1.7, -0.4, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1),
        (-0.5, 0.0, 0, 0, 1, -1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1),
        (0.0, 3.8, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 2),
        (-1.9, -0.6, 0, 0, 0, 0, 0, 0, 0, -6, 16, -4, -5, 0, 0, 2),
        (-1.9, 0.6, 0, 0, 0, 0, 0, 0, 0, -2, 8, -3, 0, 0, 0, 2),
        (-18.0, 5.3, 0, 0, 0, 0, 0, 0, 0, -2, 8, -3, 0, 0, 0, 2),
        (-0.1, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, -8, 1, 5, 0, 0, 2),
        (-0.3, -0.5, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 5, 0, 0, 2),
        (0.4, 0.6, 0, 0, 0, 0, 0, 0, 3, -5, 4, 0, 0, 0, 0, 2),
        (-0.7, 0.0, 0, 0, 0, 0, 0, 0, -8, 11, 0, 0, 0, 0, 0, 2),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, -8, 11, 0, 0, 0, 0, 0, 1),
        (-4.2, 2.7, 0, 0, 0, 0, 0, 0, -8, 11, 0, 0, 0, 0, 0, 2),
        (0.2, 0.5, 0, 0, 0, 0, 0, 0, 0, 11, 0, 0, 0, 0, 0, 2),
        (-0.8, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 1, 0, 0, 2),
        (0.0, 0.1, 0, 0, 0, 0, 0, 0, 3, -3, 0, 2, 0, 0, 0, 2),
        (0.2, 0.0, 0, 0, 2, -2, 1, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 1, -1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.2, 0.0, 0, 0, 2, -2, 1, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (-3.1, 3.7, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 0, 0, 2),
        (-0.5, -7.2, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1, 0, 0, 0, 2),
        (-0.7, 2.8, 0, 0, 0, 0, 0, 0, -3, 7, 0, 0, 0, 0, 0, 2),
        (-1.4, 0.9, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0, 2),
        (-0.1, 0.0, 0, 0, 0, 0, 0, 0, -5, 6, 0, 0, 0, 0, 0, 2),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, -5, 6, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, 0),
        (0.4, -0.1, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, 2),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, -1, 6, 0, 0, 0, 0, 2),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 7, -9, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0),
        (-7.5, -0.2, 0, 0, 0, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, -7, 0, 0, 0, 0, 2),
        (-0.5, -0.3, 0, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 2),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, -1, 4, 0, 0, 0, 0, 0, 1),
        (-0.2, -0.1, 0, 0, 0, 0, 0, 0, -1, 4, 0, 0, 0, 0, 0, 2),
        (0.0, -3.2, 0, 0, 0, 0, 0, 0, -7, 9, 0, 0, 0, 0, 0, 2),
        (0.6, 0.2, 0, 0, 0, 0, 0, 0, -7, 9, 0, 0, 0, 0, 0, 1),
        (-0.6, -1.1, 0, 0, 0, 0, 0, 0, 0, 4, -3, 0, 0, 0, 0, 2),
        (0.0, -0.8, 0, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 2),
        (1.3, -0.3, 0, 0, 0, 0, 0, 0, -4, 4, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 0),
        (-0.5, 0.0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 1),
        (-0.1, -0.5, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 2),
        (0.1, -0.1, 0, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 2),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, 0, -3, 0, 5, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0),
        (-1.2, -0.3, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1),
        (0.0, 14.7, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 2),
        (-0.5, 0.0, 0, 0, 0, 0, 0, 0, -9, 12, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, 0, -4, 0, 0, 0, 0),
        (0.0, -0.1, 0, 0, 2, -2, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 7, -8, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, 0, -3, 0, 0, 0, 0),
        (-0.5, -0.4, 0, 0, 0, 0, 0, 0, 0, 3, 0, -3, 0, 0, 0, 2),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, -2, 6, 0, 0, 0, 0, 0, 2),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, -6, 7, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 6, -7, 0, 0, 0, 0, 0, 0),
        (-0.4, -0.2, 0, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, 0, -2, 0, 0, 0, 0),
        (-3.9, -2.9, 0, 0, 0, 0, 0, 0, 0, 3, 0, -2, 0, 0, 0, 2),
        (-0.8, -1.3, 0, 0, 0, 0, 0, 0, 0, 5, -4, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 0, 0),
        (-5.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 0, 2),
        (0.0, 2.3, 0, 0, 0, 0, 0, 0, 0, 3, 0, -1, 0, 0, 0, 2),
        (0.7, -22.4, 0, 0, 0, 0, 0, 0, 0, 3, 0, -1, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, -2, 0, 0, 2),
        (-0.1, -6.2, 0, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 2),
        (0.0, -1.3, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, -1, 0, 0, 2),
        (0.0, 0.2, 0, 0, 2, -2, 1, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, -8, 16, 0, 0, 0, 0, 0, 2),
        (0.5, -0.2, 0, 0, 0, 0, 0, 0, 0, 3, 0, 2, -5, 0, 0, 2),
        (0.0, 1.1, 0, 0, 0, 0, 0, 0, 0, 7, -8, 3, 0, 0, 0, 2),
        (0.0, 0.1, 0, 0, 0, 0, 0, 0, 0, -5, 16, -4, -5, 0, 0, 2),
        (0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 2),
        (0.5, 1.0, 0, 0, 0, 0, 0, 0, 0, -1, 8, -3, 0, 0, 0, 2),
        (0.0, -2.2, 0, 0, 0, 0, 0, 0, -8, 10, 0, 0, 0, 0, 0, 2),
        (0.4, 0.0, 0, 0, 0, 0, 0, 0, -8, 10, 0, 0, 0, 0, 0, 1),
        (0.1, 0.0, 0, 0, 0, 0, 0, 0, -8, 10, 0, 0, 0, 0, 0, 2),
        (0.2, 0.2, 0, 0, 0, 0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 2),
        (-0.5, 0.2, 0, 0, 0, 0, 0, 0, 0, 3, 0, 1, 0, 0, 0, 2),
        (0.2, 0.0, 0, 0, 0, 0, 0, 0, -3, 8, 0, 0, 0, 0, 0, 2),
        (0.9, -0.2, 0, 0, 0, 0, 0, 0, -5, 5, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 1),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0),
        (-0.8, -0.2, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 1),
        (0.0, -16.0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 2),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 2),
        (0.1, 0.0, 0, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 2),
        (0.1, 0.3, 0, 0, 0, 0, 0, 0, 0, 6, -5, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 7, -8, 0, 0, 0, 0, 0, 0),
        (0.0, 0.4, 0, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 2),
        (0.4, 0.0, 0, 0, 0, 0, 0, 0, 4, -3, 0, 0, 0, 0, 0, 2),
        (0.7, -0.2, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 0, 0, 0, 2),
        (0.0, -1.5, 0, 0, 0, 0, 0, 0, -9, 11, 0, 0, 0, 0, 0, 2),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, -9, 11, 0, 0, 0, 0, 0, 1),
        (0.0, 0.2, 0, 0, 0, 0, 0, 0, 0, 4, 0, -4, 0, 0, 0, 2),
        (-0.3, 1.6, 0, 0, 0, 0, 0, 0, 0, 4, 0, -3, 0, 0, 0, 2),
        (0.7, -0.2, 0, 0, 0, 0, 0, 0, -6, 6, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 0, 1),
        (-0.1, 8.0, 0, 0, 0, 0, 0, 0, 0, 4, 0, -2, 0, 0, 0, 2),
        (0.0, 0.1, 0, 0, 0, 0, 0, 0, 0, 6, -4, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 0),
        (-0.6, -0.1, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 1),
        (0.0, -1.3, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 2),
        (-1.4, 0.1, 0, 0, 0, 0, 0, 0, 0, 4, 0, -1, 0, 0, 0, 2),
        (0.0, 0.3, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, -2, 0, 0, 2),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, 0, 5, -2, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 8, -9, 0, 0, 0, 0, 0, 0),
        (0.1, 0.0, 0, 0, 0, 0, 0, 0, 5, -4, 0, 0, 0, 0, 0, 2),
        (-1.0, 0.2, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 2),
        (0.0, -1.0, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 1),
        (0.2, 0.0, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 1),
        (0.5, -0.1, 0, 0, 0, 0, 0, 0, -7, 7, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 0, 0),
        (-0.4, 0.0, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 1),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 2),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, 0, 0, 0, 0, 0, 0, 0, 5, 0, -4, 0, 0, 0, 2),
        (0.1, 0.4, 0, 0, 0, 0, 0, 0, 0, 5, 0, -3, 0, 0, 0, 2),
        (0.5, -0.1, 0, 0, 0, 0, 0, 0, 0, 5, 0, -2, 0, 0, 0, 2),
        (-0.1, 0.0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 2),
        (0.4, 0.0, 0, 0, 0, 0, 0, 0, -8, 8, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 8, -8, 0, 0, 0, 0, 0, 0),
        (-0.3, 0.0, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 0, 1),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 0, 2),
        (-0.1, 0.0, 0, 0, 0, 0, 0, 0, -9, 9, 0, 0, 0, 0, 0, 1),
        (0.0, -0.5, 0, 0, 0, 0, 0, 0, -9, 9, 0, 0, 0, 0, 0, 1),
        (0.3, 0.0, 0, 0, 0, 0, 0, 0, -9, 9, 0, 0, 0, 0, 0, 1),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 9, -9, 0, 0, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 0, 0, 0, 0, 6, -4, 0, 0, 0, 0, 0, 1),
        (0.4, 0.3, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 2),
        (0.0, -0.4, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0),
        (0.2, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 1),
        (0.0, -0.3, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0),
        (0.1, 0.0, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 1),
        (0.0, -0.2, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 2),
        (0.0, -0.1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2),
        (0.0, 0.0, 1, 0, 0, -2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, -2, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, -2, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, -2, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 2, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, -2, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 2, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 0, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 2, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, -1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 2, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.0, 0.0, -2, 0, 0, 0, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (-0.2, 0.0, -1, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (0.3, 0.0, 1, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.0, 0.2, -1, 0, 0, 2, 1, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, 0.0, -1, 0, 0, 2, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 1, 0, 0, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.0, 0.1, 1, 0, 2, -2, 2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 1, 0, 2, -2, 2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 1, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, -2, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, -2, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, -0.1, 0, 0, 2, 0, 2, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.0, -0.3, 0, 0, 2, 0, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 2, 0, 2, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.1, 0.0, 0, 0, 2, 0, 2, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 0, 2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (-0.2, 0.0, 0, 0, 1, 1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-2.7, -5.5, 1, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.1, 0.2, -1, 0, 2, 0, 2, 0, 10, -3, 0, 0, 0, 0, 0, 0),
        (1.5, 0.2, 0, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.1, -0.2, 1, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.4, 0.1, 0, 0, 2, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.4, -0.1, 0, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (-2.7, 5.5, -1, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.0, -0.1, 2, 0, 2, -2, 2, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (-0.6, -1.1, 1, 0, 2, 0, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.0, 0.0, 0, 0, 1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.6, 1.1, -1, 0, 2, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.1, -2, 0, 2, 2, 2, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.1, 0.0, 0, 0, 2, 0, 2, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (0.0, -0.4, 0, 0, 2, 0, 2, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.3, 0, 0, 2, 0, 2, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.0, 0.1, 0, 0, 2, 0, 2, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, -1, 0, 2, 2, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.0, 0.1, 1, 0, 2, 0, 2, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.0, 0.2, -1, 0, 2, 2, 2, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (-0.5, -1.1, 2, 0, 2, 0, 2, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.1, 0.0, 1, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.1, 0.0, 1, 0, 2, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.2, 0.0, 1, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.5, 1.0, 0, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.1, -0.2, 2, 0, 2, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.0, -0.6, -1, 0, 2, 2, 2, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.0, -0.3, -1, 0, 2, 2, 2, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 1, 0, 2, 0, 2, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 0, 0, 2, 2, 2, 0, 0, 2, 0, -2, 0, 0, 0, 0),
    ),
    # j = 1
    (
        (0.0, 908.6, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -301.5, 0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -48.5, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 47.0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -18.4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -67.7, 0, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.8, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -6.3, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 29.9, 0, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.9, 0, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 3.2, -1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.1, -1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.0, -2, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.1, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -1.1, 2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, 1.0, 1, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.2, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -4.2, 0, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.0, -0.1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    ),
)

PSI2006_TERMS = (
    # j = 0
    (
        (-17206424.18, 3338.60, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1317091.22, -1369.60, 0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-227641.81, 279.60, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (207455.40, -69.80, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (147587.70, 1181.70, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (71115.90, -87.20, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-51682.10, -52.40, 0, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-38730.20, 38.00, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-30146.40, 81.60, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-21582.90, 11.10, 0, 1, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-15699.80, -16.80, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (12822.70, 18.10, 0, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-12345.70, 1.90, 1, 0, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6337.90, -15.00, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6311.00, 2.70, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5964.50, 14.90, 1, 0, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5797.60, -18.90, 1, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5161.30, 12.90, 1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4772.20, -1.80, 2, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4589.30, 3.10, 2, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3856.60, 15.80, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3248.10, 0.00, 0, 2, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3104.60, 13.10, 2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2924.30, -7.40, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2859.30, -0.10, 1, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2588.70, -6.60, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2178.30, 1.30, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2044.10, 1.00, 1, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1670.70, -1.00, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1579.40, -1.60, 0, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1516.40, 1.10, 1, 0, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1405.30, 7.90, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1287.30, -3.70, 1, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1265.40, 6.30, 0, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1102.40, -1.40, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1020.40, 2.50, 1, 0, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-308.40, 512.30, 0, 0, 1, -1, 1, 0, 0, -1, 0, -2, 5, 0, 0, 0),
        (-768.70, 4.40, 1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (756.60, -1.10, 0, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-735.00, -0.80, 1, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (714.10, 0.80, 0, 1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-663.70, 2.50, 0, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (657.50, -2.40, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (644.30, -0.70, 2, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-630.20, 0.20, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (580.00, 0.20, 1, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (577.40, -1.50, 2, 0, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-535.00, 2.10, 2, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (494.00, -2.10, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (475.20, -0.30, 0, 1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (472.50, -0.60, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-402.60, -35.30, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-434.80, -1.00, 0, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-423.00, 0.50, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (406.50, 0.60, 2, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (405.60, 0.50, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (144.40, 240.90, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, -1),
        (357.90, 0.50, 0, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-338.90, 0.50, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (333.90, -1.30, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-327.60, 0.10, 1, -1, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (307.10, -0.20, 2, 0, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-290.10, 1.50, 3, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-287.80, 0.80, 1, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (281.90, 0.70, 1, 1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (264.70, 1.10, 0, 1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (248.10, -0.70, 1, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (229.40, -1.00, 2, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (217.90, -0.20, 2, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-46.20, 160.40, 0, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (206.50, 0.00, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, -2),
        (198.70, -0.60, 1, 0, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -198.80, 0, 1, -1, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-198.10, 0.00, 1, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (120.00, 59.80, 0, 0, 1, -1, 1, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (166.00, -0.50, 0, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (157.50, -0.60, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (152.10, 0.90, 1, 0, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (148.50, 0.00, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (144.00, 0.00, 0, 0, 0, 0, 0, 0, 0, 8, -16, 4, 5, 0, 0, 0),
        (-140.50, 0.40, 1, 0, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-137.80, -0.20, 2, 0, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-133.80, -0.50, 1, 0, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-133.10, 0.80, 1, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-131.40, 0.00, 1, -1, 0, -1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (129.00, 0.00, 1, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-128.20, -0.30, 2, 0, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (128.30, 0.00, 0, 2, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-122.30, -2.90, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (124.80, 0.00, 0, 0, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (121.40, 0.50, 2, 0, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-116.60, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 2),
        (-114.60, -0.30, 1, 0, -4, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-110.00, 0.90, 2, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-102.00, -2.50, 1, 0, 0, -1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -104.40, 1, 0, -1, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (101.90, -0.10, 2, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (101.40, -0.10, 2, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-97.00, 0.20, 1, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (94.90, 0.10, 1, -1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (93.40, -0.30, 3, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (92.20, -0.10, 0, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-46.00, -43.50, 0, 0, 0, 0, 1, 0, 0, -1, 2, 0, 0, 0, 0, 0),
        (-44.90, 43.00, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0),
        (-87.50, 0.10, 0, 1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-83.40, 0.20, 0, 0, 2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (81.50, -0.10, 0, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-76.60, 0.10, 1, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-74.20, 0.10, 1, 1, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (71.50, -0.40, 0, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (71.60, -0.20, 2, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-70.40, 0.00, 0, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-69.40, 0.50, 0, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-67.30, 0.20, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (66.60, -0.30, 0, 0, 2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (66.70, 0.10, 0, 1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-65.80, 0.00, 0, 1, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-63.90, -0.20, 1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-42.50, 21.20, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, -1),
        (0.80, 61.40, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (-49.10, 12.80, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 0),
        (-59.80, 0.00, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (59.50, 0.00, 1, -1, 0, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-59.00, 0.40, 1, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-59.10, 0.00, 0, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (58.80, -0.30, 2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-58.50, -0.20, 1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-57.80, 0.10, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-57.00, -0.20, 1, -1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (23.50, 33.40, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, 0),
        (56.50, -0.10, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (12.30, -41.60, 0, 0, 0, 0, 0, 0, 0, 2, -8, 3, 0, 0, 0, -2),
        (12.30, -41.50, 0, 0, 0, 0, 0, 0, 0, 6, -8, 3, 0, 0, 0, 2),
        (53.50, -0.20, 0, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (51.70, 1.60, 0, 0, 0, 0, 0, 0, 0, 3, 0, -1, 0, 0, 0, 2),
        (52.80, 0.00, 1, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.10, -48.10, 0, 0, 1, -1, 1, 0, 0, -1, 0, 2, -5, 0, 0, 0),
        (-50.20, 0.30, 3, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (49.40, -0.20, 0, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (49.20, -0.30, 1, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (49.30, -0.20, 1, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-48.80, 0.20, 2, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-49.00, 0.00, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0, -2),
        (46.70, 0.10, 1, 1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-46.80, 0.00, 0, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-46.30, 0.00, 1, -1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (45.80, 0.00, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0, -2),
        (-45.30, -0.10, 1, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.80, -43.60, 0, 0, 2, -2, 1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (44.60, 0.20, 0, 1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (43.90, 0.00, 2, 0, 0, -2, 0, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-43.80, 0.00, 0, 3, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-16.60, 26.90, 0, 0, 0, 0, 0, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (41.30, 1.30, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (-42.10, 0.10, 1, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (41.60, -0.20, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (41.20, -0.20, 2, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (34.90, -6.20, 2, 0, 0, -2, 0, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (39.60, 0.00, 1, 0, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-39.00, 0.00, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.40, 29.80, 0, 0, 0, 0, 1, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (37.00, -0.80, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 2),
        (37.50, -0.10, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.20, 29.20, 0, 0, 0, 0, 1, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (-36.80, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (0.00, 36.40, 1, 0, -1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (36.00, -0.10, 1, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-36.10, 0.00, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-35.70, 0.10, 1, 0, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (27.30, 8.00, 0, 0, 1, -1, 1, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (-26.60, -7.80, 0, 0, 1, -1, 0, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (-33.90, 0.00, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 2),
        (-9.10, 24.80, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (33.70, -0.10, 1, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (33.50, -0.20, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-33.50, -0.10, 0, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-33.40, 0.00, 1, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 32.80, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.00, 33.00, 1, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-22.60, 10.10, 1, 0, 0, 0, 0, 0, -18, 16, 0, 0, 0, 0, 0, 0),
        (-32.50, 0.10, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.10, 27.20, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 1),
        (-32.10, 0.10, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (30.90, 0.10, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (21.90, 8.90, 1, 0, 0, 0, 0, 0, -10, 3, 0, 0, 0, 0, 0, 0),
        (30.10, -0.10, 1, -1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-28.60, 0.10, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-28.40, 0.00, 2, 0, 0, -2, -1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (28.00, -0.10, 0, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-27.60, 0.00, 1, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (27.60, 0.00, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, -26.10, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0, -2),
        (26.30, 0.20, 1, 0, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-26.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 2),
        (-25.90, 0.20, 4, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (17.40, 8.40, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, -1, 0, 0, 0),
        (25.30, 0.10, 1, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (25.20, 0.00, 2, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-24.50, 0.10, 0, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (24.50, 0.00, 1, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (24.30, -0.10, 1, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5.00, 19.40, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (1.00, 23.30, 0, 0, 2, -2, 0, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (-8.60, 15.30, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0),
        (1.40, -21.80, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 1),
        (-23.10, 0.00, 2, 0, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (22.90, 0.00, 1, 0, -2, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (22.80, 0.00, 2, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-21.90, 0.00, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.10, 17.50, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, -2),
        (-21.30, 0.00, 0, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (20.80, 0.10, 2, 0, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-20.80, 0.10, 1, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-20.20, 0.00, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0, -2),
        (19.90, 0.00, 0, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-19.70, -0.10, 1, 0, -4, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-19.20, 0.20, 2, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (13.10, -6.30, 1, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-14.50, 4.70, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, 0),
        (12.60, -6.30, 1, 0, -2, 0, -2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (-18.80, 0.00, 0, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (18.60, -0.10, 0, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (15.90, -2.80, 1, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (18.70, 0.00, 1, 0, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-18.40, -0.30, 0, 0, 0, 0, 0, 0, 0, 4, 0, -2, 0, 0, 0, 2),
        (-15.40, -3.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, -1, 0, 0, 0, 2),
        (0.50, -17.30, 0, 0, 0, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 2),
        (-17.50, 0.00, 2, 0, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (17.40, 0.10, 1, 1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (16.30, -1.20, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1, 0, 0, 0, 2),
        (6.20, -11.20, 0, 0, 0, 0, 0, 0, 8, -11, 0, 0, 0, 0, 0, -2),
        (-5.60, -11.70, 0, 0, 0, 0, 0, 0, 0, 8, -16, 4, 5, 0, 0, -2),
        (-2.70, -14.30, 0, 0, 1, -1, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (12.50, -4.30, 0, 0, 0, 0, 0, 0, 0, 8, -16, 4, 5, 0, 0, 2),
        (14.00, 2.70, 0, 0, 1, -1, 1, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (-16.30, 0.20, 1, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.10, 11.40, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 1),
        (10.30, -6.00, 1, 0, 0, -2, 0, 0, 19, -21, 3, 0, 0, 0, 0, 0),
        (0.00, -16.20, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-16.10, 0.00, 3, 0, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (15.90, 0.00, 1, 1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.80, -11.00, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 2, 0, 0, 0),
        (6.70, -9.10, 0, 0, 0, 0, 0, 0, 0, 3, 0, -2, 0, 0, 0, 2),
        (-6.10, -9.60, 0, 0, 0, 0, 0, 0, 8, -15, 0, 0, 0, 0, 0, -2),
        (15.60, 0.00, 0, 1, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-15.40, 0.10, 0, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.50, -7.00, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 0, 0, 2),
        (-15.30, -0.10, 0, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-15.10, -0.10, 1, 1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.00, -7.10, 0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 2),
        (-12.70, 2.10, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 2),
        (14.70, 0.00, 3, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (14.30, -0.30, 0, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 2),
        (14.40, -0.10, 1, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (14.10, 0.00, 0, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (13.80, 0.00, 2, 0, 0, -2, 0, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (-13.40, 0.10, 3, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-13.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 2),
        (13.20, 0.00, 2, 1, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.50, 10.60, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0, -1),
        (0.00, 13.10, 1, 0, 0, -1, 0, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (-2.50, 10.60, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, -1),
        (12.90, 0.10, 0, 2, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (12.80, 0.00, 0, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-12.30, 0.00, 2, 0, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.80, 4.50, 0, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0),
        (-12.10, 0.10, 0, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-12.00, 0.00, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (11.80, -0.10, 3, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-11.80, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 0, 0, 0, -2),
        (11.70, 0.00, 0, 0, 2, -2, 1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (-11.70, 0.00, 0, 0, 0, 0, 0, 0, 6, -8, 0, 0, 0, 0, 0, -2),
        (-11.50, 0.00, 2, 1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (11.30, -0.10, 4, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-11.40, 0.00, 2, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-11.40, 0.00, 0, 0, 1, -1, 1, 0, 0, 3, -8, 3, 0, 0, 0, 0),
        (0.00, -11.40, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 0, 2),
        (0.00, -11.40, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 0, 0, 0, -2),
        (11.30, 0.00, 1, -1, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-11.30, 0.00, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0, -2),
        (4.60, 6.60, 0, 0, 0, 0, 1, 0, 8, -13, 0, 0, 0, 0, 0, 0),
        (11.00, 0.00, 2, 1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.20, -8.70, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, 0),
        (-6.80, 3.90, 0, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0),
        (-10.30, -0.30, 1, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.60, 0.00, 0, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.90, -1.60, 2, 0, 0, -2, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (10.50, 0.00, 1, -1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.80, 1.70, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0, -1),
        (10.40, 0.00, 1, 2, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (10.30, 0.00, 1, 0, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.20, 0.00, 2, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.20, 0.00, 2, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.80, -3.40, 1, 0, 0, 0, -1, 0, -18, 16, 0, 0, 0, 0, 0, 0),
        (10.10, 0.00, 2, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.00, -0.10, 1, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-10.00, 0.10, 1, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.90, 0.00, 0, 0, 1, -1, 1, 0, 0, -5, 8, -3, 0, 0, 0, 0),
        (2.10, -7.80, 0, 0, 1, -1, 0, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (8.30, 1.50, 0, 0, 0, 0, 0, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (-9.20, -0.50, 2, -1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.00, 5.70, 0, 0, 0, 0, 1, 0, -8, 13, 0, 0, 0, 0, 0, 0),
        (-7.80, -1.80, 2, 0, 0, -2, 0, 0, -6, 8, 0, 0, 0, 0, 0, 0),
        (-9.60, 0.00, 1, -1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.10, -0.40, 2, 1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.40, 0.00, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.40, 0.00, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.40, 0.00, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.40, 0.00, 0, 1, -2, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.30, 0.00, 1, 0, -4, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.30, 1.00, 0, 2, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.20, 0.10, 2, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (9.20, 0.10, 0, 1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.60, 1.70, 0, 0, 0, 0, 1, 0, 0, 0, 0, -2, 5, 0, 0, 0),
        (-9.10, 0.00, 2, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-9.10, 0.00, 1, 0, -2, -3, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.30, 1.70, 0, 0, 0, 0, 1, 0, 0, 0, 0, 2, -5, 0, 0, 0),
        (2.00, -7.00, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (8.90, 0.00, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 0),
        (-8.90, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 2),
        (-8.80, 0.00, 2, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.70, 0.00, 0, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -8.60, 0, 0, 0, 0, 0, 0, 0, 6, -16, 4, 5, 0, 0, -2),
        (5.70, -2.80, 1, 0, 0, 0, 1, 0, -18, 16, 0, 0, 0, 0, 0, 0),
        (8.50, 0.00, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.40, 0.00, 1, -1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.40, 0.00, 0, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.30, 0.00, 3, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.30, 0.00, 1, 0, 2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.30, 0.00, 1, 0, -2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.30, 0.00, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 0),
        (-3.50, -4.80, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, 0, 0, 0, 2),
        (8.20, 0.00, 2, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.20, 0.00, 2, -1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.10, -0.10, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (8.20, 0.00, 1, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.90, 0.00, 2, 0, -4, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.30, -1.60, 0, 0, 0, 0, 0, 0, 3, -7, 0, 0, 0, 0, 0, -2),
        (7.80, 0.00, 3, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.60, -1.20, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 1, 0, 0, 0),
        (7.70, 0.00, 2, 0, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.70, 0.00, 2, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.40, -0.30, 1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.50, 0.00, 1, 0, 2, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 7.50, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -1, 0, 0, 0),
        (5.20, 2.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 2),
        (7.40, 0.00, 0, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.40, 0.00, 0, 0, 0, 0, 0, 0, 7, -9, 0, 0, 0, 0, 0, -2),
        (-7.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2),
        (-1.40, -5.90, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0, -1),
        (-7.30, 0.00, 1, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.70, 3.50, 0, 0, 0, 0, 1, 0, 0, 1, -2, 0, 0, 0, 0, 0),
        (7.10, 0.00, 1, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.90, 0.00, 2, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.40, -1.50, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 2),
        (-0.30, 6.60, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, 0, -2),
        (-6.80, 0.00, 1, 1, -2, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, 5.50, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, -1),
        (4.50, -2.20, 0, 0, 0, 0, 0, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (1.10, 5.60, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0),
        (-6.50, 0.00, 0, 1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.30, 5.20, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1),
        (6.40, 0.00, 2, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.80, 3.60, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 0, 0, 0, 0),
        (-6.30, 0.00, 3, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.30, 0.00, 2, 1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.30, 0.00, 1, 1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -6.30, 1, 0, -1, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.30, -0.90, 2, 0, 0, -2, -1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (6.20, 0.00, 1, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.20, 2.00, 0, 0, 1, -1, 0, 0, 0, -1, 0, 0, -1, 0, 0, 0),
        (-6.10, 0.00, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.10, 0.00, 0, 2, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.00, 0.00, 2, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.00, 0.00, 1, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.60, 1.40, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0, 0),
        (-1.10, -4.90, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, -1),
        (0.60, 5.40, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1),
        (5.90, 0.00, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 0),
        (5.70, 0.00, 1, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5.60, 0.00, 2, 0, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.60, -2.90, 1, 0, 0, -1, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (-0.80, -4.70, 0, 0, 1, -1, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (4.70, 0.80, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1),
        (5.40, 0.00, 2, 0, 0, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-2.00, 3.40, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0),
        (-2.10, -3.20, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0, 2),
        (5.30, 0.00, 3, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5.30, 0.00, 1, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.30, 0.00, 1, 0, 0, -1, 0, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (-0.60, -4.70, 0, 0, 1, -1, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (-5.00, 0.30, 0, 0, 0, 0, 0, 0, 8, -10, 0, 0, 0, 0, 0, -2),
        (-1.40, -3.90, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0, 0),
        (-0.60, 4.70, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, -1),
        (5.10, 0.00, 2, 0, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.10, 0.00, 2, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5.10, 0.00, 1, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.10, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, -2),
        (5.00, 0.00, 0, 0, 2, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-1.00, 4.00, 0, 0, 1, -1, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (4.90, 0.00, 3, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.90, 0.00, 0, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.80, 0.00, 0, 1, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.80, 0.00, 0, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.00, -1.80, 0, 0, 0, 0, 0, 0, 0, 5, -4, 0, 0, 0, 0, 2),
        (4.70, 0.00, 2, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.70, 0.00, 2, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.70, 0.00, 1, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.70, 0.00, 1, 1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.80, -2.90, 0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 2),
        (-2.50, 2.20, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0),
        (-3.20, 1.50, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -1),
        (-4.60, 0.00, 2, 0, -4, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.50, 0.00, 4, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.50, 0.00, 1, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.50, 0.00, 1, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.50, 0.00, 0, 1, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.50, 0.00, 0, 0, 4, -4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -4.50, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0, -2),
        (-4.40, 0.00, 3, 0, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.40, 0.00, 2, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.40, 0.00, 0, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.70, -0.70, 0, 0, 0, 0, 0, 0, 0, 4, 0, -3, 0, 0, 0, 2),
        (4.30, 0.00, 2, 0, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.30, 0.00, 1, 0, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.80, 3.50, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0, -1),
        (0.70, -3.60, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1),
        (-1.30, -3.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, -5, 0, 0, 0),
        (4.20, 0.00, 2, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.20, 0.00, 0, 1, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.50, -0.70, 0, 0, 1, -1, 0, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (-0.80, 3.40, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, -1),
        (1.90, -2.30, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 2),
        (4.10, 0.00, 2, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.00, 0.00, 1, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.00, 0.00, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 0, 0),
        (2.60, -1.40, 0, 0, 0, 0, 0, 0, 0, 4, -3, 0, 0, 0, 0, 2),
        (-0.70, -3.20, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 1),
        (-0.80, -3.10, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0, -1),
        (3.90, 0.00, 1, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.90, 0.00, 1, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.60, 2.30, 0, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0),
        (3.80, 0.00, 2, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.80, 0.00, 2, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.80, 0.00, 2, -2, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.80, 0.00, 1, 0, 2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.70, 0.00, 2, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.50, 2.20, 2, 0, 0, -2, 0, 0, 0, -6, 8, 0, 0, 0, 0, 0),
        (-3.70, 0.00, 1, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.70, 0.00, 0, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.10, -0.60, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 2),
        (2.40, -1.30, 0, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, -2),
        (3.60, 0.00, 1, 1, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.60, 0.00, 1, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.60, 0.00, 1, -1, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.60, 0.00, 0, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, -2.70, 0, 0, 1, -1, 1, 0, 0, -1, 0, -4, 10, 0, 0, 0),
        (-3.00, -0.60, 0, 0, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, -2),
        (2.40, -1.20, 2, 0, 2, 0, 2, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (2.40, 1.20, 2, 0, 0, -2, 0, 0, 0, -5, 6, 0, 0, 0, 0, 0),
        (-2.40, -1.20, 0, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-1.70, -1.90, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 2, 0),
        (2.60, -0.90, 2, 0, -1, -1, 0, 0, 0, 3, -7, 0, 0, 0, 0, 0),
        (3.50, 0.00, 2, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.50, 0.00, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.50, 0.00, 1, -2, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 2.40, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, 2, 0, 0, 0),
        (-0.70, 2.80, 0, 0, 1, -1, 1, 0, -4, 5, 0, 0, 0, 0, 0, 0),
        (3.50, 0.00, 0, 0, 0, 4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, -3.20, 0, 0, 0, 0, 0, 0, 0, 4, 0, -1, 0, 0, 0, 2),
        (0.00, 3.50, 0, 0, 0, 0, 0, 0, 0, 2, 0, -1, 0, 0, 0, 0),
        (1.40, 2.10, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, -1),
        (0.80, -2.70, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-1.10, -2.40, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, -2),
        (2.20, 1.20, 0, 0, 0, 0, 0, 0, 0, 1, -8, 3, 0, 0, 0, -2),
        (3.40, 0.00, 1, 0, 0, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.40, 0.00, 1, 0, 0, -2, 0, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-3.40, 0.00, 1, -1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.40, 0.00, 0, 0, 0, 0, 0, 0, 9, -11, 0, 0, 0, 0, 0, -2),
        (3.30, 0.00, 1, 0, -2, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.30, 0.00, 0, 1, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.00, -0.30, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, -1),
        (3.20, 0.00, 3, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.20, 0.00, 2, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.10, 1.10, 2, 0, 0, 0, 0, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (3.20, 0.00, 1, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.10, -1.10, 1, 0, 2, 0, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (-3.20, 0.00, 1, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.10, -1.10, 1, 0, -2, 0, -1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (3.20, 0.00, 1, 0, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.20, 0.00, 1, 0, -4, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.20, 0.00, 0, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, -2.20, 0, 0, 2, -2, 1, 0, 0, -9, 13, 0, 0, 0, 0, 0),
        (0.00, -3.20, 0, 0, 0, 0, 1, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (-1.10, -2.10, 0, 0, 0, 0, 1, 0, 0, -2, 4, 0, 0, 0, 0, 0),
        (-0.40, -2.80, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0),
        (-3.10, 0.00, 1, -1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.10, 0.00, 1, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.10, 0.00, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.10, 0.00, 0, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 3.10, 0, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0),
        (-0.30, 2.80, 0, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (3.00, 0.00, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.00, 0.00, 1, 1, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.00, 0.00, 1, 1, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 3.00, 0, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 2.40, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, -1),
        (-1.90, -1.10, 0, 0, 0, 0, 0, 0, 0, 3, -8, 3, 0, 0, 0, 0),
        (2.30, 0.70, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 1),
        (2.90, 0.00, 3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.90, 0.00, 2, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.90, 0.00, 2, -1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.90, 0.00, 2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.90, 0.00, 1, 1, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.90, 0.00, 1, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.90, 1, 0, 0, -1, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (-2.40, 0.50, 0, 0, 0, 0, 0, 0, 6, -10, 0, 0, 0, 0, 0, -2),
        (2.90, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, -1, 0, 0, 2),
        (0.60, 2.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 1),
        (-2.80, 0.00, 2, 0, 2, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.80, 0.00, 1, 2, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.80, 0.00, 1, 1, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.80, 0.00, 1, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.80, 0.00, 0, 1, 2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.80, 0.00, 0, 0, 0, 0, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.40, 2.40, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0),
        (2.80, 0.00, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 0, 0),
        (0.50, -2.30, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1),
        (-1.80, -1.00, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 2),
        (-2.70, 0.00, 2, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.70, 0.00, 2, -1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.70, 0.00, 0, 1, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.70, 0.00, 0, 0, 2, -2, 1, 0, -4, 4, 0, 0, 0, 0, 0, 0),
        (2.70, 0.00, 0, 0, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.10, -0.60, 0, 0, 0, 0, 1, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (0.00, -2.70, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0, -2),
        (2.70, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0),
        (1.90, -0.80, 0, 0, 0, 0, 0, 0, 0, 1, -4, 0, 0, 0, 0, -2),
        (-2.60, 0.00, 3, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.60, 0.00, 3, 0, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.60, 0.00, 2, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -2.60, 0, 0, 3, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 2.10, 0, 0, 1, -1, 1, 0, -1, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 2.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -2, 0, 0, 0),
        (-2.50, 0.00, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.50, 0.00, 1, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, -1.60, 0, 0, 1, -1, 0, 0, 0, -1, 0, -2, 5, 0, 0, 0),
        (0.60, 1.90, 0, 0, 0, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0),
        (-2.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 7, -8, 3, 0, 0, 0, 2),
        (-1.60, 0.90, 0, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, -2),
        (-0.40, 2.10, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 1),
        (-2.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0),
        (1.60, 0.80, 1, 0, 0, -1, 0, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (-2.40, 0.00, 3, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.40, 0.00, 3, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.40, 0.00, 1, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.40, 0.00, 1, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.40, 0.00, 1, -1, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.40, 0, 0, 1, -1, 0, 0, 0, -1, 0, -1, 1, 0, 0, 0),
        (0.00, -2.40, 0, 0, 0, 0, 0, 0, 7, -10, 0, 0, 0, 0, 0, -2),
        (0.50, 1.90, 0, 0, 0, 0, 0, 0, 6, -8, 0, 0, 0, 0, 0, -1),
        (2.10, 0.30, 0, 0, 0, 0, 0, 0, 0, 5, -8, 3, 0, 0, 0, 0),
        (-2.30, 0.00, 5, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.30, 0.00, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.30, 0.00, 3, 0, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.30, 0.00, 2, 0, 0, -6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.30, 0.00, 1, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.30, 0.00, 1, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.30, 1, 0, 0, -1, -1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (1.00, 1.30, 1, -2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, -1.20, 0, 0, 1, -1, 1, 0, 8, -14, 0, 0, 0, 0, 0, 0),
        (-0.90, -1.40, 0, 0, 1, -1, 1, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (-1.40, 0.90, 0, 0, 0, 0, 0, 0, 3, -9, 4, 0, 0, 0, 0, -2),
        (-2.20, 0.00, 2, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.20, 0.00, 1, 2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.20, 0.00, 1, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.20, 0.00, 1, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.20, 0.00, 1, -1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.20, 0.00, 0, 2, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, -1.30, 0, 0, 1, -1, 1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (1.50, -0.70, 0, 0, 0, 0, 1, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (-1.30, 0.90, 0, 0, 0, 0, 0, 0, 3, -5, 4, 0, 0, 0, 0, 2),
        (1.40, 0.80, 0, 0, 0, 0, 0, 0, 0, 8, -15, 0, 0, 0, 0, -2),
        (1.30, 0.90, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 2),
        (1.60, -0.60, 0, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0),
        (0.00, 2.20, 0, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, 0),
        (-1.70, -0.40, 2, 0, 0, -2, 1, 0, -6, 8, 0, 0, 0, 0, 0, 0),
        (-2.10, 0.00, 2, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.10, 0.00, 1, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.10, 0.00, 0, 1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.10, 0.00, 0, 1, -2, 2, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 1.70, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, -1),
        (1.60, -0.50, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0, 0),
        (0.40, 1.70, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 0, 0, 0, 2),
        (1.80, -0.30, 0, 0, 0, 0, 0, 0, 0, 3, 0, -3, 0, 0, 0, 0),
        (1.40, 0.70, 0, 0, 1, -1, 0, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (-2.00, 0.00, 4, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.00, 0.00, 2, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.00, 0.00, 2, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.00, 0.00, 1, 1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.00, 0.00, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.70, -0.30, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 2),
        (0.70, 1.30, 0, 0, 0, 0, 0, 0, 0, 5, -9, 0, 0, 0, 0, 0),
        (-0.80, 1.20, 0, 0, 0, 0, 0, 0, 0, 5, -9, 0, 0, 0, 0, -2),
        (0.90, -1.10, 0, 0, 0, 0, 0, 0, 0, 3, 0, -3, 0, 0, 0, 2),
        (0.00, -2.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -1, 0, 0, 2),
        (-0.90, -1.10, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 1),
        (0.30, 1.60, 0, 0, 1, -1, 0, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (1.60, -0.30, 0, 0, 0, 0, 0, 0, 7, -11, 0, 0, 0, 0, 0, -2),
        (0.80, 1.10, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0),
        (-1.90, 0.00, 3, 0, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.90, 0.00, 2, 1, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.90, 0.00, 2, -1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.90, 0.00, 1, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.90, 0.00, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.90, 0.00, 1, 0, 0, -2, 0, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (1.90, 0.00, 1, 0, -4, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.90, 0, 0, 1, -1, 1, 0, 0, -9, 15, 0, 0, 0, 0, 0),
        (0.40, 1.50, 0, 0, 0, 0, 1, 0, 0, 0, 0, -1, 0, 0, 0, 0),
        (-1.90, 0.00, 0, 0, 0, 0, 1, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 1.90, 0, 0, 0, 0, 1, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (1.90, 0.00, 0, 0, 0, 0, 0, 0, 8, -8, 0, 0, 0, 0, 0, 0),
        (0.40, -1.50, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 1),
        (0.70, -1.20, 0, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 2),
        (1.90, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 2),
        (0.00, -1.90, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 1, 0, 0, 2),
        (1.80, 0.00, 4, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.80, 0.00, 3, 0, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.80, 0.00, 1, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.80, 0.00, 1, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.80, 0.00, 0, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.80, 0.00, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.80, 0.00, 0, 0, 1, -1, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (1.20, -0.60, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 5, 0, 0, 2),
        (-1.10, -0.60, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2, -5, 0, 0, 2),
        (-1.70, 0.00, 1, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.70, 0.00, 1, 0, -2, 4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.70, 0.00, 1, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.70, 0.00, 0, 2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.70, 0.00, 0, 2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.70, 0.00, 0, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.70, 0.00, 0, 1, -4, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.40, -0.30, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 0, 2),
        (0.50, 1.20, 0, 0, 0, 0, 0, 0, 0, 3, 0, 2, -5, 0, 0, 2),
        (-1.70, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, -2),
        (-1.70, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, -4, 0, 0, 0, -2),
        (1.60, 0.00, 3, 0, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.60, 0.00, 2, 0, 0, -2, 1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (-1.60, 0.00, 2, 0, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.60, 0.00, 2, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.60, 0.00, 1, 0, 0, -6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.60, 0.00, 1, 0, -2, -3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.60, 0.00, 1, 0, -2, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.60, 0.00, 0, 1, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.60, 0.00, 0, 1, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, -0.60, 0, 0, 0, 0, 1, 0, 3, -7, 4, 0, 0, 0, 0, 0),
        (-0.30, 1.30, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 0, -1),
        (-0.30, -1.30, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, 1),
        (-0.50, -1.10, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, -2),
        (-1.10, 0.50, 0, 0, 0, 0, 0, 0, 0, 11, 0, 0, 0, 0, 0, 2),
        (-1.10, 0.50, 0, 0, 0, 0, 0, 0, 0, 6, -15, 0, 0, 0, 0, -2),
        (0.60, -1.00, 0, 0, 0, 0, 0, 0, 0, 4, -8, 0, 0, 0, 0, -2),
        (-0.50, -1.10, 0, 0, 0, 0, 0, 0, 0, 3, 0, 1, 0, 0, 0, 2),
        (-0.40, -1.20, 0, 0, 0, 0, 0, 0, 0, 3, 0, -2, 0, 0, 0, 0),
        (-1.50, 0.00, 4, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, -0.90, 2, 0, 0, -2, 0, 0, 0, -2, 0, 4, -3, 0, 0, 0),
        (-1.50, 0.00, 2, 0, 0, -2, 0, 0, 0, -2, 0, 3, -1, 0, 0, 0),
        (-1.50, 0.00, 2, 0, -2, -3, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.50, 0.00, 2, -1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.50, 0.00, 1, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.50, 0.00, 0, 1, -2, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.50, 0.00, 0, 0, 4, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.50, 0.00, 0, 0, 2, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.50, 0, 0, 2, -2, 2, 0, -8, 11, 0, 0, 0, 0, 0, 0),
        (0.00, 1.50, 0, 0, 1, -1, 2, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (-1.50, 0.00, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.50, 0.00, 0, 0, 0, 0, 1, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.30, 1.20, 0, 0, 0, 0, 0, 0, 7, -9, 0, 0, 0, 0, 0, -1),
        (1.20, -0.30, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, 0, -1),
        (0.30, 1.20, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 1),
        (0.60, -0.90, 0, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 2),
        (0.90, 0.60, 0, 0, 0, 0, 0, 0, 0, 6, -11, 0, 0, 0, 0, 0),
        (0.30, 1.20, 0, 0, 0, 0, 0, 0, 0, 5, 0, -2, 0, 0, 0, 2),
        (1.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -2, 0, 0, 0),
        (1.10, 0.40, 0, 0, 0, 0, 0, 0, 0, 2, 0, -4, 0, 0, 0, 0),
        (0.00, 1.50, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 2),
        (-1.10, -0.30, 2, 0, 0, -2, -1, 0, -6, 8, 0, 0, 0, 0, 0, 0),
        (1.10, -0.30, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 2),
        (-1.40, 0.00, 3, 1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.40, 0.00, 3, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.40, 0.00, 3, 0, 0, -6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.40, 0.00, 1, 2, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.40, 0.00, 1, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.40, 0.00, 0, 0, 4, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.40, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 1, 0, 0, 0),
        (-0.90, -0.50, 0, 0, 0, 0, 1, 0, -3, 7, -4, 0, 0, 0, 0, 0),
        (0.40, 1.00, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, 0, 0, -2),
        (1.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0),
        (-1.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 2),
        (0.50, -0.90, 0, 0, 0, 0, 0, 0, 0, 1, -5, 0, 0, 0, 0, -2),
        (-1.30, 0.00, 2, 0, -2, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.30, 0.00, 1, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.30, 0.00, 1, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.30, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.30, 0.00, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.30, 0.00, 1, 0, 0, -2, 0, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (1.30, 0.00, 1, 0, 0, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.30, 0.00, 1, 0, -2, -2, -2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (1.30, 0.00, 1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.30, 0.00, 0, 1, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.30, 0.00, 0, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.30, 0.00, 0, 0, 2, -2, 0, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.00, -1.30, 0, 0, 1, -1, 1, 0, 2, -4, 0, -3, 0, 0, 0, 0),
        (0.40, 0.90, 0, 0, 1, -1, 0, 0, 0, -1, 0, 0, 2, 0, 0, 0),
        (1.30, 0.00, 0, 0, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.30, 0.00, 0, 0, 0, 0, 1, 0, 3, -5, 0, 2, 0, 0, 0, 0),
        (1.30, 0.00, 0, 0, 0, 0, 0, 0, 9, -9, 0, 0, 0, 0, 0, 0),
        (0.30, 1.00, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, 2),
        (-1.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 2),
        (-0.80, 0.40, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 3, 0, 0, 0),
        (-0.40, 0.80, 0, 0, 0, 0, 1, 0, 0, 2, -4, 0, 0, 0, 0, 0),
        (0.80, -0.40, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 2),
        (0.40, 0.80, 0, 0, 0, 0, 0, 0, 0, 7, -13, 0, 0, 0, 0, -2),
        (0.80, -0.40, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 1),
        (1.20, 0.00, 4, 0, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, 0.00, 3, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, 0.00, 3, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.20, 0.00, 3, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, 0.00, 2, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, 0.00, 2, 0, 0, -2, -1, 0, 0, -2, 0, 0, 5, 0, 0, 0),
        (1.20, 0.00, 1, 1, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.20, 1, 0, 1, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, 0.00, 1, 0, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.20, 0.00, 1, -1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, 0.00, 1, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.20, 0.00, 0, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, 0.00, 0, 1, -2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.20, 0.00, 0, 0, 2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, 0.00, 0, 0, 2, -2, 2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.00, 1.20, 0, 0, 2, -2, 2, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (-0.30, -0.90, 0, 0, 1, -1, 1, 0, 0, -1, 0, 3, 0, 0, 0, 0),
        (-0.30, -0.90, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, 1),
        (0.50, -0.70, 0, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0),
        (-0.50, -0.70, 0, 0, 0, 0, 0, 0, 0, 1, 0, 3, 0, 0, 0, 2),
        (-0.90, 0.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 2),
        (-1.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 2),
        (-1.10, 0.00, 3, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 0.00, 3, -1, -2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 0.00, 2, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.00, 1, 2, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 0.00, 1, 0, -2, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 0.00, 1, -1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.00, 1, -1, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.00, 0, 1, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.00, 0, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 0.00, 0, 0, 2, -2, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (-0.80, -0.30, 0, 0, 1, -1, -1, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (1.10, 0.00, 0, 0, 0, 0, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.50, -0.60, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, 1),
        (0.30, 0.80, 0, 0, 0, 0, 0, 0, 5, -10, 0, 0, 0, 0, 0, -2),
        (-0.50, 0.60, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 2),
        (0.80, -0.30, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0, 0),
        (0.50, -0.60, 0, 0, 0, 0, 0, 0, 0, 9, -17, 0, 0, 0, 0, 0),
        (0.00, 1.10, 0, 0, 0, 0, 0, 0, 0, 6, -11, 0, 0, 0, 0, -2),
        (0.00, 1.10, 0, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0),
        (1.10, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, -2),
        (1.00, 0.00, 5, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, 0.00, 4, 0, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.00, 0.00, 2, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.00, 0.00, 2, 1, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, 0.00, 2, 0, 2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, 0.00, 2, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.40, 2, 0, 0, -2, -1, 0, 0, -5, 6, 0, 0, 0, 0, 0),
        (0.30, 0.70, 2, 0, -1, -1, -1, 0, 0, -1, 0, 3, 0, 0, 0, 0),
        (1.00, 0.00, 2, 0, -4, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, 0.00, 1, 2, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, 0.00, 1, 1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.00, 0.00, 1, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.00, 0.00, 0, 0, 4, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.00, 0, 0, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.00, 0, 0, 1, -1, 2, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (1.00, 0.00, 0, 0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.00, 0, 0, 0, 0, 0, 0, 9, -12, 0, 0, 0, 0, 0, -2),
        (-1.00, 0.00, 0, 0, 0, 0, 0, 0, 5, -9, 0, 0, 0, 0, 0, -2),
        (0.00, -1.00, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 1),
        (0.00, -1.00, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 1),
        (1.00, 0.00, 0, 0, 0, 0, 0, 0, 3, -5, 0, 2, 0, 0, 0, 0),
        (0.50, -0.50, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0, 0),
        (-1.00, 0.00, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, 1),
        (1.00, 0.00, 0, 0, 0, 0, 0, 0, 0, 7, -13, 0, 0, 0, 0, 0),
        (-1.00, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 2),
        (-0.30, -0.70, 0, 0, 0, 0, 0, 0, 0, 4, -8, 1, 5, 0, 0, -2),
        (-0.90, 0.00, 2, 1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, 0.00, 2, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, -0.40, 2, 0, -1, -1, -1, 0, 0, 3, -7, 0, 0, 0, 0, 0),
        (-0.90, 0.00, 2, -1, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.90, 0.00, 2, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.90, 0.00, 1, 3, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, 0.00, 1, 0, 0, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, 0.00, 1, -1, -2, -3, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, 0.00, 1, -2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.90, 0.00, 1, -2, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.90, 0.00, 0, 3, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, 0.00, 0, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.90, 0, 0, 2, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.00, 0.90, 0, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (-0.90, 0.00, 0, 0, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, 0.00, 0, 0, 2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.90, 0, 0, 1, -1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.90, 0, 0, 1, -1, 1, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (-0.50, -0.40, 0, 0, 0, 0, 2, 0, 0, -1, 2, 0, 0, 0, 0, 0),
        (0.00, 0.90, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 0, -1),
        (0.00, 0.90, 0, 0, 0, 0, 0, 0, 6, -7, 0, 0, 0, 0, 0, 0),
        (-0.90, 0.00, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0, -1),
        (0.00, 0.90, 0, 0, 0, 0, 0, 0, 4, -3, 0, 0, 0, 0, 0, 2),
        (-0.90, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, 0, -3, 0, 0, 0, 2),
        (0.00, 0.90, 0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 0),
        (0.90, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, -1),
        (0.30, 0.60, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, -0.30, 0, 2, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, -0.60, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, -2),
        (-0.60, 0.30, 0, 0, 0, 0, 0, 0, 0, 6, -5, 0, 0, 0, 0, 2),
        (0.60, -0.30, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 0, 0, -2),
        (0.80, 0.00, 4, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.80, 0.00, 3, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.80, 0.00, 3, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.80, 0.00, 2, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.80, 0.00, 2, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.50, 2, 0, 0, -2, 1, 0, 0, -6, 8, 0, 0, 0, 0, 0),
        (0.00, -0.80, 2, 0, -1, -1, -2, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.80, 0.00, 1, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.80, 0.00, 1, 1, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.80, 1, 0, 0, -2, 0, 0, 20, -21, 0, 0, 0, 0, 0, 0),
        (0.80, 0.00, 0, 2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.80, 0.00, 0, 0, 4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.80, 0.00, 0, 0, 2, 0, 2, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (-0.80, 0.00, 0, 0, 2, 0, 2, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.80, 0.00, 0, 0, 2, -2, 1, 0, 0, -2, 0, 0, 2, 0, 0, 0),
        (0.00, 0.80, 0, 0, 2, -2, 1, 0, 0, -8, 11, 0, 0, 0, 0, 0),
        (0.00, 0.80, 0, 0, 2, -2, 1, -1, 0, 2, 0, 0, 0, 0, 0, 0),
        (0.30, -0.50, 0, 0, 2, -2, 0, 0, 0, -9, 13, 0, 0, 0, 0, 0),
        (-0.30, 0.50, 0, 0, 1, -1, 2, 0, 0, -1, 0, -2, 5, 0, 0, 0),
        (0.00, -0.80, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 2, 0, 0),
        (0.00, -0.80, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 2, 0, 0, 0),
        (0.50, 0.30, 0, 0, 1, -1, 1, 0, 0, -1, 0, -2, 4, 0, 0, 0),
        (0.80, 0.00, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.80, 0.00, 0, 0, 0, 0, 1, 0, 3, -5, 0, 0, 0, 0, 0, 0),
        (-0.50, -0.30, 0, 0, 0, 0, 1, 0, 0, -8, 15, 0, 0, 0, 0, 0),
        (0.50, 0.30, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, 0, 0, 0),
        (0.80, 0.00, 0, 0, 0, 0, 0, 0, 8, -12, 0, 0, 0, 0, 0, 0),
        (-0.80, 0.00, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 2),
        (0.00, 0.80, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, 0),
        (0.80, 0.00, 0, 0, 0, 0, 0, 0, 2, -6, 0, 0, 0, 0, 0, -2),
        (0.00, 0.80, 0, 0, 0, 0, 0, 0, 0, 8, -15, 0, 0, 0, 0, -1),
        (0.00, -0.80, 0, 0, 0, 0, 0, 0, 0, 5, -2, 0, 0, 0, 0, 2),
        (-0.50, 0.30, 0, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, -2),
        (0.80, 0.00, 0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0),
        (0.30, 0.50, 0, 0, 0, 0, 0, 0, 0, 4, -8, 0, 0, 0, 0, 0),
        (-0.40, 0.40, 0, 0, 0, 0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 2),
        (0.30, -0.50, 0, 0, 0, 0, 0, 0, 0, 2, -6, 0, 0, 0, 0, -2),
        (-0.40, 0.40, 0, 0, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, 0),
        (0.00, 0.80, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 2),
        (-0.70, 0.00, 4, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 3, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 3, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 2, 0, -4, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 2, -1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.70, 0.00, 1, 1, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, 1, 2, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, 1, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, 1, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, 0, 2, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, 0, 0, 4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.30, 1, 0, 0, -1, 1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, 0, 0, -2, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (-0.70, 0.00, 1, 0, -2, -2, -2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, -1, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 1, -2, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.70, 0.00, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 0, 0, 2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 0, 0, 2, -2, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (-0.70, 0.00, 0, 0, 1, -1, 2, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (0.30, -0.40, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, -2, 0, 0, 0),
        (-0.70, 0.00, 0, 0, 0, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.70, 0, 0, 0, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.00, -0.70, 0, 0, 0, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (-0.30, -0.40, 0, 0, 0, 0, 1, 0, 0, -9, 17, 0, 0, 0, 0, 0),
        (0.00, 0.70, 0, 0, 0, 0, 0, 0, 8, -8, 0, 0, 0, 0, 0, -1),
        (0.00, 0.70, 0, 0, 0, 0, 0, 0, 8, -10, 0, 0, 0, 0, 0, -1),
        (0.00, -0.70, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 1),
        (-0.70, 0.00, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, -1),
        (0.70, 0.00, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0, -1),
        (-0.70, 0.00, 0, 0, 0, 0, 0, 0, 3, -7, 4, 0, 0, 0, 0, 0),
        (-0.30, -0.40, 0, 0, 0, 0, 0, 0, 1, -4, 0, 0, 0, 0, 0, -2),
        (0.00, 0.70, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 1),
        (0.00, -0.70, 0, 0, 0, 0, 0, 0, 0, 6, -7, 0, 0, 0, 0, 2),
        (0.30, -0.40, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0, 0, 0),
        (-0.70, 0.00, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, -2, 0, 0, 2),
        (0.00, -0.70, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, -2, 0, 0, 2),
        (0.00, 0.70, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 1),
        (0.00, -0.70, 0, 0, 0, 0, 0, 0, 0, 1, -6, 0, 0, 0, 0, -2),
        (0.70, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 2),
        (-0.70, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2),
        (0.60, 0.00, 5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 4, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 3, 0, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 2, 2, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 2, 2, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 2, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 2, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 2, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 2, 0, 0, -2, -2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 2, 0, -1, -1, -1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.60, 0.00, 2, 0, -2, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 2, 0, -4, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 2, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 1, 0, 2, -2, 2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-0.60, 0.00, 1, 0, 0, 0, 0, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.60, 0.00, 1, 0, 0, -2, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 1, 0, -1, 1, -1, 0, -18, 17, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 1, 0, -2, -2, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 1, -1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 1, -1, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 1, -2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 1, -2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 0, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 0, 2, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 0, 1, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 0, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 0, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 0, 0, 2, 0, 2, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.60, 0.00, 0, 0, 2, 0, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.00, 0.60, 0, 0, 2, -2, -1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (0.00, 0.60, 0, 0, 1, -1, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.00, -0.60, 0, 0, 1, -1, 2, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (0.60, 0.00, 0, 0, 0, 0, 1, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 0, 0, 0, 0, 0, 0, 8, -12, 0, 0, 0, 0, 0, -2),
        (0.60, 0.00, 0, 0, 0, 0, 0, 0, 8, -16, 0, 0, 0, 0, 0, -2),
        (0.00, 0.60, 0, 0, 0, 0, 0, 0, 7, -8, 0, 0, 0, 0, 0, 0),
        (0.30, -0.30, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, 1),
        (0.00, -0.60, 0, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 2),
        (-0.60, 0.00, 0, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, -2),
        (0.00, 0.60, 0, 0, 0, 0, 0, 0, 0, 4, -8, 1, 5, 0, 0, 2),
        (-0.60, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 2),
        (0.00, -0.60, 0, 0, 0, 0, 0, 0, 0, 2, -7, 0, 0, 0, 0, -2),
        (0.60, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0),
        (-0.60, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 5, 0, 0, 2),
        (-0.60, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2),
        (0.50, 0.00, 4, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 4, -1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 3, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 3, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 2, 1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 2, 1, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 2, 1, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 2, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 2, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 2, 0, 0, -2, 0, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.50, 0.00, 2, 0, 0, -2, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 2, 0, 0, -2, -1, 0, 0, -2, 0, 4, -5, 0, 0, 0),
        (0.50, 0.00, 2, 0, 0, -2, -1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 2, 0, 0, -3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 2, 0, -1, -1, -1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 2, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 2, -1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 2, -2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 1, 1, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 1, 1, -2, -3, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 1, 0, 3, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 1, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 1, 0, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 1, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.00, -0.50, 1, 0, 0, 0, 0, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.50, 0.00, 1, 0, 0, 0, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 1, 0, 0, -1, 0, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 1, 0, 0, -1, -1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (0.00, 0.50, 1, 0, 0, -2, 0, 0, 17, -16, 0, -2, 0, 0, 0, 0),
        (0.50, 0.00, 1, 0, 0, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 1, 0, -1, 1, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 1, 0, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 1, 0, -1, -1, -1, 0, 20, -20, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 1, 0, -2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 1, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 1, 0, -2, 0, -2, 0, -10, 3, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 1, 0, -2, -2, -2, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.50, 0.00, 1, -1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 1, -1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 1, -1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 1, -1, -4, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 1, -2, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 1, -2, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 0, 3, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 2, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 0, 1, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 0, 1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 0, 0, 4, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 0, 0, 2, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 2, -2, 2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.50, 0.00, 0, 0, 2, -2, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 2, -2, 0, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 2, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, 1, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 1, -1, 2, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 0, 0, 1, -1, 1, 0, 1, -2, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 0, 0, 1, -1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 0, 0, 0, 0, 1, 0, 5, -8, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 0, 0, 0, 0, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (0.00, 0.50, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0),
        (0.00, 0.50, 0, 0, 0, 0, 0, 0, 9, -9, 0, 0, 0, 0, 0, -1),
        (0.00, 0.50, 0, 0, 0, 0, 0, 0, 9, -11, 0, 0, 0, 0, 0, -1),
        (0.00, 0.50, 0, 0, 0, 0, 0, 0, 6, -10, 0, 0, 0, 0, 0, -1),
        (0.00, -0.50, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 0, 1),
        (-0.50, 0.00, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0, -1),
        (0.00, -0.50, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, -2),
        (0.00, -0.50, 0, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0),
        (0.00, -0.50, 0, 0, 0, 0, 0, 0, 0, 5, -10, 0, 0, 0, 0, -2),
        (-0.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 4, 0, -4, 0, 0, 0, 2),
        (0.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, 0, -4, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, -5, 0, 0, 0, -2),
        (0.00, 0.50, 0, 0, 0, 0, 0, 0, 0, 1, 0, -2, 5, 0, 0, 2),
        (0.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, -2, 0, 0, 0, -2),
        (0.00, -0.50, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 0, 0, 0, -1),
        (-0.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, -5, 0, 0, 0, -2),
        (0.00, -0.50, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1),
        (0.00, 0.50, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, -2, -2),
        (0.40, 0.00, 4, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 3, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 3, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 3, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 3, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 3, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 3, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 3, 0, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 3, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 2, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 2, 1, 0, -6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 2, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 2, 0, 2, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 2, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 2, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 2, 0, 0, -2, 0, 0, 0, -2, 0, 2, 2, 0, 0, 0),
        (0.40, 0.00, 2, 0, 0, -2, 0, 0, 0, -4, 4, 0, 0, 0, 0, 0),
        (0.40, 0.00, 2, 0, 0, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 2, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 2, 0, -4, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 2, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 2, -1, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 2, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 0.30, 2, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 2, -2, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, 1, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 1, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 1, 0, 0, 0, 0, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (-0.40, 0.00, 1, 0, 0, 0, 0, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, 0, 0, -1, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (-0.40, 0.00, 1, 0, 0, -2, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 1, 0, 0, -2, 0, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.00, -0.40, 1, 0, 0, -2, 0, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (-0.40, 0.00, 1, 0, 0, -2, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, 0, 0, -3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, 0, -2, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 1, 0, -4, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 1, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, -1, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 1, -1, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 1, -2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, -2, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 0, 2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 2, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 0, 2, -2, 2, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 0, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 1, -2, 4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 0, 0, 2, 2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 2, -2, 1, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 0, 2, -2, 1, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.40, 0.00, 0, 0, 2, -2, 1, 0, 0, -3, 0, 3, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 2, -2, 1, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.40, 0.00, 0, 0, 2, -2, 1, 0, -5, 5, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 0, 2, -2, 0, 0, -4, 4, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 0, 0, 2, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 0, 0, 1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 0, 1, -1, 2, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 0, 1, -1, 1, 0, 1, -3, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, -1, 0, 0),
        (0.40, 0.00, 0, 0, 1, -1, 1, 0, 0, -4, 6, 0, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 1, -1, 1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 1, -1, 0, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 1, -1, 0, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.40, 0.00, 0, 0, 1, -1, 0, 0, 0, -1, 0, 0, 1, 0, 0, 0),
        (0.00, 0.40, 0, 0, 1, -1, 0, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (0.00, -0.40, 0, 0, 1, -1, 0, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 0, 0, 1, -1, 0, 0, -4, 5, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 0, 0, 1, -1, -1, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 0, 0, 2, 0, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.00, -0.40, 0, 0, 0, 0, 1, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 0, 0, 0, 0, 1, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (0.40, 0.00, 0, 0, 0, 0, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 0, 0, 0, 0, 8, -9, 0, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 0, 0, 0, 0, 0, 7, -10, 0, 0, 0, 0, 0, -1),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 1),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0, -2),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 0, 0, 0, 0, 3, -8, 0, 0, 0, 0, 0, -2),
        (0.40, 0.00, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 0, 0, 0, -1),
        (-0.40, 0.00, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, -1),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 0, 7, -8, 0, 0, 0, 0, 2),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 0, 7, -9, 0, 0, 0, 0, 2),
        (0.00, 0.40, 0, 0, 0, 0, 0, 0, 0, 6, -10, 0, 0, 0, 0, -2),
        (0.00, 0.40, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 2),
        (0.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, -8, 3, 0, 0, 0, -2),
        (0.00, 0.40, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -2, 0, 0, 1),
        (0.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 1),
        (0.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, -1),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0),
        (-0.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0),
        (0.20, 0.10, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 5, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 4, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 4, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 4, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 3, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 3, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 3, 1, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 3, 0, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 3, 0, -2, -1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 3, 0, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 3, 0, -2, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 3, -1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 3, -1, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 2, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 2, 1, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 2, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 1, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 2, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, 2, -2, 2, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (-0.30, 0.00, 2, 0, 2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 2, 0, 2, -6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 2, 0, 1, -3, 1, 0, -6, 7, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, 0, -2, 1, 0, 0, -5, 6, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, 0, 0, -2, 0, 0, 2, -5, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 2, 0, 0, -2, 0, 0, 0, -2, 0, 5, -5, 0, 0, 0),
        (0.30, 0.00, 2, 0, 0, -2, 0, 0, 0, -2, 0, 1, 5, 0, 0, 0),
        (0.30, 0.00, 2, 0, 0, -2, 0, 0, 0, -2, 0, 0, 5, 0, 0, 0),
        (0.30, 0.00, 2, 0, 0, -2, 0, 0, 0, -2, 0, 0, 2, 0, 0, 0),
        (0.30, 0.00, 2, 0, 0, -2, 0, 0, -4, 4, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 2, 0, 0, -2, -1, 0, 0, -2, 0, 3, -1, 0, 0, 0),
        (0.00, 0.30, 2, 0, 0, -2, -1, 0, 0, -6, 8, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, 0, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, 0, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, -1, -1, 1, 0, 0, 3, -7, 0, 0, 0, 0, 0),
        (0.00, 0.30, 2, 0, -1, -1, 0, 0, 0, -1, 0, 3, 0, 0, 0, 0),
        (0.00, 0.30, 2, 0, -2, 0, -2, 0, 0, 5, -9, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, -2, -2, -2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-0.30, 0.00, 2, 0, -2, -5, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 2, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, -1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, -1, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, -1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 3, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 2, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 1, 0, -6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 1, -2, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 1, -2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 2, 0, 2, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, 0, 2, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.00, 0.30, 1, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, 2, 0, 2, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, 2, -2, 2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, 2, -6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 0, 0, 1, 0, -10, 3, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 0, 0, 0, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 0, 0, -1, 0, -10, 3, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 0, -1, -1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 0, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, 0, -2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 0, -2, -1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, 0, -1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, -1, 0, -1, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, -1, -1, 0, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, 0, -1, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, -2, 4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, 0, -2, -2, -2, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (-0.30, 0.00, 1, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, -1, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, -1, -2, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 1, 4, -4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 1, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 1, -4, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 4, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 2, 2, 2, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 2, 0, 2, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 2, 0, 2, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 2, 0, 2, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 2, 0, 2, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 2, -2, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 2, -2, 1, 0, 0, -2, 0, 1, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 2, -2, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 2, -2, 1, 0, 0, -4, 4, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 2, -2, 1, 0, 0, -7, 9, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 2, -2, 1, 0, 0, -10, 15, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 2, -2, 1, 0, -8, 11, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 2, -2, 0, -1, 0, 2, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 1, 1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, -1, 0, 0, 0),
        (0.00, -0.30, 0, 0, 1, -1, 2, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 1, -1, 1, 0, 0, 1, -4, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 1, -1, 1, 0, 0, -1, 0, 1, -3, 0, 0, 0),
        (0.00, 0.30, 0, 0, 1, -1, 1, 0, -1, 2, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 1, -1, 1, 0, -4, 6, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 1, -1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 1, -1, 0, 0, 0, -1, 0, 0, -2, 0, 0, 0),
        (0.00, -0.30, 0, 0, 1, -1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 1, -1, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 1, -1, -1, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 2, 0, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 2, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 0, 0, 2, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 2, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 0, 1, 0, 0, 7, -13, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 0, 1, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 0, 0, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 0, 0, 1, 0, -1, 2, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 0, 0, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 9, -13, 0, 0, 0, 0, 0, -2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 8, -11, 0, 0, 0, 0, 0, -1),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 8, -14, 0, 0, 0, 0, 0, -2),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 7, -11, 0, 0, 0, 0, 0, -1),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 6, -4, 0, 0, 0, 0, 0, 1),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 0, 1),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 6, -7, 0, 0, 0, 0, 0, -1),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 6, -8, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 5, -4, 0, 0, 0, 0, 0, 2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, -1),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, -2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 5, -6, -4, 0, 0, 0, 0, -2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 4, -8, 0, 0, 0, 0, 0, -2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 3, -3, 0, 2, 0, 0, 0, 2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, 1),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 1),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, -2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 1, -4, 0, 0, 0, 0, 0, -1),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 9, -17, 0, 0, 0, 0, -2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 7, -12, 0, 0, 0, 0, -2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 6, -4, 0, 0, 0, 0, 2),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 0, 6, -8, 1, 5, 0, 0, 2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, -2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 6, -10, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, 0, -4, 0, 0, 0, 2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, -2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -8, 3, 0, 0, 0, 2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -9, 0, 0, 0, 0, -1),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -13, 0, 0, 0, 0, -2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -16, 4, 5, 0, 0, -2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, -1),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 1),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, -1),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, 0, -5, 0, 0, 0, -2),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, -1),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 0, 3, -7, 0, 0, 0, 0, -2),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 0, 3, -9, 0, 0, 0, 0, -2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2, 0, 0, 0, 2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -3, 0, 0, 0),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 0, 2, -8, 1, 5, 0, 0, -2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, -5, 0, 0, 0),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 2, 0, 0, 2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -3, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 5, 0, 0, 0),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -6, 3, 0, -2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2),
        (-0.10, 0.00, 0, 0, 0, 0, 0, 1, 0, -3, 0, 0, 0, 0, 0, -2),
        (-0.10, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, -2, 0, 0, 0),
    ),
    # j = 1
    (
        (-17418.82, 2.89, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-363.71, -1.50, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-163.84, 1.20, 0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (122.74, 0.20, 0, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (49.46, 0.00, 0, 1, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-36.59, 0.10, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-22.77, 0.20, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (20.12, 0.00, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (13.66, 0.00, 0, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.50, 0.00, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.20, 0.00, 0, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.10, 0.00, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.28, 0.00, 1, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.28, 0.00, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.99, 0.00, 2, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.19, 0.00, 1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.52, 0.00, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.50, 0.00, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.10, 0.00, 0, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.10, 0.00, 0, 1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.09, 0.00, 1, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.00, 0, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 0.00, 1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 0.00, 0, 1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 0.00, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, 0.00, 2, 0, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.00, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.00, 0, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.08, 0.00, 1, 0, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.08, 0.00, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.07, 0.00, 1, 0, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, 0.00, 1, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.00, 0.00, 1, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.00, 0.00, 1, 0, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.96, 0.00, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.09, 0.00, 2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.09, 0.00, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.01, 0.00, 2, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    ),
)

EPS2006_TERMS = (
    # j = 0
    (
        (1537.70, 9205233.10, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-458.70, 573033.60, 0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (137.40, 97846.10, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-29.10, -89749.20, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-17.40, 22438.60, 0, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (31.80, 20073.00, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (36.70, 12902.60, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-13.20, -9592.90, 0, 1, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-192.40, 7387.10, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.90, -6898.20, 0, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, -5331.10, 1, 0, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.90, -3322.80, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.50, 3142.90, 1, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7.80, 2636.60, 1, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-6.60, 2554.50, 1, 0, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.00, -2423.60, 2, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6.80, 1645.00, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1387.00, 0, 2, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5.90, 1323.80, 2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, -1233.80, 1, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, -1075.80, 1, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-4.50, 855.10, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, -800.10, 1, 0, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (35.80, -675.00, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.40, 695.30, 1, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 685.00, 0, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.60, 641.50, 0, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.50, 522.20, 1, 0, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (273.50, 164.70, 0, 0, 1, -1, 1, 0, 0, -1, 0, -2, 5, 0, 0, 0),
        (1.40, 335.30, 0, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.90, 326.60, 1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 327.20, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, -325.00, 0, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 307.00, 0, 1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 304.10, 2, 0, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, -304.50, 1, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, -276.80, 2, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, 272.00, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 271.90, 0, 1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.20, 269.50, 2, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, -220.60, 2, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (128.60, -77.10, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, -1),
        (0.10, -190.00, 0, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (167.90, 0.00, 0, 1, -1, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-8.20, -123.50, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 131.10, 2, 0, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 126.60, 2, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.90, -122.00, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 123.20, 3, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 123.20, 1, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 120.70, 1, 1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 112.90, 0, 1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.20, -112.90, 2, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 107.30, 1, 0, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, -106.20, 1, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (31.90, -64.10, 0, 0, 1, -1, 1, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (0.00, 89.50, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, -2),
        (89.10, 0.00, 1, 0, -1, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 85.40, 1, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.20, -71.00, 0, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -70.00, 1, -1, 0, -1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (13.90, -55.30, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 67.20, 0, 2, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 66.30, 1, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.40, 64.70, 1, 0, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.30, -60.90, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.20, -61.00, 1, 0, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, -59.20, 2, 0, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, -55.00, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -55.60, 1, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, -52.70, 2, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.20, 51.80, 2, 0, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, -49.50, 1, 0, 0, -1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 50.50, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 2),
        (2.50, 47.70, 2, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 49.60, 1, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, -49.00, 1, 0, -4, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-23.20, 24.60, 0, 0, 0, 0, 1, 0, 0, -1, 2, 0, 0, 0, 0, 0),
        (0.40, 46.50, 2, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, -44.00, 0, 0, 2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, -42.20, 0, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (13.30, 26.90, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, -1),
        (-0.10, -39.90, 3, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, -39.50, 0, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -39.10, 1, 1, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, -38.90, 2, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 36.90, 0, 0, 2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 34.60, 0, 1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, -32.60, 0, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 31.60, 1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 30.40, 0, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 29.40, 0, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -27.90, 1, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 27.50, 1, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-25.70, -1.70, 0, 0, 1, -1, 1, 0, 0, -1, 0, 2, -5, 0, 0, 0),
        (0.00, 25.80, 1, -1, 0, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (19.90, 5.90, 0, 0, 0, 0, 0, 0, 0, 2, -8, 3, 0, 0, 0, -2),
        (0.20, 25.20, 1, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -25.30, 0, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 25.00, 3, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 24.40, 1, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, -24.40, 1, -1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-23.30, 0.90, 0, 0, 2, -2, 1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (-0.10, 24.00, 1, 1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-18.00, -5.30, 0, 0, 0, 0, 0, 0, 0, 6, -8, 3, 0, 0, 0, 2),
        (-0.10, -22.80, 0, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 22.50, 0, 1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 21.60, 1, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -21.30, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0, -2),
        (0.10, 20.70, 2, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, -20.10, 0, 0, 0, 0, 0, 0, 0, 3, 0, -1, 0, 0, 0, 2),
        (0.00, 20.50, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (15.90, -4.50, 0, 0, 0, 0, 1, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.00, 20.10, 0, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, -19.90, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -20.00, 1, -1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (15.60, 4.40, 0, 0, 0, 0, 1, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.00, 19.80, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0, -2),
        (0.00, 18.90, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.30, -14.60, 0, 0, 1, -1, 1, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (-0.10, -18.50, 1, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 18.40, 0, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 18.10, 0, 3, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.30, -16.70, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, 16.80, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, -17.60, 2, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-17.60, 0.00, 1, 0, -1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -17.40, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (14.50, -2.70, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 1),
        (0.00, 17.10, 1, 0, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, -17.00, 0, 0, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 16.20, 1, -1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -16.00, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 2),
        (0.00, -15.40, 1, 0, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -15.10, 2, 0, 0, -2, -1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.00, 14.70, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 2),
        (-0.10, -14.30, 1, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 14.40, 1, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -14.40, 0, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -13.80, 1, 0, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-13.80, 0.00, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.50, -9.30, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, -1, 0, 0, 0),
        (0.00, -13.40, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 13.10, 1, 0, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (10.30, 2.70, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (0.00, -12.80, 1, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 12.80, 1, 0, -2, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (11.70, 0.80, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 1),
        (0.00, -12.00, 2, 0, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (11.30, 0.50, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0, -2),
        (0.00, 11.40, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 2),
        (0.00, -11.20, 1, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 10.90, 4, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -10.80, 2, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, -10.70, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.20, 10.40, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 10.50, 2, 0, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -10.40, 1, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 10.40, 0, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -10.20, 0, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -10.00, 1, 0, -4, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 9.60, 1, 0, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 9.40, 2, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.60, 1.70, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, -2),
        (-7.70, 1.40, 0, 0, 1, -1, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (1.40, -7.50, 0, 0, 1, -1, 1, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (6.10, -2.70, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 1),
        (0.00, -8.70, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0, -2),
        (-5.90, 2.60, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 2, 0, 0, 0),
        (0.00, 8.40, 0, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.60, -5.70, 1, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 8.30, 0, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.20, -8.10, 0, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.70, 5.50, 1, 0, -2, 0, -2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (4.20, -4.00, 0, 0, 0, 0, 0, 0, 0, 8, -16, 4, 5, 0, 0, -2),
        (0.00, 8.10, 0, 1, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 8.00, 0, 0, 0, 0, 0, 0, 0, 4, 0, -2, 0, 0, 0, 2),
        (-1.30, 6.70, 0, 0, 0, 0, 0, 0, 0, 2, 0, -1, 0, 0, 0, 2),
        (0.00, -7.90, 0, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 7.80, 0, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-7.50, -0.20, 0, 0, 0, 0, 0, 0, 2, -1, 0, 0, 0, 0, 0, 2),
        (-0.50, -7.20, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1, 0, 0, 0, 2),
        (4.90, 2.70, 0, 0, 0, 0, 0, 0, 8, -11, 0, 0, 0, 0, 0, -2),
        (0.00, -7.50, 3, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -7.50, 2, 0, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 7.50, 1, 1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -7.20, 0, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 6.90, 1, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-5.60, 1.40, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, 0, -1),
        (-5.70, -1.30, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, -1),
        (0.00, 6.90, 2, 1, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 6.90, 1, 1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.20, -2.70, 0, 0, 0, 0, 0, 0, 8, -15, 0, 0, 0, 0, 0, -2),
        (-3.10, 3.70, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 0, 0, 2),
        (-3.90, -2.90, 0, 0, 0, 0, 0, 0, 0, 3, 0, -2, 0, 0, 0, 2),
        (0.00, 6.60, 3, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-3.10, -3.50, 0, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 2),
        (1.10, -5.40, 1, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -6.40, 2, 0, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, 5.50, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 2),
        (0.00, -6.30, 0, 0, 2, -2, 1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (-0.10, -6.20, 0, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 2),
        (0.00, -6.10, 1, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 6.10, 0, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 6.10, 0, 0, 1, -1, 1, 0, 0, 3, -8, 3, 0, 0, 0, 0),
        (0.00, 6.00, 0, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.50, -2.50, 0, 0, 0, 0, 1, 0, 8, -13, 0, 0, 0, 0, 0, 0),
        (0.00, 5.90, 1, -1, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 5.70, 2, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.90, -4.80, 2, 0, 0, -2, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.00, 5.70, 1, -1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 5.70, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 2),
        (0.10, 5.60, 3, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, -5.40, 2, 1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 5.60, 2, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 5.60, 1, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.90, -4.70, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, 0, -1),
        (-0.40, -5.10, 1, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 5.50, 0, 2, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -5.40, 2, 0, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.80, 3.60, 1, 0, 0, 0, -1, 0, -18, 16, 0, 0, 0, 0, 0, 0),
        (0.00, -5.40, 0, 0, 0, 0, 0, 0, 0, 8, -16, 4, 5, 0, 0, 2),
        (0.00, 5.30, 1, -1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -5.30, 0, 0, 1, -1, 1, 0, 0, -5, 8, -3, 0, 0, 0, 0),
        (0.00, -5.20, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -5.20, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 0, 0, 0, -2),
        (0.00, 5.10, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.00, 2.10, 0, 0, 0, 0, 1, 0, -8, 13, 0, 0, 0, 0, 0, 0),
        (0.00, -5.10, 0, 0, 0, 0, 0, 0, 6, -8, 0, 0, 0, 0, 0, -2),
        (0.00, -5.00, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 5.00, 1, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -5.00, 1, -1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, -4.10, 0, 0, 0, 0, 1, 0, 0, 0, 0, -2, 5, 0, 0, 0),
        (-5.00, 0.00, 0, 0, 0, 0, 0, 0, 3, -2, 0, 0, 0, 0, 0, 2),
        (0.00, -4.90, 4, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4.90, 0.00, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 0, 0, 0, -2),
        (0.00, -4.90, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0, -2),
        (-3.70, -1.10, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (0.00, 4.80, 2, 1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.90, 3.90, 0, 0, 0, 0, 1, 0, 0, 0, 0, 2, -5, 0, 0, 0),
        (0.00, 4.70, 1, 0, 2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -4.70, 0, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -4.50, 2, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -4.50, 2, -1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.50, -3.00, 1, 0, 0, 0, 1, 0, -18, 16, 0, 0, 0, 0, 0, 0),
        (0.00, 4.40, 2, 0, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 4.40, 1, 2, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -4.40, 1, -1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, -4.10, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -4.30, 3, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 4.30, 2, 0, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -4.30, 0, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 4.30, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 4.00, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 4.00, 0, 2, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 4.10, 3, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.60, 3.50, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 1, 0, 0, 0),
        (0.00, 4.00, 1, 0, -4, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -4.00, 0, 1, -2, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (3.10, -0.80, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 0, -1),
        (0.00, 3.90, 2, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 3.90, 2, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 3.90, 2, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -3.90, 1, 0, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -3.90, 1, 0, -2, -3, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 3.90, 0, 1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.90, 2.00, 0, 0, 0, 0, 1, 0, 0, 1, -2, 0, 0, 0, 0, 0),
        (0.00, 3.80, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 2),
        (-0.20, 3.50, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -3.60, 1, 1, -2, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -3.60, 1, 0, -2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.10, 1.50, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, 0, 0, 0, 2),
        (0.70, 2.80, 0, 0, 0, 0, 0, 0, 3, -7, 0, 0, 0, 0, 0, -2),
        (-2.90, -0.60, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, -1),
        (0.00, -3.50, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0),
        (-2.80, 0.70, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1),
        (0.00, 3.40, 2, 0, -4, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -3.40, 1, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -3.30, 2, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, 2.80, 2, 0, 0, -2, -1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.00, 3.30, 1, 1, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.60, -0.70, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, -1),
        (1.00, -2.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 2),
        (0.00, 3.20, 1, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -3.20, 0, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 3.20, 0, 2, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -3.20, 0, 0, 0, 0, 0, 0, 7, -9, 0, 0, 0, 0, 0, -2),
        (0.00, 3.20, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2),
        (2.90, -0.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1),
        (0.00, -3.10, 1, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.70, -2.40, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 2),
        (0.00, 3.00, 2, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.60, 1.40, 1, 0, 0, -1, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (-2.90, -0.10, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, 0, -2),
        (0.00, -2.90, 2, 0, 0, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.00, -2.90, 1, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.90, 0, 1, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.50, 0.40, 0, 0, 1, -1, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (0.40, -2.50, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1),
        (0.00, -2.80, 2, 1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-2.50, 0.30, 0, 0, 1, -1, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (-2.50, -0.30, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, -1),
        (2.70, 0.00, 1, 0, -1, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -2.70, 0, 0, 2, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.00, 2.60, 3, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -2.60, 0, 1, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -2.60, 0, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.10, 0.50, 0, 0, 1, -1, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (0.00, -2.50, 2, 0, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.50, 0, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.90, -0.60, 0, 0, 0, 0, 0, 0, 0, 6, -16, 4, 5, 0, 0, -2),
        (0.80, 1.70, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -1),
        (0.00, -2.40, 2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.40, 2, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, -2.30, 2, 0, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -2.40, 1, 1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.40, 1, 0, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.90, 0.50, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, 0, -1),
        (-0.10, -2.20, 0, 0, 0, 0, 0, 0, 8, -10, 0, 0, 0, 0, 0, -2),
        (0.00, -2.30, 3, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.30, 1, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.40, 0.90, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0, 2),
        (0.00, 2.20, 4, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -2.20, 2, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.20, 1, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.20, 1, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.20, 0, 1, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.20, -2.00, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.80, -0.40, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, -1),
        (0.00, 2.20, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, -2),
        (0.00, -2.10, 2, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -2.10, 1, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.10, 1, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.10, 1, 0, -2, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.10, 1, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.70, 0.40, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 1),
        (-0.80, -1.30, 0, 0, 0, 0, 0, 0, 0, 5, -4, 0, 0, 0, 0, 2),
        (-1.30, -0.80, 0, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 2),
        (0.00, 2.00, 2, -2, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -2.00, 1, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -2.00, 1, 0, 2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.00, 1, 0, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 2.00, 1, -1, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2.00, 0.00, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0, -2),
        (1.60, -0.40, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, 0, -1),
        (1.10, -0.90, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, -2),
        (-0.30, 1.60, 0, 0, 0, 0, 0, 0, 0, 4, 0, -3, 0, 0, 0, 2),
        (0.00, -1.90, 3, 0, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.90, 2, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.90, 2, -1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.90, 1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.90, 1, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.90, 0, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.00, 0.90, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 2, 0),
        (-1.40, -0.50, 0, 0, 1, -1, 1, 0, 0, -1, 0, -4, 10, 0, 0, 0),
        (1.50, 0.40, 0, 0, 1, -1, 1, 0, -4, 5, 0, 0, 0, 0, 0, 0),
        (0.00, -1.90, 0, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.90, 0, 0, 0, 4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.50, -0.40, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1),
        (0.00, 1.80, 2, 0, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.80, 2, 0, -4, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.80, 2, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, -1.60, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, -1),
        (-1.10, 0.70, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, -1),
        (-0.60, -1.10, 1, 0, 2, 0, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.60, 1.10, 1, 0, -2, 0, -1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.60, 0, 0, 0, 0, 1, 0, 0, -2, 4, 0, 0, 0, 0, 0),
        (-0.60, -1.10, 0, 0, 0, 0, 0, 0, 0, 4, -3, 0, 0, 0, 0, 2),
        (0.00, -1.70, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.20, -0.50, 0, 0, 2, -2, 1, 0, 0, -9, 13, 0, 0, 0, 0, 0),
        (1.50, 0.20, 0, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-1.70, 0.00, 0, 0, 0, 0, 1, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (0.00, -1.60, 2, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, -1.10, 2, 0, 2, 0, 2, 0, 0, 2, 0, -3, 0, 0, 0, 0),
        (0.00, -1.60, 1, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.60, 1, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.60, 0, 1, -2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.60, 0, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.60, 0, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.10, -0.50, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, 2, 0, 0, 0),
        (-1.30, -0.30, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, -1),
        (0.60, 1.00, 0, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, -2),
        (0.30, -1.30, 0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 1),
        (1.20, -0.40, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 1),
        (0.00, 1.50, 2, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.50, 2, -1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.50, 1, 2, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.50, 1, 1, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.50, 1, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.50, 0.00, 1, 0, 0, -1, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (0.00, 1.50, 1, 0, 0, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.50, 1, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.50, 0, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.50, 0, 1, 2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 1.00, 0, 0, 2, 0, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 1.50, 0, 0, 0, 0, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (1.30, -0.20, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0),
        (0.00, -1.50, 0, 0, 0, 0, 0, 0, 9, -11, 0, 0, 0, 0, 0, -2),
        (-1.20, -0.30, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1),
        (-1.40, 0.10, 0, 0, 0, 0, 0, 0, 0, 4, 0, -1, 0, 0, 0, 2),
        (0.20, -1.30, 0, 0, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, -2),
        (-0.50, 1.00, 0, 0, 0, 0, 0, 0, 0, 1, -8, 3, 0, 0, 0, -2),
        (1.10, -0.30, 0, 0, 1, -1, 1, 0, -1, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 1.10, 0, 0, 0, 0, 1, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (0.00, -1.40, 3, 0, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.40, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 1.20, 2, -1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.40, 1, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.40, 1, 0, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.40, 1, -2, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.40, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.40, 0, 0, 2, -2, 1, 0, -4, 4, 0, 0, 0, 0, 0, 0),
        (0.00, -1.40, 0, 0, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.40, 0.00, 0, 0, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.30, 3, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.30, 0.00, 1, 0, 0, -1, -1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (0.00, -1.30, 1, 0, -4, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.30, 1, -1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.30, 1, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.30, 0, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.80, 0.50, 0, 0, 1, -1, 1, 0, 3, -6, 0, 0, 0, 0, 0, 0),
        (-0.20, -1.10, 0, 0, 0, 0, 0, 0, 6, -10, 0, 0, 0, 0, 0, -2),
        (0.00, -1.30, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 2),
        (0.00, -1.30, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, -1, 0, 0, 2),
        (1.10, 0.20, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 1),
        (-0.70, -0.60, 0, 0, 1, -1, 1, 0, 8, -14, 0, 0, 0, 0, 0, 0),
        (-0.40, -0.80, 0, 0, 0, 0, 1, 0, 0, 8, -15, 0, 0, 0, 0, 0),
        (0.40, 0.80, 0, 0, 0, 0, 0, 0, 0, 1, -4, 0, 0, 0, 0, -2),
        (-0.40, 0.80, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 2),
        (0.00, -1.20, 2, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.20, 2, 0, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.20, 1, 2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.20, 1, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.70, -0.50, 0, 0, 1, -1, 1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (-1.00, 0.20, 0, 0, 0, 0, 0, 0, 6, -8, 0, 0, 0, 0, 0, -1),
        (1.20, 0.00, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0, -2),
        (-1.00, 0.20, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 2),
        (0.20, -1.00, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 1),
        (0.00, 1.10, 3, 0, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.10, 3, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.10, 2, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.10, 2, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.20, 0.90, 2, 0, 0, -2, 1, 0, -6, 8, 0, 0, 0, 0, 0, 0),
        (0.00, 1.10, 2, -1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.00, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.10, 1, -1, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.60, 1, -2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.10, 0.00, 0, 0, 3, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.90, -0.20, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, -1),
        (0.00, 1.10, 0, 0, 0, 0, 0, 0, 0, 7, -8, 3, 0, 0, 0, 2),
        (-0.40, -0.70, 0, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, -2),
        (0.60, -0.50, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 1),
        (0.00, -1.00, 3, 0, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.00, 2, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.00, 1, 0, 4, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-1.00, 0.00, 1, 0, 1, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.00, 1, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.00, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.00, 1, 0, -4, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.00, 1, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.00, 0, 2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.00, 0, 2, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.00, 0, 1, 2, -2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.00, 0, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1.00, 0.00, 0, 0, 1, -1, 1, 0, 0, -9, 15, 0, 0, 0, 0, 0),
        (0.80, -0.20, 0, 0, 0, 0, 1, 0, 0, 0, 0, -1, 0, 0, 0, 0),
        (0.00, 1.00, 0, 0, 0, 0, 1, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (1.00, 0.00, 0, 0, 0, 0, 1, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (1.00, 0.00, 0, 0, 0, 0, 0, 0, 7, -10, 0, 0, 0, 0, 0, -2),
        (0.40, 0.60, 0, 0, 0, 0, 0, 0, 3, -5, 4, 0, 0, 0, 0, 2),
        (-0.40, -0.60, 0, 0, 0, 0, 0, 0, 3, -9, 4, 0, 0, 0, 0, -2),
        (-0.80, -0.20, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 1),
        (0.00, 0.90, 5, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.90, 4, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.90, 3, 0, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.90, 2, 1, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.90, 2, 0, 0, -2, 1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.00, -0.90, 1, 2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.90, 1, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.90, 1, 0, -2, 4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.90, 1, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.90, 1, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.90, 1, -1, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 0.80, 1, -1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.90, 0, 1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.90, 0, 0, 1, -1, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (-0.50, -0.40, 0, 0, 0, 0, 0, 0, 0, 3, 0, -3, 0, 0, 0, 2),
        (-0.90, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -1, 0, 0, 2),
        (-0.70, -0.20, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 0, -1),
        (0.70, -0.20, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 0, 0, 0, 2),
        (-0.30, 0.60, 0, 0, 0, 0, 0, 0, 0, 8, -15, 0, 0, 0, 0, -2),
        (0.00, 0.80, 3, 0, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.80, 3, 0, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.80, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.80, 2, -1, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.80, 1, 2, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.80, 1, 1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.80, 1, 0, -2, -3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.80, 0, 1, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.80, 0, 1, -2, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.80, 0, 0, 4, -4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.80, 0, 0, 4, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, -0.50, 0, 0, 0, 0, 1, 0, 3, -7, 4, 0, 0, 0, 0, 0),
        (0.00, -0.80, 0, 0, 0, 0, 1, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (-0.30, 0.50, 0, 0, 0, 0, 1, 0, -3, 7, -4, 0, 0, 0, 0, 0),
        (-0.60, 0.20, 0, 0, 0, 0, 0, 0, 7, -9, 0, 0, 0, 0, 0, -1),
        (0.20, 0.60, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, 0, -1),
        (-0.50, 0.30, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, 0, 1),
        (-0.50, -0.30, 0, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 2),
        (-0.50, -0.30, 0, 0, 0, 0, 0, 0, 0, 5, -9, 0, 0, 0, 0, -2),
        (0.00, -0.80, 0, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 2),
        (-0.30, 0.50, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2, -5, 0, 0, 2),
        (-0.80, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 1, 0, 0, 2),
        (-0.30, -0.50, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 5, 0, 0, 2),
        (0.10, 0.70, 0, 0, 0, 0, 0, 0, 7, -11, 0, 0, 0, 0, 0, -2),
        (-0.70, 0.10, 0, 0, 0, 0, 0, 0, 2, -2, 0, 0, 0, 0, 0, 1),
        (0.00, 0.70, 4, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.70, 3, 0, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, -0.60, 2, 0, 0, -2, -1, 0, -6, 8, 0, 0, 0, 0, 0, 0),
        (0.00, -0.70, 2, 0, -2, -3, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.70, 2, -1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.70, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.70, 1, -1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.70, 0, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.70, 0, 1, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.70, 0, 1, -4, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.70, 0.00, 0, 0, 1, -1, 2, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (-0.70, 0.00, 0, 0, 1, -1, 1, 0, 2, -4, 0, -3, 0, 0, 0, 0),
        (-0.50, 0.20, 0, 0, 1, -1, 1, 0, 0, -1, 0, 3, 0, 0, 0, 0),
        (0.70, 0.00, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 1, 0, 0, 0),
        (0.00, -0.70, 0, 0, 0, 0, 1, 0, 3, -5, 0, 2, 0, 0, 0, 0),
        (-0.20, -0.50, 0, 0, 0, 0, 0, 0, 9, -9, 0, 0, 0, 0, 0, -1),
        (-0.60, -0.10, 0, 0, 0, 0, 0, 0, 3, -1, 0, 0, 0, 0, 0, 1),
        (0.60, -0.10, 0, 0, 0, 0, 0, 0, 3, -3, 0, 0, 0, 0, 0, 1),
        (0.50, -0.20, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, -2),
        (0.20, 0.50, 0, 0, 0, 0, 0, 0, 0, 11, 0, 0, 0, 0, 0, 2),
        (-0.20, -0.50, 0, 0, 0, 0, 0, 0, 0, 6, -15, 0, 0, 0, 0, -2),
        (0.40, 0.30, 0, 0, 0, 0, 0, 0, 0, 4, -8, 0, 0, 0, 0, -2),
        (0.50, -0.20, 0, 0, 0, 0, 0, 0, 0, 3, 0, 2, -5, 0, 0, 2),
        (-0.50, 0.20, 0, 0, 0, 0, 0, 0, 0, 3, 0, 1, 0, 0, 0, 2),
        (0.00, -0.70, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, -2),
        (0.00, -0.70, 0, 0, 0, 0, 0, 0, 0, 2, 0, -4, 0, 0, 0, -2),
        (0.70, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 2),
        (-0.40, 0.20, 2, 0, -1, -1, -1, 0, 0, -1, 0, 3, 0, 0, 0, 0),
        (0.20, 0.40, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 3, 0, 0, 0),
        (0.40, 0.20, 0, 0, 0, 0, 1, 0, 0, 2, -4, 0, 0, 0, 0, 0),
        (-0.40, 0.20, 0, 0, 0, 0, 0, 1, 0, -4, 0, 0, 0, 0, 0, -2),
        (0.40, -0.20, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 2),
        (-0.40, -0.20, 0, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 2),
        (0.40, 0.20, 0, 0, 0, 0, 0, 0, 0, 1, -5, 0, 0, 0, 0, -2),
        (-0.20, -0.40, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 1),
        (0.00, 0.60, 4, 0, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.60, 3, 0, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.60, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 2, 1, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 2, 0, 0, -2, -1, 0, 0, -2, 0, 0, 5, 0, 0, 0),
        (0.00, -0.60, 2, 0, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 1, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.60, 1, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.60, 1, 1, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.60, 1, 0, 0, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 1, 0, -2, -2, -2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.00, -0.60, 1, -1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.60, 0, 0, 2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.60, 0.00, 0, 0, 2, -2, 2, 0, -8, 11, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 0, 0, 2, -2, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.50, 0.10, 0, 0, 1, -1, 1, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (0.10, -0.50, 0, 0, 1, -1, -1, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (0.00, -0.60, 0, 0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 0, 0, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.60, 0, 0, 0, 0, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.30, 0.30, 0, 0, 0, 0, 0, 0, 8, -13, 0, 0, 0, 0, 0, 1),
        (-0.50, -0.10, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 0, -1),
        (-0.10, -0.50, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 2),
        (0.10, 0.50, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, 1),
        (0.50, -0.10, 0, 0, 0, 0, 0, 0, 0, 5, 0, -2, 0, 0, 0, 2),
        (-0.10, 0.50, 0, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, -1),
        (0.00, 0.60, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 2),
        (0.00, 0.60, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 2),
        (0.00, 0.50, 3, -1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 3, -1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 3, -1, -2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 0.40, 2, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 2, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 2, 1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 2, 0, 2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, -0.20, 2, 0, 0, -2, 1, 0, 0, -6, 8, 0, 0, 0, 0, 0),
        (-0.20, 0.30, 2, 0, 0, -2, -1, 0, 0, -5, 6, 0, 0, 0, 0, 0),
        (0.20, 0.30, 2, 0, -1, -1, -1, 0, 0, 3, -7, 0, 0, 0, 0, 0),
        (0.00, 0.50, 2, 0, -4, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 1, 1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 1, 1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 1, 0, 0, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 1, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 1, -2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 0, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 0, 1, -2, 2, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.50, 0, 1, -2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.50, 0, 0, 2, 6, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.10, 0, 0, 2, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.40, -0.10, 0, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.00, 0.50, 0, 0, 2, -2, 2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 0, 0, 2, -2, 2, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (0.40, 0.10, 0, 0, 2, -2, 1, -1, 0, 2, 0, 0, 0, 0, 0, 0),
        (-0.50, 0.00, 0, 0, 1, -1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.40, -0.10, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 2, 0, 0),
        (0.10, 0.40, 0, 0, 0, 0, 1, 0, 3, -5, 0, 0, 0, 0, 0, 0),
        (0.50, 0.00, 0, 0, 0, 0, 0, 0, 9, -12, 0, 0, 0, 0, 0, -2),
        (0.00, -0.50, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, 0, -1),
        (0.40, -0.10, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, 2),
        (-0.40, 0.10, 0, 0, 0, 0, 0, 0, 5, -10, 0, 0, 0, 0, 0, -2),
        (-0.50, 0.00, 0, 0, 0, 0, 0, 0, 4, -4, 0, 0, 0, 0, 0, 1),
        (0.30, 0.20, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 2),
        (-0.30, 0.20, 0, 0, 0, 0, 0, 0, 0, 7, -13, 0, 0, 0, 0, -2),
        (-0.50, 0.00, 0, 0, 0, 0, 0, 0, 0, 6, -11, 0, 0, 0, 0, -2),
        (0.10, 0.40, 0, 0, 0, 0, 0, 0, 0, 5, 0, -3, 0, 0, 0, 2),
        (0.20, 0.30, 0, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 0, 0, -2),
        (-0.30, 0.20, 0, 0, 0, 0, 0, 0, 0, 1, 0, 3, 0, 0, 0, 2),
        (0.00, 0.50, 0, 0, 0, 0, 0, 0, 0, 1, -3, 0, 0, 0, 0, -2),
        (0.10, 0.40, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 2),
        (0.00, -0.40, 5, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 4, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 3, 1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 3, 0, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 3, -1, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 2, 0, 2, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 2, 0, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 2, -2, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 0.30, 2, -2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 1, 2, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 1, 2, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 1, 1, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 0.30, 1, 1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 1, 1, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 1, 1, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 1, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 1, 0, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 1, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 1, 0, 0, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 1, 0, -1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 1, -1, -2, -3, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 1, -2, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 1, -2, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 0, 2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 0, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 0.30, 0, 2, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 4, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 0, 0, 2, 0, 2, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.00, -0.40, 0, 0, 2, -2, 1, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.00, -0.40, 0, 0, 2, -2, 1, 0, 0, -2, 0, 0, 2, 0, 0, 0),
        (0.40, 0.00, 0, 0, 2, -2, 1, 0, 0, -8, 11, 0, 0, 0, 0, 0),
        (0.00, 0.40, 0, 0, 2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.40, 0.00, 0, 0, 1, -1, 2, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (-0.20, -0.20, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, -2, 0, 0, 0),
        (-0.40, 0.00, 0, 0, 1, -1, 1, 0, 0, -1, 0, -1, 2, 0, 0, 0),
        (0.20, -0.20, 0, 0, 1, -1, 1, 0, 0, -1, 0, -2, 4, 0, 0, 0),
        (-0.20, 0.20, 0, 0, 0, 0, 2, 0, 0, -1, 2, 0, 0, 0, 0, 0),
        (-0.10, 0.30, 0, 0, 0, 0, 1, 0, 0, -8, 15, 0, 0, 0, 0, 0),
        (-0.40, 0.00, 0, 0, 0, 0, 0, 0, 8, -8, 0, 0, 0, 0, 0, -1),
        (-0.40, 0.00, 0, 0, 0, 0, 0, 0, 8, -10, 0, 0, 0, 0, 0, -1),
        (-0.30, 0.10, 0, 0, 0, 0, 0, 0, 6, -10, 0, 0, 0, 0, 0, -1),
        (0.00, 0.40, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 2),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 5, -9, 0, 0, 0, 0, 0, -2),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 2),
        (-0.40, 0.00, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 1),
        (0.40, 0.00, 0, 0, 0, 0, 0, 0, 4, -3, 0, 0, 0, 0, 0, 2),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, -1),
        (0.00, 0.40, 0, 0, 0, 0, 0, 0, 3, -6, 0, 0, 0, 0, 0, -1),
        (0.00, 0.40, 0, 0, 0, 0, 0, 0, 2, -6, 0, 0, 0, 0, 0, -2),
        (0.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 8, -15, 0, 0, 0, 0, -1),
        (0.00, -0.40, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0),
        (0.10, 0.30, 0, 0, 0, 0, 0, 0, 0, 6, -5, 0, 0, 0, 0, 2),
        (-0.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -2, 0, 0, 0, 0, 2),
        (0.00, 0.40, 0, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 2),
        (0.20, 0.20, 0, 0, 0, 0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 2),
        (-0.10, 0.30, 0, 0, 0, 0, 0, 0, 0, 2, 0, -2, 0, 0, 0, 2),
        (0.40, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 2),
        (-0.10, -0.20, 2, 0, 2, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (-0.20, 0.10, 2, 0, 0, -2, -1, 0, 0, -6, 8, 0, 0, 0, 0, 0),
        (-0.10, -0.20, 2, 0, -1, -1, 1, 0, 0, 3, -7, 0, 0, 0, 0, 0),
        (0.10, -0.20, 1, 0, 0, -1, 1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (-0.10, 0.20, 1, 0, -2, 0, -2, 0, -10, 3, 0, 0, 0, 0, 0, 0),
        (0.20, -0.10, 0, 0, 2, -2, 1, 0, 0, -7, 9, 0, 0, 0, 0, 0),
        (0.20, 0.10, 0, 0, 1, -1, 2, 0, 0, -1, 0, -2, 5, 0, 0, 0),
        (0.20, 0.10, 0, 0, 1, -1, -1, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (-0.20, -0.10, 0, 0, 0, 0, 1, 0, 0, 1, 0, -2, 0, 0, 0, 0),
        (-0.20, 0.10, 0, 0, 0, 0, 1, 0, 0, -9, 17, 0, 0, 0, 0, 0),
        (-0.10, -0.20, 0, 0, 0, 0, 0, 0, 2, -3, 0, 0, 0, 0, 0, 1),
        (0.20, 0.10, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, -2),
        (0.20, -0.10, 0, 0, 0, 0, 0, 0, 1, -4, 0, 0, 0, 0, 0, -2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 1),
        (-0.20, -0.10, 0, 0, 0, 0, 0, 0, 0, 6, -10, 0, 0, 0, 0, -2),
        (-0.10, -0.20, 0, 0, 0, 0, 0, 0, 0, 5, -8, 0, 0, 0, 0, -2),
        (0.20, -0.10, 0, 0, 0, 0, 0, 0, 0, 3, -5, 0, 0, 0, 0, -1),
        (0.20, 0.10, 0, 0, 0, 0, 0, 0, 0, 2, -6, 0, 0, 0, 0, -2),
        (0.00, 0.30, 4, 0, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 3, 0, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 2, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, 1, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, 1, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, 0, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, 0, 2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 2, 0, 0, -2, -1, 0, 0, -2, 0, 4, -5, 0, 0, 0),
        (0.00, 0.30, 2, 0, 0, -2, -1, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, 0, 0, -2, -2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 2, 0, 0, -3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, -1, -1, -1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.30, 0.00, 2, 0, -1, -1, -1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 2, 0, -2, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 2, 0, -4, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, 0, -4, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, -1, 2, -1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, -1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 2, -1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 2, -2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, 1, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, 0, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, 0, 2, -2, 2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, 0, 0, 4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, 0, 0, -1, -1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, 0, 0, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 1, 0, -1, 1, -1, 0, -18, 17, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, 0, -1, -1, -1, 0, 20, -20, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, 0, -2, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, 0, -2, -2, -2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, -1, 0, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, -2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 1, -2, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, -2, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 1, -2, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 2, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 1, 4, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 1, 2, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 1, 0, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 4, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 2, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 2, 0, 2, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 2, 0, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 2, 0, 2, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 2, -2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 2, -2, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 2, -2, -1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 1, -1, 2, 0, 0, 0, -2, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 1, -1, 2, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 1, -1, 1, 0, 1, -2, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 1, -1, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 0, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.30, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 1, 0, 5, -8, 0, 0, 0, 0, 0, 0),
        (0.00, -0.30, 0, 0, 0, 0, 1, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.30, 0.00, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 9, -11, 0, 0, 0, 0, 0, -1),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 8, -16, 0, 0, 0, 0, 0, -2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 0, 1),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 6, -7, 0, 0, 0, 0, 2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, -2, 0, 0, 2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 4, -8, 1, 5, 0, 0, -2),
        (-0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, -2, 0, 0, 2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, 1),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3, 0, 0, 0, -1),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, -6, 0, 0, 0, 0, -2),
        (0.00, -0.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 5, 0, 0, 2),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2),
        (0.30, 0.00, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1),
        (0.00, 0.30, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2),
        (0.00, -0.20, 4, 1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 4, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 4, -1, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 4, -1, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 3, 1, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 3, 0, 4, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 3, 0, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 3, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 3, 0, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 3, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 3, 0, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 3, 0, -2, -1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 3, 0, -2, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 2, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, 1, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, 1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, 1, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, 1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 1, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 0, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 0, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, 0, 2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 0, 2, -3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 0.00, 2, 0, 2, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 0, 2, -6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 0, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, 0, 0, -1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, 0, 0, -2, 1, 0, 0, -5, 6, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, 0, 0, -2, -1, 0, 0, -2, 0, 3, -1, 0, 0, 0),
        (0.00, -0.20, 2, 0, 0, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 0, 0, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 0.00, 2, 0, -1, -1, -2, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.00, -0.20, 2, 0, -2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, 0, -4, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, -1, 0, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, -1, 0, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, -1, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, -1, -2, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 2, -2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 2, -2, 0, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, 2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, 1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 1, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, 1, -2, -3, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 1, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, 0, 4, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.20, 0.00, 1, 0, 3, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, 2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, 2, -6, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 0.00, 1, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, 0, 0, -1, 1, 0, 0, -1, 0, 1, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, 0, -1, -1, 0, 0, -3, 4, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, 0, 0, -2, 1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, 0, -2, -1, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, 0, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, 0, -3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.20, 0.00, 1, 0, -1, 1, -1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, -1, 0, -1, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (0.20, 0.00, 1, 0, -1, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, -2, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, -2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, -2, -2, -2, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.00, 0.20, 1, 0, -2, -6, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, 0, -4, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, -1, 2, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, -1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, -1, 2, -3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, -1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, -1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, -1, -2, 1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 1, -1, -2, -4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, -1, -4, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, -2, 2, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, -0.10, 1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 1, -2, -2, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 0, 3, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 1, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 1, 0, 4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 1, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 1, -2, 4, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 0, 4, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 2, -2, 2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.20, 0.00, 0, 0, 2, -2, 1, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 2, -2, 1, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 2, -2, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 0, 2, -2, 1, 0, 0, -3, 0, 3, 0, 0, 0, 0),
        (0.20, 0.00, 0, 0, 2, -2, 1, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.00, -0.20, 0, 0, 2, -2, 1, 0, 0, -4, 4, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 0, 2, -2, 1, 0, -5, 5, 0, 0, 0, 0, 0, 0),
        (0.20, 0.00, 0, 0, 2, -2, 1, 0, -8, 11, 0, 0, 0, 0, 0, 0),
        (-0.20, 0.00, 0, 0, 1, 1, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, 1, 0, 0, 0),
        (-0.20, 0.00, 0, 0, 1, -1, 2, 0, 0, -1, 0, -1, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 1, -1, 2, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 1, -1, 2, 0, -8, 12, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 1, -1, 1, 0, 1, -3, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 0, 1, -1, 1, 0, 0, 1, -4, 0, 0, 0, 0, 0),
        (0.20, 0.00, 0, 0, 1, -1, 1, 0, 0, -1, 0, 1, -3, 0, 0, 0),
        (0.20, 0.00, 0, 0, 1, -1, 1, 0, 0, -1, 0, 0, 0, -1, 0, 0),
        (0.00, -0.20, 0, 0, 1, -1, 1, 0, 0, -4, 6, 0, 0, 0, 0, 0),
        (0.20, 0.00, 0, 0, 1, -1, 1, 0, -5, 6, 0, 0, 0, 0, 0, 0),
        (-0.20, 0.00, 0, 0, 0, 0, 1, 0, 3, -4, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 0, 0, 1, 0, 0, 7, -13, 0, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 0, 0, 1, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.00, -0.20, 0, 0, 0, 0, 1, 0, 0, 2, -2, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 0, 0, 0, 1, 0, 0, -2, 2, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 0, 0, 0, 1, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.20, 0.00, 0, 0, 0, 0, 1, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (0.00, 0.20, 0, 0, 0, 0, 0, 0, 8, -12, 0, 0, 0, 0, 0, -2),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 7, -10, 0, 0, 0, 0, 0, -1),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 7, -11, 0, 0, 0, 0, 0, -1),
        (-0.20, 0.00, 0, 0, 0, 0, 0, 0, 6, -4, 0, 0, 0, 0, 0, 1),
        (-0.20, 0.00, 0, 0, 0, 0, 0, 0, 6, -6, 0, 0, 0, 0, 0, 1),
        (-0.20, 0.00, 0, 0, 0, 0, 0, 0, 5, -5, 0, 0, 0, 0, 0, 1),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, -1),
        (-0.20, 0.00, 0, 0, 0, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0, -1),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 4, -5, 0, 0, 0, 0, 0, -2),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, 1),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 3, -4, 0, 0, 0, 0, 0, -2),
        (-0.20, 0.00, 0, 0, 0, 0, 0, 0, 3, -8, 0, 0, 0, 0, 0, -2),
        (0.00, 0.20, 0, 0, 0, 0, 0, 0, 2, -5, 0, 0, 0, 0, 0, -1),
        (0.00, 0.20, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0, 0, 0, 0, -1),
        (0.00, 0.20, 0, 0, 0, 0, 0, 0, 1, -4, 0, 0, 0, 0, 0, -1),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 0, 9, -17, 0, 0, 0, 0, -2),
        (-0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 7, -8, 0, 0, 0, 0, 2),
        (-0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 7, -9, 0, 0, 0, 0, 2),
        (-0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 2),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 5, -10, 0, 0, 0, 0, -2),
        (0.00, 0.20, 0, 0, 0, 0, 0, 0, 0, 4, 0, -4, 0, 0, 0, 2),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 0, 4, -6, 0, 0, 0, 0, -2),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 0, 4, -7, 0, 0, 0, 0, -1),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, 1),
        (0.00, 0.20, 0, 0, 0, 0, 0, 0, 0, 4, -8, 3, 0, 0, 0, -1),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 4, -8, 1, 5, 0, 0, 2),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 2),
        (0.00, 0.20, 0, 0, 0, 0, 0, 0, 0, 3, -8, 3, 0, 0, 0, -2),
        (0.10, -0.10, 0, 0, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 2),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, -2, 0, 0, 1),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 0, 2, 0, -5, 0, 0, 0, -2),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 0, 2, -4, 0, 0, 0, 0, 1),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, -7, 0, 0, 0, 0, -2),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1),
        (0.00, 0.20, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0, 0, 0, -1),
        (0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, -2, 5, 0, 0, 2),
        (0.00, 0.20, 0, 0, 0, 0, 0, 0, 0, 1, 0, -2, 0, 0, 0, -2),
        (0.00, -0.20, 0, 0, 0, 0, 0, 0, 0, 1, 0, -5, 0, 0, 0, -2),
        (-0.20, 0.00, 0, 0, 0, 0, 0, 0, 0, 7, -7, 0, 0, 0, 0, 2),
        (0.00, 0.10, 5, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 4, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 3, 1, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 3, 1, -2, -6, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 3, 0, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 3, 0, 0, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 3, 0, -2, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 3, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 2, 2, 0, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 2, 1, 2, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 2, 1, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 2, 0, 2, -2, 2, 0, 0, -2, 0, 3, 0, 0, 0, 0),
        (0.10, 0.00, 2, 0, 1, -3, 1, 0, -6, 7, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 2, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 2, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 2, 0, 0, -4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 2, 0, 0, -6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 2, 0, -2, -2, -2, 0, 0, -2, 0, 2, 0, 0, 0, 0),
        (0.00, -0.10, 2, 0, -2, -5, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 2, -1, 2, 4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 2, -1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 2, -1, 0, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 2, -1, -2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 2, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 1, 3, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 1, 2, 2, -4, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 1, 1, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 1, 1, -2, 1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 1, -2, -1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 1, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 0, 2, 0, 2, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.10, 0.00, 1, 0, 2, 0, 2, 0, 0, 4, -8, 3, 0, 0, 0, 0),
        (0.10, 0.00, 1, 0, 2, 0, 2, 0, 0, -4, 8, -3, 0, 0, 0, 0),
        (0.00, 0.10, 1, 0, 2, 0, 2, 0, -1, 1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 1, 0, 2, -2, 2, 0, -3, 3, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 0, 0, 0, 1, 0, -10, 3, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 1, 0, 0, 0, -1, 0, -10, 3, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 0, 0, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 0, 0, -6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 0, -2, 4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 1, 0, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 0, -2, -2, -2, 0, 0, 1, 0, -1, 0, 0, 0, 0),
        (0.00, -0.10, 1, 0, -2, -2, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 1, 0, -2, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 0, 2, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 0, 1, 4, -4, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 0, 1, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 0, 1, -4, 2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 0, 0, 2, 2, 2, 0, 0, 2, 0, -2, 0, 0, 0, 0),
        (0.00, -0.10, 0, 0, 2, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 0, 0, 2, 0, 2, 0, 2, -2, 0, 0, 0, 0, 0, 0),
        (0.10, 0.00, 0, 0, 2, 0, 2, 0, 2, -3, 0, 0, 0, 0, 0, 0),
        (0.10, 0.00, 0, 0, 2, 0, 2, 0, -2, 3, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 0, 0, 2, 0, 2, 0, -2, 2, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 0, 0, 2, -2, 1, 0, 1, -1, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 0, 0, 2, -2, 1, 0, 0, -2, 0, 1, 0, 0, 0, 0),
        (0.00, 0.10, 0, 0, 2, -2, 1, 0, 0, -10, 15, 0, 0, 0, 0, 0),
        (0.00, 0.10, 0, 0, 1, -1, 2, 0, 0, -1, 0, 0, -1, 0, 0, 0),
        (-0.10, 0.00, 0, 0, 1, -1, 2, 0, -3, 4, 0, 0, 0, 0, 0, 0),
        (0.10, 0.00, 0, 0, 1, -1, 1, 0, -1, 2, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 0, 0, 1, -1, 1, 0, -4, 6, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 0, 0, 1, -1, -1, 0, -5, 7, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 0, 0, 0, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, 0.00, 0, 0, 0, 0, 2, 0, 0, 0, 0, 1, 0, 0, 0, 0),
        (0.00, -0.10, 0, 0, 0, 0, 2, 0, -3, 5, 0, 0, 0, 0, 0, 0),
        (0.10, 0.00, 0, 0, 0, 0, 1, 0, 0, -1, 0, 2, 0, 0, 0, 0),
        (0.10, 0.00, 0, 0, 0, 0, 1, 0, -1, 2, 0, 0, 0, 0, 0, 0),
        (0.00, 0.10, 0, 0, 0, 0, 0, 0, 9, -13, 0, 0, 0, 0, 0, -2),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 8, -11, 0, 0, 0, 0, 0, -1),
        (0.00, 0.10, 0, 0, 0, 0, 0, 0, 8, -14, 0, 0, 0, 0, 0, -2),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 6, -7, 0, 0, 0, 0, 0, -1),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 5, -3, 0, 0, 0, 0, 0, 2),
        (0.10, 0.00, 0, 0, 0, 0, 0, 0, 5, -4, 0, 0, 0, 0, 0, 2),
        (0.10, 0.00, 0, 0, 0, 0, 0, 0, 5, -6, 0, 0, 0, 0, 0, -2),
        (0.00, 0.10, 0, 0, 0, 0, 0, 0, 4, -8, 0, 0, 0, 0, 0, -2),
        (-0.10, 0.00, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 2),
        (0.00, 0.10, 0, 0, 0, 0, 0, 0, 3, -3, 0, 2, 0, 0, 0, 2),
        (0.00, 0.10, 0, 0, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, -2),
        (-0.10, 0.00, 0, 0, 0, 0, 0, 0, 0, 7, -12, 0, 0, 0, 0, -2),
        (0.00, 0.10, 0, 0, 0, 0, 0, 0, 0, 6, -4, 0, 0, 0, 0, 2),
        (-0.10, 0.00, 0, 0, 0, 0, 0, 0, 0, 6, -8, 1, 5, 0, 0, 2),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 0, 6, -9, 0, 0, 0, 0, -2),
        (0.00, 0.10, 0, 0, 0, 0, 0, 0, 0, 5, 0, -4, 0, 0, 0, 2),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 0, 5, -7, 0, 0, 0, 0, -2),
        (0.00, 0.10, 0, 0, 0, 0, 0, 0, 0, 5, -8, 3, 0, 0, 0, 2),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 0, 5, -9, 0, 0, 0, 0, -1),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 0, 5, -13, 0, 0, 0, 0, -2),
        (0.00, 0.10, 0, 0, 0, 0, 0, 0, 0, 5, -16, 4, 5, 0, 0, -2),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 0, 3, 0, -5, 0, 0, 0, -2),
        (0.10, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, -7, 0, 0, 0, 0, -2),
        (0.10, 0.00, 0, 0, 0, 0, 0, 0, 0, 3, -9, 0, 0, 0, 0, -2),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2, 0, 0, 0, 2),
        (0.10, 0.00, 0, 0, 0, 0, 0, 0, 0, 2, -8, 1, 5, 0, 0, -2),
        (-0.10, 0.00, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 2, 0, 0, 2),
        (0.00, -0.10, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2),
    ),
    # j = 1
    (
        (0.20, 883.03, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.30, -303.09, 0, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -67.70, 0, 1, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (-0.10, -48.77, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 47.25, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.10, 29.90, 0, 1, -2, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.50, -18.40, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -6.30, 1, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -4.20, 0, 2, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 3.20, 1, 0, -2, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.80, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.10, 2, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.10, 1, 0, -2, -2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.10, 0, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -1.00, 2, 0, -2, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, 1.00, 1, 0, 2, -2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.90, 0, 0, 2, -2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.20, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0.00, -0.10, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    ),
)
# fmt: on
