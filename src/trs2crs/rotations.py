"""Elementary rotation matrices, their angle derivatives, and factor chains.

The matrices follow the passive (frame-rotation) convention of the IERS
Conventions and SOFA: ``R3(a)`` rotates the coordinate frame by ``+a``
about the z-axis, so a vector expressed in the rotated frame is
``R3(a) @ v``.

A rotation chain is a list of :class:`RotationFactor` values multiplied
left to right.  Partial derivatives of a chain follow the product rule:
the derivative with respect to a parameter entering exactly one factor is
the same product with that factor replaced by its derivative matrix.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from trs2crs.config import get_dtype


def Rx(angle: ArrayLike) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis [rad].

    Returns:
        Array: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   +s],
                      [0.0,   -s,   +c]], dtype=get_dtype())


def Ry(angle: ArrayLike) -> Array:
    """Rotation matrix, for a rotation about the y-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis [rad].

    Returns:
        Array: Rotation matrix.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,  0.0,   -s],
                      [0.0, +1.0,  0.0],
                      [ +s,  0.0,   +c]], dtype=get_dtype())


def Rz(angle: ArrayLike) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis [rad].

    Returns:
        Array: Rotation matrix.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,   +s,  0.0],
                      [ -s,   +c,  0.0],
                      [0.0,  0.0,  1.0]], dtype=get_dtype())


def dRx(angle: ArrayLike) -> Array:
    """Derivative of :func:`Rx` with respect to its angle.

    Args:
        angle (ArrayLike): Rotation angle [rad].

    Returns:
        Array: ``d Rx / d angle``.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[0.0,  0.0,  0.0],
                      [0.0,   -s,   +c],
                      [0.0,   -c,   -s]], dtype=get_dtype())


def dRy(angle: ArrayLike) -> Array:
    """Derivative of :func:`Ry` with respect to its angle.

    Args:
        angle (ArrayLike): Rotation angle [rad].

    Returns:
        Array: ``d Ry / d angle``.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ -s,  0.0,   -c],
                      [0.0,  0.0,  0.0],
                      [ +c,  0.0,   -s]], dtype=get_dtype())


def dRz(angle: ArrayLike) -> Array:
    """Derivative of :func:`Rz` with respect to its angle.

    Args:
        angle (ArrayLike): Rotation angle [rad].

    Returns:
        Array: ``d Rz / d angle``.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ -s,   +c,  0.0],
                      [ -c,   -s,  0.0],
                      [0.0,  0.0,  0.0]], dtype=get_dtype())


_ROTATIONS = {1: (Rx, dRx), 2: (Ry, dRy), 3: (Rz, dRz)}


class RotationFactor(NamedTuple):
    """An elementary rotation and, optionally, its angle derivative.

    Attributes:
        axis: Rotation axis, 1 (x), 2 (y) or 3 (z).
        angle: Rotation angle [rad].
        matrix: The 3x3 rotation matrix.
        derivative: ``d matrix / d angle``, or ``None`` when not requested.
    """

    axis: int
    angle: float
    matrix: Array
    derivative: Array | None = None


def rotation_factor(axis: int, angle: ArrayLike, with_derivative: bool = False) -> RotationFactor:
    """Build an elementary rotation factor.

    Args:
        axis: Rotation axis, 1, 2 or 3.
        angle: Rotation angle [rad].
        with_derivative: Also compute the angle derivative. Default: ``False``

    Returns:
        RotationFactor: The factor.

    Raises:
        ValueError: If ``axis`` is not 1, 2 or 3.
    """
    try:
        rot, drot = _ROTATIONS[axis]
    except KeyError:
        raise ValueError(f"Rotation axis must be 1, 2 or 3, got {axis}") from None
    derivative = drot(angle) if with_derivative else None
    return RotationFactor(axis, angle, rot(angle), derivative)


def chain_product(matrices: Sequence[Array]) -> Array:
    """Multiply matrices left to right.

    Args:
        matrices: Non-empty sequence of 3x3 matrices.

    Returns:
        Array: ``matrices[0] @ matrices[1] @ ...``.
    """
    return reduce(jnp.matmul, matrices)


def chain_value(factors: Sequence[RotationFactor]) -> Array:
    """Return the product of the factor matrices, left to right.

    Args:
        factors: Rotation factors.

    Returns:
        Array: 3x3 product.
    """
    return chain_product([f.matrix for f in factors])


def chain_partial(factors: Sequence[RotationFactor], index: int, scale: ArrayLike = 1.0) -> Array:
    """Differentiate a chain with respect to the angle of one factor.

    The factor at ``index`` is replaced by its derivative matrix; every
    other factor keeps its value matrix.

    Args:
        factors: Rotation factors; ``factors[index].derivative`` must be set.
        index: Position of the differentiated factor.
        scale: Chain-rule multiplier ``d angle / d parameter``. Default: ``1.0``

    Returns:
        Array: 3x3 partial derivative.

    Raises:
        ValueError: If the factor was built without its derivative.
    """
    derivative = factors[index].derivative
    if derivative is None:
        raise ValueError(f"Factor {index} was built without its derivative")
    matrices = [f.matrix for f in factors]
    matrices[index] = derivative
    return scale * chain_product(matrices)
