"""
Pairing-Product Equations
=========================

One representation covers every statement the proof engine handles:

    ∏_j e(A_j, Y_j) · ∏_i e(X_i, B_i) · ∏_i ∏_j e(X_i, Y_j)^{γ_ij} = t

with public constants A ∈ G1^n, B ∈ G2^m, γ ∈ Z_p^{m×n}, t ∈ GT and
witnesses X ∈ G1^m, Y ∈ G2^n supplied per proof.

The two shapes used by the LHSPS and RCCA layers are instances of it:

- "ayxb":   e(a, Y) · e(X, b) = 1
            A = [a], B = [1, b], X = [1, x], Y = [y], γ = 0 (2×1), t = 1
- "xbxb_t": e(X_1, b_1) · e(X_2, b_2) = t
            A = [1], B = [1, b_1, b_2], X = [1, x_1, x_2], Y = [1], γ = 0 (3×1)
"""

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT
from typing import List

# Equation-type tag carried by every equation proof
PAIRING_PRODUCT = 'PairingProduct'


def make_ppe(a_consts: List[G1], b_consts: List[G2], gamma: List[List[ZR]], target: GT) -> dict:
    """
    Build a pairing-product equation.

    Parameters
    ----------
    a_consts : List[G1]
        A_j, paired with the G2 witnesses Y_j (length n)
    b_consts : List[G2]
        B_i, paired with the G1 witnesses X_i (length m)
    gamma : List[List[ZR]]
        m×n matrix of exponents for e(X_i, Y_j)
    target : GT
        Right-hand side t

    Returns
    -------
    dict
        {'a_consts', 'b_consts', 'gamma', 'target'}
    """
    if len(gamma) != len(b_consts):
        raise ValueError(f"gamma must have {len(b_consts)} rows, got {len(gamma)}")
    for row in gamma:
        if len(row) != len(a_consts):
            raise ValueError(f"gamma rows must have {len(a_consts)} columns, got {len(row)}")

    return {
        'a_consts': list(a_consts),
        'b_consts': list(b_consts),
        'gamma': [list(row) for row in gamma],
        'target': target,
    }


def zero_gamma(group: PairingGroup, m: int, n: int) -> List[List[ZR]]:
    zero = group.init(ZR, 0)
    return [[zero for _ in range(n)] for _ in range(m)]


def ayxb_equation(group: PairingGroup, a: G1, b: G2) -> dict:
    """Equation e(a, Y) · e(X, b) = 1."""
    return make_ppe(
        [a],
        [group.init(G2, 1), b],
        zero_gamma(group, 2, 1),
        group.init(GT, 1),
    )


def xbxb_t_equation(group: PairingGroup, b1: G2, b2: G2, target: GT) -> dict:
    """Equation e(X_1, b_1) · e(X_2, b_2) = target."""
    return make_ppe(
        [group.init(G1, 1)],
        [group.init(G2, 1), b1, b2],
        zero_gamma(group, 3, 1),
        target,
    )
