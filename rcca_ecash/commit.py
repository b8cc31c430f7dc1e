"""
Commitment Arithmetic
=====================

This module implements the commitment modules used by the Groth–Sahai proof
engine in the SXDH setting.

Objects:
--------
- Com1: a pair (c_1, c_2) ∈ G1 × G1
- Com2: a pair (d_1, d_2) ∈ G2 × G2
- Com_T: a 2×2 matrix over GT

Maps:
-----
- ι_1(X) = (1, X)        embeds G1 into Com1
- ι_2(Y) = (1, Y)        embeds G2 into Com2
- ι_T(t) = [[1, 1], [1, t]]
- F(c, d) = [[e(c_1, d_1), e(c_1, d_2)], [e(c_2, d_1), e(c_2, d_2)]]

F is bilinear and F(ι_1(X), ι_2(Y)) = ι_T(e(X, Y)), which is what lets a
pairing-product equation over committed values be checked on commitments.

Commitments:
------------
- com(X) = ι_1(X) · u_1^{r_1} · u_2^{r_2}
- com(Y) = ι_2(Y) · v_1^{s_1} · v_2^{s_2}

All operations are component-wise and identical for Com1 and Com2, so the
same helpers serve both sides.
"""

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT
from typing import List, Tuple

from .utils import pair_elems


def com_mul(a: Tuple, b: Tuple) -> Tuple:
    """Component-wise product of two commitment pairs."""
    return (a[0] * b[0], a[1] * b[1])


def com_exp(a: Tuple, s: ZR) -> Tuple:
    """Component-wise exponentiation a^s."""
    return (a[0] ** s, a[1] ** s)


def com_identity(group: PairingGroup, kind) -> Tuple:
    return (group.init(kind, 1), group.init(kind, 1))


def iota_1(x: G1, group: PairingGroup) -> Tuple:
    return (group.init(G1, 1), x)


def iota_2(y: G2, group: PairingGroup) -> Tuple:
    return (group.init(G2, 1), y)


def iota_t(t: GT, group: PairingGroup) -> List[List[GT]]:
    one = group.init(GT, 1)
    return [[one, one], [one, t]]


def gt_matrix_identity(group: PairingGroup) -> List[List[GT]]:
    one = group.init(GT, 1)
    return [[one, one], [one, one]]


def gt_matrix_mul(a: List[List[GT]], b: List[List[GT]]) -> List[List[GT]]:
    return [[a[i][j] * b[i][j] for j in range(2)] for i in range(2)]


def gt_matrix_eq(a: List[List[GT]], b: List[List[GT]]) -> bool:
    return all(a[i][j] == b[i][j] for i in range(2) for j in range(2))


def pair_com(c: Tuple, d: Tuple, group: PairingGroup) -> List[List[GT]]:
    """
    Compute F(c, d) for c ∈ Com1 and d ∈ Com2.

    Formula:
    --------
    F(c, d) = [[e(c_1, d_1), e(c_1, d_2)],
               [e(c_2, d_1), e(c_2, d_2)]]
    """
    return [[pair_elems(c[i], d[j], group) for j in range(2)] for i in range(2)]


def commit_g1(x: G1, r: List[ZR], crs: dict) -> Tuple:
    """
    Commit to X ∈ G1 with randomness (r_1, r_2).

    Formula:
    --------
    com(X) = ι_1(X) · u_1^{r_1} · u_2^{r_2}

    Parameters
    ----------
    x : G1
        The committed value
    r : List[ZR]
        Two scalars (r_1, r_2)
    crs : dict
        The CRS from keygen_crs()

    Returns
    -------
    Tuple[G1, G1]
        The commitment pair
    """
    group = crs['group']
    u = crs['u']
    c = iota_1(x, group)
    for k in range(2):
        c = com_mul(c, com_exp(u[k], r[k]))
    return c


def commit_g2(y: G2, s: List[ZR], crs: dict) -> Tuple:
    """
    Commit to Y ∈ G2 with randomness (s_1, s_2).

    Formula:
    --------
    com(Y) = ι_2(Y) · v_1^{s_1} · v_2^{s_2}
    """
    group = crs['group']
    v = crs['v']
    d = iota_2(y, group)
    for k in range(2):
        d = com_mul(d, com_exp(v[k], s[k]))
    return d
