"""
Proof Generation
================

This module implements Groth–Sahai commit-and-prove for pairing-product
equations (SXDH instantiation) and the two fixed equation shapes used by the
signature and encryption layers.

Proofs:
-------
- commit_and_prove: commitments to all witnesses plus (π, θ) for one equation
- create_proof_ayxb: e(a, Y) · e(X, b) = 1
- create_proof_xbxb_t: e(X_1, b_1) · e(X_2, b_2) = t

Proof layout:
-------------
    {
        'xcoms': [com(X_1), ..., com(X_m)],          # Com1 pairs
        'ycoms': [com(Y_1), ..., com(Y_n)],          # Com2 pairs
        'equ_proofs': [{
            'equ_type': 'PairingProduct',
            'pi': [π_1, π_2],                        # Com2 pairs
            'theta': [θ_1, θ_2],                     # Com1 pairs
        }],
    }

Every create_* function verifies its output before returning it. A failure
there means the encoding is broken and raises InternalEncodingFault.
"""

import logging

from charm.toolbox.pairinggroup import G1, G2, GT
from typing import List

from .commit import com_exp, com_identity, com_mul, commit_g1, commit_g2, iota_1, iota_2
from .errors import InternalEncodingFault
from .groups import neg, random_scalar
from .statement import PAIRING_PRODUCT, ayxb_equation, xbxb_t_equation
from .verify import verify_ppe

logger = logging.getLogger(__name__)


def commit_and_prove(rng, equ: dict, xvars: List[G1], yvars: List[G2], crs: dict) -> dict:
    """
    Commit to the witnesses and prove they satisfy a pairing-product equation.

    Formula (SXDH, matrix notation, additive):
    ------------------------------------------
    c = ι_1(X) + R u,    d = ι_2(Y) + S v
    π = R^T ι_2(B) + R^T Γ d − T^T v
    θ = S^T ι_1(A) + S^T Γ^T ι_1(X) + T u

    with R ∈ Z_p^{m×2}, S ∈ Z_p^{n×2}, T ∈ Z_p^{2×2} uniformly random.
    (R^T Γ d expands to R^T Γ ι_2(Y) + R^T Γ S v.)

    Parameters
    ----------
    rng : random.Random-like
        The injected randomness source
    equ : dict
        The equation from make_ppe()
    xvars : List[G1]
        Witnesses X_1..X_m
    yvars : List[G2]
        Witnesses Y_1..Y_n
    crs : dict
        The CRS from keygen_crs()

    Returns
    -------
    dict
        The proof (see module docstring for its layout)
    """
    group = crs['group']
    a_consts = equ['a_consts']
    b_consts = equ['b_consts']
    gamma = equ['gamma']
    m = len(xvars)
    n = len(yvars)

    if len(b_consts) != m:
        raise ValueError(f"Equation has {len(b_consts)} B constants but {m} X witnesses were given")
    if len(a_consts) != n:
        raise ValueError(f"Equation has {len(a_consts)} A constants but {n} Y witnesses were given")

    R = [[random_scalar(group, rng) for _ in range(2)] for _ in range(m)]
    S = [[random_scalar(group, rng) for _ in range(2)] for _ in range(n)]
    T = [[random_scalar(group, rng) for _ in range(2)] for _ in range(2)]

    xcoms = [commit_g1(xvars[i], R[i], crs) for i in range(m)]
    ycoms = [commit_g2(yvars[j], S[j], crs) for j in range(n)]

    # z_i = ι_2(B_i) + Σ_j γ_ij d_j
    z = []
    for i in range(m):
        z_i = iota_2(b_consts[i], group)
        for j in range(n):
            z_i = com_mul(z_i, com_exp(ycoms[j], gamma[i][j]))
        z.append(z_i)

    # w_j = ι_1(A_j) + Σ_i γ_ij ι_1(X_i)
    w = []
    for j in range(n):
        w_j = iota_1(a_consts[j], group)
        for i in range(m):
            w_j = com_mul(w_j, com_exp(iota_1(xvars[i], group), gamma[i][j]))
        w.append(w_j)

    pi = []
    theta = []
    for k in range(2):
        pi_k = com_identity(group, G2)
        for i in range(m):
            pi_k = com_mul(pi_k, com_exp(z[i], R[i][k]))
        for l in range(2):
            pi_k = com_mul(pi_k, com_exp(crs['v'][l], neg(group, T[l][k])))
        pi.append(pi_k)

        theta_k = com_identity(group, G1)
        for j in range(n):
            theta_k = com_mul(theta_k, com_exp(w[j], S[j][k]))
        for l in range(2):
            theta_k = com_mul(theta_k, com_exp(crs['u'][l], T[k][l]))
        theta.append(theta_k)

    return {
        'xcoms': xcoms,
        'ycoms': ycoms,
        'equ_proofs': [{
            'equ_type': PAIRING_PRODUCT,
            'pi': pi,
            'theta': theta,
        }],
    }


def _prove_checked(rng, equ: dict, xvars: List[G1], yvars: List[G2], crs: dict) -> dict:
    proof = commit_and_prove(rng, equ, xvars, yvars, crs)
    if not verify_ppe(equ, proof, crs):
        raise InternalEncodingFault("freshly created proof does not verify against its equation")
    return proof


def create_proof_ayxb(rng, crs: dict, a: G1, y: G2, x: G1, b: G2) -> dict:
    """
    Create a proof for e(a, Y) · e(X, b) = 1 with witnesses X = x, Y = y.

    Encoding:
    ---------
    A = [a], B = [1, b], X = [1, x], Y = [y], γ = 0, t = 1

    Raises
    ------
    InternalEncodingFault
        If the witnesses do not satisfy the equation (a caller bug).
    """
    group = crs['group']
    equ = ayxb_equation(group, a, b)
    return _prove_checked(rng, equ, [group.init(G1, 1), x], [y], crs)


def create_proof_xbxb_t(rng, crs: dict, x1: G1, b1: G2, x2: G1, b2: G2, target: GT) -> dict:
    """
    Create a proof for e(X_1, b_1) · e(X_2, b_2) = target with witnesses x1, x2.

    Encoding:
    ---------
    A = [1], B = [1, b_1, b_2], X = [1, x_1, x_2], Y = [1], γ = 0
    """
    group = crs['group']
    equ = xbxb_t_equation(group, b1, b2, target)
    return _prove_checked(rng, equ, [group.init(G1, 1), x1, x2], [group.init(G2, 1)], crs)
