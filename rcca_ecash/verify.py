"""
Verification Equations
======================

This module implements Groth–Sahai verification for pairing-product
equations and the checkers for the two fixed equation shapes.

Verification equation (SXDH, written multiplicatively):
-------------------------------------------------------
    ∏_j F(ι_1(A_j), d_j) · ∏_i F(c_i, ι_2(B_i) · ∏_j d_j^{γ_ij})
        = ι_T(t) · ∏_k F(u_k, π_k) · ∏_k F(θ_k, v_k)

Verification is deterministic: the same (CRS, equation, proof) always gives
the same answer. Malformed proofs are rejected with False, never an exception.
"""

import logging

from .commit import com_exp, com_mul, gt_matrix_eq, gt_matrix_identity, gt_matrix_mul, iota_1, iota_2, iota_t, pair_com
from .statement import PAIRING_PRODUCT, ayxb_equation, xbxb_t_equation

logger = logging.getLogger(__name__)


def _is_pair_list(value, length: int = None) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    if length is not None and len(value) != length:
        return False
    return all(isinstance(item, (list, tuple)) and len(item) == 2 for item in value)


def _well_formed(equ: dict, proof) -> bool:
    """
    Shape checks run before any pairing is computed.

    - the proof holds at least one equation proof, tagged as pairing-product
    - one X commitment per B constant, one Y commitment per A constant
    - π and θ hold two commitment pairs each
    """
    if not isinstance(proof, dict):
        return False

    equ_proofs = proof.get('equ_proofs')
    if not isinstance(equ_proofs, (list, tuple)) or len(equ_proofs) == 0:
        return False

    equ_proof = equ_proofs[0]
    if not isinstance(equ_proof, dict) or equ_proof.get('equ_type') != PAIRING_PRODUCT:
        return False

    xcoms = proof.get('xcoms')
    ycoms = proof.get('ycoms')
    if not _is_pair_list(xcoms, len(equ['b_consts'])):
        return False
    if not _is_pair_list(ycoms, len(equ['a_consts'])):
        return False

    if not _is_pair_list(equ_proof.get('pi'), 2):
        return False
    if not _is_pair_list(equ_proof.get('theta'), 2):
        return False

    return True


def verify_ppe(equ: dict, proof: dict, crs: dict) -> bool:
    """
    Verify a Groth–Sahai proof for a pairing-product equation.

    Parameters
    ----------
    equ : dict
        The equation from make_ppe()
    proof : dict
        The proof from commit_and_prove()
    crs : dict
        The CRS the proof was created under

    Returns
    -------
    bool
        True if the equation holds, False otherwise (including malformed
        proofs and proofs created under a different CRS)
    """
    if not _well_formed(equ, proof):
        return False

    group = crs['group']
    a_consts = equ['a_consts']
    b_consts = equ['b_consts']
    gamma = equ['gamma']
    xcoms = proof['xcoms']
    ycoms = proof['ycoms']
    equ_proof = proof['equ_proofs'][0]

    try:
        # LHS: ∏_j F(ι_1(A_j), d_j) · ∏_i F(c_i, ι_2(B_i) · ∏_j d_j^{γ_ij})
        lhs = gt_matrix_identity(group)
        for a_j, d_j in zip(a_consts, ycoms):
            lhs = gt_matrix_mul(lhs, pair_com(iota_1(a_j, group), d_j, group))
        for i, (c_i, b_i) in enumerate(zip(xcoms, b_consts)):
            z_i = iota_2(b_i, group)
            for j, d_j in enumerate(ycoms):
                z_i = com_mul(z_i, com_exp(d_j, gamma[i][j]))
            lhs = gt_matrix_mul(lhs, pair_com(c_i, z_i, group))

        # RHS: ι_T(t) · ∏_k F(u_k, π_k) · ∏_k F(θ_k, v_k)
        rhs = iota_t(equ['target'], group)
        for u_k, pi_k in zip(crs['u'], equ_proof['pi']):
            rhs = gt_matrix_mul(rhs, pair_com(u_k, pi_k, group))
        for theta_k, v_k in zip(equ_proof['theta'], crs['v']):
            rhs = gt_matrix_mul(rhs, pair_com(theta_k, v_k, group))

        return gt_matrix_eq(lhs, rhs)
    except Exception as e:
        # Elements of the wrong group or type inside an otherwise well-shaped proof
        logger.debug("Rejecting proof with malformed elements: %s", e)
        return False


def check_proof_ayxb(crs: dict, proof: dict, a, b) -> bool:
    """
    Check a proof for e(a, Y) · e(X, b) = 1, where the proof carries the
    commitments to X and Y.

    Parameters
    ----------
    crs : dict
        The CRS
    proof : dict
        Proof from create_proof_ayxb()
    a : G1
        Public constant paired with Y
    b : G2
        Public constant paired with X

    Returns
    -------
    bool
        True if the proof is valid for this (a, b)
    """
    equ = ayxb_equation(crs['group'], a, b)
    return verify_ppe(equ, proof, crs)


def check_proof_xbxb_t(crs: dict, proof: dict, b1, b2, target) -> bool:
    """Check a proof for e(X_1, b_1) · e(X_2, b_2) = target."""
    equ = xbxb_t_equation(crs['group'], b1, b2, target)
    return verify_ppe(equ, proof, crs)
