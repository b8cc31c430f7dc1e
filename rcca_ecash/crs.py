"""
Common Reference String (CRS) Generation
=========================================

This module generates the CRS for Groth–Sahai proofs in the SXDH setting.

The CRS consists of two commitment keys on each side of the pairing:
- For G1:  u_1 = (P, a·P),      u_2 = t·u_1
- For G2:  v_1 = (P̂, a'·P̂),    v_2 = t'·v_1

(written multiplicatively below: a·P is P^a). This is the binding form:
commitments are perfectly binding and proofs perfectly sound. The
trapdoors a, t, a', t' are discarded after generation.

Every proof created against a CRS verifies only against that same CRS.
Verification under a different CRS fails with overwhelming probability.

Mathematical Notation:
----------------------
- u = [u_1, u_2] with u_k ∈ G1 × G1
- v = [v_1, v_2] with v_k ∈ G2 × G2
- g1_gen = P, g2_gen = P̂, gt_gen = e(P, P̂)
"""

from charm.toolbox.pairinggroup import PairingGroup, G1, G2

from .groups import random_g1, random_g2, random_scalar
from .utils import pair_elems


def keygen_crs(rng, group: PairingGroup) -> dict:
    """
    Generate a binding Groth–Sahai CRS.

    Parameters
    ----------
    rng : random.Random-like
        The injected randomness source
    group : PairingGroup
        The initialized pairing group from setup()

    Returns
    -------
    dict
        A dictionary containing:
        - 'group': The PairingGroup object
        - 'u': [u_1, u_2], each a pair (G1, G1)
        - 'v': [v_1, v_2], each a pair (G2, G2)
        - 'g1_gen': The generator P ∈ G1
        - 'g2_gen': The generator P̂ ∈ G2
        - 'gt_gen': e(P, P̂)

    Examples
    --------
    >>> import random
    >>> params = setup('MNT224')
    >>> crs = keygen_crs(random.Random(1), params['group'])
    >>> u1, u2 = crs['u']
    """
    p1 = random_g1(group, rng)
    p2 = random_g2(group, rng)

    a1 = random_scalar(group, rng)
    t1 = random_scalar(group, rng)
    q1 = p1 ** a1
    u = [(p1, q1), (p1 ** t1, q1 ** t1)]

    a2 = random_scalar(group, rng)
    t2 = random_scalar(group, rng)
    q2 = p2 ** a2
    v = [(p2, q2), (p2 ** t2, q2 ** t2)]

    return {
        'group': group,
        'u': u,
        'v': v,
        'g1_gen': p1,
        'g2_gen': p2,
        'gt_gen': pair_elems(p1, p2, group),
    }


def validate_crs(crs: dict) -> bool:
    """
    Validate that the CRS is well-formed.

    Checks:
    - u and v hold exactly two commitment keys each
    - every commitment key is a pair
    - the generators are present and not the identity

    Parameters
    ----------
    crs : dict
        The CRS dictionary from keygen_crs()

    Returns
    -------
    bool
        True if CRS is valid, False otherwise
    """
    for key in ('group', 'u', 'v', 'g1_gen', 'g2_gen', 'gt_gen'):
        if key not in crs:
            return False

    for side in ('u', 'v'):
        keys = crs[side]
        if len(keys) != 2:
            return False
        if any(len(k) != 2 for k in keys):
            return False

    group = crs['group']
    if crs['g1_gen'] == group.init(G1, 1) or crs['g2_gen'] == group.init(G2, 1):
        return False

    return True
