"""
Utility Functions
=================

Group helpers shared by the proof engine, the signature scheme and the
encryption scheme.

Key Operations:
- Multi-exponentiation: Compute ∏ g_i^{e_i}
- Pairing products: Compute ∏ e(g_i, ĝ_i)
- Identity tests on G1 / G2 / GT

According to charm-crypto documentation:
- Group operations use * for multiplication, ** for exponentiation
- Inverse is computed as elem ** -1
- Pairing is computed as pair(g1_elem, g2_elem)
"""

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair
from typing import List


def multiexp(bases: List, exponents: List[ZR], group: PairingGroup, kind=G1):
    """
    Compute multi-exponentiation: ∏ bases[i]^{exponents[i]}.

    Formula:
    --------
    result = ∏_{i=0}^{len(bases)-1} bases[i]^{exponents[i]}

    Parameters
    ----------
    bases : List[G1] or List[G2]
        List of base elements
    exponents : List[ZR]
        List of exponents in Z_p
    group : PairingGroup
        The pairing group
    kind : G1 or G2
        The group the bases live in (selects the identity for empty input)

    Returns
    -------
    G1 or G2
        The product ∏ bases[i]^{exponents[i]}
    """
    if len(bases) != len(exponents):
        raise ValueError(f"bases and exponents must have same length: {len(bases)} != {len(exponents)}")

    result = group.init(kind, 1)
    for base, exp in zip(bases, exponents):
        result *= base ** exp

    return result


def is_identity(elem, group: PairingGroup, kind) -> bool:
    """True if elem is the identity of the given group."""
    return elem == group.init(kind, 1)


def pair_elems(a: G1, b: G2, group: PairingGroup) -> GT:
    """
    Compute e(a, b), mapping pairings with an identity argument to 1_GT.

    Commitment pairs and embedded constants carry identity components, so
    this path is hit on every verification.
    """
    if is_identity(a, group, G1) or is_identity(b, group, G2):
        return group.init(GT, 1)
    return pair(a, b)


def pair_prod(g1_elems: List[G1], g2_elems: List[G2], group: PairingGroup) -> GT:
    """
    Compute product of pairings: ∏ e(g1_elems[i], g2_elems[i]).

    Notes
    -----
    - If lists are empty, returns the identity element 1_GT
    - g1_elems and g2_elems must have the same length

    Examples
    --------
    >>> result = pair_prod([g1, g2], [g_hat1, g_hat2], group)
    >>> # Equivalent to: e(g1, g_hat1) * e(g2, g_hat2)
    """
    if len(g1_elems) != len(g2_elems):
        raise ValueError(f"g1_elems and g2_elems must have same length: {len(g1_elems)} != {len(g2_elems)}")

    result = group.init(GT, 1)
    for g1, g2 in zip(g1_elems, g2_elems):
        result *= pair_elems(g1, g2, group)

    return result
