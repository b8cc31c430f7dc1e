"""
One-Time Linearly Homomorphic Structure-Preserving Signatures
=============================================================

Signatures on vectors of G1 elements whose validity can be proven with the
Groth–Sahai engine without revealing the signature.

Keys:
-----
- SigningKey: (x_i, y_i) ∈ Z_p² for i ∈ [n]
- VerifyKey:  ĝ_z, ĝ_r ∈ G2 and pk_i = ĝ_z^{x_i} · ĝ_r^{y_i}

Algorithms:
-----------
- Sign:       z = ∏ m_i^{x_i},  r = ∏ m_i^{y_i}
- Verify:     e(z, ĝ_z) · e(r, ĝ_r) = ∏ e(m_i, pk_i),  m ≠ (1, ..., 1)
- SignDerive: (∏ z_k^{w_k}, ∏ r_k^{w_k}) is a signature on ∏ m_k^{w_k}

A key is "one-time" in the sense that it is only secure as a derivation
oracle over the span of the vectors it signed. Do not reuse a key for vectors
of another dimension or purpose.
"""

import logging

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT
from typing import List, Tuple

from .errors import DimensionMismatch
from .groups import random_g2, random_scalar
from .proofs import create_proof_xbxb_t
from .utils import is_identity, multiexp, pair_elems, pair_prod
from .verify import check_proof_xbxb_t

logger = logging.getLogger(__name__)


class Signature:
    """A signature (z, r) ∈ G1 × G1."""

    def __init__(self, z: G1, r: G1):
        self.z = z
        self.r = r

    def __eq__(self, other):
        if not isinstance(other, Signature):
            return NotImplemented
        return self.z == other.z and self.r == other.r

    def __repr__(self):
        return f"Signature(z={self.z}, r={self.r})"


class SigningKey:
    """
    The secret signing key. Held only by the signer and never serialized.
    """

    def __init__(self, group: PairingGroup, xy: List[Tuple[ZR, ZR]]):
        self.group = group
        self.xy = xy

    @property
    def n(self) -> int:
        return len(self.xy)

    def sign(self, m: List[G1]) -> Signature:
        """
        Sign a message vector.

        Formula:
        --------
        z = ∏_{i=1}^{n} m_i^{x_i},   r = ∏_{i=1}^{n} m_i^{y_i}

        Parameters
        ----------
        m : List[G1]
            The message (m_1, ..., m_n)

        Returns
        -------
        Signature
            The deterministic signature (z, r)

        Raises
        ------
        DimensionMismatch
            If len(m) differs from the dimension fixed at setup
        """
        if len(m) != self.n:
            raise DimensionMismatch(self.n, len(m))

        z = multiexp(m, [x for x, _ in self.xy], self.group, G1)
        r = multiexp(m, [y for _, y in self.xy], self.group, G1)
        return Signature(z, r)


class VerifyKey:
    """The public verification key (ĝ_z, ĝ_r, pk_1..pk_n)."""

    def __init__(self, group: PairingGroup, gz: G2, gr: G2, pk: List[G2]):
        self.group = group
        self.gz = gz
        self.gr = gr
        self.pk = pk

    @property
    def n(self) -> int:
        return len(self.pk)

    def _message_target(self, m: List[G1]) -> GT:
        # ∏ e(m_i, pk_i)
        return pair_prod(m, self.pk, self.group)

    def _is_trivial(self, m: List[G1]) -> bool:
        return all(is_identity(m_i, self.group, G1) for m_i in m)

    def verify(self, m: List[G1], sig: Signature) -> bool:
        """
        Verify a signature on a message vector.

        Formula:
        --------
        e(z, ĝ_z) · e(r, ĝ_r) = ∏_{i=1}^{n} e(m_i, pk_i)

        The all-identity message is rejected outright, and so is a malformed
        signature or message.

        Raises
        ------
        DimensionMismatch
            If len(m) differs from the dimension fixed at setup
        """
        if len(m) != self.n:
            raise DimensionMismatch(self.n, len(m))

        try:
            if self._is_trivial(m):
                return False
            lhs = pair_elems(sig.z, self.gz, self.group) * pair_elems(sig.r, self.gr, self.group)
            return lhs == self._message_target(m)
        except Exception as e:
            logger.debug("LHSPS signature rejected: malformed input (%s)", e)
            return False

    def sign_derive(self, weighted: List[Tuple[ZR, Signature]]) -> Signature:
        """
        Derive a signature on a linear combination of signed messages.

        Formula:
        --------
        z' = ∏_k z_k^{w_k},   r' = ∏_k r_k^{w_k}

        which is a valid signature on ∏_k m_k^{w_k} (component-wise) whenever
        each (z_k, r_k) is valid on m_k. No signing key is involved.

        Parameters
        ----------
        weighted : List[Tuple[ZR, Signature]]
            Pairs (w_k, σ_k)

        Returns
        -------
        Signature
            The derived signature
        """
        if len(weighted) == 0:
            raise ValueError("sign_derive needs at least one weighted signature")

        weights = [w for w, _ in weighted]
        z = multiexp([sig.z for _, sig in weighted], weights, self.group, G1)
        r = multiexp([sig.r for _, sig in weighted], weights, self.group, G1)
        return Signature(z, r)

    def generate_proof(self, rng, crs: dict, m: List[G1], sig: Signature) -> dict:
        """
        Prove that a hidden signature is valid on m.

        The verification equation is encoded as the xbxb_t shape with witnesses
        (z, r), constants (ĝ_z, ĝ_r) and target ∏ e(m_i, pk_i).

        Parameters
        ----------
        rng : random.Random-like
            The injected randomness source
        crs : dict
            The CRS
        m : List[G1]
            The signed message
        sig : Signature
            A valid signature on m

        Returns
        -------
        dict
            A proof checkable with check_proof(crs, proof, m)
        """
        if len(m) != self.n:
            raise DimensionMismatch(self.n, len(m))

        target = self._message_target(m)
        return create_proof_xbxb_t(rng, crs, sig.z, self.gz, sig.r, self.gr, target)

    def check_proof(self, crs: dict, proof: dict, m: List[G1]) -> bool:
        """
        Check a proof from generate_proof() against message m.

        Returns False (never raises) on dimension mismatch, on the trivial
        message and on malformed proofs.
        """
        if len(m) != self.n:
            logger.debug("LHSPS proof rejected: message length %d != n=%d", len(m), self.n)
            return False

        try:
            if self._is_trivial(m):
                return False
            target = self._message_target(m)
        except Exception as e:
            logger.debug("LHSPS proof rejected: malformed message (%s)", e)
            return False

        return check_proof_xbxb_t(crs, proof, self.gz, self.gr, target)


def setup(rng, group: PairingGroup, n: int) -> Tuple[SigningKey, VerifyKey]:
    """
    Generate a key pair for messages of dimension n.

    Formula:
    --------
    (x_i, y_i) ←$ Z_p²,   ĝ_z, ĝ_r ←$ G2,   pk_i = ĝ_z^{x_i} · ĝ_r^{y_i}

    Parameters
    ----------
    rng : random.Random-like
        The injected randomness source
    group : PairingGroup
        The pairing group
    n : int
        Message dimension

    Returns
    -------
    Tuple[SigningKey, VerifyKey]
        (sk, pk)

    Examples
    --------
    >>> sk, vk = setup(random.Random(1), group, 5)
    >>> sig = sk.sign(m)
    >>> vk.verify(m, sig)
    True
    """
    if n < 1:
        raise ValueError(f"Message dimension must be positive, got n={n}")

    xy = [(random_scalar(group, rng), random_scalar(group, rng)) for _ in range(n)]
    gz = random_g2(group, rng)
    gr = random_g2(group, rng)
    pk = [(gz ** x) * (gr ** y) for x, y in xy]

    return SigningKey(group, xy), VerifyKey(group, gz, gr, pk)
