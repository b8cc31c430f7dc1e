"""
Replayable-CCA Encryption
=========================

A malleable RCCA-secure encryption of G1 vectors whose ciphertexts carry
publicly verifiable Groth–Sahai proofs of well-formedness, bound together
with a one-time LHSPS.

Keys:
-----
- EncryptKey: f, g ∈ G1; h_i = g^{α_i}; the CRS; the LHSPS verification key;
  σ_1 on v_1 = (f, g, 1, 1, ..., 1) and σ_2 on v_2 = (1, 1, 1, h_1, ..., h_n)
- DecryptKey: the EncryptKey plus the trapdoor α = (α_1, ..., α_n)

Ciphertext (n slots):
---------------------
    c = (f^φ, g^φ, m_1 · h_1^φ, ..., m_n · h_n^φ)

plus five proof bundles
- cpf_b:   selector relation for g
- cpf_ps:  selector relation for each c_1, ..., c_{n+1}
- cpf_v:   LHSPS validity on (c_0, c_1, 1, ..., 1)
- cpf_fgh: selector relation for each of f, g, h_1, ..., h_n
- cpf_w:   LHSPS validity on (f, g, 1, ..., 1)

The selector relation for a base x is e(x, ĝ^{-b}) · e(x^b, ĝ) = 1 with the
selector exponent b. Encryption always uses b = 1.

Decryption: m_i = c_{i+1} / c_1^{α_i}, only after every proof checks out.
"""

import logging

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1
from typing import List, Tuple

from . import lhsps
from .crs import keygen_crs, validate_crs
from .errors import DimensionMismatch, InternalEncodingFault, ProofRejected
from .groups import identity, neg, random_g1, random_scalar
from .proofs import create_proof_ayxb
from .verify import check_proof_ayxb

logger = logging.getLogger(__name__)


class Ciphertext:
    """
    An RCCA ciphertext: the vector c of length n+2 and its proof bundles.

    Invariants checked on every use:
    - len(cpf_ps) == len(c) - 1
    - len(cpf_fgh) == n + 2
    """

    def __init__(self, c: List[G1], cpf_b: dict, cpf_ps: List[dict], cpf_v: dict,
                 cpf_fgh: List[dict], cpf_w: dict):
        self.c = c
        self.cpf_b = cpf_b
        self.cpf_ps = cpf_ps
        self.cpf_v = cpf_v
        self.cpf_fgh = cpf_fgh
        self.cpf_w = cpf_w

    def __eq__(self, other):
        if not isinstance(other, Ciphertext):
            return NotImplemented
        return (self.c == other.c
                and self.cpf_b == other.cpf_b
                and self.cpf_ps == other.cpf_ps
                and self.cpf_v == other.cpf_v
                and self.cpf_fgh == other.cpf_fgh
                and self.cpf_w == other.cpf_w)

    def _check_all(self, enc_key: 'EncryptKey') -> bool:
        n = enc_key.n
        group = enc_key.group
        crs = enc_key.crs
        vk = enc_key.lhsps_vk
        g2 = crs['g2_gen']
        one = identity(group, G1)

        if len(self.c) != n + 2:
            return False
        if len(self.cpf_ps) != len(self.c) - 1:
            return False
        if len(self.cpf_fgh) != n + 2:
            return False

        # cpf_b: e(g, ĝ^{-b}) · e(g^b, ĝ) = 1
        if not check_proof_ayxb(crs, self.cpf_b, enc_key.g, g2):
            return False

        # cpf_ps: e(c_i, ĝ^{-b}) · e(c_i^b, ĝ) = 1 for i = 1..n+1
        for c_i, cpf in zip(self.c[1:], self.cpf_ps):
            if not check_proof_ayxb(crs, cpf, c_i, g2):
                return False

        # cpf_v: signature on v = (c_0, c_1, 1, ..., 1)
        v = [self.c[0], self.c[1]] + [one] * (n + 1)
        if not vk.check_proof(crs, self.cpf_v, v):
            return False

        # cpf_fgh: e(x, ĝ^{-b}) · e(x^b, ĝ) = 1 for x in (f, g, h_1, ..., h_n)
        fgh = [enc_key.f, enc_key.g] + list(enc_key.h)
        for x, cpf in zip(fgh, self.cpf_fgh):
            if not check_proof_ayxb(crs, cpf, x, g2):
                return False

        # cpf_w: signature on w = (f, g, 1, ..., 1)
        w = [enc_key.f, enc_key.g] + [one] * (n + 1)
        if not vk.check_proof(crs, self.cpf_w, w):
            return False

        return True

    def is_valid(self, enc_key: 'EncryptKey') -> bool:
        """
        True if every proof of the ciphertext checks out under enc_key.

        Never raises; anything malformed counts as invalid.
        """
        try:
            valid = self._check_all(enc_key)
        except Exception as e:
            logger.debug("Ciphertext malformed: %s", e)
            return False
        if not valid:
            logger.debug("Ciphertext failed proof checks")
        return valid

    def check_proofs(self, enc_key: 'EncryptKey') -> None:
        """
        Check all proofs of the ciphertext.

        This is the single gate in front of decryption and verification.
        All five checks must pass; the caller is not told which one failed.

        Raises
        ------
        ProofRejected
            If any check fails or the ciphertext is malformed
        """
        if not self.is_valid(enc_key):
            raise ProofRejected()


class EncryptKey:
    """The public encryption key."""

    def __init__(self, group: PairingGroup, f: G1, g: G1, h: List[G1], crs: dict,
                 lhsps_sig_v1: lhsps.Signature, lhsps_sig_v2: lhsps.Signature,
                 lhsps_vk: lhsps.VerifyKey):
        self.group = group
        self.f = f
        self.g = g
        self.h = h
        self.crs = crs
        self.lhsps_sig_v1 = lhsps_sig_v1
        self.lhsps_sig_v2 = lhsps_sig_v2
        self.lhsps_vk = lhsps_vk

    @property
    def n(self) -> int:
        return len(self.h)

    def encrypt(self, rng, m: List[G1]) -> Ciphertext:
        """
        Encrypt a message vector.

        Formula:
        --------
        c = (f^φ, g^φ, m_1 · h_1^φ, ..., m_n · h_n^φ),   φ ←$ Z_p

        The LHSPS signature on v = (c_0, c_1, 1, ..., 1) = v_1^φ is derived as
        σ_1^φ, and the one on w = (f, g, 1, ..., 1) = v_1^b as σ_1^b; σ_2 is
        not needed while b = 1.

        Parameters
        ----------
        rng : random.Random-like
            The injected randomness source
        m : List[G1]
            The plaintext (m_1, ..., m_n)

        Returns
        -------
        Ciphertext
            A fresh ciphertext that passes check_proofs()

        Raises
        ------
        DimensionMismatch
            If len(m) != n
        InternalEncodingFault
            If a freshly created sub-proof fails its self-check
        """
        if len(m) != self.n:
            raise DimensionMismatch(self.n, len(m))

        group = self.group
        crs = self.crs
        g2 = crs['g2_gen']
        phi = random_scalar(group, rng)

        c = [self.f ** phi, self.g ** phi]
        c.extend(m_i * (h_i ** phi) for m_i, h_i in zip(m, self.h))

        # Selector exponent; fixed to 1
        b = group.init(ZR, 1)
        one_minus_b = group.init(ZR, 1) - b
        g2_neg_b = g2 ** neg(group, b)

        # e(g, ĝ^{-b}) · e(g^b, ĝ) = 1
        cpf_b = create_proof_ayxb(rng, crs, self.g, g2_neg_b, self.g ** b, g2)

        # e(c_i, ĝ^{-b}) · e(c_i^b, ĝ) = 1
        cpf_ps = [create_proof_ayxb(rng, crs, c_i, g2_neg_b, c_i ** b, g2) for c_i in c[1:]]

        # v = (c_0^b, c_1^b, g^{1-b}, c_2^{1-b}, ..., c_{n+1}^{1-b}) = (c_0, c_1, 1, ..., 1)
        v = [c[0] ** b, c[1] ** b, self.g ** one_minus_b]
        v.extend(c_i ** one_minus_b for c_i in c[2:])
        sig_v = self.lhsps_vk.sign_derive([(phi, self.lhsps_sig_v1)])
        cpf_v = self.lhsps_vk.generate_proof(rng, crs, v, sig_v)

        # e(x, ĝ^{-b}) · e(x^b, ĝ) = 1 for x in (f, g, h_1, ..., h_n)
        fgh = [self.f, self.g] + list(self.h)
        cpf_fgh = [create_proof_ayxb(rng, crs, x, g2_neg_b, x ** b, g2) for x in fgh]

        # w = (f^b, g^b, g^{1-b}, h_1^{1-b}, ..., h_n^{1-b}) = (f, g, 1, ..., 1)
        w = [self.f ** b, self.g ** b, self.g ** one_minus_b]
        w.extend(h_i ** one_minus_b for h_i in self.h)
        sig_w = self.lhsps_vk.sign_derive([(b, self.lhsps_sig_v1)])
        cpf_w = self.lhsps_vk.generate_proof(rng, crs, w, sig_w)

        return Ciphertext(c, cpf_b, cpf_ps, cpf_v, cpf_fgh, cpf_w)

    def rerandomize(self, rng, ciphertext: Ciphertext) -> Ciphertext:
        """
        Re-randomize a ciphertext in place.

        Contract:
        - the result decrypts to the same plaintext
        - it is unlinkable to the input given only public data
        - all five proof bundles are freshly valid for the new c

        The components can be moved additively, c_0 · f^ν, c_1 · g^ν,
        c_{i+1} · h_i^ν, but the proofs then have to be refreshed with the
        selector b = 0 branch, which has no construction yet. Nothing is
        modified.
        """
        raise NotImplementedError("RCCA re-randomization requires proof refresh, which is not available")

    def verify(self, m: List[G1], ciphertext: Ciphertext) -> bool:
        """
        Check whether a ciphertext encrypts m.

        Contract: true iff check_proofs() passes and the ciphertext minus its
        pad equals m, decided through pairing identities that eliminate φ
        rather than by recovering φ.

        Returns False when the proofs are rejected. The plaintext-equality
        half has no construction from public data yet and raises.
        """
        if len(m) != self.n:
            raise DimensionMismatch(self.n, len(m))
        if not ciphertext.is_valid(self):
            return False
        raise NotImplementedError("plaintext-equality check for RCCA ciphertexts is not available")

    def adapt_proof(self, rng, ciphertext: Ciphertext):
        """
        Adapt an equality proof to a re-randomized ciphertext.

        Takes a commitment key, this key, a commitment, an equality proof, the
        ciphertext, a proof and randomness, and returns an equality proof.
        Depends on rerandomize() and is unavailable with it.
        """
        raise NotImplementedError("proof adaptation for RCCA ciphertexts is not available")


class DecryptKey:
    """The secret decryption key: the public key plus the trapdoor α."""

    def __init__(self, enc_key: EncryptKey, alpha: List[ZR]):
        # Needed to check ciphertext proofs before decrypting
        self.enc_key = enc_key
        self.alpha = alpha

    def decrypt(self, ciphertext: Ciphertext) -> List[G1]:
        """
        Decrypt a ciphertext.

        Formula:
        --------
        m_i = c_{i+1} / c_1^{α_i},   since c_1^{α_i} = g^{φ α_i} = h_i^φ

        Raises
        ------
        ProofRejected
            If the ciphertext does not pass check_proofs()
        """
        ciphertext.check_proofs(self.enc_key)

        c = ciphertext.c
        return [c[i + 2] * ((c[1] ** alpha_i) ** -1) for i, alpha_i in enumerate(self.alpha)]


def key_gen(rng, group: PairingGroup, n: int) -> Tuple[DecryptKey, EncryptKey]:
    """
    Generate an RCCA key pair for n-slot messages.

    Steps:
    ------
    1. Sample the CRS and f, g ←$ G1
    2. Sample α_i ←$ Z_p and set h_i = g^{α_i}
    3. Run LHSPS setup for dimension n+3 and sign
       v_1 = (f, g, 1, 1, ..., 1) and v_2 = (1, 1, 1, h_1, ..., h_n)
    4. Drop the LHSPS signing key

    The signing key exists only inside this call and is reachable from
    neither returned key.

    Parameters
    ----------
    rng : random.Random-like
        The injected randomness source
    group : PairingGroup
        The pairing group
    n : int
        Number of plaintext slots (n >= 1)

    Returns
    -------
    Tuple[DecryptKey, EncryptKey]
        (dk, ek)

    Examples
    --------
    >>> dk, ek = key_gen(rng, group, 2)
    >>> ct = ek.encrypt(rng, [P, Q])
    >>> dk.decrypt(ct) == [P, Q]
    True
    """
    if n < 1:
        raise ValueError(f"Number of slots must be positive, got n={n}")

    crs = keygen_crs(rng, group)
    if not validate_crs(crs):
        raise InternalEncodingFault("generated CRS is malformed")
    f = random_g1(group, rng)
    g = random_g1(group, rng)

    alpha = [random_scalar(group, rng) for _ in range(n)]
    h = [g ** alpha_i for alpha_i in alpha]

    one = identity(group, G1)
    v1 = [f, g] + [one] * (n + 1)
    v2 = [one] * 3 + h

    tk, lhsps_vk = lhsps.setup(rng, group, n + 3)
    lhsps_sig_v1 = tk.sign(v1)
    lhsps_sig_v2 = tk.sign(v2)
    del tk

    enc_key = EncryptKey(group, f, g, h, crs, lhsps_sig_v1, lhsps_sig_v2, lhsps_vk)
    logger.debug("Generated RCCA key pair for n=%d", n)
    return DecryptKey(enc_key, alpha), enc_key
