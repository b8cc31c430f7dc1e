"""
Test Suite for the Groth–Sahai Proof Engine
===========================================

Each equation shape is tested with both positive (should pass) and negative
(should fail) cases:
1. Proofs created for satisfied equations verify
2. Proofs are rejected for wrong constants, wrong targets, a different CRS,
   wrong equation tags and malformed proof structures
3. Creating a proof for unsatisfied witnesses is an internal fault
"""

import random

import pytest
from charm.toolbox.pairinggroup import ZR, G1, G2, GT, pair

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rcca_ecash.groups import setup, neg, random_g1, random_g2, random_scalar
from rcca_ecash.crs import keygen_crs
from rcca_ecash.errors import InternalEncodingFault, ProofRejected, RCCAError
from rcca_ecash.statement import PAIRING_PRODUCT, make_ppe
from rcca_ecash.proofs import commit_and_prove, create_proof_ayxb, create_proof_xbxb_t
from rcca_ecash.verify import check_proof_ayxb, check_proof_xbxb_t, verify_ppe


# Fixtures for common setup
@pytest.fixture(scope="module")
def pairing_params():
    """Initialize pairing group."""
    return setup('MNT224')


@pytest.fixture(scope="module")
def group(pairing_params):
    return pairing_params['group']


@pytest.fixture(scope="module")
def rng():
    return random.Random(20240611)


@pytest.fixture(scope="module")
def crs(group, rng):
    return keygen_crs(rng, group)


@pytest.fixture(scope="module")
def other_crs(group, rng):
    return keygen_crs(rng, group)


@pytest.fixture(scope="module")
def ayxb_case(group, rng, crs):
    """
    A satisfied instance e(a, ĝ^{-s}) · e(a^s, ĝ) = 1 and its proof.
    """
    a = random_g1(group, rng)
    s = random_scalar(group, rng)
    b = crs['g2_gen']
    y = b ** neg(group, s)
    x = a ** s
    proof = create_proof_ayxb(rng, crs, a, y, x, b)
    return {'a': a, 'b': b, 'proof': proof}


@pytest.fixture(scope="module")
def xbxb_case(group, rng, crs):
    """
    A satisfied instance e(x1, b1) · e(x2, b2) = t and its proof.
    """
    x1 = random_g1(group, rng)
    x2 = random_g1(group, rng)
    b1 = random_g2(group, rng)
    b2 = random_g2(group, rng)
    target = pair(x1, b1) * pair(x2, b2)
    proof = create_proof_xbxb_t(rng, crs, x1, b1, x2, b2, target)
    return {'b1': b1, 'b2': b2, 'target': target, 'proof': proof}


# ============================================================================
# Shape e(a, Y) · e(X, b) = 1
# ============================================================================

def test_ayxb_positive(crs, ayxb_case):
    assert check_proof_ayxb(crs, ayxb_case['proof'], ayxb_case['a'], ayxb_case['b'])


def test_ayxb_negative_wrong_constant(group, rng, crs, ayxb_case):
    other_a = random_g1(group, rng)
    assert not check_proof_ayxb(crs, ayxb_case['proof'], other_a, ayxb_case['b'])


def test_ayxb_negative_other_crs(other_crs, ayxb_case):
    """A proof only verifies under the CRS it was created with."""
    assert not check_proof_ayxb(other_crs, ayxb_case['proof'], ayxb_case['a'], ayxb_case['b'])


def test_ayxb_proof_hides_witness_layout(ayxb_case):
    proof = ayxb_case['proof']
    assert len(proof['xcoms']) == 2
    assert len(proof['ycoms']) == 1
    assert proof['equ_proofs'][0]['equ_type'] == PAIRING_PRODUCT


def test_ayxb_unsatisfied_witness_is_internal_fault(group, rng, crs):
    a = random_g1(group, rng)
    b = crs['g2_gen']
    y = b ** neg(group, random_scalar(group, rng))
    x = random_g1(group, rng)
    with pytest.raises(InternalEncodingFault):
        create_proof_ayxb(rng, crs, a, y, x, b)


def test_internal_fault_is_not_a_scheme_error():
    """`except RCCAError` must not swallow encoding bugs."""
    assert issubclass(InternalEncodingFault, AssertionError)
    assert not issubclass(InternalEncodingFault, RCCAError)
    assert issubclass(ProofRejected, RCCAError)


def test_ayxb_verification_is_deterministic(crs, ayxb_case):
    results = [check_proof_ayxb(crs, ayxb_case['proof'], ayxb_case['a'], ayxb_case['b'])
               for _ in range(3)]
    assert results == [True, True, True]


def test_ayxb_proofs_are_randomized(group, rng, crs):
    a = random_g1(group, rng)
    s = random_scalar(group, rng)
    b = crs['g2_gen']
    p1 = create_proof_ayxb(rng, crs, a, b ** neg(group, s), a ** s, b)
    p2 = create_proof_ayxb(rng, crs, a, b ** neg(group, s), a ** s, b)
    assert p1['xcoms'] != p2['xcoms']


# ============================================================================
# Shape e(X1, b1) · e(X2, b2) = t
# ============================================================================

def test_xbxb_t_positive(crs, xbxb_case):
    assert check_proof_xbxb_t(crs, xbxb_case['proof'], xbxb_case['b1'], xbxb_case['b2'], xbxb_case['target'])


def test_xbxb_t_negative_wrong_target(group, rng, crs, xbxb_case):
    wrong = xbxb_case['target'] * pair(random_g1(group, rng), random_g2(group, rng))
    assert not check_proof_xbxb_t(crs, xbxb_case['proof'], xbxb_case['b1'], xbxb_case['b2'], wrong)


def test_xbxb_t_negative_swapped_constants(crs, xbxb_case):
    assert not check_proof_xbxb_t(crs, xbxb_case['proof'], xbxb_case['b2'], xbxb_case['b1'], xbxb_case['target'])


def test_xbxb_t_negative_other_crs(other_crs, xbxb_case):
    assert not check_proof_xbxb_t(other_crs, xbxb_case['proof'], xbxb_case['b1'], xbxb_case['b2'],
                                  xbxb_case['target'])


def test_xbxb_t_verification_is_deterministic(crs, xbxb_case):
    first = check_proof_xbxb_t(crs, xbxb_case['proof'], xbxb_case['b1'], xbxb_case['b2'], xbxb_case['target'])
    second = check_proof_xbxb_t(crs, xbxb_case['proof'], xbxb_case['b1'], xbxb_case['b2'], xbxb_case['target'])
    assert first is second is True


def test_xbxb_t_proof_does_not_fit_ayxb_shape(crs, xbxb_case, ayxb_case):
    assert not check_proof_ayxb(crs, xbxb_case['proof'], ayxb_case['a'], ayxb_case['b'])


# ============================================================================
# General equations (non-zero γ)
# ============================================================================

def test_quadratic_term_positive(group, rng, crs):
    """
    e(X, Y)^γ · e(a, Y) = t with both X and Y hidden.
    """
    x = random_g1(group, rng)
    y = random_g2(group, rng)
    a = random_g1(group, rng)
    gamma = random_scalar(group, rng)
    target = (pair(x, y) ** gamma) * pair(a, y)

    equ = make_ppe([a], [group.init(G2, 1)], [[gamma]], target)
    proof = commit_and_prove(rng, equ, [x], [y], crs)
    assert verify_ppe(equ, proof, crs)


def test_quadratic_term_negative(group, rng, crs):
    x = random_g1(group, rng)
    y = random_g2(group, rng)
    gamma = random_scalar(group, rng)
    target = pair(x, y) ** gamma

    equ = make_ppe([group.init(G1, 1)], [group.init(G2, 1)], [[gamma]], target)
    proof = commit_and_prove(rng, equ, [x], [y], crs)

    wrong = make_ppe([group.init(G1, 1)], [group.init(G2, 1)], [[gamma + group.init(ZR, 1)]], target)
    assert not verify_ppe(wrong, proof, crs)


def test_make_ppe_rejects_bad_gamma(group):
    with pytest.raises(ValueError):
        make_ppe([group.init(G1, 1)], [group.init(G2, 1)], [[1], [1]], group.init(GT, 1))


def test_commit_and_prove_rejects_witness_count(group, rng, crs):
    equ = make_ppe([group.init(G1, 1)], [group.init(G2, 1)], [[group.init(ZR, 0)]], group.init(GT, 1))
    with pytest.raises(ValueError):
        commit_and_prove(rng, equ, [], [group.init(G2, 1)], crs)


# ============================================================================
# Malformed proofs are rejected, never raised
# ============================================================================

def test_reject_wrong_equation_tag(crs, ayxb_case):
    proof = dict(ayxb_case['proof'])
    proof['equ_proofs'] = [dict(proof['equ_proofs'][0], equ_type='Quadratic')]
    assert not check_proof_ayxb(crs, proof, ayxb_case['a'], ayxb_case['b'])


def test_reject_empty_equation_list(crs, ayxb_case):
    proof = dict(ayxb_case['proof'], equ_proofs=[])
    assert not check_proof_ayxb(crs, proof, ayxb_case['a'], ayxb_case['b'])


def test_reject_truncated_commitments(crs, ayxb_case):
    proof = dict(ayxb_case['proof'])
    proof['xcoms'] = proof['xcoms'][:1]
    assert not check_proof_ayxb(crs, proof, ayxb_case['a'], ayxb_case['b'])


@pytest.mark.parametrize("bad", [None, {}, [], "proof", {'equ_proofs': None}])
def test_reject_non_proof_values(crs, ayxb_case, bad):
    assert not check_proof_ayxb(crs, bad, ayxb_case['a'], ayxb_case['b'])
