from schnorr_sponge.curve import G1Point
from schnorr_sponge.keypair import Keypair
from schnorr_sponge.musig import MuSig
from schnorr_sponge.params import MODULUS
from schnorr_sponge.transcript import PoseidonTranscript, poseidon_transcript


def _aggregate(message, count):
    keypairs = [Keypair.generate() for _ in range(count)]
    nonces = [MuSig.create_nonce() for _ in range(count)]
    pub_keys = [kp.public_key for kp in keypairs]
    keyset_challenge = MuSig.keyset_challenge(pub_keys)
    agg_pub_key = MuSig.agg_pub_keys(pub_keys, keyset_challenge)
    agg_r = G1Point.identity()
    for _, commitment in nonces:
        agg_r = agg_r + commitment
    agg_s = sum(
        MuSig.sign(kp, message, keyset_challenge, agg_pub_key, agg_r, nonce)
        for kp, (nonce, _) in zip(keypairs, nonces)
    ) % MODULUS
    return MuSig(agg_r, agg_s), agg_pub_key


def test_musig_signature_valid():
    message = 16
    k1 = Keypair.generate()
    r1, big_r1 = MuSig.create_nonce()
    k2 = Keypair.generate()
    r2, big_r2 = MuSig.create_nonce()

    pub_keys = [k1.public_key, k2.public_key]
    keyset_challenge = MuSig.keyset_challenge(pub_keys)
    agg_pub_keys = MuSig.agg_pub_keys(pub_keys, keyset_challenge)
    agg_r = big_r1 + big_r2

    s1 = MuSig.sign(k1, message, keyset_challenge, agg_pub_keys, agg_r, r1)
    s2 = MuSig.sign(k2, message, keyset_challenge, agg_pub_keys, agg_r, r2)
    agg_s = (s1 + s2) % MODULUS

    musig = MuSig(agg_r, agg_s)
    assert musig.verify(message, PoseidonTranscript(), agg_pub_keys, agg_r, agg_s)


def test_three_participants_verify():
    musig, agg_pub_key = _aggregate(16, 3)
    assert musig.verify(16, PoseidonTranscript(), agg_pub_key, musig.agg_r, musig.agg_s)


def test_wrong_message_fails():
    musig, agg_pub_key = _aggregate(16, 2)
    assert not musig.verify(666, PoseidonTranscript(), agg_pub_key, musig.agg_r, musig.agg_s)


def test_missing_partial_signature_fails():
    message = 16
    k1, k2 = Keypair.generate(), Keypair.generate()
    (r1, big_r1), (_, big_r2) = MuSig.create_nonce(), MuSig.create_nonce()
    pub_keys = [k1.public_key, k2.public_key]
    keyset_challenge = MuSig.keyset_challenge(pub_keys)
    agg_pub_key = MuSig.agg_pub_keys(pub_keys, keyset_challenge)
    agg_r = big_r1 + big_r2
    s1 = MuSig.sign(k1, message, keyset_challenge, agg_pub_key, agg_r, r1)
    musig = MuSig(agg_r, s1)
    assert not musig.verify(message, PoseidonTranscript(), agg_pub_key, agg_r, s1)


def test_nonce_commitment_matches_nonce():
    nonce, commitment = MuSig.create_nonce()
    assert 0 <= nonce < MODULUS
    assert commitment == G1Point.generator() * nonce


def test_keyset_challenge_is_deterministic_and_order_sensitive():
    a = Keypair.generate().public_key
    b = Keypair.generate().public_key
    assert MuSig.keyset_challenge([a, b]) == MuSig.keyset_challenge([a, b])
    assert MuSig.keyset_challenge([a, b]) != MuSig.keyset_challenge([b, a])


def test_empty_keyset():
    assert MuSig.keyset_challenge([]) == poseidon_transcript().squeeze_challenge()
    assert MuSig.agg_pub_keys([], 5).is_identity()


def test_aggregate_key_depends_on_keyset_challenge():
    keys = [Keypair.generate().public_key for _ in range(2)]
    challenge = MuSig.keyset_challenge(keys)
    assert MuSig.agg_pub_keys(keys, challenge) == MuSig.agg_pub_keys(keys, challenge)
    assert MuSig.agg_pub_keys(keys, challenge) != MuSig.agg_pub_keys(keys, challenge + 1)