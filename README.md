# schnorr-sponge

Schnorr signatures and MuSig multi-signatures over the BN254 G1 curve.
Every challenge is derived with a Poseidon sponge (width 5, exponent 5,
8 full and 60 partial rounds), which keeps the scheme cheap to verify
inside arithmetic circuits.

The package is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Signing a message

Messages, private keys and challenges are elements of the BN254 scalar
field, given as Python integers (`schnorr_sponge.params.MODULUS` is the
field order). Public keys and nonce commitments are `G1Point` values.

```python
from schnorr_sponge.keypair import Keypair
from schnorr_sponge.signature import Signature
from schnorr_sponge.transcript import PoseidonTranscript

keypair = Keypair.generate()
message = 11082015

signature = Signature.sign(keypair, PoseidonTranscript(), message)

assert signature.verify(keypair.public_key, PoseidonTranscript(), message)
assert not signature.verify(keypair.public_key, PoseidonTranscript(), 666)
```

`Signature.sign` draws a random nonce, absorbs its commitment, the public
key and the message into the transcript, and squeezes the challenge.
`Signature.verify` absorbs the same three values and checks
`generator * s == public_key * challenge + r`. Give each call a fresh
transcript, since a transcript keeps its state between squeezes.

A `Signature` holds the commitment `r` and the response `s`. A `Keypair`
holds `private_key` (left out of its repr) and `public_key`.

## MuSig

Each participant makes a nonce and publishes its commitment. The public
keys are bound together by a keyset challenge and combined into one
aggregated key, each weighted by its own coefficient; the partial
signatures add up to one signature that verifies against that key.

```python
from schnorr_sponge.keypair import Keypair
from schnorr_sponge.musig import MuSig
from schnorr_sponge.params import MODULUS
from schnorr_sponge.transcript import PoseidonTranscript

message = 16

k1, k2 = Keypair.generate(), Keypair.generate()
r1, commitment1 = MuSig.create_nonce()
r2, commitment2 = MuSig.create_nonce()

pub_keys = [k1.public_key, k2.public_key]
keyset = MuSig.keyset_challenge(pub_keys)
agg_pub_key = MuSig.agg_pub_keys(pub_keys, keyset)
agg_r = commitment1 + commitment2

s1 = MuSig.sign(k1, message, keyset, agg_pub_key, agg_r, r1)
s2 = MuSig.sign(k2, message, keyset, agg_pub_key, agg_r, r2)

musig = MuSig(agg_r, (s1 + s2) % MODULUS)
assert musig.verify(message, PoseidonTranscript(), agg_pub_key, musig.agg_r, musig.agg_s)
```

`MuSig.keyset_challenge` depends on the order of the keys. `MuSig.verify`
checks the aggregated values it is passed, `generator * agg_s ==
agg_r + agg_pub_key * challenge`.

## Lower-level pieces

- `schnorr_sponge.curve.G1Point` is an immutable, hashable point of
  `y^2 = x^3 + 3`. It has `generator()`, `identity()` and `is_identity()`,
  supports `+`, `-`, unary `-` and multiplication by an integer scalar on
  either side (the scalar is reduced modulo the group order), and
  `compress()` gives 32 little-endian bytes of `x` with the infinity flag
  in bit 6 and the sign of `y` in bit 7 of the last byte. Building a point
  off the curve raises `ValueError`.
- `schnorr_sponge.transcript.PoseidonTranscript` implements the abstract
  `Transcript` with `absorb_point`, `absorb_scalar` and
  `squeeze_challenge`. A point is absorbed as its compressed encoding read
  back as a scalar without the flag bits; a point whose `x` coordinate is
  not below the scalar field order cannot be absorbed and raises
  `ValueError`. `poseidon_transcript()` returns a fresh one.
- `schnorr_sponge.sponge.PoseidonSponge` queues inputs with `update` and,
  on `squeeze`, adds them to its state five at a time (padding with zeros,
  or absorbing a single zero when nothing is queued), permutes after each
  chunk and returns the first state word.
- `schnorr_sponge.poseidon.permute` applies the permutation to five field
  elements; `apply_round_constants` and `apply_mds` are its round steps.
  Inputs of any other length raise `ValueError`.
- `schnorr_sponge.params` holds `MODULUS`, the round counts, `sbox` and
  its inverse `sbox_inv`, `hex_to_field`, `round_constants()`,
  `round_constants_count()` and `mds()`.

## Command line

```
schnorr-sponge [basic|musig|all]
```

`basic` signs and verifies the sample message 11082015 with a fresh
keypair; `musig` produces and verifies a two-party MuSig signature on the
message 16; `all`, the default, runs both. Each prints whether its
signature verifies, and the exit status is 0 only when all of them do.

## What it does not do

There is no encoding of keys or signatures for storage or transmission:
points can be compressed but not decompressed, and signatures have no byte
format. Nonce exchange and aggregation between MuSig participants are left
to the caller.

## Security

This code is meant for study and experiments. It makes no attempt at
constant-time arithmetic and has not been audited.