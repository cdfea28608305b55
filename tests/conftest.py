from pathlib import Path

import pytest

SAMPLES = Path(__file__).resolve().parent / "samples"

# RFC 8032 section 7.1, TEST 1
RFC8032_SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
# X25519 public key of sha512(RFC8032_SEED)[:32], computed with openssl
RFC8032_X25519_PUBLIC = bytes.fromhex("d85e07ec22b0ad881537c2f44d662d1a143cf830c57aca4305d85c7a90f6b62e")

# RFC 8032 section 7.1, TEST SHA(abc): public key with the x sign bit set
SIGNED_SEED = bytes.fromhex("833fe62409237b9d62ec77587520911e9a759cec1d19755b7da901b96dca3d42")
SIGNED_PUBLIC = bytes.fromhex("ec172b93ad5e563bf4932c70e1245034c35467ef2efd4d64ebf819683467e2bf")
SIGNED_X25519_PUBLIC = bytes.fromhex("d5948dca7a9ad7175303dc6881c34aa7881fb946ee34dfd8fab126ed6db8da69")

# RFC8032_PUBLIC plus the order-2 point (0, -1): on the curve, outside the prime-order subgroup
TORSION_PUBLIC = bytes.fromhex("16a567fe7d4ef5482ab4012c369bf8c5f11e8d0c2559dcda50fde59708f8aee5")
# its u-coordinate is the inverse of RFC8032_X25519_PUBLIC
TORSION_X25519_PUBLIC = bytes.fromhex("63302ca897ee83d8bc6b721ab7b89a0473b897c1442148ee4973aa82f6a4376e")

# y = 2 and y = 7 have no x on the curve
OFF_CURVE_POINTS = [(2).to_bytes(32, "little"), (7).to_bytes(32, "little")]


def _sample(name: str) -> bytes:
    return (SAMPLES / name).read_bytes()


# openssl genpkey equivalent, seed fixed to RFC8032_SEED
@pytest.fixture
def der_private() -> bytes:
    return _sample("test25519.der")


# openssl pkey -outform DER -pubout -in test25519.der -inform DER
@pytest.fixture
def der_public() -> bytes:
    return _sample("test25519_pub.der")


@pytest.fixture
def pem_private() -> bytes:
    return _sample("test25519.pem")


@pytest.fixture
def pem_public() -> bytes:
    return _sample("test25519_pub.pem")


# test25519_pub.pem followed by the SIGNED_PUBLIC key
@pytest.fixture
def pem_public_many() -> bytes:
    return _sample("test25519_pub_many.pem")


# an X25519 (1.3.101.110) public key
@pytest.fixture
def pem_x25519_public() -> bytes:
    return _sample("x25519_pub.pem")
