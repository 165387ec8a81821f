"""Tests for the ECDSA signature value type."""

import pytest

from compact_keys.ecc_compact import Keypair, Signature
from compact_keys.ecc_compact.point import P256_N
from compact_keys.ecc_compact.signature import RAW_SIGNATURE_LENGTH
from compact_keys.exceptions import SignatureDecodeError


class TestSignature:
    """Tests for DER and fixed-width conversions."""

    def test_der_format(self, keypair: Keypair) -> None:
        """Signatures are DER SEQUENCEs that re-encode identically."""
        der = keypair.sign(b"test")

        assert der[0] == 0x30
        assert Signature.from_der(der).to_der() == der

    def test_raw_form(self, keypair: Keypair) -> None:
        """The raw form is r || s, 32 bytes each."""
        signature = Signature.from_der(keypair.sign(b"test"))
        raw = signature.to_bytes()

        assert len(raw) == RAW_SIGNATURE_LENGTH
        assert int.from_bytes(raw[:32], "big") == signature.r
        assert int.from_bytes(raw[32:], "big") == signature.s
        assert Signature.from_bytes(raw) == signature

    def test_raw_converts_to_verifiable_der(self, keypair: Keypair) -> None:
        """A raw signature converted to DER still verifies."""
        raw = Signature.from_der(keypair.sign(b"test")).to_bytes()
        keypair.public_key.verify(b"test", Signature.from_bytes(raw).to_der())

    @pytest.mark.parametrize("length", [0, 63, 65, 72])
    def test_raw_wrong_length(self, length: int) -> None:
        """The raw form is exactly 64 bytes."""
        with pytest.raises(SignatureDecodeError, match="Expected 64 signature bytes"):
            Signature.from_bytes(b"\x01" * length)

    @pytest.mark.parametrize(("r", "s"), [(0, 1), (1, 0), (P256_N, 1), (1, P256_N)])
    def test_components_out_of_range(self, r: int, s: int) -> None:
        """r and s must lie in [1, n-1]."""
        with pytest.raises(SignatureDecodeError, match="out of range"):
            Signature(r=r, s=s)

    def test_malformed_der(self) -> None:
        """Bytes that are not DER fail to decode."""
        with pytest.raises(SignatureDecodeError, match="malformed DER"):
            Signature.from_der(b"not a signature")
