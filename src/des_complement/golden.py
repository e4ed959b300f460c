"""Golden DES primitive using PyCryptodome, plus known-answer vectors."""

from Crypto.Cipher import DES

from .errors import CipherPrimitiveError
from .interfaces import BlockCipher


class DESCipher(BlockCipher):
    """DES backed by PyCryptodome.

    A new cipher object is created for every call; PyCryptodome CBC
    objects carry chaining state and cannot be reused across messages.
    """

    name = "pycryptodome_des"

    def encrypt_cbc(self, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        try:
            cipher = DES.new(key, DES.MODE_CBC, iv=iv)
            return cipher.encrypt(plaintext)
        except (ValueError, TypeError) as e:
            raise CipherPrimitiveError(f"DES-CBC encryption failed: {e}") from e

    def encrypt_ecb(self, key: bytes, plaintext: bytes) -> bytes:
        try:
            cipher = DES.new(key, DES.MODE_ECB)
            return cipher.encrypt(plaintext)
        except (ValueError, TypeError) as e:
            raise CipherPrimitiveError(f"DES-ECB encryption failed: {e}") from e


# Single-block DES known-answer vectors. With a zero IV, one-block CBC
# equals ECB, so these hold for both modes.
DES_TEST_VECTORS = [
    # Worked example from the DES standard walkthroughs
    {
        "key": bytes.fromhex("133457799BBCDFF1"),
        "plaintext": bytes.fromhex("0123456789ABCDEF"),
        "ciphertext": bytes.fromhex("85E813540F0AB405"),
    },
    {
        "key": bytes.fromhex("0000000000000000"),
        "plaintext": bytes.fromhex("0000000000000000"),
        "ciphertext": bytes.fromhex("8CA64DE9C1B123A7"),
    },
    {
        "key": bytes.fromhex("FFFFFFFFFFFFFFFF"),
        "plaintext": bytes.fromhex("FFFFFFFFFFFFFFFF"),
        "ciphertext": bytes.fromhex("7359B2163E4EDC58"),
    },
    {
        "key": bytes.fromhex("0E329232EA6D0D73"),
        "plaintext": bytes.fromhex("8787878787878787"),
        "ciphertext": bytes.fromhex("0000000000000000"),
    },
    # FIPS 81 Appendix B, first block of "Now is the time for all "
    {
        "key": bytes.fromhex("0123456789ABCDEF"),
        "plaintext": bytes.fromhex("4E6F772069732074"),
        "ciphertext": bytes.fromhex("3FA40E8A984D4815"),
    },
]

# FIPS 81 Appendix B, ECB over three blocks ("Now is the time for all ")
FIPS_81_ECB_VECTOR = {
    "key": bytes.fromhex("0123456789ABCDEF"),
    "plaintext": bytes.fromhex("4E6F77206973207468652074696D6520666F7220616C6C20"),
    "ciphertext": bytes.fromhex("3FA40E8A984D48156A271787AB8883F9893D51EC4B563B53"),
}
