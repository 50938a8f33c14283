from .kasumi_constants import BLOCK_SIZE, KEY_SIZE, ROUNDS


class KasumiError(ValueError):
    pass


class InvalidKeySize(KasumiError):

    def __init__(self, length):
        self.length = length
        super().__init__(f"kasumi: invalid key size {length}")


class InvalidBlockLength(KasumiError):

    def __init__(self, length):
        self.length = length
        super().__init__(f"kasumi: invalid block length {length}, must be {BLOCK_SIZE} bytes")


class InvalidRoundCount(KasumiError):

    def __init__(self, rounds):
        self.rounds = rounds
        super().__init__(f"kasumi: unsupported round count {rounds}, only {ROUNDS} rounds are defined")


def _check_bytes_like(data, what):
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes, bytearray or memoryview")


def validate_key(key):

    _check_bytes_like(key, "Key")

    if len(key) != KEY_SIZE:
        raise InvalidKeySize(len(key))


def validate_block(block):

    _check_bytes_like(block, "Block")

    if len(block) != BLOCK_SIZE:
        raise InvalidBlockLength(len(block))


def validate_output_buffer(buffer):

    if isinstance(buffer, bytes) or not isinstance(buffer, (bytearray, memoryview)):
        raise TypeError("Output buffer must be a writable bytearray or memoryview")

    if isinstance(buffer, memoryview) and buffer.readonly:
        raise TypeError("Output buffer must be writable")

    if len(buffer) != BLOCK_SIZE:
        raise InvalidBlockLength(len(buffer))


def validate_rounds(rounds):

    if rounds != ROUNDS:
        raise InvalidRoundCount(rounds)
