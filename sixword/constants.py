# Block geometry
BLOCK_SIZE = 8          # bytes per encoded block (64 bits)
SENTENCE_LENGTH = 6     # words per block

WORD_BITS = 11
WORD_MASK = (1 << WORD_BITS) - 1        # 0x7FF
TAIL_DATA_BITS = 9                      # data bits carried by the sixth word
TAIL_DATA_MASK = (1 << TAIL_DATA_BITS) - 1  # 0x1FF
PARITY_BITS = 2
PARITY_MASK = (1 << PARITY_BITS) - 1    # 0b11

# Dictionary
DICTIONARY_SIZE = 1 << WORD_BITS        # 2048
MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 4

# Padding marker ('0' is never emitted)
PADDING_DIGITS = "1234567"
MAX_PADDING = BLOCK_SIZE - 1

# Sequence driver
MIN_WORDS_PER_GROUP = 1
MAX_WORDS_PER_GROUP = SENTENCE_LENGTH

# CLI
HEX_STYLES = ("lower", "lowercase", "finger", "fingerprint", "colon", "colons")
HEX_COLUMNS = 80
HEX_DIGITS_PER_BLOCK = BLOCK_SIZE * 2
READ_SIZE = 2048

EXIT_CLI_ERROR = 2
EXIT_INVALID_PARITY = 3
EXIT_UNKNOWN_WORD = 4
EXIT_INVALID_WORD = 5
EXIT_INPUT_ERROR = 10
