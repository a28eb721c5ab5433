from __future__ import annotations

import sys
import argparse

from typing import BinaryIO, Iterator, List, Optional

from sixword import __version__
from sixword import hexutil
from sixword.constants import (
    BLOCK_SIZE,
    EXIT_CLI_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_INVALID_PARITY,
    EXIT_INVALID_WORD,
    EXIT_UNKNOWN_WORD,
    HEX_COLUMNS,
    HEX_DIGITS_PER_BLOCK,
    HEX_STYLES,
    READ_SIZE,
    SENTENCE_LENGTH,
)
from sixword.decoding import decode
from sixword.encoding import encode_iter
from sixword.errors import (
    CLIError,
    InputError,
    InvalidParity,
    InvalidWord,
    UnknownWord,
)


_STYLE_NAMES = {
    "lower": "lower",
    "lowercase": "lower",
    "finger": "fingerprint",
    "fingerprint": "fingerprint",
    "colon": "colon",
    "colons": "colon",
}


def _normalize_hex_style(hex_style: Optional[str]) -> Optional[str]:
    if hex_style is None:
        return None
    try:
        return _STYLE_NAMES[hex_style]
    except KeyError:
        raise CLIError(f"unknown hex style: {hex_style!r} (choose from {', '.join(HEX_STYLES)})") from None


def _open_input(filename: str) -> BinaryIO:
    if filename == "-":
        return sys.stdin.buffer
    return open(filename, "rb")


# -------- Input readers --------

def _iter_blocks(stream: BinaryIO) -> Iterator[bytes]:
    """Yield raw input 8 bytes at a time; only the final chunk may be short."""
    while True:
        buf = stream.read(BLOCK_SIZE)
        if not buf:
            return
        yield buf


def _iter_hex_blocks(stream: BinaryIO) -> Iterator[bytes]:
    """Yield hex input decoded to bytes, one block (16 hex digits) at a time.

    Separators (whitespace, ':', '.', '-') are skipped anywhere in the input.
    """
    digits: List[str] = []
    while True:
        data = stream.read(READ_SIZE)
        if not data:
            break
        for ch in data.decode("latin-1"):
            if hexutil.valid_hex(ch):
                digits.append(ch)
                if len(digits) == HEX_DIGITS_PER_BLOCK:
                    yield _decode_hex_digits(digits)
                    digits.clear()
            elif hexutil.strip_char(ch):
                continue
            else:
                raise CLIError(f"invalid hex character: {ch!r}")
    if digits:
        yield _decode_hex_digits(digits)


def _decode_hex_digits(digits: List[str]) -> bytes:
    try:
        return hexutil.decode("".join(digits), strip_chars=False)
    except ValueError as exc:
        raise CLIError(str(exc)) from exc


def _iter_word_groups(stream: BinaryIO) -> Iterator[List[str]]:
    """Yield whitespace separated words six at a time.

    The last group may hold fewer than six words; decoding it reports the
    format error. Words split across read boundaries are joined back up.
    """
    group: List[str] = []
    pending = b""
    while True:
        data = stream.read(READ_SIZE)
        if not data:
            break
        data = pending + data
        tokens = data.split()
        pending = b""
        if tokens and not data[-1:].isspace():
            pending = tokens.pop()
        for tok in tokens:
            group.append(tok.decode("utf-8", errors="replace"))
            if len(group) == SENTENCE_LENGTH:
                yield group
                group = []
    if pending:
        group.append(pending.decode("utf-8", errors="replace"))
    if group:
        yield group


# -------- Output --------

def _write_hex(out: BinaryIO, data: bytes, chunk_index: int, hex_style: str, cols: int = HEX_COLUMNS) -> None:
    """Write one decoded block in the requested hex style."""
    if hex_style == "lower":
        text = hexutil.encode(data)
    elif hex_style == "fingerprint":
        # each block renders as "XXXX XXXX XXXX XXXX"; break lines every cols/5 blocks
        newlines_every = cols // 5
        sep = ""
        if chunk_index != 0:
            sep = "\n" if chunk_index % newlines_every == 0 else " "
        text = sep + hexutil.encode_fingerprint(data)
    else:
        text = ("" if chunk_index == 0 else ":") + hexutil.encode_colons(data)
    out.write(text.encode("ascii"))


# -------- Commands (exposed callables) --------

def cmd_encode(
    filename: str = "-",
    *,
    pad: bool = True,
    hex_style: Optional[str] = None,
    out: Optional[BinaryIO] = None,
) -> int:
    """Encode a file (or stdin) and print one sentence per line.

    Args:
        filename: Input path, or "-" for stdin.
        pad: Allow a short final block using the padding extension.
        hex_style: Treat input as hex text instead of raw bytes.
        out: Binary output stream (defaults to stdout).

    Returns:
        The number of sentences written.
    """
    style = _normalize_hex_style(hex_style)
    out = out if out is not None else sys.stdout.buffer
    count = 0
    stream = _open_input(filename)
    try:
        blocks = _iter_hex_blocks(stream) if style else _iter_blocks(stream)
        for block in blocks:
            for sentence in encode_iter(block, words_per_group=SENTENCE_LENGTH, pad=pad):
                out.write(sentence.encode("ascii") + b"\n")
                count += 1
    finally:
        out.flush()
        if stream is not sys.stdin.buffer:
            stream.close()
    return count


def cmd_decode(
    filename: str = "-",
    *,
    pad: bool = True,
    hex_style: Optional[str] = None,
    out: Optional[BinaryIO] = None,
) -> int:
    """Decode words from a file (or stdin) and write the bytes (or hex).

    Every six-word group is decoded on its own, so with ``pad`` any group may
    carry a padding digit.

    Returns:
        The number of bytes decoded.
    """
    style = _normalize_hex_style(hex_style)
    out = out if out is not None else sys.stdout.buffer
    total = 0
    chunk_index = 0
    stream = _open_input(filename)
    try:
        for group in _iter_word_groups(stream):
            data = decode(group, padding_ok=pad)
            total += len(data)
            if style:
                _write_hex(out, data, chunk_index, style)
                chunk_index += 1
            else:
                out.write(data)
        if style:
            out.write(b"\n")
    finally:
        out.flush()
        if stream is not sys.stdin.buffer:
            stream.close()
    return total


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="sixword",
        description=(
            "Encode binary data as six-word sentences (S/Key, RFC 2289/1751) "
            "or decode them back."
        ),
        epilog=(
            "Input that is not a multiple of 8 bytes is padded by default and the "
            "last word gets a digit 1-7 recording the padding. Use -p to refuse it."
        ),
    )
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("-e", "--encode", dest="mode", action="store_const", const="encode", help="Encode bytes to words (default)")
    mode.add_argument("-d", "--decode", dest="mode", action="store_const", const="decode", help="Decode words to bytes")
    ap.set_defaults(mode="encode")

    ap.add_argument(
        "-p",
        "--strict",
        action="store_true",
        help="Disable the padding extension: encode input must be a multiple of 8 bytes and decode rejects padding digits",
    )

    hex_group = ap.add_mutually_exclusive_group()
    hex_group.add_argument(
        "-S",
        "--hex-style",
        dest="hex_style",
        metavar="STYLE",
        help=f"Hex input (encode) / output (decode) style: {', '.join(HEX_STYLES)}",
    )
    hex_group.add_argument("-H", "--hex", dest="hex_style", action="store_const", const="lower", help="Same as --hex-style lower")
    hex_group.add_argument("-f", "--fingerprint", dest="hex_style", action="store_const", const="fingerprint", help="Same as --hex-style fingerprint")

    ap.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("filename", nargs="?", default="-", help="Input file (default: - for stdin)")

    args = ap.parse_args(argv)
    pad = not args.strict
    try:
        if args.mode == "encode":
            cmd_encode(args.filename, pad=pad, hex_style=args.hex_style)
        elif args.mode == "decode":
            cmd_decode(args.filename, pad=pad, hex_style=args.hex_style)
        else:
            raise RuntimeError("Unknown mode")
    except InvalidParity as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_INVALID_PARITY)
    except UnknownWord as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_UNKNOWN_WORD)
    except InvalidWord as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_INVALID_WORD)
    except InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_INPUT_ERROR)
    except (CLIError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_CLI_ERROR)


if __name__ == "__main__":
    main()
