from __future__ import annotations
import argparse, json, sys
from .binary.errors import DecodeError
from .binary.codecs.mode import Mode
from .config import DecoderConfig, configure_logger

_MODES = {
    "numeric": Mode.NUMERIC,
    "alphanumeric": Mode.ALPHANUMERIC,
    "byte": Mode.BYTE,
    "kanji": Mode.KANJI,
}

def _input_bytes(args) -> bytes:
    from .binary.reader import _load_bytes
    if args.hex:
        return bytes.fromhex(args.input)
    return _load_bytes(args.input)

def _config(args) -> DecoderConfig:
    overrides = {"check_trailing_bits": args.strict}
    if args.assume_shift_jis:
        overrides["assume_shift_jis"] = True
    return DecoderConfig.from_environment(**overrides)

def cmd_decode(args):
    from .binary.reader import decode
    print(decode(_input_bytes(args), args.version, _config(args)))

def cmd_info(args):
    from .binary.reader import parse_payload
    payload = parse_payload(_input_bytes(args), args.version, _config(args))
    print(json.dumps(payload.model_dump(mode="json"), indent=2, ensure_ascii=False))

def cmd_encode(args):
    from .binary.writer import encode_segment
    print(encode_segment(_MODES[args.mode], args.text, args.version).hex())

def cmd_plot(args):
    from .binary.reader import parse_payload
    from .viz import plot_segments
    data = _input_bytes(args)
    plot_segments(parse_payload(data, args.version, _config(args)), total_bits=len(data) * 8)

def _add_input(sp):
    sp.add_argument("input", help="Path to a raw data-codeword file (or hex with --hex)")
    sp.add_argument("--hex", action="store_true", help="Treat INPUT as a hex string")
    sp.add_argument("--version", type=int, required=True, help="Symbol version 1..40")
    sp.add_argument("--assume-shift-jis", action="store_true", help="Read byte segments as Shift_JIS")
    sp.add_argument("--strict", action="store_true", help="Reject non-zero bits after the terminator")

def build_parser():
    p = argparse.ArgumentParser(prog="qrpayload", description="QR Code data bit stream utilities")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("decode", help="print the decoded text")
    _add_input(sp)
    sp.set_defaults(func=cmd_decode)

    sp = sub.add_parser("info", help="print the segment layout as JSON")
    _add_input(sp)
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("encode", help="print a single-segment payload as hex")
    sp.add_argument("text")
    sp.add_argument("--mode", default="byte", choices=sorted(_MODES))
    sp.add_argument("--version", type=int, required=True, help="Symbol version 1..40")
    sp.set_defaults(func=cmd_encode)

    sp = sub.add_parser("plot", help="minimal segment layout plot")
    _add_input(sp)
    sp.set_defaults(func=cmd_plot)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    configure_logger()
    try:
        ns.func(ns)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
