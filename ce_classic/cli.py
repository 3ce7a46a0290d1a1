"""Command-line front end for the classical cipher engine."""

import sys
import argparse

from . import __version__, engine
from .engine import CIPHER_REGISTRY, CipherError, Direction, log_info, transform
from .ciphers.monoalphabetic import generate_key
from .ciphers.railfence import MAX_RAILS
from .ciphers.toyrsa import KEY_SIZES

DEFAULT_METHOD = "caesar"


def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 60)
    for name, cipher in CIPHER_REGISTRY.items():
        print(f"  {name:<18} {cipher.description}")
    print("=" * 60)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ce-classic",
        description="Classical Cipher Suite (Caesar, Vigenere, Playfair, Rail Fence, ...)",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {k:<18}: {v.description}" for k, v in CIPHER_REGISTRY.items())
    parser.add_argument("-m", "--method", choices=list(CIPHER_REGISTRY.keys()), default=DEFAULT_METHOD,
                        help=f"Select cipher algorithm (default: {DEFAULT_METHOD}).\n{method_help}")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encode", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decode", action="store_true", help="Decrypt mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")
    action_group.add_argument("-g", "--generate-key", action="store_true",
                              help="Print a random monoalphabetic substitution key")

    # Key material
    parser.add_argument("-k", "--key", metavar="KEY",
                        help="Cipher key: shift, substitution alphabet, keyword or digit permutation")
    parser.add_argument("--rails", type=int, metavar="N",
                        help=f"Rail fence rail count (default: 3, usual range 2-{MAX_RAILS})")
    parser.add_argument("--offset", type=int, metavar="N",
                        help="Rail fence starting rail (default: 0)")
    parser.add_argument("--key-size", choices=list(KEY_SIZES), metavar="SIZE",
                        help=f"Toy RSA preset key pair: {', '.join(KEY_SIZES)} (default: small)")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")
    return parser


def read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    print("[CIPHER] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:")
    try:
        return sys.stdin.read()
    except KeyboardInterrupt:
        sys.exit(0)


def main(argv=None):
    args = build_parser().parse_args(argv)
    engine.set_verbose(args.verbose)

    if args.list:
        list_ciphers()
        return 0

    if args.generate_key:
        print(generate_key())
        return 0

    source_text = read_source(args)
    if source_text.endswith("\n") and args.text is None:
        source_text = source_text[:-1]

    cipher = CIPHER_REGISTRY[args.method]
    direction = Direction.ENCRYPT if args.encode else Direction.DECRYPT

    try:
        params = cipher.make_params(args.key, rails=args.rails, offset=args.offset,
                                    key_size=args.key_size)
        log_info(f"Using {cipher.name} with {params!r}")
        result = transform(cipher.name, source_text, params, direction)
    except CipherError as e:
        if args.encode:
            sys.exit(f"Encode Error: {e}")
        sys.exit(f"Decode Error ({cipher.name}): {e}")

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
                if args.decode: f.write("\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
