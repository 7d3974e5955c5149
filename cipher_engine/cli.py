import sys
import os
import argparse

from . import __version__
from .ciphers import CIPHER_REGISTRY
from .errors import CipherError

KEY_ENV_VAR = "CIPHER_ENGINE_KEY"
DEFAULT_METHOD = "keyword"

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

# ==========================================
#  CLI LOGIC
# ==========================================

def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 60)
    for name, cipher_cls in CIPHER_REGISTRY.items():
        print(f"  {name:<12} {cipher_cls.description}")
    print("=" * 60)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cipher-engine",
        description="Classical keyword and shift ciphers over the Latin alphabet",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {k:<12}: {v.description}" for k, v in CIPHER_REGISTRY.items())
    parser.add_argument("-m", "--method", choices=list(CIPHER_REGISTRY.keys()), default=DEFAULT_METHOD,
                        help=f"Select cipher algorithm (default: {DEFAULT_METHOD}).\n{method_help}")
    parser.add_argument("-k", "--key",
                        help=f"Cipher key (falls back to ${KEY_ENV_VAR})")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encrypt", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decrypt", action="store_true", help="Decrypt mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")

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
                source_text = f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
        except (OSError, UnicodeDecodeError) as e:
            sys.exit(f"Error reading input: {e}")
    else:
        if sys.stdin.isatty():
            print("[CIPHER] Type text below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:", file=sys.stderr)
        try:
            source_text = sys.stdin.read()
        except KeyboardInterrupt:
            sys.exit(0)
        except (OSError, UnicodeDecodeError) as e:
            sys.exit(f"Error reading input: {e}")
    # Files and terminals end with a newline that is not part of the message
    if source_text.endswith("\r\n"):
        source_text = source_text[:-2]
    elif source_text.endswith("\n"):
        source_text = source_text[:-1]
    return source_text


def main(argv=None):
    global VERBOSE

    parser = build_parser()
    args = parser.parse_args(argv)
    VERBOSE = args.verbose

    if args.list:
        list_ciphers()
        return 0

    key = args.key if args.key is not None else os.environ.get(KEY_ENV_VAR)
    if key is None:
        parser.error(f"a key is required: pass -k/--key or set ${KEY_ENV_VAR}")
    if args.key is None:
        log_info(f"Using key from ${KEY_ENV_VAR}.")
    elif KEY_ENV_VAR in os.environ:
        log_warn(f"Both --key and ${KEY_ENV_VAR} are set. Using --key.")

    # 1. BUILD CIPHER
    cipher_cls = CIPHER_REGISTRY[args.method]
    try:
        cipher = cipher_cls(key)
    except CipherError as e:
        sys.exit(f"Key Error ({args.method}): {e}")
    log_info(f"Using {cipher!r}")

    # 2. READ INPUT
    source_text = read_source(args)
    log_info(f"Read {len(source_text)} character(s).")

    # 3. TRANSFORM
    try:
        if args.encrypt:
            result = cipher.encrypt(source_text)
        else:
            result = cipher.decrypt(source_text)
    except CipherError as e:
        mode = "Encrypt" if args.encrypt else "Decrypt"
        sys.exit(f"{mode} Error ({args.method}): {e}")

    # 4. WRITE OUTPUT
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
                f.write("\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
        log_info(f"Wrote {len(result)} character(s) to {args.output}.")
    else:
        print(result)
    return 0

