"""
Command line
============
    vigenere encrypt <key> <file>   encipher text from a file
    vigenere decrypt <key> <file>   decipher text from a file
    vigenere help [topic]           general help, or help for one command

`file` may be `-` to read standard input. The result goes to stdout,
or to the path given with -o/--output.

Exit status: 0 on success, 1 when the input cannot be read or contains
a symbol outside the alphabet, 2 on a usage error.
"""

import argparse
import logging
import sys
from typing import Optional

from . import __version__
from .alphabet import DEFAULT_ALPHABET
from .engine import VigenereCipher
from .errors import VigenereError
from .fingerprint import key_fingerprint

logger = logging.getLogger(__name__)

PROG = "vigenere"

DESCRIPTION = f"""\
{PROG} is an encryption and decryption tool based on the Vigenère cipher.

Usage:

    {PROG} <command> [arguments]

The commands are:

    encrypt    encipher text from a file with a specified key
    decrypt    decipher text from a file with a specified key
    help       show help for a command

Run '{PROG} help <command>' for more information on a command."""

HELP_TOPICS = {
    "encrypt": f"""\
Usage:

    {PROG} encrypt [-o OUTPUT] [-v] <key> <file>

Encipher the text in <file> with <key> and print the ciphertext.
Use '-' as <file> to read standard input.

Text and key may only contain these symbols:

    {DEFAULT_ALPHABET!r}

Trailing line breaks in the file are ignored. Any other symbol outside
the set aborts the command with exit status 1 and no output.""",

    "decrypt": f"""\
Usage:

    {PROG} decrypt [-o OUTPUT] [-v] <key> <file>

Decipher the text in <file> with <key> and print the plaintext.
Use '-' as <file> to read standard input.

The key must be the one used for encryption. Ciphertext and key may
only contain these symbols:

    {DEFAULT_ALPHABET!r}""",

    "help": f"""\
Usage:

    {PROG} help [topic]

Print general help, or help for one of: encrypt, decrypt, help.""",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-o", "--output", metavar="PATH",
                        help="Write the result to PATH instead of stdout")
    common.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress to stderr")
    common.add_argument("key", help="Key made of alphabet symbols")
    common.add_argument("file", help="Input file path, or '-' for stdin")

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.add_parser("encrypt", parents=[common],
                   help="encipher text from a file with a specified key")
    sub.add_parser("decrypt", parents=[common],
                   help="decipher text from a file with a specified key")
    help_parser = sub.add_parser("help", help="show help for a command")
    help_parser.add_argument("topic", nargs="?", choices=sorted(HELP_TOPICS))
    return parser


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_message(path: str) -> str:
    """Read the message from `path` (or stdin for '-'), minus trailing line breaks."""
    if path == "-":
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError:
            sys.exit("Error: Standard input is not valid UTF-8.")
        except OSError as e:
            sys.exit(f"Error reading input: {e}")
    else:
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{path}' not found.")
        except UnicodeDecodeError:
            sys.exit(f"Error: File '{path}' is not valid UTF-8.")
        except OSError as e:
            sys.exit(f"Error reading input: {e}")
    return text.rstrip("\r\n")


def write_result(result: str, path: Optional[str] = None):
    if path is None:
        print(result)
        return
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(result + "\n")
    except OSError as e:
        sys.exit(f"Error writing output: {e}")


def run_cipher(command: str, key: str, message: str) -> str:
    """Run `command` ("encrypt" or "decrypt") over `message` with `key`."""
    logger.info(f"{command}: key fingerprint={key_fingerprint(key)} length={len(key)}")
    vigenere = VigenereCipher.generate(DEFAULT_ALPHABET)
    if command == "encrypt":
        return vigenere.encrypt(message, key)
    return vigenere.decrypt(message, key)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()

    if not argv:
        print(DESCRIPTION)
        print()
        return 0

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_usage()
        return 2

    if args.command == "help":
        print(HELP_TOPICS[args.topic] if args.topic else DESCRIPTION)
        print()
        return 0

    configure_logging(args.verbose)
    message = read_message(args.file)
    logger.info(f"Read {len(message)} symbols from {args.file}")

    try:
        result = run_cipher(args.command, args.key, message)
    except VigenereError as e:
        sys.exit(f"{args.command.capitalize()} Error: {e}")

    write_result(result, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
